"""
Tests for the best-effort achievement store.
"""

import json

import achievement_store
from achievement_store import BADGES, EMPTY_MESSAGE, STORAGE_KEY, Achievement, AchievementStore


# ============================================================
# LOADING TESTS
# ============================================================

class TestLoading:
    """A bad or missing file always degrades to an empty list."""

    def test_missing_file_is_empty(self, store):
        assert store.badges() == []
        assert store.last_error is None
        assert store.render_badges() == [EMPTY_MESSAGE]

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "badges.json"
        path.write_text("{not json", encoding="utf-8")

        store = AchievementStore(path)
        assert store.badges() == []
        assert store.last_error is not None

    def test_non_list_value_is_empty(self, tmp_path):
        path = tmp_path / "badges.json"
        path.write_text(json.dumps({STORAGE_KEY: "oops"}), encoding="utf-8")

        assert AchievementStore(path).badges() == []

    def test_malformed_and_duplicate_entries_are_skipped(self, tmp_path):
        path = tmp_path / "badges.json"
        path.write_text(json.dumps({STORAGE_KEY: [
            {"id": "quiz-whiz", "name": "Quiz Whiz", "icon": "🏅"},
            "garbage",
            {"name": "no id"},
            {"id": "quiz-whiz", "name": "Again", "icon": "x"},
        ]}), encoding="utf-8")

        store = AchievementStore(path)
        assert store.badges() == [Achievement("quiz-whiz", "Quiz Whiz", "🏅")]

    def test_display_name_key_is_accepted(self, tmp_path):
        path = tmp_path / "badges.json"
        path.write_text(json.dumps({STORAGE_KEY: [
            {"id": "quiz-whiz", "displayName": "Quiz Whiz", "icon": "🏅"},
        ]}), encoding="utf-8")

        assert AchievementStore(path).render_badges() == ["🏅 Quiz Whiz"]

    def test_unreadable_storage_is_empty(self, badges_path, monkeypatch):
        def denied(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(achievement_store, "open", denied, raising=False)

        store = AchievementStore(badges_path)
        assert store.badges() == []
        assert isinstance(store.last_error, PermissionError)

        assert store.award("first-analysis") is True
        assert store.has("first-analysis")


# ============================================================
# AWARD TESTS
# ============================================================

class TestAwarding:
    """Tests for award_once() / award()."""

    def test_award_once_deduplicates(self, store):
        assert store.award_once("first-analysis", "First Analyzer", "🕵️") is True
        assert store.award_once("first-analysis", "Other Name", "x") is False
        assert [b.id for b in store.badges()] == ["first-analysis"]

    def test_awards_persist_in_order(self, store, badges_path):
        store.award("first-analysis")
        store.award("quiz-whiz")

        reloaded = AchievementStore(badges_path)
        assert [b.id for b in reloaded.badges()] == ["first-analysis", "quiz-whiz"]
        assert reloaded.has("quiz-whiz")
        assert reloaded.render_badges() == ["🕵️ First Analyzer", "🏅 Quiz Whiz"]

    def test_named_badges(self):
        assert set(BADGES) == {
            "first-analysis", "emoji-explorer", "tuning-tinkerer",
            "negation-ninja", "quiz-whiz",
        }

    def test_other_keys_are_preserved(self, tmp_path):
        path = tmp_path / "badges.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        AchievementStore(path).award("emoji-explorer")

        doc = json.loads(path.read_text(encoding="utf-8"))
        assert doc["theme"] == "dark"
        assert doc[STORAGE_KEY] == [{"id": "emoji-explorer", "name": "Emoji Explorer", "icon": "🎭"}]

    def test_write_failure_keeps_session_badges(self, tmp_path):
        # a directory can be neither read nor written as the JSON file
        store = AchievementStore(tmp_path)

        assert store.award("tuning-tinkerer") is True
        assert store.has("tuning-tinkerer")
        assert store.last_error is not None
        assert store.award("tuning-tinkerer") is False
        assert [b.id for b in store.badges()] == ["tuning-tinkerer"]

    def test_badges_returns_a_copy(self, store):
        store.award("quiz-whiz")
        store.badges().clear()
        assert store.has("quiz-whiz")
