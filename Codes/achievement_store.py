# achievement_store.py

import json
from dataclasses import dataclass
from pathlib import Path

STORAGE_KEY = "sentiment_badges"
EMPTY_MESSAGE = "No badges yet. Try the analyzer, exercises, and quiz!"


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    icon: str

    def to_dict(self):
        return {"id": self.id, "name": self.name, "icon": self.icon}


# Named triggers the playground can award.
BADGES = {
    "first-analysis": Achievement("first-analysis", "First Analyzer", "🕵️"),
    "emoji-explorer": Achievement("emoji-explorer", "Emoji Explorer", "🎭"),
    "tuning-tinkerer": Achievement("tuning-tinkerer", "Tuning Tinkerer", "🛠️"),
    "negation-ninja": Achievement("negation-ninja", "Negation Ninja", "🥷"),
    "quiz-whiz": Achievement("quiz-whiz", "Quiz Whiz", "🏅"),
}


class AchievementStore:
    """
    Append-only badge list kept under one key of a small JSON file.

    Storage is best-effort: a missing or corrupt file loads as an empty
    list, and a failed write leaves the in-memory list as it was, so the
    current session keeps every badge it has earned.

    Records are stored as {"id", "name", "icon"}; "name" is the display
    name, and a "displayName" key is also accepted when loading.
    """

    def __init__(self, path, key=STORAGE_KEY):
        self.path = Path(path)
        self.key = key
        self.last_error = None
        self._badges = self._load()

    def _read_document(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                doc = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            self.last_error = exc
            return {}
        return doc if isinstance(doc, dict) else {}

    def _load(self):
        raw = self._read_document().get(self.key)
        if not isinstance(raw, list):
            return []

        badges = []
        seen = set()
        for entry in raw:
            # skip anything that doesn't look like a badge record
            if not isinstance(entry, dict):
                continue
            badge_id = entry.get("id")
            if not isinstance(badge_id, str) or badge_id in seen:
                continue
            seen.add(badge_id)
            badges.append(Achievement(
                badge_id,
                str(entry.get("name", entry.get("displayName", badge_id))),
                str(entry.get("icon", "")),
            ))
        return badges

    def _save(self):
        doc = self._read_document()
        doc[self.key] = [b.to_dict() for b in self._badges]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as exc:
            self.last_error = exc
            return False
        return True

    # ---- Public helpers -------------------------------------------------

    def badges(self):
        return list(self._badges)

    def has(self, badge_id: str) -> bool:
        return any(b.id == badge_id for b in self._badges)

    def award_once(self, badge_id: str, name: str, icon: str) -> bool:
        """
        Record a badge unless one with the same id exists.
        Returns True only when the badge is new.
        """
        if self.has(badge_id):
            return False
        self._badges.append(Achievement(badge_id, name, icon))
        self._save()
        return True

    def award(self, badge_id: str) -> bool:
        # award one of the named BADGES by id
        badge = BADGES[badge_id]
        return self.award_once(badge.id, badge.name, badge.icon)

    def render_badges(self):
        if not self._badges:
            return [EMPTY_MESSAGE]
        return [f"{b.icon} {b.name}" for b in self._badges]
