"""
Tests for the exercises and the quiz.
"""

import pytest

from fuzzy_term_expander import FuzzyTermExpander
from learning_activities import QUIZ_QUESTIONS, check_exercise, grade_quiz


@pytest.fixture(scope="module")
def expander():
    return FuzzyTermExpander()


# ============================================================
# EXERCISE TESTS
# ============================================================

class TestExercises:
    """Tests for check_exercise()."""

    def test_exercise_one_passes_on_positive(self):
        feedback = check_exercise(1, "awesome")

        assert feedback.sentence == "This pizza is awesome!"
        assert feedback.result.score == 2
        assert feedback.passed
        assert feedback.message == "Correct! Positive vibe! 😄"
        assert feedback.hint is None

    def test_exercise_one_fails_on_neutral(self):
        feedback = check_exercise(1, "table")

        assert not feedback.passed
        assert feedback.message == "Try again. Aim for Positive."

    def test_exercise_one_hint_for_typo(self, expander):
        feedback = check_exercise(1, "awsome", expander=expander)

        assert not feedback.passed
        assert "awesome" in feedback.hint

    def test_no_hint_when_word_scored(self, expander):
        feedback = check_exercise(2, "not happy", expander=expander)

        assert feedback.result.score == -1
        assert not feedback.passed
        assert feedback.hint is None

    def test_exercise_two_awards_badge(self, store):
        feedback = check_exercise(2, "angry and sad", store=store)

        assert feedback.sentence == "I am angry and sad about the delay."
        assert feedback.result.label == "Negative"
        assert feedback.passed
        assert feedback.message == "Nice! Negation flipped it. 🙃"
        assert store.has("negation-ninja")

    def test_exercise_two_failure_awards_nothing(self, store):
        feedback = check_exercise(2, "not happy", store=store)

        assert feedback.message == "Not quite. Make it Negative."
        assert not store.has("negation-ninja")

    def test_exercise_three_reports_result(self):
        feedback = check_exercise(3, "not good")

        assert feedback.passed
        assert feedback.message.startswith("Result: Neutral (score -1).")

    def test_exercise_respects_options(self):
        feedback = check_exercise(3, "not good", {"flip_on_negation": False})
        assert feedback.result.score == 1

    def test_non_string_word_is_blank(self):
        feedback = check_exercise(1, None)
        assert feedback.sentence == "This pizza is !"

    def test_unknown_exercise(self):
        with pytest.raises(ValueError):
            check_exercise(9, "good")


# ============================================================
# QUIZ TESTS
# ============================================================

class TestQuiz:
    """Tests for grade_quiz()."""

    def test_perfect_score_awards_and_celebrates(self, store):
        calls = []
        answers = {q["id"]: q["answer"] for q in QUIZ_QUESTIONS}

        result = grade_quiz(answers, store=store, celebrate=lambda: calls.append(1))

        assert (result.score, result.total, result.face) == (3, 3, "😻")
        assert result.perfect
        assert result.message == "You scored 3/3 😻. Excellent!"
        assert store.has("quiz-whiz")
        assert calls == [1]

    def test_answers_in_order_and_case_insensitive(self):
        result = grade_quiz([" Awesome ", "nothing", "STRONGER"])

        assert result.score == 2
        assert result.face == "😸"
        assert result.message == "You scored 2/3 😸. Keep practicing!"

    def test_missing_answers_count_as_wrong(self, store):
        calls = []
        result = grade_quiz({}, store=store, celebrate=lambda: calls.append(1))

        assert result.score == 0
        assert result.face == "😿"
        assert not store.has("quiz-whiz")
        assert calls == []

    def test_none_answers(self):
        assert grade_quiz(None).score == 0
