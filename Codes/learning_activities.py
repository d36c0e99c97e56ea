# learning_activities.py

from dataclasses import dataclass
from typing import Optional

from sentiment_scorer import NEGATIVE, POSITIVE, ScoreResult, score_with_lexicon

# ~~~~~~~~~~ Exercises ~~~~~~~~~~
# Each exercise drops the learner's word into a template sentence and scores
# it with the rule-based scorer.
EXERCISE_TEMPLATES = {
    1: "This pizza is {word}!",
    2: "I am {word} about the delay.",
    3: "The weather is {word} today.",
}

EXERCISE_PROMPTS = {
    1: "Pick a word that makes the pizza sentence Positive.",
    2: "Pick word(s) that make the delay sentence Negative (try a negation!).",
    3: "Try any word (or 'not' + a word) and see what happens.",
}


@dataclass(frozen=True)
class ExerciseFeedback:
    exercise: int
    sentence: str
    result: ScoreResult
    passed: bool
    message: str
    hint: Optional[str] = None


def _hint_for(word, result, expander):
    # Only hint when nothing the learner typed carried any sentiment.
    if expander is None:
        return None
    sentence_words = set(word.lower().split())
    if any(a.contribution != 0 for a in result.annotations
           if a.token.strip("!?.") in sentence_words):
        return None

    for w in word.split():
        found = expander.suggestions(w)
        if found:
            return f"“{w}” isn't in the lexicon. Did you mean: {', '.join(found)}?"
    return None


def check_exercise(exercise: int, word: str, options=None, store=None, expander=None):
    """
    Score the learner's word inside the exercise template.

    Exercise 1 passes on Positive, exercise 2 on Negative (awarding the
    negation badge), exercise 3 is free play and always passes.
    """
    if exercise not in EXERCISE_TEMPLATES:
        raise ValueError(f"Unknown exercise: {exercise}")

    word = word if isinstance(word, str) else ""
    sentence = EXERCISE_TEMPLATES[exercise].format(word=word)
    result = score_with_lexicon(sentence, options)

    if exercise == 1:
        passed = result.label == POSITIVE
        message = "Correct! Positive vibe! 😄" if passed else "Try again. Aim for Positive."
    elif exercise == 2:
        passed = result.label == NEGATIVE
        message = "Nice! Negation flipped it. 🙃" if passed else "Not quite. Make it Negative."
        if passed and store is not None:
            store.award("negation-ninja")
    else:
        passed = True
        message = (f"Result: {result.label} (score {result.score}). "
                   "Notice how “not” flips the feeling!")

    hint = None if passed else _hint_for(word, result, expander)
    return ExerciseFeedback(exercise, sentence, result, passed, message, hint)


# ~~~~~~~~~~ Quiz ~~~~~~~~~~

QUIZ_QUESTIONS = [
    {
        "id": "q1",
        "question": "Which word would the analyzer score as positive?",
        "choices": ["awesome", "boring", "table"],
        "answer": "awesome",
    },
    {
        "id": "q2",
        "question": "What does a negation like “not” do to the next feeling word?",
        "choices": ["flip", "nothing", "double"],
        "answer": "flip",
    },
    {
        "id": "q3",
        "question": "What does an intensifier like “very” do?",
        "choices": ["stronger", "weaker", "flip"],
        "answer": "stronger",
    },
]

QUIZ_FACES = ["😿", "😺", "😸", "😻"]


@dataclass(frozen=True)
class QuizResult:
    score: int
    total: int
    face: str
    message: str

    @property
    def perfect(self) -> bool:
        return self.score == self.total


def grade_quiz(answers, store=None, celebrate=None) -> QuizResult:
    """
    Grade quiz answers given as {"q1": ..., "q2": ..., "q3": ...} or as a
    sequence in question order. Missing answers count as wrong.

    A perfect score awards the quiz badge and calls `celebrate()` if given.
    """
    if not isinstance(answers, dict):
        answers = {q["id"]: a for q, a in zip(QUIZ_QUESTIONS, answers or [])}

    score = 0
    for q in QUIZ_QUESTIONS:
        given = answers.get(q["id"])
        if isinstance(given, str) and given.strip().lower() == q["answer"]:
            score += 1

    total = len(QUIZ_QUESTIONS)
    face = QUIZ_FACES[score]
    verdict = "Excellent!" if score == total else "Keep practicing!"
    result = QuizResult(score, total, face, f"You scored {score}/{total} {face}. {verdict}")

    if result.perfect:
        if store is not None:
            store.award("quiz-whiz")
        if celebrate is not None:
            celebrate()
    return result
