# sentiment_scorer.py

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from sentiment_lexicon import DEFAULT_LEXICON, EMOJI_VALENCES, VALENCE_TABLE
from text_tokenizer import context_window, lookup_key, punctuation_emphasis, tokenize

# ~~~~~~~~~~ Labels / icons ~~~~~~~~~~
POSITIVE = "Positive"
NEUTRAL = "Neutral"
NEGATIVE = "Negative"

LABEL_ICONS = {
    POSITIVE: "😄",
    NEUTRAL: "😐",
    NEGATIVE: "🙁",
}

POSITIVE_THRESHOLD = 2
NEGATIVE_THRESHOLD = -2

EMPTY_TEXT_REASON = "No text yet."


@dataclass(frozen=True)
class ScoringOptions:
    """
    Tuning knobs for one scoring call.

    intensifier_boost_max: cap on the boost intensifiers can add to a word
    exclamation_power: cap on the boost "!" marks can add to each word
    flip_on_negation: invert a sentiment word preceded by a negation
    """
    intensifier_boost_max: int = 2
    exclamation_power: int = 1
    flip_on_negation: bool = True

    def __post_init__(self) -> None:
        # caps are non-negative integers
        object.__setattr__(self, 'intensifier_boost_max', max(0, int(self.intensifier_boost_max)))
        object.__setattr__(self, 'exclamation_power', max(0, int(self.exclamation_power)))
        object.__setattr__(self, 'flip_on_negation', bool(self.flip_on_negation))

    @classmethod
    def from_mapping(cls, values: Mapping) -> "ScoringOptions":
        """Merge a partial mapping over the defaults; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known and v is not None})

    def is_default(self) -> bool:
        return self == DEFAULT_SCORING_OPTIONS

    def to_dict(self) -> dict[str, Any]:
        return {
            "intensifier_boost_max": self.intensifier_boost_max,
            "exclamation_power": self.exclamation_power,
            "flip_on_negation": self.flip_on_negation,
        }


DEFAULT_SCORING_OPTIONS = ScoringOptions()


@dataclass(frozen=True)
class TokenAnnotation:
    token: str
    polarity: str  # "positive" / "negative" / "neutral"
    contribution: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "polarity": self.polarity,
            "contribution": self.contribution,
        }


@dataclass(frozen=True)
class ScoreResult:
    """
    Outcome of one scoring call.

    score is the sum of annotation contributions. emphasis is the
    punctuation scalar that was already folded into every sentiment word's
    contribution; it is kept for display only.
    """
    score: int
    label: str
    icon: str
    annotations: tuple[TokenAnnotation, ...] = field(default_factory=tuple)
    explanations: tuple[str, ...] = field(default_factory=tuple)
    emphasis: int = 0

    @property
    def tokens(self) -> list[str]:
        return [a.token for a in self.annotations]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "icon": self.icon,
            "annotations": [a.to_dict() for a in self.annotations],
            "explanations": list(self.explanations),
            "emphasis": self.emphasis,
        }


# ~~~~~~~~~~ Helpers ~~~~~~~~~~

def resolve_options(options=None) -> ScoringOptions:
    # Merge caller options with defaults once, at the call boundary.
    if options is None:
        return DEFAULT_SCORING_OPTIONS
    if isinstance(options, ScoringOptions):
        return options
    if isinstance(options, Mapping):
        return ScoringOptions.from_mapping(options)
    raise TypeError(f"Unsupported options type: {type(options).__name__}")


def label_for_score(score: int):
    """
    Map a total score to (label, icon).
    score >= 2 -> Positive, score <= -2 -> Negative, anything else Neutral.
    """
    if score >= POSITIVE_THRESHOLD:
        label = POSITIVE
    elif score <= NEGATIVE_THRESHOLD:
        label = NEGATIVE
    else:
        label = NEUTRAL
    return label, LABEL_ICONS[label]


def polarity_of_value(value: int) -> str:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return "neutral"


def signed(value: int) -> str:
    return f"+{value}" if value > 0 else str(value)


def empty_result() -> ScoreResult:
    return ScoreResult(
        score=0,
        label=NEUTRAL,
        icon=LABEL_ICONS[NEUTRAL],
        annotations=(),
        explanations=(EMPTY_TEXT_REASON,),
        emphasis=0,
    )


def _describe_contribution(word, flipped, negation_ignored, intensifier_count, value):
    parts = []
    if flipped:
        parts.append("Negation flips")
    elif negation_ignored:
        parts.append("Negation ignored for")
    if intensifier_count:
        parts.append(f"{intensifier_count} intensifier(s) boost")
    parts.append(f"“{word}” → {signed(value)}")
    return " ".join(parts)


def _score_tokens(text, options, keep_emoji, base_value, lexicon):

    # Shared scoring loop for both strategies. `base_value(key)` returns the
    # word's own sentiment, or None when the word carries none.
    if not isinstance(text, str) or not text.strip():
        return empty_result()

    opts = resolve_options(options)
    tokens = tokenize(text, keep_emoji=keep_emoji)

    explanations = []
    emphasis, bonus, penalty, exclamations, questions = punctuation_emphasis(
        text, opts.exclamation_power
    )
    if exclamations > 0:
        explanations.append(f"Exclamation mark adds excitement (+{bonus})")
    if questions > 2:
        explanations.append(f"Many question marks reduce certainty (-{penalty})")

    annotations = []
    for i, token in enumerate(tokens):
        key = lookup_key(token)

        # 1) emoji carry their own valence, no context window
        if keep_emoji and EMOJI_VALENCES.get(key, 0) != 0:
            valence = EMOJI_VALENCES[key]
            annotations.append(TokenAnnotation(token, polarity_of_value(valence), valence))
            explanations.append(f"Emoji {key} contributes {signed(valence)}")
            continue

        # 2) modifiers score nothing themselves
        if lexicon.is_intensifier(key):
            annotations.append(TokenAnnotation(token, "neutral", 0))
            explanations.append(f"Intensifier “{key}” makes nearby feeling stronger")
            continue
        if lexicon.is_negation(key):
            annotations.append(TokenAnnotation(token, "neutral", 0))
            explanations.append(f"Negation “{key}” flips the next feeling word")
            continue

        # 3) the word's own sentiment
        local = base_value(key)
        if local is None:
            annotations.append(TokenAnnotation(token, "neutral", 0))
            continue

        # 4) apply the look-back window and punctuation emphasis
        has_negation, intensifier_count = context_window(tokens, i, lexicon)
        flipped = has_negation and opts.flip_on_negation
        value = -local if flipped else local
        value += min(opts.intensifier_boost_max, intensifier_count)
        value += emphasis

        annotations.append(TokenAnnotation(token, polarity_of_value(value), value))
        explanations.append(_describe_contribution(
            key, flipped, has_negation and not flipped, intensifier_count, value
        ))

    score = sum(a.contribution for a in annotations)
    label, icon = label_for_score(score)
    return ScoreResult(
        score=score,
        label=label,
        icon=icon,
        annotations=tuple(annotations),
        explanations=tuple(explanations),
        emphasis=emphasis,
    )


# ~~~~~~~~~~ Public scorers ~~~~~~~~~~

def score_with_lexicon(text, options=None, lexicon=DEFAULT_LEXICON) -> ScoreResult:
    """
    Rule-based scorer: every lexicon word is simply +1 or -1 before
    negation, intensifiers and punctuation are applied. Emoji are scored
    from the emoji table.
    """
    # words outside both polarity sets carry nothing
    return _score_tokens(
        text, options, True, lambda key: lexicon.polarity_of_word(key) or None, lexicon
    )


def score_with_valence_table(text, options=None, lexicon=DEFAULT_LEXICON,
                             valence_table=VALENCE_TABLE) -> ScoreResult:
    """
    Graded scorer: the word's value comes from the valence table instead of
    the polarity sets. Emoji are stripped, not scored.

    Any word present in the table goes through negation, intensifiers and
    punctuation, even one valued 0 ("so neutral!" scores +2).
    """
    return _score_tokens(text, options, False, valence_table.get, lexicon)


STRATEGIES = {
    "rule": score_with_lexicon,
    "valence": score_with_valence_table,
}


def compare_strategies(text, options: Optional[ScoringOptions] = None):
    # Run both scorers on the same snapshot of options (side-by-side view).
    opts = resolve_options(options)
    return score_with_lexicon(text, opts), score_with_valence_table(text, opts)


def narration_text(result: ScoreResult) -> str:
    return f"I think this message is {result.label}, with score {result.score}."
