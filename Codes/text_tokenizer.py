# text_tokenizer.py

import re

# ~~~~~~~~~~ Supported emoji ~~~~~~~~~~
# Emoticons block (U+1F600..U+1F64F) plus thumbs up / down and party popper.
SUPPORTED_EMOJI_CHARS = "\U0001F600-\U0001F64F\U0001F44D\U0001F44E\U0001F389"

# \w is Unicode-aware for str patterns; "_" is the one non letter/digit it lets through.
EMOJI_STRIP_RE = re.compile(rf"[^\w\s!?{SUPPORTED_EMOJI_CHARS}]|_")
PLAIN_STRIP_RE = re.compile(r"[^\w\s!?]|_")
SUPPORTED_EMOJI_RE = re.compile(f"[{SUPPORTED_EMOJI_CHARS}]")

CONTEXT_WINDOW = 2


def tokenize(text: str, keep_emoji: bool = True):

    # Lowercase, blank out everything that is not a letter, digit, whitespace,
    # "!" / "?" (or a supported emoji when keep_emoji), then split on whitespace.
    if not isinstance(text, str):
        return []
    strip_re = EMOJI_STRIP_RE if keep_emoji else PLAIN_STRIP_RE
    return strip_re.sub(" ", text.lower()).split()


def lookup_key(token: str) -> str:
    # "good!" and "good" are the same word for every table lookup
    return token.strip("!?")


def contains_supported_emoji(text) -> bool:
    if not isinstance(text, str):
        return False
    return SUPPORTED_EMOJI_RE.search(text) is not None


def punctuation_emphasis(text: str, exclamation_power: int):
    """
    Work out the per-token emphasis from "!" and "?" in the raw text.

    Returns (emphasis, exclamation_bonus, question_penalty, exclamations, questions).
    emphasis = min(exclamation_power, #"!") - (1 if #"?" > 2 else 0)
    """
    exclamations = text.count("!")
    questions = text.count("?")
    exclamation_bonus = min(exclamation_power, exclamations)
    question_penalty = 1 if questions > 2 else 0
    emphasis = exclamation_bonus - question_penalty
    return emphasis, exclamation_bonus, question_penalty, exclamations, questions


def context_window(tokens, idx, lexicon, window=CONTEXT_WINDOW):

    # Look back up to `window` tokens before idx for negations and intensifiers.
    # Nothing is consumed, so every sentiment word gets its own fresh look.
    start = max(0, idx - window)
    preceding = [lookup_key(t) for t in tokens[start:idx]]
    has_negation = any(lexicon.is_negation(t) for t in preceding)
    intensifier_count = sum(1 for t in preceding if lexicon.is_intensifier(t))
    return has_negation, intensifier_count
