# sentiment_lexicon.py

from types import MappingProxyType


class SentimentLexicon:
    """
    Small curated lexicon used by the rule-based scorer.

    Every word is simply "good" or "bad"; intensifier and negation words
    carry no sentiment themselves and only modify their neighbours.
    """

    def __init__(self):
        self.positive_words = frozenset()
        self.negative_words = frozenset()
        self.intensifier_words = frozenset()
        self.negation_words = frozenset()
        self._load_words()

    def _load_words(self):
        # --- Positive feeling words ---
        self.positive_words = frozenset({
            'love', 'like', 'great', 'awesome', 'amazing', 'good', 'happy', 'fun',
            'nice', 'cool', 'fantastic', 'excellent', 'yay', 'wow', 'delight',
            'enjoy', 'smile', 'wonderful', 'brilliant', 'sweet', 'best'
        })

        # --- Negative feeling words ---
        self.negative_words = frozenset({
            'hate', 'dislike', 'bad', 'terrible', 'awful', 'angry', 'sad', 'boring',
            'slow', 'worse', 'worst', 'annoying', 'ugly', 'mad', 'yuck', 'gross',
            'horrible', 'poor'
        })

        self.intensifier_words = frozenset({
            'very', 'so', 'really', 'super', 'extremely', 'totally'
        })

        # The tokenizer turns "don't" into "don" + "t", so contractions are
        # listed by their stem (except "can" and "won", which are real words).
        # Apostrophe spellings like "don't" would never match a token, so
        # with these stems "I don't like it" scores -1 rather than +1.
        self.negation_words = frozenset({
            'not', 'never', 'no', 'hardly', 'barely', 'cannot',
            'isn', 'aren', 'don', 'doesn', 'didn'
        })

    # ---- Public helpers -------------------------------------------------

    def polarity_of_word(self, word: str) -> int:
        """
        Return +1 if word is positive, -1 if negative, 0 if unknown.
        """
        w = word.lower()
        if w in self.positive_words:
            return 1
        if w in self.negative_words:
            return -1
        return 0

    def is_intensifier(self, word: str) -> bool:
        return word.lower() in self.intensifier_words

    def is_negation(self, word: str) -> bool:
        return word.lower() in self.negation_words

    def known_words(self):
        # everything the rule-based scorer reacts to
        return (self.positive_words | self.negative_words
                | self.intensifier_words | self.negation_words)


# Small AFINN-style word -> valence table (-4..+4) for the graded scorer.
VALENCE_TABLE = MappingProxyType({
    'love': 3, 'loved': 3, 'loves': 3, 'like': 2, 'likes': 2, 'awesome': 4,
    'amazing': 4, 'great': 3, 'good': 2, 'happy': 3, 'fun': 2, 'nice': 2,
    'cool': 2, 'fantastic': 4, 'excellent': 4, 'yay': 3, 'wow': 2, 'enjoy': 2,
    'enjoyed': 2, 'wonderful': 4, 'brilliant': 3, 'sweet': 2, 'best': 4,
    'bad': -2, 'worse': -3, 'worst': -4, 'terrible': -4, 'awful': -4,
    'angry': -3, 'sad': -2, 'boring': -2, 'slow': -1, 'annoying': -2,
    'ugly': -3, 'mad': -2, 'yuck': -3, 'gross': -3, 'horrible': -4, 'poor': -2,
    'hate': -3, 'hated': -3, 'dislike': -2, 'problem': -2, 'problems': -2,
    'okay': 1, 'fine': 1, 'neutral': 0,
})

# Emoji glyph -> valence (-3..+3). Zero-valued glyphs are recognized but
# carry no sentiment.
EMOJI_VALENCES = MappingProxyType({
    '😀': 2, '😄': 2, '😊': 2, '🙂': 1, '😍': 3, '😎': 2, '🎉': 2, '👍': 2,
    '😐': 0, '😶': 0,
    '🙁': -1, '😞': -2, '😡': -3, '😢': -2, '👎': -2,
})

# Loaded once; both scorers read it and nothing writes to it.
DEFAULT_LEXICON = SentimentLexicon()
