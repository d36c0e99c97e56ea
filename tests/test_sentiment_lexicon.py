"""
Tests for the static lexicon, valence and emoji tables.
"""

import pytest

from sentiment_lexicon import (
    DEFAULT_LEXICON,
    EMOJI_VALENCES,
    VALENCE_TABLE,
    SentimentLexicon,
)
from text_tokenizer import contains_supported_emoji, tokenize


class TestSentimentLexicon:
    """Tests for SentimentLexicon."""

    def test_positive_and_negative_sets_are_disjoint(self):
        assert not (DEFAULT_LEXICON.positive_words & DEFAULT_LEXICON.negative_words)

    def test_modifier_sets_carry_no_sentiment(self):
        modifiers = DEFAULT_LEXICON.intensifier_words | DEFAULT_LEXICON.negation_words
        for word in modifiers:
            assert DEFAULT_LEXICON.polarity_of_word(word) == 0

    def test_polarity_of_word(self):
        assert DEFAULT_LEXICON.polarity_of_word("GREAT") == 1
        assert DEFAULT_LEXICON.polarity_of_word("awful") == -1
        assert DEFAULT_LEXICON.polarity_of_word("table") == 0

    def test_modifier_checks(self):
        assert DEFAULT_LEXICON.is_intensifier("Really")
        assert DEFAULT_LEXICON.is_negation("never")
        assert not DEFAULT_LEXICON.is_negation("can")

    def test_sets_are_immutable(self):
        assert isinstance(DEFAULT_LEXICON.positive_words, frozenset)
        assert isinstance(DEFAULT_LEXICON.negation_words, frozenset)

    def test_every_word_survives_tokenization(self):
        for word in DEFAULT_LEXICON.known_words():
            assert tokenize(word) == [word]

    def test_fresh_instance_matches_default(self):
        other = SentimentLexicon()
        assert other.known_words() == DEFAULT_LEXICON.known_words()


class TestValueTables:
    """Tests for VALENCE_TABLE and EMOJI_VALENCES."""

    def test_valence_range(self):
        assert all(-4 <= v <= 4 for v in VALENCE_TABLE.values())

    def test_emoji_range(self):
        assert all(-3 <= v <= 3 for v in EMOJI_VALENCES.values())

    def test_every_table_emoji_is_supported(self):
        for glyph in EMOJI_VALENCES:
            assert contains_supported_emoji(glyph)
            assert tokenize(glyph) == [glyph]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            VALENCE_TABLE["good"] = 10
        with pytest.raises(TypeError):
            EMOJI_VALENCES["😀"] = 0

    def test_valence_signs_agree_with_lexicon(self):
        for word, value in VALENCE_TABLE.items():
            polarity = DEFAULT_LEXICON.polarity_of_word(word)
            if polarity and value:
                assert (polarity > 0) == (value > 0)
