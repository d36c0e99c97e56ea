# fuzzy_term_expander.py

from fuzzywuzzy import process, fuzz
from nltk.stem import PorterStemmer

from sentiment_lexicon import DEFAULT_LEXICON, VALENCE_TABLE

stemmer = PorterStemmer()


class FuzzyTermExpander:

    # Vocabulary of every word either scorer knows, used to hint at close
    # matches when a learner types a word the lexicon has never seen
    # ("awsome" -> "awesome", "loving" -> "love").

    def __init__(self, lexicon=DEFAULT_LEXICON, valence_table=VALENCE_TABLE, min_len=3):
        self.lexicon = lexicon
        self.valence_table = valence_table
        self.min_len = min_len
        self.vocab = []
        self.stems = {}
        self._build_vocab()

    def _build_vocab(self):
        words = set(self.lexicon.positive_words) | set(self.lexicon.negative_words)
        words |= {w for w, v in self.valence_table.items() if v != 0}
        # really short words ("so", "no") only produce noisy matches
        self.vocab = sorted(w for w in words if len(w) >= self.min_len)

        for w in self.vocab:
            self.stems.setdefault(stemmer.stem(w), w)

    def is_known(self, term: str) -> bool:
        return term.lower() in self.vocab

    def expand(self, term: str, threshold=80, limit=5):

        # Return known words similar to term, best first. 80 keeps one-letter
        # typos and drops most unrelated words.
        if not self.vocab or not term:
            return []

        matches = process.extract(term.lower(), self.vocab, scorer=fuzz.ratio, limit=limit)
        return [w for (w, score) in matches if score >= threshold and w != term.lower()]

    def stem_match(self, term: str):
        """
        Return a known word sharing term's Porter stem, or None.
        """
        if not term:
            return None
        match = self.stems.get(stemmer.stem(term.lower()))
        if match == term.lower():
            return None
        return match

    def suggestions(self, term: str, threshold=80, limit=3):
        # stem match first, then fuzzy matches, no duplicates
        found = []
        stem_hit = self.stem_match(term)
        if stem_hit:
            found.append(stem_hit)
        for w in self.expand(term, threshold=threshold, limit=limit):
            if w not in found:
                found.append(w)
        return found[:limit]
