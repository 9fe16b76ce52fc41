# lm.py
from __future__ import annotations
from collections.abc import Iterable, Mapping
import logging

logger = logging.getLogger(__name__)

BOS = "<s>"
EOS = "</s>"


class SmoothedNGramLanguageModel:
    def __init__(
        self,
        ngram_counts: Mapping[str, int],
        vocabulary: Iterable[str],
        k: float = 0.005,
    ) -> None:
        """
        ngram_counts : precomputed counts keyed by space-joined unigram/bigram,
                       e.g. {"of": 120, "of conditions": 4}
        vocabulary   : the known words; V is its size
        k            : add-k smoothing parameter
        """
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")

        self.k = k
        self.ngram_counts: dict[str, int] = dict(ngram_counts)
        self.vocabulary: frozenset[str] = frozenset(vocabulary)
        self.V = len(self.vocabulary)   # vocabulary size
        if self.V == 0:
            raise ValueError("vocabulary must be non-empty")

        # <s> and </s> only occur inside bigrams: their context count is the
        # total of the bigrams they start or end, unless listed on their own
        self.context_counts: dict[str, int] = {BOS: 0, EOS: 0}
        for ngram, count in self.ngram_counts.items():
            first, _, second = ngram.partition(" ")
            if first == BOS and second:
                self.context_counts[BOS] += count
            if second == EOS:
                self.context_counts[EOS] += count
        for token in (BOS, EOS):
            if token in self.ngram_counts:
                self.context_counts[token] = self.ngram_counts[token]

        logger.debug("language model: %d n-grams, V=%d, k=%g",
                     len(self.ngram_counts), self.V, self.k)

    @staticmethod
    def _check_word(*words: str) -> None:
        for w in words:
            if not isinstance(w, str) or not w:
                raise ValueError(f"words must be non-empty strings, got {w!r}")

    def get_ngram_count(self, ngram: str) -> int:
        """Count of a space-joined n-gram; 0 if it was never seen."""
        self._check_word(ngram)
        return self.ngram_counts.get(ngram, 0)

    def _context_count(self, word: str) -> int:
        if word in self.context_counts:
            return self.context_counts[word]
        return self.ngram_counts.get(word, 0)

    def _smoothed(self, count: int, context_count: int) -> float:
        # add-k smoothing
        p = (count + self.k) / (context_count + self.k * self.V)
        # a bigram can outnumber its context word in hand-made count files
        return min(p, 1.0)

    def get_probability(self, word: str) -> float:
        """P(word), smoothed against its own count."""
        c = self.get_ngram_count(word)
        return self._smoothed(c, c)

    def get_probability_given_prev(self, word: str, prev_word: str) -> float:
        """P(word | prev_word)."""
        self._check_word(word, prev_word)
        c_bigram = self.ngram_counts.get(f"{prev_word} {word}", 0)
        c_ctx = self._context_count(prev_word)
        return self._smoothed(c_bigram, c_ctx)

    def get_probability_given_next(self, word: str, next_word: str) -> float:
        """P(word | next_word), i.e. the bigram read right to left."""
        self._check_word(word, next_word)
        c_bigram = self.ngram_counts.get(f"{word} {next_word}", 0)
        c_ctx = self._context_count(next_word)
        return self._smoothed(c_bigram, c_ctx)
