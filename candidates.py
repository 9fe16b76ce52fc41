# candidates.py
from __future__ import annotations
from collections.abc import Iterable
from functools import lru_cache
import logging

from pybktree import BKTree
import Levenshtein

from edits import dl_distance

logger = logging.getLogger(__name__)


class CandidateGenerator:
    def __init__(
        self,
        vocabulary: Iterable[str],
        max_edit_dist: int = 1,
        cache_size: int = 4096,
    ) -> None:
        """
        vocabulary    : correction targets
        max_edit_dist : maximum Damerau-Levenshtein distance for candidates
        cache_size    : how many words' candidate sets to remember
        """
        self.vocab = sorted(set(vocabulary))
        self.max_edit = max_edit_dist

        # Levenshtein is a true metric (the BK-tree needs one); a transposition
        # costs it 2, so searching at 2 * max_edit finds every DL match.
        self.bktree = BKTree(Levenshtein.distance, self.vocab)
        self._lookup = lru_cache(maxsize=cache_size)(self._find)

    def _find(self, word: str) -> frozenset[str]:
        matches = self.bktree.find(word, 2 * self.max_edit)
        cands = {w for _, w in matches if dl_distance(word, w) <= self.max_edit}
        cands.add(word)
        return frozenset(cands)

    def similar_words(self, word: str) -> frozenset[str]:
        """All vocabulary words within max_edit of `word`, plus `word` itself."""
        return self._lookup(word)

    def cache_info(self):
        return self._lookup.cache_info()
