# channel.py
from __future__ import annotations
from collections.abc import Mapping
import logging

from edits import get_correction

logger = logging.getLogger(__name__)


class ConfusionMatrix:
    """
    Error (channel) model: how often a typist produced `bad` when they meant
    `good`, e.g. the key "c|ct" counts deletions of t after c.
    """

    def __init__(self, confusion_counts: Mapping[str, int]) -> None:
        self.confusion_counts: dict[str, int] = dict(confusion_counts)

        # total count over all patterns
        self.total = sum(self.confusion_counts.values()) or 1

        logger.debug("confusion matrix: %d patterns, %d events",
                     len(self.confusion_counts), self.total)

    def get_confusion_count(self, bad: str, good: str) -> int:
        """Count for the pair bad|good; 0 if it was never observed."""
        return self.confusion_counts.get(f"{bad}|{good}", 0)

    def get_probability_correction(self, original_word: str, corrected_word: str) -> float:
        """
        P(original_word typed | corrected_word meant), from the single edit
        between the two. Unseen edits count once so nothing has probability 0.
        """
        if not original_word or not corrected_word:
            raise ValueError("words must be non-empty")

        edit = get_correction(original_word, corrected_word)
        count = self.confusion_counts.get(edit.key) or 1
        return count / self.total
