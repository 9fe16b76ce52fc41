# spell.py
from __future__ import annotations
import logging
import math
from collections.abc import Mapping, Sequence
from typing import Iterator

from candidates import CandidateGenerator
from channel import ConfusionMatrix
from lm import BOS, EOS, SmoothedNGramLanguageModel as BaseLM

logger = logging.getLogger(__name__)

Phrase = tuple[str, ...]


class SpellCorrector:
    def __init__(
        self,
        lm: BaseLM,
        confusion: ConfusionMatrix,
        lambda_: float = 1.0,
        no_error: float = 0.90,
        max_corrections: int = 2,
        sentence_boundaries: bool = False,
        candidates: CandidateGenerator | None = None,
    ) -> None:
        """
        lm                  : bigram language model over the vocabulary
        confusion           : channel model built from the confusion matrix
        lambda_             : exponent on the channel probability of a correction
        no_error            : probability that a typed word is what was meant
        max_corrections     : how many words of a phrase may be replaced
        sentence_boundaries : score the first/last word against <s> and </s>
        candidates          : candidate generator; built from lm.vocabulary if omitted
        """
        if not 0.0 < no_error <= 1.0:
            raise ValueError(f"no_error must be in (0, 1], got {no_error}")
        if lambda_ < 0:
            raise ValueError(f"lambda_ must be >= 0, got {lambda_}")
        if max_corrections < 0:
            raise ValueError(f"max_corrections must be >= 0, got {max_corrections}")

        self.lm = lm
        self.confusion = confusion
        self.lambda_ = lambda_
        self.no_error = no_error
        self.max_corrections = max_corrections
        self.sentence_boundaries = sentence_boundaries
        self.candidates = candidates or CandidateGenerator(lm.vocabulary)

    def get_possible_phrases(
        self,
        words: Sequence[str],
        similar_words: Mapping[str, frozenset[str]],
        corrections_left: int,
        prev_was_correction: bool = False,
    ) -> Iterator[Phrase]:
        """
        Yield every phrase reachable from `words` by replacing at most
        `corrections_left` words, never two neighbours. The unchanged phrase
        always comes first.
        """
        if not words:
            yield ()
            return

        first, rest = words[0], words[1:]
        # identity first, then the rest alphabetically
        options = [first] + sorted(similar_words[first] - {first})
        for cand in options:
            if cand == first:
                left, corrected = corrections_left, False
            elif corrections_left > 0 and not prev_was_correction:
                left, corrected = corrections_left - 1, True
            else:
                continue
            for tail in self.get_possible_phrases(rest, similar_words, left, corrected):
                yield (cand,) + tail

    def _log_channel(self, original: str, word: str) -> float:
        if word == original:
            return math.log(self.no_error)
        p_edit = self.confusion.get_probability_correction(original, word)
        return math.log(self.lm.get_probability(word)) + self.lambda_ * math.log(p_edit)

    def score_phrase(self, phrase: Sequence[str], original: Sequence[str]) -> float:
        """
        Log-probability of `phrase` having been typed as `original`:
        sum over positions of log(channel * P(w | prev) * P(w | next)).
        """
        if len(phrase) != len(original):
            raise ValueError("phrase and original must have the same length")

        score = 0.0
        last = len(phrase) - 1
        for i, word in enumerate(phrase):
            if i > 0:
                prev = self.lm.get_probability_given_prev(word, phrase[i - 1])
            elif self.sentence_boundaries:
                prev = self.lm.get_probability_given_prev(word, BOS)
            else:
                prev = 1.0

            if i < last:
                nxt = self.lm.get_probability_given_next(word, phrase[i + 1])
            elif self.sentence_boundaries:
                nxt = self.lm.get_probability_given_next(word, EOS)
            else:
                nxt = 1.0

            # log(channel * prev * next), summed term by term to avoid underflow
            score += self._log_channel(original[i], word) + math.log(prev) + math.log(nxt)
        return score

    def correct(self, phrase: str) -> str:
        """
        Most probable intended phrase for `phrase`:
          1. split on whitespace, look up candidates once per distinct word
          2. enumerate phrases with up to max_corrections non-adjacent changes
          3. keep the highest scoring one (first one wins ties)
        """
        if not isinstance(phrase, str) or not phrase.strip():
            raise ValueError("phrase must be non-empty")

        words = tuple(phrase.split())
        similar = {w: self.candidates.similar_words(w) for w in set(words)}
        for w, cands in similar.items():
            logger.debug("%d candidates for %r", len(cands), w)

        best: Phrase | None = None
        best_score = -math.inf
        n_phrases = 0
        for cand in self.get_possible_phrases(words, similar, self.max_corrections):
            n_phrases += 1
            score = self.score_phrase(cand, words)
            if score > best_score:
                best, best_score = cand, score

        logger.debug("scored %d possible phrases", n_phrases)
        if best is None:
            return phrase.strip()

        logger.debug("best phrase %r (log p = %.4f)", best, best_score)
        return " ".join(best).strip()
