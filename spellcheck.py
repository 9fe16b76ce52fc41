# spellcheck.py
from __future__ import annotations
import argparse
import logging
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

from channel import ConfusionMatrix
from corpus import (
    CNTFILE_LOC,
    CONFUSION_LOC,
    VOCFILE_LOC,
    LoadError,
    read_confusion_counts,
    read_ngram_counts,
    read_vocabulary,
)
from lm import SmoothedNGramLanguageModel
from spell import SpellCorrector

logger = logging.getLogger(__name__)


def build_corrector(args: argparse.Namespace) -> SpellCorrector:
    """Load the three data files and wire up the models."""
    lm = SmoothedNGramLanguageModel(
        read_ngram_counts(args.ngrams),
        read_vocabulary(args.vocabulary),
        k=args.k,
    )
    confusion = ConfusionMatrix(read_confusion_counts(args.confusion))
    return SpellCorrector(
        lm,
        confusion,
        lambda_=args.lambda_,
        no_error=args.no_error,
        max_corrections=args.max_corrections,
        sentence_boundaries=args.sentence_boundaries,
    )


def evaluate(corrector: SpellCorrector, pairs: Iterable[tuple[str, str]]) -> tuple[int, int]:
    """Correct each sentence and count exact matches with the expected answer."""
    correct = total = 0
    for sentence, expected in pairs:
        answer = corrector.correct(sentence)
        if answer == expected:
            correct += 1
        else:
            logger.debug("mismatch for %r: got %r, expected %r", sentence, answer, expected)
        total += 1
    return correct, total


def read_pairs(f: TextIO) -> list[tuple[str, str]]:
    """Tab-separated "sentence<TAB>expected" lines; blank lines are skipped."""
    pairs = []
    for lineno, line in enumerate(f, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        sentence, sep, expected = line.partition("\t")
        if not sep:
            raise LoadError("expected sentence<TAB>expected", getattr(f, "name", "<input>"), lineno)
        pairs.append((sentence.strip(), expected.strip()))
    return pairs


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellcheck",
        description="Noisy-channel spelling correction for short phrases. "
                    "Reads one phrase from standard input.",
    )
    parser.add_argument("--ngrams", default=CNTFILE_LOC, help="n-gram count file")
    parser.add_argument("--vocabulary", default=VOCFILE_LOC, help="vocabulary file")
    parser.add_argument("--confusion", default=CONFUSION_LOC, help="confusion matrix file")
    parser.add_argument("-k", type=float, default=0.005, help="add-k smoothing constant")
    parser.add_argument("--lambda", dest="lambda_", type=float, default=1.0,
                        help="weight of the channel model")
    parser.add_argument("--no-error", type=float, default=0.90,
                        help="probability that a typed word is correct")
    parser.add_argument("--max-corrections", type=int, default=2,
                        help="words that may be corrected per phrase")
    parser.add_argument("--sentence-boundaries", action="store_true",
                        help="score first and last words against <s> and </s>")
    parser.add_argument("--evaluate", metavar="FILE",
                        help="score against tab-separated sentence/expected pairs")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress to stderr (-vv for debug output)")
    return parser


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = make_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        corrector = build_corrector(args)
        if args.evaluate:
            with open(args.evaluate, encoding="utf-8") as f:
                pairs = read_pairs(f)
            correct, total = evaluate(corrector, pairs)
            print(f"Score: {correct}/{total}", file=stdout)
        else:
            sentence = stdin.readline()
            print(f"Answer: {corrector.correct(sentence)}", file=stdout)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
