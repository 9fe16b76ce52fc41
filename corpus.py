# corpus.py
from __future__ import annotations
import logging
from collections.abc import Iterable, Mapping
from os import PathLike
from types import MappingProxyType
from typing import Union

logger = logging.getLogger(__name__)

PathType = Union[str, PathLike]

# default file names, relative to the working directory
CNTFILE_LOC = "samplecnt.txt"
VOCFILE_LOC = "samplevoc.txt"
CONFUSION_LOC = "confusion_matrix.txt"


class LoadError(ValueError):
    """A data file line could not be parsed."""

    def __init__(self, message: str, path: str = "<input>", lineno: int = 0) -> None:
        super().__init__(f"{path}:{lineno}: {message}")
        self.path = path
        self.lineno = lineno


def parse_ngram_counts(lines: Iterable[str], path: str = "<input>") -> Mapping[str, int]:
    """
    Parse "<count> <n-gram>" lines, e.g. "36 of conditions".
    Blank lines are skipped; a non-integer count raises LoadError.
    """
    ngrams: dict[str, int] = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line:
            continue
        count_s, _, ngram = line.partition(" ")
        try:
            count = int(count_s)
        except ValueError:
            raise LoadError(f"bad n-gram count {count_s!r}", path, lineno) from None
        if count < 0 or not ngram:
            raise LoadError(f"malformed n-gram line {line!r}", path, lineno)
        ngrams[ngram] = count
    return MappingProxyType(ngrams)


def parse_vocabulary(lines: Iterable[str]) -> frozenset[str]:
    """One word per line."""
    return frozenset(w for w in (line.strip() for line in lines) if w)


def parse_confusion_counts(lines: Iterable[str], path: str = "<input>") -> Mapping[str, int]:
    """
    Parse "<bad>|<good> <count>" lines. The pattern may itself contain spaces
    (word boundaries, e.g. " | a 12"), so split on the last space only.
    """
    confusion: dict[str, int] = {}
    for lineno, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        keys, _, count_s = line.rpartition(" ")
        try:
            count = int(count_s)
        except ValueError:
            raise LoadError(f"bad confusion count {count_s!r}", path, lineno) from None
        if "|" not in keys or count < 0:
            raise LoadError(f"malformed confusion line {line!r}", path, lineno)
        confusion[keys] = count
    return MappingProxyType(confusion)


def read_ngram_counts(path: PathType = CNTFILE_LOC) -> Mapping[str, int]:
    with open(path, encoding="utf-8") as f:
        ngrams = parse_ngram_counts(f, str(path))
    logger.info("read %d n-grams from %s", len(ngrams), path)
    return ngrams


def read_vocabulary(path: PathType = VOCFILE_LOC) -> frozenset[str]:
    with open(path, encoding="utf-8") as f:
        vocabulary = parse_vocabulary(f)
    logger.info("read %d vocabulary words from %s", len(vocabulary), path)
    return vocabulary


def read_confusion_counts(path: PathType = CONFUSION_LOC) -> Mapping[str, int]:
    with open(path, encoding="utf-8") as f:
        confusion = parse_confusion_counts(f, str(path))
    logger.info("read %d confusion patterns from %s", len(confusion), path)
    return confusion
