# edits.py
from __future__ import annotations
from typing import NamedTuple

# word boundary marker, as it appears in the confusion matrix
BOUNDARY = " "


class Edit(NamedTuple):
    """
    A single character-level edit turning `bad` (typed) into `good` (intended).
    kind is one of "insertion", "deletion", "substitution", "transposition",
    or "" for identical words.
    """
    kind: str
    bad: str
    good: str

    @property
    def key(self) -> str:
        """Confusion-matrix key, e.g. "ht|th"; empty for the no-op edit."""
        if not self.kind:
            return ""
        return f"{self.bad}|{self.good}"


NO_EDIT = Edit("", "", "")


def dl_distance(a: str, b: str) -> int:
    """
    Damerau-Levenshtein distance (adjacent transpositions, no substring
    re-editing) between a and b, via the usual DP table.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    m, n = len(a), len(b)
    # rows index b, columns index a
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        table[i][0] = i
    for j in range(m + 1):
        table[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if b[i - 1] == a[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            elif i > 1 and j > 1 and b[i - 1] == a[j - 2] and b[i - 2] == a[j - 1]:
                table[i][j] = min(
                    table[i][j - 1],          # insertion
                    table[i - 1][j],          # deletion
                    table[i - 1][j - 1],      # substitution
                    table[i - 2][j - 2],      # transposition
                ) + 1
            else:
                table[i][j] = min(
                    table[i][j - 1],
                    table[i - 1][j],
                    table[i - 1][j - 1],
                ) + 1
    return table[n][m]


def get_correction(original: str, corrected: str) -> Edit:
    """
    Find the edit that turns `corrected` into the typed `original`, e.g.
    get_correction("hte", "the") -> Edit("transposition", "ht", "th").

    Only meaningful when dl_distance(original, corrected) <= 1; for words
    further apart it describes the first difference only.
    """
    # the boundary is a character in the confusion matrix
    a = BOUNDARY + original
    b = BOUNDARY + corrected

    end = max(len(a), len(b))
    for i in range(1, end):
        at_end = i == end - 1 and len(a) != len(b)
        if not at_end and a[i:i + 1] == b[i:i + 1]:
            continue

        if len(a) == len(b):
            if i + 1 < len(a) and a[i + 1] != b[i + 1]:
                return Edit("transposition", a[i:i + 2], b[i:i + 2])
            return Edit("substitution", a[i], b[i])
        if len(a) > len(b):
            return Edit("deletion", a[i - 1:i + 1], b[i - 1:i])
        return Edit("insertion", a[i - 1:i], b[i - 1:i + 1])

    return NO_EDIT
