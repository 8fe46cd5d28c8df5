"""Longest common subsequence by dynamic programming."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LcsResult:
    """Length of the longest common subsequence and one such subsequence."""

    length: int
    sequence: str


def longest_common_subsequence(first: str, second: str) -> LcsResult:
    """Return a longest common subsequence of two strings."""
    table = [[0] * (len(second) + 1)]
    for a in first:
        previous = table[-1]
        row = [0]
        for j, b in enumerate(second, start=1):
            row.append(previous[j - 1] + 1 if a == b else max(previous[j], row[j - 1]))
        table.append(row)

    i, j = len(first), len(second)
    chars: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    return LcsResult(length=table[-1][-1], sequence="".join(reversed(chars)))