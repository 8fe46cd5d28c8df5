"""Simple statistics over integer arrays."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Optional


@dataclass(frozen=True)
class DuplicateStats:
    """Summary of repeated values in a sequence."""

    duplicate_count: int
    most_repeated: Optional[int]
    max_frequency: int


def second_extremes(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(second_smallest, second_largest)`` of the values.

    Repeated values count separately, so ``[4, 4]`` gives ``(4, 4)``.
    Raises ``ValueError`` when fewer than two values are given.
    """
    items = list(values)
    if len(items) < 2:
        raise ValueError("array must contain at least two elements")

    smallest = largest = items[0]
    second_smallest: Optional[int] = None
    second_largest: Optional[int] = None

    for value in items[1:]:
        if value < smallest:
            second_smallest, smallest = smallest, value
        elif second_smallest is None or value < second_smallest:
            second_smallest = value

        if value > largest:
            second_largest, largest = largest, value
        elif second_largest is None or value > second_largest:
            second_largest = value

    assert second_smallest is not None and second_largest is not None
    return second_smallest, second_largest


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return the running totals of the values."""
    return list(accumulate(values))


def duplicate_stats(values: Iterable[int]) -> DuplicateStats:
    """Count the distinct values that repeat and find the most repeated one.

    On a tie the value that appears first wins.
    """
    counts = Counter(values)
    if not counts:
        return DuplicateStats(duplicate_count=0, most_repeated=None, max_frequency=0)

    duplicates = sum(1 for count in counts.values() if count > 1)
    most_repeated, max_frequency = max(counts.items(), key=lambda pair: pair[1])
    return DuplicateStats(
        duplicate_count=duplicates,
        most_repeated=most_repeated,
        max_frequency=max_frequency,
    )