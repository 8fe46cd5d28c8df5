"""Binary and ternary search over sorted sequences."""

from __future__ import annotations

from typing import Optional, Sequence


def binary_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return an index of ``key`` in the sorted values, or ``None`` if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def ternary_search(values: Sequence[int], key: int) -> Optional[int]:
    """Return an index of ``key`` in the sorted values, or ``None`` if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        mid1 = low + third
        mid2 = high - third
        if values[mid1] == key:
            return mid1
        if values[mid2] == key:
            return mid2
        if key < values[mid1]:
            high = mid1 - 1
        elif key > values[mid2]:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return None