"""Classic comparison sorts: insertion, merge, quick and heap sort."""

from __future__ import annotations

from typing import Iterable, MutableSequence


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the values using insertion sort."""
    result = list(values)
    for j in range(1, len(result)):
        key = result[j]
        i = j - 1
        while i >= 0 and result[i] > key:
            result[i + 1] = result[i]
            i -= 1
        result[i + 1] = key
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the values using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[low]``.

    Returns the final index of the pivot: everything before it is no greater,
    everything after it is no smaller.
    """
    pivot = values[low]
    i, j = low + 1, high
    while True:
        while i <= high and values[i] < pivot:
            i += 1
        while j >= low and values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
        else:
            values[low], values[j] = values[j], values[low]
            return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the values using quicksort with a first-element pivot."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            q = partition(result, low, high)
            pending.append((low, q - 1))
            pending.append((q + 1, high))
    return result


def max_heapify(values: MutableSequence[int], index: int, heap_size: int) -> None:
    """Sift ``values[index]`` down so the subtree rooted there is a max-heap."""
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        largest = index
        if left < heap_size and values[largest] < values[left]:
            largest = left
        if right < heap_size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: MutableSequence[int]) -> None:
    """Rearrange the values in place into a max-heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        max_heapify(values, index, size)


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the values using heap sort."""
    result = list(values)
    build_max_heap(result)
    for end in range(len(result) - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        max_heapify(result, 0, end)
    return result