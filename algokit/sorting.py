"""Classic in-place sorting algorithms."""

from __future__ import annotations

import operator
from itertools import accumulate
from typing import Any, Callable, MutableSequence, Optional

from .heap import Heap

LessEqual = Callable[[Any, Any], bool]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by insertion."""
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and items[i] > key:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place using a max-heap."""
    if not items:
        return
    heap = Heap(items)
    heap.build_heap()
    for end in range(len(items) - 1, 0, -1):
        heap.swap(0, end)
        heap.size = end
        heap.heapify(0)
    heap.size = len(items)


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Hoare partition of ``items[low..high]`` around ``items[low]``.

    Returns an index q with every element of ``items[low..q]`` no greater
    than every element of ``items[q+1..high]``.
    """
    pivot = items[low]
    i = low - 1
    j = high + 1
    while True:
        j -= 1
        while items[j] > pivot:
            j -= 1
        i += 1
        while items[i] < pivot:
            i += 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            return j


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            q = partition(items, low, high)
            pending.append((low, q))
            pending.append((q + 1, high))


def merge(
    items: MutableSequence[Any],
    left: int,
    center: int,
    right: int,
    less_equal: Optional[LessEqual] = None,
) -> None:
    """Merge the sorted runs ``items[left..center]`` and ``items[center+1..right]``."""
    le = operator.le if less_equal is None else less_equal
    first = list(items[left : center + 1])
    second = list(items[center + 1 : right + 1])
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if le(first[i], second[j]):
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    items[left : right + 1] = merged


def merge_sort(
    items: MutableSequence[Any], less_equal: Optional[LessEqual] = None
) -> None:
    """Stable in-place merge sort; ``less_equal`` replaces the ``<=`` test."""

    def sort(left: int, right: int) -> None:
        if left < right:
            center = (left + right) // 2
            sort(left, center)
            sort(center + 1, right)
            merge(items, left, center, right, less_equal)

    sort(0, len(items) - 1)


def counting_sort(items: MutableSequence[int], bound: int) -> None:
    """Sort integers in ``range(bound)`` in place by counting."""
    counts = [0] * bound
    for value in items:
        if not 0 <= value < bound:
            raise ValueError(f"value {value} outside range 0..{bound - 1}")
        counts[value] += 1
    positions = list(accumulate(counts))
    result: list = [None] * len(items)
    for value in reversed(list(items)):
        positions[value] -= 1
        result[positions[value]] = value
    items[:] = result