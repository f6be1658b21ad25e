"""Comparison and distribution sorts returning new sorted lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot = _partition(items, low, high)
            ranges.append((low, pivot - 1))
            ranges.append((pivot + 1, high))
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Heapsort over a max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _non_negative(values: Iterable[int]) -> list[int]:
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("only non-negative integers can be sorted this way")
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    items = _non_negative(values)
    if not items:
        return items
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = _non_negative(values)
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items