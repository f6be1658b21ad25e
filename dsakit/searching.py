"""Searches over sorted, rotated and two-dimensional data."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in ascending ``values``, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def search_rotated(nums: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in a rotated ascending sequence, or None."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return None


def find_peak(nums: Sequence[Any]) -> int:
    """Index of an element not smaller than its neighbours."""
    if not nums:
        raise ValueError("find_peak() needs a non-empty sequence")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def search_matrix(matrix: Sequence[Sequence[Any]], target: Any) -> bool:
    """Whether ``target`` is in a matrix whose rows, read in order, ascend."""
    if not matrix:
        return False
    width = len(matrix[0])
    left, right = 0, len(matrix) * width - 1
    while left <= right:
        mid = (left + right) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return False


def kth_largest(nums: Iterable[Any], k: int) -> Any:
    """The ``k``-th largest value, counting duplicates, with ``k`` from 1."""
    items = list(nums)
    if not 1 <= k <= len(items):
        raise ValueError("k must lie between 1 and the number of values")
    return heapq.nlargest(k, items)[-1]