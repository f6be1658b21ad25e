"""Algorithms over one-dimensional sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Return a copy of ``values`` rotated ``d`` places to the left."""
    items = list(values)
    if not items:
        return items
    d %= len(items)
    return items[d:] + items[:d]


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not nums:
        raise ValueError("max_subarray_sum() needs a non-empty sequence")
    best = float("-inf")
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return int(best)


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two entries adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def sort_colors(values: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        value = values[mid]
        if value == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted((s, e) for s, e in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one sell, or 0."""
    lowest = float("inf")
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, int(price - lowest))
    return best


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Inclusive bounds of a run of non-negative values summing to ``target``."""
    current = 0
    start = 0
    for end, value in enumerate(values):
        current += value
        while current > target and start < end:
            current -= values[start]
            start += 1
        if current == target:
            return start, end
    return None


def leaders(values: Sequence[int]) -> list[int]:
    """Elements greater than every element to their right, in order."""
    found: list[int] = []
    for value in reversed(values):
        if not found or value > found[-1]:
            found.append(value)
    found.reverse()
    return found


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other entries."""
    result = []
    running = 1
    for value in nums:
        result.append(running)
        running *= value
    running = 1
    for index, value in reversed(list(enumerate(nums))):
        result[index] *= running
        running *= value
    return result


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    i = len(nums) - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i >= 0:
        j = len(nums) - 1
        while nums[j] <= nums[i]:
            j -= 1
        nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1:] = nums[i + 1:][::-1]


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present."""
    present = set(nums)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        streak = 1
        while value + streak in present:
            streak += 1
        longest = max(longest, streak)
    return longest