"""Segment tree and Fenwick tree for prefix and range sums."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Static array answering inclusive range sums in logarithmic time.

    Query bounds outside the array are clipped to it; a range with
    ``left > right`` sums to 0.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree = [0] * (4 * self._size)
        if items:
            self._build(items, 1, 0, self._size - 1)

    def _build(self, items: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, 2 * node, start, mid)
        self._build(items, 2 * node + 1, mid + 1, end)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if right < start or end < left:
            return 0
        if left <= start and end <= right:
            return self._tree[node]
        mid = (start + end) // 2
        return self._query(2 * node, start, mid, left, right) + self._query(
            2 * node + 1, mid + 1, end, left, right
        )

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left`` to ``right`` inclusive."""
        if not self._size:
            return 0
        return self._query(1, 0, self._size - 1, left, right)


class FenwickTree:
    """Binary indexed tree over positions ``1 .. size``, all starting at 0."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at 1-based ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} is out of range")
        while index <= self._size:
            self._tree[index] += delta
            index += index & -index

    def query(self, index: int) -> int:
        """Sum of the values at positions ``1 .. index``; 0 for index 0."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_query(self, left: int, right: int) -> int:
        """Sum of the values at 1-based positions ``left`` to ``right``."""
        return self.query(right) - self.query(left - 1)