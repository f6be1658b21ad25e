"""Classic dynamic-programming problems over integers, strings and grids."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence


def _check_items(weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items, each used at most once, within ``capacity``."""
    _check_items(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def unbounded_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items, each usable any number of times, within ``capacity``."""
    _check_items(weights, values, capacity)
    best = [0] * (capacity + 1)
    for room in range(capacity + 1):
        for weight, value in zip(weights, values):
            if weight <= room:
                best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        row = [0]
        for j, b in enumerate(second):
            row.append(previous[j] + 1 if a == b else max(previous[j + 1], row[j]))
        previous = row
    return previous[-1]


def edit_distance(first: Sequence, second: Sequence) -> int:
    """Fewest insertions, deletions and substitutions turning one into the other."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, 1):
        row = [i]
        for j, b in enumerate(second, 1):
            if a == b:
                row.append(previous[j - 1])
            else:
                row.append(1 + min(previous[j], row[j - 1], previous[j - 1]))
        previous = row
    return previous[-1]


def coin_change(coins: Iterable[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount``, or None when it cannot be made."""
    denominations = list(coins)
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    best: list[float] = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        for coin in denominations:
            if coin <= total and best[total - coin] + 1 < best[total]:
                best[total] = best[total - coin] + 1
    return None if best[amount] == math.inf else int(best[amount])


def lis_length(nums: Iterable) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list = []
    for value in nums:
        place = bisect_left(tails, value)
        if place == len(tails):
            tails.append(value)
        else:
            tails[place] = value
    return len(tails)


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    count = len(dims) - 1
    if count < 1:
        raise ValueError("dims must describe at least one matrix")
    cost = [[0] * count for _ in range(count)]
    for span in range(2, count + 1):
        for i in range(count - span + 1):
            j = i + span - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def rod_cutting(prices: Sequence[int], length: int) -> int:
    """Best revenue from cutting a rod, where ``prices[i]`` sells a piece of ``i + 1``."""
    if not 0 <= length <= len(prices):
        raise ValueError("length must lie between 0 and the number of prices")
    best = [0] * (length + 1)
    for size in range(1, length + 1):
        best[size] = max(0, max(prices[cut - 1] + best[size - cut] for cut in range(1, size + 1)))
    return best[length]


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor in the worst case."""
    if floors < 0:
        raise ValueError("floors must not be negative")
    if floors == 0:
        return 0
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    row = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0, 1]
        for level in range(2, floors + 1):
            current.append(
                1 + min(max(row[k - 1], current[level - k]) for k in range(1, level + 1))
            )
        row = current
    return row[floors]


def min_palindrome_cuts(text: str) -> int:
    """Fewest cuts splitting ``text`` into palindromes."""
    size = len(text)
    if size == 0:
        return 0
    palindrome = [[False] * size for _ in range(size)]
    cuts: list[int] = []
    for end in range(size):
        best = end
        for start in range(end + 1):
            if text[start] == text[end] and (end - start < 2 or palindrome[start + 1][end - 1]):
                palindrome[start][end] = True
                best = 0 if start == 0 else min(best, cuts[start - 1] + 1)
        cuts.append(best)
    return cuts[-1]


def word_break(text: str, words: Iterable[str]) -> bool:
    """True when ``text`` splits into a sequence of the given words."""
    vocabulary = set(words)
    reachable = [True] + [False] * len(text)
    for end in range(1, len(text) + 1):
        reachable[end] = any(
            reachable[start] and text[start:end] in vocabulary for start in range(end)
        )
    return reachable[-1]


def subset_sum(nums: Iterable[int], target: int) -> bool:
    """True when some subset of non-negative ``nums`` adds up to ``target``."""
    values = list(nums)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    reachable = {0}
    for value in values:
        reachable |= {total + value for total in reachable if total + value <= target}
    return target in reachable


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top left to bottom right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("min_path_sum() needs a non-empty grid")
    best: list[int] = []
    for cell in grid[0]:
        best.append(cell + (best[-1] if best else 0))
    for row in grid[1:]:
        best[0] += row[0]
        for j in range(1, len(best)):
            best[j] = row[j] + min(best[j], best[j - 1])
    return best[-1]


def unique_paths(rows: int, cols: int) -> int:
    """Number of right-or-down paths across a ``rows`` by ``cols`` grid."""
    if rows < 1 or cols < 1:
        raise ValueError("the grid needs at least one row and one column")
    counts = [1] * cols
    for _ in range(1, rows):
        for j in range(1, cols):
            counts[j] += counts[j - 1]
    return counts[-1]