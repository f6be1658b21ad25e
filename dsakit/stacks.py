"""Stack and queue containers and the algorithms that lean on them."""

from __future__ import annotations

import operator
import string
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any


class Stack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """First-in, first-out queue over a fixed ring of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        if self._size == len(self._slots):
            raise OverflowError("queue is full")
        rear = (self._front + self._size) % len(self._slots)
        self._slots[rear] = value
        self._size += 1

    def dequeue(self) -> Any:
        if not self._size:
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._size -= 1
        return value

    def __len__(self) -> int:
        return self._size


class MinStack:
    """Stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._minima: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)
        if not self._minima or value <= self._minima[-1]:
            self._minima.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if value == self._minima[-1]:
            self._minima.pop()
        return value

    def top(self) -> Any:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def minimum(self) -> Any:
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]

    def __len__(self) -> int:
        return len(self._items)


class TwoStackQueue:
    """First-in, first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: Any) -> None:
        self._inbox.append(value)

    def pop(self) -> Any:
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        self._refill()
        return self._outbox[-1]

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class QueueStack:
    """Last-in, first-out stack built from two queues."""

    def __init__(self) -> None:
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        if not self._main:
            raise IndexError("pop from empty stack")
        return self._main.popleft()

    def top(self) -> Any:
        if not self._main:
            raise IndexError("top of empty stack")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


_CLOSERS = {")": "(", "}": "{", "]": "["}


def is_valid_parentheses(text: str) -> bool:
    """True when every bracket in ``text`` is properly matched and nested.

    Any character that is not an opening bracket is read as a closer, so
    other characters make the text invalid.
    """
    pending: list[str] = []
    for char in text:
        if char in "({[":
            pending.append(char)
        elif not pending or _CLOSERS.get(char) != pending[-1]:
            return False
        else:
            pending.pop()
    return not pending


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each entry, the first larger entry to its right, or -1."""
    result = [-1] * len(nums)
    waiting: list[int] = []
    for index, value in enumerate(nums):
        while waiting and nums[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    rising: list[int] = []
    best = 0
    for index, height in enumerate(heights):
        while rising and heights[rising[-1]] > height:
            bar = heights[rising.pop()]
            width = index - rising[-1] - 1 if rising else index
            best = max(best, bar * width)
        rising.append(index)
    total = len(heights)
    while rising:
        bar = heights[rising.pop()]
        width = total - rising[-1] - 1 if rising else total
        best = max(best, bar * width)
    return best


def sliding_window_max(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive entries."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(nums):
        while window and window[0] < index - k + 1:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and ``+ - * /``.

    Division truncates toward zero.
    """
    operands: list[int] = []
    for char in expression:
        if char in string.digits:
            operands.append(int(char))
            continue
        apply = _OPERATORS.get(char)
        if apply is None:
            raise ValueError(f"unsupported token {char!r}")
        if len(operands) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        right = operands.pop()
        left = operands.pop()
        operands.append(apply(left, right))
    if not operands:
        raise ValueError("empty expression")
    return operands[-1]