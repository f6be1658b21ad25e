"""Singly linked lists and the classic algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list; nodes compare by identity."""

    value: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: ListNode | None = self
        while node is not None:
            yield node.value
            node = node.next


@dataclass(eq=False)
class MultiNode:
    """Node with a ``next`` link to the next column and a ``bottom`` link down it."""

    value: Any
    next: MultiNode | None = None
    bottom: MultiNode | None = None


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[Any]:
    """Values of the list starting at ``head``, in order."""
    return [] if head is None else list(head)


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def has_cycle(head: ListNode | None) -> bool:
    """True when following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list, reusing their nodes."""
    dummy = ListNode(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def middle(head: ListNode | None) -> ListNode | None:
    """Middle node of the list; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(None, head)
    lead: ListNode | None = dummy
    for _ in range(n + 1):
        if lead is None:
            raise ValueError("n exceeds the length of the list")
        lead = lead.next
    trail = dummy
    while lead is not None:
        lead = lead.next
        trail = trail.next  # type: ignore[assignment]
    trail.next = trail.next.next  # type: ignore[union-attr]
    return dummy.next


def is_palindrome(head: ListNode | None) -> bool:
    """True when the values read the same forwards and backwards.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse(slow.next)
    result = second is None or all(a == b for a, b in zip(head, second))
    slow.next = reverse(second)
    return result


def add_numbers(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Sum two numbers stored as lists of digits, least significant first."""
    dummy = ListNode(None)
    tail = dummy
    carry = 0
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.value
            first = first.next
        if second is not None:
            total += second.value
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def _length(head: ListNode | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def intersection(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """First node shared by both lists, or None."""
    first_length = _length(first)
    second_length = _length(second)
    for _ in range(first_length - second_length):
        first = first.next  # type: ignore[union-attr]
    for _ in range(second_length - first_length):
        second = second.next  # type: ignore[union-attr]
    while first is not None and second is not None:
        if first is second:
            return first
        first, second = first.next, second.next
    return None


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next  # type: ignore[assignment]
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def _merge_bottom(first: MultiNode | None, second: MultiNode | None) -> MultiNode | None:
    dummy = MultiNode(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            tail.bottom, first = first, first.bottom
        else:
            tail.bottom, second = second, second.bottom
        tail = tail.bottom
    tail.bottom = first if first is not None else second
    return dummy.bottom


def flatten(root: MultiNode | None) -> MultiNode | None:
    """Merge sorted columns joined by ``next`` into one list along ``bottom``."""
    if root is None or root.next is None:
        return root
    columns: list[MultiNode] = []
    node: MultiNode | None = root
    while node is not None:
        columns.append(node)
        node = node.next
    result: MultiNode | None = columns[-1]
    for column in reversed(columns[:-1]):
        column.next = result
        result = _merge_bottom(column, result)
    return result