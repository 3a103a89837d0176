"""Singly linked lists of digits and their addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding ``values`` in order; an empty input gives None."""
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _values(node: ListNode | None) -> Iterator[int]:
    return iter(node) if node is not None else iter(())


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of digits, least significant digit first."""
    digits = []
    carry = 0
    for a, b in zip_longest(_values(l1), _values(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return ListNode.from_iterable(digits)