"""Stack data structures with extra operations."""

from __future__ import annotations

from collections import deque


class CustomStack:
    """A bounded stack that can add a value to its bottom ``k`` elements."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._values: list[int] = []
        # Amount owed to every element at or below each index, applied lazily on pop.
        self._pending: list[int] = []

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is full."""
        if len(self._values) >= self.max_size:
            return
        self._values.append(x)
        self._pending.append(0)

    def pop(self) -> int:
        """Pop and return the top value, or -1 when the stack is empty."""
        if not self._values:
            return -1
        bonus = self._pending.pop()
        if self._pending:
            self._pending[-1] += bonus
        return self._values.pop() + bonus

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to the bottom ``k`` elements (all of them if fewer)."""
        top = min(k, len(self._values)) - 1
        if top >= 0:
            self._pending[top] += val


class MinStack:
    """A stack that reports its minimum in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        """Push ``val``."""
        smallest = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, smallest))

    def pop(self) -> None:
        """Remove the top value."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        self._entries.pop()

    def top(self) -> int:
        """The top value."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """The smallest value currently on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]


class QueueStack:
    """A last-in first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Push ``x``, rotating the queue so it comes out first."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the most recently pushed value."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """The most recently pushed value."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._queue