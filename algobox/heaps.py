"""Heap-based selection and scheduling."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values, ordered from least to most frequent."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(nums)
    top = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in reversed(top)]


def least_interval(tasks: Sequence[str], n: int) -> int:
    """Time units needed to run all tasks when equal tasks must be ``n`` units apart."""
    if n == 0:
        return len(tasks)
    remaining = Counter(tasks)
    available_at = dict.fromkeys(remaining, 0)
    time = 1
    while remaining:
        ready = [(count, task) for task, count in remaining.items() if available_at[task] <= time]
        if ready:
            _, task = max(ready)
            available_at[task] = time + n + 1
            remaining[task] -= 1
            if remaining[task] == 0:
                del remaining[task]
        time += 1
    return time - 1