"""Counting with prefix sums held in a hash map."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose elements add up to ``k``."""
    seen = Counter({0: 1})
    prefix = 0
    total = 0
    for value in nums:
        prefix += value
        total += seen[prefix - k]
        seen[prefix] += 1
    return total