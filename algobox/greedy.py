"""Greedy choices: city scheduling, candy handout and a single digit swap."""

from __future__ import annotations

from collections.abc import Sequence


def two_city_sched_cost(costs: Sequence[Sequence[int]]) -> int:
    """Cheapest cost of sending half the people to city A and half to city B.

    ``costs[i]`` is ``(cost_a, cost_b)`` for person ``i``.
    """
    ordered = sorted(costs, key=lambda pair: pair[0] - pair[1])
    half = len(ordered) // 2
    return sum(pair[0] for pair in ordered[:half]) + sum(pair[1] for pair in ordered[half:])


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies so each child gets one and beats lower-rated neighbours."""
    counts: list[int] = []
    previous = None
    for rating in ratings:
        counts.append(counts[-1] + 1 if counts and rating > previous else 1)
        previous = rating

    total = 0
    after_rating = None
    after_count = 0
    for rating, count in zip(reversed(ratings), reversed(counts)):
        if after_rating is not None and after_rating < rating:
            count = max(count, after_count + 1)
        total += count
        after_rating, after_count = rating, count
    return total


def maximum_swap(num: int) -> int:
    """Largest number reachable by swapping at most two digits of ``num``."""
    if num < 0:
        raise ValueError("num must not be negative")
    digits = list(str(num))
    larger_to_right: list[int | None] = [None] * len(digits)
    max_index = len(digits) - 1
    for index in range(len(digits) - 2, -1, -1):
        if digits[index] < digits[max_index]:
            larger_to_right[index] = max_index
        else:
            # On equal digits the nearer position becomes the candidate.
            max_index = index
    for index, target in enumerate(larger_to_right):
        if target is not None:
            digits[index], digits[target] = digits[target], digits[index]
            break
    return int("".join(digits))