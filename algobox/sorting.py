"""Orderings built from votes and from digit concatenation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cmp_to_key


def rank_teams(votes: Sequence[str]) -> str:
    """Order teams by votes per position, then alphabetically on a full tie."""
    if not votes:
        raise ValueError("votes must not be empty")
    if len(votes) == 1:
        return votes[0]
    teams = votes[0]
    counts = {team: [0] * len(teams) for team in teams}
    for vote in votes:
        if len(vote) != len(teams):
            raise ValueError("every vote must rank the same number of teams")
        for position, team in enumerate(vote):
            if team not in counts:
                raise ValueError(f"vote names an unknown team: {team!r}")
            counts[team][position] += 1
    return "".join(
        sorted(teams, key=lambda team: ([-count for count in counts[team]], team))
    )


def _concatenation_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Largest number formed by concatenating all of ``nums``, as a string."""
    pieces = sorted((str(num) for num in nums), key=cmp_to_key(_concatenation_order))
    joined = "".join(pieces)
    if not joined:
        return joined
    return joined.lstrip("0") or "0"