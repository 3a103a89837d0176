"""Set-based searches over numbers, strings and names."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_DNA_LENGTH = 10


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    present = set(nums)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        best = max(best, end - start + 1)
    return best


def has_all_codes(s: str, k: int) -> bool:
    """Whether every binary string of length ``k`` occurs as a substring of ``s``."""
    if k < 0:
        raise ValueError("k must not be negative")
    needed = 1 << k
    seen: set[str] = set()
    for start in range(len(s) - k + 1):
        seen.add(s[start : start + k])
        if len(seen) == needed:
            return True
    return False


def find_repeated_dna_sequences(s: str) -> list[str]:
    """Ten-letter substrings occurring more than once, in order of their first repeat."""
    seen: set[str] = set()
    repeated: dict[str, None] = {}
    for start in range(len(s) - _DNA_LENGTH + 1):
        window = s[start : start + _DNA_LENGTH]
        if window in seen:
            repeated[window] = None
        seen.add(window)
    return list(repeated)


def count_palindromic_subsequence(s: str) -> int:
    """Number of distinct length-3 palindromic subsequences with lowercase outer letters."""
    right = Counter(s)
    left: set[str] = set()
    found: set[str] = set()
    for middle in s[:-1]:
        right[middle] -= 1
        for outer in left:
            if "a" <= outer <= "z" and right[outer] > 0:
                found.add(outer + middle + outer)
        left.add(middle)
    return len(found)


def find_difference(
    nums1: Iterable[int], nums2: Iterable[int]
) -> list[list[int]]:
    """Distinct values only in ``nums1`` and distinct values only in ``nums2``.

    Each list keeps the order in which its values first appear.
    """
    first = dict.fromkeys(nums1)
    second = dict.fromkeys(nums2)
    return [
        [value for value in first if value not in second],
        [value for value in second if value not in first],
    ]


def distinct_names(ideas: Sequence[str]) -> int:
    """Count ordered name pairs whose first letters can be swapped into two new names."""
    groups: dict[str, set[str]] = {}
    for idea in ideas:
        if not idea:
            raise ValueError("ideas must not contain empty names")
        groups.setdefault(idea[0], set()).add(idea[1:])

    count = 0
    for first_letter, first_suffixes in groups.items():
        for second_letter, second_suffixes in groups.items():
            if first_letter == second_letter:
                continue
            shared = len(first_suffixes & second_suffixes)
            count += (len(first_suffixes) - shared) * (len(second_suffixes) - shared)
    return count