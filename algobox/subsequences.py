"""Products of disjoint palindromic subsequences."""

from __future__ import annotations

from itertools import compress, product


def _longest_palindromic_subsequence(text: str) -> int:
    reverse = text[::-1]
    row = [0] * (len(reverse) + 1)
    for char in text:
        new_row = [0]
        for j, other in enumerate(reverse):
            new_row.append(row[j] + 1 if char == other else max(row[j + 1], new_row[j]))
        row = new_row
    return row[-1]


def max_palindrome_product(s: str) -> int:
    """Largest product of the lengths of two disjoint palindromic subsequences of ``s``."""
    best = 0
    for picks in product((False, True), repeat=len(s)):
        chosen = "".join(compress(s, picks))
        if chosen and chosen == chosen[::-1]:
            rest = "".join(compress(s, (not pick for pick in picks)))
            best = max(best, len(chosen) * _longest_palindromic_subsequence(rest))
    return best