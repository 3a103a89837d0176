"""String problems solved with a stack: brackets, expressions and reductions."""

from __future__ import annotations

_OPENERS = {")": "(", "]": "[", "}": "{"}


def min_swaps(s: str) -> int:
    """Fewest swaps that balance a string of square brackets."""
    opened = 0
    unmatched = 0
    for char in s:
        if char == "[":
            opened += 1
        elif char == "]":
            if opened:
                opened -= 1
            else:
                unmatched += 1
    return (unmatched + 1) // 2


def is_valid(s: str) -> bool:
    """Whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket must close the latest one.
    """
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif not stack or _OPENERS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def calculate(s: str) -> int:
    """Evaluate an expression of integers, ``+``, ``-`` and parentheses."""
    result = 0
    sign = 1
    number = 0
    saved: list[tuple[int, int]] = []
    for char in s:
        if "0" <= char <= "9":
            number = number * 10 + int(char)
        elif char in "+-":
            result += sign * number
            number = 0
            sign = 1 if char == "+" else -1
        elif char == "(":
            saved.append((result, sign))
            result = 0
            sign = 1
        elif char == ")":
            if not saved:
                raise ValueError("unbalanced parenthesis")
            result += sign * number
            number = 0
            outer, outer_sign = saved.pop()
            result = outer + outer_sign * result
    if number > 0:
        result += sign * number
    return result


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest."""
    stack: list[tuple[list[str], int]] = []
    current: list[str] = []
    digits = ""
    for char in s:
        if "0" <= char <= "9":
            digits += char
        elif char == "[":
            if not digits:
                raise ValueError("'[' must follow a repeat count")
            stack.append((current, int(digits)))
            current = []
            digits = ""
        elif char == "]":
            if not stack:
                raise ValueError("unmatched ']'")
            outer, count = stack.pop()
            outer.append("".join(current) * count)
            current = outer
        else:
            current.append(char)
    if stack:
        raise ValueError("unclosed '['")
    return "".join(current)


def score_of_parentheses(s: str) -> int:
    """Score a balanced string where ``()`` is 1, ``AB`` is A+B and ``(A)`` is 2A."""
    saved: list[int] = []
    score = 0
    for char in s:
        if char == "(":
            saved.append(score)
            score = 0
        else:
            if not saved:
                raise ValueError("unbalanced parentheses")
            score = saved.pop() + max(2 * score, 1)
    return score


def remove_duplicates(s: str, k: int) -> str:
    """Repeatedly remove runs of ``k`` equal adjacent characters."""
    runs: list[list] = []
    for char in s:
        if runs and runs[-1][0] == char:
            runs[-1][1] += 1
        else:
            runs.append([char, 1])
        if runs[-1][1] >= k:
            runs.pop()
    return "".join(char * count for char, count in runs)


def remove_stars(s: str) -> str:
    """Let each ``*`` delete the nearest remaining character to its left."""
    kept: list[str] = []
    for char in s:
        if char == "*" and kept:
            kept.pop()
        else:
            kept.append(char)
    return "".join(kept)