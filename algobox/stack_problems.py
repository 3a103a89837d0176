"""Problems over sequences of tokens, numbers and positions solved with a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_OPERATORS = frozenset("+-*/")


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens and ``+ - * /`` in reverse Polish notation.

    Division truncates toward zero. The value on top of the stack is returned.
    """
    stack: list[int] = []
    for token in tokens:
        if token in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} needs two operands")
            second = stack.pop()
            first = stack.pop()
            if token == "+":
                stack.append(first + second)
            elif token == "-":
                stack.append(first - second)
            elif token == "*":
                stack.append(first * second)
            else:
                stack.append(_truncating_divide(first, second))
        else:
            stack.append(int(token))
    if not stack:
        raise ValueError("no tokens to evaluate")
    return stack[-1]


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Whether indices ``i < j < k`` exist with ``nums[i] < nums[k] < nums[j]``."""
    stack: list[int] = []
    third: int | None = None
    for num in reversed(nums):
        if third is not None and third > num:
            return True
        while stack and stack[-1] < num:
            third = stack.pop()
        stack.append(num)
    return False


def cal_points(operations: Iterable[str]) -> int:
    """Total of a baseball score record.

    ``"+"`` records the sum of the last two scores, ``"D"`` doubles the last
    one, ``"C"`` removes it, and any other entry is an integer score.
    """
    points: list[int] = []
    for op in operations:
        if op == "+":
            if len(points) < 2:
                raise ValueError("'+' needs two previous scores")
            points.append(points[-1] + points[-2])
        elif op == "D":
            if not points:
                raise ValueError("'D' needs a previous score")
            points.append(points[-1] * 2)
        elif op == "C":
            if not points:
                raise ValueError("'C' needs a previous score")
            points.pop()
        else:
            points.append(int(op))
    return sum(points)


def simplify_path(path: str) -> str:
    """Canonical form of an absolute Unix-style path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Asteroids left after all collisions.

    Positive values move right, negative ones left; on collision the smaller
    explodes, and equal sizes destroy each other.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        while True:
            if not survivors or survivors[-1] < 0 or asteroid > 0:
                survivors.append(asteroid)
                break
            if asteroid < 0 and survivors[-1] <= -asteroid:
                smaller = survivors[-1] < -asteroid
                survivors.pop()
                if smaller:
                    continue
            break
    return survivors


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Number of car fleets that arrive at ``target``."""
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    if not position:
        raise ValueError("at least one car is required")
    cars = sorted(zip(position, speed))
    fleets = 0
    slowest: float | None = None
    for place, velocity in reversed(cars):
        arrival = (target - place) / velocity
        if slowest is None or arrival > slowest:
            fleets += 1
            slowest = arrival
    return fleets