"""Recursive and backtracking problems on boards, brackets and grammars."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (-1, 1), (1, -1), (1, 1))


def _inside(board: Sequence[Sequence[str]], x: int, y: int) -> bool:
    return 0 <= x < len(board) and 0 <= y < len(board[0])


def _ends_line(
    board: Sequence[Sequence[str]], row: int, col: int, dx: int, dy: int, opponent: str
) -> bool:
    x, y = row + dx, col + dy
    while _inside(board, x, y) and board[x][y] != ".":
        nx, ny = x + dx, y + dy
        if (
            board[x][y] != opponent
            and (not _inside(board, nx, ny) or board[nx][ny] == ".")
            and (x - row > 2 or y - col > 2)
        ):
            return True
        x, y = nx, ny
    return False


def check_move(
    board: Sequence[Sequence[str]], r_move: int, c_move: int, color: str
) -> bool:
    """Whether placing ``color`` at ``(r_move, c_move)`` closes a line on the board.

    The board holds ``"W"``, ``"B"`` or ``"."`` cells. Each of the eight
    directions is walked over occupied cells until one of the mover's colour
    that is followed by an empty cell or the edge.
    """
    opponent = "B" if color == "W" else "W"
    return any(
        _ends_line(board, r_move, c_move, dx, dy, opponent) for dx, dy in _DIRECTIONS
    )


def generate_parenthesis(n: int) -> list[str]:
    """All well-formed strings of ``n`` bracket pairs, in lexicographic order."""
    results: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if opened == n and closed == n:
            results.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def kth_grammar(n: int, k: int) -> int:
    """The ``k``-th symbol (1-based) in row ``n`` of the 0 -> 01, 1 -> 10 grammar."""
    if k < 1:
        raise ValueError("k must be at least 1")
    flipped = False
    while k >= 2:
        if k % 2 == 0:
            flipped = not flipped
        k = (k + 1) // 2
    return int(flipped)