"""Breadth-first searches over arrays and grids."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def min_jumps(arr: Sequence[int]) -> int:
    """Fewest jumps from the first to the last index.

    From index ``i`` one may move to ``i - 1``, ``i + 1`` or any index holding
    the same value.
    """
    n = len(arr)
    if n == 0:
        raise ValueError("arr must not be empty")
    positions: dict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(arr):
        positions[value].append(index)

    visited = {0}
    frontier = [0]
    jumps = 0
    while frontier:
        next_frontier = []
        for current in frontier:
            if current == n - 1:
                return jumps
            # Each value group is expanded once; later visits find it emptied.
            neighbours = [current - 1, current + 1, *positions.pop(arr[current], ())]
            for neighbour in neighbours:
                if 0 <= neighbour < n and neighbour not in visited:
                    visited.add(neighbour)
                    next_frontier.append(neighbour)
        frontier = next_frontier
        jumps += 1
    return -1


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left, spreading from rotten ones (2).

    Returns -1 when some fresh orange can never rot. The grid is not modified.
    """
    cells = [list(row) for row in grid]
    fresh = sum(row.count(1) for row in cells)
    if fresh == 0:
        return 0
    width = len(cells[0])
    rotten = [
        (x, y) for x, row in enumerate(cells) for y, value in enumerate(row) if value == 2
    ]
    minutes = 0
    while rotten:
        minutes += 1
        spread = []
        for x, y in rotten:
            for dx, dy in _DIRECTIONS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < len(cells) and 0 <= ny < width and cells[nx][ny] == 1:
                    cells[nx][ny] = 2
                    fresh -= 1
                    spread.append((nx, ny))
        if fresh == 0:
            return minutes
        rotten = spread
    return -1