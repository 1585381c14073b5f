"""Shared puzzle fixtures for the test suite."""

from __future__ import annotations

from typing import List, Sequence, Tuple

TWO_CLUES = [2, 1, 1, 2, 1, 2, 2, 1]
TWO_SOLUTION = ((1, 2), (2, 1))

FOUR_CLUES = [
    1, 2, 4, 2,  # north
    3, 3, 1, 2,  # east
    4, 2, 1, 2,  # south
    1, 2, 3, 3,  # west
]
FOUR_SOLUTION = (
    (4, 3, 1, 2),
    (3, 4, 2, 1),
    (2, 1, 3, 4),
    (1, 2, 4, 3),
)


def empty_grid(size: int) -> List[List[int]]:
    return [[0] * size for _ in range(size)]


def seen_from_start(line: Sequence[int]) -> int:
    seen, tallest = 0, 0
    for height in line:
        if height > tallest:
            seen, tallest = seen + 1, height
    return seen


def clues_for(grid: Sequence[Sequence[int]]) -> List[int]:
    """Flat N, E, S, W clues that a solved grid satisfies."""

    size = len(grid)
    columns = [[grid[r][c] for r in range(size)] for c in range(size)]
    north = [seen_from_start(col) for col in columns]
    east = [seen_from_start(list(reversed(row))) for row in grid]
    south = [seen_from_start(list(reversed(col))) for col in columns]
    west = [seen_from_start(row) for row in grid]
    return north + east + south + west


def latin_square(size: int, shift: int = 1) -> Tuple[Tuple[int, ...], ...]:
    """A Latin square with rows rotated by ``shift`` and values relabelled."""

    labels = list(range(1, size + 1))
    labels = labels[1::2] + labels[0::2]
    return tuple(
        tuple(labels[(r * shift + c) % size] for c in range(size))
        for r in range(size)
    )
