"""Cursor helpers: locate and advance to the next empty cell.

Both functions are pure and return a fresh :class:`Cursor`, so a cursor is
never shared between sibling configurations.
"""

from __future__ import annotations

from ..core.constants import EMPTY
from ..core.models import Cursor, Grid


def complete_cursor(size: int) -> Cursor:
    """Cursor parked on the last cell of a grid with nothing left to fill."""

    last = max(size - 1, 0)
    return Cursor(row=last, col=last, complete=True)


def first_empty(grid: Grid) -> Cursor:
    """Return a cursor on the first empty cell in row-major order."""

    size = len(grid)
    for row in range(size):
        for col in range(size):
            if grid[row][col] == EMPTY:
                return Cursor(row=row, col=col)
    return complete_cursor(size)


def advance(grid: Grid, cursor: Cursor) -> Cursor:
    """Move past ``cursor`` to the next empty cell of ``grid``.

    ``grid`` may be either the grid before or after the cursor cell was
    filled; only cells strictly after the cursor are inspected. When no empty
    cell remains the cursor settles on the last cell and is complete, since
    that cell is then filled.
    """

    if cursor.complete:
        return cursor
    size = len(grid)
    for index in range(cursor.index(size) + 1, size * size):
        row, col = divmod(index, size)
        if grid[row][col] == EMPTY:
            return Cursor(row=row, col=col)
    return complete_cursor(size)
