"""Search state for the skyscraper puzzle.

A :class:`GridConfiguration` is an immutable snapshot of the board plus the
cursor pointing at the next cell to fill. Search drivers only rely on
``is_goal``, ``successors`` and ``is_valid``; backtracking is simply
dropping a configuration, since successors never share mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple, Union

from ..core.constants import EMPTY, MAX_DIMENSION, Direction
from ..core.exceptions import CursorMisuse, MalformedPuzzle
from ..core.models import ClueSet, Cursor, Grid, Puzzle
from ..utils.pretty import format_configuration, format_framed
from .cursor import advance, first_empty


ClueInput = Union[ClueSet, Sequence[int], Sequence[Sequence[int]]]


@dataclass(frozen=True)
class GridConfiguration:
    """One node of the search: grid, shared clues and cursor."""

    size: int
    clues: ClueSet
    grid: Grid
    cursor: Cursor

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_puzzle(
        cls,
        size: int,
        clues: ClueInput,
        initial_grid: Sequence[Sequence[int]],
    ) -> "GridConfiguration":
        """Build the initial configuration, validating every input value."""

        if not _is_int(size) or not 0 <= size <= MAX_DIMENSION:
            raise MalformedPuzzle(f"Grid dimension must be in [0, {MAX_DIMENSION}], got {size!r}")
        clue_set = _coerce_clues(clues, size)
        for index, value in enumerate(clue_set.flat()):
            if not _is_int(value) or not 0 <= value <= size:
                raise MalformedPuzzle(f"Clue #{index} out of range [0, {size}]: {value!r}")
        grid = _coerce_grid(initial_grid, size)
        return cls(size=size, clues=clue_set, grid=grid, cursor=first_empty(grid))

    @classmethod
    def from_puzzle_data(cls, puzzle: Puzzle) -> "GridConfiguration":
        return cls.from_puzzle(puzzle.size, puzzle.clues, puzzle.grid)

    @classmethod
    def from_file(cls, path: Union[Path, str]) -> "GridConfiguration":
        from ..io.puzzle_file import load_puzzle

        return cls.from_puzzle_data(load_puzzle(path))

    def clone_with_cursor_and_value(self, value: int) -> "GridConfiguration":
        """Copy the grid with ``value`` at the cursor and advance the cursor.

        No legality check is done here; :meth:`successors` filters first.
        """

        if self.cursor.complete:
            raise CursorMisuse(f"Cannot place {value} at complete cursor {self.cursor}")
        if not 1 <= value <= self.size:
            raise ValueError(f"Height must be in [1, {self.size}], got {value}")
        row, col = self.cursor.row, self.cursor.col
        rows = list(self.grid)
        rows[row] = rows[row][:col] + (value,) + rows[row][col + 1:]
        grid = tuple(rows)
        return GridConfiguration(
            size=self.size,
            clues=self.clues,
            grid=grid,
            cursor=advance(grid, self.cursor),
        )

    # ------------------------------------------------------------------
    # Search contract
    # ------------------------------------------------------------------
    def is_goal(self) -> bool:
        return self.cursor.complete

    def successors(self) -> List["GridConfiguration"]:
        """Legal children in ascending height order; empty once complete."""

        return list(self.iter_successors())

    def iter_successors(self) -> Iterator["GridConfiguration"]:
        if self.cursor.complete:
            return
        for value in range(1, self.size + 1):
            if self._placement_is_legal(value):
                yield self.clone_with_cursor_and_value(value)

    def is_valid(self) -> bool:
        """Check every fully filled row and column against its clues.

        Lines that still hold an empty cell are skipped, so the result tracks
        the cursor's progress: rows above it are always checked, columns once
        the last row has been reached.
        """

        for index in range(self.size):
            row = self.row_values(index)
            if EMPTY not in row and not _line_matches(
                row,
                self.clues.edge(Direction.WEST, index),
                self.clues.edge(Direction.EAST, index),
            ):
                return False
            column = self.column_values(index)
            if EMPTY not in column and not _line_matches(
                column,
                self.clues.edge(Direction.NORTH, index),
                self.clues.edge(Direction.SOUTH, index),
            ):
                return False
        return True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def row_values(self, row: int) -> Tuple[int, ...]:
        return self.grid[row]

    def column_values(self, col: int) -> Tuple[int, ...]:
        return tuple(line[col] for line in self.grid)

    def empty_count(self) -> int:
        return sum(line.count(EMPTY) for line in self.grid)

    def render(self) -> str:
        return format_configuration(self)

    def render_framed(self) -> str:
        return format_framed(self)

    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "clues": self.clues.to_jsonable(),
            "grid": [list(line) for line in self.grid],
            "cursor": {
                "row": self.cursor.row,
                "col": self.cursor.col,
                "complete": self.cursor.complete,
            },
        }

    def __str__(self) -> str:
        return self.render()

    # ------------------------------------------------------------------
    # Placement pruning
    # ------------------------------------------------------------------
    def _placement_is_legal(self, value: int) -> bool:
        row, col = self.cursor.row, self.cursor.col
        current_row = self.row_values(row)
        current_col = self.column_values(col)
        if value in current_row or value in current_col:
            return False

        # Only West and North can be falsified before the line is full.
        candidate_row = current_row[:col] + (value,) + current_row[col + 1:]
        if _prefix_overflows(candidate_row, self.clues.edge(Direction.WEST, row)):
            return False
        candidate_col = current_col[:row] + (value,) + current_col[row + 1:]
        return not _prefix_overflows(candidate_col, self.clues.edge(Direction.NORTH, col))


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_clues(clues: ClueInput, size: int) -> ClueSet:
    if isinstance(clues, ClueSet):
        if clues.size != size or any(len(clues.side(d)) != size for d in Direction):
            raise MalformedPuzzle(f"Clue set does not match grid size {size}")
        return clues
    try:
        values = list(clues)
    except TypeError as exc:
        raise MalformedPuzzle(f"Clues must be a sequence, got {type(clues).__name__}") from exc
    if len(values) == 4 and all(not _is_int(side) for side in values):
        flat: List[int] = []
        for side in values:
            try:
                side = list(side)
            except TypeError as exc:
                raise MalformedPuzzle(
                    f"Clue side must be a sequence of {size} values, got {side!r}"
                ) from exc
            if len(side) != size:
                raise MalformedPuzzle(f"Each clue side needs {size} values, got {len(side)}")
            flat.extend(side)
        values = flat
    return ClueSet.from_flat(values, size)


def _coerce_grid(initial_grid: Sequence[Sequence[int]], size: int) -> Grid:
    rows = [tuple(line) for line in initial_grid]
    if len(rows) != size:
        raise MalformedPuzzle(f"Expected {size} grid rows, got {len(rows)}")
    for r, line in enumerate(rows):
        if len(line) != size:
            raise MalformedPuzzle(f"Row {r} has {len(line)} values, expected {size}")
        for c, value in enumerate(line):
            if not _is_int(value) or not EMPTY <= value <= size:
                raise MalformedPuzzle(f"Cell ({r},{c}) out of range [0, {size}]: {value!r}")
    return tuple(rows)


def _prefix_overflows(line: Sequence[int], clue: int) -> bool:
    """True if the filled prefix of ``line`` already shows more than ``clue``.

    The scan stops at the first empty cell: givens further along may still be
    hidden by heights that are not placed yet.
    """

    tallest = 0
    visible = 0
    for value in line:
        if value == EMPTY:
            break
        if value > tallest:
            tallest = value
            visible += 1
            if visible > clue:
                return True
    return False


def _line_matches(line: Sequence[int], near_clue: int, far_clue: int) -> bool:
    """Scan a full line from both ends and compare with its two clues."""

    if len(set(line)) != len(line):
        return False
    last = len(line) - 1
    near_max = far_max = 0
    near_seen = far_seen = 0
    for step in range(len(line)):
        near_value, far_value = line[step], line[last - step]
        if near_value >= near_max:
            near_max = near_value
            near_seen += 1
        if far_value >= far_max:
            far_max = far_value
            far_seen += 1
        if near_seen > near_clue or far_seen > far_clue:
            return False
    return near_seen == near_clue and far_seen == far_clue


def count_visible(line: Sequence[int]) -> int:
    """Number of buildings visible looking along ``line`` from its start."""

    tallest = 0
    visible = 0
    for value in line:
        if value > tallest:
            tallest = value
            visible += 1
    return visible
