"""Value types shared by the search engine, loader and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .constants import CLUE_ORDER, Direction
from .exceptions import MalformedPuzzle


Grid = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class ClueSet:
    """Visibility clues for the four edges of one puzzle.

    North/South clues are indexed by column, East/West clues by row. The set
    is frozen and shared by every configuration derived from the puzzle.
    """

    north: Tuple[int, ...]
    east: Tuple[int, ...]
    south: Tuple[int, ...]
    west: Tuple[int, ...]

    @classmethod
    def from_flat(cls, values: Iterable[int], size: int) -> "ClueSet":
        flat = tuple(values)
        if len(flat) != 4 * size:
            raise MalformedPuzzle(
                f"Expected {4 * size} clue values for size {size}, got {len(flat)}"
            )
        return cls(
            north=flat[0:size],
            east=flat[size:2 * size],
            south=flat[2 * size:3 * size],
            west=flat[3 * size:4 * size],
        )

    @property
    def size(self) -> int:
        return len(self.north)

    def side(self, direction: Direction) -> Tuple[int, ...]:
        return getattr(self, direction.value.lower())

    def edge(self, direction: Direction, index: int) -> int:
        return self.side(direction)[index]

    def flat(self) -> Tuple[int, ...]:
        return self.north + self.east + self.south + self.west

    def to_jsonable(self) -> dict:
        return {direction.value.lower(): list(self.side(direction)) for direction in CLUE_ORDER}


@dataclass(frozen=True)
class Cursor:
    """Position of the next cell to fill, in row-major order."""

    row: int
    col: int
    complete: bool = False

    def index(self, size: int) -> int:
        return self.row * size + self.col

    def __str__(self) -> str:
        suffix = " complete" if self.complete else ""
        return f"[{self.row}:{self.col}{suffix}]"


@dataclass(frozen=True)
class Puzzle:
    """A parsed puzzle: dimension, flat clue sequence and initial grid."""

    size: int
    clues: Tuple[int, ...]
    grid: Grid
