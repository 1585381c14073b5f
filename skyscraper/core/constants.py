"""Shared constants and enumerations for the skyscraper solver."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


EMPTY = 0
EMPTY_CELL = "."
MAX_DIMENSION = 9


class Direction(str, Enum):
    """Compass edges a clue can look from, in file order."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    @property
    def short(self) -> str:
        return self.value[0]


CLUE_ORDER: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)
