"""Reading puzzle files.

A puzzle file is a stream of whitespace separated integers::

    DIM                 # board dimension (0-9)
    lookNS              # DIM values, North clues left to right
    lookEW              # DIM values, East clues top to bottom
    lookSN              # DIM values, South clues left to right
    lookWE              # DIM values, West clues top to bottom
    row 1 values        # 0 for empty, 1-DIM otherwise
    ...
    row DIM values

Anything after a ``#`` on a line is ignored. An empty file describes the
degenerate 0x0 board.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from ..core.constants import MAX_DIMENSION
from ..core.exceptions import MalformedPuzzle, PuzzleFormatError
from ..core.models import Puzzle
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_puzzle(text: str) -> Puzzle:
    """Parse puzzle text into a :class:`Puzzle`.

    Range checks beyond the dimension are left to
    :meth:`GridConfiguration.from_puzzle`.
    """

    values = _tokenize(text)
    if not values:
        return Puzzle(size=0, clues=(), grid=())

    size = values[0]
    if not 0 <= size <= MAX_DIMENSION:
        raise MalformedPuzzle(f"Grid dimension must be in [0, {MAX_DIMENSION}], got {size}")

    expected = 1 + 4 * size + size * size
    if len(values) < expected:
        raise PuzzleFormatError(
            f"Puzzle of size {size} needs {expected - 1} values after the dimension, "
            f"got {len(values) - 1}"
        )
    if len(values) > expected:
        raise PuzzleFormatError(f"Unexpected trailing values after {expected} integers")

    clues = tuple(values[1:1 + 4 * size])
    cells = values[1 + 4 * size:]
    grid = tuple(tuple(cells[r * size:(r + 1) * size]) for r in range(size))
    return Puzzle(size=size, clues=clues, grid=grid)


def load_puzzle(path: Union[Path, str]) -> Puzzle:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleFormatError(f"Cannot read puzzle file {path}: {exc}") from exc
    puzzle = parse_puzzle(text)
    LOGGER.info("Loaded %dx%d puzzle from %s", puzzle.size, puzzle.size, path)
    return puzzle


def _tokenize(text: str) -> List[int]:
    values: List[int] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        for token in line.split("#", 1)[0].split():
            try:
                values.append(int(token))
            except ValueError as exc:
                raise PuzzleFormatError(f"Line {line_no}: expected an integer, got {token!r}") from exc
    return values
