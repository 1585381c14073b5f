"""Deterministic rule validation with readable failure messages."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ..core.constants import EMPTY, Direction
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .configuration import GridConfiguration, count_visible


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class SolutionValidator:
    """Runs every rule over a configuration and reports each failure.

    :meth:`GridConfiguration.is_valid` stops at the first broken line; this
    validator keeps going so a rejected board can be explained.
    """

    def __init__(self, require_complete: bool = False) -> None:
        self.require_complete = require_complete

    def validate(self, config: GridConfiguration) -> ValidationResult:
        checks: List[Callable[[GridConfiguration], None]] = [
            self._check_values,
            self._check_complete,
            self._check_duplicates,
            self._check_rows,
            self._check_columns,
        ]
        messages: List[str] = []
        for check in checks:
            try:
                check(config)
            except ValidationError as exc:
                LOGGER.debug("Validation failed: %s", exc)
                messages.append(str(exc))
        return ValidationResult(ok=not messages, messages=messages)

    def _check_values(self, config: GridConfiguration) -> None:
        for r, line in enumerate(config.grid):
            for c, value in enumerate(line):
                if not EMPTY <= value <= config.size:
                    raise ValidationError(f"Invalid height {value} at ({r},{c})")

    def _check_complete(self, config: GridConfiguration) -> None:
        if self.require_complete and config.empty_count():
            raise ValidationError(f"{config.empty_count()} cells are still empty")

    def _check_duplicates(self, config: GridConfiguration) -> None:
        problems = []
        for index in range(config.size):
            for label, line in (
                ("Row", config.row_values(index)),
                ("Column", config.column_values(index)),
            ):
                counts = Counter(value for value in line if value != EMPTY)
                repeated = sorted(value for value, count in counts.items() if count > 1)
                if repeated:
                    problems.append(f"{label} {index} repeats {repeated}")
        if problems:
            raise ValidationError("; ".join(problems))

    def _check_rows(self, config: GridConfiguration) -> None:
        self._check_lines(
            config,
            [config.row_values(index) for index in range(config.size)],
            "Row",
            (Direction.WEST, Direction.EAST),
        )

    def _check_columns(self, config: GridConfiguration) -> None:
        self._check_lines(
            config,
            [config.column_values(index) for index in range(config.size)],
            "Column",
            (Direction.NORTH, Direction.SOUTH),
        )

    @staticmethod
    def _check_lines(
        config: GridConfiguration,
        lines: Sequence[Tuple[int, ...]],
        label: str,
        directions: Tuple[Direction, Direction],
    ) -> None:
        near, far = directions
        problems = []
        for index, line in enumerate(lines):
            if EMPTY in line:
                continue
            for direction, view in ((near, line), (far, line[::-1])):
                seen = count_visible(view)
                clue = config.clues.edge(direction, index)
                if seen != clue:
                    problems.append(
                        f"{label} {index} seen from {direction.value} shows {seen} buildings, clue is {clue}"
                    )
        if problems:
            raise ValidationError("; ".join(problems))
