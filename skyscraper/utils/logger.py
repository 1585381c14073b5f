"""Logging setup shared by the search driver, the CP-SAT model and the CLI."""

from __future__ import annotations

import logging
from typing import Optional, Union

DEFAULT_LOGGER = "skyscraper"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Send solver logs to stderr at ``level``.

    ``level`` may be a number or a name such as ``"debug"``. The search
    logs progress every few thousand configurations at DEBUG; INFO carries
    only the start, solution and exhaustion summaries.
    """

    resolved = _resolve_level(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the solver's namespace, installing the handler once."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or DEFAULT_LOGGER)
