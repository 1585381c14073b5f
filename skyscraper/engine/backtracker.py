"""Generic search driver over the configuration contract.

The driver never inspects the grid; it only calls ``is_goal``,
``successors`` and ``is_valid``. Any object offering those three methods
can be searched.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Protocol, Sequence

from ..core.exceptions import SearchLimitExceeded
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

STRATEGIES = ("dfs", "bfs")


class Configuration(Protocol):
    def is_goal(self) -> bool: ...

    def successors(self) -> Sequence["Configuration"]: ...

    def is_valid(self) -> bool: ...


@dataclass
class SearchConfig:
    """Configuration values driving the search."""

    strategy: str = "dfs"
    validate_successors: bool = True
    max_nodes: Optional[int] = None
    progress_every: int = 10_000

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {self.strategy!r}; expected one of {STRATEGIES}")
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError("max_nodes must be positive")
        if self.progress_every < 1:
            raise ValueError("progress_every must be positive")


@dataclass
class SearchResult:
    solution: Optional[Configuration]
    nodes_explored: int
    elapsed_seconds: float
    exhausted: bool
    strategy: str = "dfs"

    @property
    def solved(self) -> bool:
        return self.solution is not None


class Backtracker:
    """Depth-first (default) or breadth-first search for a goal state.

    Depth-first search keeps successors in the order they are produced, so
    the first solution returned is the one reached by always trying the
    smallest accepted candidate first.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()

    def solve(self, start: Configuration) -> SearchResult:
        started = time.perf_counter()
        frontier: Deque[Configuration] = deque([start])
        nodes = 0
        depth_first = self.config.strategy == "dfs"

        if not start.is_valid():
            LOGGER.info("Initial configuration is invalid; nothing to search")
            return self._result(None, nodes, started, exhausted=True)

        while frontier:
            current = frontier.pop() if depth_first else frontier.popleft()
            nodes += 1
            if self.config.max_nodes is not None and nodes > self.config.max_nodes:
                raise SearchLimitExceeded(
                    f"Search explored more than {self.config.max_nodes} configurations"
                )
            if nodes % self.config.progress_every == 0:
                LOGGER.debug("Explored %d configurations, frontier=%d", nodes, len(frontier))

            if current.is_goal():
                if current.is_valid():
                    LOGGER.info("Solution found after %d configurations", nodes)
                    return self._result(current, nodes, started, exhausted=False)
                continue

            children = [
                child
                for child in current.successors()
                if not self.config.validate_successors or child.is_valid()
            ]
            if depth_first:
                frontier.extend(reversed(children))
            else:
                frontier.extend(children)

        LOGGER.info("Search exhausted after %d configurations; no solution", nodes)
        return self._result(None, nodes, started, exhausted=True)

    def _result(
        self,
        solution: Optional[Configuration],
        nodes: int,
        started: float,
        *,
        exhausted: bool,
    ) -> SearchResult:
        return SearchResult(
            solution=solution,
            nodes_explored=nodes,
            elapsed_seconds=time.perf_counter() - started,
            exhausted=exhausted,
            strategy=self.config.strategy,
        )


def solve(start: Configuration, config: Optional[SearchConfig] = None) -> Optional[Configuration]:
    """Convenience function returning the first solution or ``None``."""

    return Backtracker(config).solve(start).solution
