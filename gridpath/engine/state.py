"""
Search status and result records surfaced to hosts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SearchStatus(Enum):
    """Lifecycle of one search run."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.SUCCEEDED, SearchStatus.FAILED)


@dataclass
class StepReport:
    """
    What happened during a single call to SearchEngine.step().

    Attributes:
        status: Engine status after the step
        iteration: 1-indexed number of frontier pops so far
        current: Coordinate popped this step (None if the frontier was empty)
        added: Nodes added to the frontier by this step's expansion
        frontier_size: Frontier size after the step
        explored_size: Explored-set size after the step
        elapsed_seconds: Wall time since initialize()
    """

    status: SearchStatus
    iteration: int
    current: tuple[int, int] | None
    added: int
    frontier_size: int
    explored_size: int
    elapsed_seconds: float


@dataclass
class SearchResult:
    """
    Complete record of a search run.

    Attributes:
        algorithm: Algorithm value (e.g. "astar")
        start: Start coordinate
        goal: Goal coordinate
        status: Final (or current, if stopped early) status
        path: Coordinates from start to goal; empty unless succeeded
        iterations: Number of frontier pops
        explored_count: Size of the explored set
        frontier_count: Nodes still in the frontier when the run ended
        path_cost: Goal g-cost for a successful run, else None
        elapsed_seconds: Wall time from initialize() to the last step
        timestamp: When the result was recorded
    """

    algorithm: str
    start: tuple[int, int]
    goal: tuple[int, int]
    status: SearchStatus
    path: list[tuple[int, int]]
    iterations: int
    explored_count: int
    frontier_count: int
    path_cost: float | None
    elapsed_seconds: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def succeeded(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED

    @property
    def path_length(self) -> int:
        """Number of nodes on the path (including start and goal)."""
        return len(self.path)

    @property
    def moves(self) -> int:
        """Number of moves along the path (0 when there is no path)."""
        return max(len(self.path) - 1, 0)
