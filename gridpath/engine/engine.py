"""
Stepwise search engine for grid graphs.

The engine does one unit of work per step() call: pop the cheapest
frontier node, mark it explored, expand its neighbors with the active
strategy and check whether the goal has been reached. Hosts decide when
to call step() again, which is how animated boards pace a search and how
tests run one to completion without any timing dependency.

Usage:
    engine = SearchEngine(graph)
    engine.initialize((0, 0), (9, 4), "astar")
    while not engine.status().is_terminal:
        engine.step()
    engine.path()
"""

from __future__ import annotations

import logging
import time

from gridpath.config import DEFAULT_ALGORITHM
from gridpath.engine.state import SearchResult, SearchStatus, StepReport
from gridpath.errors import InvalidState, OutOfBounds
from gridpath.graph import Graph, Node, PriorityQueue
from gridpath.strategies import (
    Algorithm,
    ExpansionContext,
    ExpansionStrategy,
    get_strategy,
)

logger = logging.getLogger(__name__)

# Start/goal may be given as a Node of the graph or as an (x, y) pair
Endpoint = Node | tuple[int, int]


class SearchEngine:
    """
    Runs one pathfinding search at a time over a Graph.

    The engine owns the frontier, the explored set and the path of the
    current run. Re-initializing discards all three and starts over; there
    is nothing else to release.

    Termination happens as soon as the goal enters the frontier, not when
    it is popped. For Dijkstra and A* this can report a path before the
    goal's cost is final.
    """

    def __init__(self, graph: Graph) -> None:
        """
        Args:
            graph: Graph to search; the engine mutates only node search fields
        """
        self._graph = graph
        self._strategy: ExpansionStrategy | None = None
        self._start: Node | None = None
        self._goal: Node | None = None

        self._frontier: PriorityQueue[Node] = PriorityQueue(key=lambda node: node.priority)
        self._explored: set[Node] = set()
        self._explored_order: list[Node] = []
        self._path: list[Node] = []

        self._status = SearchStatus.IDLE
        self._iterations = 0
        self._started_at = 0.0
        self._elapsed = 0.0

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def initialize(
        self,
        start: Endpoint,
        goal: Endpoint,
        algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    ) -> None:
        """
        Reset search state and queue the start node.

        Legal in any state; an in-flight run is simply abandoned.

        Args:
            start: Start node or (x, y)
            goal: Goal node or (x, y)
            algorithm: Algorithm member or name

        Raises:
            OutOfBounds: If start or goal is not a cell of this graph
            UnknownAlgorithm: If the algorithm name is unknown
        """
        strategy = get_strategy(algorithm)
        start_node = self._resolve(start)
        goal_node = self._resolve(goal)

        self._graph.reset_search_state_only()
        self._frontier.clear()
        self._explored = set()
        self._explored_order = []
        self._path = []

        self._strategy = strategy
        self._start = start_node
        self._goal = goal_node
        self._iterations = 0
        self._elapsed = 0.0

        start_node.g_cost = 0.0
        start_node.priority = 0.0
        self._frontier.enqueue(start_node)

        self._status = SearchStatus.RUNNING
        self._started_at = time.perf_counter()

        logger.info(
            f"Starting {strategy.name} search: {start_node.coord} -> {goal_node.coord} "
            f"on {self._graph.width}x{self._graph.height} grid"
        )

    def step(self) -> StepReport:
        """
        Pop one frontier node and expand it.

        Returns:
            StepReport describing the step

        Raises:
            InvalidState: If no search is running
        """
        if self._status is not SearchStatus.RUNNING:
            raise InvalidState(f"step() requires a running search, status is {self._status.value}")

        if not self._frontier:
            self._elapsed = time.perf_counter() - self._started_at
            self._status = SearchStatus.FAILED
            logger.warning(
                f"No path from {self._start.coord} to {self._goal.coord} "
                f"({len(self._explored)} nodes explored)"
            )
            return self._report(current=None, added=0)

        current = self._frontier.dequeue()
        self._iterations += 1
        self._elapsed = time.perf_counter() - self._started_at

        if current not in self._explored:
            self._explored.add(current)
            self._explored_order.append(current)

        # Only reachable when start == goal: the goal otherwise ends the
        # search as soon as it is queued, before it can be popped.
        if current is self._goal:
            self._finish(current)
            return self._report(current=current, added=0)

        context = ExpansionContext(
            graph=self._graph,
            frontier=self._frontier,
            explored=self._explored,
            goal=self._goal,
        )
        added = self._strategy.expand(current, context)

        logger.debug(
            f"Step {self._iterations}: expanded {current.coord}, +{added} "
            f"(frontier={len(self._frontier)}, explored={len(self._explored)})"
        )

        if self._goal in self._frontier:
            self._finish(self._goal)

        return self._report(current=current, added=added)

    def run_to_completion(self, max_steps: int | None = None) -> SearchResult:
        """
        Call step() until the search succeeds or fails.

        Args:
            max_steps: Optional cap on steps; the run stays Running if hit

        Returns:
            SearchResult for the run

        Raises:
            InvalidState: If no search is running
        """
        if self._status is not SearchStatus.RUNNING:
            raise InvalidState(
                f"run_to_completion() requires a running search, status is {self._status.value}"
            )

        steps = 0
        while not self._status.is_terminal:
            if max_steps is not None and steps >= max_steps:
                logger.warning(f"Stopped after {steps} steps without reaching a result")
                break
            self.step()
            steps += 1

        return self.result()

    def _finish(self, goal: Node) -> None:
        self._path = self._reconstruct_path(goal)
        self._status = SearchStatus.SUCCEEDED
        logger.info(
            f"Found path ({len(self._path)} nodes, cost {goal.g_cost:.1f}) "
            f"after {self._iterations} iterations in {self._elapsed:.3f}s"
        )

    def _reconstruct_path(self, end: Node) -> list[Node]:
        """Follow predecessor links back from end; return start -> end."""
        path = [end]
        current = self._graph.predecessor_of(end)
        while current is not None:
            path.append(current)
            current = self._graph.predecessor_of(current)
        path.reverse()
        return path

    def _resolve(self, endpoint: Endpoint) -> Node:
        if isinstance(endpoint, Node):
            if endpoint not in self._graph:
                raise OutOfBounds(f"{endpoint!r} does not belong to this graph")
            return endpoint
        x, y = endpoint
        return self._graph.node_at(x, y)

    def _report(self, current: Node | None, added: int) -> StepReport:
        return StepReport(
            status=self._status,
            iteration=self._iterations,
            current=current.coord if current is not None else None,
            added=added,
            frontier_size=len(self._frontier),
            explored_size=len(self._explored),
            elapsed_seconds=self._elapsed,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def algorithm(self) -> Algorithm | None:
        """Algorithm of the current run (None before the first initialize)."""
        return self._strategy.algorithm if self._strategy is not None else None

    @property
    def start(self) -> Node | None:
        return self._start

    @property
    def goal(self) -> Node | None:
        return self._goal

    def status(self) -> SearchStatus:
        return self._status

    def frontier_contents(self) -> list[Node]:
        """Open set in heap order (a copy; the frontier is not touched)."""
        return self._frontier.to_list()

    def explored_contents(self) -> list[Node]:
        """Closed set in the order nodes were explored."""
        return list(self._explored_order)

    def path(self) -> list[Node]:
        """Start -> goal path; empty unless the search succeeded."""
        return list(self._path)

    def path_cost(self) -> float | None:
        """Goal g-cost of a successful run, else None."""
        if self._status is not SearchStatus.SUCCEEDED:
            return None
        return self._goal.g_cost

    def iteration_count(self) -> int:
        return self._iterations

    def elapsed_time(self) -> float:
        """Seconds from initialize() to the most recent step."""
        return self._elapsed

    def result(self) -> SearchResult:
        """
        Snapshot the current run as a SearchResult.

        Raises:
            InvalidState: If initialize() has never been called
        """
        if self._status is SearchStatus.IDLE:
            raise InvalidState("No search has been initialized")

        return SearchResult(
            algorithm=self._strategy.name,
            start=self._start.coord,
            goal=self._goal.coord,
            status=self._status,
            path=[node.coord for node in self._path],
            iterations=self._iterations,
            explored_count=len(self._explored),
            frontier_count=len(self._frontier),
            path_cost=self.path_cost(),
            elapsed_seconds=self._elapsed,
        )

    def __repr__(self) -> str:
        name = self._strategy.name if self._strategy is not None else None
        return f"SearchEngine(algorithm={name!r}, status={self._status.value!r})"
