"""
Expansion strategy base class for grid search algorithms.

Every algorithm shares the same engine loop (pop the cheapest frontier
node, mark it explored, expand, check for the goal) and differs only in
how the popped node's neighbors are costed and queued. Strategies
implement that one step in expand().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gridpath.errors import UnknownAlgorithm

if TYPE_CHECKING:
    from gridpath.graph import Graph, Node, PriorityQueue


class Algorithm(str, Enum):
    """Search algorithms the engine can run."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BREADTH_FIRST = "bfs"
    GREEDY_BEST_FIRST = "greedy"

    @classmethod
    def parse(cls, value: Algorithm | str) -> Algorithm:
        """
        Accept an Algorithm, its value ("astar") or a spelling of its name.

        Matching ignores case, spaces, dashes and underscores, so "A*",
        "Breadth First" and "GREEDY_BEST_FIRST" all resolve.

        Raises:
            UnknownAlgorithm: If the value names no algorithm
        """
        if isinstance(value, cls):
            return value
        text = "".join(ch for ch in str(value).lower() if ch.isalnum() or ch == "*")
        for algorithm in cls:
            if text in (algorithm.value, algorithm.name.lower().replace("_", "")):
                return algorithm
        if text in _ALIASES:
            return cls(_ALIASES[text])
        available = ", ".join(a.value for a in cls)
        raise UnknownAlgorithm(f"Unknown algorithm '{value}'. Available: {available}")


# Extra spellings accepted by Algorithm.parse (after lowercasing and
# stripping spaces, dashes and underscores)
_ALIASES = {
    "a*": "astar",
    "breadthfirstsearch": "bfs",
    "greedybestfirstsearch": "greedy",
    "gbfs": "greedy",
}


@dataclass
class ExpansionContext:
    """
    Search state handed to a strategy for one expansion.

    Attributes:
        graph: Graph owning every node
        frontier: Open set, ordered by node priority
        explored: Closed set of nodes already popped this run
        goal: Node the search is trying to reach
    """

    graph: Graph
    frontier: PriorityQueue[Node]
    explored: set[Node]
    goal: Node

    def tentative_cost(self, current: Node, neighbor: Node) -> float:
        """Cost of reaching neighbor through current."""
        step = self.graph.distance(current, neighbor)
        return step + current.g_cost + terrain_cost(current)

    def link(self, current: Node, neighbor: Node, cost: float) -> None:
        """Record that neighbor is reached from current at the given cost."""
        neighbor.g_cost = cost
        neighbor.predecessor = self.graph.index_of(current.x, current.y)


def terrain_cost(node: Node) -> int:
    """Extra cost charged for leaving a node, taken from its kind."""
    return int(node.kind)


class ExpansionStrategy(ABC):
    """
    Abstract base class for frontier expansion rules.

    Strategies are stateless apart from what they keep in the nodes
    themselves, so one instance can serve any number of runs.
    """

    @property
    @abstractmethod
    def algorithm(self) -> Algorithm:
        """Which algorithm this strategy implements."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the expansion rule."""
        ...

    @property
    def name(self) -> str:
        return self.algorithm.value

    @abstractmethod
    def expand(self, current: Node, context: ExpansionContext) -> int:
        """
        Cost and enqueue the neighbors of the node just popped.

        Args:
            current: Node removed from the frontier this step
            context: Frontier, explored set and goal of the active run

        Returns:
            Number of nodes added to the frontier
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
