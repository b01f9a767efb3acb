"""
Dense 2D grid graph.

The Graph owns every Node in a flat arena indexed by ``y * width + x``.
Nodes refer back to each other only through arena indices (predecessor)
or through neighbor lists the Graph rebuilds itself, so resetting or
re-blocking cells never leaves dangling state behind.

Usage:
    graph = Graph.build(10, 5)
    graph.set_blocked(3, 2, True)
    graph.neighbors_of(3, 1)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import numpy as np

from gridpath.config import DIAGONAL_COST, NEIGHBOR_OFFSETS, STRAIGHT_COST
from gridpath.errors import InvalidDimensions, InvalidLayout, OutOfBounds
from gridpath.graph.node import Node, NodeKind

logger = logging.getLogger(__name__)

# kind_at may answer with a NodeKind or with a plain "is blocked" flag
KindSource = Callable[[int, int], "NodeKind | bool"]


def octile_distance(dx: int, dy: int) -> float:
    """
    Octile-style estimate for a displacement of (dx, dy) cells.

    Diagonal steps cost DIAGONAL_COST and the remaining straight steps cost
    STRAIGHT_COST. Movement on the grid is orthogonal only, so this
    underestimates the true cost whenever both dx and dy are non-zero.
    """
    dx, dy = abs(dx), abs(dy)
    low, high = min(dx, dy), max(dx, dy)
    return DIAGONAL_COST * low + STRAIGHT_COST * (high - low)


class Graph:
    """
    Owner of all grid Nodes and their adjacency.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    def __init__(self, width: int, height: int, nodes: list[Node]) -> None:
        """
        Wrap a prepared arena. Use Graph.build() or Graph.from_mask() instead.

        Args:
            width: Number of columns
            height: Number of rows
            nodes: Arena of width * height nodes in row-major (y, x) order
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        if len(nodes) != width * height:
            raise InvalidLayout(
                f"Expected {width * height} nodes for a {width}x{height} grid, got {len(nodes)}"
            )
        self.width = width
        self.height = height
        self._nodes = nodes
        self._rebuild_adjacency()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        kind_at: KindSource | None = None,
    ) -> Graph:
        """
        Allocate a width x height grid.

        Args:
            width: Number of columns (must be positive)
            height: Number of rows (must be positive)
            kind_at: Optional callback giving the kind of cell (x, y).
                Returning a bool is read as "is blocked".

        Returns:
            A new Graph with adjacency computed

        Raises:
            InvalidDimensions: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)

        nodes = []
        for y in range(height):
            for x in range(width):
                kind = NodeKind.OPEN
                if kind_at is not None:
                    kind = _as_kind(kind_at(x, y))
                nodes.append(Node(x, y, kind))

        graph = cls(width, height, nodes)
        logger.debug(f"Built {width}x{height} graph ({graph.blocked_count()} blocked)")
        return graph

    @classmethod
    def from_mask(cls, mask: np.ndarray) -> Graph:
        """
        Build a graph from a boolean blocked mask indexed ``mask[x, y]``.

        Raises:
            InvalidLayout: If the mask is not two-dimensional
            InvalidDimensions: If either axis is empty
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 2:
            raise InvalidLayout(f"Blocked mask must be 2D, got shape {mask.shape}")
        width, height = mask.shape
        return cls.build(width, height, lambda x, y: bool(mask[x, y]))

    # -------------------------------------------------------------------------
    # Arena accessors
    # -------------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> int:
        """Arena index of (x, y)."""
        self._check_bounds(x, y)
        return y * self.width + x

    def node_at(self, x: int, y: int) -> Node:
        """
        Get the node at (x, y).

        Raises:
            OutOfBounds: If (x, y) is outside the grid
        """
        return self._nodes[self.index_of(x, y)]

    def node_by_index(self, index: int) -> Node:
        """
        Get a node by arena index.

        Raises:
            OutOfBounds: If the index is outside the arena
        """
        if not 0 <= index < len(self._nodes):
            raise OutOfBounds(f"Arena index {index} outside 0..{len(self._nodes) - 1}")
        return self._nodes[index]

    def predecessor_of(self, node: Node) -> Node | None:
        """Resolve a node's predecessor index back to a Node."""
        if node.predecessor is None:
            return None
        return self.node_by_index(node.predecessor)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, Node) or not self.in_bounds(node.x, node.y):
            return False
        return self._nodes[node.y * self.width + node.x] is node

    # -------------------------------------------------------------------------
    # Adjacency
    # -------------------------------------------------------------------------

    def neighbors_of(self, x: int, y: int) -> list[Node]:
        """
        Open orthogonal neighbors of (x, y) in N, E, S, W order.

        Raises:
            OutOfBounds: If (x, y) is outside the grid
        """
        return list(self.node_at(x, y).neighbors)

    def _compute_neighbors(self, x: int, y: int) -> list[Node]:
        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            neighbor = self._nodes[ny * self.width + nx]
            if neighbor.kind != NodeKind.BLOCKED:
                neighbors.append(neighbor)
        return neighbors

    def _rebuild_adjacency(self) -> None:
        # Blocked cells keep a list too, so a search started on one can leave it
        for node in self._nodes:
            node.neighbors = self._compute_neighbors(node.x, node.y)

    def set_blocked(self, x: int, y: int, blocked: bool) -> None:
        """
        Block or open the cell at (x, y) and rebuild adjacency.

        Raises:
            OutOfBounds: If (x, y) is outside the grid
        """
        node = self.node_at(x, y)
        kind = NodeKind.BLOCKED if blocked else NodeKind.OPEN
        if node.kind == kind:
            return
        node.kind = kind
        self._rebuild_adjacency()
        logger.debug(f"Cell ({x}, {y}) is now {kind.name.lower()}")

    def toggle_blocked(self, x: int, y: int) -> NodeKind:
        """Flip the cell at (x, y) between open and blocked; return the new kind."""
        node = self.node_at(x, y)
        self.set_blocked(x, y, node.kind == NodeKind.OPEN)
        return node.kind

    def blocked_mask(self) -> np.ndarray:
        """Current layout as a boolean array indexed ``[x, y]`` (True = blocked)."""
        mask = np.zeros((self.width, self.height), dtype=bool)
        for node in self._nodes:
            mask[node.x, node.y] = node.kind == NodeKind.BLOCKED
        return mask

    def blocked_count(self) -> int:
        return sum(1 for node in self._nodes if node.kind == NodeKind.BLOCKED)

    def open_count(self) -> int:
        return len(self._nodes) - self.blocked_count()

    # -------------------------------------------------------------------------
    # Distance
    # -------------------------------------------------------------------------

    def distance(self, a: Node, b: Node) -> float:
        """Step cost and heuristic between two nodes (octile estimate)."""
        return octile_distance(a.x - b.x, a.y - b.y)

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset_all(self) -> None:
        """Clear search state and open every cell (a fresh board)."""
        for node in self._nodes:
            node.reset()
            node.kind = NodeKind.OPEN
        self._rebuild_adjacency()
        logger.debug("Board cleared")

    def reset_search_state_only(self) -> None:
        """Clear search state but keep the obstacle layout."""
        for node in self._nodes:
            node.reset()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside the {self.width}x{self.height} grid")

    def __repr__(self) -> str:
        return f"Graph(width={self.width}, height={self.height}, blocked={self.blocked_count()})"


def _as_kind(value: NodeKind | bool) -> NodeKind:
    if isinstance(value, NodeKind):
        return value
    return NodeKind.BLOCKED if value else NodeKind.OPEN
