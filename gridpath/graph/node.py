"""
Grid node record.

A Node is owned by its Graph for the Graph's whole lifetime. Only the
search bookkeeping fields (g_cost, priority, predecessor) churn between
runs; coordinates never change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


class NodeKind(IntEnum):
    """
    Traversability of a grid cell.

    The integer value doubles as the per-cell traversal cost added during
    expansion. Blocked cells never appear in adjacency lists, so in practice
    only OPEN (cost 0) is ever charged.
    """

    OPEN = 0
    BLOCKED = 1


@dataclass(eq=False)
class Node:
    """
    A single cell of the search grid.

    Nodes compare and hash by identity so they can live in sets and in the
    frontier without their mutable cost fields affecting membership.

    Attributes:
        x: Column index in the owning graph
        y: Row index in the owning graph
        kind: Open or blocked
        g_cost: Distance traveled from the start (inf = unvisited)
        priority: Frontier ordering key for the active search
        predecessor: Arena index of the node we were reached from
        neighbors: Open orthogonal neighbors, in N/E/S/W order
    """

    x: int
    y: int
    kind: NodeKind = NodeKind.OPEN
    g_cost: float = math.inf
    priority: float = 0.0
    predecessor: int | None = None
    neighbors: list[Node] = field(default_factory=list, repr=False)

    @property
    def coord(self) -> tuple[int, int]:
        """(x, y) of this node."""
        return (self.x, self.y)

    @property
    def is_blocked(self) -> bool:
        return self.kind == NodeKind.BLOCKED

    @property
    def visited(self) -> bool:
        """Whether the active search has assigned a cost to this node."""
        return not math.isinf(self.g_cost)

    def reset(self) -> None:
        """Clear search bookkeeping, keeping coordinates and kind."""
        self.g_cost = math.inf
        self.priority = 0.0
        self.predecessor = None
