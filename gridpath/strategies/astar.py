"""
A* expansion: distance traveled plus estimated distance to the goal.

The estimate is the graph's octile distance. Moves are orthogonal only,
so the estimate never exceeds the true remaining cost but is loose
whenever the goal is off-axis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.strategies.base import Algorithm, ExpansionContext, ExpansionStrategy
from gridpath.strategies.dijkstra import relax

if TYPE_CHECKING:
    from gridpath.graph import Node


class AStarStrategy(ExpansionStrategy):
    """Relax like Dijkstra; queue new nodes by f = g + h."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.ASTAR

    @property
    def description(self) -> str:
        return "A* (distance traveled + octile estimate to goal)"

    def expand(self, current: Node, context: ExpansionContext) -> int:
        added = 0
        for neighbor in current.neighbors:
            if neighbor in context.explored:
                continue

            relax(current, neighbor, context)

            # f is computed once, when the node first joins the frontier
            if neighbor not in context.frontier:
                estimate = context.graph.distance(neighbor, context.goal)
                neighbor.priority = neighbor.g_cost + estimate
                context.frontier.enqueue(neighbor)
                added += 1
        return added
