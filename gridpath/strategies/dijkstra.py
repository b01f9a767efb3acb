"""
Dijkstra expansion: uniform-cost search ordered by distance traveled.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from gridpath.strategies.base import Algorithm, ExpansionContext, ExpansionStrategy

if TYPE_CHECKING:
    from gridpath.graph import Node


def relax(current: Node, neighbor: Node, context: ExpansionContext) -> bool:
    """
    Re-route neighbor through current if that is cheaper.

    Returns:
        True if the neighbor's cost and predecessor were updated
    """
    cost = context.tentative_cost(current, neighbor)
    if math.isinf(neighbor.g_cost) or cost < neighbor.g_cost:
        context.link(current, neighbor, cost)
        return True
    return False


class DijkstraStrategy(ExpansionStrategy):
    """
    Relax every unexplored neighbor; queue it by g-cost on first discovery.

    A node already in the frontier keeps the priority it was queued with
    even if a later relaxation lowers its g-cost.
    """

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.DIJKSTRA

    @property
    def description(self) -> str:
        return "Dijkstra (cheapest distance traveled first)"

    def expand(self, current: Node, context: ExpansionContext) -> int:
        added = 0
        for neighbor in current.neighbors:
            if neighbor in context.explored:
                continue

            relax(current, neighbor, context)

            if neighbor not in context.frontier:
                neighbor.priority = neighbor.g_cost
                context.frontier.enqueue(neighbor)
                added += 1
        return added
