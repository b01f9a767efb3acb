"""
Greedy best-first expansion: always chase the node that looks closest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.strategies.base import Algorithm, ExpansionContext, ExpansionStrategy

if TYPE_CHECKING:
    from gridpath.graph import Node


class GreedyBestFirstStrategy(ExpansionStrategy):
    """
    Queue unseen neighbors by estimated distance to the goal.

    Costs and predecessors are still recorded so the path can be rebuilt,
    but they never influence the order of expansion.
    """

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.GREEDY_BEST_FIRST

    @property
    def description(self) -> str:
        return "Greedy best-first (heuristic only, fast but not optimal)"

    def expand(self, current: Node, context: ExpansionContext) -> int:
        added = 0
        for neighbor in current.neighbors:
            if neighbor in context.explored or neighbor in context.frontier:
                continue

            context.link(current, neighbor, context.tentative_cost(current, neighbor))
            neighbor.priority = context.graph.distance(neighbor, context.goal)
            context.frontier.enqueue(neighbor)
            added += 1
        return added
