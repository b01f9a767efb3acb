"""
Breadth-first expansion.

The frontier is a priority queue, so FIFO order is emulated by giving each
newly discovered node a priority equal to the explored-set size at the
moment it is queued. Nodes discovered while expanding the same parent tie,
and the heap's tie-break rule keeps them in neighbor order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.strategies.base import Algorithm, ExpansionContext, ExpansionStrategy

if TYPE_CHECKING:
    from gridpath.graph import Node


class BreadthFirstStrategy(ExpansionStrategy):
    """Queue every unseen neighbor once, in discovery order."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.BREADTH_FIRST

    @property
    def description(self) -> str:
        return "Breadth-first search (fewest moves, ignores cost)"

    def expand(self, current: Node, context: ExpansionContext) -> int:
        added = 0
        for neighbor in current.neighbors:
            if neighbor in context.explored or neighbor in context.frontier:
                continue

            context.link(current, neighbor, context.tentative_cost(current, neighbor))
            neighbor.priority = len(context.explored)
            context.frontier.enqueue(neighbor)
            added += 1
        return added
