"""
Strategies module.

Provides the frontier expansion rule for each search algorithm:
- BreadthFirstStrategy: FIFO order emulated through the priority queue
- DijkstraStrategy: Cheapest distance traveled first
- GreedyBestFirstStrategy: Closest-looking node first
- AStarStrategy: Distance traveled plus octile estimate
"""

from gridpath.errors import UnknownAlgorithm
from gridpath.strategies.astar import AStarStrategy
from gridpath.strategies.base import (
    Algorithm,
    ExpansionContext,
    ExpansionStrategy,
    terrain_cost,
)
from gridpath.strategies.breadth_first import BreadthFirstStrategy
from gridpath.strategies.dijkstra import DijkstraStrategy
from gridpath.strategies.greedy import GreedyBestFirstStrategy

__all__ = [
    "Algorithm",
    "ExpansionContext",
    "ExpansionStrategy",
    "AStarStrategy",
    "BreadthFirstStrategy",
    "DijkstraStrategy",
    "GreedyBestFirstStrategy",
    "get_strategy",
    "terrain_cost",
]


def get_strategy(algorithm: Algorithm | str) -> ExpansionStrategy:
    """
    Get the expansion strategy for an algorithm.

    Args:
        algorithm: Algorithm member or any spelling Algorithm.parse accepts

    Returns:
        Instantiated strategy

    Raises:
        UnknownAlgorithm: If the algorithm is unknown
    """
    strategies = {
        Algorithm.DIJKSTRA: DijkstraStrategy,
        Algorithm.ASTAR: AStarStrategy,
        Algorithm.BREADTH_FIRST: BreadthFirstStrategy,
        Algorithm.GREEDY_BEST_FIRST: GreedyBestFirstStrategy,
    }

    algorithm = Algorithm.parse(algorithm)
    if algorithm not in strategies:
        raise UnknownAlgorithm(f"No strategy registered for '{algorithm.value}'")
    return strategies[algorithm]()
