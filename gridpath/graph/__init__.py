"""
Graph model module.

Provides the grid data structures searched by the engine:
- Node / NodeKind: A grid cell and its traversability
- Graph: Dense grid owning all nodes and their adjacency
- PriorityQueue: Key-function binary min-heap used as the frontier
"""

from gridpath.graph.grid import Graph, octile_distance
from gridpath.graph.node import Node, NodeKind
from gridpath.graph.priority_queue import PriorityQueue

__all__ = [
    "Graph",
    "Node",
    "NodeKind",
    "PriorityQueue",
    "octile_distance",
]
