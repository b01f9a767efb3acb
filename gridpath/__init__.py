"""
gridpath: stepwise grid pathfinding.

A small search engine that expands a frontier one node at a time over a
4-connected grid, with Dijkstra, A*, breadth-first and greedy best-first
expansion rules, so hosts can animate or benchmark each algorithm.
"""

__version__ = "0.1.0"
