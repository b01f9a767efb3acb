"""
Run several algorithms on the same board and compare the outcomes.

Every algorithm gets its own SearchEngine over one shared Graph. That is
safe because initialize() resets all node search state before each run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from gridpath.board import SearchConfig
from gridpath.engine import SearchEngine, SearchResult
from gridpath.strategies import Algorithm

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkSummary:
    """
    Aggregate statistics over a set of results.

    Attributes:
        runs: Number of results summarized
        solved: Number of successful runs
        mean_iterations: Mean frontier pops per run
        mean_explored: Mean explored-set size per run
        mean_path_length: Mean path node count over solved runs (None if none)
        best_algorithm: Solved algorithm with the fewest iterations (None if none)
    """

    runs: int
    solved: int
    mean_iterations: float
    mean_explored: float
    mean_path_length: float | None
    best_algorithm: str | None


def run_search(config: SearchConfig, max_steps: int | None = None) -> SearchResult:
    """Build the board described by config and run its algorithm to the end."""
    graph = config.build_graph()
    engine = SearchEngine(graph)
    engine.initialize(config.start, config.goal, config.algorithm)
    return engine.run_to_completion(max_steps=max_steps)


def compare_algorithms(
    config: SearchConfig,
    algorithms: list[Algorithm | str] | None = None,
    max_steps: int | None = None,
) -> list[SearchResult]:
    """
    Run each algorithm on the board described by config.

    Args:
        config: Board, start and goal (its own algorithm is ignored)
        algorithms: Algorithms to run, in order (default: all of them)
        max_steps: Optional per-run step cap

    Returns:
        One SearchResult per algorithm, in the order requested
    """
    graph = config.build_graph()
    engine = SearchEngine(graph)
    chosen = [Algorithm.parse(a) for a in algorithms] if algorithms else list(Algorithm)

    results = []
    for algorithm in chosen:
        engine.initialize(config.start, config.goal, algorithm)
        result = engine.run_to_completion(max_steps=max_steps)
        logger.info(
            f"{algorithm.value}: {result.status.value}, {result.iterations} iterations, "
            f"{result.explored_count} explored, path {result.path_length}"
        )
        results.append(result)
    return results


def summarize(results: list[SearchResult]) -> BenchmarkSummary:
    """Aggregate a list of results into a BenchmarkSummary."""
    if not results:
        return BenchmarkSummary(
            runs=0,
            solved=0,
            mean_iterations=0.0,
            mean_explored=0.0,
            mean_path_length=None,
            best_algorithm=None,
        )

    iterations = np.array([r.iterations for r in results], dtype=float)
    explored = np.array([r.explored_count for r in results], dtype=float)
    solved = [r for r in results if r.succeeded]

    mean_path = None
    best = None
    if solved:
        mean_path = float(np.mean([r.path_length for r in solved]))
        best = min(solved, key=lambda r: r.iterations).algorithm

    return BenchmarkSummary(
        runs=len(results),
        solved=len(solved),
        mean_iterations=float(iterations.mean()),
        mean_explored=float(explored.mean()),
        mean_path_length=mean_path,
        best_algorithm=best,
    )
