"""
Benchmark module.

Provides helpers for running and comparing algorithms on one board:
- run_search: Run a single configured search to completion
- compare_algorithms: Run every algorithm on the same board
- summarize / BenchmarkSummary: Aggregate statistics
"""

from gridpath.benchmark.runner import (
    BenchmarkSummary,
    compare_algorithms,
    run_search,
    summarize,
)

__all__ = [
    "BenchmarkSummary",
    "compare_algorithms",
    "run_search",
    "summarize",
]
