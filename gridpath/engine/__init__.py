"""
Search engine module.

Provides the stepwise search runner and its records:
- SearchEngine: Runs one search at a time, one frontier pop per step
- SearchStatus: Idle / Running / Succeeded / Failed
- StepReport: Outcome of a single step
- SearchResult: Complete record of a run
"""

from gridpath.engine.engine import SearchEngine
from gridpath.engine.state import SearchResult, SearchStatus, StepReport

__all__ = [
    "SearchEngine",
    "SearchStatus",
    "StepReport",
    "SearchResult",
]
