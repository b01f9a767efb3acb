"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from gridpath.board import parse_layout
from gridpath.engine import SearchEngine
from gridpath.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def layouts_dir(project_root: Path) -> Path:
    """Return the bundled layouts directory."""
    return project_root / "layouts"


@pytest.fixture
def open_graph() -> Graph:
    """Obstacle-free 5x5 grid."""
    return Graph.build(5, 5)


@pytest.fixture
def engine(open_graph: Graph) -> SearchEngine:
    """Engine over the obstacle-free 5x5 grid."""
    return SearchEngine(open_graph)


@pytest.fixture
def wall_layout() -> str:
    """Board with a wall that has a single gap at the top."""
    return """
        .......
        ...#...
        S..#..G
        ...#...
        ...#...
    """


@pytest.fixture
def enclosed_layout() -> str:
    """Board whose goal is walled in on all four sides."""
    return """
        .......
        ....#..
        S..#G#.
        ....#..
    """


@pytest.fixture
def wall_config(wall_layout: str):
    """SearchConfig parsed from wall_layout."""
    return parse_layout(wall_layout)
