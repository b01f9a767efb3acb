"""
Host-side board configuration: search settings and ASCII layouts.

A board is written top row first, one character per cell:

    ..........
    ..####....
    S.#..#..G.
    ..#.......

``#`` is blocked, ``.`` is open, ``S`` and ``G`` mark the start and goal
(both open). The first line is the highest y, so north is up on screen.

Usage:
    config = parse_layout(text, algorithm="bfs")
    graph = config.build_graph()
    print(render_board(graph, start=config.start, goal=config.goal))
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from gridpath.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_STEP_INTERVAL,
    GLYPH_BLOCKED,
    GLYPH_EXPLORED,
    GLYPH_FRONTIER,
    GLYPH_GOAL,
    GLYPH_OPEN,
    GLYPH_PATH,
    GLYPH_START,
    LAYOUTS_DIR,
)
from gridpath.errors import InvalidDimensions, InvalidLayout, OutOfBounds
from gridpath.graph import Graph
from gridpath.strategies import Algorithm

if TYPE_CHECKING:
    from gridpath.engine import SearchEngine

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """
    Everything a host needs to set up one search.

    Attributes:
        grid_width: Number of columns
        grid_height: Number of rows
        start: Start coordinate
        goal: Goal coordinate (defaults to the far corner)
        algorithm: Algorithm to run
        blocked_mask: Boolean array indexed [x, y], True = blocked
        step_interval: Seconds a paced host waits between steps
    """

    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT
    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] | None = None
    algorithm: Algorithm | str = DEFAULT_ALGORITHM
    blocked_mask: np.ndarray | None = None
    step_interval: float = DEFAULT_STEP_INTERVAL

    def __post_init__(self) -> None:
        self.algorithm = Algorithm.parse(self.algorithm)
        if self.goal is None:
            self.goal = (self.grid_width - 1, self.grid_height - 1)
        if self.blocked_mask is not None:
            self.blocked_mask = np.asarray(self.blocked_mask, dtype=bool)

    def validate(self) -> None:
        """
        Check the configuration is usable.

        Raises:
            InvalidDimensions: If the grid size is not positive
            InvalidLayout: If the mask shape or step interval is wrong
            OutOfBounds: If start or goal lies outside the grid
        """
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise InvalidDimensions(self.grid_width, self.grid_height)

        expected = (self.grid_width, self.grid_height)
        if self.blocked_mask is not None and self.blocked_mask.shape != expected:
            raise InvalidLayout(
                f"Blocked mask shape {self.blocked_mask.shape} does not match grid {expected}"
            )

        if self.step_interval < 0:
            raise InvalidLayout(f"Step interval must not be negative, got {self.step_interval}")

        for label, (x, y) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
                raise OutOfBounds(
                    f"{label} ({x}, {y}) is outside the {self.grid_width}x{self.grid_height} grid"
                )

    def build_graph(self) -> Graph:
        """Validate and build the Graph this configuration describes."""
        self.validate()
        if self.blocked_mask is None:
            return Graph.build(self.grid_width, self.grid_height)
        return Graph.from_mask(self.blocked_mask)

    def with_algorithm(self, algorithm: Algorithm | str) -> SearchConfig:
        """Copy of this configuration running a different algorithm."""
        return dataclasses.replace(self, algorithm=Algorithm.parse(algorithm))


def parse_layout(text: str, **overrides) -> SearchConfig:
    """
    Parse an ASCII board into a SearchConfig.

    Blank lines and surrounding whitespace are ignored.

    Args:
        text: Board text (see module docstring for the alphabet)
        **overrides: Extra SearchConfig fields (algorithm, step_interval)

    Returns:
        SearchConfig with size, mask, start and goal taken from the board

    Raises:
        InvalidLayout: On ragged rows, unknown characters, or a missing or
            repeated start/goal marker
    """
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise InvalidLayout("Layout is empty")

    width = len(rows[0])
    height = len(rows)
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise InvalidLayout(f"Row {number} has {len(row)} cells, expected {width}")

    mask = np.zeros((width, height), dtype=bool)
    markers: dict[str, list[tuple[int, int]]] = {GLYPH_START: [], GLYPH_GOAL: []}

    for row_index, row in enumerate(rows):
        y = height - 1 - row_index
        for x, glyph in enumerate(row):
            if glyph == GLYPH_BLOCKED:
                mask[x, y] = True
            elif glyph in markers:
                markers[glyph].append((x, y))
            elif glyph != GLYPH_OPEN:
                raise InvalidLayout(f"Unknown cell '{glyph}' at ({x}, {y})")

    for glyph, found in markers.items():
        if len(found) != 1:
            raise InvalidLayout(f"Layout needs exactly one '{glyph}', found {len(found)}")

    return SearchConfig(
        grid_width=width,
        grid_height=height,
        start=markers[GLYPH_START][0],
        goal=markers[GLYPH_GOAL][0],
        blocked_mask=mask,
        **overrides,
    )


def load_layout(path: str | Path, **overrides) -> SearchConfig:
    """
    Load a board from a file, or by name from the bundled layouts directory.

    Raises:
        FileNotFoundError: If no such layout exists
        InvalidLayout: If the file is malformed
    """
    path = Path(path)
    if not path.exists():
        bundled = LAYOUTS_DIR / f"{path.stem}.txt"
        if not bundled.exists():
            raise FileNotFoundError(f"No layout at '{path}' or '{bundled}'")
        path = bundled

    logger.info(f"Loading layout from {path}")
    return parse_layout(path.read_text(encoding="utf-8"), **overrides)


def available_layouts() -> list[str]:
    """Names of the bundled layouts."""
    if not LAYOUTS_DIR.exists():
        return []
    return sorted(p.stem for p in LAYOUTS_DIR.glob("*.txt"))


def render_board(
    graph: Graph,
    engine: SearchEngine | None = None,
    start: tuple[int, int] | None = None,
    goal: tuple[int, int] | None = None,
) -> str:
    """
    Draw the graph as text, overlaying search progress when an engine is given.

    Path cells win over frontier cells, which win over explored cells. Start
    and goal default to the engine's endpoints.

    Returns:
        Board text, top row first, without a trailing newline
    """
    cells = [[GLYPH_OPEN] * graph.width for _ in range(graph.height)]

    def put(x: int, y: int, glyph: str) -> None:
        cells[graph.height - 1 - y][x] = glyph

    for node in graph:
        if node.is_blocked:
            put(node.x, node.y, GLYPH_BLOCKED)

    if engine is not None:
        for node in engine.explored_contents():
            put(node.x, node.y, GLYPH_EXPLORED)
        for node in engine.frontier_contents():
            put(node.x, node.y, GLYPH_FRONTIER)
        for node in engine.path():
            put(node.x, node.y, GLYPH_PATH)
        if start is None and engine.start is not None:
            start = engine.start.coord
        if goal is None and engine.goal is not None:
            goal = engine.goal.coord

    if start is not None:
        put(*start, GLYPH_START)
    if goal is not None:
        put(*goal, GLYPH_GOAL)

    return "\n".join("".join(row) for row in cells)
