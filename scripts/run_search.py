#!/usr/bin/env python3
"""
Grid search CLI - watch or compare pathfinding algorithms on a board.

Usage:
    python scripts/run_search.py --layout wall
    python scripts/run_search.py --layout maze --algorithm bfs --animate --step-interval 0.05
    python scripts/run_search.py --layout layouts/enclosed.txt --algorithm dijkstra
    python scripts/run_search.py --width 30 --height 12 --goal 29,11 --compare

Algorithms:
    dijkstra - Cheapest distance traveled first
    astar    - Distance traveled + octile estimate to goal
    bfs      - Breadth-first (fewest moves)
    greedy   - Greedy best-first (heuristic only)

Board legend:
    #  blocked     S  start     +  frontier
    .  open        G  goal      o  explored     *  path
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath.benchmark import compare_algorithms, summarize  # noqa: E402
from gridpath.board import SearchConfig, available_layouts, load_layout, render_board  # noqa: E402
from gridpath.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_STEP_INTERVAL,
    LOG_LEVEL,
)
from gridpath.engine import SearchEngine  # noqa: E402
from gridpath.errors import GridPathError  # noqa: E402
from gridpath.strategies import Algorithm, get_strategy  # noqa: E402


def parse_coord(text: str) -> tuple[int, int]:
    """Parse 'x,y' into a coordinate tuple."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'x,y', got '{text}'") from None
    return (x, y)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run grid pathfinding algorithms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--layout",
        type=str,
        default=None,
        help=f"Layout file or bundled name ({', '.join(available_layouts()) or 'none found'})",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[a.value for a in Algorithm],
        help=f"Algorithm to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_GRID_WIDTH,
        help=f"Grid width when no layout is given (default: {DEFAULT_GRID_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_GRID_HEIGHT,
        help=f"Grid height when no layout is given (default: {DEFAULT_GRID_HEIGHT})",
    )
    parser.add_argument(
        "--start",
        type=parse_coord,
        default=None,
        help="Start cell as x,y (overrides the layout's S)",
    )
    parser.add_argument(
        "--goal",
        type=parse_coord,
        default=None,
        help="Goal cell as x,y (overrides the layout's G)",
    )
    parser.add_argument(
        "--step-interval",
        type=float,
        default=DEFAULT_STEP_INTERVAL,
        help="Seconds to wait between steps (default: %(default)s)",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Redraw the board after every step",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after this many steps (default: no limit)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every algorithm on the board and print a comparison table",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_config(args: argparse.Namespace) -> SearchConfig:
    """Turn command line arguments into a SearchConfig."""
    overrides = {"algorithm": args.algorithm, "step_interval": args.step_interval}

    if args.layout:
        config = load_layout(args.layout, **overrides)
    else:
        config = SearchConfig(grid_width=args.width, grid_height=args.height, **overrides)

    if args.start is not None:
        config.start = args.start
    if args.goal is not None:
        config.goal = args.goal

    config.validate()
    return config


def run_paced(config: SearchConfig, animate: bool, max_steps: int | None) -> int:
    """Step one search at the configured pace, optionally redrawing the board."""
    graph = config.build_graph()
    engine = SearchEngine(graph)
    engine.initialize(config.start, config.goal, config.algorithm)
    strategy = get_strategy(config.algorithm)

    print("\n" + "=" * 60)
    print("Grid Search")
    print("=" * 60)
    print(f"  Board:     {graph.width}x{graph.height} ({graph.blocked_count()} blocked)")
    print(f"  Start:     {config.start}")
    print(f"  Goal:      {config.goal}")
    print(f"  Algorithm: {strategy.name} - {strategy.description}")
    print("=" * 60 + "\n")

    while not engine.status().is_terminal:
        if max_steps is not None and engine.iteration_count() >= max_steps:
            print(f"Stopped after {max_steps} steps")
            break

        report = engine.step()

        if animate:
            print(render_board(graph, engine))
            print(
                f"Total iterations: {report.iteration}  "
                f"Elapsed time: {report.elapsed_seconds:.2f} seconds\n"
            )
        if config.step_interval > 0:
            time.sleep(config.step_interval)

    result = engine.result()

    if not animate:
        print(render_board(graph, engine))

    print("\n" + "=" * 60)
    if result.succeeded:
        print(f"Path found: {result.path_length} nodes, cost {result.path_cost:.1f}")
    else:
        print(f"No path ({result.status.value})")
    print("=" * 60)
    print(f"  Total iterations: {result.iterations}")
    print(f"  Explored:         {result.explored_count}")
    print(f"  Elapsed time:     {result.elapsed_seconds:.3f} seconds")

    return 0 if result.succeeded else 1


def run_compare(config: SearchConfig, max_steps: int | None) -> int:
    """Run every algorithm and print a comparison table."""
    results = compare_algorithms(config, max_steps=max_steps)

    print(f"\n{'algorithm':<10} {'status':<10} {'iters':>6} {'explored':>9} {'path':>5} {'cost':>7}")
    print("-" * 52)
    for result in results:
        cost = f"{result.path_cost:.1f}" if result.path_cost is not None else "-"
        print(
            f"{result.algorithm:<10} {result.status.value:<10} {result.iterations:>6} "
            f"{result.explored_count:>9} {result.path_length:>5} {cost:>7}"
        )

    summary = summarize(results)
    print(f"\nSolved {summary.solved}/{summary.runs}", end="")
    if summary.best_algorithm:
        print(f", fewest iterations: {summary.best_algorithm}")
    else:
        print()

    return 0 if summary.solved else 1


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = build_config(args)
        if args.compare:
            return run_compare(config, args.max_steps)
        return run_paced(config, args.animate, args.max_steps)
    except (GridPathError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C


if __name__ == "__main__":
    sys.exit(main())
