"""
Single-puzzle solve runner.

This script loads one puzzle JSON file, solves it, verifies the solution
against every clue and prints the grid.

Usage:
    python -m nonosolve.runners.solve_puzzle data/puzzles/heart.json
    python -m nonosolve.runners.solve_puzzle data/puzzles/heart.json --strategy bfs --json
    python -m nonosolve.runners.solve_puzzle data/puzzles/heart.json --verbose

Exit codes:
    0: solved and verified
    1: unsatisfiable (or the grid failed verification)
    2: malformed input (bad file format or a line that cannot hold its blocks)
    3: unexpected error while solving
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from nonosolve.core.grid_types import grid_to_lists, render_grid
from nonosolve.core.puzzle_io import PuzzleFormatError, load_puzzle
from nonosolve.runners.kernel import solve_puzzle_with_diagnostics
from nonosolve.solver.search import SEARCH_STRATEGIES, WorkItem


# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "dfs"

EXIT_OK = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2
EXIT_ERROR = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the solve runner.

    Returns:
        Parsed arguments with puzzle_path, strategy, json and verbose
    """
    parser = argparse.ArgumentParser(
        description="Solve a nonogram puzzle given as JSON."
    )
    parser.add_argument(
        "puzzle_path",
        type=Path,
        help='Path to a puzzle JSON file ({"horizontal": [...], "vertical": [...]})'
    )
    parser.add_argument(
        "--strategy",
        choices=SEARCH_STRATEGIES,
        default=DEFAULT_STRATEGY,
        help="Search frontier: depth-first (dfs) or breadth-first (bfs)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the solution as column-major JSON instead of a rendered grid"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG logging with per-item search progress"
    )
    return parser.parse_args(argv)


def _log_progress(item: WorkItem) -> None:
    logger.debug("Current work item has %d columns assigned", item.next_column)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s"
    )

    try:
        puzzle = load_puzzle(args.puzzle_path)
    except (OSError, PuzzleFormatError) as e:
        logger.error("Cannot load puzzle %s: %s", args.puzzle_path, e)
        return EXIT_BAD_INPUT

    logger.info("Puzzle %s: %d rows x %d columns", puzzle.name, puzzle.n_rows, puzzle.n_cols)

    grid, diagnostics = solve_puzzle_with_diagnostics(
        puzzle,
        strategy=args.strategy,
        observer=_log_progress if args.verbose else None,
    )

    logger.info(
        "Status: %s (%.3fs, %d items expanded)",
        diagnostics.status,
        diagnostics.elapsed_seconds,
        diagnostics.search_stats.get("items_expanded", 0),
    )

    if diagnostics.status == "malformed":
        logger.error("Malformed line: %s", diagnostics.error_message)
        return EXIT_BAD_INPUT

    if diagnostics.status == "error":
        # Traceback already logged by the kernel
        logger.error("%s", diagnostics.error_message)
        return EXIT_ERROR

    if diagnostics.status == "unsatisfiable":
        logger.warning("No grid satisfies every clue of %s", puzzle.name)
        if args.json:
            print(json.dumps(None))
        return EXIT_UNSOLVED

    if diagnostics.status == "mismatch":
        logger.warning("Solution does not match clues: %s", diagnostics.line_mismatches)

    if args.json:
        print(json.dumps(grid_to_lists(grid)))
    else:
        print(render_grid(grid))

    return EXIT_OK if diagnostics.status == "ok" else EXIT_UNSOLVED


if __name__ == "__main__":
    raise SystemExit(main())
