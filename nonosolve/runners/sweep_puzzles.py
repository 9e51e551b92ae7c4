"""
Puzzle directory sweep.

This script loops over every puzzle JSON file in a directory, solves each
one with diagnostics and appends one JSON line per puzzle to a results log.

Usage:
    # Solve every puzzle in data/puzzles
    python -m nonosolve.runners.sweep_puzzles data/puzzles

    # First 5 puzzles only, breadth-first
    python -m nonosolve.runners.sweep_puzzles data/puzzles --max-puzzles 5 --strategy bfs

    # Custom results log
    python -m nonosolve.runners.sweep_puzzles data/puzzles --results-log logs/run1.jsonl

Output:
    - Appends SolveDiagnostics records to logs/sweep_results.jsonl
"""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional

from nonosolve.core.puzzle_io import PuzzleFormatError, load_puzzle
from nonosolve.runners.kernel import solve_puzzle_with_diagnostics
from nonosolve.solver.search import SEARCH_STRATEGIES, SearchStrategy


# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_RESULTS_LOG = Path("logs/sweep_results.jsonl")
DEFAULT_STRATEGY = "dfs"


def list_puzzle_files(puzzle_dir: Path) -> List[Path]:
    """All *.json files in a directory, sorted by name for a deterministic order."""
    return sorted(path for path in Path(puzzle_dir).glob("*.json") if path.is_file())


def sweep_puzzles(
    puzzle_dir: Path,
    results_log_path: Path,
    strategy: SearchStrategy = "dfs",
    max_puzzles: Optional[int] = None,
) -> Dict[str, int]:
    """
    Solve every puzzle in a directory and log one diagnostics record each.

    A puzzle that fails to load or solve is recorded with its status and the
    sweep moves on to the next file.

    Args:
        puzzle_dir: Directory containing puzzle JSON files
        results_log_path: JSONL file where records are appended
        strategy: Search strategy passed to the solver
        max_puzzles: If not None, only the first max_puzzles files (for testing)

    Returns:
        Count of puzzles per status (e.g. {"ok": 3, "unsatisfiable": 1})

    Example:
        >>> counts = sweep_puzzles(Path("data/puzzles"), Path("logs/sweep.jsonl"))
        >>> counts["ok"]
        3
    """
    # 1. Collect puzzle files
    logger.info("Loading puzzle files from %s", puzzle_dir)
    puzzle_paths = list_puzzle_files(puzzle_dir)
    logger.info("Found %d puzzle files", len(puzzle_paths))

    if max_puzzles is not None:
        puzzle_paths = puzzle_paths[:max_puzzles]
        logger.info("Limiting to first %d puzzles", max_puzzles)

    # 2. Open results log for appending (JSONL format)
    results_log_path.parent.mkdir(parents=True, exist_ok=True)
    status_counts: Counter = Counter()

    with results_log_path.open("a", encoding="utf-8") as results_file:
        # 3. Loop over puzzles
        for path in puzzle_paths:
            logger.info("Processing %s", path.name)

            try:
                puzzle = load_puzzle(path)
            except (OSError, PuzzleFormatError) as e:
                logger.error("  Cannot load %s: %s", path.name, e)
                record = {
                    "puzzle_name": path.stem,
                    "status": "error",
                    "error_message": str(e),
                }
                results_file.write(json.dumps(record) + "\n")
                results_file.flush()
                status_counts["error"] += 1
                continue

            _, diagnostics = solve_puzzle_with_diagnostics(puzzle, strategy=strategy)

            if diagnostics.status == "ok":
                logger.info("  ✓ Solved %s in %.3fs", path.name, diagnostics.elapsed_seconds)
            elif diagnostics.status == "error":
                logger.error("  ✗ %s: %s", path.name, diagnostics.error_message)
            else:
                logger.warning(
                    "  ✗ %s: status=%s %s",
                    path.name,
                    diagnostics.status,
                    diagnostics.error_message or "",
                )

            results_file.write(json.dumps(diagnostics.to_record()) + "\n")
            results_file.flush()
            status_counts[diagnostics.status] += 1

    # 4. Print summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("SWEEP SUMMARY")
    logger.info("=" * 70)
    logger.info("Total puzzles: %d", len(puzzle_paths))
    for status, count in sorted(status_counts.items()):
        logger.info("  %s: %d", status, count)
    logger.info("=" * 70)

    return dict(status_counts)


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {count}")
    return count


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint for the puzzle sweep."""
    parser = argparse.ArgumentParser(
        description="Solve every puzzle JSON file in a directory and log diagnostics."
    )
    parser.add_argument(
        "puzzle_dir",
        type=Path,
        help="Directory containing puzzle JSON files.",
    )
    parser.add_argument(
        "--results-log",
        type=Path,
        default=DEFAULT_RESULTS_LOG,
        help="Path to JSONL file where diagnostics records will be appended.",
    )
    parser.add_argument(
        "--strategy",
        choices=SEARCH_STRATEGIES,
        default=DEFAULT_STRATEGY,
        help="Search frontier: depth-first (dfs) or breadth-first (bfs).",
    )
    parser.add_argument(
        "--max-puzzles",
        type=non_negative_int,
        default=None,
        help="Optional limit on number of puzzles to process (for quick tests).",
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s: %(message)s"
    )

    if not args.puzzle_dir.is_dir():
        logger.error("Not a directory: %s", args.puzzle_dir)
        return 2

    sweep_puzzles(
        puzzle_dir=args.puzzle_dir,
        results_log_path=args.results_log,
        strategy=args.strategy,
        max_puzzles=args.max_puzzles,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
