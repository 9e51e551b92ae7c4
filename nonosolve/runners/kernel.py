"""
Core kernel runner for the nonogram solver.

This module provides the main entrypoint for solving a puzzle with
diagnostics:
  1. Build row templates and column specs (malformed lines abort here)
  2. Run the column-major search
  3. Verify the grid against every clue
  4. Return the grid together with a SolveDiagnostics record

Runners and sweeps go through this module; library users who only want a
grid can call nonosolve.solver.solve_puzzle directly.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Tuple

from nonosolve.core.grid_types import Grid
from nonosolve.core.puzzle_io import Puzzle
from nonosolve.lines.line_spec import MalformedLineError
from nonosolve.runners.results import SolveDiagnostics, compute_line_mismatches
from nonosolve.solver.adapter import solve_puzzle
from nonosolve.solver.search import SearchStats, SearchStrategy, WorkItem


# Logger for this module
logger = logging.getLogger(__name__)


def solve_puzzle_with_diagnostics(
    puzzle: Puzzle,
    strategy: SearchStrategy = "dfs",
    observer: Optional[Callable[[WorkItem], None]] = None,
) -> Tuple[Optional[Grid], SolveDiagnostics]:
    """
    Solve a puzzle and return both the grid and comprehensive diagnostics.

    Args:
        puzzle: Parsed puzzle
        strategy: Search strategy, "dfs" or "bfs"
        observer: Optional per-WorkItem callback for progress tracing

    Returns:
        Tuple of (grid, diagnostics):
          - grid: column-major solution, or None unless status is "ok" or "mismatch"
          - diagnostics: SolveDiagnostics with:
              - status: "ok" | "unsatisfiable" | "malformed" | "mismatch" | "error"
              - search_stats, elapsed_seconds
              - line_mismatches (status "mismatch")
              - error_line and error_message (status "malformed")
              - error_message (status "error")

    Example:
        >>> grid, diag = solve_puzzle_with_diagnostics(
        ...     Puzzle(horizontal=[[1]], vertical=[[1]]))
        >>> diag.status
        'ok'
    """
    stats = SearchStats()
    grid: Optional[Grid] = None
    line_mismatches = []
    error_line = None
    error_message: Optional[str] = None

    start = time.perf_counter()
    try:
        grid = solve_puzzle(puzzle, strategy=strategy, observer=observer, stats=stats)

        if grid is None:
            status = "unsatisfiable"
        else:
            line_mismatches = compute_line_mismatches(puzzle, grid)
            status = "mismatch" if line_mismatches else "ok"

    except MalformedLineError as e:
        # Input validation failure, raised before the search starts
        status = "malformed"
        error_line = {"axis": e.axis, "index": e.index}
        error_message = str(e)

    except Exception as e:
        # Unexpected error
        logger.exception("Unexpected error while solving %s: %s", puzzle.name or "puzzle", e)
        status = "error"
        error_message = f"Unexpected error: {type(e).__name__}: {e}"

    elapsed = time.perf_counter() - start

    diagnostics = SolveDiagnostics(
        puzzle_name=puzzle.name,
        status=status,
        shape=(puzzle.n_rows, puzzle.n_cols),
        strategy=strategy,
        search_stats=stats.as_dict(),
        elapsed_seconds=elapsed,
        line_mismatches=line_mismatches,
        error_line=error_line,
        error_message=error_message,
    )

    return grid, diagnostics
