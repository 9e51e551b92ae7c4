"""
Result and diagnostics structures for the nonogram solver.

This module defines SolveDiagnostics, the single structured object that
captures everything about a solve attempt, and the verification helpers that
compare a grid against the puzzle's clues.

Key components:
  - SolveDiagnostics: Complete solve attempt record (status, shape, stats, mismatches)
  - compute_line_mismatches: Per-line diff between the clues and a grid
  - verify_solution: True iff a grid satisfies every clue
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

from nonosolve.core.grid_types import Grid, grid_to_clues
from nonosolve.core.puzzle_io import Puzzle


# Status type for solve attempts
SolveStatus = Literal["ok", "unsatisfiable", "malformed", "mismatch", "error"]


@dataclass
class SolveDiagnostics:
    """
    Complete diagnostics for a single solve attempt.

    Attributes:
        puzzle_name: Puzzle label (file stem for loaded puzzles)
        status: Solve outcome - one of:
            - "ok": a grid was found and matches every clue
            - "unsatisfiable": the search exhausted without a grid
            - "malformed": a line cannot hold its blocks (see error_line)
            - "mismatch": a grid was found but does not decode to the clues
            - "error": unexpected error during solving
        shape: (N_row, N_col) of the puzzle
        strategy: Search strategy used ("dfs" or "bfs")
        search_stats: SearchStats counters as a dict
        elapsed_seconds: Wall-clock time spent in the solver
        line_mismatches: Records from compute_line_mismatches (status "mismatch")
        error_line: {"axis": ..., "index": ...} for status "malformed"
        error_message: Optional error message for "malformed" / "error"
    """
    puzzle_name: str
    status: SolveStatus
    shape: Tuple[int, int]
    strategy: str

    search_stats: Dict[str, int] = field(default_factory=dict)
    elapsed_seconds: float = 0.0

    line_mismatches: List[Dict[str, Any]] = field(default_factory=list)
    # Each element: {"axis": "row" | "column", "index": int,
    #                "expected": List[int], "actual": List[int]}
    # or [{"shape_mismatch": True, "expected_shape": tuple, "actual_shape": tuple}]

    error_line: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        """JSON-friendly dict (tuples become lists)."""
        record = asdict(self)
        record["shape"] = list(self.shape)
        return record


def compute_line_mismatches(puzzle: Puzzle, grid: Grid) -> List[Dict[str, Any]]:
    """
    Compare a grid with the puzzle's clues, line by line.

    This function handles two cases:

    1. Shapes match: Returns one record per row or column whose run-length
       decoding differs from its clue
    2. Shapes differ: Returns a single shape-mismatch record

    Args:
        puzzle: Puzzle with the expected clues
        grid: Column-major grid of shape (N_col, N_row)

    Returns:
        Empty list if the grid satisfies every clue, otherwise mismatch records

    Example:
        >>> import numpy as np
        >>> puzzle = Puzzle(horizontal=[[1]], vertical=[[1]])
        >>> compute_line_mismatches(puzzle, np.array([[False]]))  # doctest: +NORMALIZE_WHITESPACE
        [{'axis': 'row', 'index': 0, 'expected': [1], 'actual': []},
         {'axis': 'column', 'index': 0, 'expected': [1], 'actual': []}]
    """
    expected_shape = (puzzle.n_cols, puzzle.n_rows)
    if tuple(grid.shape) != expected_shape:
        return [{
            "shape_mismatch": True,
            "expected_shape": expected_shape,
            "actual_shape": tuple(grid.shape),
        }]

    horizontal, vertical = grid_to_clues(grid)

    mismatches = []
    for axis, expected_clues, actual_clues in (
        ("row", puzzle.horizontal, horizontal),
        ("column", puzzle.vertical, vertical),
    ):
        for index, (expected, actual) in enumerate(zip(expected_clues, actual_clues)):
            if list(expected) != actual:
                mismatches.append({
                    "axis": axis,
                    "index": index,
                    "expected": list(expected),
                    "actual": actual,
                })

    return mismatches


def verify_solution(puzzle: Puzzle, grid: Grid) -> bool:
    """True iff the grid decodes exactly to the puzzle's row and column clues."""
    return not compute_line_mismatches(puzzle, grid)
