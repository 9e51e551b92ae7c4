"""
Puzzle adapter: from a parsed Puzzle to the column-major search.

Rows become templates of length N_col, columns become LineSpecs of length
N_row. A line that cannot hold its blocks aborts before the search starts,
with the offending axis and index attached to the MalformedLineError.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from nonosolve.core.grid_types import Clue, Grid, Line
from nonosolve.core.puzzle_io import Puzzle
from nonosolve.lines.line_spec import LineSpec, MalformedLineError, make_row_template
from nonosolve.solver.search import SearchStats, SearchStrategy, WorkItem, solve_columns


logger = logging.getLogger(__name__)


def _build_specs(clues: List[Clue], length: int, axis: str) -> List[LineSpec]:
    specs = []
    for index, clue in enumerate(clues):
        try:
            specs.append(LineSpec(tuple(clue), length))
        except MalformedLineError as e:
            raise MalformedLineError(f"{axis} {index}: {e}", axis=axis, index=index) from e
    return specs


def build_line_specs(puzzle: Puzzle) -> Tuple[List[LineSpec], List[LineSpec]]:
    """
    Build validated LineSpecs for every row and column of a puzzle.

    Args:
        puzzle: Parsed puzzle

    Returns:
        (row_specs, col_specs): rows have length N_col, columns length N_row

    Raises:
        MalformedLineError: For the first line (rows first) whose blocks do
            not fit, with axis ("row" / "column") and index set
    """
    row_specs = _build_specs(puzzle.horizontal, puzzle.n_cols, "row")
    col_specs = _build_specs(puzzle.vertical, puzzle.n_rows, "column")
    return row_specs, col_specs


def build_row_templates(row_specs: List[LineSpec]) -> List[Line]:
    """Template per row, in row order."""
    return [make_row_template(spec) for spec in row_specs]


def solve_puzzle(
    puzzle: Puzzle,
    strategy: SearchStrategy = "dfs",
    observer: Optional[Callable[[WorkItem], None]] = None,
    stats: Optional[SearchStats] = None,
) -> Optional[Grid]:
    """
    Solve a nonogram.

    Args:
        puzzle: Parsed puzzle (horizontal = row clues, vertical = column clues)
        strategy: Frontier discipline, "dfs" or "bfs"
        observer: Optional per-WorkItem callback passed to the search
        stats: Optional SearchStats updated in place

    Returns:
        Column-major grid (grid[c][r] is True iff row r, column c is filled),
        or None if the puzzle is unsatisfiable

    Raises:
        MalformedLineError: If any line cannot hold its blocks

    Example:
        >>> grid = solve_puzzle(Puzzle(horizontal=[[1]], vertical=[[1]]))
        >>> grid.tolist()
        [[True]]
    """
    row_specs, col_specs = build_line_specs(puzzle)
    row_templates = build_row_templates(row_specs)

    logger.debug(
        "Solving %s: %d rows, %d columns, %d column placements in total",
        puzzle.name or "puzzle",
        puzzle.n_rows,
        puzzle.n_cols,
        sum(spec.num_placements for spec in col_specs),
    )

    return solve_columns(row_templates, col_specs, strategy=strategy, observer=observer, stats=stats)
