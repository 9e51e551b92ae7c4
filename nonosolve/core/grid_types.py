"""
Core grid types and utilities for the nonogram solver.

This module defines the fundamental Grid representation and the run-length
helpers used to check a grid against its clues.

Grid: always shape (N_col, N_row), dtype=bool, column-major
      grid[c][r] is True iff row r, column c is filled
Line: one row or column as a sequence of booleans
Clue: ordered list of block lengths for one line
"""

from typing import List, Sequence, Tuple, TypeAlias

import numpy as np


# Type aliases
Grid: TypeAlias = np.ndarray          # shape: (N_col, N_row), dtype: bool
Line: TypeAlias = Tuple[bool, ...]    # one placement of a row or column
Clue: TypeAlias = List[int]           # block lengths, in order

FILLED_CHAR = "#"
EMPTY_CHAR = "."


def empty_grid(n_cols: int, n_rows: int) -> Grid:
    """
    Create an all-empty column-major grid.

    Args:
        n_cols: Number of columns (first axis)
        n_rows: Number of rows (second axis)

    Returns:
        Boolean array of shape (n_cols, n_rows), all False
    """
    return np.zeros((n_cols, n_rows), dtype=bool)


def line_runs(line: Sequence[bool]) -> Clue:
    """
    Run-length decode one line into its block lengths.

    A block is a maximal run of filled cells. Empty lines decode to [].

    Args:
        line: Sequence of booleans (a row or column)

    Returns:
        List of block lengths, left-to-right (top-to-bottom for columns)

    Example:
        >>> line_runs([False, True, True, False, True])
        [2, 1]
        >>> line_runs([False, False])
        []
    """
    cells = np.asarray(line, dtype=np.int8)
    if cells.size == 0:
        return []

    # Pad with empty cells so every run has a rising and a falling edge
    padded = np.concatenate(([0], cells, [0]))
    edges = np.flatnonzero(np.diff(padded))
    starts, ends = edges[0::2], edges[1::2]

    return (ends - starts).tolist()


def grid_to_clues(grid: Grid) -> Tuple[List[Clue], List[Clue]]:
    """
    Extract (horizontal, vertical) clues from a solved grid.

    This is the inverse of solving: a valid solution decodes back to the
    puzzle's own clues.

    Args:
        grid: Column-major grid of shape (N_col, N_row)

    Returns:
        (horizontal, vertical):
          - horizontal: one clue per row, top-to-bottom
          - vertical: one clue per column, left-to-right

    Example:
        >>> grid = np.array([[True, False], [True, True]])  # 2 columns
        >>> grid_to_clues(grid)
        ([[2], [1]], [[1], [2]])
    """
    assert grid.ndim == 2, f"Grid must be 2D, got {grid.ndim}D"

    n_cols, n_rows = grid.shape
    horizontal = [line_runs(grid[:, r]) for r in range(n_rows)]
    vertical = [line_runs(grid[c, :]) for c in range(n_cols)]

    return horizontal, vertical


def grid_to_lists(grid: Grid) -> List[List[bool]]:
    """Convert a grid to plain nested lists (column-major) for JSON output."""
    return [[bool(cell) for cell in column] for column in grid]


def render_grid(grid: Grid) -> str:
    """
    Render a grid as text, one row per line, top-to-bottom.

    Filled cells are '#', empty cells are '.'.

    Example:
        >>> grid = np.array([[True, False], [True, True]])
        >>> print(render_grid(grid))
        ##
        .#
    """
    assert grid.ndim == 2, f"Grid must be 2D, got {grid.ndim}D"

    n_cols, n_rows = grid.shape
    lines = []
    for r in range(n_rows):
        lines.append(''.join(
            FILLED_CHAR if grid[c, r] else EMPTY_CHAR for c in range(n_cols)
        ))
    return '\n'.join(lines)


def print_grid(grid: Grid) -> None:
    """Print a grid for human inspection (see render_grid)."""
    print(render_grid(grid))


if __name__ == "__main__":
    # Self-test: clue extraction on a small grid
    grid = np.array([[True, False, True], [True, True, True]], dtype=bool)
    print("Grid:")
    print_grid(grid)

    horizontal, vertical = grid_to_clues(grid)
    print(f"horizontal={horizontal}, vertical={vertical}")
    assert horizontal == [[2], [1], [2]]
    assert vertical == [[1, 1], [3]]

    print("Clue extraction test passed.")
