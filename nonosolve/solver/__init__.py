"""
Solver module for nonogram puzzles.

This module provides the row automaton, the column-major backtracking search
and the adapter that turns a Puzzle into row templates and column specs.
"""

from nonosolve.solver.adapter import build_line_specs, build_row_templates, solve_puzzle
from nonosolve.solver.automaton import advance_row, advance_rows
from nonosolve.solver.search import SearchStats, WorkItem, solve_columns

__all__ = [
    "advance_row",
    "advance_rows",
    "build_line_specs",
    "build_row_templates",
    "solve_columns",
    "solve_puzzle",
    "SearchStats",
    "WorkItem",
]
