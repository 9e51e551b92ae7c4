"""
Column-major backtracking search.

The search assigns columns left to right. For the next unassigned column it
enumerates every placement of that column's LineSpec and keeps the ones all
row automata accept; each survivor becomes a new WorkItem on the frontier.

The frontier is an explicit deque rather than the call stack:
  - "dfs": LIFO, depth-first (default)
  - "bfs": FIFO, breadth-first

The first WorkItem popped with no columns left holds the solution. An empty
frontier means the puzzle is unsatisfiable, which is a normal None result.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence, Tuple

from nonosolve.core.grid_types import Grid, Line, empty_grid
from nonosolve.lines.line_spec import LineSpec
from nonosolve.solver.automaton import advance_rows


logger = logging.getLogger(__name__)

SearchStrategy = Literal["dfs", "bfs"]
SEARCH_STRATEGIES: Tuple[str, ...] = ("dfs", "bfs")


@dataclass(frozen=True)
class WorkItem:
    """
    One node of the search frontier.

    Attributes:
        offsets: Automaton state (template offset) per row
        next_column: Index of the first unassigned column
        placements: Placements chosen for columns 0 .. next_column-1
    """
    offsets: Tuple[int, ...]
    next_column: int
    placements: Tuple[Line, ...] = ()

    def branch(self, offsets: Tuple[int, ...], placement: Line) -> WorkItem:
        """Child item with one more column assigned."""
        return WorkItem(
            offsets=offsets,
            next_column=self.next_column + 1,
            placements=self.placements + (placement,),
        )


@dataclass
class SearchStats:
    """
    Counters collected during one search.

    Attributes:
        items_expanded: WorkItems popped and expanded
        placements_tried: Column placements checked against the row automata
        placements_pruned: Placements rejected by at least one row
        items_pushed: WorkItems added to the frontier (initial item included)
        max_frontier: Largest frontier size observed
    """
    items_expanded: int = 0
    placements_tried: int = 0
    placements_pruned: int = 0
    items_pushed: int = 0
    max_frontier: int = 0

    def as_dict(self) -> dict:
        return {
            "items_expanded": self.items_expanded,
            "placements_tried": self.placements_tried,
            "placements_pruned": self.placements_pruned,
            "items_pushed": self.items_pushed,
            "max_frontier": self.max_frontier,
        }


def solve_columns(
    row_templates: Sequence[Line],
    col_specs: Sequence[LineSpec],
    strategy: SearchStrategy = "dfs",
    observer: Optional[Callable[[WorkItem], None]] = None,
    stats: Optional[SearchStats] = None,
) -> Optional[Grid]:
    """
    Search for a grid that every row template and column spec accepts.

    Args:
        row_templates: One template per row (see make_row_template), built
            for a row length of len(col_specs)
        col_specs: One LineSpec per column, each of length len(row_templates)
        strategy: "dfs" (LIFO frontier) or "bfs" (FIFO frontier)
        observer: Optional callable invoked with every WorkItem before it is
            expanded (progress tracing)
        stats: Optional SearchStats updated in place

    Returns:
        Column-major grid of shape (len(col_specs), len(row_templates)),
        or None if no grid satisfies every line

    Raises:
        ValueError: If strategy is unknown or a column spec has the wrong length

    Example:
        >>> from nonosolve.lines.line_spec import LineSpec, make_row_template
        >>> rows = [make_row_template(LineSpec((1,), 1))]
        >>> grid = solve_columns(rows, [LineSpec((1,), 1)])
        >>> grid.tolist()
        [[True]]
    """
    if strategy not in SEARCH_STRATEGIES:
        raise ValueError(f"Unknown search strategy: {strategy!r}")

    n_rows = len(row_templates)
    n_cols = len(col_specs)

    for c, spec in enumerate(col_specs):
        if spec.length != n_rows:
            raise ValueError(
                f"Column {c} has length {spec.length}, expected {n_rows} (number of rows)"
            )

    if stats is None:
        stats = SearchStats()

    frontier = deque([WorkItem(offsets=(0,) * n_rows, next_column=0)])
    stats.items_pushed += 1
    stats.max_frontier = max(stats.max_frontier, len(frontier))

    pop = frontier.pop if strategy == "dfs" else frontier.popleft

    while frontier:
        item = pop()

        if item.next_column == n_cols:
            logger.debug("Solution found: %s", stats.as_dict())
            return _placements_to_grid(item.placements, n_rows)

        if observer is not None:
            observer(item)
        stats.items_expanded += 1

        remaining_after = n_cols - item.next_column - 1
        for placement in col_specs[item.next_column]:
            stats.placements_tried += 1
            offsets = advance_rows(row_templates, item.offsets, placement, remaining_after)
            if offsets is None:
                stats.placements_pruned += 1
                continue
            frontier.append(item.branch(offsets, placement))
            stats.items_pushed += 1

        stats.max_frontier = max(stats.max_frontier, len(frontier))

    logger.debug("Search exhausted without a solution: %s", stats.as_dict())
    return None


def _placements_to_grid(placements: Sequence[Line], n_rows: int) -> Grid:
    """Stack column placements into a column-major grid."""
    grid = empty_grid(len(placements), n_rows)
    for c, placement in enumerate(placements):
        grid[c, :] = placement
    return grid
