"""
Nonogram puzzle JSON IO utilities.

This module loads puzzle files from JSON format and converts them into the
Puzzle representation consumed by the solver.

Expected JSON structure:

{
  "horizontal": [[int, ...], ...],   # one clue per row, top-to-bottom
  "vertical":   [[int, ...], ...]    # one clue per column, left-to-right
}

Each clue lists block lengths in order (left-to-right for rows, top-to-bottom
for columns). An empty line is written [] or, by convention, [0].
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from nonosolve.core.grid_types import Clue


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file is not valid UTF-8 JSON or has the wrong shape."""
    pass


@dataclass
class Puzzle:
    """
    Parsed nonogram puzzle.

    Attributes:
        horizontal: Row clues, top-to-bottom (N_row entries)
        vertical: Column clues, left-to-right (N_col entries)
        name: Optional label (file stem when loaded from disk)
    """
    horizontal: List[Clue]
    vertical: List[Clue]
    name: str = field(default="", compare=False)

    @property
    def n_rows(self) -> int:
        return len(self.horizontal)

    @property
    def n_cols(self) -> int:
        return len(self.vertical)


def _parse_clues(raw: Any, key: str) -> List[Clue]:
    """Validate one clue list and normalize the [0] spelling of an empty line."""
    if not isinstance(raw, list):
        raise PuzzleFormatError(f"'{key}' must be a list of clues, got {type(raw).__name__}")

    clues = []
    for i, clue in enumerate(raw):
        if not isinstance(clue, list):
            raise PuzzleFormatError(f"'{key}'[{i}] must be a list of block lengths, got {clue!r}")
        for block in clue:
            # bool is an int subclass, but true/false are never block lengths
            if isinstance(block, bool) or not isinstance(block, int):
                raise PuzzleFormatError(f"'{key}'[{i}] contains non-integer block length {block!r}")
        if clue == [0]:
            clue = []
        clues.append(list(clue))

    return clues


def puzzle_from_dict(data: Dict[str, Any], name: str = "") -> Puzzle:
    """
    Build a Puzzle from decoded JSON data.

    Block lengths are only checked for type here; whether they fit their
    line is decided when the solver builds its line specs.

    Args:
        data: Mapping with "horizontal" and "vertical" clue lists
        name: Optional puzzle label

    Returns:
        Puzzle instance

    Raises:
        PuzzleFormatError: If keys are missing or clues are not lists of ints

    Example:
        >>> puzzle = puzzle_from_dict({"horizontal": [[1]], "vertical": [[1]]})
        >>> puzzle.n_rows, puzzle.n_cols
        (1, 1)
    """
    if not isinstance(data, dict):
        raise PuzzleFormatError(f"Puzzle must be a JSON object, got {type(data).__name__}")

    missing = [key for key in ("horizontal", "vertical") if key not in data]
    if missing:
        raise PuzzleFormatError(f"Puzzle is missing required keys: {missing}")

    return Puzzle(
        horizontal=_parse_clues(data["horizontal"], "horizontal"),
        vertical=_parse_clues(data["vertical"], "vertical"),
        name=name,
    )


def puzzle_to_dict(puzzle: Puzzle) -> Dict[str, List[Clue]]:
    """Serialize a Puzzle back into its JSON structure."""
    return {
        "horizontal": [list(clue) for clue in puzzle.horizontal],
        "vertical": [list(clue) for clue in puzzle.vertical],
    }


def load_puzzle(path: Path) -> Puzzle:
    """
    Load a puzzle from the given JSON file.

    Args:
        path: Path to the puzzle JSON file

    Returns:
        Puzzle named after the file stem

    Raises:
        PuzzleFormatError: If the file is not valid UTF-8 JSON or has the wrong shape
        OSError: If the file cannot be read
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PuzzleFormatError(f"{path}: invalid JSON: {e}") from e

    return puzzle_from_dict(data, name=path.stem)


def save_puzzle(puzzle: Puzzle, path: Path) -> None:
    """Write a puzzle to disk as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(puzzle_to_dict(puzzle), f)
        f.write("\n")


if __name__ == "__main__":
    # Self-test: load and inspect the bundled sample puzzle
    from nonosolve.core.grid_types import print_grid
    from nonosolve.solver.adapter import solve_puzzle

    puzzle_path = Path("data/puzzles/heart.json")

    print(f"Loading {puzzle_path}...")
    puzzle = load_puzzle(puzzle_path)
    print(f"  Rows: {puzzle.n_rows}")
    print(f"  Columns: {puzzle.n_cols}")

    grid = solve_puzzle(puzzle)
    if grid is not None:
        print("\nSolution:")
        print_grid(grid)
    else:
        print("\nNo solution.")
