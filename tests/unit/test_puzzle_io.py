"""
Unit tests for puzzle JSON loading and saving.
"""

import json
import tempfile
from pathlib import Path

from nonosolve.core.puzzle_io import (
    Puzzle,
    PuzzleFormatError,
    load_puzzle,
    puzzle_from_dict,
    puzzle_to_dict,
    save_puzzle,
)


def test_load_puzzle_from_file():
    """Loaded puzzles are named after the file stem."""
    print("\n" + "=" * 70)
    print("TEST: Load puzzle JSON")
    print("=" * 70)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tiny.json"
        path.write_text(json.dumps({"horizontal": [[1], [2]], "vertical": [[2], [1]]}))

        puzzle = load_puzzle(path)

    assert puzzle.name == "tiny"
    assert puzzle.horizontal == [[1], [2]]
    assert puzzle.vertical == [[2], [1]]
    assert (puzzle.n_rows, puzzle.n_cols) == (2, 2)

    print("  ✓ test_load_puzzle_from_file: PASSED")


def test_save_then_load():
    puzzle = Puzzle(horizontal=[[1, 1], []], vertical=[[1], [], [1]])

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "nested" / "saved.json"
        save_puzzle(puzzle, path)
        loaded = load_puzzle(path)

    # name is excluded from equality
    assert loaded == puzzle
    assert puzzle_to_dict(loaded) == {"horizontal": [[1, 1], []], "vertical": [[1], [], [1]]}


def test_zero_clue_means_empty_line():
    puzzle = puzzle_from_dict({"horizontal": [[0], [1]], "vertical": [[1], [0]]})
    assert puzzle.horizontal == [[], [1]]
    assert puzzle.vertical == [[1], []]


def test_format_errors():
    """Structural problems raise PuzzleFormatError."""
    print("\n" + "=" * 70)
    print("TEST: Puzzle format errors")
    print("=" * 70)

    bad_inputs = [
        [],
        {"horizontal": [[1]]},
        {"horizontal": [[1]], "vertical": "1"},
        {"horizontal": [1], "vertical": [[1]]},
        {"horizontal": [["1"]], "vertical": [[1]]},
        {"horizontal": [[1.5]], "vertical": [[1]]},
        {"horizontal": [[True]], "vertical": [[1]]},
    ]
    for data in bad_inputs:
        try:
            puzzle_from_dict(data)
            raise AssertionError(f"Expected PuzzleFormatError for {data!r}")
        except PuzzleFormatError as e:
            print(f"  ✓ Caught expected error: {e}")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "broken.json"
        path.write_text("{not json")
        try:
            load_puzzle(path)
            raise AssertionError("Expected PuzzleFormatError for invalid JSON")
        except PuzzleFormatError as e:
            print(f"  ✓ Caught expected error: {e}")

    print("  ✓ test_format_errors: PASSED")


def test_non_utf8_file_is_format_error():
    """Bytes that do not decode as UTF-8 are a format error, not a crash."""
    with tempfile.TemporaryDirectory() as tmp:
        trailing = Path(tmp) / "trailing.json"
        trailing.write_bytes(b'{"horizontal": [[1]], "vertical": [[1]]}\xff\xfe')
        leading = Path(tmp) / "leading.json"
        leading.write_bytes(b"\xff\xfe{}")

        for path in (trailing, leading):
            try:
                load_puzzle(path)
                raise AssertionError(f"Expected PuzzleFormatError for {path.name}")
            except PuzzleFormatError as e:
                print(f"  ✓ Caught expected error: {e}")
                assert isinstance(e.__cause__, UnicodeDecodeError)


if __name__ == "__main__":
    test_load_puzzle_from_file()
    test_save_then_load()
    test_zero_clue_means_empty_line()
    test_format_errors()
    test_non_utf8_file_is_format_error()
    print("\n✓ ALL TESTS PASSED")
