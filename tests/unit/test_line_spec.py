"""
Unit tests for LineSpec and the block placement enumerator.

These tests verify that:
  - slack and placement counts follow the stars-and-bars formula
  - every placement has the right length and runs, and none is repeated
  - the enumerator finds exactly the lines a brute-force scan accepts
  - malformed lines are rejected at construction
  - row templates are the left-packed placement framed by sentinels
"""

import itertools

from nonosolve.core.grid_types import line_runs
from nonosolve.lines.line_spec import LineSpec, MalformedLineError, make_row_template


def test_slack_and_counts():
    """Placement counts for the reference lines of length 7."""
    print("\n" + "=" * 70)
    print("TEST: Slack and placement counts")
    print("=" * 70)

    cases = [
        ((2, 3), 7, 1, 3),
        ((2,), 7, 5, 6),
        ((2, 2), 7, 2, 6),
    ]
    for blocks, length, expected_slack, expected_count in cases:
        spec = LineSpec(blocks, length)
        placements = list(spec)
        print(f"  blocks={list(blocks)} length={length}: slack={spec.slack}, {len(placements)} placements")

        assert spec.slack == expected_slack, \
            f"Expected slack {expected_slack}, got {spec.slack}"
        assert len(placements) == expected_count, \
            f"Expected {expected_count} placements, got {len(placements)}"
        assert spec.num_placements == expected_count

    print("  ✓ test_slack_and_counts: PASSED")


def test_placements_match_brute_force():
    """Enumerator output equals the set of all lines whose runs match the blocks."""
    print("\n" + "=" * 70)
    print("TEST: Enumerator vs brute force")
    print("=" * 70)

    for length in range(0, 8):
        for k in range(0, 4):
            for blocks in itertools.product(range(1, 4), repeat=k):
                try:
                    spec = LineSpec(blocks, length)
                except MalformedLineError:
                    assert sum(blocks) + len(blocks) - 1 > length
                    continue

                placements = list(spec)
                expected = {
                    line for line in itertools.product((False, True), repeat=length)
                    if line_runs(line) == list(blocks)
                }

                assert len(placements) == len(set(placements)), \
                    f"Duplicate placements for blocks={blocks} length={length}"
                assert set(placements) == expected, \
                    f"Placement set mismatch for blocks={blocks} length={length}"
                assert len(placements) == spec.num_placements, \
                    f"Count {len(placements)} != C(s+k,k)={spec.num_placements}"
                assert all(len(p) == length for p in placements)

    print("  ✓ test_placements_match_brute_force: PASSED")


def test_first_placement_is_left_packed():
    """Traversal starts from the all-zero distribution."""
    spec = LineSpec((2, 3), 7)
    placements = list(spec)

    assert placements[0] == (True, True, False, True, True, True, False), \
        f"Unexpected first placement {placements[0]}"
    assert placements[1] == (False, True, True, False, True, True, True)
    assert placements[2] == (True, True, False, False, True, True, True)

    print("  ✓ test_first_placement_is_left_packed: PASSED")


def test_enumeration_is_restartable():
    """Each iteration over a LineSpec starts from scratch and gives the same order."""
    spec = LineSpec((1, 2), 6)

    first = list(spec)
    second = list(spec)
    assert first == second, "Two passes over the same spec differ"

    # Abandoning an enumerator halfway does not affect a new one
    partial = spec.placements()
    next(partial)
    next(partial)
    assert list(spec.placements()) == first

    print("  ✓ test_enumeration_is_restartable: PASSED")


def test_zero_block_line():
    """A line without blocks has one all-empty placement."""
    for length in (0, 1, 5):
        spec = LineSpec((), length)
        placements = list(spec)
        assert placements == [(False,) * length], \
            f"Expected one empty placement of length {length}, got {placements}"
        assert spec.num_placements == 1

    print("  ✓ test_zero_block_line: PASSED")


def test_exact_fit_has_one_placement():
    spec = LineSpec((2, 1, 3), 8)
    assert spec.slack == 0
    assert list(spec) == [(True, True, False, True, False, True, True, True)]


def test_malformed_lines():
    """Blocks that cannot fit, non-positive blocks and negative lengths are rejected."""
    print("\n" + "=" * 70)
    print("TEST: Malformed lines")
    print("=" * 70)

    for blocks, length in [((3,), 2), ((2, 2), 4), ((1,), 0), ((0,), 3), ((2, -1), 5), ((), -1)]:
        try:
            LineSpec(blocks, length)
            raise AssertionError(f"Expected MalformedLineError for blocks={blocks} length={length}")
        except MalformedLineError as e:
            print(f"  ✓ Caught expected error: {e}")
            assert e.axis is None and e.index is None

    print("  ✓ test_malformed_lines: PASSED")


def test_row_template():
    """Template is the packed placement without trailing slack, between sentinels."""
    assert make_row_template(LineSpec((2, 1), 10)) == (False, True, True, False, True, False)
    assert make_row_template(LineSpec((3,), 3)) == (False, True, True, True, False)
    assert make_row_template(LineSpec((), 4)) == (False, False)

    print("  ✓ test_row_template: PASSED")


if __name__ == "__main__":
    print("\n" + "=" * 70)
    print("LINE SPEC TEST SUITE")
    print("=" * 70)

    test_slack_and_counts()
    test_placements_match_brute_force()
    test_first_placement_is_left_packed()
    test_enumeration_is_restartable()
    test_zero_block_line()
    test_exact_fit_has_one_placement()
    test_malformed_lines()
    test_row_template()

    print("\n" + "=" * 70)
    print("✓ ALL TESTS PASSED")
    print("=" * 70)
