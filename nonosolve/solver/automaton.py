"""
Row compatibility automaton.

Each row is checked against the columns committed so far, left to right.
Its state is a single integer offset into the row's template (see
make_row_template); template[offset:] is the part of the row not yet
produced, and template[offset] is the cell most recently committed.

The only freedom a row has during the scan is how many empty columns it
parks before its next forced run, which is exactly the "stay" transition
below. One offset per row is therefore enough to decide feasibility.

Transitions for advance_row(template, offset, value, remaining_after):

  head filled  -> value must equal template[offset + 1]; offset + 1
  head empty, value filled -> next run starts now; offset + 1
  head empty, value empty  -> offset unchanged, unless the rest of the
                              template no longer fits in remaining_after
"""

from typing import Optional, Sequence, Tuple

from nonosolve.core.grid_types import Line


def advance_row(
    template: Line,
    offset: int,
    value: bool,
    remaining_after: int,
) -> Optional[int]:
    """
    Advance one row's automaton by one committed column.

    Args:
        template: The row's template (sentinel, packed placement, sentinel)
        offset: Current state, index of the head cell in template
        value: Cell value the candidate column places in this row
        remaining_after: Number of columns still to assign after this one

    Returns:
        New offset, or None if no completion of the row is consistent

    Example:
        >>> template = (False, True, True, False, True, False)
        >>> advance_row(template, 0, True, 10)
        1
        >>> advance_row(template, 0, False, 4)
        0
        >>> advance_row(template, 0, False, 3) is None
        True
    """
    if template[offset]:
        # Inside a run: the next cell is forced. A filled head is never the
        # final sentinel, so offset + 1 is always in range.
        if template[offset + 1] == value:
            return offset + 1
        return None

    if value:
        # Start the next run now; the trailing sentinel rejects extra marks
        if offset + 1 < len(template) and template[offset + 1]:
            return offset + 1
        return None

    # Park one more empty column before the next run
    if len(template) - offset <= remaining_after + 2:
        return offset
    return None


def advance_rows(
    templates: Sequence[Line],
    offsets: Sequence[int],
    column: Line,
    remaining_after: int,
) -> Optional[Tuple[int, ...]]:
    """
    Advance every row's automaton with one column placement.

    Args:
        templates: One template per row
        offsets: Current offset per row
        column: Candidate column placement (one value per row)
        remaining_after: Number of columns still to assign after this one

    Returns:
        Tuple of new offsets, or None as soon as any row fails
    """
    new_offsets = []
    for template, offset, value in zip(templates, offsets, column):
        new_offset = advance_row(template, offset, value, remaining_after)
        if new_offset is None:
            return None
        new_offsets.append(new_offset)

    return tuple(new_offsets)
