"""Line specifications and placement enumeration."""

from nonosolve.lines.line_spec import LineSpec, MalformedLineError, PlacementEnumerator, make_row_template

__all__ = ["LineSpec", "MalformedLineError", "PlacementEnumerator", "make_row_template"]
