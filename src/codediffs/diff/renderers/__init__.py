#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/renderers/__init__.py
"""Renderers displaying code diffs.

Available Renderers
-------------------
- SideBySideRenderer: Two-column terminal output with a diff gutter

Examples
--------
Display a diff in the terminal:
    >>> from codediffs import compare_code
    >>> from codediffs.diff.renderers import side_by_side_diff
    >>> diff = compare_code("a = 1\\nb = 2", "a = 1\\nb = 3")
    >>> side_by_side_diff(diff, width=60, line_numbers=True)

"""

from codediffs.diff.renderers.side_by_side import (
    SideBySideRenderer,
    render_to_string,
    side_by_side_diff,
    wrap_text,
)

__all__ = [
    "SideBySideRenderer",
    "render_to_string",
    "side_by_side_diff",
    "wrap_text",
]
