#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/__init__.py
"""Line-level comparison of code listings.

Key Features
------------
- Minimal line alignment based on the longest common subsequence
- Highlighting computed separately and projected back onto the alignment
- Merging of similar removed and added lines into changed lines
- Side-by-side terminal display with wrapping and line numbers

Examples
--------
Align two listings and merge similar lines:
    >>> from codediffs.diff import CodeText, diff_lines, optimize_line_changes
    >>> left = CodeText.from_string("top:\\n  ret i64 %1\\n}")
    >>> right = CodeText.from_string("top:\\n  ret i64 %2\\n}")
    >>> diff = optimize_line_changes(diff_lines(left, right))
    >>> [entry.tag.value for entry in diff.entries]
    ['unchanged', 'changed', 'unchanged']

"""

from codediffs.diff.alignment import align_lines, diff_lines
from codediffs.diff.code_diff import CodeDiff, DiffEntry, DiffTag
from codediffs.diff.code_text import CodeText
from codediffs.diff.optimize import (
    DISTANCE_METRICS,
    levenshtein_distance,
    optimize_line_changes,
    sequence_matcher_distance,
)
from codediffs.diff.projection import ProjectedEntry, project_highlighting

__all__ = [
    "DISTANCE_METRICS",
    "CodeDiff",
    "CodeText",
    "DiffEntry",
    "DiffTag",
    "ProjectedEntry",
    "align_lines",
    "diff_lines",
    "levenshtein_distance",
    "optimize_line_changes",
    "project_highlighting",
    "sequence_matcher_distance",
]
