#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/alignment.py
"""Line alignment of two code listings.

Each line is an atomic token. A longest common subsequence of lines is kept
unchanged; the lines between two kept lines are reported as removals (left
side) followed by additions (right side). The LCS length alone determines the
edit cost, so any longest subsequence gives a minimal edit script.

The table is quadratic in the number of lines, which is fine for
function-sized listings. The common prefix and suffix are stripped first, so
nearly identical listings only pay for their differing middle.
"""

from __future__ import annotations

import logging
from typing import Sequence

from codediffs.diff.code_diff import CodeDiff, DiffEntry
from codediffs.diff.code_text import CodeText

logger = logging.getLogger(__name__)


def longest_common_subsequence(left: Sequence[str], right: Sequence[str]) -> list[tuple[int, int]]:
    """Find a longest common subsequence of two line sequences.

    Parameters
    ----------
    left : sequence of str
        Left lines
    right : sequence of str
        Right lines

    Returns
    -------
    list of (int, int)
        Index pairs of matched lines, strictly increasing on both sides

    """
    n, m = len(left), len(right)

    prefix = 0
    while prefix < n and prefix < m and left[prefix] == right[prefix]:
        prefix += 1

    suffix = 0
    while suffix < n - prefix and suffix < m - prefix and left[n - 1 - suffix] == right[m - 1 - suffix]:
        suffix += 1

    matches = [(i, i) for i in range(prefix)]

    middle_left = left[prefix : n - suffix]
    middle_right = right[prefix : m - suffix]
    rows, cols = len(middle_left), len(middle_right)

    if rows and cols:
        # lengths[i][j] is the LCS length of middle_left[i:] and middle_right[j:]
        lengths = [[0] * (cols + 1) for _ in range(rows + 1)]
        for i in range(rows - 1, -1, -1):
            row, below = lengths[i], lengths[i + 1]
            line = middle_left[i]
            for j in range(cols - 1, -1, -1):
                if line == middle_right[j]:
                    row[j] = below[j + 1] + 1
                else:
                    row[j] = max(below[j], row[j + 1])

        i = j = 0
        while i < rows and j < cols:
            if middle_left[i] == middle_right[j]:
                matches.append((prefix + i, prefix + j))
                i += 1
                j += 1
            elif lengths[i + 1][j] >= lengths[i][j + 1]:
                i += 1
            else:
                j += 1

    matches.extend((n - suffix + k, m - suffix + k) for k in range(suffix))
    return matches


def align_lines(left: Sequence[str], right: Sequence[str]) -> tuple[DiffEntry, ...]:
    """Compute a minimal line-level edit script between two line sequences.

    Parameters
    ----------
    left : sequence of str
        Original lines
    right : sequence of str
        Modified lines

    Returns
    -------
    tuple of DiffEntry
        Unchanged entries for matched lines; for every gap before a match (and
        after the last one), all removed lines followed by all added lines.

    """
    entries: list[DiffEntry] = []
    next_left = next_right = 0

    for match_left, match_right in [*longest_common_subsequence(left, right), (len(left), len(right))]:
        entries.extend(DiffEntry.removed(i) for i in range(next_left, match_left))
        entries.extend(DiffEntry.added(j) for j in range(next_right, match_right))
        if match_left < len(left):
            entries.append(DiffEntry.unchanged(match_left, match_right))
        next_left, next_right = match_left + 1, match_right + 1

    logger.debug("Aligned %d left lines with %d right lines into %d entries", len(left), len(right), len(entries))
    return tuple(entries)


def diff_lines(left: CodeText, right: CodeText) -> CodeDiff:
    """Align the plain lines of two code listings into a ``CodeDiff``."""
    return CodeDiff(left, right, align_lines(left.lines, right.lines))
