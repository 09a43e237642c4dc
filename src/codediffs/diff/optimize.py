#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/optimize.py
"""Merging of similar removed and added lines into changed lines.

A line alignment only knows whether two lines are equal. Code often changes a
single operand on a line, which the alignment shows as one removed line and
one added line. This pass pairs such lines when their text is similar enough,
so they are displayed next to each other as a single changed line.

This is a greedy readability aid: it never reorders lines on either side and
does not try to produce an optimal diff.
"""

from __future__ import annotations

import difflib
import logging
from typing import Callable

from codediffs.constants import DEFAULT_TOLERANCE
from codediffs.diff.code_diff import CodeDiff, DiffEntry, DiffTag
from codediffs.exceptions import ValidationError

logger = logging.getLogger(__name__)

DistanceMetric = Callable[[str, str], float]
"""Normalized distance between two lines: 0 when identical, at most 1."""


def levenshtein_distance(a: str, b: str) -> float:
    """Levenshtein distance divided by the length of the longer string.

    Parameters
    ----------
    a : str
        First line
    b : str
        Second line

    Returns
    -------
    float
        Distance in [0, 1]; 0 for two empty strings

    """
    if a == b:
        return 0.0
    if not a or not b:
        return 1.0

    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current

    return previous[-1] / len(a)


def sequence_matcher_distance(a: str, b: str) -> float:
    """One minus the ``difflib.SequenceMatcher`` similarity ratio."""
    if a == b:
        return 0.0
    return 1.0 - difflib.SequenceMatcher(None, a, b, autojunk=False).ratio()


DISTANCE_METRICS: dict[str, DistanceMetric] = {
    "levenshtein": levenshtein_distance,
    "difflib": sequence_matcher_distance,
}


def get_distance_metric(name: str) -> DistanceMetric:
    """Look up a distance metric by name.

    Raises
    ------
    ValidationError
        If no metric has this name

    """
    try:
        return DISTANCE_METRICS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown distance metric: {name}. Must be one of: {', '.join(DISTANCE_METRICS)}",
            parameter_name="distance",
            parameter_value=name,
        ) from None


def validate_tolerance(tolerance: float) -> float:
    """Check that the similarity tolerance is within [0, 1]."""
    if not 0.0 <= tolerance <= 1.0:
        raise ValidationError(
            f"tolerance must be between 0 and 1, got {tolerance}",
            parameter_name="tolerance",
            parameter_value=tolerance,
        )
    return tolerance


def _merge_run(
    removed: list[DiffEntry],
    added: list[DiffEntry],
    diff: CodeDiff,
    distance: DistanceMetric,
    max_distance: float,
) -> list[DiffEntry]:
    """Pair the removed and added lines of one run, keeping both sides in order."""
    pairs: list[tuple[int, int]] = []
    next_removed = 0
    for added_pos, added_entry in enumerate(added):
        right_line = diff.right.lines[added_entry.right]  # type: ignore[index]
        for removed_pos in range(next_removed, len(removed)):
            left_line = diff.left.lines[removed[removed_pos].left]  # type: ignore[index]
            if distance(left_line, right_line) <= max_distance:
                pairs.append((removed_pos, added_pos))
                next_removed = removed_pos + 1
                break

    merged: list[DiffEntry] = []
    removed_done = added_done = 0
    for removed_pos, added_pos in pairs:
        merged.extend(removed[removed_done:removed_pos])
        merged.extend(added[added_done:added_pos])
        merged.append(DiffEntry.changed(removed[removed_pos].left, added[added_pos].right))  # type: ignore[arg-type]
        removed_done, added_done = removed_pos + 1, added_pos + 1
    merged.extend(removed[removed_done:])
    merged.extend(added[added_done:])
    return merged


def optimize_line_changes(
    diff: CodeDiff,
    distance: DistanceMetric | str = levenshtein_distance,
    tolerance: float = DEFAULT_TOLERANCE,
) -> CodeDiff:
    """Merge consecutive line removals and additions into line changes.

    For every run of removed entries immediately followed by added entries,
    each added line is paired with the first unpaired removed line after the
    previously paired one whose distance is at most ``1 - tolerance``. Paired
    lines become a single changed entry. When all lines of a run are similar,
    this pairs them positionally.

    Parameters
    ----------
    diff : CodeDiff
        Diff to improve; it is left untouched
    distance : callable or str, default levenshtein_distance
        Normalized distance between two plain lines, or the name of one of
        ``DISTANCE_METRICS``
    tolerance : float, default 0.7
        Minimum similarity (``1 - distance``) for two lines to be merged

    Returns
    -------
    CodeDiff
        New diff with the merged entries. Running the optimization again with
        the same parameters returns an equal diff.

    Raises
    ------
    ValidationError
        If the tolerance is outside [0, 1] or the metric name is unknown

    """
    validate_tolerance(tolerance)
    metric = get_distance_metric(distance) if isinstance(distance, str) else distance
    max_distance = 1.0 - tolerance

    entries = diff.entries
    optimized: list[DiffEntry] = []
    merges = 0
    i = 0
    while i < len(entries):
        if entries[i].tag is not DiffTag.REMOVED:
            optimized.append(entries[i])
            i += 1
            continue

        removed_end = i
        while removed_end < len(entries) and entries[removed_end].tag is DiffTag.REMOVED:
            removed_end += 1
        added_end = removed_end
        while added_end < len(entries) and entries[added_end].tag is DiffTag.ADDED:
            added_end += 1

        removed = list(entries[i:removed_end])
        added = list(entries[removed_end:added_end])
        if added:
            run = _merge_run(removed, added, diff, metric, max_distance)
            merges += len(removed) + len(added) - len(run)
            optimized.extend(run)
        else:
            optimized.extend(removed)
        i = added_end

    logger.debug("Merged %d removed/added line pairs into changed lines", merges)
    return diff.with_entries(optimized)
