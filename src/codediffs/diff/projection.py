#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/projection.py
"""Projection of syntax highlighting onto a diff computed on plain text.

Highlighters are not diff-aware, and re-highlighting lines after diffing is
unreliable for arbitrary highlighters. The diff is therefore computed on plain
text only, and the highlighted form of each line is looked up afterwards by
line index. This only works when both forms agree line by line, which is
checked here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from rich.text import Text

from codediffs.exceptions import HighlightMismatchError

if TYPE_CHECKING:
    from codediffs.diff.code_diff import CodeDiff, DiffTag


def strip_styles(line: str) -> str:
    """Remove ANSI style markers from a highlighted line.

    Parameters
    ----------
    line : str
        Highlighted line

    Returns
    -------
    str
        The characters of the line without styling

    """
    return Text.from_ansi(line).plain


def check_line_structure(plain: Sequence[str], highlighted: Sequence[str]) -> None:
    """Check that highlighted lines match plain lines one to one.

    Parameters
    ----------
    plain : sequence of str
        Plain lines
    highlighted : sequence of str
        Highlighted lines

    Raises
    ------
    HighlightMismatchError
        If the line counts differ, or a highlighted line does not strip
        down to its plain line.

    """
    if len(plain) != len(highlighted):
        raise HighlightMismatchError(
            f"Highlighted code has {len(highlighted)} lines but plain code has {len(plain)} lines"
        )

    for index, (plain_line, highlighted_line) in enumerate(zip(plain, highlighted)):
        if plain_line == highlighted_line:
            continue
        if strip_styles(highlighted_line) != plain_line:
            raise HighlightMismatchError(
                f"Highlighted line {index + 1} does not match plain line: {plain_line!r}",
                line_index=index,
            )


@dataclass(frozen=True, slots=True)
class ProjectedEntry:
    """A diff entry carrying the highlighted text of the lines it references."""

    tag: DiffTag
    left_index: int | None
    left_text: str | None
    right_index: int | None
    right_text: str | None


def project_highlighting(diff: CodeDiff) -> list[ProjectedEntry]:
    """Attach highlighted lines to every entry of ``diff``.

    The structure and the indices of the diff are unchanged: the result has one
    entry per diff entry, in the same order.

    Parameters
    ----------
    diff : CodeDiff
        Diff computed on plain text

    Returns
    -------
    list of ProjectedEntry
        Entries with the highlighted form of their lines

    """
    left = diff.left.highlighted
    right = diff.right.highlighted
    return [
        ProjectedEntry(
            tag=entry.tag,
            left_index=entry.left,
            left_text=None if entry.left is None else left[entry.left],
            right_index=entry.right,
            right_text=None if entry.right is None else right[entry.right],
        )
        for entry in diff.entries
    ]
