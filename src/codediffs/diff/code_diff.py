#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/code_diff.py
"""Line-level difference between two code listings.

A ``CodeDiff`` is an ordered sequence of ``DiffEntry`` values referencing
lines of two ``CodeText`` values by index. The entries always reconstruct both
listings: taking the left line of every entry which is not an addition gives
back the left code in order, and likewise for the right side. This is checked
when the diff is built, so a ``CodeDiff`` is never partially valid.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from codediffs.diff.code_text import CodeText
from codediffs.exceptions import DiffInvariantError


class DiffTag(str, enum.Enum):
    """Relationship between the two sides of a diff entry."""

    UNCHANGED = "unchanged"
    REMOVED = "removed"
    ADDED = "added"
    CHANGED = "changed"


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """A single aligned record of a diff.

    Parameters
    ----------
    tag : DiffTag
        Kind of entry
    left : int or None
        0-based index of the left line, None for additions
    right : int or None
        0-based index of the right line, None for removals

    Raises
    ------
    ValueError
        If the indices present do not match the tag

    """

    tag: DiffTag
    left: int | None = None
    right: int | None = None

    def __post_init__(self) -> None:
        """Check that the tag and the line references agree."""
        has_left = self.left is not None
        has_right = self.right is not None
        expected = {
            DiffTag.UNCHANGED: (True, True),
            DiffTag.CHANGED: (True, True),
            DiffTag.REMOVED: (True, False),
            DiffTag.ADDED: (False, True),
        }[self.tag]
        if (has_left, has_right) != expected:
            raise ValueError(f"Invalid line references for {self.tag.value} entry: left={self.left}, right={self.right}")

    @classmethod
    def unchanged(cls, left: int, right: int) -> DiffEntry:
        return cls(DiffTag.UNCHANGED, left, right)

    @classmethod
    def removed(cls, left: int) -> DiffEntry:
        return cls(DiffTag.REMOVED, left, None)

    @classmethod
    def added(cls, right: int) -> DiffEntry:
        return cls(DiffTag.ADDED, None, right)

    @classmethod
    def changed(cls, left: int, right: int) -> DiffEntry:
        return cls(DiffTag.CHANGED, left, right)


@dataclass(frozen=True)
class CodeDiff:
    """A difference between two code listings.

    ``left`` and ``right`` carry both the plain lines, on which the entries
    were computed, and the highlighted lines, which are shown when rendering.

    Use :func:`codediffs.diff.optimize.optimize_line_changes` to merge similar
    removed and added lines, and
    :func:`codediffs.diff.renderers.side_by_side.side_by_side_diff` to display it.

    Parameters
    ----------
    left : CodeText
        Original code
    right : CodeText
        Modified code
    entries : iterable of DiffEntry
        Alignment of the two codes

    Raises
    ------
    DiffInvariantError
        If the entries do not reconstruct both codes

    """

    left: CodeText
    right: CodeText
    entries: tuple[DiffEntry, ...]

    def __post_init__(self) -> None:
        """Freeze the entries and check the reconstruction invariant."""
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)

        left_indices = [entry.left for entry in entries if entry.tag is not DiffTag.ADDED]
        if left_indices != list(range(len(self.left))):
            raise DiffInvariantError(f"Diff entries do not reconstruct the left code ({len(self.left)} lines)")

        right_indices = [entry.right for entry in entries if entry.tag is not DiffTag.REMOVED]
        if right_indices != list(range(len(self.right))):
            raise DiffInvariantError(f"Diff entries do not reconstruct the right code ({len(self.right)} lines)")

    def with_entries(self, entries: Iterable[DiffEntry]) -> CodeDiff:
        """Return a diff of the same codes with other entries."""
        return CodeDiff(self.left, self.right, tuple(entries))

    def left_lines(self) -> list[str]:
        """Reconstruct the left plain lines from the entries."""
        return [self.left.lines[entry.left] for entry in self.entries if entry.left is not None]

    def right_lines(self) -> list[str]:
        """Reconstruct the right plain lines from the entries."""
        return [self.right.lines[entry.right] for entry in self.entries if entry.right is not None]

    def count(self, tag: DiffTag) -> int:
        """Return the number of entries with the given tag."""
        return sum(1 for entry in self.entries if entry.tag is tag)

    @property
    def stats(self) -> dict[str, int]:
        """Number of entries per tag."""
        return {tag.value: self.count(tag) for tag in DiffTag}

    @property
    def has_changes(self) -> bool:
        """Whether any entry is not unchanged."""
        return any(entry.tag is not DiffTag.UNCHANGED for entry in self.entries)

    def __str__(self) -> str:
        """Render side by side with default options and no color."""
        from codediffs.diff.renderers.side_by_side import render_to_string
        from codediffs.options import RenderOptions

        return render_to_string(self, RenderOptions(color=False))
