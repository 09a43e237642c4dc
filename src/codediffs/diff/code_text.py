#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/code_text.py
"""Line-oriented code listings with an optional highlighted form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from codediffs.diff.projection import check_line_structure
from codediffs.exceptions import ValidationError


@dataclass(frozen=True)
class CodeText:
    """A code listing as an ordered sequence of lines.

    The highlighted form holds the same lines with embedded style markers.
    Without one, the plain lines are used as their own highlighted form.

    Parameters
    ----------
    lines : iterable of str
        Plain lines, without line terminators
    highlighted : iterable of str, optional
        Highlighted lines, one per plain line

    Raises
    ------
    ValidationError
        If a line contains a newline
    HighlightMismatchError
        If the highlighted lines do not match the plain lines one to one

    """

    lines: tuple[str, ...]
    highlighted: tuple[str, ...] = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Freeze the line sequences and validate the highlighted form."""
        lines = tuple(self.lines)
        for index, line in enumerate(lines):
            if "\n" in line:
                raise ValidationError(
                    f"Line {index + 1} contains a newline", parameter_name="lines", parameter_value=line
                )
        object.__setattr__(self, "lines", lines)

        if self.highlighted is None:
            object.__setattr__(self, "highlighted", lines)
        else:
            highlighted = tuple(self.highlighted)
            check_line_structure(lines, highlighted)
            object.__setattr__(self, "highlighted", highlighted)

    @classmethod
    def from_string(cls, code: str, highlighted: str | None = None) -> CodeText:
        """Split ``code`` (and its highlighted form) into lines."""
        return cls(
            tuple(code.splitlines()),
            None if highlighted is None else tuple(highlighted.splitlines()),
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str], highlighted: Iterable[str] | None = None) -> CodeText:
        """Build from already split lines."""
        return cls(tuple(lines), None if highlighted is None else tuple(highlighted))

    @property
    def is_highlighted(self) -> bool:
        """Whether the highlighted form differs from the plain lines."""
        return self.highlighted is not self.lines and self.highlighted != self.lines

    def __len__(self) -> int:
        """Return the number of lines."""
        return len(self.lines)
