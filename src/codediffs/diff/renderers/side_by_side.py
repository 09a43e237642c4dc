#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/diff/renderers/side_by_side.py
"""Side-by-side terminal renderer for code diffs.

Each diff entry is displayed as one or more rows: the left line, a gutter
glyph telling how both sides relate, then the right line::

    define i64 @f1(i64 signext %0) #0 { ⟪╋⟫define i64 @f1(i8 signext %0) #0 {
    top:                                 ┃ top:
                                         ┣⟫  %1 = sext i8 %0 to i64
      %1 = add i64 %0, 1                ⟪╋⟫  %2 = add nsw i64 %1, 1

Lines longer than their column are hard-wrapped; every continuation row repeats
the gutter glyph and the line number of its logical line. Highlighted lines are
decoded from ANSI codes into rich ``Text`` objects, so wrapping keeps the
active style on continuation rows.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import IO

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from codediffs.config import resolve_render_options
from codediffs.constants import (
    GUTTER_ADDED,
    GUTTER_CHANGED,
    GUTTER_REMOVED,
    GUTTER_UNCHANGED,
    GUTTER_WIDTH,
    LINE_NUMBER_SEPARATOR,
)
from codediffs.diff.code_diff import CodeDiff, DiffTag
from codediffs.diff.projection import project_highlighting
from codediffs.exceptions import OutputWriteError
from codediffs.options import RenderOptions

logger = logging.getLogger(__name__)

GUTTERS: dict[DiffTag, str] = {
    DiffTag.UNCHANGED: GUTTER_UNCHANGED,
    DiffTag.REMOVED: GUTTER_REMOVED,
    DiffTag.ADDED: GUTTER_ADDED,
    DiffTag.CHANGED: GUTTER_CHANGED,
}


def wrap_text(text: Text, width: int) -> list[Text]:
    """Hard-wrap ``text`` into chunks of at most ``width`` terminal cells.

    A chunk always holds at least one character, so a character wider than
    ``width`` gets a chunk of its own instead of blocking progress. Styles are
    kept on every chunk they cover.

    Parameters
    ----------
    text : Text
        Line to wrap
    width : int
        Maximum chunk width in cells

    Returns
    -------
    list of Text
        At least one chunk, possibly empty

    """
    if text.cell_len <= width:
        return [text]

    offsets: list[int] = []
    cells = 0
    for index, char in enumerate(text.plain):
        size = cell_len(char)
        if cells and cells + size > width:
            offsets.append(index)
            cells = 0
        cells += size
    return list(text.divide(offsets))


class SideBySideRenderer:
    """Render a ``CodeDiff`` as two columns separated by a gutter.

    Parameters
    ----------
    options : RenderOptions, optional
        Rendering options. The width is taken as given: detecting the terminal
        width is done by :func:`codediffs.config.resolve_render_options`.

    Examples
    --------
        >>> from codediffs import compare_code
        >>> diff = compare_code("a\\nb", "a\\nc", color=False)
        >>> SideBySideRenderer(RenderOptions(width=40, color=False)).render(diff)
        a ┃ a
        b⟪╋⟫c

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer."""
        self.options = options or RenderOptions()

    def _expand_tabs(self, line: str) -> str:
        return line.replace("\t", " " * self.options.tab_width)

    def _line_text(self, plain: str, highlighted: str) -> Text:
        """Build the displayed text of a line, styled if highlighting is enabled."""
        if not self.options.color or highlighted == plain:
            return Text(self._expand_tabs(plain))
        return Text.from_ansi(self._expand_tabs(highlighted))

    def column_width(self, diff: CodeDiff) -> int:
        """Width in cells of each code column, excluding line numbers."""
        longest = max(
            (cell_len(self._expand_tabs(line)) for line in (*diff.left.lines, *diff.right.lines)),
            default=0,
        )
        available = (self.options.width - GUTTER_WIDTH) // 2 - self._number_columns(diff)
        return max(1, min(longest, available))

    def _number_width(self, diff: CodeDiff) -> int:
        if not self.options.line_numbers:
            return 0
        return len(str(max(len(diff.left), len(diff.right), 1)))

    def _number_columns(self, diff: CodeDiff) -> int:
        number_width = self._number_width(diff)
        return number_width + len(LINE_NUMBER_SEPARATOR) if number_width else 0

    def layout(self, diff: CodeDiff) -> list[Text]:
        """Lay out the rows of the side-by-side display.

        Parameters
        ----------
        diff : CodeDiff
            Diff to display

        Returns
        -------
        list of Text
            One styled row per physical terminal row

        """
        column_width = self.column_width(diff)
        number_width = self._number_width(diff)
        logger.debug("Laying out %d entries with column width %d", len(diff.entries), column_width)

        rows: list[Text] = []
        for entry in project_highlighting(diff):
            left_chunks: list[Text] = []
            right_chunks: list[Text] = []
            if entry.left_index is not None and entry.left_text is not None:
                left_text = self._line_text(diff.left.lines[entry.left_index], entry.left_text)
                left_chunks = wrap_text(left_text, column_width)
            if entry.right_index is not None and entry.right_text is not None:
                right_text = self._line_text(diff.right.lines[entry.right_index], entry.right_text)
                right_chunks = wrap_text(right_text, column_width)

            gutter = GUTTERS[entry.tag]
            for row_index in range(max(len(left_chunks), len(right_chunks))):
                left = left_chunks[row_index] if row_index < len(left_chunks) else None
                right = right_chunks[row_index] if row_index < len(right_chunks) else None

                row = Text()
                if number_width:
                    number = "" if left is None else str(entry.left_index + 1)  # type: ignore[operator]
                    row.append(number.rjust(number_width) + LINE_NUMBER_SEPARATOR)
                if left is not None:
                    row.append(left)
                row.append(" " * (column_width - (0 if left is None else left.cell_len)))

                row.append(gutter)

                if right is not None:
                    row.append(right)
                if number_width:
                    number = "" if right is None else str(entry.right_index + 1)  # type: ignore[operator]
                    row.append(" " * (column_width - (0 if right is None else right.cell_len)))
                    row.append(LINE_NUMBER_SEPARATOR + number.rjust(number_width))
                rows.append(row)

        return rows

    def _console(self, file: IO[str], width: int) -> Console:
        if not self.options.color:
            force_terminal: bool | None = False
        else:
            force_terminal = True if self.options.force_terminal else None
        return Console(
            file=file,
            width=width,
            force_terminal=force_terminal,
            no_color=not self.options.color,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def render(self, diff: CodeDiff, file: IO[str] | None = None) -> None:
        """Write the side-by-side display of ``diff`` to ``file``.

        Parameters
        ----------
        diff : CodeDiff
            Diff to display
        file : file-like, optional
            Writable text sink, defaults to ``sys.stdout``

        Raises
        ------
        OutputWriteError
            If writing to the sink fails

        """
        sink = sys.stdout if file is None else file
        rows = self.layout(diff)
        # Rows wider than the console would lose their trailing spaces
        console = self._console(sink, max([self.options.width, *(row.cell_len for row in rows)]))
        try:
            for row in rows:
                console.print(row)
        except OSError as e:
            raise OutputWriteError(getattr(sink, "name", repr(sink)), original_error=e) from e


def render_to_string(diff: CodeDiff, options: RenderOptions | None = None) -> str:
    """Render ``diff`` side by side into a string."""
    buffer = io.StringIO()
    SideBySideRenderer(options).render(diff, buffer)
    return buffer.getvalue()


def side_by_side_diff(
    diff: CodeDiff,
    file: IO[str] | None = None,
    *,
    tab_width: int | None = None,
    width: int | None = None,
    line_numbers: bool | None = None,
    color: bool = True,
) -> None:
    """Side-by-side display of ``diff`` to ``file`` (defaults to stdout).

    Parameters
    ----------
    diff : CodeDiff
        Diff to display
    file : file-like, optional
        Writable text sink, defaults to ``sys.stdout``
    tab_width : int, optional
        Number of spaces tabs are replaced with, 4 by default
    width : int, optional
        Output width; defaults to the terminal width, or 80 for non-terminal output
    line_numbers : bool, optional
        Show line numbers on each side; defaults to the ``CODE_DIFFS_LINE_NUMBERS``
        environment variable, which itself defaults to false
    color : bool, default True
        Emit highlighting styles

    """
    options = resolve_render_options(
        file,
        tab_width=tab_width,
        width=width,
        line_numbers=line_numbers,
        color=color,
    )
    SideBySideRenderer(options).render(diff, file)
