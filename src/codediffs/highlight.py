#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/highlight.py
"""Syntax highlighting of code listings with Pygments.

Highlighters are plain callables turning code into the same code with ANSI
style markers, line for line. They know nothing about diffs: the diff is
computed on plain text and the highlighted lines are projected onto it
afterwards (see :mod:`codediffs.diff.projection`).
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from pygments import highlight
from pygments.formatter import Formatter
from pygments.formatters import Terminal256Formatter, TerminalFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

from codediffs.diff.code_text import CodeText
from codediffs.exceptions import ValidationError

logger = logging.getLogger(__name__)

Highlighter = Callable[[str], str]
"""Turns plain code into highlighted code with the same lines."""

# Pygments lexer used for each code type, None means no highlighting
CODE_TYPE_LEXERS: dict[str, str | None] = {
    "text": None,
    "native": "gas",
    "llvm": "llvm",
    "typed": "julia",
    "ast": "julia",
}


def available_themes() -> list[str]:
    """Names of the installed Pygments styles."""
    return sorted(get_all_styles())


class PygmentsHighlighter:
    """Highlight code for the terminal with a Pygments lexer.

    Parameters
    ----------
    language : str
        Pygments lexer name or alias, e.g. ``"llvm"`` or ``"gas"``
    theme : str, optional
        Pygments style name. When given, the 256-color formatter is used with
        that style; otherwise the basic 16-color terminal palette.

    Raises
    ------
    ValidationError
        If the lexer or the style does not exist

    """

    def __init__(self, language: str, theme: str | None = None):
        """Look up the lexer and build the formatter."""
        self.language = language
        self.theme = theme
        try:
            # Leading and trailing blank lines must be kept to preserve line indices
            self.lexer: Lexer = get_lexer_by_name(language, stripnl=False, stripall=False, ensurenl=True)
        except ClassNotFound as e:
            raise ValidationError(
                f"Unknown Pygments lexer: {language}", parameter_name="language", parameter_value=language
            ) from e

        if theme is None:
            self.formatter: Formatter = TerminalFormatter()
        else:
            if theme not in get_all_styles():
                raise ValidationError(
                    f"Unknown Pygments theme: {theme}", parameter_name="theme", parameter_value=theme
                )
            self.formatter = Terminal256Formatter(style=theme)

    def highlight_lines(self, lines: Sequence[str]) -> list[str]:
        """Highlight a sequence of lines, returning one highlighted line each."""
        if not lines:
            return []
        return self("\n".join(lines) + "\n").splitlines()

    def __call__(self, code: str) -> str:
        """Highlight ``code``; the result always ends with a newline."""
        if not code:
            return ""
        return highlight(code, self.lexer, self.formatter)

    def __repr__(self) -> str:
        return f"PygmentsHighlighter(language={self.language!r}, theme={self.theme!r})"


def highlighter_for_code_type(
    code_type: str,
    language: str | None = None,
    theme: str | None = None,
) -> PygmentsHighlighter | None:
    """Choose the highlighter for a kind of code.

    Parameters
    ----------
    code_type : str
        One of the keys of ``CODE_TYPE_LEXERS``
    language : str, optional
        Lexer name overriding the one of the code type
    theme : str, optional
        Pygments style name

    Returns
    -------
    PygmentsHighlighter or None
        None when the code type is not highlighted

    """
    if code_type not in CODE_TYPE_LEXERS:
        raise ValidationError(
            f"Unknown code type: {code_type}. Must be one of: {', '.join(CODE_TYPE_LEXERS)}",
            parameter_name="code_type",
            parameter_value=code_type,
        )
    lexer_name = language or CODE_TYPE_LEXERS[code_type]
    if lexer_name is None:
        return None
    logger.debug("Highlighting %s code with the %s lexer", code_type, lexer_name)
    return PygmentsHighlighter(lexer_name, theme)


def highlight_code(code: str, highlighter: Highlighter | None = None) -> CodeText:
    """Split ``code`` into lines and attach its highlighted form.

    Parameters
    ----------
    code : str
        Plain code
    highlighter : callable, optional
        Highlighter applied to the whole code. If None, the code is not highlighted.

    Returns
    -------
    CodeText
        Plain and highlighted lines

    Raises
    ------
    HighlightMismatchError
        If the highlighter changed the lines of the code

    """
    lines = code.splitlines()
    if highlighter is None or not lines:
        return CodeText(tuple(lines))
    # A trailing newline keeps a last blank line from being dropped by splitlines
    highlighted = highlighter("\n".join(lines) + "\n")
    return CodeText(tuple(lines), tuple(highlighted.splitlines()))
