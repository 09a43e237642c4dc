#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Resolution of environment-dependent defaults.

The renderer is a function of its explicit options only. Defaults which depend
on the environment, the terminal width and the ``CODE_DIFFS_LINE_NUMBERS``
variable, are resolved here once, by the caller.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from rich.console import Console

from codediffs.constants import (
    DEFAULT_LINE_NUMBERS,
    DEFAULT_TAB_WIDTH,
    DEFAULT_WIDTH,
    LINE_NUMBERS_ENV_VAR,
    TRUTHY_ENV_VALUES,
)
from codediffs.options import RenderOptions

logger = logging.getLogger(__name__)


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable.

    Parameters
    ----------
    name : str
        Variable name
    default : bool, default False
        Value used when the variable is unset or empty

    Returns
    -------
    bool
        True if the variable is one of "true", "1", "yes" or "on" (any case)

    """
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    return value.lower() in TRUTHY_ENV_VALUES


def line_numbers_default() -> bool:
    """Whether line numbers are shown when not explicitly requested."""
    return env_flag(LINE_NUMBERS_ENV_VAR, DEFAULT_LINE_NUMBERS)


def is_terminal(stream: IO[str] | None) -> bool:
    """Check whether ``stream`` is an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def detect_terminal_width(stream: IO[str] | None = None) -> int:
    """Width of the terminal behind ``stream``, or 80 if it is not a terminal."""
    target = sys.stdout if stream is None else stream
    if not is_terminal(target):
        return DEFAULT_WIDTH
    width = Console(file=target).width
    return width if width > 0 else DEFAULT_WIDTH


def resolve_render_options(
    stream: IO[str] | None = None,
    *,
    tab_width: int | None = None,
    width: int | None = None,
    line_numbers: bool | None = None,
    color: bool = True,
    force_terminal: bool = False,
) -> RenderOptions:
    """Build ``RenderOptions``, filling unset values from the environment.

    Parameters
    ----------
    stream : file-like, optional
        Output the diff will be written to, defaults to ``sys.stdout``
    tab_width : int, optional
        Defaults to 4
    width : int, optional
        Defaults to the terminal width of ``stream``, or 80 if it is not a terminal
    line_numbers : bool, optional
        Defaults to the ``CODE_DIFFS_LINE_NUMBERS`` environment variable, itself
        defaulting to False
    color : bool, default True
        Emit highlighting styles
    force_terminal : bool, default False
        Emit styles even when ``stream`` is not a terminal

    Returns
    -------
    RenderOptions
        Validated options

    Raises
    ------
    ValidationError
        If an explicit value is invalid

    """
    options = RenderOptions(
        tab_width=DEFAULT_TAB_WIDTH if tab_width is None else tab_width,
        width=detect_terminal_width(stream) if width is None else width,
        line_numbers=line_numbers_default() if line_numbers is None else line_numbers,
        color=color,
        force_terminal=force_terminal,
    )
    logger.debug("Resolved render options: %s", options)
    return options
