#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/cli/builder.py
"""Argument parser and exit codes of the codediffs command."""

from __future__ import annotations

import argparse
import difflib

from codediffs.constants import DEFAULT_CODE_TYPE, DEFAULT_DISTANCE, DEFAULT_TOLERANCE
from codediffs.diff.optimize import DISTANCE_METRICS
from codediffs.exceptions import FileError, RenderingError, ValidationError
from codediffs.highlight import available_themes
from codediffs.options import CODE_TYPES

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ImportError):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def positive_int(value: str) -> int:
    """Validate a strictly positive integer argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a positive integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"must be an integer, got '{value}'") from e

    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {ivalue}")

    return ivalue


def tolerance_value(value: str) -> float:
    """Validate a similarity tolerance between 0 and 1.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a number within [0, 1]

    """
    try:
        fvalue = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"tolerance must be a number, got '{value}'") from e

    if not 0.0 <= fvalue <= 1.0:
        raise argparse.ArgumentTypeError(f"tolerance must be between 0 and 1, got {fvalue}")

    return fvalue


def validate_pygments_theme(theme_name: str) -> str:
    """Validate that a Pygments theme name is valid.

    Parameters
    ----------
    theme_name : str
        Theme name to validate

    Returns
    -------
    str
        The validated theme name

    Raises
    ------
    argparse.ArgumentTypeError
        If theme name is not valid

    """
    themes = available_themes()
    if theme_name not in themes:
        suggestions = sorted(difflib.get_close_matches(theme_name, themes))
        hint = f"Did you mean: {', '.join(suggestions)}? " if suggestions else ""
        raise argparse.ArgumentTypeError(
            f"Invalid Pygments theme '{theme_name}'. {hint}See https://pygments.org/styles/ for full list."
        )
    return theme_name


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the codediffs command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="codediffs",
        description="Compare two code listings and display them side by side, with syntax highlighting",
        epilog="Line numbers are shown by default when CODE_DIFFS_LINE_NUMBERS is set to true.",
    )

    parser.add_argument("original", help="Original code listing (use '-' for stdin)")
    parser.add_argument("modified", help="Modified code listing (use '-' for stdin)")

    comparison = parser.add_argument_group("comparison options")
    comparison.add_argument(
        "--type",
        "-t",
        dest="code_type",
        choices=list(CODE_TYPES),
        default=DEFAULT_CODE_TYPE,
        help="Kind of code: text (default), native (assembly), llvm (LLVM IR), typed (typed IR) or ast",
    )
    comparison.add_argument(
        "--no-normalize",
        dest="normalize",
        action="store_false",
        help="Keep generated module names like julia_f_2007 as they are",
    )
    comparison.add_argument(
        "--function-name",
        help="Only normalize the generated module names of this function",
    )
    comparison.add_argument(
        "--no-optimize",
        dest="optimize",
        action="store_false",
        help="Do not merge similar removed and added lines into changed lines",
    )
    comparison.add_argument(
        "--tolerance",
        type=tolerance_value,
        default=DEFAULT_TOLERANCE,
        help=f"Minimum similarity for merging two lines, 0.0-1.0 (default: {DEFAULT_TOLERANCE})",
    )
    comparison.add_argument(
        "--distance",
        choices=list(DISTANCE_METRICS),
        default=DEFAULT_DISTANCE,
        help=f"Distance metric used when merging lines (default: {DEFAULT_DISTANCE})",
    )

    display = parser.add_argument_group("display options")
    display.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Syntax highlighting: auto (default, if terminal), always, never",
    )
    display.add_argument("--language", "-l", help="Pygments lexer overriding the one of the code type")
    display.add_argument(
        "--theme",
        type=validate_pygments_theme,
        help="Pygments style used for highlighting (default: basic terminal colors)",
    )
    display.add_argument("--width", "-W", type=positive_int, help="Output width (default: terminal width, or 80)")
    display.add_argument("--tab-width", type=positive_int, help="Number of spaces tabs are replaced with (default: 4)")
    display.add_argument(
        "--line-numbers",
        "-n",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show line numbers on each side (default: CODE_DIFFS_LINE_NUMBERS, or off)",
    )
    display.add_argument("--output", "-o", help="Write the diff to a file (default: stdout)")

    logging_group = parser.add_argument_group("logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Timestamped logs with logger names")

    return parser
