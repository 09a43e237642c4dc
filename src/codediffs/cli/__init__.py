#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/cli/__init__.py
"""Command line interface of codediffs.

Usage::

    codediffs before.ll after.ll --type llvm --line-numbers
    code_native f | codediffs - after.s --type native --color always
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from codediffs.api import compare_code, read_code
from codediffs.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from codediffs.cli.output import should_use_color
from codediffs.config import resolve_render_options
from codediffs.diff.renderers.side_by_side import SideBySideRenderer
from codediffs.exceptions import CodeDiffsError
from codediffs.logging_utils import configure_logging
from codediffs.options import CompareOptions

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def _read_input(source: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return read_code(source)


def _run(parsed, output: IO[str]) -> int:
    use_color = should_use_color(parsed.color, output)

    options = CompareOptions(
        code_type=parsed.code_type,
        color=use_color,
        normalize=parsed.normalize,
        function_name=parsed.function_name,
        optimize=parsed.optimize,
        tolerance=parsed.tolerance,
        distance=parsed.distance,
        language=parsed.language,
        theme=parsed.theme,
    )
    diff = compare_code(_read_input(parsed.original), _read_input(parsed.modified), options=options)

    if not diff.has_changes:
        print("No differences found.", file=sys.stderr)

    render_options = resolve_render_options(
        output,
        tab_width=parsed.tab_width,
        width=parsed.width,
        line_numbers=parsed.line_numbers,
        color=use_color,
        force_terminal=parsed.color == "always",
    )
    SideBySideRenderer(render_options).render(diff, output)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the codediffs command.

    Parameters
    ----------
    argv : list of str, optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code

    """
    parser = create_parser()
    parsed = parser.parse_args(argv)

    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    if parsed.original == STDIN_MARKER and parsed.modified == STDIN_MARKER:
        print("Error: only one of the two inputs can be read from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        if parsed.output:
            try:
                with open(parsed.output, "w", encoding="utf-8") as output:
                    exit_code = _run(parsed, output)
            except OSError as e:
                print(f"Error: cannot write {parsed.output}: {e}", file=sys.stderr)
                return EXIT_FILE_ERROR
            print(f"Diff written to: {parsed.output}", file=sys.stderr)
            return exit_code
        return _run(parsed, sys.stdout)
    except CodeDiffsError as e:
        logger.debug("Comparison failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error comparing code: {e}", file=sys.stderr)
        return EXIT_ERROR


__all__ = ["main"]
