#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/api.py
"""Python API for comparing code listings.

This module ties the pipeline together: normalization of generated names,
highlighting, line alignment and the merging of similar lines. The result is
a :class:`~codediffs.diff.code_diff.CodeDiff`, displayed with
:func:`~codediffs.diff.renderers.side_by_side.side_by_side_diff`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from codediffs.diff.alignment import diff_lines
from codediffs.diff.code_diff import CodeDiff
from codediffs.diff.optimize import get_distance_metric, optimize_line_changes
from codediffs.exceptions import FileError, FileNotFoundError, ValidationError
from codediffs.highlight import Highlighter, highlight_code, highlighter_for_code_type
from codediffs.normalize import replace_module_names
from codediffs.options import CompareOptions

logger = logging.getLogger(__name__)

# Code types whose listings contain generated module names
NORMALIZED_CODE_TYPES = frozenset({"native", "llvm"})

BYTE_ORDER_MARK = "\ufeff"


def _strip_bom(code: str) -> str:
    # Pygments drops a leading BOM, so the plain lines must lose it too
    return code[len(BYTE_ORDER_MARK) :] if code.startswith(BYTE_ORDER_MARK) else code


def compare_code(
    code1: str,
    code2: str,
    *,
    options: CompareOptions | None = None,
    highlighter: Highlighter | None = None,
    **kwargs: Any,
) -> CodeDiff:
    """Return a ``CodeDiff`` between ``code1`` and ``code2``.

    Parameters
    ----------
    code1 : str
        Original code
    code2 : str
        Modified code
    options : CompareOptions, optional
        Comparison options
    highlighter : callable, optional
        Highlighter overriding the one chosen from ``options.code_type``.
        Ignored when ``options.color`` is False.
    **kwargs : Any
        Individual ``CompareOptions`` fields, overriding ``options``

    Returns
    -------
    CodeDiff
        The difference, with similar lines merged unless ``options.optimize``
        is False

    Raises
    ------
    ValidationError
        If an option is invalid
    HighlightMismatchError
        If the highlighter changed the lines of either code

    Examples
    --------
        >>> diff = compare_code("top:\\n  ret i64 %1", "top:\\n  ret i64 %2", color=False)
        >>> diff.stats["changed"]
        1

    """
    options = options or CompareOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    code1 = _strip_bom(code1)
    code2 = _strip_bom(code2)

    if options.normalize and options.code_type in NORMALIZED_CODE_TYPES:
        code1 = replace_module_names(code1, options.function_name)
        code2 = replace_module_names(code2, options.function_name)

    if not options.color:
        highlighter = None
    elif highlighter is None:
        highlighter = highlighter_for_code_type(options.code_type, options.language, options.theme)

    left = highlight_code(code1, highlighter)
    right = highlight_code(code2, highlighter)

    diff = diff_lines(left, right)
    if options.optimize:
        diff = optimize_line_changes(diff, get_distance_metric(options.distance), options.tolerance)

    logger.debug("Compared %d and %d lines: %s", len(left), len(right), diff.stats)
    return diff


def _compare_as(code_type: str, code1: str, code2: str, kwargs: dict[str, Any]) -> CodeDiff:
    requested = kwargs.pop("code_type", code_type)
    if requested != code_type:
        raise ValidationError(
            f"Conflicting code type: {requested} passed to the {code_type} comparison",
            parameter_name="code_type",
            parameter_value=requested,
        )
    return compare_code(code1, code2, code_type=code_type, **kwargs)


def compare_code_native(code1: str, code2: str, **kwargs: Any) -> CodeDiff:
    """``CodeDiff`` between two native assembly listings, with module names cleaned up."""
    return _compare_as("native", code1, code2, kwargs)


def compare_code_llvm(code1: str, code2: str, **kwargs: Any) -> CodeDiff:
    """``CodeDiff`` between two LLVM IR listings, with module names cleaned up."""
    return _compare_as("llvm", code1, code2, kwargs)


def compare_code_typed(code1: str, code2: str, **kwargs: Any) -> CodeDiff:
    """``CodeDiff`` between two typed IR listings."""
    return _compare_as("typed", code1, code2, kwargs)


def compare_ast(code1: str, code2: str, **kwargs: Any) -> CodeDiff:
    """``CodeDiff`` between two printed syntax trees or source snippets."""
    return _compare_as("ast", code1, code2, kwargs)


_COMPARE_FUNCTIONS = {
    "text": compare_code,
    "native": compare_code_native,
    "llvm": compare_code_llvm,
    "typed": compare_code_typed,
    "ast": compare_ast,
}


def code_diff(code1: str, code2: str, type: str = "text", **kwargs: Any) -> CodeDiff:
    """Dispatch to the comparison function of the given code ``type``.

    Parameters
    ----------
    code1 : str
        Original code
    code2 : str
        Modified code
    type : {"text", "native", "llvm", "typed", "ast"}, default "text"
        Kind of code compared
    **kwargs : Any
        Passed on to :func:`compare_code`

    Raises
    ------
    ValidationError
        If the type is unknown

    """
    try:
        compare = _COMPARE_FUNCTIONS[type]
    except KeyError:
        raise ValidationError(
            f"Unknown code type: {type}. Must be one of: {', '.join(_COMPARE_FUNCTIONS)}",
            parameter_name="type",
            parameter_value=type,
        ) from None
    return compare(code1, code2, **kwargs)


def read_code(path: str | Path) -> str:
    """Read a code listing from a file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileError
        If the file cannot be read or decoded

    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(str(path))
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read {path}: {e}", file_path=str(path), original_error=e) from e


def compare_files(
    path1: str | Path,
    path2: str | Path,
    *,
    options: CompareOptions | None = None,
    highlighter: Highlighter | None = None,
    **kwargs: Any,
) -> CodeDiff:
    """Compare the code listings stored in two files.

    This is a convenience wrapper reading both files and comparing them with
    :func:`compare_code`.
    """
    return compare_code(read_code(path1), read_code(path2), options=options, highlighter=highlighter, **kwargs)
