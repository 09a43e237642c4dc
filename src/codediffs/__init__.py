#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Compare code listings and display their differences side by side.

codediffs compares two renderings of code (native assembly, LLVM IR, typed
IR, printed syntax trees, or any line-oriented text) and displays them in two
columns in the terminal. Syntax highlighting is kept separate from the
comparison: the diff is computed on plain text and the highlighted lines are
re-applied when displaying it.

Examples
--------
Compare two LLVM IR listings:
    >>> from codediffs import compare_code_llvm, side_by_side_diff
    >>> diff = compare_code_llvm(code1, code2)
    >>> side_by_side_diff(diff)

Without highlighting, with line numbers:
    >>> diff = compare_code(code1, code2, color=False)
    >>> side_by_side_diff(diff, line_numbers=True, width=100)

Setting the environment variable ``CODE_DIFFS_LINE_NUMBERS`` to ``true``
shows line numbers by default.
"""

from codediffs.api import (
    code_diff,
    compare_ast,
    compare_code,
    compare_code_llvm,
    compare_code_native,
    compare_code_typed,
    compare_files,
)
from codediffs.diff.code_diff import CodeDiff, DiffEntry, DiffTag
from codediffs.diff.code_text import CodeText
from codediffs.diff.optimize import optimize_line_changes
from codediffs.diff.renderers.side_by_side import SideBySideRenderer, side_by_side_diff
from codediffs.exceptions import CodeDiffsError, HighlightMismatchError, ValidationError
from codediffs.normalize import replace_module_names
from codediffs.options import CompareOptions, RenderOptions

__version__ = "0.1.0"

__all__ = [
    "CodeDiff",
    "CodeDiffsError",
    "CodeText",
    "CompareOptions",
    "DiffEntry",
    "DiffTag",
    "HighlightMismatchError",
    "RenderOptions",
    "SideBySideRenderer",
    "ValidationError",
    "code_diff",
    "compare_ast",
    "compare_code",
    "compare_code_llvm",
    "compare_code_native",
    "compare_code_typed",
    "compare_files",
    "optimize_line_changes",
    "replace_module_names",
    "side_by_side_diff",
]
