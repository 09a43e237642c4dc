#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option classes for comparing and rendering code.

Options are frozen dataclasses validated on construction, so an invalid
configuration is rejected before any comparison or rendering starts.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from codediffs.constants import (
    DEFAULT_CODE_TYPE,
    DEFAULT_COLOR,
    DEFAULT_DISTANCE,
    DEFAULT_LINE_NUMBERS,
    DEFAULT_NORMALIZE,
    DEFAULT_OPTIMIZE,
    DEFAULT_TAB_WIDTH,
    DEFAULT_TOLERANCE,
    DEFAULT_WIDTH,
    CodeType,
)
from codediffs.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


def _require_positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{name} must be a positive integer, got {value!r}", parameter_name=name, parameter_value=value
        )


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration for side-by-side rendering.

    Parameters
    ----------
    tab_width : int, default 4
        Number of spaces each tab character is replaced with.
    width : int, default 80
        Total width of the output in terminal cells. Detecting the terminal
        width is up to the caller, see :func:`codediffs.config.resolve_render_options`.
    line_numbers : bool, default False
        Show line numbers on each side of the columns.
    color : bool, default True
        Emit the styles of highlighted code. When False the output is plain text.
    force_terminal : bool, default False
        Emit styles even when the output is not a terminal.

    """

    tab_width: int = field(
        default=DEFAULT_TAB_WIDTH,
        metadata={"help": "Number of spaces tabs are replaced with", "type": int},
    )
    width: int = field(
        default=DEFAULT_WIDTH,
        metadata={"help": "Output width in terminal cells", "type": int},
    )
    line_numbers: bool = field(
        default=DEFAULT_LINE_NUMBERS,
        metadata={"help": "Show line numbers on each side"},
    )
    color: bool = field(
        default=DEFAULT_COLOR,
        metadata={"help": "Emit syntax highlighting styles"},
    )
    force_terminal: bool = field(
        default=False,
        metadata={"help": "Emit styles even when the output is not a terminal"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If the width or tab width is not a positive integer.

        """
        _require_positive_int("tab_width", self.tab_width)
        _require_positive_int("width", self.width)


CODE_TYPES: tuple[str, ...] = ("text", "native", "llvm", "typed", "ast")


@dataclass(frozen=True)
class CompareOptions(CloneFrozenMixin):
    """Configuration for comparing two code listings.

    Parameters
    ----------
    code_type : {"text", "native", "llvm", "typed", "ast"}, default "text"
        Kind of code compared. Selects the syntax highlighter and whether
        generated module names are normalized (native and llvm only).
    color : bool, default True
        Highlight both codes. When False, highlighting is skipped entirely.
    normalize : bool, default True
        Replace generated module names like ``julia_f_2007`` by ``f`` for code
        types which contain them.
    function_name : str, optional
        Only normalize the module names of this function.
    optimize : bool, default True
        Merge similar removed and added lines into changed lines.
    tolerance : float, default 0.7
        Minimum similarity for merging two lines, in [0, 1].
    distance : str, default "levenshtein"
        Name of the distance metric used when merging lines.
    language : str, optional
        Pygments lexer name overriding the one chosen from ``code_type``.
    theme : str, optional
        Pygments style name. If None, the basic terminal palette is used.

    """

    code_type: CodeType = field(
        default=DEFAULT_CODE_TYPE,
        metadata={"help": "Kind of code compared", "choices": list(CODE_TYPES)},
    )
    color: bool = field(
        default=DEFAULT_COLOR,
        metadata={"help": "Highlight both codes"},
    )
    normalize: bool = field(
        default=DEFAULT_NORMALIZE,
        metadata={"help": "Replace generated module names by the bare function name"},
    )
    function_name: str | None = field(
        default=None,
        metadata={"help": "Only normalize the module names of this function"},
    )
    optimize: bool = field(
        default=DEFAULT_OPTIMIZE,
        metadata={"help": "Merge similar removed and added lines"},
    )
    tolerance: float = field(
        default=DEFAULT_TOLERANCE,
        metadata={"help": "Minimum similarity for merging two lines (0.0-1.0)", "type": float},
    )
    distance: str = field(
        default=DEFAULT_DISTANCE,
        metadata={"help": "Distance metric used when merging lines"},
    )
    language: str | None = field(
        default=None,
        metadata={"help": "Pygments lexer name overriding the code type"},
    )
    theme: str | None = field(
        default=None,
        metadata={"help": "Pygments style used for highlighting"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If the code type is unknown or the tolerance is outside [0, 1].

        """
        if self.code_type not in CODE_TYPES:
            raise ValidationError(
                f"Unknown code type: {self.code_type}. Must be one of: {', '.join(CODE_TYPES)}",
                parameter_name="code_type",
                parameter_value=self.code_type,
            )
        if not 0.0 <= self.tolerance <= 1.0:
            raise ValidationError(
                f"tolerance must be between 0 and 1, got {self.tolerance}",
                parameter_name="tolerance",
                parameter_value=self.tolerance,
            )
