#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the codediffs library.

This module centralizes the hardcoded values and default configuration
constants used across codediffs.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering - Side-by-side layout defaults and gutter glyphs
3. Comparison - Optimizer and normalizer defaults
4. Environment - Environment variable names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

CodeType = Literal["text", "native", "llvm", "typed", "ast"]
ColorMode = Literal["auto", "always", "never"]
DistanceName = Literal["levenshtein", "difflib"]

# =============================================================================
# Rendering
# =============================================================================

DEFAULT_TAB_WIDTH = 4
DEFAULT_WIDTH = 80
DEFAULT_LINE_NUMBERS = False
DEFAULT_COLOR = True

# Gutter glyphs, all three cells wide
GUTTER_UNCHANGED = " ┃ "
GUTTER_REMOVED = "⟪┫ "
GUTTER_ADDED = " ┣⟫"
GUTTER_CHANGED = "⟪╋⟫"
GUTTER_WIDTH = 3

# Space between a line number and its column
LINE_NUMBER_SEPARATOR = " "

# =============================================================================
# Comparison
# =============================================================================

DEFAULT_TOLERANCE = 0.7
DEFAULT_DISTANCE: DistanceName = "levenshtein"
DEFAULT_CODE_TYPE: CodeType = "text"
DEFAULT_NORMALIZE = True
DEFAULT_OPTIMIZE = True

# Prefixes Julia's code generator puts in front of LLVM module function names
DEFAULT_MODULE_PREFIXES: tuple[str, ...] = ("julia", "japi1", "japi3", "jfptr", "jlcapi", "tojlinvoke")

# Characters which never appear in a generated module function name
MODULE_NAME_FORBIDDEN_CHARS = "\"';,-()@"

# =============================================================================
# Environment
# =============================================================================

LINE_NUMBERS_ENV_VAR = "CODE_DIFFS_LINE_NUMBERS"
TRUTHY_ENV_VALUES = ("true", "1", "yes", "on")
