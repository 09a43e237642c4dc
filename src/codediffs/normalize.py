#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediffs/normalize.py
"""Removal of unstable generated identifiers from code listings.

Every call to a code generator compiles the function again under a fresh
module name, e.g. ``julia_f_2007`` then ``julia_f_2019``. The trailing counter
changes on each call even though the code itself does not, so comparing two
listings would always show false differences. This module rewrites those
names to the bare function name (``f``) before comparison.
"""

from __future__ import annotations

import logging
import re

from codediffs.constants import DEFAULT_MODULE_PREFIXES, MODULE_NAME_FORBIDDEN_CHARS
from codediffs.exceptions import ValidationError

logger = logging.getLogger(__name__)

_NAME_CHARS = "[^" + re.escape(MODULE_NAME_FORBIDDEN_CHARS) + r"\s]+"


def module_name_pattern(
    function_name: str | None = None,
    prefixes: tuple[str, ...] = DEFAULT_MODULE_PREFIXES,
) -> re.Pattern[str]:
    """Build the regex matching generated module names.

    The pattern matches ``<prefix>_<name>_<counter>``, capturing ``name`` in
    the ``name`` group. Names may contain underscores and digits but none of
    the forbidden characters (quotes, semicolons, commas, hyphens, parentheses,
    ``@`` or whitespace).

    Parameters
    ----------
    function_name : str, optional
        Only match module names built for this function. If None, match any name.
    prefixes : tuple of str
        Module name prefixes used by the code generator.

    Returns
    -------
    re.Pattern
        Compiled pattern

    Raises
    ------
    ValidationError
        If ``function_name`` is empty or contains a forbidden character, or
        if no prefixes are given.

    """
    if not prefixes:
        raise ValidationError("At least one module name prefix is required", parameter_name="prefixes")

    if function_name is None:
        name = _NAME_CHARS
    else:
        if not function_name or re.search(r"[" + re.escape(MODULE_NAME_FORBIDDEN_CHARS) + r"\s]", function_name):
            raise ValidationError(
                f"Invalid function name for module name normalization: {function_name!r}",
                parameter_name="function_name",
                parameter_value=function_name,
            )
        name = re.escape(function_name)

    prefix = "|".join(re.escape(p) for p in prefixes)
    return re.compile(rf"(?<![\w.])(?:{prefix})_(?P<name>{name})_(?P<counter>\d+)(?!\w)")


def replace_module_names(
    code: str,
    function_name: str | None = None,
    prefixes: tuple[str, ...] = DEFAULT_MODULE_PREFIXES,
) -> str:
    """Remove the trailing counters of generated module names in ``code``.

    ``"julia_f_2007"`` becomes ``"f"``. Substitution is repeated until the text
    no longer changes, so the result is a fixed point: normalizing twice gives
    the same text as normalizing once.

    Parameters
    ----------
    code : str
        Raw code listing
    function_name : str, optional
        Only rewrite module names of this function.
    prefixes : tuple of str
        Module name prefixes used by the code generator.

    Returns
    -------
    str
        Code with stable function names

    Examples
    --------
        >>> replace_module_names("call i64 @julia_f_2007(i64 %0)")
        'call i64 @f(i64 %0)'
        >>> replace_module_names("julia_f_1 julia_g_2", function_name="g")
        'julia_f_1 g'

    """
    pattern = module_name_pattern(function_name, prefixes)
    replacements = 0
    while True:
        code, count = pattern.subn(r"\g<name>", code)
        if count == 0:
            break
        replacements += count

    if replacements:
        logger.debug("Replaced %d generated module names", replacements)
    return code
