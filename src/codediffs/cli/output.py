"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codediffs/cli/output.py
from __future__ import annotations

from typing import IO

from codediffs.config import is_terminal


def should_use_color(color_mode: str, stream: IO[str] | None) -> bool:
    """Determine if highlighting should be used based on TTY and the color mode.

    Parameters
    ----------
    color_mode : {"auto", "always", "never"}
        Requested color mode
    stream : file-like, optional
        Output stream of the diff

    Returns
    -------
    bool
        True if highlighting should be used

    Notes
    -----
    Highlighting is used when:
    - ``color_mode`` is "always"
    - OR ``color_mode`` is "auto" and the output is a TTY

    """
    if color_mode == "always":
        return True
    if color_mode == "never":
        return False
    return is_terminal(stream)
