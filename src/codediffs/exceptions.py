#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the codediffs library.

This module defines specialized exception classes for the error conditions
that can occur while comparing and rendering code. These exceptions provide
more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- CodeDiffsError (base exception)

  - ValidationError (parameter/option validation)
    - HighlightMismatchError (highlighted text disagrees with plain text)

  - DiffInvariantError (diff entries do not reconstruct their inputs)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class CodeDiffsError(Exception):
    """Base exception class for all codediffs-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(CodeDiffsError):
    """Exception raised for invalid input parameters or options.

    This exception covers validation errors such as:
    - Non-positive widths or tab widths
    - Similarity tolerance outside of [0, 1]
    - Unknown distance metrics or code types
    - Malformed function names for module name normalization

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class HighlightMismatchError(ValidationError):
    """Exception raised when highlighted code does not match its plain form.

    Highlighted and plain code must have the same number of lines, and each
    highlighted line must equal its plain line once style markers are removed.
    A mismatch means the highlighter and the aligner disagree about line
    boundaries, so the diff cannot be colorized safely.

    Parameters
    ----------
    message : str
        Description of the mismatch
    line_index : int, optional
        0-based index of the first mismatching line, if the counts agree

    """

    def __init__(self, message: str, line_index: int | None = None):
        """Initialize the mismatch error."""
        super().__init__(message, parameter_name="highlighted", parameter_value=line_index)
        self.line_index = line_index


class DiffInvariantError(CodeDiffsError):
    """Exception raised when diff entries do not reconstruct both sides.

    The left-side lines of all non-added entries must be exactly the left code
    in order, and likewise for the right side. Any other sequence of entries
    would drop, duplicate or reorder code.
    """


class FileError(CodeDiffsError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a file cannot be found.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(CodeDiffsError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
