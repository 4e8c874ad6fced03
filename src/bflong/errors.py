"""
bflong Error Hierarchy
======================

This module defines the exception hierarchy for the bflong compiler.
All exceptions inherit from BfLongError, allowing callers to catch every
compiler-related error with a single except clause.

Exception Hierarchy
-------------------
BfLongError (base)
├── LongFormatError - malformed long-form text given to replay()
└── SinkError (writing compiled output)
    ├── OutputDirectoryError - output directory cannot be created
    └── OutputWriteError - a destination file cannot be written

The compilation core (parse, simulate, encode) never raises. Every error
here originates either in the output sink or in reading long-form text
back in.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class BfLongError(Exception):
    """
    Base exception for all bflong errors.

    Attributes:
        message: The error description
        location: Where the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            hello.long:1:4: error: expected '+' or '-' after '12'
            hint: long-form text is a run of <digits>+ or <digits>-
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in a source file for tokens and error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 when only the line is known)
    """
    filename: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        if self.column > 0:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.filename}:{self.line}"


# =============================================================================
# Long-Form Exceptions
# =============================================================================

class LongFormatError(BfLongError):
    """
    Long-form text does not match the `(<digits>(+|-))*` grammar.

    Raised by replay() when reading a `.long` file back into values.
    """
    pass


# =============================================================================
# Output Sink Exceptions
# =============================================================================

class SinkError(BfLongError):
    """Base exception for failures while persisting compiled output."""
    pass


class OutputDirectoryError(SinkError):
    """
    The output directory cannot be created.

    Raised when:
    - A file already exists where the directory should be
    - Permission denied on a parent directory
    """

    def __init__(self, directory: str, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(
            f"cannot create output directory '{directory}': {reason}",
            hint="Try deleting the dist directory",
        )


class OutputWriteError(SinkError):
    """A compiled destination file cannot be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"unable to write compiled file '{path}': {reason}")
