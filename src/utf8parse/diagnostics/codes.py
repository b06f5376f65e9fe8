"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Scan errors (cursor movement, matching, searching)
        2000-2999: Encoding errors (malformed UTF-8)
    """

    # Scan errors (1000-1999)
    OVERFLOW = 1001
    UNEXPECTED = 1002
    EMPTY_INPUT = 1003

    # Encoding errors (2000-2999)
    INVALID_CHARACTER = 2001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Buffer location for error reporting.

    Note:
        start and end are BYTE offsets into the UTF-8 buffer. line and
        column are computed in codepoints, the way a text editor shows them.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Buffer location (None when no parser context is known)
        hint: Suggestion for fixing the error
        expected: What the operation was looking for (optional)
        found: What was actually present (optional)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[OVERFLOW]: Unexpected end of input at byte 5
              --> line 1, column 6
              = help: Check for incomplete input before reading further

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
