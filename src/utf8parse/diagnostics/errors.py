"""Parser exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every error kind is a recoverable, local failure: the parser that raised
it is left with its cursor where it was when the failing call started.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ParserError(Exception):
    """Base exception for all parser errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        position: Byte offset in the buffer where the failure was detected,
            or -1 if unknown
    """

    def __init__(self, message: str | Diagnostic, *, position: int = -1) -> None:
        """Initialize ParserError.

        Args:
            message: Error message string OR Diagnostic object
            position: Byte offset of the failure (-1 if unknown)
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)
        self.position = position


class ScanOverflowError(ParserError):
    """Operation needed more input than the range has remaining.

    Raised when reading, advancing or retreating past a range boundary, and
    when a search with fail_on_overflow=True reaches the end of its range.
    """


class UnexpectedCharacterError(ParserError):
    """Input was present but was not what a derived combinator required.

    Raised by expect_char() and expect_string(). The basic match primitives
    return False instead.
    """


class EmptyInputError(ParserError):
    """A zero-length match or search target was supplied.

    Example:
        parser.match_string("")  ← Nothing to match!
    """


class InvalidCharacterError(ParserError):
    """Malformed UTF-8 was found in the buffer."""
