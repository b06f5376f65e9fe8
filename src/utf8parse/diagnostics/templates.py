"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # SCAN ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def overflow(position: int) -> Diagnostic:
        """Cursor needed more input than the range holds.

        Args:
            position: Byte offset where the end of range was hit

        Returns:
            Diagnostic for OVERFLOW
        """
        msg = f"Unexpected end of input at byte {position}"
        return Diagnostic(
            code=DiagnosticCode.OVERFLOW,
            message=msg,
            hint="Check for incomplete input before reading further",
        )

    @staticmethod
    def underflow(position: int) -> Diagnostic:
        """Cursor asked to move before the start of its range.

        Args:
            position: Byte offset of the range start

        Returns:
            Diagnostic for OVERFLOW
        """
        msg = f"Cannot retreat past start of range at byte {position}"
        return Diagnostic(
            code=DiagnosticCode.OVERFLOW,
            message=msg,
            hint="Sub-parsers cannot move outside the range they were created with",
        )

    @staticmethod
    def not_found(expected: str, position: int) -> Diagnostic:
        """Search reached the end of range without finding its target.

        Args:
            expected: Description of the delimiter being searched for
            position: Byte offset where the search started

        Returns:
            Diagnostic for OVERFLOW
        """
        msg = f"Reached end of input searching for {expected} from byte {position}"
        return Diagnostic(
            code=DiagnosticCode.OVERFLOW,
            message=msg,
            hint="Pass fail_on_overflow=False to accept the rest of the input",
            expected=expected,
        )

    @staticmethod
    def unexpected(expected: str, found: str, position: int) -> Diagnostic:
        """Input matched, but not with what was required.

        Args:
            expected: Description of the required input
            found: Description of the input actually present
            position: Byte offset of the mismatch

        Returns:
            Diagnostic for UNEXPECTED
        """
        msg = f"Expected {expected} at byte {position}, found {found}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED,
            message=msg,
            expected=expected,
            found=found,
        )

    @staticmethod
    def empty_input(operation: str) -> Diagnostic:
        """Zero-length match or search target.

        Args:
            operation: Name of the parser method that was called

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        msg = f"{operation}() requires a non-empty target"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message=msg,
            hint="Pass at least one character to match or search for",
        )

    # =========================================================================
    # ENCODING ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def invalid_character(position: int, reason: str) -> Diagnostic:
        """Malformed UTF-8 at a byte offset.

        Args:
            position: Byte offset of the offending sequence
            reason: Short description of what is wrong

        Returns:
            Diagnostic for INVALID_CHARACTER
        """
        msg = f"Invalid UTF-8 at byte {position}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            hint="Input must be well-formed UTF-8",
        )

    @staticmethod
    def truncated_sequence(position: int, length: int) -> Diagnostic:
        """Multi-byte sequence cut off by the end of range.

        Args:
            position: Byte offset of the leading byte
            length: Sequence length announced by the leading byte

        Returns:
            Diagnostic for OVERFLOW
        """
        msg = f"Truncated {length}-byte UTF-8 sequence at byte {position}"
        return Diagnostic(
            code=DiagnosticCode.OVERFLOW,
            message=msg,
            hint="The range ends in the middle of a character",
        )
