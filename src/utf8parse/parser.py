"""Cursor-based parser over a UTF-8 byte buffer.

A Parser is a window [start, end) onto an immutable bytes buffer plus a
single mutable cursor. Every read or search that returns a span returns a
sub-parser: a new Parser over a narrower window of the SAME bytes object,
with its own cursor. Creating one never copies the buffer and never moves
the parent's cursor.

Design Philosophy:
    - Cursor is always on a codepoint boundary inside the window
    - Characters are one-character strings, never raw byte values
    - Failure never moves the cursor: a failed call leaves it where the
      call found it, including multi-step advance(), retreat() and
      read_count()
    - Mismatches are answers (False); exhausted input is an error
      (ScanOverflowError)

Cursor Semantics of Searches:
    read_until_*() stop AT the delimiter without consuming it, so callers
    can read a field and then consume the separator separately:

    >>> parser = Parser("key=value")
    >>> parser.read_until_char("=").text
    'key'
    >>> parser.match_char("=")
    True
    >>> parser.read_to_end().text
    'value'

Thread Safety:
    The buffer is immutable and may be shared across threads through
    sub-parsers. A single Parser's cursor is not synchronized.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Container, Iterator
from contextlib import contextmanager
from dataclasses import replace

from utf8parse.classify import Predicate, UnicodeClassifier, UnicodeDataClassifier
from utf8parse.codec import decode, is_boundary, next_offset, prev_offset
from utf8parse.constants import MAX_SOURCE_SIZE, SENTINEL
from utf8parse.diagnostics import (
    Diagnostic,
    EmptyInputError,
    ErrorTemplate,
    InvalidCharacterError,
    ParserError,
    ScanOverflowError,
    UnexpectedCharacterError,
)
from utf8parse.position import line_column, make_span

__all__ = ["Parser"]

logger = logging.getLogger(__name__)

_DEFAULT_CLASSIFIER = UnicodeDataClassifier()

# Characters of text shown by Parser.__repr__
_REPR_TEXT_LIMIT = 40


class Parser:
    """Reader object for parsing UTF-8 buffers.

    Example:
        >>> parser = Parser("hello, world")
        >>> field = parser.read_until_char(",")
        >>> field.text
        'hello'
        >>> parser.current()
        ','
        >>> parser.position
        5
    """

    __slots__ = ("_buffer", "_classifier", "_end", "_index", "_start")

    def __init__(
        self,
        data: str | bytes | bytearray | memoryview,
        *,
        max_size: int = MAX_SOURCE_SIZE,
        classifier: UnicodeClassifier | None = None,
    ) -> None:
        """Create a parser over a whole buffer.

        Args:
            data: Text (encoded as UTF-8) or UTF-8 bytes. bytearray and
                memoryview input is copied once into an immutable bytes.
            max_size: Maximum accepted buffer size in bytes
            classifier: Unicode classifier used by skip_whitespace() and
                read_line() (default: UnicodeDataClassifier)

        Raises:
            TypeError: If data is not text or bytes-like
            ValueError: If the encoded buffer exceeds max_size or starts with a
                continuation byte
        """
        if isinstance(data, str):
            buffer = data.encode("utf-8")
        elif isinstance(data, bytes):
            buffer = data
        elif isinstance(data, (bytearray, memoryview)):
            buffer = bytes(data)
        else:
            msg = f"Parser expects str or bytes-like data, got {type(data).__name__}"
            raise TypeError(msg)

        if len(buffer) > max_size:
            msg = f"Buffer of {len(buffer)} bytes exceeds maximum of {max_size} bytes"
            raise ValueError(msg)
        if not is_boundary(buffer, 0):
            msg = "Range start 0 is in the middle of a UTF-8 character"
            raise ValueError(msg)

        self._buffer = buffer
        self._start = 0
        self._end = len(buffer)
        self._index = 0
        self._classifier = classifier if classifier is not None else _DEFAULT_CLASSIFIER
        logger.debug("Parser created over %d bytes", len(buffer))

    def _view(self, start: int, end: int) -> "Parser":
        # Offsets come from the cursor, so they are already boundaries.
        view = object.__new__(type(self))
        view._buffer = self._buffer
        view._start = start
        view._end = end
        view._index = start
        view._classifier = self._classifier
        return view

    # =========================================================================
    # BUFFER & RANGE
    # =========================================================================

    @property
    def buffer(self) -> bytes:
        """The shared underlying bytes (whole buffer, not just this range)."""
        return self._buffer

    @property
    def start(self) -> int:
        """Byte offset where this parser's range starts."""
        return self._start

    @property
    def end(self) -> int:
        """Byte offset where this parser's range ends (exclusive)."""
        return self._end

    @property
    def position(self) -> int:
        """Current cursor byte offset into the buffer."""
        return self._index

    @property
    def byte_count(self) -> int:
        """Number of bytes in the range."""
        return self._end - self._start

    @property
    def remaining(self) -> int:
        """Number of bytes between the cursor and the range end."""
        return self._end - self._index

    @property
    def text(self) -> str:
        """Contents of the whole range as text.

        Raises:
            InvalidCharacterError: If the range holds malformed UTF-8
        """
        return self._make_text(self._start, self._end)

    def sub_parser(self, start: int, end: int) -> "Parser":
        """Create a parser over [start, end) of the same buffer.

        The new parser has its own cursor, placed at start. This parser's
        cursor does not move.

        Args:
            start: Starting byte offset (inclusive)
            end: Ending byte offset (exclusive)

        Returns:
            Parser sharing this parser's buffer

        Raises:
            ValueError: If the range is not inside this parser's range or
                either end splits a multi-byte character
        """
        if not self._start <= start <= end <= self._end:
            msg = f"Range [{start}, {end}) is outside parser range [{self._start}, {self._end})"
            raise ValueError(msg)
        if not is_boundary(self._buffer, start):
            msg = f"Range start {start} is in the middle of a UTF-8 character"
            raise ValueError(msg)
        if not is_boundary(self._buffer, end):
            msg = f"Range end {end} is in the middle of a UTF-8 character"
            raise ValueError(msg)
        return self._view(start, end)

    def _make_text(self, start: int, end: int) -> str:
        try:
            return self._buffer[start:end].decode("utf-8")
        except UnicodeDecodeError as e:
            position = start + e.start
            logger.debug("Malformed UTF-8 at byte %d while building text", position)
            raise InvalidCharacterError(
                ErrorTemplate.invalid_character(position, e.reason), position=position
            ) from e

    # =========================================================================
    # CURSOR
    # =========================================================================

    def at_end(self) -> bool:
        """Return whether the cursor has reached the end of the range."""
        return self._index == self._end

    def peek(self) -> str:
        """Return the character at the cursor without consuming it.

        Raises:
            ScanOverflowError: If at end of range
        """
        if self._index == self._end:
            raise self._overflow(self._index)
        return decode(self._buffer, self._index, self._end)[0]

    def current(self) -> str:
        """Return the character at the cursor, or SENTINEL ("\\x00") at end.

        Use where "no character" is a valid answer rather than an error.
        """
        if self._index == self._end:
            return SENTINEL
        return decode(self._buffer, self._index, self._end)[0]

    def character(self) -> str:
        """Return the character at the cursor and move past it.

        Raises:
            ScanOverflowError: If at end of range
        """
        if self._index == self._end:
            raise self._overflow(self._index)
        char, self._index = decode(self._buffer, self._index, self._end)
        return char

    def advance(self, count: int = 1) -> None:
        """Move forward count characters.

        All-or-nothing: if fewer than count characters remain the cursor
        does not move.

        Raises:
            ScanOverflowError: If the range end is hit first
            ValueError: If count is negative
        """
        self._index = self._skip(self._index, count)

    def retreat(self, count: int = 1) -> None:
        """Move back count characters.

        All-or-nothing: if fewer than count characters precede the cursor
        it does not move.

        Raises:
            ScanOverflowError: If the range start is hit first
            ValueError: If count is negative
        """
        if count < 0:
            msg = f"retreat() count must be >= 0, got {count}"
            raise ValueError(msg)
        index = self._index
        for _ in range(count):
            if index == self._start:
                raise ScanOverflowError(
                    ErrorTemplate.underflow(self._start), position=self._start
                )
            index = prev_offset(self._buffer, index, self._start)
        self._index = index

    def reset(self) -> None:
        """Move the cursor back to the start of the range."""
        self._index = self._start

    def mark(self) -> int:
        """Return the cursor position for a later restore()."""
        return self._index

    def restore(self, mark: int) -> None:
        """Move the cursor to a position returned by mark().

        Raises:
            ValueError: If mark is outside the range or not on a boundary
        """
        if not self._start <= mark <= self._end or not is_boundary(self._buffer, mark):
            msg = f"Cannot restore cursor to {mark}: not a boundary in [{self._start}, {self._end}]"
            raise ValueError(msg)
        self._index = mark

    @contextmanager
    def backtrack(self) -> Iterator["Parser"]:
        """Restore the cursor if the block raises a ParserError.

        The error is re-raised after the cursor is restored.

        Example:
            >>> parser = Parser("abc")
            >>> try:
            ...     with parser.backtrack():
            ...         parser.advance(2)
            ...         parser.expect_char("x")
            ... except ParserError:
            ...     pass
            >>> parser.position
            0
        """
        saved = self._index
        try:
            yield self
        except ParserError:
            self._index = saved
            raise

    def _skip(self, offset: int, count: int) -> int:
        """Offset count characters after offset. Does not move the cursor."""
        if count < 0:
            msg = f"count must be >= 0, got {count}"
            raise ValueError(msg)
        for _ in range(count):
            if offset == self._end:
                raise self._overflow(offset)
            offset = next_offset(self._buffer, offset, self._end)
        return offset

    def _overflow(self, position: int) -> ScanOverflowError:
        return ScanOverflowError(ErrorTemplate.overflow(position), position=position)

    # =========================================================================
    # MATCH PRIMITIVES
    # =========================================================================

    def match_char(self, char: str) -> bool:
        """Consume the current character if it equals char.

        Returns:
            True if consumed, False (cursor unchanged) on mismatch

        Raises:
            ScanOverflowError: If at end of range
        """
        if self._index == self._end:
            raise self._overflow(self._index)
        current, after = decode(self._buffer, self._index, self._end)
        if current != char:
            return False
        self._index = after
        return True

    def match_any(self, chars: Container[str]) -> bool:
        """Consume the current character if it is in chars.

        Args:
            chars: Any container of single characters (set, frozenset, str)

        Returns:
            True if consumed, False (cursor unchanged) otherwise

        Raises:
            ScanOverflowError: If at end of range
        """
        if self._index == self._end:
            raise self._overflow(self._index)
        current, after = decode(self._buffer, self._index, self._end)
        if current not in chars:
            return False
        self._index = after
        return True

    def match_string(self, string: str) -> bool:
        """Consume len(string) characters if they equal string.

        Returns:
            True if consumed, False (cursor unchanged) on mismatch

        Raises:
            EmptyInputError: If string is empty
            ScanOverflowError: If fewer than len(string) characters remain
                (cursor unchanged)
        """
        if not string:
            raise EmptyInputError(ErrorTemplate.empty_input("match_string"))
        after = self._skip(self._index, len(string))
        encoded = string.encode("utf-8")
        if after - self._index != len(encoded) or not self._buffer.startswith(
            encoded, self._index
        ):
            return False
        self._index = after
        return True

    def read_count(self, count: int) -> str:
        """Consume and return the next count characters.

        Raises:
            ScanOverflowError: If fewer than count characters remain
                (cursor unchanged)
            ValueError: If count is negative
        """
        after = self._skip(self._index, count)
        text = self._make_text(self._index, after)
        self._index = after
        return text

    def expect_char(self, char: str) -> None:
        """Consume char or fail.

        Raises:
            UnexpectedCharacterError: If the current character differs
            ScanOverflowError: If at end of range
        """
        if not self.match_char(char):
            found = self.peek()
            raise UnexpectedCharacterError(
                ErrorTemplate.unexpected(repr(char), repr(found), self._index),
                position=self._index,
            )

    def expect_string(self, string: str) -> None:
        """Consume string or fail.

        Raises:
            UnexpectedCharacterError: If the next characters differ
            ScanOverflowError: If fewer than len(string) characters remain
            EmptyInputError: If string is empty
        """
        if not self.match_string(string):
            found = self._make_text(self._index, self._skip(self._index, len(string)))
            raise UnexpectedCharacterError(
                ErrorTemplate.unexpected(repr(string), repr(found), self._index),
                position=self._index,
            )

    # =========================================================================
    # SEARCH COMBINATORS
    # =========================================================================

    def _scan_until(self, test: Predicate) -> int | None:
        """Offset of the first character from the cursor passing test."""
        buffer, end = self._buffer, self._end
        offset = self._index
        while offset < end:
            char, after = decode(buffer, offset, end)
            if test(char):
                return offset
            offset = after
        return None

    def _scan_while(self, test: Predicate) -> int:
        """Offset of the first character from the cursor failing test."""
        buffer, end = self._buffer, self._end
        offset = self._index
        while offset < end:
            char, after = decode(buffer, offset, end)
            if not test(char):
                break
            offset = after
        return offset

    def _count_while(self, test: Predicate) -> int:
        """Consume characters passing test and return how many there were."""
        buffer, end = self._buffer, self._end
        offset = self._index
        count = 0
        while offset < end:
            char, after = decode(buffer, offset, end)
            if not test(char):
                break
            offset = after
            count += 1
        self._index = offset
        return count

    def _finish_search(
        self, found: int | None, expected: str, fail_on_overflow: bool
    ) -> "Parser":
        start = self._index
        if found is None:
            if fail_on_overflow:
                raise ScanOverflowError(
                    ErrorTemplate.not_found(expected, start), position=start
                )
            found = self._end
        self._index = found
        return self._view(start, found)

    def read_until_char(self, char: str, fail_on_overflow: bool = True) -> "Parser":
        """Read until char. The cursor is left AT char.

        Args:
            char: Character to stop at
            fail_on_overflow: Raise if char never appears; when False, read
                to the end of the range instead

        Returns:
            Sub-parser over the characters before char

        Raises:
            ScanOverflowError: If char is not found and fail_on_overflow
                is True (cursor unchanged)
        """
        found = self._scan_until(lambda c: c == char)
        return self._finish_search(found, repr(char), fail_on_overflow)

    def read_until_set(
        self, chars: Container[str], fail_on_overflow: bool = True
    ) -> "Parser":
        """Read until any character in chars. The cursor is left AT it.

        Raises:
            ScanOverflowError: If none is found and fail_on_overflow is True
        """
        found = self._scan_until(lambda c: c in chars)
        return self._finish_search(found, "character in set", fail_on_overflow)

    def read_until_predicate(
        self, predicate: Predicate, fail_on_overflow: bool = True
    ) -> "Parser":
        """Read until predicate(character) is true. The cursor is left AT it.

        Example:
            >>> from utf8parse.classify import is_whitespace
            >>> Parser("word rest").read_until_predicate(is_whitespace).text
            'word'

        Raises:
            ScanOverflowError: If nothing matches and fail_on_overflow is True
        """
        found = self._scan_until(predicate)
        return self._finish_search(found, "matching character", fail_on_overflow)

    def read_until_string(self, needle: str, fail_on_overflow: bool = True) -> "Parser":
        """Read until needle. The cursor is left at the START of needle.

        Finds the first occurrence, overlapping candidates included: in
        "aab" the needle "ab" is found at offset 1.

        Raises:
            EmptyInputError: If needle is empty
            ScanOverflowError: If needle is not found and fail_on_overflow
                is True (cursor unchanged)
        """
        if not needle:
            raise EmptyInputError(ErrorTemplate.empty_input("read_until_string"))
        # UTF-8 is self-synchronizing: a match of a whole encoded needle
        # always starts on a codepoint boundary.
        found = self._buffer.find(needle.encode("utf-8"), self._index, self._end)
        return self._finish_search(
            found if found >= 0 else None, repr(needle), fail_on_overflow
        )

    def read_to_end(self) -> "Parser":
        """Read everything from the cursor to the end of the range."""
        start = self._index
        self._index = self._end
        return self._view(start, self._end)

    def read_while_char(self, char: str) -> int:
        """Consume consecutive occurrences of char.

        Returns:
            Number of characters consumed
        """
        return self._count_while(lambda c: c == char)

    def read_while_set(self, chars: Container[str]) -> "Parser":
        """Consume characters while they are in chars.

        Returns:
            Sub-parser over the consumed characters (possibly empty)
        """
        start = self._index
        self._index = self._scan_while(lambda c: c in chars)
        return self._view(start, self._index)

    def read_while_predicate(self, predicate: Predicate) -> "Parser":
        """Consume characters while predicate(character) is true.

        Returns:
            Sub-parser over the consumed characters (possibly empty)
        """
        start = self._index
        self._index = self._scan_while(predicate)
        return self._view(start, self._index)

    def skip_whitespace(self) -> int:
        """Consume whitespace as judged by this parser's classifier.

        Returns:
            Number of characters consumed
        """
        return self._count_while(self._classifier.is_whitespace)

    def read_line(self, fail_on_overflow: bool = False) -> "Parser":
        """Read up to the next newline and consume the newline.

        CRLF counts as a single line ending. The returned sub-parser does
        not include the line ending.

        Args:
            fail_on_overflow: Raise if no newline follows; by default the
                last line may be unterminated

        Raises:
            ScanOverflowError: If no newline is found and fail_on_overflow
                is True (cursor unchanged)
        """
        with self.backtrack():
            line = self.read_until_predicate(self._classifier.is_newline, fail_on_overflow)
            if not self.at_end():
                terminator = self.character()
                if terminator == "\r" and not self.at_end():
                    self.match_char("\n")
        return line

    # =========================================================================
    # DIAGNOSTICS
    # =========================================================================

    def line_column(self, position: int | None = None) -> tuple[int, int]:
        """1-based (line, column) of a byte offset in the whole buffer.

        Args:
            position: Byte offset (default: the cursor)
        """
        return line_column(self._buffer, self._index if position is None else position)

    def diagnose(self, error: ParserError) -> Diagnostic | None:
        """Attach a source span to an error raised by this parser.

        Errors are raised without line/column information to keep failed
        matches cheap. Call this when the error is about to be reported.

        Returns:
            Copy of error.diagnostic with span filled in, the diagnostic
            unchanged if the error has no position, or None if the error
            carries no diagnostic
        """
        if error.diagnostic is None:
            return None
        if not 0 <= error.position <= len(self._buffer):
            return error.diagnostic
        return replace(error.diagnostic, span=make_span(self._buffer, error.position))

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __iter__(self) -> Iterator[str]:
        """Yield characters from the cursor to the end without moving it."""
        buffer, end = self._buffer, self._end
        offset = self._index
        while offset < end:
            char, offset = decode(buffer, offset, end)
            yield char

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        """Byte length of the range (same as byte_count)."""
        return self._end - self._start

    def __repr__(self) -> str:
        preview = self._buffer[self._start : self._end].decode("utf-8", errors="replace")
        if len(preview) > _REPR_TEXT_LIMIT:
            preview = preview[:_REPR_TEXT_LIMIT] + "..."
        return (
            f"Parser(start={self._start}, end={self._end}, "
            f"position={self._index}, text={preview!r})"
        )
