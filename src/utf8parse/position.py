"""Position utilities for UTF-8 buffers.

Converts byte offsets into line/column positions for error reporting.
Lines are delimited by LF (0x0A); CRLF input works because the LF is
still present. Columns count codepoints, not bytes.
"""

from utf8parse.codec import is_continuation
from utf8parse.diagnostics import SourceSpan


def _check_offset(buffer: bytes, pos: int) -> int:
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    return min(pos, len(buffer))  # Clamp to buffer length


def line_offset(buffer: bytes, pos: int) -> int:
    """Get 0-based line number from byte offset.

    Args:
        buffer: UTF-8 encoded bytes
        pos: Byte offset in buffer

    Returns:
        0-based line number

    Example:
        >>> line_offset(b"line1\\nline2\\nline3", 6)
        1
    """
    pos = _check_offset(buffer, pos)
    return buffer.count(b"\n", 0, pos)


def column_offset(buffer: bytes, pos: int) -> int:
    """Get 0-based column number from byte offset.

    Args:
        buffer: UTF-8 encoded bytes
        pos: Byte offset in buffer

    Returns:
        0-based column, counted in codepoints from the line start

    Example:
        >>> column_offset("héllo".encode(), 3)  # 'l' after 2-byte 'é'
        2
    """
    pos = _check_offset(buffer, pos)
    line_start = buffer.rfind(b"\n", 0, pos) + 1
    return sum(1 for byte in buffer[line_start:pos] if not is_continuation(byte))


def line_column(buffer: bytes, pos: int) -> tuple[int, int]:
    """Compute 1-based (line, column) for a byte offset, like text editors.

    Example:
        >>> line_column(b"ab\\ncd", 4)
        (2, 2)
    """
    return (line_offset(buffer, pos) + 1, column_offset(buffer, pos) + 1)


def format_position(buffer: bytes, pos: int, zero_based: bool = True) -> str:
    """Format position as human-readable line:column string.

    Example:
        >>> format_position(b"hello\\nworld", 6, zero_based=False)
        '2:1'
    """
    line = line_offset(buffer, pos)
    col = column_offset(buffer, pos)

    if not zero_based:
        line += 1
        col += 1

    return f"{line}:{col}"


def make_span(buffer: bytes, start: int, end: int | None = None) -> SourceSpan:
    """Build a SourceSpan for [start, end) with line/column of start.

    Args:
        buffer: UTF-8 encoded bytes
        start: Starting byte offset
        end: Ending byte offset (default: start)

    Returns:
        SourceSpan over the clamped offsets
    """
    start = _check_offset(buffer, start)
    end = start if end is None else max(start, min(end, len(buffer)))
    line, column = line_column(buffer, start)
    return SourceSpan(start=start, end=end, line=line, column=column)
