"""UTF-8 codec working directly on byte offsets.

Pure functions over a bytes buffer: decode the codepoint at an offset, find
the offset of the next codepoint, and step back to the previous one. None of
them allocate beyond the returned one-character string.

Malformed Input:
    The decoder validates as it reads. Invalid leading bytes, bad
    continuation bytes, overlong forms, surrogates and values above
    U+10FFFF raise InvalidCharacterError. A sequence cut off by the
    caller's limit raises ScanOverflowError. Validation is local: only
    the bytes actually visited are checked.

Python 3.13+. Zero external dependencies.
"""

import logging

from utf8parse.constants import (
    CONTINUATION_MASK,
    CONTINUATION_TAG,
    MAX_CODEPOINT,
    MAX_SEQUENCE_LENGTH,
    SURROGATE_RANGE_END,
    SURROGATE_RANGE_START,
)
from utf8parse.diagnostics import ErrorTemplate, InvalidCharacterError, ScanOverflowError

__all__ = ["decode", "is_boundary", "is_continuation", "next_offset", "prev_offset"]

logger = logging.getLogger(__name__)

# Payload bits kept from the leading byte, indexed by sequence length.
_LEAD_PAYLOAD: tuple[int, ...] = (0, 0x7F, 0x1F, 0x0F, 0x07)

# Smallest value each sequence length may encode; anything lower is overlong.
_MIN_VALUE: tuple[int, ...] = (0, 0, 0x80, 0x800, 0x10000)


def is_continuation(byte: int) -> bool:
    """Return True for bytes of the form 10xxxxxx."""
    return byte & CONTINUATION_MASK == CONTINUATION_TAG


def is_boundary(buffer: bytes, offset: int) -> bool:
    """Check whether offset sits on a codepoint boundary.

    The end of the buffer counts as a boundary.

    Args:
        buffer: UTF-8 encoded bytes
        offset: Byte offset to test

    Returns:
        True if offset is within [0, len(buffer)] and not a continuation byte
    """
    if offset < 0 or offset > len(buffer):
        return False
    return offset == len(buffer) or not is_continuation(buffer[offset])


def _invalid(position: int, reason: str) -> InvalidCharacterError:
    logger.debug("Malformed UTF-8 at byte %d: %s", position, reason)
    return InvalidCharacterError(
        ErrorTemplate.invalid_character(position, reason), position=position
    )


def _sequence_length(byte: int, position: int) -> int:
    """Sequence length announced by a leading byte.

    0xxxxxxx -> 1, 110xxxxx -> 2, 1110xxxx -> 3, 11110xxx -> 4.

    Raises:
        InvalidCharacterError: If byte is a continuation byte or 0xF8-0xFF
    """
    if byte < 0x80:
        return 1
    if byte < 0xC0:
        raise _invalid(position, "unexpected continuation byte")
    if byte < 0xE0:
        return 2
    if byte < 0xF0:
        return 3
    if byte < 0xF8:
        return 4
    raise _invalid(position, f"byte 0x{byte:02X} cannot start a sequence")


def _check_span(buffer: bytes, offset: int, length: int, limit: int) -> int:
    end = offset + length
    if end > limit:
        logger.debug("Truncated UTF-8 sequence at byte %d (limit %d)", offset, limit)
        raise ScanOverflowError(
            ErrorTemplate.truncated_sequence(offset, length), position=offset
        )
    for index in range(offset + 1, end):
        if not is_continuation(buffer[index]):
            raise _invalid(index, "expected continuation byte")
    return end


def decode(buffer: bytes, offset: int, limit: int | None = None) -> tuple[str, int]:
    """Decode the codepoint starting at offset.

    Args:
        buffer: UTF-8 encoded bytes
        offset: Byte offset of a leading byte
        limit: Exclusive upper bound for the read (default: len(buffer))

    Returns:
        (character, next_offset) tuple

    Raises:
        ScanOverflowError: If offset is at limit or the sequence runs past it
        InvalidCharacterError: If the bytes at offset are not well-formed UTF-8

    Example:
        >>> decode("héllo".encode(), 1)
        ('é', 3)
    """
    if limit is None:
        limit = len(buffer)
    if offset >= limit:
        raise ScanOverflowError(ErrorTemplate.overflow(offset), position=offset)

    lead = buffer[offset]
    if lead < 0x80:
        return chr(lead), offset + 1

    length = _sequence_length(lead, offset)
    end = _check_span(buffer, offset, length, limit)

    value = lead & _LEAD_PAYLOAD[length]
    for index in range(offset + 1, end):
        value = (value << 6) | (buffer[index] & 0x3F)

    if value < _MIN_VALUE[length]:
        raise _invalid(offset, f"overlong encoding of U+{value:04X}")
    if SURROGATE_RANGE_START <= value <= SURROGATE_RANGE_END:
        raise _invalid(offset, f"surrogate U+{value:04X}")
    if value > MAX_CODEPOINT:
        raise _invalid(offset, f"value 0x{value:X} above U+10FFFF")
    return chr(value), end


def next_offset(buffer: bytes, offset: int, limit: int | None = None) -> int:
    """Offset of the codepoint after the one starting at offset.

    Uses the leading byte to find the sequence length without computing
    the codepoint value.

    Args:
        buffer: UTF-8 encoded bytes
        offset: Byte offset of a leading byte
        limit: Exclusive upper bound (default: len(buffer))

    Returns:
        Byte offset of the next codepoint

    Raises:
        ScanOverflowError: If offset is at limit or the sequence runs past it
        InvalidCharacterError: If the leading or continuation bytes are invalid
    """
    if limit is None:
        limit = len(buffer)
    if offset >= limit:
        raise ScanOverflowError(ErrorTemplate.overflow(offset), position=offset)
    lead = buffer[offset]
    if lead < 0x80:
        return offset + 1
    return _check_span(buffer, offset, _sequence_length(lead, offset), limit)


def prev_offset(buffer: bytes, offset: int, floor: int = 0) -> int:
    """Offset of the codepoint that ends at offset.

    Scans backward at most MAX_SEQUENCE_LENGTH bytes (never below floor)
    for the first byte that is not a continuation byte.

    Args:
        buffer: UTF-8 encoded bytes
        offset: Byte offset on a codepoint boundary
        floor: Inclusive lower bound for the scan (default: 0)

    Returns:
        Byte offset of the previous codepoint's leading byte

    Raises:
        ScanOverflowError: If offset is at or below floor
        InvalidCharacterError: If no matching leading byte is found

    Example:
        >>> prev_offset("héllo".encode(), 3)
        1
    """
    if offset <= floor:
        raise ScanOverflowError(ErrorTemplate.underflow(floor), position=floor)
    lowest = max(floor, offset - MAX_SEQUENCE_LENGTH)
    for candidate in range(offset - 1, lowest - 1, -1):
        byte = buffer[candidate]
        if is_continuation(byte):
            continue
        if _sequence_length(byte, candidate) != offset - candidate:
            raise _invalid(candidate, "sequence length does not match boundary")
        return candidate
    raise _invalid(offset - 1, "no leading byte before continuation bytes")
