"""Shared constants for utf8parse.

This module provides centralized configuration constants used across
the codec, parser and diagnostics modules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- UTF-8 layout: Bit masks and lengths of the encoding form
- Sentinels: Values returned where absence is a valid answer

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # UTF-8 layout
    "CONTINUATION_MASK",
    "CONTINUATION_TAG",
    "MAX_CODEPOINT",
    "MAX_SEQUENCE_LENGTH",
    "SURROGATE_RANGE_END",
    "SURROGATE_RANGE_START",
    # Sentinels
    "SENTINEL",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum buffer size in bytes (10 MB).
# The whole buffer must be resident; this bounds memory for untrusted input.
# Override per parser with Parser(data, max_size=...).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# UTF-8 LAYOUT
# ============================================================================

# Continuation bytes look like 10xxxxxx.
# byte & CONTINUATION_MASK == CONTINUATION_TAG identifies them.
CONTINUATION_MASK: int = 0xC0
CONTINUATION_TAG: int = 0x80

# Longest well-formed UTF-8 sequence (11110xxx + 3 continuation bytes).
MAX_SEQUENCE_LENGTH: int = 4

# Maximum valid Unicode code point per Unicode Standard.
MAX_CODEPOINT: int = 0x10FFFF

# UTF-16 surrogate code point range (D800-DFFF).
# These are invalid in UTF-8 and rejected by the decoder.
SURROGATE_RANGE_START: int = 0xD800
SURROGATE_RANGE_END: int = 0xDFFF

# ============================================================================
# SENTINELS
# ============================================================================

# Returned by Parser.current() at end of range (U+0000).
SENTINEL: str = "\x00"
