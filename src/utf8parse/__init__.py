"""utf8parse - cursor-based scanning over UTF-8 byte buffers.

Walk a UTF-8 buffer one codepoint at a time, test characters against
sets and predicates, and carve out sub-parsers by searching for
characters, sets, predicates or literal substrings. Failed matches and
searches leave the cursor where it was.

Public API:
    Parser - Cursor over a window of a shared UTF-8 buffer
    char_set - Build a character set for match_any/read_until_set
    is_whitespace, is_newline, is_number, is_letter - Classification predicates

Exceptions:
    ParserError - Base exception class
    ScanOverflowError - Ran out of input
    UnexpectedCharacterError - Input present but not what was required
    EmptyInputError - Empty match or search target
    InvalidCharacterError - Malformed UTF-8

Submodules:
    utf8parse.codec - Offset-level UTF-8 decode/next/previous functions
    utf8parse.classify - Unicode classifier protocol and default implementation
    utf8parse.diagnostics - Diagnostic codes, templates and formatting
    utf8parse.position - Byte offset to line/column helpers
"""

from .classify import (
    UnicodeClassifier,
    UnicodeDataClassifier,
    char_set,
    is_letter,
    is_newline,
    is_number,
    is_whitespace,
)
from .diagnostics import (
    EmptyInputError,
    InvalidCharacterError,
    ParserError,
    ScanOverflowError,
    UnexpectedCharacterError,
)
from .parser import Parser

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("utf8parse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EmptyInputError",
    "InvalidCharacterError",
    "Parser",
    "ParserError",
    "ScanOverflowError",
    "UnexpectedCharacterError",
    "UnicodeClassifier",
    "UnicodeDataClassifier",
    "__version__",
    "char_set",
    "is_letter",
    "is_newline",
    "is_number",
    "is_whitespace",
]
