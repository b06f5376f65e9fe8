"""Diagnostic system for parser errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    EmptyInputError,
    InvalidCharacterError,
    ParserError,
    ScanOverflowError,
    UnexpectedCharacterError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyInputError",
    "ErrorTemplate",
    "InvalidCharacterError",
    "OutputFormat",
    "ParserError",
    "ScanOverflowError",
    "SourceSpan",
    "UnexpectedCharacterError",
]
