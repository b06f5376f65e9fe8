"""Tests for utf8parse.diagnostics: codes, spans, templates, errors, formatter."""

from __future__ import annotations

import json

import pytest

from utf8parse import Parser, ScanOverflowError, UnexpectedCharacterError
from utf8parse.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    EmptyInputError,
    ErrorTemplate,
    InvalidCharacterError,
    OutputFormat,
    ParserError,
    SourceSpan,
)


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid_span(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=2, end=5, line=1, column=3)

        assert (span.start, span.end, span.line, span.column) == (2, 5, 1, 3)

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (3, 2, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int) -> None:
        """Negative start, reversed range and 0-based line/column are rejected."""
        with pytest.raises(ValueError):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestErrorHierarchy:
    """Exception classes."""

    @pytest.mark.parametrize(
        "error_class",
        [ScanOverflowError, UnexpectedCharacterError, EmptyInputError, InvalidCharacterError],
    )
    def test_all_errors_are_parser_errors(self, error_class: type[ParserError]) -> None:
        """Every error kind can be caught as ParserError."""
        assert issubclass(error_class, ParserError)

    def test_error_from_diagnostic(self) -> None:
        """A Diagnostic becomes the message and is kept on the error."""
        diagnostic = ErrorTemplate.overflow(7)
        error = ScanOverflowError(diagnostic, position=7)

        assert str(error) == "Unexpected end of input at byte 7"
        assert error.diagnostic is diagnostic
        assert error.position == 7

    def test_error_from_string(self) -> None:
        """A plain string message has no diagnostic and unknown position."""
        error = ParserError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None
        assert error.position == -1


class TestTemplates:
    """ErrorTemplate messages and codes."""

    def test_overflow(self) -> None:
        """Overflow diagnostics use the OVERFLOW code."""
        diagnostic = ErrorTemplate.overflow(3)

        assert diagnostic.code == DiagnosticCode.OVERFLOW
        assert diagnostic.code.value == 1001
        assert "byte 3" in diagnostic.message

    def test_not_found_records_expected(self) -> None:
        """Search failures name what was searched for."""
        diagnostic = ErrorTemplate.not_found("'-->'", 0)

        assert diagnostic.code == DiagnosticCode.OVERFLOW
        assert diagnostic.expected == "'-->'"
        assert diagnostic.hint is not None
        assert "fail_on_overflow" in diagnostic.hint

    def test_empty_input(self) -> None:
        """EMPTY_INPUT names the operation."""
        diagnostic = ErrorTemplate.empty_input("read_until_string")

        assert diagnostic.code == DiagnosticCode.EMPTY_INPUT
        assert diagnostic.message == "read_until_string() requires a non-empty target"

    def test_invalid_character(self) -> None:
        """INVALID_CHARACTER includes the reason."""
        diagnostic = ErrorTemplate.invalid_character(4, "surrogate U+D800")

        assert diagnostic.code == DiagnosticCode.INVALID_CHARACTER
        assert diagnostic.message == "Invalid UTF-8 at byte 4: surrogate U+D800"

    def test_templates_leave_span_unset(self) -> None:
        """Spans are attached later by Parser.diagnose(), never by a template."""
        diagnostics = [
            ErrorTemplate.overflow(0),
            ErrorTemplate.underflow(0),
            ErrorTemplate.not_found("','", 0),
            ErrorTemplate.unexpected("'='", "'x'", 0),
            ErrorTemplate.empty_input("match_char"),
            ErrorTemplate.invalid_character(0, "bad byte"),
            ErrorTemplate.truncated_sequence(0, 3),
        ]

        assert all(d.span is None for d in diagnostics)


class TestFormatter:
    """DiagnosticFormatter output styles."""

    def _diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED,
            message="Expected '=' at byte 4, found 'x'",
            span=SourceSpan(start=4, end=4, line=2, column=1),
            hint="Add the missing '='",
            expected="'='",
            found="'x'",
        )

    def test_rust_format(self) -> None:
        """Rust style lists location, expected, found and help."""
        assert self._diagnostic().format_error() == (
            "error[UNEXPECTED]: Expected '=' at byte 4, found 'x'\n"
            "  --> line 2, column 1\n"
            "  = expected: '='\n"
            "  = found: 'x'\n"
            "  = help: Add the missing '='"
        )

    def test_simple_format(self) -> None:
        """Simple style is a single line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self._diagnostic()) == (
            "UNEXPECTED: Expected '=' at byte 4, found 'x'"
        )

    def test_json_format(self) -> None:
        """JSON style carries code, span and extras."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self._diagnostic()))

        assert data["code"] == "UNEXPECTED"
        assert data["code_value"] == 1002
        assert data["line"] == 2
        assert data["start"] == 4
        assert data["found"] == "'x'"

    def test_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        formatter = DiagnosticFormatter(color=True)

        assert formatter.format(self._diagnostic()).startswith("\033[1;31merror\033[0m")

    def test_sanitize_truncates(self) -> None:
        """Sanitizing shortens long messages."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.OVERFLOW, message="x" * 50)

        assert formatter.format(diagnostic) == "OVERFLOW: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by a blank line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.overflow(1), ErrorTemplate.overflow(2)]

        assert formatter.format_all(diagnostics) == (
            "OVERFLOW: Unexpected end of input at byte 1\n\n"
            "OVERFLOW: Unexpected end of input at byte 2"
        )


class TestParserDiagnose:
    """Parser.diagnose() attaches line/column on demand."""

    def test_diagnose_adds_span(self) -> None:
        """The span points at the error position in the buffer."""
        parser = Parser("key = 1\nname x")
        parser.read_line()
        parser.read_until_char(" ")
        parser.advance()

        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parser.expect_char("=")

        diagnostic = parser.diagnose(exc_info.value)
        assert diagnostic is not None
        assert diagnostic.span == SourceSpan(start=13, end=13, line=2, column=6)
        assert "--> line 2, column 6" in diagnostic.format_error()

    def test_diagnose_without_diagnostic(self) -> None:
        """Errors built from plain strings have nothing to decorate."""
        assert Parser("a").diagnose(ParserError("plain")) is None

    def test_diagnose_without_position(self) -> None:
        """Errors without a position keep their diagnostic unchanged."""
        error = EmptyInputError(ErrorTemplate.empty_input("match_string"))

        assert Parser("a").diagnose(error) is error.diagnostic

    def test_line_column(self) -> None:
        """line_column() reports the cursor by default."""
        parser = Parser("ab\nçd")
        parser.advance(4)

        assert parser.line_column() == (2, 2)
        assert parser.line_column(0) == (1, 1)
