"""Quickstart - scanning a small config format with utf8parse.

Demonstrates the core scanning workflow:

1. Walk lines and split them into key/value sub-parsers
2. Backtrack over a failed multi-step match
3. Report an error with line/column information

Python 3.13+.
"""

from __future__ import annotations


def example_1_key_values() -> None:
    """Split `key = value` lines into sub-parsers."""
    from utf8parse import Parser, is_whitespace

    print("=" * 60)
    print("Example 1: Key/Value Lines")
    print("=" * 60)

    source = "name = Zoë\r\ncity = Kraków\n# comment\nemoji = 😀\n"
    parser = Parser(source)

    while not parser.at_end():
        line = parser.read_line()
        if line.at_end() or line.match_char("#"):
            continue
        key = line.read_until_char("=")
        line.advance()
        line.skip_whitespace()
        value = line.read_to_end()
        # Keys keep the space before "="; trim it with a predicate scan.
        name = key.read_until_predicate(is_whitespace, fail_on_overflow=False)
        print(f"  {name.text!r} -> {value.text!r} ({value.byte_count} bytes)")

    print()


def example_2_backtracking() -> None:
    """Try alternatives without losing the cursor."""
    from utf8parse import Parser, ParserError

    print("=" * 60)
    print("Example 2: Backtracking")
    print("=" * 60)

    parser = Parser("<!-- note --> rest")

    try:
        with parser.backtrack():
            parser.expect_string("<![CDATA[")
    except ParserError as error:
        print(f"  not CDATA: {error}")
    print(f"  cursor still at {parser.position}")

    if parser.match_string("<!--"):
        body = parser.read_until_string("-->")
        parser.advance(3)
        print(f"  comment body: {body.text.strip()!r}")
    print(f"  remaining: {parser.read_to_end().text!r}")
    print()


def example_3_diagnostics() -> None:
    """Turn a parse failure into a located diagnostic."""
    from utf8parse import Parser, ParserError

    print("=" * 60)
    print("Example 3: Diagnostics")
    print("=" * 60)

    parser = Parser("first = 1\nsecond 2\n")
    parser.read_line()
    parser.read_until_char(" ")
    parser.skip_whitespace()

    try:
        parser.expect_char("=")
    except ParserError as error:
        diagnostic = parser.diagnose(error)
        if diagnostic is not None:
            print(diagnostic.format_error())
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("utf8parse Quickstart")
    print()

    example_1_key_values()
    example_2_backtracking()
    example_3_diagnostics()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
