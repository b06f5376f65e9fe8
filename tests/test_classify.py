"""Tests for utf8parse.classify: classifier protocol, predicates, char_set."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from utf8parse.classify import (
    CharacterClass,
    UnicodeClassifier,
    UnicodeDataClassifier,
    char_set,
    classify,
    is_letter,
    is_newline,
    is_number,
    is_whitespace,
)


class TestWhitespace:
    """White_Space property."""

    @pytest.mark.parametrize(
        "char", [" ", "\t", "\n", "\r", "\x0b", "\x0c", "\x85", "\xa0", "\u2003", "\u3000"]
    )
    def test_whitespace(self, char: str) -> None:
        """Unicode White_Space characters are whitespace."""
        assert is_whitespace(char)

    @pytest.mark.parametrize("char", ["a", "\x1c", "\x1f", "\u200b", "\x00"])
    def test_not_whitespace(self, char: str) -> None:
        """Information separators and ZERO WIDTH SPACE are not White_Space."""
        assert not is_whitespace(char)


class TestNewline:
    """Newline classification."""

    @pytest.mark.parametrize("char", ["\n", "\x0b", "\x0c", "\r", "\x85", "\u2028", "\u2029"])
    def test_newline(self, char: str) -> None:
        """LF through CR, NEL and the Unicode separators end lines."""
        assert is_newline(char)

    @pytest.mark.parametrize("char", [" ", "\t", "a", "\u2027"])
    def test_not_newline(self, char: str) -> None:
        """Spaces and tabs do not end lines."""
        assert not is_newline(char)


class TestNumberAndLetter:
    """Numeric and alphabetic classification."""

    @pytest.mark.parametrize("char", ["0", "9", "٣", "²", "½", "Ⅻ", "五"])
    def test_number(self, char: str) -> None:
        """Digits, superscripts, fractions, roman numerals and CJK numerals."""
        assert is_number(char)

    @pytest.mark.parametrize("char", ["a", "-", " ", "é"])
    def test_not_number(self, char: str) -> None:
        """Letters and punctuation have no numeric value."""
        assert not is_number(char)

    @pytest.mark.parametrize(
        "char", ["a", "Z", "é", "Ω", "日", "Ⅻ", "\u093e", "\u05b0", "\u0345", "\u24b6"]
    )
    def test_letter(self, char: str) -> None:
        """Letters, letter numbers and Other_Alphabetic marks are alphabetic."""
        assert is_letter(char)

    @pytest.mark.parametrize("char", ["1", " ", "-", "²"])
    def test_not_letter(self, char: str) -> None:
        """Digits, space and punctuation are not alphabetic."""
        assert not is_letter(char)


class TestClassify:
    """The combined classify() call."""

    def test_classify_default(self) -> None:
        """classify() reports all four answers."""
        assert classify("\n") == CharacterClass(
            is_whitespace=True, is_newline=True, is_number=False, is_letter=False
        )

    def test_classify_with_custom_classifier(self) -> None:
        """A custom classifier is consulted instead of the default."""

        class Everything:
            def is_whitespace(self, char: str) -> bool:
                return True

            def is_newline(self, char: str) -> bool:
                return True

            def is_number(self, char: str) -> bool:
                return True

            def is_letter(self, char: str) -> bool:
                return True

        assert isinstance(Everything(), UnicodeClassifier)
        assert classify("x", Everything()) == CharacterClass(True, True, True, True)

    def test_default_satisfies_protocol(self) -> None:
        """UnicodeDataClassifier implements the protocol."""
        assert isinstance(UnicodeDataClassifier(), UnicodeClassifier)

    @given(char=st.characters())
    def test_newline_implies_whitespace(self, char: str) -> None:
        """PROPERTY: every newline character is also whitespace."""
        result = classify(char)
        event(f"newline={result.is_newline}")
        if result.is_newline:
            assert result.is_whitespace


class TestCharSet:
    """Building character sets."""

    def test_from_string(self) -> None:
        """Each codepoint of the string becomes a member."""
        assert char_set("aé😀") == frozenset({"a", "é", "😀"})

    def test_from_iterable(self) -> None:
        """An iterable of single characters is accepted."""
        assert char_set(["x", "y"]) == frozenset({"x", "y"})

    def test_rejects_multi_character_elements(self) -> None:
        """Elements must be single characters."""
        with pytest.raises(ValueError, match="single characters"):
            char_set(["ab"])
