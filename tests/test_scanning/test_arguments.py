"""Tests for argument splitting and literal extraction."""

from __future__ import annotations

import pytest

from gluadoc.scanning.arguments import (
    extract_numeric,
    extract_string_literal,
    is_identifier,
    split_arguments,
)


class TestSplitArguments:
    def test_whitespace_is_trimmed(self) -> None:
        """Padding around arguments never changes the result."""
        assert split_arguments(" a , b ") == ["a", "b"]
        assert split_arguments(" a , b ") == split_arguments("a,b")

    def test_comma_inside_string_does_not_split(self) -> None:
        assert split_arguments('"a,b", c') == ['"a,b"', "c"]

    def test_single_quoted_strings(self) -> None:
        assert split_arguments("'x, y', 'z'") == ["'x, y'", "'z'"]

    def test_other_quote_inside_string(self) -> None:
        assert split_arguments("\"it's\", b") == ['"it\'s"', "b"]

    def test_escaped_quote_keeps_string_open(self) -> None:
        assert split_arguments(r'"a\",b", c') == [r'"a\",b"', "c"]

    def test_empty_text_yields_nothing(self) -> None:
        assert split_arguments("") == []

    def test_whitespace_only_yields_nothing(self) -> None:
        assert split_arguments("   \n\t") == []

    def test_empty_middle_argument_is_kept(self) -> None:
        assert split_arguments("a,,b") == ["a", "", "b"]

    def test_nested_parens_split_without_tracking(self) -> None:
        assert split_arguments("f(a, b), c") == ["f(a", "b)", "c"]

    def test_nested_parens_kept_with_tracking(self) -> None:
        parts = split_arguments("f(a, b), c", track_parentheses=True)
        assert parts == ["f(a, b)", "c"]

    def test_paren_inside_string_does_not_change_depth(self) -> None:
        parts = split_arguments('f(")"), x', track_parentheses=True)
        assert parts == ['f(")")', "x"]


class TestExtractStringLiteral:
    @pytest.mark.parametrize(
        ("arg", "expected"),
        [
            ('"Speed"', "Speed"),
            ("'Speed'", "Speed"),
            ('  "padded"  ', "padded"),
        ],
    )
    def test_bare_literals(self, arg: str, expected: str) -> None:
        assert extract_string_literal(arg) == expected

    @pytest.mark.parametrize(
        "arg",
        ["PANEL", '""', '"a" .. "b"', "FORCE_BOOL", "0", "{}"],
    )
    def test_non_literals(self, arg: str) -> None:
        assert extract_string_literal(arg) is None


class TestExtractNumeric:
    @pytest.mark.parametrize(
        ("arg", "expected"),
        [("0", 0), (" 2 ", 2), ("-3", -3), ("0x10", 16), ("1.5", 1.5)],
    )
    def test_numbers(self, arg: str, expected: float) -> None:
        assert extract_numeric(arg) == expected

    @pytest.mark.parametrize("arg", ["", "FORCE_BOOL", "inf", "nan", "1e"])
    def test_not_numbers(self, arg: str) -> None:
        assert extract_numeric(arg) is None


def test_is_identifier() -> None:
    assert is_identifier("PANEL")
    assert is_identifier("self.Inner")
    assert not is_identifier("{}")
    assert not is_identifier('"PANEL"')
    assert not is_identifier("GetTable(self)")
