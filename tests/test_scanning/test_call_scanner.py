"""Tests for call location and parenthesis matching."""

from __future__ import annotations

import re

from gluadoc.scanning.call_scanner import find_calls, find_matching_paren


class TestFindMatchingParen:
    def test_skips_nested_and_quoted_parens(self) -> None:
        """The close is the ")" before baz, not an interior one."""
        text = 'foo(bar(1,2), "x)y")baz'
        assert find_matching_paren(text, len("foo(")) == 19
        assert text[19] == ")"
        assert text[20:] == "baz"

    def test_unbalanced_returns_none(self) -> None:
        assert find_matching_paren("foo(bar(", len("foo(")) is None

    def test_unterminated_string_returns_none(self) -> None:
        assert find_matching_paren('f(")', 2) is None


class TestFindCalls:
    def test_unbalanced_input_yields_no_calls(self) -> None:
        assert find_calls("foo(bar(", r"foo\(") == []

    def test_offsets_are_one_based(self) -> None:
        text = "x = foo(1, (2)) foo(3)"
        calls = find_calls(text, r"foo\(")
        assert [c.args_text for c in calls] == ["1, (2)", "3"]
        first = calls[0]
        assert first.start == text.index("foo") + 1
        assert text[first.close - 1] == ")"
        assert first.close == 15
        assert text[first.args_start - 1] == "1"

    def test_calls_before_unbalanced_one_are_kept(self) -> None:
        calls = find_calls("a(1) a(2", r"a\(")
        assert [c.args_text for c in calls] == ["1"]

    def test_pattern_not_ending_at_paren_yields_nothing(self) -> None:
        assert find_calls("foo(1)", "foo") == []

    def test_compiled_pattern_accepted(self) -> None:
        pattern = re.compile(r"vgui\s*\.\s*Register\s*\(")
        calls = find_calls("vgui.Register('A', P)", pattern)
        assert calls[0].args_text == "'A', P"

    def test_quoted_paren_in_arguments(self) -> None:
        calls = find_calls('f(")") f(2)', r"f\(")
        assert [c.args_text for c in calls] == ['")"', "2"]

    def test_no_match(self) -> None:
        assert find_calls("print('hi')", r"foo\(") == []
