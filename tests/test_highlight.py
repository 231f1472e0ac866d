"""
Tests for termdeck.highlight

Covers:
  - precedence between the token classes
  - literal backslashes in highlighted source
"""

from __future__ import annotations

import pytest

from termdeck.highlight import PATTERNS, highlight
from termdeck.markup import parse_line
from termdeck.ui.layout import strip_ansi


class TestPrecedence:

    def test_pattern_order(self):
        assert [color for color, _ in PATTERNS] == ["r", "c", "m", "g", "r", "b"]

    def test_string_wins_over_its_contents(self):
        assert highlight('x = "if 1"') == 'x = \\r"if 1"\\s'

    def test_reserved_before_type_like(self):
        assert highlight("None") == "\\cNone\\s"

    def test_special_before_type_like(self):
        assert highlight("True") == "\\mTrue\\s"

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("Foo", "\\gFoo\\s"),
            ("if x", "\\bif\\s x"),
            ("0x1F", "\\r0x1F\\s"),
            ("3.5", "\\r3.5\\s"),
            ("y = .5", "y = \\r.5\\s"),
            ("f(1.)", "f(\\r1.\\s)"),
            ("print(x)", "\\cprint\\s(x)"),
            ("self.x", "\\mself\\s.x"),
        ],
    )
    def test_token_classes(self, source, expected):
        assert highlight(source) == expected

    def test_identifiers_with_digits_stay_plain(self):
        assert highlight("x1") == "x1"

    def test_attribute_digits_are_not_numbers(self):
        assert highlight("obj.x2") == "obj.x2"
        assert highlight("t[1].real") == "t[\\r1\\s].real"

    def test_plain_text_is_unchanged(self):
        assert highlight("val x = y") == "val x = y"


class TestBackslashes:

    def test_backslash_renders_literally(self):
        source = 'print("a\\nb")'
        line = parse_line(highlight(source))
        assert strip_ansi(line.content) == source
        assert line.length == len(source)

    def test_escaped_quote_stays_inside_string(self):
        source = '"a\\"b" + c'
        assert highlight(source).startswith('\\r"a\\\\"b"\\s')
