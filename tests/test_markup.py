"""
Tests for termdeck.markup

Covers:
  - alignment marker resolution
  - colour, reset and backslash escapes with visible-length accounting
  - emoji substitution against injected tables
"""

from __future__ import annotations

import pytest

from termdeck.data_access.emoji_data import EMPTY_EMOJI, EmojiTable
from termdeck.markup import expand_escapes, markup_width, parse_line, split_style
from termdeck.models import StyleTag
from termdeck.ui.ansi import ANSI


# ---------------------------------------------------------------------------
# Alignment markers
# ---------------------------------------------------------------------------

class TestSplitStyle:

    @pytest.mark.parametrize(
        "raw, expected_text, expected_style",
        [
            ("<< left", "left", StyleTag.LEFT_FLUSHED),
            ("< left", "left", StyleTag.LEFT_ALIGNED),
            ("| mid", "mid", StyleTag.CENTERED),
            ("> right", "right", StyleTag.RIGHT_ALIGNED),
            (">> right", "right", StyleTag.RIGHT_FLUSHED),
            ("//=", "=", StyleTag.FULL_SCREEN_HORIZONTAL_RULER),
            ("/=", "=", StyleTag.HORIZONTAL_RULER),
            ("/", "", StyleTag.HORIZONTAL_RULER),
            ("plain", "plain", StyleTag.LEFT_ALIGNED),
        ],
    )
    def test_markers(self, raw, expected_text, expected_style):
        assert split_style(raw) == (expected_text, expected_style)

    def test_markers_need_their_delimiter(self):
        assert split_style(">>x") == (">>x", StyleTag.LEFT_ALIGNED)
        assert split_style("<<x") == ("<<x", StyleTag.LEFT_ALIGNED)
        assert split_style("|x") == ("|x", StyleTag.LEFT_ALIGNED)

    def test_parse_line_strips_marker(self):
        line = parse_line("| World")
        assert line.content == "World"
        assert line.length == 5
        assert line.style is StyleTag.CENTERED


# ---------------------------------------------------------------------------
# Escapes
# ---------------------------------------------------------------------------

class TestEscapes:

    def test_colour_escape_adds_trailing_reset(self):
        line = parse_line("\\rred\\s plain")
        assert line.content == ANSI.FG_RED + "red" + ANSI.RESET + " plain" + ANSI.RESET
        assert line.length == len("red plain")

    def test_background_and_attributes(self):
        content, drop = expand_escapes("\\Ya\\*b\\_c\\!d")
        assert content == ANSI.BG_YELLOW + "a" + ANSI.BOLD + "b" + ANSI.UNDERLINED + "c" + ANSI.REVERSED + "d" + ANSI.RESET
        assert drop == 8

    def test_reset_alone_has_no_trailing_reset(self):
        line = parse_line("a\\sb")
        assert line.content == "a" + ANSI.RESET + "b"
        assert line.length == 2

    def test_double_backslash_is_literal(self):
        line = parse_line("a\\\\b")
        assert line.content == "a\\b"
        assert line.length == 3

    def test_unknown_escape_passes_through(self):
        line = parse_line("a\\qb")
        assert line.content == "a\\qb"
        assert line.length == 4

    def test_escapes_do_not_count(self):
        line = parse_line("> \\gok\\s \\bgo\\s")
        assert line.style is StyleTag.RIGHT_ALIGNED
        assert line.length == len("ok go")

    def test_markup_width(self):
        assert markup_width("\\rab\\s") == 2
        assert markup_width("plain") == 5


# ---------------------------------------------------------------------------
# Emoji
# ---------------------------------------------------------------------------

class TestEmoji:

    TABLE = EmojiTable({"tada": "\U0001F389", "+1": "\U0001F44D"})

    def test_known_code_counts_as_one(self):
        line = parse_line("hi :tada:", self.TABLE)
        assert line.content == "hi \U0001F389"
        assert line.content.count("\U0001F389") == 1
        assert line.length == 4

    def test_code_with_plus(self):
        line = parse_line(":+1:", self.TABLE)
        assert line.content == "\U0001F44D"
        assert line.length == 1

    def test_unknown_code_is_literal(self):
        line = parse_line(":nope:", self.TABLE)
        assert line.content == ":nope:"
        assert line.length == 6

    def test_empty_table_leaves_codes(self):
        line = parse_line(":tada:", EMPTY_EMOJI)
        assert line.content == ":tada:"
        assert line.length == 6

    def test_emoji_and_colour(self):
        line = parse_line("| \\y:tada:\\s!", self.TABLE)
        assert line.style is StyleTag.CENTERED
        assert line.length == 2
