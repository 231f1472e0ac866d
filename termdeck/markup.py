"""Turn one raw script line into a styled `Line`."""

import re
from typing import Tuple

from termdeck.data_access.emoji_data import EMPTY_EMOJI, EmojiTable
from termdeck.models import Line, StyleTag
from termdeck.ui.ansi import ANSI, COLOR_BY_ESCAPE

# Longer markers come before their shorter prefixes.
STYLE_MARKERS: Tuple[Tuple[str, StyleTag], ...] = (
    ("<< ", StyleTag.LEFT_FLUSHED),
    ("< ", StyleTag.LEFT_ALIGNED),
    ("| ", StyleTag.CENTERED),
    ("> ", StyleTag.RIGHT_ALIGNED),
    (">> ", StyleTag.RIGHT_FLUSHED),
    ("//", StyleTag.FULL_SCREEN_HORIZONTAL_RULER),
    ("/", StyleTag.HORIZONTAL_RULER),
)

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
EMOJI_RE = re.compile(r":([\w+\-]+):")
STRIP_ESCAPES_RE = re.compile(r"\\.", re.DOTALL)


def split_style(raw: str) -> Tuple[str, StyleTag]:
    for marker, style in STYLE_MARKERS:
        if raw.startswith(marker):
            return raw[len(marker):], style
    return raw, StyleTag.LEFT_ALIGNED


def expand_escapes(text: str) -> Tuple[str, int]:
    """Replace `\\x` escapes with ANSI sequences.

    Returns the expanded text and the number of columns the escapes took in
    the source.
    """
    drop = 0
    reset = ""

    def _replace(match: re.Match) -> str:
        nonlocal drop, reset
        ch = match.group(1)
        if ch in COLOR_BY_ESCAPE:
            drop += 2
            reset = ANSI.RESET
            return COLOR_BY_ESCAPE[ch]
        if ch == "s":
            drop += 2
            return ANSI.RESET
        if ch == "\\":
            drop += 1
            return "\\"
        return match.group(0)

    content = ESCAPE_RE.sub(_replace, text)
    return content + reset, drop


def expand_emoji(text: str, emojis: EmojiTable = EMPTY_EMOJI) -> Tuple[str, int]:
    drop = 0

    def _replace(match: re.Match) -> str:
        nonlocal drop
        glyph = emojis.get(match.group(1))
        if glyph is None:
            return match.group(0)
        drop += len(match.group(0)) - 1
        return glyph

    if not len(emojis):
        return text, 0
    return EMOJI_RE.sub(_replace, text), drop


def parse_line(raw: str, emojis: EmojiTable = EMPTY_EMOJI) -> Line:
    text, style = split_style(raw)
    escaped, ansi_drop = expand_escapes(text)
    content, emoji_drop = expand_emoji(escaped, emojis)
    return Line(content=content, length=len(text) - ansi_drop - emoji_drop, style=style)


def markup_width(text: str, emojis: EmojiTable = EMPTY_EMOJI) -> int:
    """Width of `text` once its escapes and emoji names are gone; used for header text."""
    _, emoji_drop = expand_emoji(text, emojis)
    return len(STRIP_ESCAPES_RE.sub("", text)) - emoji_drop
