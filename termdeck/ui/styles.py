"""Pad a parsed line to the slide width according to its alignment style."""

from termdeck.models import Line, StyleTag
from termdeck.ui.ansi import ANSI
from termdeck.ui.constants import RULER_PATTERN, WHITESPACE

DEFAULT_RULER = Line(RULER_PATTERN, len(RULER_PATTERN), StyleTag.LEFT_ALIGNED)


def _fill(content: str, left: int, right: int) -> str:
    return WHITESPACE * left + content + WHITESPACE * right


def _ruler_remainder(pattern: str, remaining: int) -> tuple[str, str]:
    """Take display columns from `pattern` without splitting an escape.

    Returns the copied prefix and the reset to close it with, if any escape
    was copied.
    """
    out = []
    in_escape = False
    reset = ""
    for ch in pattern:
        if remaining <= 0:
            break
        if in_escape:
            if ch == "m":
                in_escape = False
        elif ch == ANSI.ESC:
            in_escape = True
            reset = ANSI.RESET
        else:
            remaining -= 1
        out.append(ch)
    return "".join(out), reset


def _render_ruler(line: Line, margin: int, horizontal_space: int) -> str:
    pattern = DEFAULT_RULER if line.is_empty() or line.length <= 0 else line
    width = horizontal_space - margin
    repeats = max(0, width // pattern.length)
    content = pattern.content * repeats
    padding, reset = _ruler_remainder(pattern.content, width - repeats * pattern.length)
    left = margin // 2
    right = margin - left
    return _fill(content + padding + reset, left, right)


def render_line(line: Line, margin: int, horizontal_space: int) -> str:
    """Render `line` inside `horizontal_space` columns.

    `margin` is the slide-wide free space (`horizontal_space - max_length`);
    flushed and centred styles ignore it.
    """
    style = line.style
    if style is StyleTag.LEFT_FLUSHED:
        return _fill(line.content, 0, horizontal_space - line.length)
    if style is StyleTag.LEFT_ALIGNED:
        left = margin // 2
        return _fill(line.content, left, horizontal_space - left - line.length)
    if style is StyleTag.CENTERED:
        own_margin = horizontal_space - line.length
        left = own_margin // 2
        return _fill(line.content, left, own_margin - left)
    if style is StyleTag.RIGHT_ALIGNED:
        right = (margin + 1) // 2
        return _fill(line.content, horizontal_space - right - line.length, right)
    if style is StyleTag.RIGHT_FLUSHED:
        return _fill(line.content, horizontal_space - line.length, 0)
    if style is StyleTag.HORIZONTAL_RULER:
        return _render_ruler(line, margin, horizontal_space)
    if style is StyleTag.FULL_SCREEN_HORIZONTAL_RULER:
        return _render_ruler(line, 0, horizontal_space)
    raise ValueError(f"unknown line style: {style!r}")
