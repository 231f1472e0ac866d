"""Screen geometry and ANSI-aware width helpers."""

import re
import shutil
from dataclasses import dataclass
from typing import Tuple

from termdeck.ui.constants import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    DEXTRAL,
    LEFT_CROSS,
    NEWLINE,
    RESERVED_ROWS,
    RIGHT_CROSS,
    SINISTRAL,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
    WHITESPACE,
)

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def probe_screen_size(pad_newline: bool = True, width: int = 0, height: int = 0) -> Tuple[int, int]:
    """Return `(width, height)` usable for slides.

    Explicit sizes win; otherwise the terminal is asked. One row is kept free
    for the prompt when `pad_newline` is on.
    """
    cols, rows = shutil.get_terminal_size(fallback=(0, 0))
    if width <= 0:
        width = cols if cols > 0 else DEFAULT_SCREEN_WIDTH
    if height <= 0:
        usable = rows - (1 if pad_newline else 0)
        height = usable if usable > 0 else DEFAULT_SCREEN_HEIGHT
    return width, height


def _fill(pattern: str, width: int) -> str:
    if not pattern:
        return pattern
    tiled = pattern * (width // len(pattern))
    return tiled + pattern[: width - len(tiled)]


@dataclass(frozen=True)
class Geometry:
    screen_width: int = DEFAULT_SCREEN_WIDTH
    screen_height: int = DEFAULT_SCREEN_HEIGHT

    @property
    def vertical_space(self) -> int:
        return self.screen_height - RESERVED_ROWS

    @property
    def horizontal_space(self) -> int:
        return self.screen_width - len(SINISTRAL) - len(DEXTRAL)

    def top_row(self) -> str:
        fill = _fill(TOP, self.screen_width)
        return TOP_LEFT + fill[1:-1] + TOP_RIGHT + NEWLINE

    def bottom_row(self) -> str:
        fill = _fill(BOTTOM, self.screen_width)
        return BOTTOM_LEFT + fill[1:-1] + BOTTOM_RIGHT

    def cross_row(self) -> str:
        fill = _fill(BOTTOM, self.screen_width)
        return LEFT_CROSS + fill[1:-1] + RIGHT_CROSS + NEWLINE

    def blank_line(self) -> str:
        padding = WHITESPACE * self.horizontal_space + DEXTRAL if DEXTRAL else ""
        return SINISTRAL + padding + NEWLINE


def measure(pad_newline: bool = True, width: int = 0, height: int = 0) -> Geometry:
    screen_width, screen_height = probe_screen_size(pad_newline, width, height)
    return Geometry(screen_width=screen_width, screen_height=screen_height)
