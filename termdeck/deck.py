"""Slide/build navigation state for a parsed deck."""

from dataclasses import dataclass
from datetime import date as Date
from typing import Optional, Sequence

from termdeck.data_access.emoji_data import EMPTY_EMOJI, EmojiTable
from termdeck.markup import markup_width, parse_line
from termdeck.models import Build, Line, Slide
from termdeck.ui.constants import NO_BRANDING, NO_TITLE, WHITESPACE
from termdeck.ui.layout import Geometry


def format_date(day: Date) -> str:
    return f"{day:%a}, {day.day} {day:%b %Y}"


@dataclass(frozen=True)
class DeckChrome:
    """Everything the header and footer rows are built from."""

    geometry: Geometry = Geometry()
    title: Optional[str] = None
    branding: Optional[str] = None
    date: str = ""
    show_date: bool = True
    slide_counter: bool = True
    emojis: EmojiTable = EMPTY_EMOJI

    @property
    def has_header(self) -> bool:
        return self.title is not None or self.branding is not None

    @property
    def has_footer(self) -> bool:
        return self.show_date or self.slide_counter

    def header(self) -> Line:
        title = self.title if self.title is not None else NO_TITLE
        branding = self.branding if self.branding is not None else NO_BRANDING
        margin = self.geometry.horizontal_space - markup_width(title, self.emojis)
        left = max(0, margin // 2)
        right = max(0, margin - left - markup_width(branding, self.emojis) - 1)
        return parse_line(f"<< {WHITESPACE * left}{title}{WHITESPACE * right} {branding}", self.emojis)

    def footer(self, current: int, total: int) -> Line:
        parts = []
        if self.show_date and self.slide_counter:
            counter = f"{current}/{total}"
            # Fills the row so the counter ends at the right border.
            filler = self.geometry.horizontal_space - len(self.date) - len(counter) - 1
            parts.append(f"<< {self.date} {WHITESPACE * max(0, filler)}{counter}")
        elif self.show_date:
            parts.append(f"<< {self.date} ")
        elif self.slide_counter:
            parts.append(f">> {current}/{total} ")
        return parse_line("".join(parts), self.emojis)


class Deck:
    """Ordered slides plus a `(slide_cursor, build_cursor)` position.

    `slide_cursor` stays within `[-1, len(slides)]`; both ends are parked
    positions that select nothing, so repeated moves past either end do not
    drift away from the deck.
    """

    def __init__(self, slides: Sequence[Slide], chrome: Optional[DeckChrome] = None):
        self.slides = tuple(slides)
        self.chrome = chrome or DeckChrome()
        self.slide_cursor = -1
        self.build_cursor = 0

    def __len__(self) -> int:
        return len(self.slides)

    @property
    def current_slide(self) -> Optional[Slide]:
        if 0 <= self.slide_cursor < len(self.slides):
            return self.slides[self.slide_cursor]
        return None

    @property
    def slide_number(self) -> int:
        return self.slide_cursor

    def _build(self, slide: Slide, n: int) -> Optional[Build]:
        footer = self.chrome.footer(self.slide_cursor + 1, len(self.slides))
        return slide.build(n, self.chrome.header(), footer)

    def _select_build(self, n: int) -> Optional[Build]:
        slide = self.current_slide
        if slide is None or not slide.has_build(n):
            return None
        self.build_cursor = n
        return self._build(slide, n)

    def jump_to(self, n: int) -> Optional[Build]:
        self.slide_cursor = max(-1, min(n, len(self.slides)))
        self.build_cursor = 0
        return self._select_build(0)

    def jump(self, delta: int) -> Optional[Build]:
        return self.jump_to(self.slide_cursor + delta)

    def next_build(self) -> Optional[Build]:
        return self._select_build(self.build_cursor + 1) or self.jump(1)

    def previous_build(self) -> Optional[Build]:
        build = self._select_build(self.build_cursor - 1)
        if build is not None:
            return build
        if self.jump(-1) is None:
            return None
        return self._select_build(self.current_slide.last_build)

    def last_slide(self) -> Optional[Build]:
        return self.jump_to(len(self.slides) - 1)

    def last_build(self) -> Optional[Build]:
        return self.jump_to(len(self.slides)) or self.previous_build()

    def current_code(self) -> str:
        slide = self.current_slide
        if slide is None:
            return ""
        return slide.code_for(self.build_cursor)
