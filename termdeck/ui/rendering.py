"""Compose a full screen frame for a build and write frames to the terminal."""

import sys
from typing import Optional

from termdeck.deck import DeckChrome
from termdeck.models import Build, Line
from termdeck.ui.constants import DEXTRAL, NEWLINE, SINISTRAL
from termdeck.ui.layout import Geometry
from termdeck.ui.styles import render_line


def render_build(build: Build, geometry: Geometry, chrome: Optional[DeckChrome] = None) -> str:
    chrome = chrome or DeckChrome(geometry=geometry)
    top_padding = (geometry.vertical_space - build.size) // 2
    bottom_padding = geometry.vertical_space - top_padding - len(build.content)
    margin = geometry.horizontal_space - build.max_length
    blank = geometry.blank_line()
    rows = [geometry.top_row()]

    def _row(line: Line) -> str:
        return SINISTRAL + render_line(line, margin, geometry.horizontal_space) + DEXTRAL + NEWLINE

    if chrome.has_header:
        rows.append(_row(build.header))
        rows.append(geometry.cross_row())
        rows.append(blank * (top_padding - 2))
    else:
        rows.append(blank * top_padding)

    rows.extend(_row(line) for line in build.content)

    if chrome.has_footer and bottom_padding > 0:
        rows.append(blank * (bottom_padding - 2))
        rows.append(geometry.cross_row())
        rows.append(_row(build.footer))
    else:
        rows.append(blank * bottom_padding)

    rows.append(geometry.bottom_row())
    return "".join(rows)


def render_frame(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def blank_screen(geometry: Geometry) -> None:
    render_frame(NEWLINE * geometry.screen_height)
