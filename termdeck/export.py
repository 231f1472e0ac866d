"""Save every slide of a deck as one HTML page through `ansifilter`."""

import logging
import os
import subprocess
from typing import Callable, List

from termdeck.config import EXPORT_HTML, EXPORT_TRANSCRIPT
from termdeck.deck import Deck
from termdeck.models import Build
from termdeck.ui.constants import NEWLINE, PAGE_BREAK

logger = logging.getLogger(__name__)

HTML_REPLACEMENTS = (
    ("�", "┛ "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)


class ExportError(Exception):
    """The HTML export could not be produced."""


def render_transcript(deck: Deck, render: Callable[[Build], str]) -> str:
    """Render build 0 of each slide; the deck cursor is restored afterwards."""
    slide_number = deck.slide_number
    pages: List[str] = []
    for index in range(len(deck)):
        build = deck.jump_to(index)
        pages.append(render(build) if build is not None else "")
    deck.jump_to(slide_number)
    return f"</pre>{NEWLINE}{PAGE_BREAK}{NEWLINE}<pre>".join(pages)


def ansifilter_command(transcript_path: str, html_path: str) -> List[str]:
    return [
        "ansifilter",
        "-d",
        "Presentation",
        f"--output={html_path}",
        "--html",
        "-e",
        "utf8",
        "--font=Source Code Pro",
        f"--input={transcript_path}",
    ]


def export_html(
    deck: Deck,
    render: Callable[[Build], str],
    transcript_path: str = EXPORT_TRANSCRIPT,
    html_path: str = EXPORT_HTML,
) -> str:
    transcript = render_transcript(deck, render)
    try:
        with open(transcript_path, "w", encoding="utf-8") as f:
            f.write(transcript)
        subprocess.run(ansifilter_command(transcript_path, html_path), check=True, capture_output=True)
        with open(html_path, "r", encoding="utf-8") as f:
            html = f.read()
        for old, new in HTML_REPLACEMENTS:
            html = html.replace(old, new)
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(html)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ExportError(f"could not export slides to {html_path}: {exc}") from exc
    finally:
        if os.path.exists(transcript_path):
            os.remove(transcript_path)
    logger.info("Exported %d slides to %s", len(deck), html_path)
    return html_path
