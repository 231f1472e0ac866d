"""Application bootstrap helpers."""

import logging
import sys
from dataclasses import dataclass
from datetime import date
from typing import Optional

from termdeck.config import EMOJI_PATH, DeckOptions
from termdeck.data_access.emoji_data import EmojiData
from termdeck.data_access.source_data import SourceError, load_source
from termdeck.deck import Deck, DeckChrome, format_date
from termdeck.parser import OversizeHandler, log_oversize, parse_script
from termdeck.runner import CodeRunner
from termdeck.ui.layout import Geometry, measure

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    options: DeckOptions
    emojis: EmojiData
    runner: Optional[CodeRunner]
    geometry: Geometry
    date: str
    on_oversize: OversizeHandler = log_oversize


def _load_emojis(path: str = EMOJI_PATH) -> EmojiData:
    return EmojiData(path)


def _measure(options: DeckOptions) -> Geometry:
    return measure(options.pad_newline, options.width, options.height)


def remeasure(ctx: AppContext) -> None:
    ctx.geometry = _measure(ctx.options)


def build_chrome(ctx: AppContext) -> DeckChrome:
    return DeckChrome(
        geometry=ctx.geometry,
        title=ctx.options.title,
        branding=ctx.options.branding,
        date=ctx.date,
        show_date=ctx.options.show_date,
        slide_counter=ctx.options.slide_counter,
        emojis=ctx.emojis.table(),
    )


def load_deck(ctx: AppContext) -> Deck:
    """Parse the configured source into a fresh deck.

    Any failure is reported once and leaves an empty deck behind.
    """
    source = ctx.options.source
    try:
        slides = parse_script(
            load_source(source),
            emojis=ctx.emojis.table(),
            show_line_numbers=ctx.options.show_line_numbers,
            screen_height=ctx.geometry.screen_height,
            on_oversize=ctx.on_oversize,
        )
    except (SourceError, ValueError):
        logger.exception("Failed to parse %s", source)
        print(
            f"Sorry, could not parse '{source}'. Quick, say something funny before anyone notices!",
            file=sys.stderr,
        )
        slides = []
    logger.info("Loaded %d slides from %s", len(slides), source)
    return Deck(slides, build_chrome(ctx))


def create_app(
    options: DeckOptions,
    with_repl: bool = True,
    on_oversize: OversizeHandler = log_oversize,
    emoji_path: str = EMOJI_PATH,
) -> AppContext:
    return AppContext(
        options=options,
        emojis=_load_emojis(emoji_path),
        runner=CodeRunner() if with_repl else None,
        geometry=_measure(options),
        date=format_date(date.today()),
        on_oversize=on_oversize,
    )
