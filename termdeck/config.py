"""Filesystem and runtime configuration."""

import os
from dataclasses import dataclass
from typing import Optional

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")
EMOJI_PATH = os.environ.get("TERMDECK_EMOJI", os.path.join(DATA_DIR, "emoji.json"))
DEFAULT_SOURCE = os.environ.get("TERMDECK_SOURCE", "slides.txt")
SOURCE_SUFFIX = ".slides"
EXPORT_TRANSCRIPT = "presentation.txt"
EXPORT_HTML = "presentation.html"


@dataclass
class DeckOptions:
    title: Optional[str] = None
    branding: Optional[str] = None
    width: int = 0
    height: int = 0
    source: str = DEFAULT_SOURCE
    show_date: bool = True
    slide_counter: bool = True
    show_line_numbers: bool = True
    pad_newline: bool = True
