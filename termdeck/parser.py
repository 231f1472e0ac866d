"""Group raw script lines into slides with builds and runnable code."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from termdeck.data_access.emoji_data import EMPTY_EMOJI, EmojiTable
from termdeck.highlight import highlight
from termdeck.markup import parse_line
from termdeck.models import BLANK_LINE, Line, Slide
from termdeck.ui.constants import LN_PLACEHOLDER, LN_TOKEN, NEWLINE, OVERSIZE_ROWS

logger = logging.getLogger(__name__)

SLIDE_SEPARATOR = "---"
BUILD_SEPARATOR = "--"
CODE_DELIMITER = "```"
NOEXEC_CODE_DELIMITER = "```noexec"
SILENT_CODE_DELIMITER = "```silent"

OversizeHandler = Callable[[int, int, int], None]


class CaptureMode(Enum):
    TEXT = "text"
    CODE = "code"
    NOEXEC = "noexec"
    SILENT = "silent"


MODE_BY_DELIMITER = {
    CODE_DELIMITER: CaptureMode.CODE,
    NOEXEC_CODE_DELIMITER: CaptureMode.NOEXEC,
    SILENT_CODE_DELIMITER: CaptureMode.SILENT,
}


def log_oversize(number: int, height: int, available: int) -> None:
    logger.warning(
        "Slide %d (height: %d) might be too large to fit the current screen (height: %d)!",
        number,
        height,
        available,
    )


def number_code_lines(content: List[Line]) -> List[Line]:
    """Replace the `LN` placeholder of code lines with running numbers."""
    numbered = []
    index = 1
    for line in content:
        if LN_TOKEN not in line.content:
            numbered.append(line)
            continue
        label = f"{index} " if index < 10 else str(index)
        numbered.append(
            Line(line.content.replace(LN_PLACEHOLDER, label, 1), line.length, line.style)
        )
        index += 1
    return numbered


@dataclass
class SlideAccumulator:
    emojis: EmojiTable = EMPTY_EMOJI
    show_line_numbers: bool = True
    screen_height: int = 0
    on_oversize: OversizeHandler = log_oversize
    slides: List[Slide] = field(default_factory=list)
    content: List[Line] = field(default_factory=list)
    builds: List[int] = field(default_factory=list)
    code: List[str] = field(default_factory=list)
    pending_code: List[str] = field(default_factory=list)
    mode: CaptureMode = CaptureMode.TEXT

    def switch_mode(self, delimiter_mode: CaptureMode) -> None:
        # Any delimiter closes an open capture.
        self.mode = delimiter_mode if self.mode is CaptureMode.TEXT else CaptureMode.TEXT

    def _code_line(self, raw: str) -> Tuple[Optional[Line], Optional[str]]:
        formatted = highlight(raw)
        if self.show_line_numbers:
            display = parse_line(f"< {LN_TOKEN} {formatted}", self.emojis)
        else:
            display = parse_line(f"< {formatted}", self.emojis)
        shown = None if self.mode is CaptureMode.SILENT else display
        kept = None if self.mode is CaptureMode.NOEXEC else raw
        return shown, kept

    def append(self, raw: str) -> None:
        if self.mode is CaptureMode.TEXT:
            self.content.append(parse_line(raw, self.emojis))
            return
        shown, kept = self._code_line(raw)
        if shown is not None:
            self.content.append(shown)
        if kept is not None:
            self.pending_code.append(kept)

    def push_build(self) -> None:
        self.builds.append(len(self.content))
        self.code.append(NEWLINE.join(self.pending_code))
        self.pending_code = []

    def push_slide(self) -> None:
        if not self.content:
            self.content.append(BLANK_LINE)
        self.push_build()
        content = number_code_lines(self.content) if self.show_line_numbers else self.content
        slide = Slide(content=tuple(content), builds=tuple(self.builds), code=tuple(self.code))
        available = self.screen_height - OVERSIZE_ROWS
        if self.screen_height and len(slide.content) >= available:
            self.on_oversize(len(self.slides) + 1, len(slide.content), available)
        self.slides.append(slide)
        self.content = []
        self.builds = []
        self.code = []
        self.pending_code = []
        self.mode = CaptureMode.TEXT

    def feed(self, raw: str) -> None:
        marker = raw.rstrip()
        if marker == SLIDE_SEPARATOR:
            self.push_slide()
        elif marker == BUILD_SEPARATOR:
            self.push_build()
        elif marker in MODE_BY_DELIMITER:
            self.switch_mode(MODE_BY_DELIMITER[marker])
        else:
            self.append(raw)


def parse_script(
    lines: Iterable[str],
    emojis: EmojiTable = EMPTY_EMOJI,
    show_line_numbers: bool = True,
    screen_height: int = 0,
    on_oversize: OversizeHandler = log_oversize,
) -> List[Slide]:
    """Parse a whole script in one pass.

    A `screen_height` of zero disables the oversize check.
    """
    acc = SlideAccumulator(
        emojis=emojis,
        show_line_numbers=show_line_numbers,
        screen_height=screen_height,
        on_oversize=on_oversize,
    )
    for raw in lines:
        acc.feed(raw)
    acc.push_slide()
    return acc.slides
