"""Map typed presenter input to command ids."""

import re
from dataclasses import dataclass
from typing import Optional

COMMAND_ALIASES = {
    "next": "NEXT",
    "n": "NEXT",
    ">": "NEXT",
    "previous": "PREVIOUS",
    "p": "PREVIOUS",
    "<": "PREVIOUS",
    "Next": "NEXT_SLIDE",
    "N": "NEXT_SLIDE",
    ">>": "NEXT_SLIDE",
    "Previous": "PREVIOUS_SLIDE",
    "P": "PREVIOUS_SLIDE",
    "<<": "PREVIOUS_SLIDE",
    "go": "GO",
    "g": "GO",
    "first": "FIRST",
    "f": "FIRST",
    "|<": "FIRST",
    "last": "LAST_SLIDE",
    "l": "LAST_SLIDE",
    ">|": "LAST_SLIDE",
    "Last": "LAST_BUILD",
    "L": "LAST_BUILD",
    ">>|": "LAST_BUILD",
    "run": "RUN",
    "r": "RUN",
    "!!": "RUN",
    "blank": "BLANK",
    "b": "BLANK",
    "printAll": "PRINT_ALL",
    "pa": "PRINT_ALL",
    "reload": "RELOAD",
    "y": "RELOAD",
    "help": "HELP",
    "h": "HELP",
    "?": "HELP",
    "quit": "QUIT",
    "q": "QUIT",
}

# With a count, these move by whole slides instead of builds.
COUNTED_COMMANDS = {
    "NEXT": "ADVANCE",
    "PREVIOUS": "RETREAT",
    "GO": "GO",
}

HELP_MESSAGE = """Usage:
  next          n      >     go to next build/slide
  previous      p      <     go back to previous build/slide
  Next          N      >>    go to next slide
  Previous      P      <<    go back to previous slide
  i next        i n          advance i slides
  i previous    i p          go back i slides
  i go          i g          go to slide i
  first         f      |<    go to first slide
  last          l      >|    go to last slide
  Last          L      >>|   go to last build of last slide
  run           r      !!    execute code that appears on slide
  blank         b            blank screen
  printAll      pa           save all slides as HTML (requires 'ansifilter')
  reload        y            reload the slides and re-measure the screen
  help          h      ?     print this help message
  quit          q            leave the presentation
"""

_COUNTED_RE = re.compile(r"^(\d+)\s*(\S+)$")


@dataclass(frozen=True)
class ParsedInput:
    command_id: str
    count: Optional[int] = None


def parse_input(text: str) -> Optional[ParsedInput]:
    text = text.strip()
    if not text:
        return None
    command_id = COMMAND_ALIASES.get(text)
    if command_id is not None:
        if command_id == "GO":
            return None
        return ParsedInput(command_id)
    match = _COUNTED_RE.match(text)
    if not match:
        return None
    command_id = COUNTED_COMMANDS.get(COMMAND_ALIASES.get(match.group(2), ""))
    if command_id is None:
        return None
    return ParsedInput(command_id, int(match.group(1)))
