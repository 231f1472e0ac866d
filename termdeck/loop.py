"""Main loop helpers for the presenter runtime."""

from typing import Callable, Optional

from termdeck.bootstrap import AppContext
from termdeck.commands.keymap import parse_input
from termdeck.commands.router import handle_command
from termdeck.state import PresenterState

PROMPT = "termdeck> "


def prompt_oversize(number: int, height: int, available: int) -> None:
    print(f"Slide {number} (height: {height}) might be too large to fit the current screen (height: {available})!")
    try:
        input('Press "ENTER" to continue ...')
    except EOFError:
        return


def read_input(read_line: Callable[[str], str] = input) -> Optional[str]:
    try:
        return read_line(PROMPT)
    except EOFError:
        return None


def step(text: str, state: PresenterState, ctx: AppContext) -> bool:
    parsed = parse_input(text)
    if parsed is None:
        if text.strip():
            print(f"Unknown command: {text.strip()} (type 'help')")
        return True
    return handle_command(parsed.command_id, state, ctx, parsed.count)


def run(state: PresenterState, ctx: AppContext, read_line: Callable[[str], str] = input) -> None:
    while state.running:
        text = read_input(read_line)
        if text is None:
            state.running = False
            break
        if not step(text, state, ctx):
            break
