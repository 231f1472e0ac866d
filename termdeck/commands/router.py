"""Command router for presenter actions."""

import logging
import sys
from typing import Optional

from termdeck.bootstrap import AppContext, build_chrome, load_deck, remeasure
from termdeck.commands.keymap import HELP_MESSAGE
from termdeck.export import ExportError, export_html
from termdeck.models import Build
from termdeck.state import PresenterState
from termdeck.ui.ansi import ANSI
from termdeck.ui.rendering import blank_screen, render_build, render_frame

logger = logging.getLogger(__name__)

NO_SLIDE = "No slide for you."
NO_REPL = "No reference to REPL found. Start the presenter with the interpreter enabled."
NO_CODE = "No code for you."


def _report(state: PresenterState, message: str) -> None:
    state.last_message = message
    print(message, file=sys.stderr)


def render(build: Build, ctx: AppContext) -> str:
    return render_build(build, ctx.geometry, build_chrome(ctx))


def show(build: Optional[Build], state: PresenterState, ctx: AppContext) -> None:
    if build is None:
        _report(state, NO_SLIDE)
    else:
        state.last_message = ""
        render_frame(render(build, ctx))
    # Keeps the frame from jumping when the prompt echoes a newline.
    if ctx.options.pad_newline:
        render_frame("\n\n" + ANSI.CURSOR_UP_2)


def run_code(state: PresenterState, ctx: AppContext) -> bool:
    if ctx.runner is None:
        _report(state, NO_REPL)
        return False
    source = state.deck.current_code()
    if not source:
        _report(state, NO_CODE)
        return False
    return ctx.runner.run(source)


def reload_deck(state: PresenterState, ctx: AppContext) -> None:
    remeasure(ctx)
    slide_number = state.deck.slide_number
    state.deck = load_deck(ctx)
    logger.info("Reloaded %s at slide %d", ctx.options.source, slide_number + 1)
    show(state.deck.jump_to(slide_number), state, ctx)


def print_all(state: PresenterState, ctx: AppContext) -> None:
    slide_number = state.deck.slide_number
    state.deck = load_deck(ctx)
    try:
        path = export_html(state.deck, lambda build: render(build, ctx))
    except ExportError as exc:
        logger.error("%s", exc)
        message = f"Could not save slides as HTML: {exc}"
    else:
        message = f"Saved slides to {path}"
    # show() clears last_message, so report afterwards.
    show(state.deck.jump_to(slide_number), state, ctx)
    _report(state, message)


def handle_command(command_id: str, state: PresenterState, ctx: AppContext, count: Optional[int] = None) -> bool:
    """Run one command; returns False once the presenter should stop."""
    if command_id is None:
        return True
    deck = state.deck
    steps = 1 if count is None else count

    if command_id == "QUIT":
        state.running = False
        return False
    if command_id == "NEXT":
        show(deck.next_build(), state, ctx)
    elif command_id == "PREVIOUS":
        show(deck.previous_build(), state, ctx)
    elif command_id in ("NEXT_SLIDE", "ADVANCE"):
        show(deck.jump(steps), state, ctx)
    elif command_id in ("PREVIOUS_SLIDE", "RETREAT"):
        show(deck.jump(-steps), state, ctx)
    elif command_id == "GO":
        show(deck.jump_to(steps - 1), state, ctx)
    elif command_id == "FIRST":
        show(deck.jump_to(0), state, ctx)
    elif command_id == "LAST_SLIDE":
        show(deck.last_slide(), state, ctx)
    elif command_id == "LAST_BUILD":
        show(deck.last_build(), state, ctx)
    elif command_id == "RUN":
        run_code(state, ctx)
    elif command_id == "BLANK":
        blank_screen(ctx.geometry)
    elif command_id == "PRINT_ALL":
        print_all(state, ctx)
    elif command_id == "RELOAD":
        reload_deck(state, ctx)
    elif command_id == "HELP":
        render_frame(HELP_MESSAGE)
    else:
        logger.debug("Ignoring unknown command %s", command_id)
    return True
