import argparse
import sys
from typing import List, Optional

from termdeck.bootstrap import create_app, load_deck
from termdeck.commands.router import show
from termdeck.config import DEFAULT_SOURCE, DeckOptions
from termdeck.logging_utils import setup_logging
from termdeck.loop import prompt_oversize, run
from termdeck.state import PresenterState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Present a plain-text slide script in the terminal.")
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE, help="slide script or directory of *.slides files")
    parser.add_argument("--title", default=None)
    parser.add_argument("--branding", default=None)
    parser.add_argument("--width", type=int, default=0, help="screen width (0 = ask the terminal)")
    parser.add_argument("--height", type=int, default=0, help="screen height (0 = ask the terminal)")
    parser.add_argument("--no-date", action="store_true", help="hide the date in the footer")
    parser.add_argument("--no-counter", action="store_true", help="hide the slide counter")
    parser.add_argument("--no-line-numbers", action="store_true", help="do not number code lines")
    parser.add_argument("--no-pad-newline", action="store_true", help="do not reserve a prompt row")
    parser.add_argument("--no-repl", action="store_true", help="disable running slide code")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--log-file", default=None)
    return parser


def options_from_args(args: argparse.Namespace) -> DeckOptions:
    return DeckOptions(
        title=args.title,
        branding=args.branding,
        width=args.width,
        height=args.height,
        source=args.source,
        show_date=not args.no_date,
        slide_counter=not args.no_counter,
        show_line_numbers=not args.no_line_numbers,
        pad_newline=not args.no_pad_newline,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_path=args.log_file)
    ctx = create_app(options_from_args(args), with_repl=not args.no_repl, on_oversize=prompt_oversize)
    state = PresenterState(deck=load_deck(ctx))
    if len(state.deck):
        show(state.deck.next_build(), state, ctx)
    run(state, ctx)
    print("Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
