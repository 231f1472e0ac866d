"""State container for the presenter loop."""

from dataclasses import dataclass

from termdeck.deck import Deck


@dataclass
class PresenterState:
    deck: Deck
    last_message: str = ""
    running: bool = True
