"""Terminal slide decks rendered from plain-text scripts."""

__version__ = "0.1.0"
