"""Logging setup for the presenter."""
import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> None:
    """Send log records to stderr, and to `log_path` when one is given.

    stderr keeps log lines out of the slide frame drawn on stdout.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_path is not None:
        log_path = Path(log_path)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path, mode="a", encoding="utf-8"))
        except OSError as exc:
            print(f"[WARN] Cannot write log file {log_path} ({exc}); logging to stderr only.", file=sys.stderr)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )
