"""Read slide script lines from a file or a directory of scripts."""

import os
from typing import List

from termdeck.config import SOURCE_SUFFIX


class SourceError(Exception):
    """The slide source could not be read."""


def _read_lines(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def load_source(path: str, suffix: str = SOURCE_SUFFIX) -> List[str]:
    """Return the raw script lines behind `path`.

    A directory contributes every file ending in `suffix`, concatenated in
    sorted filename order.
    """
    try:
        if os.path.isdir(path):
            lines: List[str] = []
            for name in sorted(os.listdir(path)):
                if not name.endswith(suffix):
                    continue
                lines.extend(_read_lines(os.path.join(path, name)))
            return lines
        return _read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"could not read {path}: {exc}") from exc
