"""Load the emoji name table from JSON or a plain `glyph name` listing."""

import json
import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)


class EmojiTable:
    """Immutable name -> glyph lookup. An unavailable table is simply empty."""

    def __init__(self, glyphs: Optional[Mapping[str, str]] = None):
        self._glyphs = MappingProxyType(dict(glyphs or {}))

    def __contains__(self, name: str) -> bool:
        return name in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def get(self, name: str) -> Optional[str]:
        return self._glyphs.get(name)


EMPTY_EMOJI = EmojiTable()


def _parse_listing(text: str) -> Dict[str, str]:
    glyphs: Dict[str, str] = {}
    for row in text.splitlines():
        parts = row.split(" ")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            continue
        glyphs[parts[1]] = parts[0]
    return glyphs


class EmojiData:
    def __init__(self, path: str):
        self._path = path
        self._table = EMPTY_EMOJI
        self.load()

    def load(self) -> None:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                raw = f.read()
            if self._path.endswith(".json"):
                data = json.loads(raw)
                if not isinstance(data, dict):
                    data = {}
                glyphs = {str(k): str(v) for k, v in data.items() if isinstance(v, str)}
            else:
                glyphs = _parse_listing(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("Emoji table %s unavailable: %s", self._path, exc)
            glyphs = {}
        self._table = EmojiTable(glyphs)

    def table(self) -> EmojiTable:
        return self._table
