"""Colour markup for captured code lines.

Patterns are tried as one alternation; at any position the first pattern in
`PATTERNS` that matches wins, so the order below is the precedence.
"""

import re
from typing import Tuple

_DECIMAL = r"(?:[1-9][0-9_]*|0)"
_HEX = r"(?:0[xX][0-9A-Fa-f_]+)"
_OCT_BIN = r"(?:0[oO][0-7_]+|0[bB][01_]+)"
_FLOAT = rf"(?:{_DECIMAL}?\.[0-9]+|{_DECIMAL}\.)"
_EXPONENT = rf"(?:(?:{_FLOAT}|{_DECIMAL})[eE][+\-]?[0-9]+)"

NUMBER = rf"(?<![\w.])(?:{_EXPONENT}|{_HEX}|{_OCT_BIN}|{_FLOAT}|{_DECIMAL})[jJ]?(?!\w)"
STRING = r"""\b[rRbBuUfF]{1,2}(?=["'])(?:"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')|"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'"""
RESERVED = (
    r"\b(?:None|print|len|range|map|filter|sorted|reversed|enumerate|zip|"
    r"sum|min|max|any|all|iter|next|isinstance|super)\b"
)
SPECIAL = r"\b(?:True|False|self|cls)\b"
TYPE_LIKE = r"\b[A-Z][A-Za-z0-9_]*\b"
KEYWORD = (
    r"\b(?:and|as|assert|async|await|break|class|continue|def|del|elif|else|"
    r"except|finally|for|from|global|if|import|in|is|lambda|match|case|"
    r"nonlocal|not|or|pass|raise|return|try|while|with|yield)\b"
)

PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("r", STRING),
    ("c", RESERVED),
    ("m", SPECIAL),
    ("g", TYPE_LIKE),
    ("r", NUMBER),
    ("b", KEYWORD),
)

_COMBINED = re.compile(
    "|".join(f"(?P<p{index}>{pattern})" for index, (_, pattern) in enumerate(PATTERNS))
)


def escape_markup(text: str) -> str:
    return text.replace("\\", "\\\\")


def highlight(line: str) -> str:
    """Wrap recognised tokens of `line` in `\\<colour> ... \\s` markup.

    Backslashes in the source are doubled so they show up literally once the
    markup is expanded.
    """
    out = []
    pos = 0
    for match in _COMBINED.finditer(line):
        color = PATTERNS[int(match.lastgroup[1:])][0]
        out.append(escape_markup(line[pos:match.start()]))
        out.append(f"\\{color}{escape_markup(match.group(0))}\\s")
        pos = match.end()
    out.append(escape_markup(line[pos:]))
    return "".join(out)
