"""ANSI escape sequences used by slide markup."""


class ANSI:
    ESC = "\x1b"
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    UNDERLINED = "\x1b[4m"
    REVERSED = "\x1b[7m"

    FG_BLACK = "\x1b[30m"
    FG_RED = "\x1b[31m"
    FG_GREEN = "\x1b[32m"
    FG_YELLOW = "\x1b[33m"
    FG_BLUE = "\x1b[34m"
    FG_MAGENTA = "\x1b[35m"
    FG_CYAN = "\x1b[36m"
    FG_WHITE = "\x1b[37m"

    BG_BLACK = "\x1b[40m"
    BG_RED = "\x1b[41m"
    BG_GREEN = "\x1b[42m"
    BG_YELLOW = "\x1b[43m"
    BG_BLUE = "\x1b[44m"
    BG_MAGENTA = "\x1b[45m"
    BG_CYAN = "\x1b[46m"
    BG_WHITE = "\x1b[47m"

    CURSOR_UP_2 = "\x1b[2A"


# Markup letter -> SGR sequence. Lower case is foreground, upper case background.
COLOR_BY_ESCAPE = {
    "b": ANSI.FG_BLUE,
    "c": ANSI.FG_CYAN,
    "g": ANSI.FG_GREEN,
    "k": ANSI.FG_BLACK,
    "m": ANSI.FG_MAGENTA,
    "r": ANSI.FG_RED,
    "w": ANSI.FG_WHITE,
    "y": ANSI.FG_YELLOW,
    "B": ANSI.BG_BLUE,
    "C": ANSI.BG_CYAN,
    "G": ANSI.BG_GREEN,
    "K": ANSI.BG_BLACK,
    "M": ANSI.BG_MAGENTA,
    "R": ANSI.BG_RED,
    "W": ANSI.BG_WHITE,
    "Y": ANSI.BG_YELLOW,
    "!": ANSI.REVERSED,
    "*": ANSI.BOLD,
    "_": ANSI.UNDERLINED,
}
