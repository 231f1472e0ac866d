"""Frame glyphs and screen defaults."""

DEFAULT_SCREEN_WIDTH = 80
DEFAULT_SCREEN_HEIGHT = 25

# Rows taken by the header, footer and the prompt line.
RESERVED_ROWS = 3
# Rows a slide may not reach before it is reported as oversized.
OVERSIZE_ROWS = 7

TOP = "─"
BOTTOM = "─"
SINISTRAL = "│ "
DEXTRAL = " │"
LEFT_CROSS = "├"
RIGHT_CROSS = "┤"
TOP_LEFT = "╭"
TOP_RIGHT = "╮"
BOTTOM_LEFT = "╰"
BOTTOM_RIGHT = "╯"
WHITESPACE = " "
NEWLINE = "\n"

RULER_PATTERN = "─"
LN_TOKEN = "LN │"
LN_PLACEHOLDER = "LN"

NO_TITLE = "[[no title defined]]"
NO_BRANDING = "[[no branding defined]]"

PAGE_BREAK = (
    '<p style="page-break-after: always;">&nbsp;</p>'
    '<p style="page-break-before: always;">&nbsp;</p>'
)
