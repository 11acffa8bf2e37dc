"""
Static decorations: the pot under the tree and an optional message box.
"""

import textwrap

from bonsai.canvas import Canvas
from bonsai.config import BaseType
from bonsai.glyphs import PAIR_BARK_BRIGHT, PAIR_DYING, PAIR_GRAY, Style

# (width, height) of each pot
BASE_SIZES = {
    BaseType.NONE: (0, 0),
    BaseType.BIG: (31, 4),
    BaseType.SMALL: (15, 3),
}

# Top rim of each pot as (text, style) segments, then the plain lower rows
BIG_RIM = (
    (":", Style(PAIR_GRAY, bold=True)),
    ("___________", Style(PAIR_DYING, bold=True)),
    ("./~~~\\.", Style(PAIR_BARK_BRIGHT, bold=True)),
    ("___________", Style(PAIR_DYING, bold=True)),
    (":", Style(PAIR_GRAY, bold=True)),
)
BIG_BODY = (
    " \\                           / ",
    "  \\_________________________/ ",
    "  (_)                     (_)",
)

SMALL_RIM = (
    ("(", Style(PAIR_GRAY)),
    ("---", Style(PAIR_DYING)),
    ("./~~~\\.", Style(PAIR_BARK_BRIGHT)),
    ("---", Style(PAIR_DYING)),
    (")", Style(PAIR_GRAY)),
)
SMALL_BODY = (
    " (           ) ",
    "  (_________)  ",
)

# The box starts 70% of the way across and down the screen and may use a
# quarter of its width
MESSAGE_POSITION = (7, 10)
MESSAGE_MAX_WIDTH = (1, 4)


def base_size(base: BaseType) -> tuple[int, int]:
    return BASE_SIZES[base]


def draw_base(canvas: Canvas, base: BaseType) -> None:
    """Draw a pot into a canvas sized by base_size()."""
    if base is BaseType.NONE:
        return
    rim, body = (BIG_RIM, BIG_BODY) if base is BaseType.BIG else (SMALL_RIM, SMALL_BODY)
    body_style = rim[0][1]

    x = 0
    for text, style in rim:
        canvas.write(x, 0, text, style)
        x += len(text)
    for row, text in enumerate(body, start=1):
        canvas.write(0, row, text, body_style)


def message_box_geometry(message: str, cols: int, rows: int) -> tuple[int, int, list[str]]:
    """
    Place the message box for a screen of cols x rows.

    Returns:
        (x, y, lines) where (x, y) is the top-left corner of the border and
        lines are the wrapped message lines
    """
    num, den = MESSAGE_MAX_WIDTH
    max_width = max(1, cols * num // den)
    if len(message) + 3 <= max_width:
        lines = [message]
    else:
        lines = textwrap.wrap(message, width=max_width) or [""]
    num, den = MESSAGE_POSITION
    x = cols * num // den - 1
    y = rows * num // den - 1
    return x, y, lines


def message_box(lines: list[str]) -> list[str]:
    """Surround wrapped message lines with a border."""
    inner = max(len(line) for line in lines) + 2
    border = "+" + "-" * inner + "+"
    return [border] + ["| " + line.ljust(inner - 2) + " |" for line in lines] + [border]


def draw_message(canvas: Canvas, message: str) -> None:
    """Draw a bordered message box on the lower right of the canvas."""
    if not message:
        return
    cols, rows = canvas.bounds()
    x, y, lines = message_box_geometry(message, cols, rows)
    for offset, text in enumerate(message_box(lines)):
        canvas.write(x, y + offset, text)
