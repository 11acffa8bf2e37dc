"""
Curses backend: a canvas over a curses window and the terminal session.

The session stacks three panels (tree, pot, message box) the way the
finished picture is composed, and mirrors every write into a GridCanvas so
the final tree can still be printed or exported after curses shuts down.
"""

import curses
import curses.panel

from bonsai.base import base_size, draw_base, message_box, message_box_geometry
from bonsai.canvas import GridCanvas, TeeCanvas
from bonsai.config import BaseType
from bonsai.glyphs import Style

NO_KEY = -1
QUIT_KEY = ord("q")
# Terminals without 256 colours show the bright colours 8-15 as their base colours
LOW_COLOR_FALLBACK = (7, 1, 2, 3, 4, 5, 6, 7)


def init_colors() -> None:
    """Define pair i as colour i on the terminal's own background."""
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK

    for pair in range(1, 16):
        color = pair
        if pair >= 8 and curses.COLORS < 256:
            color = LOW_COLOR_FALLBACK[pair - 8]
        curses.init_pair(pair, color, background)


class TerminalCanvas:
    """Canvas writing into one curses window; style applies to one write only."""

    def __init__(self, window: "curses.window") -> None:
        self.window = window

    def bounds(self) -> tuple[int, int]:
        rows, cols = self.window.getmaxyx()
        return cols, rows

    def write(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        attr = curses.A_NORMAL
        if style is not None:
            attr = curses.color_pair(style.color)
            if style.bold:
                attr |= curses.A_BOLD
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            # Off-window cells (and the bottom-right corner) are clipped
            pass

    def flush(self) -> None:
        curses.panel.update_panels()
        curses.doupdate()


class TerminalSession:
    """
    Window layout for one bonsai screen.

    The tree window covers everything above the pot; the pot sits centred at
    the bottom, and the message box floats above both.
    """

    def __init__(self, stdscr: "curses.window", base: BaseType = BaseType.BIG, message: str = "") -> None:
        self.stdscr = stdscr
        self.base = base
        self.message = message
        self.panels: list = []

        curses.noecho()
        curses.cbreak()
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # Terminal cannot hide the cursor
        stdscr.nodelay(True)
        init_colors()

        self.rows, self.cols = stdscr.getmaxyx()
        self.screen = GridCanvas(self.cols, self.rows)
        self._build_windows()

    def _build_windows(self) -> None:
        base_width, base_height = base_size(self.base)
        self.tree_height = self.rows - base_height
        self.base_x = self.cols // 2 - base_width // 2

        self.tree_win = curses.newwin(self.tree_height, self.cols, 0, 0)
        self.panels.append(curses.panel.new_panel(self.tree_win))

        self.base_win = None
        if base_width:
            self.base_win = curses.newwin(base_height, base_width, self.tree_height, self.base_x)
            self.panels.append(curses.panel.new_panel(self.base_win))

        self.message_win = None
        self.message_lines: list[str] = []
        if self.message:
            x, y, lines = message_box_geometry(self.message, self.cols, self.rows)
            boxed = message_box(lines)
            height, width = len(boxed), len(boxed[0])
            if x + width <= self.cols and y + height <= self.rows:
                self.message_win = curses.newwin(height, width, y, x)
                self.message_pos = (x, y)
                self.message_lines = boxed
                self.panels.append(curses.panel.new_panel(self.message_win))

    def new_tree(self) -> TeeCanvas:
        """Clear the previous tree, redraw decorations and return the tree canvas."""
        self.tree_win.erase()
        self.screen.clear()

        base_width, base_height = base_size(self.base)
        if self.base_win is not None:
            base_mirror = self.screen.region(self.base_x, self.tree_height, base_width, base_height)
            draw_base(TeeCanvas(TerminalCanvas(self.base_win), base_mirror), self.base)

        if self.message_win is not None:
            x, y = self.message_pos
            message_canvas = TerminalCanvas(self.message_win)
            for row, text in enumerate(self.message_lines):
                message_canvas.write(0, row, text)
                self.screen.write(x, y + row, text)

        tree_mirror = self.screen.region(0, 0, self.cols, self.tree_height)
        canvas = TeeCanvas(TerminalCanvas(self.tree_win), tree_mirror)
        canvas.flush()
        return canvas

    def redraw_message(self) -> None:
        """Put the message back on top of the finished tree in the mirror."""
        if self.message_win is None:
            return
        x, y = self.message_pos
        for row, text in enumerate(self.message_lines):
            self.screen.write(x, y + row, text)

    def check_key_press(self, screensaver: bool = False) -> bool:
        """True when the user asked to quit (any key in screensaver mode)."""
        key = self.stdscr.getch()
        if screensaver:
            return key != NO_KEY
        return key == QUIT_KEY

    def wait_for_key(self, seconds: float, screensaver: bool = False) -> bool:
        """Block up to seconds for a quit key."""
        self.stdscr.timeout(int(seconds * 1000))
        try:
            return self.check_key_press(screensaver)
        finally:
            self.stdscr.nodelay(True)

    def wait_forever(self) -> None:
        """Block until any key is pressed."""
        self.stdscr.nodelay(False)
        self.stdscr.getch()
