"""
Canvas capability used by the growth engine, plus an in-memory grid backend.

The engine only needs three operations:
    bounds(): (max_x, max_y) size of the drawable area
    write(x, y, text, style): draw a short string starting at (x, y)
    flush(): make buffered writes visible

GridCanvas keeps characters, colours and weights in numpy planes and records
every write, which makes it suitable for tests, plain-text printing and
image export. Cells outside the grid are clipped silently.
"""

from typing import NamedTuple, Protocol

import numpy as np

from bonsai.glyphs import Style

BLANK = " "
PLAIN = Style(color=7)

# ANSI SGR codes
ESCAPE = "\u001b"
RESET = ESCAPE + "[0m"
BOLD = 1


class Canvas(Protocol):
    """Abstract character grid the engine writes into."""

    def bounds(self) -> tuple[int, int]: ...

    def write(self, x: int, y: int, text: str, style: Style | None = None) -> None: ...

    def flush(self) -> None: ...


class Write(NamedTuple):
    """One recorded canvas write."""

    x: int
    y: int
    text: str
    style: Style


def ansi_color(color: int) -> int:
    """Foreground SGR code for a 16-colour palette index."""
    if color < 8:
        return 30 + color
    return 90 + (color - 8)


class GridCanvas:
    """
    In-memory canvas backed by numpy arrays.

    Arrays are indexed [y, x]. Multi-character writes run rightward from
    (x, y); the part falling outside the grid is dropped.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.chars = np.full((height, width), BLANK, dtype="<U1")
        self.colors = np.full((height, width), PLAIN.color, dtype=np.int16)
        self.bold = np.zeros((height, width), dtype=bool)
        self.writes: list[Write] = []
        self.flushes = 0

    def bounds(self) -> tuple[int, int]:
        return self.width, self.height

    def write(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        style = style or PLAIN
        self.writes.append(Write(x, y, text, style))
        if not 0 <= y < self.height:
            return
        for i, char in enumerate(text):
            cx = x + i
            if 0 <= cx < self.width:
                self.chars[y, cx] = char
                self.colors[y, cx] = style.color
                self.bold[y, cx] = style.bold

    def flush(self) -> None:
        self.flushes += 1

    def clear(self) -> None:
        """Blank every cell and forget recorded writes."""
        self.chars[:] = BLANK
        self.colors[:] = PLAIN.color
        self.bold[:] = False
        self.writes.clear()

    def region(self, x: int, y: int, width: int, height: int) -> "CanvasRegion":
        """A sub-canvas whose origin sits at (x, y) of this canvas."""
        return CanvasRegion(self, x, y, width, height)

    def cell(self, x: int, y: int) -> str:
        return str(self.chars[y, x])

    def row(self, y: int) -> str:
        return "".join(self.chars[y])

    def _row_range(self, trim: bool) -> range:
        if not trim:
            return range(self.height)
        filled = np.flatnonzero(np.any(self.chars != BLANK, axis=1))
        if filled.size == 0:
            return range(0)
        return range(int(filled[0]), int(filled[-1]) + 1)

    def to_text(self, trim: bool = True) -> str:
        """Plain text rendering; trailing blanks are stripped from each row."""
        return "\n".join(self.row(y).rstrip() for y in self._row_range(trim))

    def to_ansi(self, trim: bool = True) -> str:
        """Text rendering with ANSI colour escapes."""
        lines = []
        for y in self._row_range(trim):
            width = len(self.row(y).rstrip())
            parts = []
            current = None
            for x in range(width):
                char = str(self.chars[y, x])
                key = (int(self.colors[y, x]), bool(self.bold[y, x]))
                if char != BLANK and key != current:
                    attrs = [str(BOLD)] if key[1] else ["0"]
                    attrs.append(str(ansi_color(key[0])))
                    parts.append(f"{ESCAPE}[{';'.join(attrs)}m")
                    current = key
                parts.append(char)
            lines.append("".join(parts) + (RESET if current else ""))
        return "\n".join(lines)


class TeeCanvas:
    """Forward every operation to several canvases; bounds come from the first."""

    def __init__(self, *canvases: Canvas) -> None:
        if not canvases:
            raise ValueError("TeeCanvas needs at least one canvas")
        self.canvases = canvases

    def bounds(self) -> tuple[int, int]:
        return self.canvases[0].bounds()

    def write(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        for canvas in self.canvases:
            canvas.write(x, y, text, style)

    def flush(self) -> None:
        for canvas in self.canvases:
            canvas.flush()


class CanvasRegion:
    """Offset view onto a GridCanvas with its own bounds."""

    def __init__(self, parent: GridCanvas, x: int, y: int, width: int, height: int) -> None:
        self.parent = parent
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def bounds(self) -> tuple[int, int]:
        return self.width, self.height

    def write(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        if not 0 <= y < self.height:
            return
        # Clip to the region before handing the write to the parent
        start = max(0, -x)
        end = max(0, min(len(text), self.width - x))
        if start >= end:
            return
        self.parent.write(self.x + x + start, self.y + y, text[start:end], style)

    def flush(self) -> None:
        self.parent.flush()
