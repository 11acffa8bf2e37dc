"""
Tests for canvas backends and decorations.
"""

import pytest

from bonsai.base import base_size, draw_base, draw_message, message_box, message_box_geometry
from bonsai.canvas import RESET, CanvasRegion, GridCanvas, TeeCanvas, Write
from bonsai.config import BaseType
from bonsai.glyphs import PAIR_BARK_BRIGHT, Style


class TestGridCanvas:
    """Tests for the in-memory grid."""

    def test_bounds(self) -> None:
        """bounds() is (width, height)."""
        assert GridCanvas(12, 7).bounds() == (12, 7)

    def test_invalid_size(self) -> None:
        """Empty canvases are rejected."""
        with pytest.raises(ValueError):
            GridCanvas(0, 5)

    def test_write_places_text(self) -> None:
        """Multi-character writes run rightward."""
        canvas = GridCanvas(10, 3)
        canvas.write(2, 1, "/|\\", Style(3))
        assert canvas.row(1) == "  /|\\     "
        assert int(canvas.colors[1, 3]) == 3

    def test_write_clips(self) -> None:
        """Cells outside the grid are dropped silently."""
        canvas = GridCanvas(4, 2)
        canvas.write(2, 0, "abcd")
        canvas.write(-1, 1, "xy")
        canvas.write(0, 5, "zz")
        assert canvas.row(0) == "  ab"
        assert canvas.row(1) == "y   "
        assert len(canvas.writes) == 3

    def test_style_applies_to_one_write(self) -> None:
        """Bold does not leak onto later writes."""
        canvas = GridCanvas(6, 1)
        canvas.write(0, 0, "ab", Style(PAIR_BARK_BRIGHT, bold=True))
        canvas.write(2, 0, "cd")
        assert canvas.bold[0, 0] and canvas.bold[0, 1]
        assert not canvas.bold[0, 2] and not canvas.bold[0, 3]

    def test_to_text_trims(self) -> None:
        """Blank rows around the drawing and trailing spaces are removed."""
        canvas = GridCanvas(6, 5)
        canvas.write(1, 2, "&")
        canvas.write(3, 3, "&&")
        assert canvas.to_text() == " &\n   &&"
        assert canvas.to_text(trim=False).count("\n") == 4

    def test_empty_to_text(self) -> None:
        """An empty canvas renders as an empty string."""
        assert GridCanvas(3, 3).to_text() == ""

    def test_to_ansi_colours(self) -> None:
        """ANSI output wraps coloured runs in escapes."""
        canvas = GridCanvas(4, 1)
        canvas.write(0, 0, "&", Style(2, bold=True))
        text = canvas.to_ansi()
        assert text.startswith("\u001b[1;32m&")
        assert text.endswith(RESET)

    def test_clear(self) -> None:
        """clear() blanks the grid and forgets writes."""
        canvas = GridCanvas(3, 1)
        canvas.write(0, 0, "abc")
        canvas.clear()
        assert canvas.row(0) == "   "
        assert canvas.writes == []


class TestRegion:
    """Tests for offset sub-canvases."""

    def test_region_offsets_writes(self) -> None:
        """Region coordinates are relative to its origin."""
        screen = GridCanvas(10, 6)
        region = screen.region(3, 2, 4, 3)
        assert isinstance(region, CanvasRegion)
        assert region.bounds() == (4, 3)
        region.write(0, 0, "ab")
        assert screen.cell(3, 2) == "a"
        assert screen.cell(4, 2) == "b"

    def test_region_clips_to_itself(self) -> None:
        """Writes never spill outside the region."""
        screen = GridCanvas(10, 6)
        region = screen.region(3, 2, 4, 3)
        region.write(2, 0, "wxyz")
        region.write(-2, 1, "pqr")
        region.write(0, 3, "below")
        assert screen.row(2) == "     wx   "
        assert screen.row(3) == "   r      "
        assert screen.row(5).strip() == ""

    def test_region_flush(self) -> None:
        """Flushes reach the parent."""
        screen = GridCanvas(4, 4)
        screen.region(0, 0, 2, 2).flush()
        assert screen.flushes == 1


class TestTeeCanvas:
    """Tests for mirrored writes."""

    def test_tee_writes_everywhere(self) -> None:
        """Every canvas receives the same writes."""
        a = GridCanvas(5, 5)
        b = GridCanvas(8, 8)
        tee = TeeCanvas(a, b)
        assert tee.bounds() == (5, 5)
        tee.write(1, 1, "&", Style(10))
        tee.flush()
        assert a.writes == b.writes == [Write(1, 1, "&", Style(10))]
        assert a.flushes == b.flushes == 1

    def test_tee_needs_canvas(self) -> None:
        with pytest.raises(ValueError):
            TeeCanvas()


class TestDecorations:
    """Tests for the pot and message box."""

    def test_base_sizes(self) -> None:
        assert base_size(BaseType.BIG) == (31, 4)
        assert base_size(BaseType.SMALL) == (15, 3)
        assert base_size(BaseType.NONE) == (0, 0)

    def test_big_pot(self) -> None:
        """The big pot fills its 31x4 box."""
        canvas = GridCanvas(31, 4)
        draw_base(canvas, BaseType.BIG)
        assert canvas.row(0) == ":___________./~~~\\.___________:"
        assert canvas.row(3).rstrip() == "  (_)                     (_)"

    def test_small_pot(self) -> None:
        """The small pot fills its 15x3 box."""
        canvas = GridCanvas(15, 3)
        draw_base(canvas, BaseType.SMALL)
        assert canvas.row(0) == "(---./~~~\\.---)"
        assert canvas.row(2) == "  (_________)  "

    def test_no_pot(self) -> None:
        canvas = GridCanvas(5, 5)
        draw_base(canvas, BaseType.NONE)
        assert canvas.writes == []

    def test_short_message_single_line(self) -> None:
        """Short messages stay on one line."""
        x, y, lines = message_box_geometry("hi", 100, 40)
        assert (x, y) == (69, 27)
        assert lines == ["hi"]

    def test_long_message_wraps(self) -> None:
        """Long messages wrap to a quarter of the screen width."""
        _, _, lines = message_box_geometry("a bonsai grows slowly and patiently", 40, 20)
        assert all(len(line) <= 10 for line in lines)
        assert " ".join(lines) == "a bonsai grows slowly and patiently"

    def test_message_box_border(self) -> None:
        assert message_box(["hi"]) == ["+----+", "| hi |", "+----+"]

    def test_draw_message(self) -> None:
        """The box lands at the computed position."""
        canvas = GridCanvas(100, 40)
        draw_message(canvas, "hi")
        assert canvas.row(28)[69:75] == "| hi |"

    def test_empty_message_draws_nothing(self) -> None:
        canvas = GridCanvas(10, 10)
        draw_message(canvas, "")
        assert canvas.writes == []
