"""
Bonsai - Procedural ASCII Tree Growth

Grows a bonsai tree one cell at a time with biased random walks and paints it
onto a character grid.

Modules:
    config: Branch types, growth parameters and run configuration
    rng: Seeded random source
    deltas: Per-branch-type movement tables
    glyphs: Glyph and colour selection
    growth: Recursive growth engine and counters
    canvas: Canvas protocol and in-memory grid backend
    base: Pot art and message box
    persistence: Save/load of a tree's progress
    render: Image export with matplotlib
    terminal: Curses backend (imported on demand)
"""

from bonsai.base import base_size, draw_base, draw_message
from bonsai.canvas import Canvas, CanvasRegion, GridCanvas, TeeCanvas
from bonsai.config import (
    Animation,
    BaseType,
    BranchType,
    GrowthParameters,
    RunConfig,
)
from bonsai.deltas import select_delta
from bonsai.glyphs import Style, effective_type, select_glyph, select_style
from bonsai.growth import GrowthCounters, grow, grow_tree
from bonsai.persistence import SaveState, load_state, save_state
from bonsai.rng import RandomSource

__all__ = [
    # Config
    "Animation",
    "BaseType",
    "BranchType",
    "GrowthParameters",
    "RunConfig",
    # Random source
    "RandomSource",
    # Selectors
    "select_delta",
    "Style",
    "effective_type",
    "select_glyph",
    "select_style",
    # Growth
    "GrowthCounters",
    "grow",
    "grow_tree",
    # Canvas
    "Canvas",
    "CanvasRegion",
    "GridCanvas",
    "TeeCanvas",
    # Decorations
    "base_size",
    "draw_base",
    "draw_message",
    # Persistence
    "SaveState",
    "load_state",
    "save_state",
]
