"""
Glyph and colour selection for grown cells.

A branch close to the end of its life renders as foliage regardless of its
nominal type, so every branch tip ends in leaves. That override is computed
once per step by effective_type() and handed to both selectors.
"""

from typing import NamedTuple

from bonsai.config import BranchType, GrowthParameters
from bonsai.rng import RandomSource

FALLBACK_GLYPH = "?"
DYING_LIFE = 4

# Terminal colour pairs (foreground colour index on the default background)
PAIR_DYING = 2
PAIR_BARK = 3
PAIR_GRAY = 8
PAIR_DEAD = 10
PAIR_BARK_BRIGHT = 11


class Style(NamedTuple):
    """Colour pair and weight applied to a single canvas write."""

    color: int
    bold: bool = False


def effective_type(branch_type: BranchType, life: int) -> BranchType:
    """Type used for rendering: DYING once life drops below DYING_LIFE."""
    if life < DYING_LIFE:
        return BranchType.DYING
    return branch_type


def select_style(render_type: BranchType, rng: RandomSource) -> Style:
    """Pick the colour for one write; bold accents appear at random."""
    if render_type.is_woody:
        if rng.dice(2) == 0:
            return Style(PAIR_BARK_BRIGHT, bold=True)
        return Style(PAIR_BARK)
    if render_type is BranchType.DYING:
        return Style(PAIR_DYING, bold=rng.dice(10) == 0)
    return Style(PAIR_DEAD, bold=rng.dice(3) == 0)


def _trunk_glyph(dx: int, dy: int) -> str:
    if dy == 0:
        return "/~"
    if dx < 0:
        return "\\|"
    if dx == 0:
        return "/|\\"
    if dx > 0:
        return "|/"
    return FALLBACK_GLYPH


def _shoot_left_glyph(dx: int, dy: int) -> str:
    if dy > 0:
        return "\\"
    if dy == 0:
        return "\\_"
    if dx < 0:
        return "\\|"
    if dx == 0:
        return "/|"
    if dx > 0:
        return "/"
    return FALLBACK_GLYPH


def _shoot_right_glyph(dx: int, dy: int) -> str:
    if dy > 0:
        return "/"
    if dy == 0:
        return "_/"
    if dx < 0:
        return "\\|"
    if dx == 0:
        return "/|"
    if dx > 0:
        return "/"
    return FALLBACK_GLYPH


def select_glyph(
    render_type: BranchType,
    dx: int,
    dy: int,
    params: GrowthParameters,
    rng: RandomSource,
) -> str:
    """
    Choose the string written for one step.

    Foliage types draw a leaf with dice(leaves_size); leaves_size is an
    exclusive bound and an empty leaf set yields "" (nothing is written).
    """
    if render_type is BranchType.TRUNK:
        return _trunk_glyph(dx, dy)
    if render_type is BranchType.SHOOT_LEFT:
        return _shoot_left_glyph(dx, dy)
    if render_type is BranchType.SHOOT_RIGHT:
        return _shoot_right_glyph(dx, dy)
    if render_type in (BranchType.DYING, BranchType.DEAD):
        if params.leaves_size > 0:
            return params.leaves[rng.dice(params.leaves_size)]
        return ""
    return FALLBACK_GLYPH
