"""
Recursive growth engine.

A branch walks the canvas one cell per step until its life runs out. Along
the way it may spawn children at its current position:
    - a DEAD leaf cluster once life < 3
    - a DYING foliage branch when a trunk or shoot nears the end of its life
    - a new TRUNK (rarely) or an alternating left/right shoot at branching
      opportunities, throttled by a per-branch shoot cooldown

Every child starts with a finite life, and every loop iteration consumes
one unit of it, so recursion depth is bounded by the starting life.
"""

import time
from dataclasses import dataclass

from bonsai.canvas import Canvas
from bonsai.config import Animation, BranchType, GrowthParameters
from bonsai.deltas import select_delta
from bonsai.glyphs import effective_type, select_glyph, select_style
from bonsai.rng import RandomSource

DEAD_LIFE = 3
NEW_TRUNK_MIN_LIFE = 7
DEBUG_COLUMN = 5


@dataclass
class GrowthCounters:
    """
    Running totals for one generation.

    branches counts every branch invocation (including leaf clusters),
    shoots counts shoot spawns, and shoot_sequence's parity picks the side
    of the next shoot.
    """

    branches: int = 0
    shoots: int = 0
    shoot_sequence: int = 0

    def reset(self, rng: RandomSource) -> None:
        self.branches = 0
        self.shoots = 0
        self.shoot_sequence = rng.rand()


def next_shoot_type(counters: GrowthCounters) -> BranchType:
    """Advance the shoot counters and return the side for the new shoot."""
    counters.shoots += 1
    counters.shoot_sequence += 1
    if counters.shoot_sequence % 2 == 0:
        return BranchType.SHOOT_LEFT
    return BranchType.SHOOT_RIGHT


def _debug(canvas: Canvas, row: int, text: str) -> None:
    canvas.write(DEBUG_COLUMN, row, text)


def grow(
    x: int,
    y: int,
    branch_type: BranchType,
    life: int,
    counters: GrowthCounters,
    params: GrowthParameters,
    canvas: Canvas,
    rng: RandomSource,
    animation: Animation | None = None,
) -> None:
    """
    Grow one branch from (x, y), recursing into any children it spawns.

    Args:
        x, y: Starting cell (y increases downward)
        branch_type: Nominal type of this branch
        life: Steps this branch may take
        counters: Shared counters for the current generation
        params: Growth parameters (multiplier must be positive)
        canvas: Target canvas
        rng: Shared random source, consumed in strict call order
        animation: Flush and pause after every write when set
    """
    counters.branches += 1
    multiplier = params.multiplier
    shoot_cooldown = multiplier

    while life > 0:
        life -= 1
        age = params.life_start - life

        dx, dy = select_delta(branch_type, life, age, multiplier, rng)

        # Keep branches off the ground
        _, max_y = canvas.bounds()
        if dy > 0 and y > max_y - 2:
            dy -= 1

        if life < DEAD_LIFE:
            grow(x, y, BranchType.DEAD, life, counters, params, canvas, rng, animation)
        elif branch_type.is_woody and life < multiplier + 2:
            grow(x, y, BranchType.DYING, life, counters, params, canvas, rng, animation)
        elif (branch_type is BranchType.TRUNK and rng.dice(3) == 0) or life % multiplier == 0:
            if rng.dice(8) == 0 and life > NEW_TRUNK_MIN_LIFE:
                shoot_cooldown = multiplier * 2
                trunk_life = life + (rng.dice(5) - 2)
                grow(x, y, BranchType.TRUNK, trunk_life, counters, params, canvas, rng, animation)
            elif shoot_cooldown <= 0:
                shoot_cooldown = multiplier * 2
                shoot_type = next_shoot_type(counters)
                if params.verbose:
                    _debug(canvas, 4, f"shoots: {counters.shoots:02d}")
                grow(x, y, shoot_type, life + multiplier, counters, params, canvas, rng, animation)
        shoot_cooldown -= 1

        if params.verbose:
            _debug(canvas, 5, f"dx: {dx:02d}")
            _debug(canvas, 6, f"dy: {dy:02d}")
            _debug(canvas, 7, f"type: {branch_type.value:<11}")
            _debug(canvas, 8, f"shootCooldown: {shoot_cooldown:3d}")

        x += dx
        y += dy

        render_type = effective_type(branch_type, life)
        style = select_style(render_type, rng)
        glyph = select_glyph(render_type, dx, dy, params, rng)
        if glyph:
            canvas.write(x, y, glyph, style)

        if animation is not None and counters.branches >= animation.skip_until_branch:
            canvas.flush()
            if animation.time_step > 0:
                time.sleep(animation.time_step)


def grow_tree(
    canvas: Canvas,
    params: GrowthParameters,
    rng: RandomSource,
    counters: GrowthCounters | None = None,
    animation: Animation | None = None,
) -> GrowthCounters:
    """
    Grow a complete tree from the bottom-centre of the canvas.

    Counters are reset first; pass an existing instance to observe them
    while an animated tree is growing.

    Returns:
        The counters after the generation finished
    """
    if counters is None:
        counters = GrowthCounters()
    counters.reset(rng)

    max_x, max_y = canvas.bounds()
    if params.verbose:
        _debug(canvas, 2, f"maxX: {max_x:03d}, maxY: {max_y:03d}")

    grow(max_x // 2, max_y - 1, BranchType.TRUNK, params.life_start, counters, params, canvas, rng, animation)
    canvas.flush()
    return counters
