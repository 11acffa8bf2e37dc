"""
Movement rules for each branch type.

Each step of a branch is a biased random walk. The bias encodes the plant's
shape:
    - Trunks climb, drifting sideways more while young
    - Shoots drift laterally with little vertical change
    - Dying branches scatter foliage widely around the branch
    - Dead branches fill the immediate neighbourhood

Rolls are bucketed over dice(10) or dice(15); bucket bounds are inclusive.
"""

from bonsai.config import BranchType
from bonsai.rng import RandomSource

Delta = tuple[int, int]


def _bucket(roll: int, table: tuple[tuple[int, int], ...]) -> int:
    """Map a roll to a value using (upper_bound, value) pairs in ascending order."""
    for upper, value in table:
        if roll <= upper:
            return value
    raise ValueError(f"roll {roll} outside table")


# (upper bound of bucket, value)
YOUNG_TRUNK_DX = ((0, -2), (3, -1), (5, 0), (8, 1), (9, 2))
SHOOT_DY = ((1, -1), (7, 0), (9, 1))
SHOOT_DX = ((1, -2), (5, -1), (8, 0), (9, 1))  # Left-trending; negated for right
DYING_DY = ((1, -1), (8, 0), (9, 1))
DYING_DX = ((0, -3), (2, -2), (5, -1), (8, 0), (11, 1), (13, 2), (14, 3))
DEAD_DY = ((2, -1), (6, 0), (9, 1))


def trunk_delta(life: int, age: int, multiplier: int, rng: RandomSource) -> Delta:
    # New or nearly dead trunk only moves sideways
    if age <= 2 or life < 4:
        return rng.dice(3) - 1, 0

    # Young trunk grows wide, lifting one row every half-multiplier steps
    if age < multiplier * 3:
        period = int(multiplier * 0.5)
        dy = -1 if period > 0 and age % period == 0 else 0
        dx = _bucket(rng.dice(10), YOUNG_TRUNK_DX)
        return dx, dy

    # Mature trunk climbs most of the time
    dy = -1 if rng.dice(10) > 2 else 0
    dx = rng.dice(3) - 1
    return dx, dy


def shoot_delta(branch_type: BranchType, rng: RandomSource) -> Delta:
    dy = _bucket(rng.dice(10), SHOOT_DY)
    dx = _bucket(rng.dice(10), SHOOT_DX)
    if branch_type is BranchType.SHOOT_RIGHT:
        dx = -dx
    return dx, dy


def dying_delta(rng: RandomSource) -> Delta:
    dy = _bucket(rng.dice(10), DYING_DY)
    dx = _bucket(rng.dice(15), DYING_DX)
    return dx, dy


def dead_delta(rng: RandomSource) -> Delta:
    dy = _bucket(rng.dice(10), DEAD_DY)
    dx = rng.dice(3) - 1
    return dx, dy


def select_delta(
    branch_type: BranchType,
    life: int,
    age: int,
    multiplier: int,
    rng: RandomSource,
) -> Delta:
    """
    Choose the next (dx, dy) step for a branch.

    Args:
        branch_type: Nominal type of the growing branch
        life: Remaining life after this step's decrement
        age: Steps taken since the tree's starting life
        multiplier: Branching multiplier from the growth parameters
        rng: Shared random source

    Returns:
        (dx, dy) with y increasing downward
    """
    if branch_type is BranchType.TRUNK:
        return trunk_delta(life, age, multiplier, rng)
    if branch_type in (BranchType.SHOOT_LEFT, BranchType.SHOOT_RIGHT):
        return shoot_delta(branch_type, rng)
    if branch_type is BranchType.DYING:
        return dying_delta(rng)
    return dead_delta(rng)
