"""
Configuration and type definitions for bonsai growth.

This module defines the branch types, the per-run growth parameters and the
driver-level run configuration.

Branch types:
    TRUNK: Main woody stem, grows mostly upward
    SHOOT_LEFT: Lateral shoot trending left
    SHOOT_RIGHT: Lateral shoot trending right
    DYING: Foliage scattered around a branch close to the end of its life
    DEAD: Terminal leaf cluster

All configuration objects are immutable; validation happens on construction.
"""

from dataclasses import dataclass
from enum import Enum


class BranchType(Enum):
    """Closed set of branch kinds. Decides movement, spawning and glyphs."""

    TRUNK = "trunk"
    SHOOT_LEFT = "shoot_left"
    SHOOT_RIGHT = "shoot_right"
    DYING = "dying"
    DEAD = "dead"

    @property
    def is_woody(self) -> bool:
        """Trunks and shoots render as bark; dying/dead render as foliage."""
        return self in (BranchType.TRUNK, BranchType.SHOOT_LEFT, BranchType.SHOOT_RIGHT)


class BaseType(Enum):
    """Pot drawn underneath the tree."""

    NONE = 0
    BIG = 1
    SMALL = 2


DEFAULT_LEAVES = ("&",)


@dataclass(frozen=True)
class GrowthParameters:
    """
    Read-only growth configuration for one tree generation.

    life_start controls how tall/long the tree grows, multiplier controls how
    often branches re-branch and how much extra life shoots receive.
    """

    life_start: int = 32  # Initial vitality budget of the trunk
    multiplier: int = 5  # Branching aggressiveness
    leaves: tuple[str, ...] = DEFAULT_LEAVES  # Foliage glyphs
    leaves_size: int | None = None  # Usable leaf count (defaults to len(leaves))
    verbose: bool = False  # Diagnostic overlay on the canvas

    def __post_init__(self) -> None:
        # Accept any iterable of strings but store a tuple
        object.__setattr__(self, "leaves", tuple(self.leaves))
        if self.leaves_size is None:
            object.__setattr__(self, "leaves_size", len(self.leaves))

        if self.life_start < 0:
            raise ValueError("life_start must be nonnegative")
        if self.multiplier <= 0:
            raise ValueError("multiplier must be positive")
        if self.leaves_size < 0:
            raise ValueError("leaves_size must be nonnegative")
        if self.leaves_size > len(self.leaves):
            raise ValueError(
                f"leaves_size ({self.leaves_size}) exceeds the number of "
                f"leaf strings ({len(self.leaves)})"
            )

    @classmethod
    def default(cls) -> "GrowthParameters":
        """A medium-sized tree with standard branching."""
        return cls()

    @classmethod
    def sparse(cls) -> "GrowthParameters":
        """A tall, lightly branched tree."""
        return cls(life_start=40, multiplier=2)

    @classmethod
    def dense(cls) -> "GrowthParameters":
        """A bushy tree that re-branches often."""
        return cls(life_start=32, multiplier=10, leaves=("&", "*", "@"))

    @classmethod
    def from_leaf_string(cls, leaves: str, **kwargs) -> "GrowthParameters":
        """Build parameters from a comma-separated leaf list, e.g. ``"&,*"``."""
        parsed = tuple(leaf for leaf in leaves.split(",") if leaf)
        return cls(leaves=parsed, **kwargs)


@dataclass(frozen=True)
class Animation:
    """
    Step-by-step animation settings.

    The engine flushes the canvas and sleeps time_step seconds after every
    glyph write, except while fewer than skip_until_branch branches have
    been started (used to fast-forward a loaded tree).
    """

    time_step: float = 0.03
    skip_until_branch: int = 0

    def __post_init__(self) -> None:
        if self.time_step < 0:
            raise ValueError("time_step must be nonnegative")
        if self.skip_until_branch < 0:
            raise ValueError("skip_until_branch must be nonnegative")


@dataclass(frozen=True)
class RunConfig:
    """Driver configuration: run modes, decorations and file locations."""

    live: bool = False  # Animate growth step by step
    time_step: float = 0.03  # Seconds between animation steps
    infinite: bool = False  # Keep growing new trees
    time_wait: float = 4.0  # Seconds between trees in infinite mode
    screensaver: bool = False  # Infinite + live, any key quits
    print_tree: bool = False  # Print the finished tree to stdout
    base: BaseType = BaseType.BIG
    message: str = ""
    seed: int | None = None
    save_path: str | None = None
    load_path: str | None = None
    image_path: str | None = None

    def __post_init__(self) -> None:
        if self.time_step < 0:
            raise ValueError("time_step must be nonnegative")
        if self.time_wait < 0:
            raise ValueError("time_wait must be nonnegative")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be nonnegative")
        if self.screensaver:
            # Screensaver implies live infinite growth
            object.__setattr__(self, "live", True)
            object.__setattr__(self, "infinite", True)

    def animation(self, skip_until_branch: int = 0) -> Animation | None:
        """Animation settings for the engine, or None when not live."""
        if not self.live:
            return None
        return Animation(time_step=self.time_step, skip_until_branch=skip_until_branch)
