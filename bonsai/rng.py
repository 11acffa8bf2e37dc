"""
Seeded random source shared by every probabilistic decision in a generation.

All draws go through a single numpy Generator so a fixed seed reproduces the
same tree for the same parameters and canvas size. The stream is never
re-seeded between generations.
"""

import numpy as np

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class RandomSource:
    """Deterministic integer source with a ``dice`` helper."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_i32(self) -> int:
        """Next signed 32-bit value."""
        return int(self._rng.integers(INT32_MIN, INT32_MAX, endpoint=True))

    def rand(self) -> int:
        """Next nonnegative value."""
        return abs(self.next_i32())

    def dice(self, sides: int) -> int:
        """Uniform value in [0, sides)."""
        if sides <= 0:
            raise ValueError(f"dice needs at least one side, got {sides}")
        return self.rand() % sides
