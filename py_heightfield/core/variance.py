"""Variance schedules: the perturbation bound applied at each subdivision level."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GeometricVariance:
    """
    Bound shrinking by a constant ratio per level: ``initial * ratio ** level``.

    The default curve starts at 64 and halves every level (64, 32, 16, ...).
    Lower ratios give smoother terrain, a ratio of 1 keeps the noise constant.
    """

    initial: float = 64.0
    ratio: float = 0.5

    def __post_init__(self):
        if not (math.isfinite(self.initial) and math.isfinite(self.ratio)):
            raise ValueError(f"Variance parameters must be finite, got {self.initial}, {self.ratio}")
        if self.initial < 0:
            raise ValueError(f"Initial variance must be non-negative, got {self.initial}")
        if not 0 < self.ratio <= 1:
            raise ValueError(f"Variance ratio must be in (0, 1], got {self.ratio}")

    def __call__(self, level: int) -> float:
        return self.initial * self.ratio ** level
