"""
Heightfield generation module.

Wires the diamond-square engine to concrete collaborators: a NumPy-backed
grid, an Alea PRNG and a geometric variance curve. Size validation happens
here, before the engine is ever invoked.
"""

import numbers
from dataclasses import dataclass
from typing import Optional

import structlog

from ..utils import random as prng_utils
from .alea_prng import AleaPRNG, Seed
from .diamond_square import RandomSource, VarianceSchedule, diamond_square_no_wrap
from .heightfield import CornerValues, Heightfield
from .variance import GeometricVariance

logger = structlog.get_logger()


class InvalidSizeError(ValueError):
    """Grid side is not of the form ``2**n + 1`` with ``n >= 1``."""


def validate_size(size: int) -> int:
    """
    Check a grid side before generation.

    Args:
        size: Grid side length

    Returns:
        The size as a plain int

    Raises:
        InvalidSizeError: If ``size - 1`` is not a power of two or size < 3
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidSizeError(f"Size must be an integer, got {size!r}")
    size = int(size)
    edge = size - 1
    if size < 3 or edge & (edge - 1):
        raise InvalidSizeError(f"Size must be 2^n + 1 and at least 3, got {size}")
    return size


@dataclass
class HeightfieldConfig:
    """Configuration for heightfield generation."""

    size: int = 513
    corner_heights: CornerValues = 128
    initial_variance: float = 64.0
    roughness: float = 0.5
    dtype: str = "uint8"


class HeightfieldGenerator:
    """
    Generates diamond-square heightfields.

    Explicit ``random`` and ``variance`` collaborators take precedence over
    the seeded PRNG and the geometric curve built from the config.
    """

    def __init__(
        self,
        config: HeightfieldConfig,
        seed: Optional[Seed] = None,
        random: Optional[RandomSource] = None,
        variance: Optional[VarianceSchedule] = None,
    ):
        """
        Initialize the heightfield generator.

        Args:
            config: Heightfield configuration
            seed: Seed for the Alea PRNG; time-based when omitted
            random: Optional replacement random source
            variance: Optional replacement variance schedule

        Raises:
            InvalidSizeError: If ``config.size`` is not a valid grid side
        """
        self.config = config
        self.size = validate_size(config.size)

        self._prng: Optional[AleaPRNG] = None
        if random is None:
            self._prng = prng_utils.set_random_seed(seed)
            random = prng_utils.uniform_source(self._prng)
        self.random = random

        if variance is None:
            variance = GeometricVariance(config.initial_variance, config.roughness)
        self.variance = variance

    @property
    def seed(self) -> Optional[Seed]:
        return self._prng.seed if self._prng is not None else None

    def generate(self) -> Heightfield:
        """
        Seed the corners and run the diamond-square engine.

        Returns:
            Fully populated Heightfield
        """
        field = Heightfield(self.size, dtype=self.config.dtype)
        field.seed_corners(self.config.corner_heights)

        logger.info(
            "Generating heightfield",
            size=self.size,
            dtype=field.dtype.name,
            seed=self.seed,
        )

        diamond_square_no_wrap(self.size, self.random, self.variance, field)

        stats = field.stats()
        logger.info(
            "Heightfield generated",
            size=self.size,
            min=stats.minimum,
            max=stats.maximum,
            mean=round(stats.mean, 3),
        )
        return field


def generate_heightfield(
    size: int = 513,
    seed: Optional[Seed] = None,
    corner_heights: CornerValues = 128,
    initial_variance: float = 64.0,
    roughness: float = 0.5,
    dtype: str = "uint8",
) -> Heightfield:
    """Convenience wrapper: build a config and generate in one call."""
    config = HeightfieldConfig(
        size=size,
        corner_heights=corner_heights,
        initial_variance=initial_variance,
        roughness=roughness,
        dtype=dtype,
    )
    return HeightfieldGenerator(config, seed=seed).generate()
