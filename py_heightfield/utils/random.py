"""
Random number generation utilities.

Heightfield generation draws every perturbation from an Alea PRNG so that a
seed string fully determines the output. Python's random and NumPy's random
are not used for generation.
"""

import time
from typing import Callable, Optional

from ..core.alea_prng import AleaPRNG, Seed

# Global PRNG instance
_prng = None


def time_seed() -> str:
    """Seed derived from the wall clock, for unseeded runs."""
    return str(time.time_ns())


def set_random_seed(seed: Optional[Seed] = None) -> AleaPRNG:
    """
    Reseed the module-level Alea PRNG.

    Args:
        seed: Seed to use. ``None`` picks a time-based seed.

    Returns:
        The new AleaPRNG instance
    """
    global _prng

    _prng = AleaPRNG(time_seed() if seed is None else seed)
    return _prng


def get_prng() -> AleaPRNG:
    """
    Get the current Alea PRNG instance.

    Returns:
        AleaPRNG instance
    """
    global _prng
    if _prng is None:
        _prng = AleaPRNG("default")
    return _prng


def uniform_source(prng: Optional[AleaPRNG] = None) -> Callable[[float], float]:
    """Adapt a PRNG to the ``random(magnitude)`` source used by the engine."""
    if prng is None:
        prng = get_prng()
    return prng.uniform
