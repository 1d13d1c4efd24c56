"""
Alea pseudo-random number generator.

Johannes Baagøe's Alea algorithm. Small, fast and fully deterministic for a
given seed string, which makes generated heightfields reproducible across runs
and platforms.
"""

from typing import Iterable, Union

Seed = Union[str, int, float, Iterable]


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hash, used only while seeding."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * 0x100000000  # 2^32
        return _uint32(self.n) * 2.3283064365386963e-10  # 2^-32


class AleaPRNG:
    """
    Seedable uniform generator.

    Args:
        seed: A string, a number, or an iterable of either. Each element is
            folded into the state in order.
    """

    def __init__(self, seed: Seed):
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for part in parts:
            self.s0 = self._fold(self.s0, mash(part))
            self.s1 = self._fold(self.s1, mash(part))
            self.s2 = self._fold(self.s2, mash(part))

    @staticmethod
    def _fold(state: float, value: float) -> float:
        state -= value
        if state < 0:
            state += 1
        return state

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform(self, magnitude: float) -> float:
        """Sample uniformly from [0, magnitude)."""
        return self.random() * magnitude

    def __repr__(self):
        return f"AleaPRNG(seed={self.seed!r}, calls={self.call_count})"
