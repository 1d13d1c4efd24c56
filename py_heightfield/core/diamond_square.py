"""
Diamond-square subdivision engine.

Turns four seeded corner samples of a ``(2**n + 1)`` square grid into a fully
populated heightfield by alternating square and diamond passes, halving the
step size and moving one level down the variance schedule after each round.

This is the no-wrap variant: midpoints on the outer boundary average only the
two neighbours lying along that boundary, never a value from the opposite edge.

The engine owns nothing. Randomness, the variance curve and grid storage are
supplied by the caller:

- ``random(magnitude)`` returns a sample in ``[0, magnitude)``
- ``variance(level)`` returns the perturbation bound for a level (0 = coarsest)
- ``at[x, y]`` reads a sample and ``at[x, y] = value`` writes one

Example:
    >>> field = Heightfield(513)
    >>> field.seed_corners(128)
    >>> diamond_square_no_wrap(513, prng.uniform, GeometricVariance(64.0), field)
"""

from typing import List, Protocol, Tuple


class RandomSource(Protocol):
    """Returns a uniform sample in ``[0, magnitude)``."""

    def __call__(self, magnitude: float) -> float: ...


class VarianceSchedule(Protocol):
    """Returns the non-negative perturbation bound for a subdivision level."""

    def __call__(self, level: int) -> float: ...


class GridAccessor(Protocol):
    """Read/write access to the sample stored at ``(x, y)``."""

    def __getitem__(self, xy: Tuple[int, int]) -> float: ...

    def __setitem__(self, xy: Tuple[int, int], value: float) -> None: ...


def _displace(mean: float, magnitude: float, random: RandomSource) -> float:
    """Add a zero-centred offset drawn from ``[-magnitude / 2, magnitude / 2)``."""
    return mean + random(magnitude) - magnitude / 2


def _square_pass(size: int, step: int, magnitude: float, random, at) -> None:
    """Fill the centre of every ``2*step`` square from its four corners."""
    for y in range(step, size, 2 * step):
        for x in range(step, size, 2 * step):
            mean = (
                at[x - step, y - step]
                + at[x + step, y - step]
                + at[x - step, y + step]
                + at[x + step, y + step]
            ) / 4
            at[x, y] = _displace(mean, magnitude, random)


def _diamond_neighbours(x: int, y: int, step: int, edge: int) -> List[Tuple[int, int]]:
    """
    Neighbours averaged for the edge midpoint ``(x, y)``.

    A point on the outer boundary uses only the two neighbours along that
    boundary. An interior point uses all four of up, down, left and right.
    """
    on_top_or_bottom = y == 0 or y == edge
    on_left_or_right = x == 0 or x == edge

    neighbours = []
    if not on_top_or_bottom:
        neighbours.append((x, y - step))
        neighbours.append((x, y + step))
    if not on_left_or_right:
        neighbours.append((x - step, y))
        neighbours.append((x + step, y))
    return neighbours


def _diamond_pass(size: int, step: int, magnitude: float, random, at) -> None:
    """Fill every edge midpoint between points ``2*step`` apart."""
    edge = size - 1
    for y in range(0, size, step):
        # Rows on the coarse lattice hold midpoints at odd multiples of step,
        # rows between them hold midpoints at even multiples.
        start = step if (y // step) % 2 == 0 else 0
        for x in range(start, size, 2 * step):
            neighbours = _diamond_neighbours(x, y, step, edge)
            mean = sum(at[nx, ny] for nx, ny in neighbours) / len(neighbours)
            at[x, y] = _displace(mean, magnitude, random)


def diamond_square_no_wrap(
    size: int,
    random: RandomSource,
    variance: VarianceSchedule,
    at: GridAccessor,
) -> None:
    """
    Populate a ``size x size`` grid in place with diamond-square noise.

    Args:
        size: Grid side; ``size - 1`` must be a power of two. Not validated here.
        random: Uniform source, ``random(m)`` in ``[0, m)``
        variance: Perturbation bound per subdivision level
        at: Grid accessor; the four corners must already be seeded

    Corner samples are never written and no coordinate outside
    ``[0, size)`` is ever passed to ``at``.
    """
    step = (size - 1) // 2
    level = 0

    while step >= 1:
        magnitude = variance(level)
        _square_pass(size, step, magnitude, random, at)
        _diamond_pass(size, step, magnitude, random, at)
        step //= 2
        level += 1
