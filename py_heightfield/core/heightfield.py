"""
Heightfield grid storage.

A square NumPy grid addressed as ``(x, y)`` and stored row-major
(``data[y, x]``). Writes apply the storage policy of the sample dtype:
integer samples truncate toward zero and saturate at the dtype limits,
float samples are stored unchanged.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

CornerValues = Union[float, Sequence[float]]


@dataclass
class HeightfieldStats:
    """Summary statistics of a populated heightfield."""

    minimum: float
    maximum: float
    mean: float
    std: float


class Heightfield:
    """
    Mutable ``size x size`` grid of height samples.

    Implements the grid accessor used by the diamond-square engine:
    ``field[x, y]`` reads a sample as a Python number and
    ``field[x, y] = value`` stores one.
    """

    def __init__(self, size: int, dtype: Union[str, np.dtype] = "uint8"):
        self.size = size
        self.edge = size - 1
        self.dtype = np.dtype(dtype)
        self.data = np.zeros((size, size), dtype=self.dtype)

        if np.issubdtype(self.dtype, np.integer):
            info = np.iinfo(self.dtype)
            self._limits = (int(info.min), int(info.max))
        else:
            self._limits = None

    def _store(self, value: float):
        if self._limits is None:
            return value
        lo, hi = self._limits
        # int() truncates toward zero, like a C float-to-integer conversion
        return min(max(int(value), lo), hi)

    def __getitem__(self, xy: Tuple[int, int]):
        x, y = xy
        return self.data[y, x].item()

    def __setitem__(self, xy: Tuple[int, int], value: float) -> None:
        x, y = xy
        self.data[y, x] = self._store(value)

    def corner_coordinates(self) -> Tuple[Tuple[int, int], ...]:
        """Corners in the order (0,0), (edge,0), (0,edge), (edge,edge)."""
        e = self.edge
        return ((0, 0), (e, 0), (0, e), (e, e))

    def seed_corners(self, values: CornerValues) -> None:
        """
        Seed the four corners before running the engine.

        Args:
            values: One value for every corner, or four values in
                ``corner_coordinates()`` order
        """
        if np.isscalar(values):
            values = [values] * 4
        values = list(values)
        if len(values) != 4:
            raise ValueError(f"Expected 4 corner values, got {len(values)}")
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Corner values must be finite, got {values}")

        for xy, value in zip(self.corner_coordinates(), values):
            self[xy] = value

    def corners(self) -> Tuple:
        return tuple(self[xy] for xy in self.corner_coordinates())

    def stats(self) -> HeightfieldStats:
        data = self.data.astype(np.float64)
        return HeightfieldStats(
            minimum=float(data.min()),
            maximum=float(data.max()),
            mean=float(data.mean()),
            std=float(data.std()),
        )

    def __repr__(self):
        return f"Heightfield(size={self.size}, dtype={self.dtype.name})"
