"""Tests for heightfield storage."""

import numpy as np
import pytest
from py_heightfield.core.heightfield import Heightfield


class TestHeightfieldStorage:
    """Accessor semantics and sample policy."""

    def test_initialization(self):
        field = Heightfield(9)

        assert field.data.shape == (9, 9)
        assert field.dtype == np.uint8
        assert field.edge == 8
        assert np.all(field.data == 0)

    def test_xy_addressing_is_row_major(self):
        field = Heightfield(3)
        field[2, 0] = 7

        assert field.data[0, 2] == 7
        assert field[2, 0] == 7

    def test_reads_return_python_numbers(self):
        """Sums of samples must not overflow the sample type."""
        field = Heightfield(3)
        field[0, 0] = 200
        field[1, 0] = 200

        assert field[0, 0] + field[1, 0] == 400

    def test_integer_writes_truncate(self):
        field = Heightfield(3)
        field[0, 0] = 12.9
        field[1, 0] = 0.5

        assert field[0, 0] == 12
        assert field[1, 0] == 0

    def test_integer_writes_saturate(self):
        field = Heightfield(3)
        field[0, 0] = 300
        field[1, 0] = -5.5

        assert field[0, 0] == 255
        assert field[1, 0] == 0

    def test_signed_dtype_limits(self):
        field = Heightfield(3, dtype="int16")
        field[0, 0] = 40000
        field[1, 0] = -40000

        assert field[0, 0] == 32767
        assert field[1, 0] == -32768

    def test_float_writes_unchanged(self):
        field = Heightfield(3, dtype="float32")
        field[0, 0] = 12.5

        assert field[0, 0] == pytest.approx(12.5)


class TestCorners:
    """Corner seeding before a run."""

    def test_seed_single_value(self):
        field = Heightfield(5)
        field.seed_corners(128)

        assert field.corners() == (128, 128, 128, 128)
        assert field.data[2, 2] == 0

    def test_seed_four_values(self):
        field = Heightfield(5)
        field.seed_corners([1, 2, 3, 4])

        assert field[0, 0] == 1
        assert field[4, 0] == 2
        assert field[0, 4] == 3
        assert field[4, 4] == 4

    @pytest.mark.parametrize("values", [float("nan"), float("inf"), [1, 2, float("-inf"), 4]])
    def test_seed_non_finite(self, values):
        field = Heightfield(5)

        with pytest.raises(ValueError):
            field.seed_corners(values)

        assert field.corners() == (0, 0, 0, 0)

    def test_seed_wrong_count(self):
        field = Heightfield(5)

        with pytest.raises(ValueError):
            field.seed_corners([1, 2, 3])


class TestStats:

    def test_stats(self):
        field = Heightfield(3)
        field.data[:] = [[0, 10, 20], [30, 40, 50], [60, 70, 80]]

        stats = field.stats()

        assert stats.minimum == 0
        assert stats.maximum == 80
        assert stats.mean == pytest.approx(40)
        assert stats.std == pytest.approx(np.std(np.arange(0, 90, 10)))
