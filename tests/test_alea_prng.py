"""Tests for the Alea PRNG and the random utilities."""

import pytest
from py_heightfield.core.alea_prng import AleaPRNG
from py_heightfield.utils.random import get_prng, set_random_seed, uniform_source


class TestAleaPRNG:

    def test_same_seed_same_sequence(self):
        a = AleaPRNG("test_seed")
        b = AleaPRNG("test_seed")

        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds(self):
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")

        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_unit_interval(self):
        prng = AleaPRNG(12345)
        values = [prng.random() for _ in range(1000)]

        assert all(0 <= v < 1 for v in values)
        # Crude uniformity check
        assert 0.4 < sum(values) / len(values) < 0.6

    def test_uniform_range(self):
        prng = AleaPRNG("uniform")
        values = [prng.uniform(64.0) for _ in range(500)]

        assert all(0 <= v < 64.0 for v in values)
        assert prng.uniform(0.0) == 0.0

    def test_call_count(self):
        prng = AleaPRNG("count")
        for _ in range(7):
            prng.random()
        prng.uniform(10)

        assert prng.call_count == 8

    def test_iterable_seed(self):
        a = AleaPRNG(["a", 1])
        b = AleaPRNG(["a", 1])
        c = AleaPRNG(["a", 2])

        first = a.random()
        assert first == b.random()
        assert first != c.random()

    def test_numeric_and_string_seed_match(self):
        """Seeds are hashed through their string form."""
        assert AleaPRNG(42).random() == AleaPRNG("42").random()


class TestRandomUtils:

    def test_set_random_seed(self):
        prng = set_random_seed("global")

        assert get_prng() is prng
        assert prng.random() == AleaPRNG("global").random()

    def test_set_random_seed_time_based(self):
        prng = set_random_seed()

        assert isinstance(prng.seed, str)
        assert prng.seed.isdigit()

    def test_uniform_source(self):
        prng = AleaPRNG("source")
        source = uniform_source(prng)

        assert source(10.0) == pytest.approx(AleaPRNG("source").random() * 10.0)
