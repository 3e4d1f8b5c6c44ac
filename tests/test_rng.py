"""Tests for the seeded LCG and the Box-Muller sampler."""

import math

import numpy as np
import pytest

from thresholdlab.data.rng import LCG_MODULUS, GaussianSampler, SeededRandom


# ------------------------------------------------------------------
# SeededRandom
# ------------------------------------------------------------------


def test_first_draws_follow_recurrence() -> None:
    rng = SeededRandom(0)
    assert rng.next() == 1013904223 / 2**32
    expected_state = (1013904223 * 1664525 + 1013904223) % 2**32
    assert rng.next() == expected_state / 2**32
    assert rng.state == expected_state


def test_same_seed_same_stream() -> None:
    a = SeededRandom(12345)
    b = SeededRandom(12345)
    assert [a() for _ in range(500)] == [b() for _ in range(500)]


def test_different_seeds_differ() -> None:
    a = SeededRandom(12345)
    b = SeededRandom(67890)
    assert [a() for _ in range(10)] != [b() for _ in range(10)]


def test_outputs_in_unit_interval() -> None:
    rng = SeededRandom(42)
    draws = [rng() for _ in range(5000)]
    assert min(draws) >= 0.0
    assert max(draws) < 1.0


def test_negative_seed_is_normalized() -> None:
    rng = SeededRandom(-1)
    assert rng.state == LCG_MODULUS - 1
    assert 0.0 <= rng.next() < 1.0


# ------------------------------------------------------------------
# GaussianSampler
# ------------------------------------------------------------------


class _Scripted:
    """Uniform source replaying fixed values."""

    def __init__(self, values):
        self._it = iter(values)

    def __call__(self) -> float:
        return next(self._it)


def test_zero_draws_are_redrawn() -> None:
    sampler = GaussianSampler(_Scripted([0.0, 0.5, 0.0, 0.5]))
    z = sampler.next(0.0, 1.0)
    # u = 0.5, v = 0.5 -> sqrt(-2 ln 0.5) * cos(pi)
    assert z == pytest.approx(-math.sqrt(2.0 * math.log(2.0)))


def test_mean_and_std_are_applied() -> None:
    sampler = GaussianSampler(_Scripted([0.5, 0.5]))
    z = sampler.next(3.0, 2.0)
    assert z == pytest.approx(3.0 - 2.0 * math.sqrt(2.0 * math.log(2.0)))


def test_two_uniforms_per_sample() -> None:
    rng = SeededRandom(7)
    reference = SeededRandom(7)
    GaussianSampler(rng).next()
    reference.next()
    reference.next()
    assert rng.state == reference.state


def test_standard_normal_moments() -> None:
    sampler = GaussianSampler(SeededRandom(2024))
    z = np.array([sampler.next() for _ in range(20000)])
    assert abs(z.mean()) < 0.05
    assert abs(z.std() - 1.0) < 0.05
