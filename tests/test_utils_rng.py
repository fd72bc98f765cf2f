from random import Random

import pytest

from roguekit.utils import rng


def test_seed_makes_sequences_repeatable():
    rng.seed(42)
    first = [rng.roll(6, 3), rng.rand_range(0.0, 1.0), rng.normal(0.0, 1.0), rng.one_in(3)]
    rng.seed(42)
    second = [rng.roll(6, 3), rng.rand_range(0.0, 1.0), rng.normal(0.0, 1.0), rng.one_in(3)]
    assert first == second
    assert isinstance(rng.get_rng(), Random)


def test_rand_range_bounds():
    rng.seed(1)
    ints = [rng.rand_range(1, 11) for _ in range(500)]
    assert all(isinstance(v, int) and 1 <= v < 11 for v in ints)
    assert set(ints) == set(range(1, 11))
    floats = [rng.rand_range(-1.0, 1.0) for _ in range(500)]
    assert all(isinstance(v, float) and -1.0 <= v < 1.0 for v in floats)


@pytest.mark.parametrize("low, high", [(3, 3), (5, 1), (1.0, 1.0)])
def test_rand_range_rejects_empty_interval(low, high):
    with pytest.raises(ValueError):
        rng.rand_range(low, high)


def test_roll():
    assert rng.roll(0, 5) == 0
    assert rng.roll(6, 0) == 0
    assert rng.roll(1, 4) == 4
    for _ in range(200):
        assert 3 <= rng.roll(6, 3) <= 18
    with pytest.raises(ValueError):
        rng.roll(-6, 1)


def test_one_in():
    assert rng.one_in(1)
    assert rng.one_in(0)
    assert rng.one_in(-3)
    rng.seed(7)
    hits = sum(rng.one_in(2) for _ in range(1000))
    assert 350 < hits < 650


def test_normal():
    assert rng.normal(5.0, 0.0) == 5.0
    rng.seed(3)
    samples = [rng.normal(10.0, 2.0) for _ in range(2000)]
    assert sum(samples) / len(samples) == pytest.approx(10.0, abs=0.3)
    with pytest.raises(ValueError):
        rng.normal(0.0, -1.0)
    with pytest.raises(ValueError):
        rng.normal(0.0, float("nan"))


def test_choice():
    assert rng.choice([]) is None
    assert rng.choice(["only"]) == "only"
    items = ["first", "second", "third"]
    rng.seed(11)
    picks = {rng.choice(items) for _ in range(100)}
    assert picks == set(items)
