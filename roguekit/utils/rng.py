"""Dice, ranges and other random helpers backed by a shared generator."""

from __future__ import annotations

from random import Random
from typing import Optional, Sequence, TypeVar
import math

T = TypeVar("T")

_rng = Random()


def seed(value: int | None) -> None:
    """Reseed the shared generator; ``None`` reseeds from OS entropy."""

    _rng.seed(value)


def get_rng() -> Random:
    """Return the shared :class:`random.Random` instance."""

    return _rng


def rand_range(low: float, high: float) -> float:
    """Return a random number in ``[low, high)`` with equal probability.

    Two integers give an integer result; anything else gives a float.
    """

    if low >= high:
        raise ValueError(f"empty range [{low}, {high})")
    if isinstance(low, int) and isinstance(high, int):
        return _rng.randrange(low, high)
    value = low + (high - low) * _rng.random()
    # Rounding can land exactly on ``high`` for very narrow float ranges.
    return value if value < high else low


def roll(sides: int, times: int) -> int:
    """Roll a ``sides``-sided die ``times`` times and return the total."""

    if sides < 0 or times < 0:
        raise ValueError("sides and times must not be negative")
    if sides == 0 or times == 0:
        return 0
    return sum(_rng.randint(1, sides) for _ in range(times))


def one_in(n: int) -> bool:
    """Return ``True`` with a 1 in ``n`` probability."""

    if n < 2:
        return True
    return _rng.randint(1, n) == 1


def normal(mean: float, stdev: float) -> float:
    """Return a sample from a normal distribution."""

    if not math.isfinite(stdev) or stdev < 0:
        raise ValueError(f"standard deviation must be finite and >= 0, got {stdev!r}")
    return _rng.gauss(mean, stdev)


def choice(items: Sequence[T]) -> Optional[T]:
    """Return a random element of ``items``, or ``None`` if it is empty."""

    if not items:
        return None
    return items[_rng.randrange(len(items))]


__all__ = ["seed", "get_rng", "rand_range", "roll", "one_in", "normal", "choice"]
