"""Point component: an integer vector in Z^2."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero (``//`` floors)."""

    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


@dataclass(frozen=True)
class Point:
    """Immutable 2D grid coordinate.

    Supports element-wise addition and subtraction, product by an integer
    scalar, dot product (``Point * Point``) and division by an integer
    scalar. Division truncates toward zero, so ``Point(-3, 3) / 2`` is
    ``Point(-1, 1)``. Non-integer coordinates raise :class:`TypeError`;
    use :meth:`from_tuple` to coerce.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if not isinstance(self.x, int) or not isinstance(self.y, int):
            raise TypeError(
                f"Point coordinates must be integers, got ({self.x!r}, {self.y!r})"
            )

    @classmethod
    def from_tuple(cls, coords: Tuple[int, int]) -> "Point":
        x, y = coords
        return cls(int(x), int(y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, other: object):
        if isinstance(other, Point):
            return self.x * other.x + self.y * other.y
        if isinstance(other, int):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, int):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar: object) -> "Point":
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("cannot divide a Point by zero")
        return Point(_trunc_div(self.x, scalar), _trunc_div(self.y, scalar))

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


__all__ = ["Point"]
