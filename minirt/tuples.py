"""Homogeneous four-component tuples used for points, vectors and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Tuple:
    """A homogeneous (x, y, z, w) tuple; points have w=1, vectors w=0."""

    x: float
    y: float
    z: float
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Tuple:
        return vector(0.0, 0.0, 0.0) - self

    def __mul__(self, scalar: object) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        # Division by zero follows IEEE semantics rather than raising.
        factor = math.copysign(math.inf, scalar) if scalar == 0 else 1.0 / scalar
        return self * factor

    def dot(self, other: Tuple) -> float:
        """Dot product over all four components."""
        return sum(a * b for a, b in zip(self, other))

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Tuple:
        """Return this tuple scaled to unit length."""
        return self / self.magnitude()

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the x, y, z parts; the result is a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def hadamard(self, other: Tuple) -> Tuple:
        """Element-wise product of two tuples."""
        return Tuple(*(a * b for a, b in zip(self, other)))

    def describe(self) -> str:
        """One-line human-readable rendering of the components."""
        return (
            f" | x : {self.x:6.3f} | y : {self.y:6.3f}"
            f" | z : {self.z:6.3f} | w : {self.w:6.3f}"
        )


def point(x: float, y: float, z: float) -> Tuple:
    """A point at (x, y, z)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """A direction (x, y, z)."""
    return Tuple(x, y, z, 0.0)


def color(r: float, g: float, b: float) -> Tuple:
    """A colour with channels in the 0..1 range."""
    return Tuple(r, g, b, 1.0)