"""Fixed-length numeric vectors with element-wise arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Union

Number = Union[int, float]


class Vector:
    """A mutable vector of numbers.

    ``Vector(1, 2, 3)`` builds from components, ``Vector([1, 2, 3])`` from an
    iterable. Arithmetic with a number applies to every component; with
    another vector it is element-wise and needs equal lengths.
    """

    __slots__ = ("_axes",)

    def __init__(self, *args: Number | Iterable[Number]) -> None:
        if len(args) == 1 and not isinstance(args[0], Real):
            axes = list(args[0])  # type: ignore[arg-type]
        else:
            axes = list(args)
        if not axes:
            raise ValueError("a vector needs at least one component")
        self._axes: list[Number] = axes  # type: ignore[assignment]

    @classmethod
    def filled(cls, size: int, value: Number) -> Vector:
        """Return a vector of ``size`` components all equal to ``value``."""
        if size <= 0:
            raise ValueError("size must be positive")
        return cls([value] * size)

    def __len__(self) -> int:
        return len(self._axes)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._axes)

    def __getitem__(self, index: int) -> Number:
        return self._axes[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._axes[index] = value

    def __repr__(self) -> str:
        return f"Vector({', '.join(map(repr, self._axes))})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._axes == other._axes

    __hash__ = None  # type: ignore[assignment]

    def _zip(self, other: Vector) -> Iterator[tuple[Number, Number]]:
        if len(other) != len(self):
            raise ValueError(
                f"vector lengths differ: {len(self)} and {len(other)}"
            )
        return zip(self._axes, other._axes)

    def _apply(self, other: object, op) -> Vector:
        if isinstance(other, Vector):
            return Vector([op(a, b) for a, b in self._zip(other)])
        if isinstance(other, Real):
            return Vector([op(a, other) for a in self._axes])
        return NotImplemented

    def _rapply(self, other: object, op) -> Vector:
        if isinstance(other, Real):
            return Vector([op(other, a) for a in self._axes])
        return NotImplemented

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._apply(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._apply(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._apply(other, lambda a, b: a / b)

    def __radd__(self, other):
        return self._rapply(other, lambda a, b: a + b)

    def __rsub__(self, other):
        return self._rapply(other, lambda a, b: a - b)

    def __rmul__(self, other):
        return self._rapply(other, lambda a, b: a * b)

    def __rtruediv__(self, other):
        return self._rapply(other, lambda a, b: a / b)

    def __neg__(self) -> Vector:
        return Vector([-a for a in self._axes])

    def length_sq(self) -> Number:
        """Squared length."""
        return sum(a * a for a in self._axes)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalize(self) -> Vector:
        """Return this vector scaled to length one."""
        return self / self.length()

    def dot_fl(self, other: Vector) -> Number:
        """Dot product, not divided by the lengths."""
        return sum(a * b for a, b in self._zip(other))

    def dot(self, other: Vector) -> float:
        """Dot product divided by both lengths (the cosine of the angle)."""
        return self.dot_fl(other) / other.length() / self.length()

    def cross_fl(self, other: Vector) -> Vector:
        """Cross product of two 3-component vectors, not divided by the lengths."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("cross product is defined only for 3-component vectors")
        a0, a1, a2 = self._axes
        b0, b1, b2 = other._axes
        return Vector(a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0)

    def cross(self, other: Vector) -> Vector:
        """Cross product divided by both lengths."""
        return self.cross_fl(other) / self.length() / other.length()

    @staticmethod
    def dists_to_shortest_distance(p1: Vector, v1: Vector,
                                   p2: Vector, v2: Vector) -> Vector:
        """Parameters of the closest points on lines ``p1 + t*v1`` and ``p2 + s*v2``.

        Returns ``Vector(t, s)``. Parallel lines raise ``ZeroDivisionError``.
        """
        diff = p1 - p2
        v1l = v1.length()
        v2l = v2.length()
        a = v1.dot_fl(v2)
        b = -v2l * v2l
        c = diff.dot_fl(v2)
        d = v1l * v1l
        e = -v2.dot_fl(v1)
        f = diff.dot_fl(v1)
        denom = a * e - d * b
        return Vector((b * f - e * c) / denom, (d * c - f * a) / denom)

    @staticmethod
    def shortest_distance(p1: Vector, v1: Vector, p2: Vector, v2: Vector) -> float:
        """Shortest distance between lines ``p1 + t*v1`` and ``p2 + s*v2``."""
        t, s = Vector.dists_to_shortest_distance(p1, v1, p2, v2)
        return ((p1 + t * v1) - (p2 + s * v2)).length()