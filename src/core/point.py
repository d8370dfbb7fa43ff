"""
Planar point primitives shared by every geometry algorithm.

Point           -- Immutable 2-D value type with Euclidean distance metrics.
cross_product   -- Orientation of three points (sign of the z cross product).

Coordinates are expected to be finite doubles.  NaN or infinite inputs are
outside the contract of every routine in this package and are not checked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """A point in the plane.

    Two points with equal coordinates are equal and hash the same; a point
    carries no identity beyond its coordinates.

    Attributes
    ----------
    x : float
    y : float
    """
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to *other*."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def distance_squared_to(self, other: Point) -> float:
        """Squared Euclidean distance to *other*.

        Cheaper than :meth:`distance_to` and sufficient whenever only the
        ordering of distances matters.
        """
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point:
        """Build a point from an ``(x, y)`` pair or a NumPy row of length 2."""
        if len(values) != 2:
            raise ValueError(f"Expected 2 coordinates, got {len(values)}")
        return cls(float(values[0]), float(values[1]))


def cross_product(o: Point, a: Point, b: Point) -> float:
    """Z component of ``(a - o) x (b - o)``.

    Positive for a counter-clockwise turn o -> a -> b, negative for a
    clockwise turn and zero when the three points are collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)

