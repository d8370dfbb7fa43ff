"""
Line-segment intersection via orientation tests.

LineSegment.intersects       -- Closed-segment intersection predicate.
find_intersecting_segments   -- Every intersecting index pair, O(n^2).

The pairwise scan is exhaustive; no sweep-line structure is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from core.point import Point, cross_product


def direction(pi: Point, pj: Point, pk: Point) -> float:
    """Orientation of *pk* relative to the directed line pi -> pj."""
    return cross_product(pi, pj, pk)


def on_segment(pi: Point, pj: Point, pk: Point) -> bool:
    """True if *pj* lies in the bounding box of segment pi-pk.

    Only meaningful when the three points are already known to be collinear.
    """
    return (
        min(pi.x, pk.x) <= pj.x <= max(pi.x, pk.x)
        and min(pi.y, pk.y) <= pj.y <= max(pi.y, pk.y)
    )


@dataclass(frozen=True)
class LineSegment:
    """Closed segment between *start* and *end*."""
    start: Point
    end: Point

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def reversed(self) -> LineSegment:
        return LineSegment(self.end, self.start)

    def intersects(self, other: LineSegment) -> bool:
        """True if the two segments share at least one point.

        Touching endpoints and collinear overlap both count.  The result does
        not depend on argument order or on the orientation of either segment.
        """
        d1 = direction(other.start, other.end, self.start)
        d2 = direction(other.start, other.end, self.end)
        d3 = direction(self.start, self.end, other.start)
        d4 = direction(self.start, self.end, other.end)

        if ((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and \
           ((d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0)):
            return True

        # Degenerate cases: an endpoint collinear with the other segment.
        return (
            (d1 == 0 and on_segment(other.start, self.start, other.end))
            or (d2 == 0 and on_segment(other.start, self.end, other.end))
            or (d3 == 0 and on_segment(self.start, other.start, self.end))
            or (d4 == 0 and on_segment(self.start, other.end, self.end))
        )


def find_intersecting_segments(segments: Sequence[LineSegment]) -> List[Tuple[int, int]]:
    """Return every index pair ``(i, j)``, ``i < j``, whose segments intersect.

    Pairs come back in lexicographic order.

    Complexity
    ----------
    O(n^2) intersection tests.
    """
    intersections: List[Tuple[int, int]] = []
    for i in range(len(segments)):
        for j in range(i + 1, len(segments)):
            if segments[i].intersects(segments[j]):
                intersections.append((i, j))
    return intersections
