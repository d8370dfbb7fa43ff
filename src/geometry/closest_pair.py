"""
Closest pair of points in the plane.

Two implementations with the same return contract:

closest_pair_brute_force     -- O(n^2) scan over every unordered pair.
closest_pair_divide_conquer  -- O(n log n) recursive split with strip merge.

Both return ``None`` when fewer than two points are supplied, since the
closest pair is undefined in that case.  All distance updates use a strict
``<`` so the first minimal pair in scan order wins ties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from core.point import Point


@dataclass(frozen=True)
class ClosestPairResult:
    """An unordered pair of points and the Euclidean distance between them.

    Invariant: ``distance == point1.distance_to(point2)``.
    """
    point1: Point
    point2: Point
    distance: float


def closest_pair_brute_force(points: Sequence[Point]) -> Optional[ClosestPairResult]:
    """Find the closest pair by checking every pair ``i < j``.

    Parameters
    ----------
    points : sequence of Point

    Returns
    -------
    ClosestPairResult or None
        ``None`` when ``len(points) < 2``.  On exact ties the pair with the
        lexicographically smallest ``(i, j)`` is returned.

    Complexity
    ----------
    O(n^2) time, O(1) extra space.
    """
    n = len(points)
    if n < 2:
        return None

    min_distance = float("inf")
    best_i, best_j = 0, 1

    for i in range(n):
        p = points[i]
        for j in range(i + 1, n):
            distance = p.distance_to(points[j])
            if distance < min_distance:
                min_distance = distance
                best_i, best_j = i, j

    return ClosestPairResult(points[best_i], points[best_j], min_distance)


def closest_pair_divide_conquer(points: Sequence[Point]) -> Optional[ClosestPairResult]:
    """Find the closest pair in O(n log n) by divide and conquer.

    The input is sorted once by x and once by y; the recursion carries both
    views down and partitions the y-view by comparing against the split
    point's x-coordinate, so no level re-sorts.

    Parameters
    ----------
    points : sequence of Point

    Returns
    -------
    ClosestPairResult or None
        ``None`` only when ``len(points) < 2``.  The distance always equals
        the minimum pairwise distance; when several pairs tie exactly, any one
        of them may be returned.
    """
    if len(points) < 2:
        return None

    points_x = sorted(points, key=lambda p: p.x)
    points_y = sorted(points, key=lambda p: p.y)
    return _closest_pair_rec(points_x, points_y)


def _closest_pair_rec(points_x: List[Point], points_y: List[Point]) -> ClosestPairResult:
    n = len(points_x)
    if n <= 3:
        return closest_pair_brute_force(points_x)

    mid = n // 2
    midpoint = points_x[mid]

    # Points sharing the split x-coordinate go left in the y-view.
    left_y: List[Point] = []
    right_y: List[Point] = []
    for p in points_y:
        if p.x <= midpoint.x:
            left_y.append(p)
        else:
            right_y.append(p)

    left = _closest_pair_rec(points_x[:mid], left_y)
    right = _closest_pair_rec(points_x[mid:], right_y)
    best = left if left.distance <= right.distance else right

    strip = [p for p in points_y if abs(p.x - midpoint.x) < best.distance]

    for i in range(len(strip)):
        a = strip[i]
        j = i + 1
        while j < len(strip) and strip[j].y - a.y < best.distance:
            distance = a.distance_to(strip[j])
            if distance < best.distance:
                best = ClosestPairResult(a, strip[j], distance)
            j += 1

    return best
