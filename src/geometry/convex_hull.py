"""
Convex hull by Graham scan.

The scan sorts every point by polar angle around the lowest point and keeps a
stack of hull candidates, popping whenever the last two stack entries and the
next candidate fail to make a strict left turn.  Collinear boundary points are
dropped, so the result holds only the corners of the hull.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence

from core.point import Point, cross_product


def lowest_point(points: Sequence[Point]) -> Point:
    """Point with the smallest y, ties broken by the smallest x."""
    anchor = points[0]
    for p in points[1:]:
        if p.y < anchor.y or (p.y == anchor.y and p.x < anchor.x):
            anchor = p
    return anchor


def _angular_order(anchor: Point):
    """Comparator ordering points by polar angle around *anchor*.

    Every candidate lies in the half-plane above the anchor (angles in
    ``[0, pi)``), so the sign of the cross product is an exact angle
    comparison.  Equal angles fall back to distance, nearest first.
    """
    def compare(a: Point, b: Point) -> int:
        turn = cross_product(anchor, a, b)
        if turn > 0:
            return -1
        if turn < 0:
            return 1
        da = anchor.distance_squared_to(a)
        db = anchor.distance_squared_to(b)
        return (da > db) - (da < db)

    return cmp_to_key(compare)


def convex_hull_graham_scan(points: Sequence[Point]) -> List[Point]:
    """Return the convex hull vertices in counter-clockwise order.

    Parameters
    ----------
    points : sequence of Point

    Returns
    -------
    list of Point
        Starts at the lowest point (smallest x on ties) and runs
        counter-clockwise.  Inputs with fewer than three points are returned
        unchanged.  Fully collinear input yields its two extreme points.

    Notes
    -----
    Candidates with the same polar angle are ordered nearest-first, so the
    farthest point along a shared ray is scanned last and is the one kept.
    Duplicates of the anchor are discarded before the scan.

    Complexity
    ----------
    O(n log n), dominated by the angular sort.
    """
    if len(points) < 3:
        return list(points)

    anchor = lowest_point(points)
    candidates = [p for p in points if p != anchor]
    candidates.sort(key=_angular_order(anchor))

    hull: List[Point] = [anchor]
    for p in candidates:
        while len(hull) > 1 and cross_product(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    return hull
