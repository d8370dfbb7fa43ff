"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Planar Computational Geometry
===============================================================================
Pure, synchronous geometry algorithms over immutable Point collections.
None of them performs I/O or keeps state between calls.

Modules:
    closest_pair  : Closest pair of points (brute force and divide & conquer)
    convex_hull   : Convex hull by Graham scan
    segments      : Line-segment intersection predicate and pairwise scan
    kdtree        : 2-D k-d tree with pruned nearest-neighbour search
===============================================================================
"""

from geometry.closest_pair import (
    ClosestPairResult,
    closest_pair_brute_force,
    closest_pair_divide_conquer,
)
from geometry.convex_hull import convex_hull_graham_scan
from geometry.kdtree import KdTree
from geometry.segments import LineSegment, find_intersecting_segments

__all__ = [
    "ClosestPairResult",
    "closest_pair_brute_force",
    "closest_pair_divide_conquer",
    "convex_hull_graham_scan",
    "KdTree",
    "LineSegment",
    "find_intersecting_segments",
]
