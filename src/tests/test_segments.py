"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Line Segment Intersection Test Suite
===============================================================================
Tests for LineSegment.intersects (proper crossings, touching endpoints,
T-junctions, collinear overlap and separation, parallel segments), its
symmetry in argument order and endpoint order, and the pairwise
find_intersecting_segments scan.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from core.point import Point
from generation.data_generator import PointGenerator
from geometry.segments import LineSegment, find_intersecting_segments, on_segment


def seg(x1, y1, x2, y2):
    return LineSegment(Point(float(x1), float(y1)), Point(float(x2), float(y2)))


# =============================================================================
# Intersection predicate
# =============================================================================

class TestIntersects:

    def test_crossing_diagonals(self):
        assert seg(0, 0, 2, 2).intersects(seg(0, 2, 2, 0))

    def test_collinear_disjoint(self):
        assert not seg(0, 0, 1, 1).intersects(seg(2, 2, 3, 3))

    def test_shared_endpoint(self):
        assert seg(0, 0, 1, 1).intersects(seg(1, 1, 2, 0))

    def test_t_junction(self):
        assert seg(0, 0, 2, 0).intersects(seg(1, 0, 1, 1))

    def test_collinear_overlap(self):
        assert seg(0, 0, 2, 0).intersects(seg(1, 0, 3, 0))

    def test_collinear_containment(self):
        assert seg(0, 0, 10, 10).intersects(seg(2, 2, 3, 3))

    def test_parallel_offset(self):
        assert not seg(0, 0, 2, 0).intersects(seg(0, 1, 2, 1))

    def test_near_miss(self):
        assert not seg(0, 0, 1, 1).intersects(seg(2, 0, 1.6, 1.4))

    def test_degenerate_point_segment_on_line(self):
        assert seg(1, 1, 1, 1).intersects(seg(0, 0, 2, 2))
        assert not seg(5, 1, 5, 1).intersects(seg(0, 0, 2, 2))

    def test_on_segment_bounding_box(self):
        assert on_segment(Point(0, 0), Point(1, 1), Point(2, 2))
        assert not on_segment(Point(0, 0), Point(3, 3), Point(2, 2))


# =============================================================================
# Symmetry
# =============================================================================

class TestSymmetry:

    def test_argument_order_random(self):
        segments = PointGenerator(seed=11).random_segments(120, max_length=400.0)
        for a in segments:
            for b in segments:
                assert a.intersects(b) == b.intersects(a)

    def test_endpoint_order_on_lattice(self):
        # Small integer coordinates make every orientation test exact and
        # produce plenty of collinear and touching cases.
        rng = np.random.default_rng(3)
        coords = rng.integers(0, 4, size=(80, 4))
        segments = [seg(*row) for row in coords]
        for a in segments:
            for b in segments:
                expected = a.intersects(b)
                assert a.reversed().intersects(b) == expected
                assert a.intersects(b.reversed()) == expected
                assert b.intersects(a) == expected

    def test_reversed_and_length(self):
        s = seg(0, 0, 3, 4)
        assert s.reversed() == seg(3, 4, 0, 0)
        assert s.length() == 5.0


# =============================================================================
# Pairwise scan
# =============================================================================

class TestFindIntersectingSegments:

    def test_empty_and_single(self):
        assert find_intersecting_segments([]) == []
        assert find_intersecting_segments([seg(0, 0, 1, 1)]) == []

    def test_known_layout(self):
        segments = [
            seg(0, 0, 2, 2),
            seg(0, 2, 2, 0),
            seg(5, 5, 6, 6),
            seg(1, 0, 1, 3),
        ]
        assert find_intersecting_segments(segments) == [(0, 1), (0, 3), (1, 3)]

    def test_pairs_ordered_and_consistent(self):
        segments = PointGenerator(seed=5).random_segments(150, max_length=300.0)
        pairs = find_intersecting_segments(segments)
        assert pairs == sorted(pairs)
        assert all(i < j for i, j in pairs)
        expected = [
            (i, j)
            for i in range(len(segments))
            for j in range(i + 1, len(segments))
            if segments[j].intersects(segments[i])
        ]
        assert pairs == expected
