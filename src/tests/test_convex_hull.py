"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Convex Hull Test Suite
===============================================================================
Tests for the Graham scan: vertex order and starting point, containment of
every input point, removal of collinear boundary points, duplicate handling,
small inputs, and agreement with scipy.spatial.ConvexHull on random sets.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from scipy.spatial import ConvexHull

from core.point import Point, cross_product
from generation.data_generator import PointGenerator
from geometry.convex_hull import convex_hull_graham_scan, lowest_point


# =============================================================================
# Fixtures / helpers
# =============================================================================

@pytest.fixture
def generator():
    return PointGenerator(seed=7)


def _is_strictly_ccw(hull):
    n = len(hull)
    return all(
        cross_product(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0
        for i in range(n)
    )


def _contains(hull, p, tol=1e-9):
    n = len(hull)
    return all(cross_product(hull[i], hull[(i + 1) % n], p) >= -tol for i in range(n))


# =============================================================================
# Small and degenerate inputs
# =============================================================================

class TestSmallInputs:

    def test_empty(self):
        assert convex_hull_graham_scan([]) == []

    def test_one_point(self):
        assert convex_hull_graham_scan([Point(1, 2)]) == [Point(1, 2)]

    def test_two_points_returned_unchanged(self):
        points = [Point(5, 5), Point(0, 0)]
        assert convex_hull_graham_scan(points) == points

    def test_returns_new_list(self):
        points = [Point(5, 5), Point(0, 0)]
        assert convex_hull_graham_scan(points) is not points

    def test_collinear_input_keeps_two_extremes(self):
        xs = [4, 0, 7, 2, 9, 1, 5, 3, 8, 6]
        points = [Point(float(x), 2.0 * x + 1.0) for x in xs]
        assert convex_hull_graham_scan(points) == [Point(0, 1), Point(9, 19)]

    def test_horizontal_collinear_input(self):
        points = [Point(3, 0), Point(1, 0), Point(2, 0)]
        assert convex_hull_graham_scan(points) == [Point(1, 0), Point(3, 0)]

    def test_duplicates_collapse(self):
        points = [Point(0, 0), Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1), Point(1, 1)]
        assert convex_hull_graham_scan(points) == [
            Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)
        ]


# =============================================================================
# Shape properties
# =============================================================================

class TestHullShape:

    def test_unit_square(self):
        square = [Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)]
        assert convex_hull_graham_scan(square) == [
            Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)
        ]

    def test_interior_and_edge_points_dropped(self):
        points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4),
                  Point(2, 2), Point(2, 0), Point(4, 2), Point(0, 2), Point(2, 4)]
        hull = convex_hull_graham_scan(points)
        assert hull == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]

    def test_starts_at_lowest_then_leftmost(self):
        points = [Point(3, 1), Point(1, 1), Point(2, 5), Point(5, 3)]
        hull = convex_hull_graham_scan(points)
        assert hull[0] == Point(1, 1)
        assert lowest_point(points) == Point(1, 1)

    def test_random_hull_ccw_and_contains_all(self, generator):
        points = generator.random_points(300)
        hull = convex_hull_graham_scan(points)
        assert hull[0] == lowest_point(points)
        assert _is_strictly_ccw(hull)
        assert all(_contains(hull, p) for p in points)

    def test_clustered_hull_contains_all(self, generator):
        points = generator.clustered_points(5, 40, 10.0)
        hull = convex_hull_graham_scan(points)
        assert _is_strictly_ccw(hull)
        assert all(_contains(hull, p) for p in points)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4])
    def test_matches_scipy(self, seed):
        points = PointGenerator(seed).random_points(200)
        hull = convex_hull_graham_scan(points)

        coords = np.array([p.as_tuple() for p in points])
        reference = ConvexHull(coords)
        expected = {tuple(coords[i]) for i in reference.vertices}
        assert {p.as_tuple() for p in hull} == expected
        assert len(hull) == len(expected)

    def test_input_is_not_mutated(self, generator):
        points = generator.random_points(50)
        snapshot = list(points)
        convex_hull_graham_scan(points)
        assert points == snapshot
