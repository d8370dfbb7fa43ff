"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Data Generator Test Suite
===============================================================================
Tests for PointGenerator: seeded reproducibility, sizes and bounds of every
distribution, and rejection of invalid parameters.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import math

import pytest

from core.constants import CLUSTER_CENTER_RANGE
from core.point import Point
from generation.data_generator import PointGenerator
from geometry.segments import LineSegment


# =============================================================================
# Reproducibility
# =============================================================================

class TestReproducibility:

    def test_same_seed_same_points(self):
        a = PointGenerator(seed=7)
        b = PointGenerator(seed=7)
        assert a.random_points(100) == b.random_points(100)
        assert a.clustered_points(3, 10) == b.clustered_points(3, 10)
        assert a.random_segments(20) == b.random_segments(20)

    def test_different_seed_different_points(self):
        assert PointGenerator(seed=1).random_points(50) != PointGenerator(seed=2).random_points(50)

    def test_successive_calls_differ(self):
        gen = PointGenerator(seed=3)
        assert gen.random_points(10) != gen.random_points(10)


# =============================================================================
# Distributions
# =============================================================================

class TestDistributions:

    @pytest.fixture
    def gen(self):
        return PointGenerator(seed=11, coordinate_range=100.0)

    def test_random_points_count_and_bounds(self, gen):
        points = gen.random_points(500)
        assert len(points) == 500
        assert all(isinstance(p, Point) for p in points)
        assert all(-100.0 <= p.x <= 100.0 and -100.0 <= p.y <= 100.0 for p in points)

    def test_random_points_explicit_bounds(self, gen):
        points = gen.random_points(200, low=5.0, high=6.0)
        assert all(5.0 <= p.x <= 6.0 and 5.0 <= p.y <= 6.0 for p in points)

    def test_zero_count(self, gen):
        assert gen.random_points(0) == []
        assert gen.circular_points(0) == []
        assert gen.random_segments(0) == []

    def test_circular_points_on_circle(self, gen):
        points = gen.circular_points(64, radius=25.0)
        assert len(points) == 64
        for p in points:
            assert math.isclose(math.hypot(p.x, p.y), 25.0, rel_tol=1e-12)
        assert len(set(points)) == 64

    def test_circular_points_default_radius(self):
        gen = PointGenerator(seed=0, circle_radius=12.0)
        p = gen.circular_points(4)[0]
        assert p == Point(12.0, 0.0)

    def test_grid_points(self, gen):
        points = gen.grid_points(4)
        assert len(points) == 16
        assert Point(0.0, 0.0) in points
        assert Point(3.0, 3.0) in points
        assert Point(4.0, 0.0) not in points

    def test_clustered_points_near_centres(self, gen):
        points = gen.clustered_points(4, 25, 10.0)
        assert len(points) == 100
        limit = CLUSTER_CENTER_RANGE + 10.0
        assert all(abs(p.x) <= limit and abs(p.y) <= limit for p in points)

    def test_clustered_points_are_tight(self, gen):
        points = gen.clustered_points(1, 50, 5.0)
        cx = sum(p.x for p in points) / len(points)
        cy = sum(p.y for p in points) / len(points)
        assert all(math.hypot(p.x - cx, p.y - cy) <= 10.0 for p in points)

    def test_random_segments(self, gen):
        segments = gen.random_segments(100, max_length=8.0)
        assert len(segments) == 100
        assert all(isinstance(s, LineSegment) for s in segments)
        assert all(s.length() <= 8.0 + 1e-9 for s in segments)

    def test_datasets(self, gen):
        data = gen.datasets(100)
        assert set(data) == {"random", "circular", "clustered"}
        assert len(data["random"]) == 100
        assert len(data["circular"]) == 100
        assert len(data["clustered"]) == 100


# =============================================================================
# Validation
# =============================================================================

class TestValidation:

    def test_non_positive_range(self):
        with pytest.raises(ValueError):
            PointGenerator(coordinate_range=0.0)

    def test_negative_count(self):
        with pytest.raises(ValueError):
            PointGenerator(seed=0).random_points(-1)

    def test_inverted_bounds(self):
        with pytest.raises(ValueError):
            PointGenerator(seed=0).random_points(5, low=1.0, high=0.0)

    def test_bad_radius(self):
        with pytest.raises(ValueError):
            PointGenerator(seed=0).circular_points(5, radius=0.0)

    def test_bad_grid_size(self):
        with pytest.raises(ValueError):
            PointGenerator(seed=0).grid_points(0)

    def test_bad_cluster_radius(self):
        with pytest.raises(ValueError):
            PointGenerator(seed=0).clustered_points(2, 5, cluster_radius=-1.0)

    def test_bad_segment_length(self):
        with pytest.raises(ValueError):
            PointGenerator(seed=0).random_segments(3, max_length=0.0)
