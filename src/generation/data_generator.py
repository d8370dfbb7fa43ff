"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Point Data Generator
===============================================================================
Seeded generators for the point sets and segment sets fed to the geometry
benchmarks.  Every generator draws from a single numpy.random.Generator owned
by the PointGenerator instance, so two instances built with the same seed
produce identical data in the same call order.

Distributions:
    random     : Uniform in a square centred on the origin
    circular   : Evenly spaced on a circle (deterministic)
    grid       : Integer lattice (deterministic, many coordinate ties)
    clustered  : Disc-shaped clusters around uniform random centres
    segments   : Random start point, uniform direction and length
===============================================================================
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from core.constants import (
    CIRCLE_RADIUS,
    CLUSTER_CENTER_RANGE,
    CLUSTER_COUNT,
    CLUSTER_RADIUS,
    COORDINATE_RANGE,
    SEGMENT_MAX_LENGTH,
    TWO_PI,
)
from core.point import Point
from geometry.segments import LineSegment

logger = logging.getLogger(__name__)


def _points_from_array(coords: np.ndarray) -> List[Point]:
    return [Point(float(x), float(y)) for x, y in coords]


class PointGenerator:
    """
    Reproducible source of benchmark point sets.

    Parameters
    ----------
    seed : int, optional
        Seed for ``np.random.default_rng``.  ``None`` draws fresh entropy.
    coordinate_range : float
        Half-width of the square used by random points and segment starts.
    circle_radius : float
        Default radius for :meth:`circular_points`.
    cluster_count, cluster_radius : int, float
        Defaults for :meth:`clustered_points` and :meth:`datasets`.
    """

    def __init__(self, seed: Optional[int] = None,
                 coordinate_range: float = COORDINATE_RANGE,
                 circle_radius: float = CIRCLE_RADIUS,
                 cluster_count: int = CLUSTER_COUNT,
                 cluster_radius: float = CLUSTER_RADIUS):
        if coordinate_range <= 0:
            raise ValueError(f"coordinate_range must be positive, got {coordinate_range}")
        self.seed = seed
        self.coordinate_range = coordinate_range
        self.circle_radius = circle_radius
        self.cluster_count = cluster_count
        self.cluster_radius = cluster_radius
        self._rng = np.random.default_rng(seed)

    @staticmethod
    def _check_count(name: str, value: int) -> None:
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")

    def random_points(self, count: int,
                      low: Optional[float] = None,
                      high: Optional[float] = None) -> List[Point]:
        """Uniformly distributed points in ``[low, high]^2``.

        Bounds default to ``-coordinate_range`` and ``+coordinate_range``.
        """
        self._check_count("count", count)
        low = -self.coordinate_range if low is None else low
        high = self.coordinate_range if high is None else high
        if high < low:
            raise ValueError(f"high ({high}) must be >= low ({low})")
        coords = self._rng.uniform(low, high, size=(count, 2))
        return _points_from_array(coords)

    def circular_points(self, count: int, radius: Optional[float] = None) -> List[Point]:
        """*count* points evenly spaced on a circle of *radius* about the origin."""
        self._check_count("count", count)
        radius = self.circle_radius if radius is None else radius
        if radius <= 0:
            raise ValueError(f"radius must be positive, got {radius}")
        angles = TWO_PI * np.arange(count) / max(count, 1)
        coords = np.column_stack([radius * np.cos(angles), radius * np.sin(angles)])
        return _points_from_array(coords)

    def grid_points(self, grid_size: int) -> List[Point]:
        """All integer points ``(i, j)`` with ``0 <= i, j < grid_size``."""
        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        return [Point(float(i), float(j))
                for i in range(grid_size) for j in range(grid_size)]

    def clustered_points(self, cluster_count: Optional[int] = None,
                         points_per_cluster: int = 20,
                         cluster_radius: Optional[float] = None) -> List[Point]:
        """Points scattered in discs around uniformly placed cluster centres.

        Each point sits at a uniform angle and a uniform distance in
        ``[0, cluster_radius)`` from its centre, so clusters are denser near
        the middle.
        """
        cluster_count = self.cluster_count if cluster_count is None else cluster_count
        cluster_radius = self.cluster_radius if cluster_radius is None else cluster_radius
        self._check_count("cluster_count", cluster_count)
        self._check_count("points_per_cluster", points_per_cluster)
        if cluster_radius <= 0:
            raise ValueError(f"cluster_radius must be positive, got {cluster_radius}")

        points: List[Point] = []
        for _ in range(cluster_count):
            cx, cy = self._rng.uniform(-CLUSTER_CENTER_RANGE, CLUSTER_CENTER_RANGE, size=2)
            angles = self._rng.uniform(0.0, TWO_PI, size=points_per_cluster)
            dists = self._rng.uniform(0.0, cluster_radius, size=points_per_cluster)
            coords = np.column_stack([cx + dists * np.cos(angles),
                                      cy + dists * np.sin(angles)])
            points.extend(_points_from_array(coords))
        return points

    def random_segments(self, count: int,
                        max_length: float = SEGMENT_MAX_LENGTH) -> List[LineSegment]:
        """Segments with a uniform start point, direction and length."""
        self._check_count("count", count)
        if max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")

        starts = self._rng.uniform(-self.coordinate_range, self.coordinate_range,
                                   size=(count, 2))
        angles = self._rng.uniform(0.0, TWO_PI, size=count)
        lengths = self._rng.uniform(0.0, max_length, size=count)
        ends = starts + np.column_stack([lengths * np.cos(angles), lengths * np.sin(angles)])
        return [LineSegment(Point.from_sequence(s), Point.from_sequence(e))
                for s, e in zip(starts, ends)]

    def datasets(self, size: int) -> Dict[str, List[Point]]:
        """Named point sets of roughly *size* points each for a benchmark sweep."""
        self._check_count("size", size)
        per_cluster = max(size // max(self.cluster_count, 1), 1)
        data = {
            "random": self.random_points(size),
            "circular": self.circular_points(size),
            "clustered": self.clustered_points(self.cluster_count, per_cluster),
        }
        logger.debug("Generated datasets for size %d (seed=%s)", size, self.seed)
        return data
