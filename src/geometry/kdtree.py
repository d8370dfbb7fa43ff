"""
Two-dimensional k-d tree for nearest-neighbour queries.

The tree is built once from a static point set by median splitting on
alternating axes and is read-only afterwards; there is no insert or delete.
Each node exclusively owns its two children.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from core.point import Point

logger = logging.getLogger(__name__)


def _coordinate(point: Point, dimension: int) -> float:
    return point.x if dimension == 0 else point.y


@dataclass
class _KdNode:
    """Internal node of the k-d tree.

    Attributes
    ----------
    point : Point
        The point stored at this node.
    dimension : int
        Splitting axis (0=x, 1=y).
    left : _KdNode | None
        Points whose coordinate on *dimension* is <= the node's.
    right : _KdNode | None
        Points whose coordinate on *dimension* is >= the node's.
    """
    point: Point
    dimension: int
    left: Optional["_KdNode"] = None
    right: Optional["_KdNode"] = None


class KdTree:
    """A 2-dimensional k-d tree over :class:`Point` values.

    Time complexity
    ---------------
    +---------------------+----------------------------+
    | Operation           | Average / Worst            |
    +=====================+============================+
    | build               | O(n log^2 n)               |
    | nearest_neighbor    | O(log n)   / O(n)          |
    | within_radius       | O(k+log n) / O(n)          |
    | k_nearest           | O(k log k + log n) / O(n)  |
    +---------------------+----------------------------+

    The build re-sorts the current subset at every level instead of carrying
    pre-sorted projections, which costs an extra log factor over the optimal
    O(n log n).  Equal coordinates may land on either side of a split.

    Use :meth:`build` to construct a tree; ``KdTree()`` is the empty tree.
    """

    def __init__(self) -> None:
        self._root: Optional[_KdNode] = None
        self._size: int = 0

    # -- construction ------------------------------------------------------

    @classmethod
    def build(cls, points: Sequence[Point]) -> KdTree:
        """Build a balanced tree from *points*.

        Parameters
        ----------
        points : sequence of Point
            May be empty, which yields an empty tree.

        Returns
        -------
        KdTree
        """
        tree = cls()
        if points:
            tree._root = cls._build(list(points), depth=0)
            tree._size = len(points)
        logger.debug("Built KdTree: n=%d height=%d", tree._size, tree.height)
        return tree

    @classmethod
    def _build(cls, points: List[Point], depth: int) -> _KdNode:
        dimension = depth % 2
        points.sort(key=lambda p: _coordinate(p, dimension))
        mid = len(points) // 2

        node = _KdNode(point=points[mid], dimension=dimension)
        if mid > 0:
            node.left = cls._build(points[:mid], depth + 1)
        if mid + 1 < len(points):
            node.right = cls._build(points[mid + 1:], depth + 1)
        return node

    # -- queries -----------------------------------------------------------

    def nearest_neighbor(self, query: Point) -> Optional[Point]:
        """Find the stored point closest to *query*.

        Parameters
        ----------
        query : Point

        Returns
        -------
        Point or None
            ``None`` when the tree is empty.  A stored point equal to *query*
            is returned with distance zero.
        """
        if self._root is None:
            return None

        best: Point = self._root.point
        best_dist_sq: float = query.distance_squared_to(best)

        def _search(node: _KdNode) -> None:
            nonlocal best, best_dist_sq

            dist_sq = query.distance_squared_to(node.point)
            if dist_sq < best_dist_sq:
                best_dist_sq = dist_sq
                best = node.point

            query_coord = _coordinate(query, node.dimension)
            node_coord = _coordinate(node.point, node.dimension)

            # Visit the side of the splitting line that contains the query
            # first; it is the more likely to tighten the bound.
            if query_coord < node_coord:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            if near is not None:
                _search(near)

            # Nothing beyond the splitting line can beat the current best
            # unless the line itself is closer.
            axis_dist_sq = (query_coord - node_coord) ** 2
            if far is not None and axis_dist_sq < best_dist_sq:
                _search(far)

        _search(self._root)
        return best

    def within_radius(self, center: Point, radius: float) -> List[Point]:
        """Find all stored points within *radius* of *center* (inclusive).

        Returns
        -------
        list of Point
            Sorted by ascending distance.

        Raises
        ------
        ValueError
            If *radius* is negative.
        """
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")

        radius_sq = radius * radius
        results: List[Tuple[float, Point]] = []

        def _search(node: Optional[_KdNode]) -> None:
            if node is None:
                return

            dist_sq = center.distance_squared_to(node.point)
            if dist_sq <= radius_sq:
                results.append((dist_sq, node.point))

            diff = _coordinate(center, node.dimension) - _coordinate(node.point, node.dimension)
            near, far = (node.left, node.right) if diff < 0 else (node.right, node.left)
            _search(near)
            if diff * diff <= radius_sq:
                _search(far)

        _search(self._root)
        results.sort(key=lambda pair: pair[0])
        return [p for _, p in results]

    def k_nearest(self, query: Point, k: int) -> List[Point]:
        """Return the *k* stored points closest to *query*.

        A max-heap of size *k* keeps the farthest candidate on top so it can
        be evicted in O(log k).

        Returns
        -------
        list of Point
            Sorted by ascending distance; every point when *k* exceeds the
            tree size, and ``[]`` for ``k <= 0`` or an empty tree.
        """
        k = min(k, self._size)
        if k <= 0 or self._root is None:
            return []

        # (-dist_sq, tiebreak, point); the counter keeps Points out of comparisons.
        heap: List[Tuple[float, int, Point]] = []
        counter = 0

        def _search(node: Optional[_KdNode]) -> None:
            nonlocal counter
            if node is None:
                return

            dist_sq = query.distance_squared_to(node.point)
            if len(heap) < k:
                heapq.heappush(heap, (-dist_sq, counter, node.point))
                counter += 1
            elif dist_sq < -heap[0][0]:
                heapq.heapreplace(heap, (-dist_sq, counter, node.point))
                counter += 1

            diff = _coordinate(query, node.dimension) - _coordinate(node.point, node.dimension)
            near, far = (node.left, node.right) if diff < 0 else (node.right, node.left)
            _search(near)
            if len(heap) < k or diff * diff < -heap[0][0]:
                _search(far)

        _search(self._root)
        ordered = sorted(heap, key=lambda entry: -entry[0])
        return [p for _, _, p in ordered]

    # -- metadata ----------------------------------------------------------

    @property
    def root(self) -> Optional[_KdNode]:
        return self._root

    @property
    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        def _height(node: Optional[_KdNode]) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"KdTree(n={self._size})"
