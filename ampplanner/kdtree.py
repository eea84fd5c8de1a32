"""k-d tree for nearest-neighbour and radius queries."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

PointT = tuple[float, ...]


@dataclass
class KDNode:
    """A node of the tree: a point, its original index and two subtrees."""

    point: PointT
    index: int
    left: KDNode | None = None
    right: KDNode | None = None


def _dist2(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((x - y) * (x - y) for x, y in zip(a, b))


class KDTree:
    """Balanced k-d tree built over a fixed list of points."""

    def __init__(self, points: Iterable[Sequence[float]]) -> None:
        indexed = [(tuple(float(c) for c in p), i) for i, p in enumerate(points)]
        self._root = self._make_tree(indexed, 0)

    def __len__(self) -> int:
        return self._count(self._root)

    @classmethod
    def _count(cls, node: KDNode | None) -> int:
        return 0 if node is None else 1 + cls._count(node.left) + cls._count(node.right)

    @classmethod
    def _make_tree(cls, items: list[tuple[PointT, int]], level: int) -> KDNode | None:
        if not items:
            return None
        dim = len(items[0][0])
        if len(items) > 1:
            items = sorted(items, key=lambda item: item[0][level])
        mid = len(items) // 2
        point, index = items[mid]
        next_level = (level + 1) % dim if dim > 0 else 0
        left = cls._make_tree(items[:mid], next_level) if dim > 0 else None
        right = cls._make_tree(items[mid + 1:], next_level) if dim > 0 else None
        return KDNode(point, index, left, right)

    def _nearest_node(
        self,
        branch: KDNode | None,
        pt: Sequence[float],
        level: int,
        best: KDNode,
        best_dist: float,
    ) -> KDNode | None:
        if branch is None:
            return None
        d = _dist2(branch.point, pt)
        dx = branch.point[level] - pt[level]
        if d < best_dist:
            best, best_dist = branch, d

        next_level = (level + 1) % len(branch.point)
        section, other = (branch.left, branch.right) if dx > 0 else (branch.right, branch.left)

        further = self._nearest_node(section, pt, next_level, best, best_dist)
        if further is not None:
            dl = _dist2(further.point, pt)
            if dl < best_dist:
                best, best_dist = further, dl
        # Only descend the far side when the splitting plane is closer than the best.
        if dx * dx < best_dist:
            further = self._nearest_node(other, pt, next_level, best, best_dist)
            if further is not None:
                dl = _dist2(further.point, pt)
                if dl < best_dist:
                    best, best_dist = further, dl
        return best

    def _nearest(self, pt: Sequence[float]) -> KDNode:
        if self._root is None:
            raise ValueError("nearest-neighbour query on an empty tree")
        node = self._nearest_node(self._root, pt, 0, self._root, _dist2(self._root.point, pt))
        assert node is not None
        return node

    def nearest_point(self, pt: Sequence[float]) -> PointT:
        """Stored point closest to pt."""
        return self._nearest(pt).point

    def nearest_index(self, pt: Sequence[float]) -> int:
        """Original index of the stored point closest to pt."""
        return self._nearest(pt).index

    def nearest_point_index(self, pt: Sequence[float]) -> tuple[PointT, int]:
        """Closest stored point together with its original index."""
        node = self._nearest(pt)
        return node.point, node.index

    def _neighborhood(
        self, branch: KDNode | None, pt: Sequence[float], r2: float, level: int
    ) -> list[tuple[PointT, int]]:
        if branch is None:
            return []
        found: list[tuple[PointT, int]] = []
        dx = branch.point[level] - pt[level]
        if _dist2(branch.point, pt) <= r2:
            found.append((branch.point, branch.index))

        next_level = (level + 1) % len(pt)
        section, other = (branch.left, branch.right) if dx > 0 else (branch.right, branch.left)
        found.extend(self._neighborhood(section, pt, r2, next_level))
        if dx * dx < r2:
            found.extend(self._neighborhood(other, pt, r2, next_level))
        return found

    def neighborhood(self, pt: Sequence[float], rad: float) -> list[tuple[PointT, int]]:
        """All (point, index) pairs within distance rad of pt, inclusive."""
        return self._neighborhood(self._root, pt, rad * rad, 0)

    def neighborhood_points(self, pt: Sequence[float], rad: float) -> list[PointT]:
        """All stored points within distance rad of pt."""
        return [p for p, _ in self.neighborhood(pt, rad)]

    def neighborhood_indices(self, pt: Sequence[float], rad: float) -> list[int]:
        """Original indices of all stored points within distance rad of pt."""
        return [i for _, i in self.neighborhood(pt, rad)]


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points of equal dimension."""
    return math.sqrt(_dist2(a, b))