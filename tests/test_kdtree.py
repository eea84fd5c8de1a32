import math
import random

import pytest

from ampplanner.kdtree import KDTree


@pytest.fixture
def cloud():
    rng = random.Random(1234)
    return [(rng.uniform(-5, 5), rng.uniform(-5, 5)) for _ in range(200)]


def test_nearest_of_stored_point_is_itself(cloud):
    tree = KDTree(cloud)
    for i, p in enumerate(cloud[:30]):
        assert tree.nearest_point(p) == p
        assert tree.nearest_index(p) == i


def test_no_stored_point_is_closer_than_nearest(cloud):
    tree = KDTree(cloud)
    rng = random.Random(99)
    for _ in range(50):
        q = (rng.uniform(-6, 6), rng.uniform(-6, 6))
        best = tree.nearest_point(q)
        best_d = math.dist(best, q)
        assert all(math.dist(p, q) >= best_d for p in cloud)


def test_nearest_point_index_is_consistent(cloud):
    tree = KDTree(cloud)
    q = (0.1, -0.2)
    point, index = tree.nearest_point_index(q)
    assert cloud[index] == point
    assert tree.nearest_index(q) == index
    assert tree.nearest_point(q) == point


def test_neighborhood_with_huge_radius_returns_everything(cloud):
    tree = KDTree(cloud)
    assert sorted(tree.neighborhood_indices((0, 0), 100.0)) == list(range(len(cloud)))
    assert len(tree) == len(cloud)


def test_neighborhood_zero_radius_at_stored_point(cloud):
    tree = KDTree(cloud)
    assert tree.neighborhood_indices(cloud[7], 0.0) == [7]
    assert tree.neighborhood_points(cloud[7], 0.0) == [cloud[7]]


def test_neighborhood_points_within_radius_and_complete(cloud):
    tree = KDTree(cloud)
    q, rad = (1.0, 1.0), 1.7
    found = set(tree.neighborhood_indices(q, rad))
    assert all(math.dist(cloud[i], q) <= rad for i in found)
    outside = set(range(len(cloud))) - found
    assert all(math.dist(cloud[i], q) > rad for i in outside)


def test_neighborhood_pairs_match_points_and_indices(cloud):
    tree = KDTree(cloud)
    pairs = tree.neighborhood((-2.0, 3.0), 2.0)
    assert [p for p, _ in pairs] == tree.neighborhood_points((-2.0, 3.0), 2.0)
    assert [i for _, i in pairs] == tree.neighborhood_indices((-2.0, 3.0), 2.0)
    assert all(cloud[i] == p for p, i in pairs)


def test_radius_is_inclusive():
    tree = KDTree([(0.0, 0.0), (3.0, 4.0)])
    assert sorted(tree.neighborhood_indices((0.0, 0.0), 5.0)) == [0, 1]


def test_three_dimensional_points():
    pts = [(0, 0, 0), (1, 1, 1), (5, 5, 5), (-2, 0, 1)]
    tree = KDTree(pts)
    assert tree.nearest_index((4.5, 5.2, 4.9)) == 2
    assert tree.nearest_point((0.9, 1.1, 1.0)) == (1.0, 1.0, 1.0)


def test_single_point_tree():
    tree = KDTree([(2.0, 3.0)])
    assert tree.nearest_point_index((100.0, -50.0)) == ((2.0, 3.0), 0)
    assert tree.neighborhood_indices((100.0, -50.0), 1.0) == []


def test_duplicates_are_all_reported():
    tree = KDTree([(1.0, 1.0), (1.0, 1.0), (4.0, 4.0)])
    assert sorted(tree.neighborhood_indices((1.0, 1.0), 0.5)) == [0, 1]


def test_empty_tree():
    tree = KDTree([])
    assert tree.neighborhood((0.0, 0.0), 10.0) == []
    with pytest.raises(ValueError):
        tree.nearest_point((0.0, 0.0))