import sys

import pytest

from ampplanner.collision import (
    Orientation,
    collision_line_line,
    collision_line_polygon,
    collision_point_polygon,
    collision_polygon_polygon,
    distance_l2,
    distance_to_obstacle,
    find_closest_point,
    find_closest_points,
    on_line_segment,
    point_orientation,
)
from ampplanner.geometry import Polygon

SQUARE = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


def test_point_inside_square():
    assert collision_point_polygon((0.5, 0.5), SQUARE) is True


def test_point_outside_square():
    assert collision_point_polygon((1.5, 0.5), SQUARE) is False
    assert collision_point_polygon((-0.1, 0.5), SQUARE) is False


def test_point_on_boundary_counts_as_collision():
    assert collision_point_polygon((1.0, 0.5), SQUARE) is True
    assert collision_point_polygon((0.0, 0.0), SQUARE) is True


def test_orientation_values():
    assert point_orientation((0, 0), (1, 1), (2, 2)) == Orientation.COLLINEAR
    assert point_orientation((0, 0), (1, 1), (2, 0)) == Orientation.CLOCKWISE
    assert point_orientation((0, 0), (1, 1), (0, 2)) == Orientation.COUNTERCLOCKWISE
    assert int(Orientation.CLOCKWISE) == 1
    assert int(Orientation.COUNTERCLOCKWISE) == 2


def test_orientation_reverses_when_order_reverses():
    a, b, c = (0.3, 1.2), (2.5, -0.7), (1.1, 4.0)
    forward = point_orientation(a, b, c)
    backward = point_orientation(c, b, a)
    assert {forward, backward} == {Orientation.CLOCKWISE, Orientation.COUNTERCLOCKWISE}


def test_on_line_segment():
    assert on_line_segment((0, 0), (1, 1), (2, 2)) is True
    assert on_line_segment((0, 0), (3, 3), (2, 2)) is False


def test_crossing_segments_collide():
    assert collision_line_line([(0, 0), (2, 2)], [(0, 2), (2, 0)]) is True


def test_parallel_segments_do_not_collide():
    assert collision_line_line([(0, 0), (2, 0)], [(0, 1), (2, 1)]) is False


def test_collinear_overlap_and_touching():
    assert collision_line_line([(0, 0), (2, 0)], [(1, 0), (3, 0)]) is True
    assert collision_line_line([(0, 0), (2, 0)], [(2, 0), (2, 5)]) is True
    assert collision_line_line([(0, 0), (1, 0)], [(2, 0), (3, 0)]) is False


def test_collision_line_line_is_symmetric():
    l1 = [(0.1, 0.2), (3.0, 1.5)]
    l2 = [(1.0, -1.0), (1.5, 2.0)]
    assert collision_line_line(l1, l2) == collision_line_line(l2, l1)


def test_line_through_polygon():
    assert collision_line_polygon([(-1, 0.5), (2, 0.5)], SQUARE) is True


def test_line_outside_polygon():
    assert collision_line_polygon([(2, 2), (3, 3)], SQUARE) is False


def test_line_wholly_inside_polygon_is_not_an_edge_collision():
    assert collision_line_polygon([(0.2, 0.2), (0.8, 0.8)], SQUARE) is False


def test_polygon_polygon():
    overlapping = Polygon([(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)])
    far = Polygon([(5, 5), (6, 5), (6, 6), (5, 6)])
    assert collision_polygon_polygon(SQUARE, overlapping) is True
    assert collision_polygon_polygon(SQUARE, far) is False


def test_distance_to_obstacle_side():
    dist, closest = distance_to_obstacle((2.0, 0.5), SQUARE)
    assert dist == pytest.approx(1.0)
    assert closest == pytest.approx((1.0, 0.5))


def test_distance_to_obstacle_matches_its_closest_point():
    q = (-0.7, 2.3)
    dist, closest = distance_to_obstacle(q, SQUARE)
    assert dist == pytest.approx(distance_l2(q, closest))
    assert all(dist <= distance_l2(q, c) for c in find_closest_points(q, SQUARE))


def test_distance_to_empty_obstacle():
    dist, closest = distance_to_obstacle((0, 0), Polygon([]))
    assert dist == sys.float_info.max
    assert closest is None


def test_closest_points_one_per_edge_and_on_edge():
    q = (0.3, 3.0)
    points = find_closest_points(q, SQUARE)
    assert len(points) == len(SQUARE)
    verts = SQUARE.vertices
    for c, a, b in zip(points, verts, verts[1:] + verts[:1]):
        assert on_line_segment(a, c, b)


def test_closest_point_beyond_endpoints():
    line = [(0.0, 0.0), (2.0, 0.0)]
    assert find_closest_point((-3.0, 1.0), line) == (0.0, 0.0)
    assert find_closest_point((5.0, -1.0), line) == (2.0, 0.0)


def test_closest_point_on_degenerate_segment():
    assert find_closest_point((4.0, 4.0), [(1.0, 1.0), (1.0, 1.0)]) == (1.0, 1.0)


def test_distance_l2():
    assert distance_l2((0, 0), (3, 4)) == pytest.approx(5.0)
    assert distance_l2((1.5, -2.0), (-0.5, 7.0)) == pytest.approx(distance_l2((-0.5, 7.0), (1.5, -2.0)))
    assert distance_l2((2.0, 2.0), (2.0, 2.0)) == 0