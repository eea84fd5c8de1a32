"""Collision tests and distance queries between points, segments and polygons."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from enum import IntEnum

from .geometry import Point, Polygon

Segment = Sequence[Sequence[float]]


class Orientation(IntEnum):
    """Orientation of an ordered triplet of points."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def _edges(poly: Polygon):
    verts = poly.vertices
    return zip(verts, verts[1:] + verts[:1])


def collision_point_polygon(point: Sequence[float], poly: Polygon) -> bool:
    """True when the point lies inside or on the boundary of a convex CCW polygon."""
    px, py = point
    for (ax, ay), (bx, by) in _edges(poly):
        ex, ey = bx - ax, by - ay
        # Inward normal of a CCW edge is (-ey, ex).
        if -ey * (px - ax) + ex * (py - ay) < 0:
            return False
    return True


def point_orientation(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> Orientation:
    """Orientation of the ordered triplet (p1, p2, p3)."""
    val = (p2[1] - p1[1]) * (p3[0] - p2[0]) - (p2[0] - p1[0]) * (p3[1] - p2[1])
    if val == 0.0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def on_line_segment(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> bool:
    """For collinear points, True when p2 lies on the segment p1-p3."""
    return (
        min(p1[0], p3[0]) <= p2[0] <= max(p1[0], p3[0])
        and min(p1[1], p3[1]) <= p2[1] <= max(p1[1], p3[1])
    )


def collision_line_line(line1: Segment, line2: Segment) -> bool:
    """True when two segments, each given by its first two points, intersect."""
    a, b = line1[0], line1[1]
    c, d = line2[0], line2[1]
    o1 = point_orientation(a, b, c)
    o2 = point_orientation(a, b, d)
    o3 = point_orientation(c, d, a)
    o4 = point_orientation(c, d, b)

    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == Orientation.COLLINEAR and on_line_segment(a, c, b))
        or (o2 == Orientation.COLLINEAR and on_line_segment(a, d, b))
        or (o3 == Orientation.COLLINEAR and on_line_segment(c, a, d))
        or (o4 == Orientation.COLLINEAR and on_line_segment(c, b, d))
    )


def collision_line_polygon(line: Segment, poly: Polygon) -> bool:
    """True when the segment crosses or touches any edge of the polygon."""
    return any(collision_line_line(line, edge) for edge in _edges(poly))


def collision_polygon_polygon(poly1: Polygon, poly2: Polygon) -> bool:
    """True when any edge of the first polygon meets an edge of the second."""
    return any(collision_line_polygon(edge, poly2) for edge in _edges(poly1))


def _closest_on_segment(q: Sequence[float], a: Point, b: Point) -> Point:
    vx, vy = b[0] - a[0], b[1] - a[1]
    ux, uy = a[0] - q[0], a[1] - q[1]
    vv = vx * vx + vy * vy
    vu = vx * ux + vy * uy
    if vv != 0.0:
        t = -(vu / vv)
        if 0 <= t <= 1:
            return ((1 - t) * a[0] + t * b[0], (1 - t) * a[1] + t * b[1])
    uu = ux * ux + uy * uy
    g0 = uu
    g1 = vv + 2 * vu + uu
    return a if g0 <= g1 else b


def find_closest_points(q: Sequence[float], obstacle: Polygon) -> list[Point]:
    """Closest point to q on each edge of the obstacle, in edge order."""
    return [_closest_on_segment(q, a, b) for a, b in _edges(obstacle)]


def find_closest_point(q: Sequence[float], line: Segment) -> Point:
    """Closest point to q on the segment given by the first two points of line."""
    a = (float(line[0][0]), float(line[0][1]))
    b = (float(line[1][0]), float(line[1][1]))
    return _closest_on_segment(q, a, b)


def distance_to_obstacle(q: Sequence[float], obstacle: Polygon) -> tuple[float, Point | None]:
    """Distance from q to the obstacle boundary and the boundary point reaching it.

    An obstacle without vertices gives the largest float and no point.
    """
    best_dist = sys.float_info.max
    best_point: Point | None = None
    for c in find_closest_points(q, obstacle):
        d = distance_l2(q, c)
        if d < best_dist:
            best_dist, best_point = d, c
    return best_dist, best_point


def distance_l2(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Euclidean distance between two planar points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])