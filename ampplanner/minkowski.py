"""Configuration-space obstacles of a translating polygonal robot."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import Point, Polygon


def vertex_angle(vi: Sequence[float], vip1: Sequence[float]) -> float:
    """Direction of the edge from vi to vip1, in radians within [0, 2*pi)."""
    angle = math.atan2(vip1[1] - vi[1], vip1[0] - vi[0])
    return angle if angle >= 0 else 2 * math.pi + angle


def rotate_polygon(poly: Polygon, angle: float) -> Polygon:
    """Rotate a polygon counter-clockwise by angle about its first vertex."""
    if not poly.vertices:
        raise ValueError("cannot rotate a polygon without vertices")
    c, s = math.cos(angle), math.sin(angle)
    rx, ry = poly.vertices[0]
    return Polygon(
        (rx + c * (x - rx) - s * (y - ry), ry + s * (x - rx) + c * (y - ry))
        for x, y in poly.vertices
    )


def _reflected_from_lowest(robot: Polygon) -> list[Point]:
    inverted = [(-x, -y) for x, y in robot.vertices]
    start = min(range(len(inverted)), key=lambda k: inverted[k][1])
    return inverted[start:] + inverted[:start]


def minkowski_difference(robot: Polygon, obstacle: Polygon) -> Polygon:
    """C-space obstacle of a convex robot translating around a convex obstacle.

    Both polygons are given counter-clockwise; the obstacle is expected to
    start at its lowest vertex.
    """
    if not robot.vertices or not obstacle.vertices:
        raise ValueError("both polygons need at least one vertex")

    obs = list(obstacle.vertices)
    inv = _reflected_from_lowest(robot)
    n_o, n_r = len(obs), len(inv)

    vertices: list[Point] = []
    i = j = 0
    while i < n_o or j < n_r:
        a, b = obs[i % n_o], inv[j % n_r]
        vertices.append((a[0] + b[0], a[1] + b[1]))

        obstacle_angle = vertex_angle(obs[i % n_o], obs[(i + 1) % n_o])
        robot_angle = vertex_angle(inv[j % n_r], inv[(j + 1) % n_r])
        if i == n_o:
            obstacle_angle = 2 * math.pi
        elif j == n_r:
            robot_angle = 2 * math.pi

        if obstacle_angle < robot_angle:
            i += 1
        elif obstacle_angle > robot_angle:
            j += 1
        else:
            i += 1
            j += 1

    return Polygon(vertices)


def minkowski_difference_rotations(
    robot: Polygon, obstacle: Polygon, num_rotations: int
) -> list[tuple[float, Polygon]]:
    """C-space obstacle slices for evenly spaced robot orientations.

    Returns (angle, polygon) pairs for angles 2*pi*r/num_rotations, the robot
    being rotated about its first vertex.
    """
    slices: list[tuple[float, Polygon]] = []
    for r in range(num_rotations):
        angle = 2 * math.pi * r / num_rotations
        slices.append((angle, minkowski_difference(rotate_polygon(robot, angle), obstacle)))
    return slices