"""Planar serial link manipulator with forward and inverse kinematics."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import Point


class LinkManipulator:
    """Chain of revolute links anchored at a base location."""

    def __init__(self, link_lengths: Sequence[float], base_location: Sequence[float] = (0.0, 0.0)) -> None:
        self.link_lengths: tuple[float, ...] = tuple(float(length) for length in link_lengths)
        self.base_location: Point = (float(base_location[0]), float(base_location[1]))

    def n_links(self) -> int:
        return len(self.link_lengths)

    def reach(self) -> float:
        """Total length of all links."""
        return sum(self.link_lengths)

    def joint_location(self, state: Sequence[float], joint_index: int) -> Point:
        """Position of a joint; index 0 is the base and n_links() the end effector."""
        n = self.n_links()
        if not 0 <= joint_index <= n:
            raise ValueError(f"joint index {joint_index} outside 0..{n}")
        if len(state) < min(joint_index + 1, n):
            raise ValueError("state has too few joint angles")
        x, y = 0.0, 0.0
        heading = 0.0
        for i in range(joint_index + 1):
            rotation = 0.0 if i == n else state[i]
            translation = 0.0 if i == 0 else self.link_lengths[i - 1]
            x += translation * math.cos(heading)
            y += translation * math.sin(heading)
            heading += rotation
        return (x + self.base_location[0], y + self.base_location[1])

    def configuration_from_ik(self, end_effector_location: Sequence[float]) -> list[float]:
        """Joint angles in [0, 2*pi) placing the end effector at the given point."""
        n = self.n_links()
        lengths = self.link_lengths
        target = (float(end_effector_location[0]), float(end_effector_location[1]))
        arm_reach = self.reach()
        distance = math.dist(self.base_location, target)
        if distance > arm_reach * (1 + 1e-12):
            raise ValueError("end effector location is out of reach")

        bend = 1
        if distance == arm_reach:
            bend = n - 1
        else:
            for i in range(n - 1, 0, -1):
                arm_reach -= lengths[i]
                if arm_reach <= distance:
                    bend = i
                    break

        angles = [0.0] * n
        cumulative = 0.0
        for i in range(n):
            trial = list(angles)
            trial[i] = 0.0
            joint = self.joint_location(trial, i)
            direction = math.atan2(target[1] - joint[1], target[0] - joint[0])
            to_target = math.dist(joint, target)

            if i < bend:
                near = sum(lengths[i:bend])
                far = sum(lengths[bend:])
            else:
                near = sum(lengths[i:])
                far = 0.0

            denominator = 2 * near * to_target
            if denominator == 0:
                raise ValueError("degenerate configuration for inverse kinematics")
            ratio = (near ** 2 + to_target ** 2 - far ** 2) / denominator
            angle = math.acos(max(-1.0, min(1.0, ratio)))

            joint_angle = angle + direction - cumulative
            if joint_angle < 0.0:
                joint_angle += 2 * math.pi
            angles[i] = joint_angle
            cumulative += joint_angle
        return angles