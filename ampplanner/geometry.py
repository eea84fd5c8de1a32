"""Planar geometry and motion-planning problem types."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

Point = tuple[float, float]


def _as_point(p: Sequence[float]) -> Point:
    return (float(p[0]), float(p[1]))


class Polygon:
    """A simple polygon given by its vertices in counter-clockwise order."""

    __slots__ = ("vertices",)

    def __init__(self, vertices: Iterable[Sequence[float]]) -> None:
        self.vertices: tuple[Point, ...] = tuple(_as_point(v) for v in vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __repr__(self) -> str:
        return f"Polygon({list(self.vertices)!r})"


@dataclass
class Problem2D:
    """Single point-agent planning problem in a bounded planar workspace."""

    q_init: Point
    q_goal: Point
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    obstacles: list[Polygon] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.q_init = _as_point(self.q_init)
        self.q_goal = _as_point(self.q_goal)


@dataclass
class Path2D:
    """Sequence of planar waypoints."""

    waypoints: list[Point] = field(default_factory=list)

    def length(self) -> float:
        """Sum of the straight-line distances between consecutive waypoints."""
        return sum(math.dist(a, b) for a, b in zip(self.waypoints, self.waypoints[1:]))


@dataclass
class AgentProperties:
    """Start, goal and disk radius of one agent."""

    q_init: Point
    q_goal: Point
    radius: float

    def __post_init__(self) -> None:
        self.q_init = _as_point(self.q_init)
        self.q_goal = _as_point(self.q_goal)


@dataclass
class MultiAgentProblem2D:
    """Planning problem for several disk agents sharing a workspace."""

    agent_properties: list[AgentProperties]
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    obstacles: list[Polygon] = field(default_factory=list)

    def num_agents(self) -> int:
        return len(self.agent_properties)


@dataclass
class MultiAgentPath2D:
    """One path per agent, in the order of the problem's agents."""

    agent_paths: list[Path2D] = field(default_factory=list)