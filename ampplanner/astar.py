"""Weighted directed graphs, A* search and distance-to-goal heuristics."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .collision import distance_l2

Node = int
Heuristic = Callable[[Node], float]


class Graph:
    """Directed graph whose edges carry a float weight."""

    def __init__(self) -> None:
        self._out: dict[Node, list[tuple[Node, float]]] = {}
        self._in: dict[Node, list[Node]] = {}

    def connect(self, source: Node, target: Node, edge: float) -> None:
        """Add a directed edge from source to target with the given weight."""
        self._out.setdefault(source, []).append((target, float(edge)))
        self._out.setdefault(target, [])
        self._in.setdefault(target, []).append(source)
        self._in.setdefault(source, [])

    def children(self, node: Node) -> list[Node]:
        """Targets of the node's outgoing edges, in insertion order."""
        return [child for child, _ in self._out.get(node, ())]

    def outgoing_edges(self, node: Node) -> list[float]:
        """Weights of the node's outgoing edges, matching children()."""
        return [weight for _, weight in self._out.get(node, ())]

    def parents(self, node: Node) -> list[Node]:
        """Sources of the node's incoming edges, in insertion order."""
        return list(self._in.get(node, ()))

    def nodes(self) -> list[Node]:
        """Every node that takes part in at least one edge, sorted."""
        return sorted(self._out)

    def clear(self) -> None:
        """Remove every node and edge."""
        self._out.clear()
        self._in.clear()


@dataclass
class ShortestPathProblem:
    """A graph with the nodes a search starts from and aims for."""

    graph: Graph
    init_node: Node = 0
    goal_node: Node = 0


@dataclass
class GraphSearchResult:
    """Outcome of a graph search; path_cost is -1.0 when no path was found."""

    success: bool = False
    node_path: list[Node] = field(default_factory=list)
    path_cost: float = -1.0


@dataclass
class _Entry:
    node: Node
    parent: Node
    cost: float
    distance: float


class AStar:
    """A* search over a ShortestPathProblem guided by a heuristic."""

    def search(self, problem: ShortestPathProblem, heuristic: Heuristic) -> GraphSearchResult:
        """Find a path from the init node to the goal node."""
        graph = problem.graph
        init = problem.init_node
        open_list: list[_Entry] = [_Entry(init, init, heuristic(init), 0.0)]
        closed: dict[Node, _Entry] = {}
        goal_entry: _Entry | None = None

        while open_list:
            current = open_list.pop(0)
            closed[current.node] = current

            for child, weight in zip(graph.children(current.node), graph.outgoing_edges(current.node)):
                dist = current.distance + weight
                cost = heuristic(child) + dist
                existing = closed.get(child)
                if existing is None:
                    existing = next((e for e in open_list if e.node == child), None)
                    if existing is None:
                        open_list.append(_Entry(child, current.node, cost, dist))
                        continue
                if cost < existing.cost:
                    existing.cost = cost
                    existing.distance = dist
                    existing.parent = current.node

            open_list.sort(key=lambda e: e.cost)
            if not open_list:
                break
            if open_list[0].node == problem.goal_node:
                goal_entry = open_list[0]
                break

        if goal_entry is None:
            return GraphSearchResult(success=False, node_path=[], path_cost=-1.0)

        path = [goal_entry.node, goal_entry.parent]
        node = goal_entry.parent
        while path[-1] != init:
            node = closed[node].parent
            path.append(node)
        path.reverse()
        return GraphSearchResult(success=True, node_path=path, path_cost=goal_entry.distance)


class DistanceHeuristic:
    """Straight-line distance in the plane from each sampled point to the goal."""

    def __init__(self, problem: ShortestPathProblem, sampled_points: Sequence[Sequence[float]]) -> None:
        goal = sampled_points[problem.goal_node]
        self._values = {i: distance_l2(p, goal) for i, p in enumerate(sampled_points)}

    def __call__(self, node: Node) -> float:
        return self._values[node]


class CentralizedDistanceHeuristic:
    """Sum over agents of each agent's planar distance to its goal position."""

    def __init__(self, problem: ShortestPathProblem, sampled_points: Sequence[Sequence[float]]) -> None:
        goal = sampled_points[problem.goal_node]
        n = len(goal)
        self._values = {
            i: sum(distance_l2(p[j:j + 2], goal[j:j + 2]) for j in range(0, n, 2))
            for i, p in enumerate(sampled_points)
        }

    def __call__(self, node: Node) -> float:
        return self._values[node]