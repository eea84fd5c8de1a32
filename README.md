# ampplanner

Building blocks for motion planning in 2D workspaces with polygonal
obstacles, in plain Python with no third-party dependencies.

## Modules

- `ampplanner.geometry`: problem and path types. `Polygon` (vertices in
  counter-clockwise order), `Problem2D` for a point agent, `Path2D` with
  `length()`, and for disk agents `AgentProperties`, `MultiAgentProblem2D`
  (with `num_agents()`) and `MultiAgentPath2D`.
- `ampplanner.collision`: `collision_point_polygon`, `collision_line_line`,
  `collision_line_polygon`, `collision_polygon_polygon`, `point_orientation`
  and `on_line_segment`. It also has distance queries: `distance_l2`,
  `find_closest_point` (on a segment), `find_closest_points` (one per
  obstacle edge) and `distance_to_obstacle`, which returns the distance and
  the nearest boundary point.
- `ampplanner.kdtree`: `KDTree` with `nearest_point`, `nearest_index`,
  `nearest_point_index`, and radius queries `neighborhood`,
  `neighborhood_points` and `neighborhood_indices`. A nearest-neighbour query
  on an empty tree raises `ValueError`.
- `ampplanner.astar`: a directed weighted `Graph`, `ShortestPathProblem`, and
  `AStar.search`, which returns a `GraphSearchResult`. The heuristics are
  `DistanceHeuristic`, the planar distance to the goal point, and
  `CentralizedDistanceHeuristic`, the sum of per-agent distances for stacked
  multi-agent configurations.
- `ampplanner.manipulator`: `LinkManipulator` with forward kinematics
  (`joint_location`) and inverse kinematics (`configuration_from_ik`, angles
  in `[0, 2*pi)`).
- `ampplanner.minkowski`: `minkowski_difference` gives the C-space obstacle
  of a convex robot translating around a convex obstacle.
  `minkowski_difference_rotations` gives one slice per evenly spaced robot
  orientation. The module also has `rotate_polygon` and `vertex_angle`.
- `ampplanner.hungarian`: `solve_assignment` gives the minimum-cost
  assignment of rows to columns of a non-negative rectangular cost matrix.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import math

from ampplanner.astar import AStar, DistanceHeuristic, Graph, ShortestPathProblem
from ampplanner.collision import collision_line_polygon
from ampplanner.geometry import Polygon
from ampplanner.hungarian import solve_assignment
from ampplanner.kdtree import KDTree
from ampplanner.manipulator import LinkManipulator

box = Polygon([(4.0, 0.0), (6.0, 0.0), (6.0, 7.0), (4.0, 7.0)])
print(collision_line_polygon([(1.0, 1.0), (9.0, 1.0)], box))   # True

tree = KDTree([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
print(tree.nearest_index((1.2, 0.3)))                          # 1

graph = Graph()
graph.connect(0, 1, 1.0)
graph.connect(1, 2, 1.0)
graph.connect(0, 2, 3.0)
problem = ShortestPathProblem(graph, init_node=0, goal_node=2)
heuristic = DistanceHeuristic(problem, [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
result = AStar().search(problem, heuristic)
print(result.node_path, result.path_cost)                      # [0, 1, 2] 2.0

arm = LinkManipulator([1.0, 1.0])
print(arm.joint_location([0.0, math.pi / 2], 2))               # about (1.0, 1.0)

print(solve_assignment([[4, 1, 3], [2, 0, 5], [3, 2, 2]]))     # cost 5.0, [1, 0, 2]
```

## What the package does not do

The package provides the geometric and search components that planners are
built from. It does not include ready-made sampling-based planners such as
probabilistic roadmaps or RRTs for single or multiple agents. It does not
build a grid configuration space for a manipulator. It has no plotting and
no command-line program.