"""Motion-planning building blocks: geometry, collision checks, k-d tree, A* search, kinematics, Minkowski differences and assignment."""

__version__ = "0.1.0"
__all__ = [
    "astar",
    "collision",
    "geometry",
    "hungarian",
    "kdtree",
    "manipulator",
    "minkowski",
]