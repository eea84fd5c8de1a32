[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ampplanner"
version = "0.1.0"
description = "Building blocks for 2D motion planning: collision checks, k-d tree, A* search, link kinematics, Minkowski differences and optimal assignment"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "motion planning",
    "robotics",
    "collision detection",
    "k-d tree",
    "A*",
    "inverse kinematics",
    "minkowski difference",
    "hungarian algorithm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ampplanner"]

[tool.pytest.ini_options]
addopts = "-ra"
