[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigidplane"
version = "0.1.0"
description = "A small 2D rigid-body physics engine with convex collision handling, force creators and pygame-backed assets"
requires-python = ">=3.10"
keywords = ["physics", "rigid body", "2d", "collision", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rigidplane"]

[tool.pytest.ini_options]
addopts = "-ra"
