[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazelab"
version = "0.1.0"
description = "Generate, solve and render rectangular mazes with several classic algorithms"
requires-python = ">=3.10"
keywords = ["maze", "labyrinth", "kruskal", "prim", "a-star", "wall-follower", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazelab = "mazelab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
