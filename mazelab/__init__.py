"""Generate, solve, render and replay rectangular mazes."""

__version__ = "0.1.0"