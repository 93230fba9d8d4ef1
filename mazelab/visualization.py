"""Step-by-step replay of how a maze was generated, as line vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from mazelab.adjacency import AdjacencyList, GenerationAction

X_START = -0.999
Y_START = -0.999
X_END = 1.0
Y_END = 1.0
POINT_SIZE = 0.0


class Viewport(NamedTuple):
    x: int
    y: int
    width: int
    height: int


def calc_viewport(width: int, height: int) -> Viewport:
    """Return the largest square centred in a ``width`` x ``height`` area."""
    length = min(width, height)
    if width <= height:
        return Viewport(0, (height - length) // 2, length, length)
    return Viewport((width - length) // 2, 0, length, length)


@dataclass
class Frame:
    """Line vertices of one replay frame, as flat ``x, y`` lists.

    ``walls`` are drawn in the wall colour; ``erased`` are drawn in the
    background colour over walls that have been broken.
    """

    walls: list[float] = field(default_factory=list)
    erased: list[float] = field(default_factory=list)


def _append_line(x0: float, y0: float, x1: float, y1: float, vertices: list[float]) -> None:
    vertices.extend((x0, Y_END - (y0 - Y_START), x1, Y_END - (y1 - Y_START)))


class Playback:
    """Moves through the recorded generation actions of a maze."""

    def __init__(self, adjacency: AdjacencyList, step: int = 1) -> None:
        if step == 0:
            raise ValueError("step must not be zero")
        self.adjacency = adjacency
        self.step = step
        self.actions = adjacency.generation_actions
        self.action_type = adjacency.generation_action_type
        self.action_seq = 0

    def _check(self) -> None:
        if not self.adjacency.is_valid():
            raise ValueError("the maze is too small to replay")
        if not self.actions:
            raise ValueError("the maze has no recorded generation actions")

    def next_frame(self) -> Frame:
        """Advance by ``step`` actions, wrapping to the start after the end."""
        self._check()
        total = len(self.actions)
        if self.action_seq == total:
            self.action_seq = 0
        else:
            self.action_seq = min(self.action_seq + self.step, total)
        return self.frame_vertices(self.action_seq)

    def prev_frame(self) -> Frame:
        """Go back by ``step`` actions, wrapping to the end before the start."""
        self._check()
        if self.action_seq == 0:
            self.action_seq = len(self.actions)
        else:
            self.action_seq = max(self.action_seq - self.step, 0)
        return self.frame_vertices(self.action_seq)

    def reset(self) -> Frame:
        """Go back to the state before any action."""
        self._check()
        self.action_seq = 0
        return self.frame_vertices(0)

    def _spacing(self) -> float:
        row_spacing = (Y_END - Y_START) / self.adjacency.row
        column_spacing = (X_END - X_START) / self.adjacency.column
        return min(row_spacing, column_spacing)

    def frame_vertices(self, action_seq: int) -> Frame:
        """Return the lines of the maze after the first ``action_seq`` actions."""
        if not 0 <= action_seq <= len(self.actions):
            raise ValueError(f"action sequence {action_seq} out of range")
        frame = Frame()
        row, column = self.adjacency.row, self.adjacency.column
        spacing = self._spacing()
        w = column * spacing
        h = row * spacing

        _append_line(X_START, Y_START, X_START + w, Y_START, frame.walls)
        _append_line(X_START, Y_START, X_START, Y_START + h, frame.walls)
        _append_line(X_START + w, Y_START + h, X_START + w, Y_START, frame.walls)
        _append_line(X_START + w, Y_START + h, X_START, Y_START + h, frame.walls)

        done = self.actions[:action_seq]
        if self.action_type is GenerationAction.BREAK_WALL:
            for r in range(row + 1):
                y = r * spacing + Y_START
                _append_line(X_START, y, X_START + w, y, frame.walls)
            for c in range(column + 1):
                x = c * spacing + X_START
                _append_line(x, Y_START, x, Y_START + h, frame.walls)
            for i, j in done:
                _append_line(*self.wall(i, j, spacing), frame.erased)
        else:
            for i, j in done:
                _append_line(*self.wall(i, j, spacing), frame.walls)
        return frame

    def wall(self, i: int, j: int, spacing: float) -> tuple[float, float, float, float]:
        """Return the wall segment ``(x0, y0, x1, y1)`` between cells ``i`` and ``j``."""
        column = self.adjacency.column
        i_row, i_column = i // column, i % column
        if i + 1 == j:
            x0 = X_START + (i_column + 1) * spacing
            y0 = Y_START + i_row * spacing + POINT_SIZE
            return (x0, y0, x0, Y_START + (i_row + 1) * spacing - POINT_SIZE)
        y0 = Y_START + (i_row + 1) * spacing
        return (
            X_START + i_column * spacing + POINT_SIZE,
            y0,
            X_START + (i_column + 1) * spacing - POINT_SIZE,
            y0,
        )