"""Grid adjacency list describing which maze cells are joined."""

from __future__ import annotations

from enum import Enum

from mazelab.util import ordered_pair


class GenerationAction(Enum):
    """How the recorded generation actions change the maze."""

    BUILD_WALL = "build_wall"
    BREAK_WALL = "break_wall"


class AdjacencyList:
    """Cells of a ``row`` x ``column`` grid, indexed row by row.

    ``surround(i)`` lists the grid cells next to ``i`` (up, down, left, right);
    ``neighbors(i)`` lists the cells actually connected to ``i``.
    """

    def __init__(self, row: int = 0, column: int = 0) -> None:
        self.row = row
        self.column = column
        count = max(0, row * column)
        self._neighbors: list[list[int]] = [[] for _ in range(count)]
        self._surround: list[list[int]] = [[] for _ in range(count)]
        self.generation_action_type = GenerationAction.BREAK_WALL
        self._actions: list[tuple[int, int]] = []
        self._fill_surround()

    def _fill_surround(self) -> None:
        for i, cells in enumerate(self._surround):
            x, y = i % self.column, i // self.column
            if y > 0:
                cells.append(i - self.column)
            if y < self.row - 1:
                cells.append(i + self.column)
            if x > 0:
                cells.append(i - 1)
            if x < self.column - 1:
                cells.append(i + 1)

    @property
    def node_count(self) -> int:
        return self.row * self.column

    @property
    def generation_actions(self) -> list[tuple[int, int]]:
        return list(self._actions)

    @property
    def generation_action_count(self) -> int:
        return len(self._actions)

    def is_valid(self) -> bool:
        """Return whether the grid has at least two rows and two columns."""
        return self.row > 1 and self.column > 1

    def valid_index(self, i: int) -> bool:
        return 0 <= i < self.node_count

    def _check_index(self, i: int) -> None:
        if not self.valid_index(i):
            raise IndexError(f"cell index {i} out of range for {self.node_count} cells")

    def _check_edit(self, i: int, j: int) -> None:
        if not self.is_valid():
            raise ValueError(f"grid {self.row}x{self.column} is too small")
        self._check_index(i)
        self._check_index(j)

    def connect_all_surround(self) -> None:
        """Join every cell to all of its grid neighbours; later edits build walls."""
        if not self.is_valid():
            raise ValueError(f"grid {self.row}x{self.column} is too small")
        self.generation_action_type = GenerationAction.BUILD_WALL
        self._neighbors = [list(cells) for cells in self._surround]

    def connect(self, i: int, j: int) -> None:
        """Join cells ``i`` and ``j`` and record the action."""
        self._check_edit(i, j)
        self._neighbors[i].append(j)
        self._neighbors[j].append(i)
        self._actions.append(ordered_pair(i, j))

    def disconnect(self, i: int, j: int) -> None:
        """Separate cells ``i`` and ``j`` and record the action."""
        self._check_edit(i, j)
        if j not in self._neighbors[i] or i not in self._neighbors[j]:
            raise ValueError(f"cells {i} and {j} are not connected")
        self._neighbors[i].remove(j)
        self._neighbors[j].remove(i)
        self._actions.append(ordered_pair(i, j))

    def neighbors(self, i: int) -> list[int]:
        """Cells connected to ``i``."""
        self._check_index(i)
        return self._neighbors[i]

    def surround(self, i: int) -> list[int]:
        """Grid cells adjacent to ``i``."""
        self._check_index(i)
        return self._surround[i]

    def neighbor_stat(self) -> list[int]:
        """Return how many cells have 1, 2, 3 and 4 neighbours."""
        if not self.is_valid():
            raise ValueError(f"grid {self.row}x{self.column} is too small")
        result = [0, 0, 0, 0]
        for i, cells in enumerate(self._neighbors):
            if not 1 <= len(cells) <= 4:
                raise ValueError(f"cell {i} has {len(cells)} neighbours")
            result[len(cells) - 1] += 1
        return result