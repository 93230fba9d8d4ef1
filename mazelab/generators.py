"""Maze generators: depth-first search, Kruskal, Prim and recursive division."""

from __future__ import annotations

import random

from mazelab.adjacency import AdjacencyList
from mazelab.unionfind import UnionFind
from mazelab.util import StopWatch, ordered_pair


def _check_size(row: int, column: int) -> None:
    if row < 2 or column < 2:
        raise ValueError(f"grid {row}x{column} is too small; need at least 2x2")


class _RandomSet:
    """Set of edges that supports picking a uniformly random member."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []
        self._index: dict[tuple[int, int], int] = {}

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: tuple[int, int]) -> None:
        if item not in self._index:
            self._index[item] = len(self._items)
            self._items.append(item)

    def remove(self, item: tuple[int, int]) -> None:
        position = self._index.pop(item)
        last = self._items.pop()
        if last != item:
            self._items[position] = last
            self._index[last] = position

    def choice(self, rng: random.Random) -> tuple[int, int]:
        return self._items[rng.randrange(len(self._items))]


class _Generator:
    def __init__(self, row: int, column: int, rng: random.Random | None = None) -> None:
        self.row = row
        self.column = column
        self._rng = rng if rng is not None else random.Random()


class DepthFirstSearch(_Generator):
    """Randomised depth-first search: carves passages by backtracking."""

    def __init__(self, row: int, column: int, rng: random.Random | None = None) -> None:
        super().__init__(row, column, rng)

    def generate(self) -> AdjacencyList:
        """Return a perfect maze built by breaking walls."""
        _check_size(self.row, self.column)
        result = AdjacencyList(self.row, self.column)
        visited = [False] * result.node_count
        visited[0] = True
        stack = [0]
        while stack:
            last = stack[-1]
            cells = result.surround(last)
            self._rng.shuffle(cells)
            for cell in cells:
                if not visited[cell]:
                    visited[cell] = True
                    result.connect(last, cell)
                    stack.append(cell)
                    break
            else:
                stack.pop()
        return result


class Kruskal(_Generator):
    """Randomised Kruskal: joins cells along shuffled edges without cycles."""

    def __init__(self, row: int, column: int, rng: random.Random | None = None) -> None:
        super().__init__(row, column, rng)

    def generate(self) -> AdjacencyList:
        """Return a perfect maze built by breaking walls."""
        _check_size(self.row, self.column)
        result = AdjacencyList(self.row, self.column)
        components = UnionFind(result.node_count)
        edges = [
            (i, cell)
            for i in range(result.node_count)
            for cell in result.surround(i)
            if i > cell
        ]
        self._rng.shuffle(edges)
        for first, second in edges:
            if not components.connected(first, second):
                components.connect(first, second)
                result.connect(first, second)
        return result


class Prim(_Generator):
    """Randomised Prim: grows the maze from a random frontier edge."""

    def __init__(self, row: int, column: int, rng: random.Random | None = None) -> None:
        super().__init__(row, column, rng)

    def generate(self) -> AdjacencyList:
        """Return a perfect maze built by breaking walls."""
        _check_size(self.row, self.column)
        result = AdjacencyList(self.row, self.column)
        linked = [False] * result.node_count
        linked[0] = True

        paths = _RandomSet()
        paths.add((0, 1))
        paths.add((0, self.column))

        while paths:
            first, second = paths.choice(self._rng)
            result.connect(first, second)
            current = first if not linked[first] else second
            linked[current] = True
            for cell in result.surround(current):
                path = ordered_pair(cell, current)
                if not linked[cell]:
                    paths.add(path)
                else:
                    paths.remove(path)
        return result


class RecursiveDivision(_Generator):
    """Recursive division: splits open chambers with walls that keep three gaps."""

    def __init__(self, row: int, column: int, rng: random.Random | None = None) -> None:
        super().__init__(row, column, rng)

    def generate(self) -> AdjacencyList:
        """Return a perfect maze built by adding walls to an open grid."""
        _check_size(self.row, self.column)
        with StopWatch("RecursiveDivision.generate"):
            result = AdjacencyList(self.row, self.column)
            result.connect_all_surround()
            chambers = [(0, 0, self.column - 1, self.row - 1)]
            while chambers:
                left, top, right, bottom = chambers.pop()
                chambers.extend(reversed(self._divide(result, left, top, right, bottom)))
            return result

    def _divide(
        self, maze: AdjacencyList, left: int, top: int, right: int, bottom: int
    ) -> list[tuple[int, int, int, int]]:
        """Wall off one chamber (inclusive bounds) and return its four parts."""
        if right - left < 1 or bottom - top < 1:
            return []
        rng = self._rng
        column = self.column
        x = rng.randrange(right - left) + left
        y = rng.randrange(bottom - top) + top

        walls = [(y * column + i, (y + 1) * column + i) for i in range(left, right + 1)]
        walls += [(i * column + x, i * column + x + 1) for i in range(top, bottom + 1)]

        # The one side of the cross, seen from (x, y), left without a gap:
        # 0 top, 1 bottom, 2 left, 3 right.
        solid = rng.randrange(4)
        gaps = (
            rng.randrange(y - top + 1) + top,
            rng.randrange(bottom - y) + y + 1,
            rng.randrange(x - left + 1) + left,
            rng.randrange(right - x) + x + 1,
        )
        for side, gap in enumerate(gaps):
            if side == solid:
                continue
            if side <= 1:
                walls.remove((gap * column + x, gap * column + x + 1))
            else:
                walls.remove((y * column + gap, (y + 1) * column + gap))

        for p, q in walls:
            maze.disconnect(p, q)

        return [
            (left, top, x, y),
            (x + 1, top, right, y),
            (left, y + 1, x, bottom),
            (x + 1, y + 1, right, bottom),
        ]