"""Maze solvers: A* search and wall following."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from mazelab.adjacency import AdjacencyList
from mazelab.priority_queue import MutablePriorityQueue
from mazelab.solution import Solution
from mazelab.util import ordered_pair


def manhattan_distance(p: int, q: int, width: int) -> int:
    """Grid distance between cells ``p`` and ``q`` moving only along axes."""
    x1, y1 = p % width, p // width
    x2, y2 = q % width, q // width
    return abs(x1 - x2) + abs(y1 - y2)


def euclidean_distance(p: int, q: int, width: int) -> int:
    """Straight-line distance between cells ``p`` and ``q``, truncated."""
    x1, y1 = p % width, p // width
    x2, y2 = q % width, q // width
    return int(math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2))


def zero_distance(p: int, q: int, width: int) -> int:
    """A heuristic that always estimates zero, turning A* into Dijkstra."""
    return 0


class Heuristic(Enum):
    """Estimate of the remaining distance used by A*."""

    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    ZERO = "zero"


_HEURISTICS: dict[Heuristic, Callable[[int, int, int], int]] = {
    Heuristic.MANHATTAN: manhattan_distance,
    Heuristic.EUCLIDEAN: euclidean_distance,
    Heuristic.ZERO: zero_distance,
}


@dataclass
class AStarNode:
    """A cell in the A* open set with its cost values."""

    id: int = -1
    f: int = 0
    g: int = 0
    h: int = 0


class AStar:
    """Finds the path from the first cell to the last one with A*."""

    def __init__(self, heuristic: Heuristic) -> None:
        self.heuristic = heuristic

    def solve(self, adjacency: AdjacencyList) -> Solution:
        """Return the solving path, from the last cell back to the first.

        An empty solution is returned when the last cell cannot be reached.
        """
        column = adjacency.column
        h_func = _HEURISTICS[self.heuristic]
        begin = 0
        end = adjacency.node_count - 1

        open_queue: MutablePriorityQueue[AStarNode] = MutablePriorityQueue(
            lambda p, q: p.f < q.f
        )
        closed: set[int] = set()
        handles: dict[int, int] = {begin: open_queue.push(AStarNode(begin))}
        parent: dict[int, int] = {}

        solution = Solution()
        while open_queue:
            current = open_queue.pop()
            del handles[current.id]
            closed.add(current.id)
            for neighbor in adjacency.neighbors(current.id):
                solution.accessed.add(ordered_pair(current.id, neighbor))
                if neighbor == end:
                    parent[neighbor] = current.id
                    cell = end
                    while cell != begin:
                        solution.path.append((cell, parent[cell]))
                        cell = parent[cell]
                    return solution

                if neighbor in closed:
                    continue
                if neighbor not in handles:
                    g = current.g + 1
                    h = h_func(neighbor, end, column)
                    handles[neighbor] = open_queue.push(AStarNode(neighbor, g + h, g, h))
                    parent[neighbor] = current.id
                else:
                    handle = handles[neighbor]
                    node = open_queue.value(handle)
                    new_g = current.g + 1
                    if new_g < node.g:
                        open_queue.update(handle, replace(node, g=new_g, f=node.h + new_g))
                        parent[neighbor] = current.id

        return Solution()


class Hand(Enum):
    """Which hand keeps touching the wall."""

    LEFT = "left"
    RIGHT = "right"


class _Direction(IntEnum):
    DOWN = 0
    LEFT = 1
    UP = 2
    RIGHT = 3


class WallFollower:
    """Walks the maze keeping one hand on the wall."""

    def __init__(self, hand: Hand) -> None:
        self.hand = hand

    def solve(self, adjacency: AdjacencyList) -> Solution:
        """Walk from the first cell to the last and return the walk.

        Raises ValueError when the walk returns to a state it has been in
        without reaching the last cell.
        """
        column = adjacency.column
        delta = {
            _Direction.UP: -column,
            _Direction.DOWN: column,
            _Direction.LEFT: -1,
            _Direction.RIGHT: 1,
        }
        turn_delta, dead_delta = (1, -1) if self.hand is Hand.RIGHT else (-1, 1)

        def rotate(direction: _Direction, by: int) -> _Direction:
            return _Direction((direction + by) & 0x3)

        forward = _Direction.DOWN
        result = Solution()
        current = 0
        end = adjacency.node_count - 1
        seen: set[tuple[int, _Direction]] = set()
        while current != end:
            state = (current, forward)
            if state in seen:
                raise ValueError("the last cell cannot be reached by wall following")
            seen.add(state)

            neighbors = adjacency.neighbors(current)
            turn = rotate(forward, turn_delta)
            turn_node = current + delta[turn]
            forward_node = current + delta[forward]
            if turn_node in neighbors:
                result.trace.append((current, turn_node))
                forward = turn
                current = turn_node
            elif forward_node in neighbors:
                result.trace.append((current, forward_node))
                current = forward_node
            else:
                forward = rotate(forward, dead_delta)
        result.setup_use_trace()
        return result