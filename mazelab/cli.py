"""Command line front end: generate a maze, solve it and report statistics."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from mazelab.adjacency import AdjacencyList
from mazelab.generators import DepthFirstSearch, Kruskal, Prim, RecursiveDivision
from mazelab.render import MazeRenderer, ShowWhat, adjust_spacing
from mazelab.solution import Solution
from mazelab.solvers import AStar, Hand, Heuristic, WallFollower
from mazelab.util import StopWatch

GENERATORS = {
    "dfs": DepthFirstSearch,
    "kruskal": Kruskal,
    "prim": Prim,
    "division": RecursiveDivision,
}

SOLVERS = {
    "left-hand": lambda: WallFollower(Hand.LEFT),
    "right-hand": lambda: WallFollower(Hand.RIGHT),
    "manhattan": lambda: AStar(Heuristic.MANHATTAN),
    "euclidean": lambda: AStar(Heuristic.EUCLIDEAN),
    "zero": lambda: AStar(Heuristic.ZERO),
}

SHOW_CHOICES = {
    "path": ShowWhat.PATH,
    "wall": ShowWhat.WALL,
    "solution": ShowWhat.SOLUTION,
    "accessed": ShowWhat.ACCESSED,
}


def generate_maze(
    algorithm: str, row: int, column: int, rng: random.Random | None = None
) -> AdjacencyList:
    """Build a ``row`` x ``column`` maze with the named algorithm."""
    try:
        generator_class = GENERATORS[algorithm]
    except KeyError:
        raise ValueError(f"unknown generation algorithm {algorithm!r}") from None
    with StopWatch("generate_maze"):
        return generator_class(row, column, rng).generate()


def solve_maze(method: str, adjacency: AdjacencyList) -> Solution:
    """Solve ``adjacency`` with the named method."""
    try:
        make_solver = SOLVERS[method]
    except KeyError:
        raise ValueError(f"unknown solving method {method!r}") from None
    if not adjacency.is_valid():
        raise ValueError("adjacency list is invalid")
    with StopWatch("solve_maze"):
        return make_solver().solve(adjacency)


def maze_stats(adjacency: AdjacencyList) -> list[tuple[int, float]]:
    """Return, for cells with 1, 2, 3 and 4 neighbours, their count and percentage."""
    total = adjacency.node_count
    return [(count, count * 100.0 / total) for count in adjacency.neighbor_stat()]


def solution_stats(
    solution: Solution, total: int
) -> dict[str, tuple[int, float] | None]:
    """Return node counts and percentages of the solution, accessed edges and trace.

    An entry is ``None`` when its edge collection is empty.
    """

    def entry(num: int) -> tuple[int, float] | None:
        if not num:
            return None
        return (num + 1, (num + 1) * 100.0 / total)

    return {
        "solution": entry(len(solution.path)),
        "accessed": entry(len(solution.accessed)),
        "trace": entry(len(solution.trace)),
    }


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazelab", description="Generate and solve a rectangular maze."
    )
    parser.add_argument("--rows", type=int, default=20, help="number of rows (at least 2)")
    parser.add_argument("--columns", type=int, default=20, help="number of columns (at least 2)")
    parser.add_argument("--algorithm", choices=sorted(GENERATORS), default="dfs")
    parser.add_argument("--solver", choices=sorted(SOLVERS), default="manhattan")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--output", default=None, help="write the picture to this PNG file")
    parser.add_argument(
        "--show",
        action="append",
        choices=sorted(SHOW_CHOICES),
        default=None,
        help="layer to draw; may be repeated (default: path)",
    )
    parser.add_argument("--width", type=int, default=800, help="picture area width in pixels")
    parser.add_argument("--height", type=int, default=800, help="picture area height in pixels")
    return parser


def _format(value: tuple[int, float] | None) -> tuple[str, str]:
    if value is None:
        return ("/", "/")
    count, percent = value
    return (str(count), f"{percent:g}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line program."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.rows < 2 or args.columns < 2:
        parser.error("rows and columns must both be at least 2")

    rng = random.Random(args.seed)
    adjacency = generate_maze(args.algorithm, args.rows, args.columns, rng)
    solution = solve_maze(args.solver, adjacency)

    print(f"maze {adjacency.row}x{adjacency.column} ({args.algorithm}, solved by {args.solver})")
    for neighbours, stat in enumerate(maze_stats(adjacency), start=1):
        count, percent = _format(stat)
        print(f"cells with {neighbours} neighbour(s): {count} ({percent}%)")
    for name, stat in solution_stats(solution, adjacency.node_count).items():
        count, percent = _format(stat)
        print(f"{name} nodes: {count} ({percent}%)")

    if args.output:
        show = ShowWhat(0)
        for name in args.show or ["path"]:
            show |= SHOW_CHOICES[name]
        spacing = adjust_spacing(args.height, args.width, adjacency.row, adjacency.column)
        renderer = MazeRenderer(adjacency, spacing)
        renderer.set_solution(solution)
        renderer.save(args.output, show)
        print(f"saved {args.output}")
    return 0