import random

import pytest

from mazelab.cli import generate_maze, main, maze_stats, solution_stats, solve_maze
from mazelab.solution import Solution

ALGORITHMS = ["dfs", "kruskal", "prim", "division"]
METHODS = ["left-hand", "right-hand", "manhattan", "euclidean", "zero"]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_generate_maze_is_perfect(algorithm):
    maze = generate_maze(algorithm, 6, 7, random.Random(3))
    assert maze.row == 6 and maze.column == 7
    degrees = sum(len(maze.neighbors(i)) for i in range(maze.node_count))
    assert degrees == 2 * (maze.node_count - 1)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_generate_maze_is_deterministic_with_seed(algorithm):
    first = generate_maze(algorithm, 5, 5, random.Random(11))
    second = generate_maze(algorithm, 5, 5, random.Random(11))
    assert first.generation_actions == second.generation_actions


def test_generate_maze_unknown_algorithm():
    with pytest.raises(ValueError):
        generate_maze("bogus", 4, 4, random.Random(0))


def test_generate_maze_too_small():
    with pytest.raises(ValueError):
        generate_maze("dfs", 1, 4, random.Random(0))


def test_all_methods_find_the_same_path_length():
    maze = generate_maze("kruskal", 8, 8, random.Random(5))
    lengths = {len(solve_maze(method, maze).path) for method in METHODS}
    assert len(lengths) == 1
    assert lengths.pop() >= 14


def test_astar_path_runs_from_end_to_start():
    maze = generate_maze("prim", 5, 6, random.Random(2))
    path = solve_maze("manhattan", maze).path
    assert path[0][0] == maze.node_count - 1
    assert path[-1][1] == 0


def test_solve_maze_unknown_method():
    maze = generate_maze("dfs", 3, 3, random.Random(0))
    with pytest.raises(ValueError):
        solve_maze("bogus", maze)


def test_maze_stats_cover_every_cell():
    maze = generate_maze("dfs", 6, 6, random.Random(9))
    stats = maze_stats(maze)
    assert len(stats) == 4
    assert sum(count for count, _ in stats) == maze.node_count
    assert sum(percent for _, percent in stats) == pytest.approx(100.0)


def test_solution_stats_empty_solution():
    assert solution_stats(Solution(), 16) == {
        "solution": None,
        "accessed": None,
        "trace": None,
    }


def test_solution_stats_counts_nodes():
    stats = solution_stats(Solution(path=[(0, 1)]), 4)
    assert stats["solution"] == (2, 50.0)
    assert stats["accessed"] is None


def test_solution_stats_wall_follower_has_trace():
    maze = generate_maze("dfs", 5, 5, random.Random(4))
    solution = solve_maze("left-hand", maze)
    stats = solution_stats(solution, maze.node_count)
    assert stats["trace"][0] == len(solution.trace) + 1
    assert stats["trace"][0] >= stats["solution"][0]


def test_main_prints_stats(capsys):
    assert main(["--rows", "4", "--columns", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "maze 4x5" in out
    assert "solution nodes:" in out


def test_main_writes_png(tmp_path):
    target = tmp_path / "maze.png"
    result = main(
        [
            "--rows", "4", "--columns", "4", "--seed", "2",
            "--algorithm", "division", "--solver", "right-hand",
            "--show", "wall", "--show", "solution",
            "--output", str(target),
        ]
    )
    assert result == 0
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_main_rejects_small_grid():
    with pytest.raises(SystemExit) as info:
        main(["--rows", "1", "--columns", "5"])
    assert info.value.code == 2