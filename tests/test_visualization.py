import random

import pytest

from mazelab.adjacency import AdjacencyList
from mazelab.generators import DepthFirstSearch, RecursiveDivision
from mazelab.visualization import Playback, calc_viewport


def _dfs_maze(row=4, column=5, seed=3):
    return DepthFirstSearch(row, column, random.Random(seed)).generate()


def test_calc_viewport_square_area():
    assert calc_viewport(10, 10) == (0, 0, 10, 10)


@pytest.mark.parametrize("width,height", [(800, 600), (600, 800), (301, 100), (5, 9)])
def test_calc_viewport_is_centred_square(width, height):
    view = calc_viewport(width, height)
    length = min(width, height)
    assert view.width == view.height == length
    assert view.x == (width - length) // 2
    assert view.y == (height - length) // 2


def test_next_frame_walks_and_wraps():
    maze = _dfs_maze()
    playback = Playback(maze, 1)
    total = maze.generation_action_count
    assert total == maze.node_count - 1
    seqs = []
    for _ in range(total + 1):
        playback.next_frame()
        seqs.append(playback.action_seq)
    assert seqs == list(range(1, total + 1)) + [0]


def test_prev_frame_wraps_to_end():
    maze = _dfs_maze()
    playback = Playback(maze, 1)
    playback.prev_frame()
    assert playback.action_seq == maze.generation_action_count
    playback.prev_frame()
    assert playback.action_seq == maze.generation_action_count - 1


def test_large_step_clamps():
    maze = _dfs_maze()
    total = maze.generation_action_count
    playback = Playback(maze, total + 5)
    playback.next_frame()
    assert playback.action_seq == total
    playback.prev_frame()
    assert playback.action_seq == 0


def test_reset_returns_to_start():
    maze = _dfs_maze()
    playback = Playback(maze, 2)
    playback.next_frame()
    frame = playback.reset()
    assert playback.action_seq == 0
    assert frame.erased == []


def test_break_wall_frames():
    maze = _dfs_maze(4, 5)
    playback = Playback(maze)
    start = playback.frame_vertices(0)
    assert len(start.walls) == 4 * (4 + (4 + 1) + (5 + 1))
    end = playback.frame_vertices(maze.generation_action_count)
    assert len(end.erased) == 4 * maze.generation_action_count
    assert end.walls == start.walls


def test_build_wall_frames():
    maze = RecursiveDivision(4, 4, random.Random(7)).generate()
    playback = Playback(maze)
    assert len(playback.frame_vertices(0).walls) == 4 * 4
    full = playback.frame_vertices(maze.generation_action_count)
    assert len(full.walls) == 4 * (4 + maze.generation_action_count)
    assert full.erased == []


def test_vertices_stay_in_clip_space():
    maze = _dfs_maze(6, 3)
    frame = Playback(maze).frame_vertices(maze.generation_action_count)
    for value in frame.walls + frame.erased:
        assert -1.0 <= value <= 1.0


def test_wall_orientation():
    maze = _dfs_maze(3, 3)
    playback = Playback(maze)
    x0, y0, x1, y1 = playback.wall(4, 5, 0.5)
    assert x0 == x1 and y0 < y1
    x0, y0, x1, y1 = playback.wall(4, 7, 0.5)
    assert y0 == y1 and x0 < x1


def test_no_actions_cannot_play():
    playback = Playback(AdjacencyList(3, 3))
    with pytest.raises(ValueError):
        playback.reset()
    with pytest.raises(ValueError):
        playback.next_frame()


def test_zero_step_rejected():
    with pytest.raises(ValueError):
        Playback(_dfs_maze(), 0)


def test_out_of_range_sequence_rejected():
    maze = _dfs_maze()
    playback = Playback(maze)
    with pytest.raises(ValueError):
        playback.frame_vertices(-1)
    with pytest.raises(ValueError):
        playback.frame_vertices(maze.generation_action_count + 1)