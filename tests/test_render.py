import pytest
from PIL import Image

from mazelab import render
from mazelab.adjacency import AdjacencyList
from mazelab.render import MazeRenderer, ShowWhat, adjust_spacing
from mazelab.solution import Solution
from mazelab.solvers import AStar, Heuristic

SPACING = 20


def _snake() -> AdjacencyList:
    maze = AdjacencyList(3, 3)
    for p, q in [(0, 1), (1, 2), (2, 5), (5, 4), (4, 3), (3, 6), (6, 7), (7, 8)]:
        maze.connect(p, q)
    return maze


def _renderer() -> MazeRenderer:
    maze = _snake()
    renderer = MazeRenderer(maze, SPACING)
    renderer.set_solution(AStar(Heuristic.MANHATTAN).solve(maze))
    return renderer


def test_compose_size_matches_grid():
    renderer = _renderer()
    image = renderer.compose(ShowWhat.PATH)
    assert image.size == (3 * SPACING + 1, 3 * SPACING + 1)
    assert image.mode == "RGB"


def test_path_edge_drawn_only_when_shown():
    renderer = _renderer()
    point = (2 * SPACING, int(1.5 * SPACING))  # middle of edge 4-5
    assert renderer.compose(ShowWhat.PATH).getpixel(point) == render.PATH_COLOUR[:3]
    assert renderer.compose(ShowWhat(0)).getpixel(point) == render.BACKGROUND[:3]


def test_wall_drawn_between_unconnected_cells():
    renderer = _renderer()
    point = (int(1.5 * SPACING), 2 * SPACING)  # wall between 4 and 7
    assert renderer.compose(ShowWhat.WALL).getpixel(point) == render.WALL_COLOUR[:3]
    assert renderer.compose(ShowWhat.PATH).getpixel(point) == render.BACKGROUND[:3]


def test_outer_boundary_is_walled():
    renderer = _renderer()
    point = (0, int(1.5 * SPACING))
    assert renderer.compose(ShowWhat.WALL).getpixel(point) == render.WALL_COLOUR[:3]


def test_solution_layer_drawn_over_path():
    renderer = _renderer()
    point = (SPACING, int(2.5 * SPACING))  # middle of edge 6-7
    shown = renderer.compose(ShowWhat.PATH | ShowWhat.SOLUTION)
    assert shown.getpixel(point) == render.SOLUTION_COLOUR[:3]
    hidden = renderer.compose(ShowWhat.PATH)
    assert hidden.getpixel(point) == render.PATH_COLOUR[:3]


def test_accessed_layer_drawn():
    renderer = _renderer()
    point = (SPACING, SPACING // 2)  # middle of edge 0-1
    assert renderer.compose(ShowWhat.ACCESSED).getpixel(point) == render.ACCESSED_COLOUR[:3]


def test_empty_solution_draws_nothing():
    renderer = MazeRenderer(_snake(), SPACING)
    renderer.set_solution(Solution())
    with_layers = renderer.compose(ShowWhat.SOLUTION | ShowWhat.ACCESSED)
    without = renderer.compose(ShowWhat(0))
    assert list(with_layers.getdata()) == list(without.getdata())


def test_save_adds_margin(tmp_path):
    renderer = _renderer()
    target = tmp_path / "maze.png"
    renderer.save(target, ShowWhat.PATH | ShowWhat.WALL, margin=7)
    with Image.open(target) as saved:
        assert saved.format == "PNG"
        width, height = renderer.compose().size
        assert saved.size == (width + 14, height + 14)


def test_too_small_grid_rejected():
    with pytest.raises(ValueError):
        MazeRenderer(AdjacencyList(1, 3), SPACING)


def test_adjust_spacing_fits_area():
    spacing = adjust_spacing(601, 1201, 12, 8, 10)
    assert spacing >= 10
    assert spacing * 12 <= 600
    assert spacing * 8 <= 1200


def test_adjust_spacing_never_below_minimum():
    assert adjust_spacing(30, 30, 40, 40, 10) == 10
    assert adjust_spacing(30, 30, 40, 40, 4) == 4