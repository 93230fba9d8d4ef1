# mazelab

mazelab generates rectangular mazes, solves them, and draws them as PNG images.

Cells are numbered row by row, from `0` at the top left to `row * column - 1`
at the bottom right. The entrance is cell `0` and the exit is the last cell.
Grids need at least two rows and two columns.

## Mazes

`mazelab.adjacency.AdjacencyList` records which cells are connected.
`surround(i)` gives the cells next to `i` on the grid, and `neighbors(i)`
gives the cells that `i` is actually joined to. `neighbor_stat()` counts how
many cells have 1, 2, 3 or 4 neighbours.

Each call to `connect` or `disconnect` is recorded and can be read back from
`generation_actions`. `generation_action_type` is a `GenerationAction` value
that says whether those actions break walls or build them.

## Generators

All generators are in `mazelab.generators`. Each one is constructed as
`(row, column, rng=None)`, where `rng` is an optional `random.Random`, and
each has a `generate()` method that returns an `AdjacencyList`.

- `DepthFirstSearch` carves passages by random depth-first search with backtracking.
- `Kruskal` joins cells along shuffled edges. A `mazelab.unionfind.UnionFind` keeps it from making cycles.
- `Prim` grows the maze from the top-left cell by picking random frontier edges.
- `RecursiveDivision` starts from a fully open grid. It then divides chambers with walls, and each wall leaves three gaps.

The first three generators break walls. `RecursiveDivision` builds them.
Every generator raises `ValueError` if the grid is smaller than 2x2.

## Solvers

The solvers are in `mazelab.solvers`. Each one returns a
`mazelab.solution.Solution`, which has three fields:

- `path`: the edges of the solving path.
- `accessed`: the set of edges the solver looked at.
- `trace`: the edges walked, in order. Only wall following fills this in.

`AStar(heuristic)` takes a `Heuristic` value: `MANHATTAN`, `EUCLIDEAN` or
`ZERO`. The matching functions are `manhattan_distance`, `euclidean_distance`
and `zero_distance`. It returns the path from the exit back to the entrance.
If the exit cannot be reached, it returns an empty `Solution`.

`WallFollower(hand)` keeps one hand on the wall. The hand is `Hand.LEFT` or
`Hand.RIGHT`. It records its walk in `trace`, then builds `path` and
`accessed` from it with `Solution.setup_use_trace()`, which drops the edges
it backtracked over. If the walk comes back to a state it has already been
in without reaching the exit, it raises `ValueError`.

`mazelab.priority_queue.MutablePriorityQueue` is the heap that A* uses. You
can change its entries in place through the handles that `push` returns.

## Rendering

`mazelab.render.MazeRenderer(adjacency, spacing)` draws a maze with cells
`spacing` pixels wide.

- `set_solution(solution)` adds a solution to draw.
- `compose(show)` returns a Pillow RGB image.
- `save(path, show, margin)` writes that image as a PNG, with a white margin around it.

`show` combines `ShowWhat` flags: `PATH`, `WALL`, `SOLUTION` and
`ACCESSED`. The entrance and exit are always marked in green.

`adjust_spacing(height, width, row, column)` chooses the largest cell size
that fits in an area. The result is never less than 10 pixels.

```python
import random

from mazelab.generators import Kruskal
from mazelab.render import MazeRenderer, ShowWhat
from mazelab.solvers import AStar, Heuristic

maze = Kruskal(20, 30, random.Random(1)).generate()
solution = AStar(Heuristic.MANHATTAN).solve(maze)

renderer = MazeRenderer(maze, 20)
renderer.set_solution(solution)
renderer.save("maze.png", ShowWhat.WALL | ShowWhat.SOLUTION, 50)
```

## Replaying generation

`mazelab.visualization.Playback(adjacency, step)` steps through the recorded
generation actions, `step` actions at a time.

- `next_frame()` and `prev_frame()` move forwards and backwards, wrapping around at the ends.
- `reset()` goes back to the state before any action.
- `frame_vertices(action_seq)` returns a `Frame` for any point in the sequence.

A `Frame` holds flat `x, y` line vertices in the range -1 to 1. `walls`
holds lines drawn in the wall colour. `erased` holds broken walls, drawn in
the background colour. `calc_viewport(width, height)` gives the largest
square centred in a drawing area.

## Command line

```
mazelab --rows 20 --columns 30 --algorithm kruskal --solver manhattan --seed 1 --output maze.png --show wall --show solution
```

The command generates a maze and solves it. It prints the count and
percentage of cells with 1 to 4 neighbours, and the node counts for the
solution, the accessed edges and the trace. An empty entry is shown as `/`.

| Option | Values | Default |
| --- | --- | --- |
| `--algorithm` | `dfs`, `kruskal`, `prim`, `division` | `dfs` |
| `--solver` | `left-hand`, `right-hand`, `manhattan`, `euclidean`, `zero` | `manhattan` |
| `--rows`, `--columns` | at least 2 | 20 |
| `--seed` | an integer | none |

With `--output`, the command also saves a PNG. `--show` picks the layers to
draw and can be given more than once; the default is `path`. `--width` and
`--height` set the picture area used to choose the cell size, 800 pixels
each by default.

The same steps are available from Python:

- `mazelab.cli.generate_maze`
- `mazelab.cli.solve_maze`
- `mazelab.cli.maze_stats`
- `mazelab.cli.solution_stats`

## What it does not do

mazelab has no window or interactive interface. It writes images to files
and prints statistics. Replaying generation with `Playback` only produces
line vertices; mazelab does not display or animate them.

## Tests

```
pip install -e .[test]
pytest
```