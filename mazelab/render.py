"""Raster drawing of a maze, its solution and the cells a solver looked at."""

from __future__ import annotations

from enum import IntFlag
from os import PathLike

from PIL import Image, ImageChops, ImageDraw

from mazelab.adjacency import AdjacencyList
from mazelab.solution import Solution
from mazelab.util import StopWatch

BACKGROUND = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)
PATH_COLOUR = (0, 0, 0, 255)
WALL_COLOUR = (0, 0, 0, 255)
SOLUTION_COLOUR = (255, 0, 0, 255)
ACCESSED_COLOUR = (0, 0, 255, 255)
MARKER_COLOUR = (0, 255, 0, 255)

DEFAULT_SPACING = 50
MIN_SPACING = 10
PICTURE_MARGIN = 50


class ShowWhat(IntFlag):
    """Layers that can be shown in a composed picture."""

    PATH = 1
    WALL = 1 << 1
    SOLUTION = 1 << 2
    ACCESSED = 1 << 3


def adjust_spacing(
    height: int, width: int, row: int, column: int, min_spacing: int = MIN_SPACING
) -> int:
    """Return the largest cell size fitting the area, but at least ``min_spacing``."""
    if row < 1 or column < 1:
        raise ValueError(f"grid {row}x{column} has no cells")
    row_spacing = (height - 1) // row
    column_spacing = (width - 1) // column
    return max(min(row_spacing, column_spacing), min_spacing)


class MazeRenderer:
    """Draws a maze into separate layers and composes the ones asked for."""

    def __init__(self, adjacency: AdjacencyList, spacing: int = DEFAULT_SPACING) -> None:
        if not adjacency.is_valid():
            raise ValueError(f"grid {adjacency.row}x{adjacency.column} is too small")
        if spacing < 1:
            raise ValueError(f"spacing must be positive, got {spacing}")
        self.adjacency = adjacency
        self.spacing = spacing
        self.solution = Solution()
        self.size = (adjacency.column * spacing + 1, adjacency.row * spacing + 1)
        self._path = self._draw_path()
        self._wall = self._draw_wall()
        self._solution = self._draw_edges(self.solution.path, SOLUTION_COLOUR, 2)
        self._accessed = self._draw_edges(sorted(self.solution.accessed), ACCESSED_COLOUR, 1)

    def set_solution(self, solution: Solution) -> None:
        """Use ``solution`` for the solution and accessed layers."""
        self.solution = solution
        self._solution = self._draw_edges(solution.path, SOLUTION_COLOUR, 2)
        self._accessed = self._draw_edges(sorted(solution.accessed), ACCESSED_COLOUR, 1)

    def _blank(self) -> Image.Image:
        return Image.new("RGBA", self.size, TRANSPARENT)

    def _centre(self, p: int) -> tuple[float, float]:
        column = self.adjacency.column
        x, y = p % column, p // column
        return ((x + 0.5) * self.spacing, (y + 0.5) * self.spacing)

    def _edge(self, draw: ImageDraw.ImageDraw, p: int, q: int, colour, width: int) -> None:
        draw.line([self._centre(p), self._centre(q)], fill=colour, width=width)

    def _draw_path(self) -> Image.Image:
        image = self._blank()
        draw = ImageDraw.Draw(image)
        column = self.adjacency.column
        for i in range(self.adjacency.node_count):
            cx, cy = self._centre(i)
            draw.ellipse([cx - 1.5, cy - 1.5, cx + 1.5, cy + 1.5], fill=PATH_COLOUR)
            neighbors = self.adjacency.neighbors(i)
            if i + 1 in neighbors:
                self._edge(draw, i, i + 1, PATH_COLOUR, 1)
            if i + column in neighbors:
                self._edge(draw, i, i + column, PATH_COLOUR, 1)
        return image

    def _draw_wall(self) -> Image.Image:
        image = self._blank()
        draw = ImageDraw.Draw(image)
        column = self.adjacency.column
        s = self.spacing
        for i in range(self.adjacency.node_count):
            x, y = i % column, i // column
            if x == 0:
                draw.line([(0, y * s), (0, (y + 1) * s)], fill=WALL_COLOUR)
            if y == 0:
                draw.line([(x * s, 0), ((x + 1) * s, 0)], fill=WALL_COLOUR)
            neighbors = self.adjacency.neighbors(i)
            if i + 1 not in neighbors:
                draw.line([((x + 1) * s, y * s), ((x + 1) * s, (y + 1) * s)], fill=WALL_COLOUR)
            if i + column not in neighbors:
                draw.line([(x * s, (y + 1) * s), ((x + 1) * s, (y + 1) * s)], fill=WALL_COLOUR)
        return image

    def _draw_edges(self, edges, colour, width: int) -> Image.Image:
        image = self._blank()
        draw = ImageDraw.Draw(image)
        for p, q in edges:
            self._edge(draw, p, q, colour, width)
        return image

    def _draw_markers(self, image: Image.Image) -> None:
        draw = ImageDraw.Draw(image)
        s = self.spacing
        row, column = self.adjacency.row, self.adjacency.column
        lines = [
            ((0.5 * s, 0), (0.5 * s, s)),
            ((0.5 * s, s), (0, 0.5 * s)),
            ((0.5 * s, s), (s, 0.5 * s)),
            (((0.5 + column - 1) * s, (row - 1) * s), ((0.5 + column - 1) * s, row * s)),
            (((0.5 + column - 1) * s, row * s), ((column - 1) * s, (0.5 + row - 1) * s)),
            (((0.5 + column - 1) * s, row * s), (column * s, (0.5 + row - 1) * s)),
        ]
        for start, end in lines:
            draw.line([start, end], fill=MARKER_COLOUR, width=3)

    def compose(self, show: ShowWhat = ShowWhat.PATH) -> Image.Image:
        """Return an RGB picture with the entrance and exit marked and the chosen layers."""
        with StopWatch("MazeRenderer.compose"):
            base = Image.new("RGB", self.size, BACKGROUND[:3])
            self._draw_markers(base)
            white = Image.new("RGBA", self.size, BACKGROUND)
            for flag, layer in ((ShowWhat.PATH, self._path), (ShowWhat.WALL, self._wall)):
                if show & flag:
                    flat = Image.alpha_composite(white, layer).convert("RGB")
                    base = ImageChops.multiply(base, flat)
            overlay = base.convert("RGBA")
            for flag, layer in (
                (ShowWhat.ACCESSED, self._accessed),
                (ShowWhat.SOLUTION, self._solution),
            ):
                if show & flag:
                    overlay = Image.alpha_composite(overlay, layer)
            return overlay.convert("RGB")

    def save(
        self,
        path: str | PathLike[str],
        show: ShowWhat = ShowWhat.PATH,
        margin: int = PICTURE_MARGIN,
    ) -> None:
        """Write the composed picture, framed by ``margin`` pixels, as PNG."""
        picture = self.compose(show)
        width, height = picture.size
        canvas = Image.new("RGB", (width + 2 * margin, height + 2 * margin), BACKGROUND[:3])
        canvas.paste(picture, (margin, margin))
        canvas.save(path, format="PNG")