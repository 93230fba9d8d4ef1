"""Result of solving a maze."""

from __future__ import annotations

from dataclasses import dataclass, field

from mazelab.util import ordered_pair


@dataclass
class Solution:
    """Edges of the solving path, the edges looked at, and the walked trace."""

    path: list[tuple[int, int]] = field(default_factory=list)
    accessed: set[tuple[int, int]] = field(default_factory=set)
    trace: list[tuple[int, int]] = field(default_factory=list)

    def setup_use_trace(self) -> None:
        """Rebuild ``path`` and ``accessed`` from ``trace``.

        Walking an edge a second time means backtracking, which drops the
        last edge from the path.
        """
        self.path.clear()
        self.accessed.clear()
        for first, second in self.trace:
            edge = ordered_pair(first, second)
            if edge in self.accessed:
                self.path.pop()
            else:
                self.accessed.add(edge)
                self.path.append(edge)