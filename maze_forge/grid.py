"""Grid storage for maze cells.

A :class:`Grid` holds two ``numpy`` boolean arrays of shape ``(rows, cols)``:
``kinds`` (``True`` for Path) and ``visited`` (traversal scratch). The visited
flags are not part of the maze; whichever algorithm currently owns a traversal
clears them first via :meth:`Grid.clear_visited`.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from maze_forge.types import DIRECTIONS, CellKind, Coord


def is_in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    """Return True if ``(row, col)`` lies within a ``rows`` x ``cols`` rectangle."""
    return 0 <= row < rows and 0 <= col < cols


class Grid:
    """Rectangular grid of Wall/Path cells with per-cell visited flags.

    Arguments:
        rows: Number of rows (fixed for the grid's lifetime).
        cols: Number of columns (fixed for the grid's lifetime).
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.kinds = np.zeros((rows, cols), dtype=bool)
        self.visited = np.zeros((rows, cols), dtype=bool)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, paths={self.count(CellKind.PATH)})"

    # -------- Bounds / neighbours --------

    def in_bounds(self, row: int, col: int) -> bool:
        return is_in_bounds(row, col, self.rows, self.cols)

    def neighbors(self, row: int, col: int, step: int = 1) -> list[Coord]:
        """Return the in-bounds cells ``step`` away along each axis.

        Order is up, down, left, right. No filtering by kind or visited state.
        """
        return [
            (row + dr * step, col + dc * step)
            for dr, dc in DIRECTIONS
            if self.in_bounds(row + dr * step, col + dc * step)
        ]

    def unvisited_neighbors(self, row: int, col: int, step: int = 1) -> list[Coord]:
        """Same as :meth:`neighbors`, restricted to cells not yet visited."""
        return [
            (r, c) for r, c in self.neighbors(row, col, step) if not self.visited[r, c]
        ]

    # -------- Cell accessors --------

    def kind_at(self, row: int, col: int) -> CellKind:
        self._check_bounds(row, col)
        return CellKind.PATH if self.kinds[row, col] else CellKind.WALL

    def is_path(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self.kinds[row, col])

    def set_kind(self, row: int, col: int, kind: CellKind) -> None:
        self._check_bounds(row, col)
        self.kinds[row, col] = kind == CellKind.PATH

    def carve(self, row: int, col: int) -> bool:
        """Turn a cell into Path. Returns True if it was a Wall before."""
        self._check_bounds(row, col)
        was_wall = not self.kinds[row, col]
        self.kinds[row, col] = True
        return was_wall

    def is_visited(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self.visited[row, col])

    def mark_visited(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self.visited[row, col] = True

    # -------- Whole-grid operations --------

    def reset(self) -> None:
        """Set every cell to Wall and clear every visited flag."""
        self.kinds.fill(False)
        self.visited.fill(False)

    def clear_visited(self) -> None:
        self.visited.fill(False)

    def count(self, kind: CellKind) -> int:
        n_path = int(np.count_nonzero(self.kinds))
        return n_path if kind == CellKind.PATH else self.rows * self.cols - n_path

    def path_cells(self) -> Iterator[Coord]:
        """Yield every Path coordinate in row-major order."""
        for r, c in zip(*np.nonzero(self.kinds)):
            yield int(r), int(c)

    def as_array(self) -> np.ndarray:
        """Return a read-only view of the kinds array (True = Path)."""
        view = self.kinds.view()
        view.flags.writeable = False
        return view

    def copy(self) -> Grid:
        other = Grid(self.rows, self.cols)
        other.kinds[:] = self.kinds
        other.visited[:] = self.visited
        return other

    # -------- Internal helpers --------

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Out of bounds: {(row, col)} for grid {self.rows}x{self.cols}"
            )
