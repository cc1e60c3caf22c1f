"""Randomized depth-first maze carving (recursive backtracker).

The carve walks an explicit stack of ``(cell, candidates)`` frames instead of
recursing, so large grids are not bounded by the interpreter's recursion
limit. The frame order and RNG consumption are identical to the recursive
formulation: on entering a cell its unvisited candidates are computed once and
shuffled, then tried in order, each re-checked for visited state just before
descending (an earlier sibling's subtree may already have claimed it).

Two variants are available (see :class:`maze_forge.types.CarveVariant`):

* ``ROOM`` (default): rooms sit on even coordinates two cells apart; moving
  between rooms opens the wall cell in between. Path cells form a spanning
  tree, i.e. a perfect maze. Odd dimensions give the cleanest layout.
* ``CELL``: every cell is a room and neighbours are one cell apart. The carve
  tree is still a spanning tree, but since every reachable cell ends up Path
  the resulting grid is fully open.
"""

import logging
import random
import time
from typing import Iterator, Optional

from maze_forge.grid import Grid
from maze_forge.types import CarveVariant, Coord

logger = logging.getLogger(__name__)

START: Coord = (0, 0)

VARIANT_STEP: dict[CarveVariant, int] = {
    CarveVariant.CELL: 1,
    CarveVariant.ROOM: 2,
}

Frame = tuple[Coord, Iterator[Coord]]


def time_seed() -> int:
    """Non-deterministic 32-bit seed derived from the wall clock."""
    return time.time_ns() & 0xFFFFFFFF or 1


class MazeGenerator:
    """Carves a perfect maze into a :class:`Grid`.

    Arguments:
        seed: RNG seed. ``None`` or ``0`` picks a wall-clock seed; any other
            value makes generation fully reproducible for given dimensions.
        variant: Carving strategy.
    """

    def __init__(
        self, seed: Optional[int] = None, variant: CarveVariant = CarveVariant.ROOM
    ) -> None:
        self.seed: int = seed if seed else time_seed()
        self.variant = CarveVariant(variant)
        self.rng = random.Random(self.seed)
        self.carved_cells: int = 0

    def generate(self, grid: Grid) -> bool:
        """Reset ``grid`` and carve a maze from the top-left corner.

        The bottom-right end cell is forced open afterwards. Always returns
        True; generation cannot fail on a valid grid.
        """
        grid.reset()
        carved = self._carve(grid, START, VARIANT_STEP[self.variant])
        carved += self._open_end(grid)
        self.carved_cells = carved
        logger.debug(
            "Generated %dx%d maze variant=%s seed=%d carved=%d",
            grid.rows,
            grid.cols,
            self.variant,
            self.seed,
            carved,
        )
        return True

    def _shuffled(self, cells: list[Coord]) -> Iterator[Coord]:
        # random.shuffle is a Fisher-Yates permutation
        self.rng.shuffle(cells)
        return iter(cells)

    def _carve(self, grid: Grid, start: Coord, step: int) -> int:
        carved = int(grid.carve(*start))
        grid.mark_visited(*start)
        stack: list[Frame] = [
            (start, self._shuffled(grid.unvisited_neighbors(*start, step=step)))
        ]

        while stack:
            (row, col), candidates = stack[-1]
            nxt = next(candidates, None)
            if nxt is None:
                # Backtrack
                stack.pop()
                continue
            nrow, ncol = nxt
            if grid.is_visited(nrow, ncol):
                continue
            # Wall between the two rooms; the target itself when step == 1
            carved += grid.carve(row + (nrow - row) // step, col + (ncol - col) // step)
            carved += grid.carve(nrow, ncol)
            grid.mark_visited(nrow, ncol)
            stack.append(
                (nxt, self._shuffled(grid.unvisited_neighbors(nrow, ncol, step=step)))
            )

        return carved

    def _open_end(self, grid: Grid) -> int:
        """Force the bottom-right cell open and attach it to the maze if isolated.

        With the room stride and an even dimension the end may fall on a wall
        cell with no open neighbour. In that case the first neighbour touching
        an open cell is carved as well, hanging the end off the tree as a leaf.
        """
        end = (grid.rows - 1, grid.cols - 1)
        carved = int(grid.carve(*end))
        if end == START or any(grid.is_path(*n) for n in grid.neighbors(*end)):
            return carved
        for link in grid.neighbors(*end):
            if any(grid.is_path(*n) for n in grid.neighbors(*link) if n != end):
                carved += grid.carve(*link)
                break
        return carved
