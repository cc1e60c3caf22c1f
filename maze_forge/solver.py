"""Breadth-first reachability and shortest-path search over Path cells.

Both entry points share :func:`_bfs`. Cells are marked visited when enqueued
(not when dequeued) so no cell enters the frontier twice. The grid's visited
flags are cleared at the start of every search; cell kinds are never touched.

"No path" is an ordinary result: :func:`is_solvable` returns ``False`` and
:func:`find_shortest_path` returns ``[]``, whether the start is a Wall or the
end is simply unreachable.
"""

import logging
from collections import deque
from typing import Optional

from maze_forge.grid import Grid
from maze_forge.types import Coord, Path

logger = logging.getLogger(__name__)

# Parent of the start cell; terminates path reconstruction.
NO_PARENT = None

ParentMap = dict[Coord, Optional[Coord]]


def _open_neighbors(grid: Grid, row: int, col: int) -> list[Coord]:
    return [
        (r, c)
        for r, c in grid.neighbors(row, col)
        if grid.kinds[r, c] and not grid.visited[r, c]
    ]


def _bfs(
    grid: Grid, start: Coord, end: Coord, parents: Optional[ParentMap] = None
) -> bool:
    """Search from ``start`` until ``end`` is dequeued.

    Arguments:
        grid: Carved grid; its visited flags are used as scratch.
        start: Origin cell. A non-Path start yields False immediately.
        end: Target cell.
        parents: If given, filled with ``cell -> parent`` for every enqueued cell.

    Returns:
        True if ``end`` was reached.
    """
    grid.clear_visited()
    if not grid.is_path(*start):
        return False
    if not grid.in_bounds(*end):
        raise IndexError(f"Out of bounds: {end} for grid {grid.rows}x{grid.cols}")

    frontier: deque[Coord] = deque([start])
    grid.mark_visited(*start)
    if parents is not None:
        parents[start] = NO_PARENT

    while frontier:
        pos = frontier.popleft()
        if pos == end:
            return True
        for nxt in _open_neighbors(grid, *pos):
            grid.visited[nxt] = True
            if parents is not None:
                parents[nxt] = pos
            frontier.append(nxt)

    return False


def _reconstruct(parents: ParentMap, end: Coord) -> Path:
    path: Path = []
    cur: Optional[Coord] = end
    while cur is not NO_PARENT:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path


def is_solvable(grid: Grid, start: Coord, end: Coord) -> bool:
    """Return True if a Path-only 4-adjacent walk connects ``start`` to ``end``."""
    found = _bfs(grid, start, end)
    logger.debug("Solvable check %s -> %s: %s", start, end, found)
    return found


def find_shortest_path(grid: Grid, start: Coord, end: Coord) -> Path:
    """Return a shortest ``start`` -> ``end`` walk over Path cells, or ``[]``.

    The result includes both endpoints; ``start == end`` on a Path cell
    yields ``[start]``.
    """
    parents: ParentMap = {}
    if not _bfs(grid, start, end, parents):
        logger.debug("No path %s -> %s", start, end)
        return []
    path = _reconstruct(parents, end)
    logger.debug("Shortest path %s -> %s: %d cells", start, end, len(path))
    return path


def bfs_distances(grid: Grid, start: Coord) -> dict[Coord, int]:
    """Return the step distance from ``start`` to every reachable Path cell.

    Empty if ``start`` is a Wall.
    """
    grid.clear_visited()
    if not grid.is_path(*start):
        return {}
    dist: dict[Coord, int] = {start: 0}
    frontier: deque[Coord] = deque([start])
    grid.mark_visited(*start)
    while frontier:
        pos = frontier.popleft()
        for nxt in _open_neighbors(grid, *pos):
            grid.visited[nxt] = True
            dist[nxt] = dist[pos] + 1
            frontier.append(nxt)
    return dist
