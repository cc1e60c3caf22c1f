from collections import deque

from maze_forge.grid import Grid
from maze_forge.types import Coord


def grid_from_rows(rows: list[str]) -> Grid:
    """Build a grid from ASCII art: ``#`` is a wall, anything else is a path."""
    grid = Grid(len(rows), len(rows[0]))
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch != "#":
                grid.carve(r, c)
    return grid


def open_neighbors(grid: Grid, pos: Coord) -> list[Coord]:
    return [n for n in grid.neighbors(*pos) if grid.is_path(*n)]


def reachable(grid: Grid, start: Coord) -> set[Coord]:
    """Path cells reachable from ``start``; independent of the solver module."""
    if not grid.is_path(*start):
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for n in open_neighbors(grid, pos):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen


def distance(grid: Grid, start: Coord, end: Coord) -> int:
    """Step distance from ``start`` to ``end`` over path cells, or -1."""
    if not grid.is_path(*start):
        return -1
    dist = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            return dist[pos]
        for n in open_neighbors(grid, pos):
            if n not in dist:
                dist[n] = dist[pos] + 1
                queue.append(n)
    return -1


def count_open_edges(grid: Grid) -> int:
    """Number of Path-to-Path 4-adjacencies."""
    edges = 0
    for r, c in grid.path_cells():
        if r + 1 < grid.rows and grid.is_path(r + 1, c):
            edges += 1
        if c + 1 < grid.cols and grid.is_path(r, c + 1):
            edges += 1
    return edges


def is_adjacent(a: Coord, b: Coord) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
