"""Character rendering of a maze.

``#`` wall, space path, ``S`` start, ``E`` end, ``.`` solution path cell.
Start and end take precedence over the path mark.
"""

from typing import Iterable, Optional

from maze_forge.grid import Grid
from maze_forge.types import CellKind, Coord

WALL_CHAR = "#"
PATH_CHAR = " "
START_CHAR = "S"
END_CHAR = "E"
SOLUTION_CHAR = "."

CELL_CHARS: dict[CellKind, str] = {
    CellKind.WALL: WALL_CHAR,
    CellKind.PATH: PATH_CHAR,
}

LEGEND: list[tuple[str, str]] = [
    (START_CHAR, "Start (top-left)"),
    (END_CHAR, "End (bottom-right)"),
    (WALL_CHAR, "Wall"),
    (PATH_CHAR, "Path (empty space)"),
    (SOLUTION_CHAR, "Solution path"),
]


def cell_char(
    grid: Grid, pos: Coord, start: Coord, end: Coord, on_path: bool = False
) -> str:
    if pos == start:
        return START_CHAR
    if pos == end:
        return END_CHAR
    if on_path:
        return SOLUTION_CHAR
    return CELL_CHARS[grid.kind_at(*pos)]


def render_lines(
    grid: Grid, start: Coord, end: Coord, path: Optional[Iterable[Coord]] = None
) -> list[str]:
    on_path = set(path) if path is not None else set()
    return [
        "".join(
            cell_char(grid, (r, c), start, end, (r, c) in on_path)
            for c in range(grid.cols)
        )
        for r in range(grid.rows)
    ]


def render_text(
    grid: Grid, start: Coord, end: Coord, path: Optional[Iterable[Coord]] = None
) -> str:
    """Render ``grid`` as newline-joined rows (no trailing newline)."""
    return "\n".join(render_lines(grid, start, end, path))


def legend_text() -> str:
    return "\n".join(f"{char} = {label}" for char, label in LEGEND)
