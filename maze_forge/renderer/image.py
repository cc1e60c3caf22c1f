"""Pillow rendering of a maze.

Each cell becomes a square tile of ``resolution // cols`` pixels. Colours are
looked up in a :data:`ColorMap` keyed by :class:`TileKind`, so callers can
swap palettes the same way they would swap a texture map.
"""

from enum import StrEnum, auto
from typing import Iterable, Optional

import numpy as np
from PIL import Image

from maze_forge.grid import Grid
from maze_forge.types import Coord

DEFAULT_RESOLUTION = 640

RGBA = tuple[int, int, int, int]


class TileKind(StrEnum):
    WALL = auto()
    FLOOR = auto()
    START = auto()
    END = auto()
    SOLUTION = auto()
    AGENT = auto()


ColorMap = dict[TileKind, RGBA]

DEFAULT_COLOR_MAP: ColorMap = {
    TileKind.WALL: (40, 42, 54, 255),
    TileKind.FLOOR: (236, 236, 228, 255),
    TileKind.START: (80, 180, 90, 255),
    TileKind.END: (214, 72, 64, 255),
    TileKind.SOLUTION: (245, 196, 70, 255),
    TileKind.AGENT: (66, 120, 220, 255),
}

HIGH_CONTRAST_COLOR_MAP: ColorMap = {
    TileKind.WALL: (0, 0, 0, 255),
    TileKind.FLOOR: (255, 255, 255, 255),
    TileKind.START: (0, 200, 0, 255),
    TileKind.END: (200, 0, 0, 255),
    TileKind.SOLUTION: (0, 120, 255, 255),
    TileKind.AGENT: (255, 0, 255, 255),
}

COLOR_MAP_REGISTRY: dict[str, ColorMap] = {
    "default": DEFAULT_COLOR_MAP,
    "high_contrast": HIGH_CONTRAST_COLOR_MAP,
}


def tile_size(grid: Grid, resolution: int) -> int:
    return max(1, resolution // grid.cols)


def render_array(
    grid: Grid,
    start: Coord,
    end: Coord,
    path: Optional[Iterable[Coord]] = None,
    agent: Optional[Coord] = None,
    resolution: int = DEFAULT_RESOLUTION,
    color_map: Optional[ColorMap] = None,
) -> np.ndarray:
    """Return an ``(H, W, 4)`` uint8 RGBA array of the maze.

    Later layers win: floor/wall, then solution path, then start/end, then agent.
    """
    if color_map is None:
        color_map = DEFAULT_COLOR_MAP

    # One pixel per cell first, upscaled at the end.
    cells = np.empty((grid.rows, grid.cols, 4), dtype=np.uint8)
    cells[:] = color_map[TileKind.WALL]
    cells[grid.as_array()] = color_map[TileKind.FLOOR]
    for pos in path or ():
        cells[pos] = color_map[TileKind.SOLUTION]
    cells[start] = color_map[TileKind.START]
    cells[end] = color_map[TileKind.END]
    if agent is not None:
        cells[agent] = color_map[TileKind.AGENT]

    size = tile_size(grid, resolution)
    return np.repeat(np.repeat(cells, size, axis=0), size, axis=1)


def render_image(
    grid: Grid,
    start: Coord,
    end: Coord,
    path: Optional[Iterable[Coord]] = None,
    agent: Optional[Coord] = None,
    resolution: int = DEFAULT_RESOLUTION,
    color_map: Optional[ColorMap] = None,
) -> Image.Image:
    """Render the maze as an RGBA PIL image about ``resolution`` pixels wide."""
    arr = render_array(grid, start, end, path, agent, resolution, color_map)
    return Image.fromarray(arr)
