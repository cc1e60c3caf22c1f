"""Common type aliases and enumerations.

Coordinates are ``(row, col)`` tuples with ``(0, 0)`` at the top-left corner.
"""

from enum import StrEnum, auto

Coord = tuple[int, int]
Path = list[Coord]

# Up, down, left, right. Neighbour enumeration relies on this order.
DIRECTIONS: list[tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class CellKind(StrEnum):
    """Permanent state of a grid cell."""

    WALL = auto()
    PATH = auto()


class CarveVariant(StrEnum):
    """Carving strategy used by the generator.

    ``CELL`` treats every cell as carvable and steps one cell at a time.
    ``ROOM`` treats even coordinates as rooms spaced two cells apart and opens
    the single wall cell between two rooms when stepping.
    """

    CELL = auto()
    ROOM = auto()
