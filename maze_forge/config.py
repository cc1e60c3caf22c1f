"""Maze run configuration.

:class:`MazeConfig` is a frozen value object; build variants with
``dataclasses.replace``. Start and end follow the fixed corner convention.
"""

from dataclasses import dataclass
from typing import Optional

from maze_forge.types import CarveVariant, Coord

MIN_DIMENSION = 3
DEFAULT_ROWS = 21
DEFAULT_COLS = 21
DEFAULT_SEED = 42


def normalize_dimensions(rows: int, cols: int) -> tuple[int, int]:
    """Validate dimensions and bump even values to the next odd one.

    Raises:
        ValueError: If either dimension is below :data:`MIN_DIMENSION`.
    """
    if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
        raise ValueError(
            f"Minimum maze size is {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{cols}"
        )
    return rows | 1, cols | 1


@dataclass(frozen=True)
class MazeConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    seed: Optional[int] = DEFAULT_SEED
    variant: CarveVariant = CarveVariant.ROOM

    @property
    def start(self) -> Coord:
        return (0, 0)

    @property
    def end(self) -> Coord:
        return (self.rows - 1, self.cols - 1)

    @classmethod
    def from_dimensions(
        cls,
        rows: int,
        cols: int,
        seed: Optional[int] = DEFAULT_SEED,
        variant: CarveVariant = CarveVariant.ROOM,
    ) -> "MazeConfig":
        """Normalise ``rows``/``cols`` (see :func:`normalize_dimensions`) and build."""
        rows, cols = normalize_dimensions(rows, cols)
        return cls(rows=rows, cols=cols, seed=seed, variant=CarveVariant(variant))
