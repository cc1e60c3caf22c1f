from dataclasses import replace

import pytest

from maze_forge.config import MazeConfig, normalize_dimensions
from maze_forge.types import CarveVariant


@pytest.mark.parametrize(
    "rows, cols, expected",
    [
        (3, 3, (3, 3)),
        (4, 3, (5, 3)),
        (10, 21, (11, 21)),
        (20, 20, (21, 21)),
    ],
)
def test_normalize_dimensions(rows: int, cols: int, expected) -> None:
    assert normalize_dimensions(rows, cols) == expected


@pytest.mark.parametrize("rows, cols", [(2, 5), (5, 2), (0, 0), (-3, 9)])
def test_normalize_dimensions_rejects_small(rows: int, cols: int) -> None:
    with pytest.raises(ValueError, match="Minimum maze size"):
        normalize_dimensions(rows, cols)


def test_config_endpoints() -> None:
    config = MazeConfig.from_dimensions(8, 12, seed=5, variant="cell")
    assert (config.rows, config.cols) == (9, 13)
    assert config.start == (0, 0)
    assert config.end == (8, 12)
    assert config.variant == CarveVariant.CELL
    assert replace(config, rows=15).end == (14, 12)


def test_config_is_frozen() -> None:
    config = MazeConfig()
    with pytest.raises(AttributeError):
        config.rows = 5  # type: ignore[misc]
