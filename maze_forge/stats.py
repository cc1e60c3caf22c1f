"""Full generate -> verify -> solve cycle with summary statistics."""

import logging
import time
from dataclasses import dataclass

from maze_forge.config import MazeConfig
from maze_forge.generator import MazeGenerator
from maze_forge.grid import Grid
from maze_forge.solver import find_shortest_path, is_solvable
from maze_forge.types import CellKind, Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MazeStats:
    """Summary of one generated maze.

    Attributes:
        rows: Grid rows.
        cols: Grid columns.
        total_cells: ``rows * cols``.
        walls: Number of Wall cells.
        paths: Number of Path cells.
        path_ratio: Percentage of Path cells.
        path_length: Cells on the shortest start -> end path (0 if none).
        generation_ms: Wall time spent carving, in milliseconds.
        seed: Effective RNG seed.
    """

    rows: int
    cols: int
    total_cells: int
    walls: int
    paths: int
    path_ratio: float
    path_length: int
    generation_ms: float
    seed: int


@dataclass
class MazeRun:
    config: MazeConfig
    grid: Grid
    solvable: bool
    path: Path
    stats: MazeStats


def compute_stats(
    grid: Grid, path: Path, generation_ms: float = 0.0, seed: int = 0
) -> MazeStats:
    total = grid.rows * grid.cols
    paths = grid.count(CellKind.PATH)
    return MazeStats(
        rows=grid.rows,
        cols=grid.cols,
        total_cells=total,
        walls=total - paths,
        paths=paths,
        path_ratio=100.0 * paths / total,
        path_length=len(path),
        generation_ms=generation_ms,
        seed=seed,
    )


def build_maze(config: MazeConfig) -> MazeRun:
    """Generate, verify and solve a maze described by ``config``."""
    grid = Grid(config.rows, config.cols)
    generator = MazeGenerator(seed=config.seed, variant=config.variant)

    t0 = time.perf_counter()
    generator.generate(grid)
    generation_ms = (time.perf_counter() - t0) * 1000.0

    solvable = is_solvable(grid, config.start, config.end)
    path = find_shortest_path(grid, config.start, config.end) if solvable else []
    if not solvable:
        logger.warning(
            "Generated maze is not solvable (seed=%d, %dx%d)",
            generator.seed,
            config.rows,
            config.cols,
        )

    stats = compute_stats(grid, path, generation_ms, generator.seed)
    return MazeRun(config=config, grid=grid, solvable=solvable, path=path, stats=stats)


def stats_lines(stats: MazeStats) -> list[str]:
    return [
        f"Dimensions: {stats.rows} x {stats.cols}",
        f"Total cells: {stats.total_cells}",
        f"Walls: {stats.walls}",
        f"Paths: {stats.paths}",
        f"Path ratio: {stats.path_ratio:.2f}%",
        f"Shortest path length: {stats.path_length} cells",
        f"Seed: {stats.seed}",
    ]
