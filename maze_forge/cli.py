"""Console entry point: generate, verify, solve and print a maze."""

import logging
import sys
from typing import Optional

import click

from maze_forge.config import DEFAULT_SEED, MazeConfig
from maze_forge.renderer.text import legend_text, render_text
from maze_forge.stats import build_maze, stats_lines
from maze_forge.types import CarveVariant

BANNER = "=" * 40


def _section(title: str) -> None:
    click.echo(f"\n{BANNER}\n   {title}\n{BANNER}")


@click.command()
@click.option("--rows", type=int, default=None, help="Maze rows (odd recommended).")
@click.option("--cols", type=int, default=None, help="Maze columns (odd recommended).")
@click.option(
    "--seed",
    type=int,
    default=DEFAULT_SEED,
    show_default=True,
    help="Random seed for reproducible mazes; 0 picks a random seed.",
)
@click.option(
    "--variant",
    type=click.Choice([v.value for v in CarveVariant]),
    default=CarveVariant.ROOM.value,
    show_default=True,
    help="Carving variant.",
)
@click.option("--no-solution", is_flag=True, help="Skip printing the solved maze.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    rows: Optional[int],
    cols: Optional[int],
    seed: int,
    variant: str,
    no_solution: bool,
    verbose: bool,
) -> None:
    """Generate a guaranteed-solvable perfect maze and show its shortest path."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    click.echo("=== Maze Generator ===")
    if rows is None:
        rows = click.prompt("Rows (odd number recommended)", type=int)
    if cols is None:
        cols = click.prompt("Columns (odd number recommended)", type=int)

    try:
        config = MazeConfig.from_dimensions(
            rows, cols, seed=seed, variant=CarveVariant(variant)
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if (config.rows, config.cols) != (rows, cols):
        click.echo(f"Using dimensions: {config.rows} x {config.cols}")

    click.echo(f"Generating maze using recursive backtracking ({config.variant})...")
    run = build_maze(config)
    click.echo(f"Maze generated in {run.stats.generation_ms:.2f} ms")

    _section("GENERATED MAZE (Before Solving)")
    click.echo(render_text(run.grid, config.start, config.end))

    click.echo("\nVerifying maze solvability...")
    if not run.solvable:
        click.echo("ERROR: Maze is NOT solvable!", err=True)
        sys.exit(1)
    click.echo("Maze is SOLVABLE")
    click.echo("\nFinding shortest path from S to E...")
    click.echo(f"Shortest path length: {len(run.path)} cells")

    if not no_solution:
        _section("MAZE WITH SOLUTION PATH (.)")
        click.echo(render_text(run.grid, config.start, config.end, run.path))

    click.echo("\n=== Maze Statistics ===")
    for line in stats_lines(run.stats):
        click.echo(line)

    click.echo("\n=== Legend ===")
    click.echo(legend_text())
    click.echo("\nMaze generation complete!")


if __name__ == "__main__":
    main()
