"""maze_forge
=============

Perfect-maze generation and breadth-first solving over a rectangular grid.

Typical cycle::

    from maze_forge.grid import Grid
    from maze_forge.generator import MazeGenerator
    from maze_forge.solver import find_shortest_path

    grid = Grid(21, 21)
    MazeGenerator(seed=42).generate(grid)
    path = find_shortest_path(grid, (0, 0), (20, 20))

The grid is owned by the caller; the generator and solver borrow it in turn.
"""
