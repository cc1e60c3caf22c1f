"""Rendering subpackage.

Turns a carved :class:`maze_forge.grid.Grid` (plus an optional solution path)
into something a person can look at. Renderers only read the grid.

* :mod:`maze_forge.renderer.text` produces the classic character grid.
* :mod:`maze_forge.renderer.image` paints square tiles into a Pillow image
  through a NumPy RGBA buffer.
"""
