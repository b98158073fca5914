"""Rendering subpackage.

Turns immutable maze grids into images: one flat-colored square per cell
(entrance, exit, wall, passage) with an optional solution path overlay.
Rendering is Pillow + NumPy based and suited to small grids.

See :mod:`maze_runner.renderer.image` for the palette and composition.
"""
