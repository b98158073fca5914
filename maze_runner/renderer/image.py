from typing import Dict, Iterable, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from maze_runner.components import Position
from maze_runner.levels.ascii import cell_kind
from maze_runner.types import CellKind, Grid
from maze_runner.utils.grid import grid_size

DEFAULT_RESOLUTION = 640
DEFAULT_LINE_WIDTH = 1

RGB = Tuple[int, int, int]
Palette = Dict[CellKind, RGB]
UInt8Array = npt.NDArray[np.uint8]

DEFAULT_PALETTE: Palette = {
    CellKind.START: (34, 197, 94),
    CellKind.END: (239, 68, 68),
    CellKind.PATH: (250, 204, 21),
    CellKind.WALL: (51, 65, 85),
    CellKind.PASSAGE: (241, 245, 249),
}
GRID_LINE_COLOR: RGB = (75, 85, 99)
EMPTY_COLOR: RGB = (17, 24, 39)


def render(
    grid: Grid,
    path: Optional[Iterable[Position]] = None,
    resolution: int = DEFAULT_RESOLUTION,
    palette: Optional[Palette] = None,
    line_width: int = DEFAULT_LINE_WIDTH,
) -> Image.Image:
    """
    Renders a maze grid as an RGB PIL Image, one flat-colored square per cell,
    with the solution path (if any) highlighted.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    width, height = grid_size(grid)
    if width == 0:
        return Image.new("RGB", (resolution, resolution), EMPTY_COLOR)

    cell_size: int = max(1, resolution // max(width, height))
    on_path = {(p.x, p.y) for p in path} if path else set()
    colors: UInt8Array = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            colors[y, x] = palette[cell_kind(grid[y][x], (x, y) in on_path)]

    # Upscale each cell to a cell_size x cell_size block.
    pixels: UInt8Array = np.repeat(np.repeat(colors, cell_size, axis=0), cell_size, axis=1)

    if line_width > 0 and cell_size > 2 * line_width:
        for i in range(height):
            pixels[i * cell_size : i * cell_size + line_width, :] = GRID_LINE_COLOR
        for j in range(width):
            pixels[:, j * cell_size : j * cell_size + line_width] = GRID_LINE_COLOR
        pixels[-line_width:, :] = GRID_LINE_COLOR
        pixels[:, -line_width:] = GRID_LINE_COLOR

    return Image.fromarray(pixels)


class MazeRenderer:
    resolution: int
    palette: Palette
    line_width: int

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        palette: Optional[Palette] = None,
        line_width: int = DEFAULT_LINE_WIDTH,
    ):
        self.resolution = resolution
        self.palette = palette or DEFAULT_PALETTE
        self.line_width = line_width

    def render(self, grid: Grid, path: Optional[Iterable[Position]] = None) -> Image.Image:
        return render(
            grid,
            path=path,
            resolution=self.resolution,
            palette=self.palette,
            line_width=self.line_width,
        )
