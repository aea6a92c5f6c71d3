"""
Rasterize grids and colored meshes into RGB images.

Images are (S, S, 3) uint8 arrays indexed [y, x], so row y of the grid is
row y of the image.
"""

from pathlib import Path
from typing import Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from .coloring import ColorAssignment
from .grid import OccupancyGrid
from .mesher import Quad

DEFAULT_CELL_COLOR = "#a00"
BACKGROUND_COLOR = (255, 255, 255)


def parse_hex_color(value: str) -> Tuple[int, int, int]:
    """Parse "#rgb" or "#rrggbb" into an RGB tuple."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {value!r}")
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def blank_image(side_length: int) -> np.ndarray:
    image = np.empty((side_length, side_length, 3), dtype=np.uint8)
    image[:, :] = BACKGROUND_COLOR
    return image


def paint_grid(grid: OccupancyGrid, color: Union[str, Tuple[int, int, int]] = DEFAULT_CELL_COLOR) -> np.ndarray:
    """Paint every occupied cell of the grid with one color."""
    rgb = parse_hex_color(color) if isinstance(color, str) else color
    image = blank_image(grid.side_length)
    image[grid.as_array()] = rgb
    return image


def paint_quads(side_length: int, quads: Sequence[Quad], coloring: ColorAssignment) -> np.ndarray:
    """Paint each quad's cells with the display color of its color id."""
    assert len(quads) == len(coloring.color_ids), "coloring does not match quads"
    image = blank_image(side_length)
    for i, quad in enumerate(quads):
        image[quad.y0:quad.y1 + 1, quad.x0:quad.x1 + 1] = coloring.color_of(i)
    return image


def save_image(image: np.ndarray, path: Union[str, Path]) -> Path:
    """Write an RGB image as PNG, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(path, image)
    return path
