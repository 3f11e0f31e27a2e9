# geometry.py
"""
Wall matrices -> axis-aligned rectangles in pixel space.

Rectangles are centre-anchored (x, y is the centre), which is what rigid-body
engines expect when building static wall bodies. Only closed walls produce a
rectangle; open entries are passages.
"""

from typing import List, NamedTuple, Tuple

import numpy as np

from mazecarve.constants import WALL_WIDTH
from mazecarve.grid import Grid


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float


def unit_lengths(rows: int, cols: int, width: float, height: float) -> Tuple[float, float]:
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface must have a positive size, got {width}x{height}.")
    return width / cols, height / rows


def cell_center(row: int, col: int, unit_x: float, unit_y: float) -> Tuple[float, float]:
    return col * unit_x + unit_x / 2, row * unit_y + unit_y / 2


def border_segments(width: float, height: float, wall_width: float = WALL_WIDTH) -> List[Rect]:
    return [
        Rect(width / 2, 0, width, wall_width),        # top
        Rect(width / 2, height, width, wall_width),   # bottom
        Rect(0, height / 2, wall_width, height),      # left
        Rect(width, height / 2, wall_width, height),  # right
    ]


def wall_segments(grid: Grid, width: float, height: float,
                  wall_width: float = WALL_WIDTH) -> List[Rect]:
    ux, uy = unit_lengths(grid.rows, grid.cols, width, height)
    rects = []
    for r, c in np.argwhere(~grid.horiz_walls).tolist():
        rects.append(Rect(c * ux + ux / 2, r * uy + uy, ux, wall_width))
    for r, c in np.argwhere(~grid.vert_walls).tolist():
        rects.append(Rect(c * ux + ux, r * uy + uy / 2, wall_width, uy))
    return rects
