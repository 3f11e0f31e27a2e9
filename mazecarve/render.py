# render.py
# -----------------------------------------------------------------------------
# Static pictures of a carved grid: Pillow raster (pixel-exact, with axes) and
# a matplotlib figure for interactive use. Both read the wall snapshots only.
# -----------------------------------------------------------------------------
import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np
from matplotlib.figure import Figure
from PIL import Image, ImageDraw, ImageFont

from mazecarve.constants import (
    BACKGROUND_COLOR, DEF_CANVAS_H, DEF_CANVAS_W, DEF_GRID_GRAY, DEF_GRID_PX,
    DEF_KNOB_PX, DEF_PADS, DEF_WALL_PX, GOAL_COLOR, START_COLOR, WALL_COLOR,
)
from mazecarve.geometry import Rect, border_segments, cell_center, wall_segments
from mazecarve.grid import Cell, Grid

log = logging.getLogger("mazecarve.render")


class Layout(NamedTuple):
    """Where the maze rectangle sits on the canvas; x0, y0 is its top-left corner."""
    canvas_w: int
    canvas_h: int
    cell_px: int
    x0: int
    y0: int

    def center(self, cell: Cell) -> Tuple[float, float]:
        cx, cy = cell_center(cell[0], cell[1], self.cell_px, self.cell_px)
        return self.x0 + cx, self.y0 + cy


def compute_geometry(rows: int, cols: int,
                     canvas: Tuple[int, int] = (DEF_CANVAS_W, DEF_CANVAS_H),
                     cell_px: Optional[int] = None,
                     anchor: Optional[Tuple[int, int]] = None,
                     pads: Tuple[int, int, int, int] = DEF_PADS) -> Layout:
    """
    Fits a rows x cols maze inside the canvas minus the axis pads (left, top,
    right, bottom). Without cell_px the largest square cell that fits is used;
    without anchor the maze is centred in the padded region.
    """
    canvas_w, canvas_h = canvas
    left, top, right, bottom = pads
    avail_w = canvas_w - left - right
    avail_h = canvas_h - top - bottom
    if min(avail_w, avail_h) <= 0:
        raise ValueError(f"Canvas {canvas_w}x{canvas_h} leaves no room inside pads {pads}.")

    if cell_px is None:
        cell_px = min(avail_w // cols, avail_h // rows)
        if cell_px < 1:
            raise ValueError(f"A {rows}x{cols} maze does not fit in {avail_w}x{avail_h} px.")
    elif cols * cell_px > avail_w or rows * cell_px > avail_h:
        raise ValueError(f"{cell_px} px cells overflow the {avail_w}x{avail_h} px drawing area.")

    if anchor is None:
        anchor = (left + (avail_w - cols * cell_px) // 2, top + (avail_h - rows * cell_px) // 2)
    return Layout(canvas_w, canvas_h, cell_px, anchor[0], anchor[1])


# -------------------------
# Pillow
# -------------------------

def _fill_rect(draw: ImageDraw.ImageDraw, rect: Rect, x0: float, y0: float, color):
    # Rect is centre-anchored, relative to the maze corner
    hw, hh = rect.width / 2, rect.height / 2
    cx, cy = x0 + rect.x, y0 + rect.y
    draw.rectangle([cx - hw, cy - hh, cx + hw - 1, cy + hh - 1], fill=color)


def _draw_axes(draw: ImageDraw.ImageDraw, layout: Layout, rows: int, cols: int):
    font = ImageFont.load_default()
    x0, y0, px = layout.x0, layout.y0, layout.cell_px
    # tick labels centred on each cell, roughly 6x11 px per glyph
    for c in range(cols):
        label = str(c)
        draw.text((x0 + (c + 0.5) * px - 3 * len(label), max(0, y0 - 14)), label, fill=WALL_COLOR, font=font)
    for r in range(rows):
        label = str(r)
        draw.text((max(0, x0 - 6 - 6 * len(label)), y0 + (r + 0.5) * px - 6), label, fill=WALL_COLOR, font=font)
    draw.text((x0 + cols * px / 2, max(0, y0 - 28)), "col", fill=WALL_COLOR, font=font)
    draw.text((max(0, x0 - 35), y0 + rows * px / 2 - 6), "row", fill=WALL_COLOR, font=font)


def draw_maze_image(
    grid: Grid,
    start: Optional[Cell] = None,
    goal: Optional[Cell] = None,
    out_png: Optional[str] = None,
    *,
    canvas: Tuple[int, int] = (DEF_CANVAS_W, DEF_CANVAS_H),
    cell_px: Optional[int] = None,
    anchor: Optional[Tuple[int, int]] = None,
    pads: Tuple[int, int, int, int] = DEF_PADS,
    wall_px: int = DEF_WALL_PX,
    knob_px: int = DEF_KNOB_PX,
    draw_grid: bool = True,
    draw_axes: bool = True,
) -> Image.Image:
    """
    Rasterises the maze. Walls come from geometry.wall_segments/border_segments
    scaled to the cell size, so the picture matches what a physics layer would build.
    """
    rows, cols = grid.rows, grid.cols
    for cell in (start, goal):
        if cell is not None:
            grid.check_cell(*cell)

    layout = compute_geometry(rows, cols, canvas, cell_px, anchor, pads)
    maze_w, maze_h = cols * layout.cell_px, rows * layout.cell_px

    im = Image.new("RGB", (layout.canvas_w, layout.canvas_h), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(im)

    if draw_grid and DEF_GRID_GRAY is not None:
        gray = (DEF_GRID_GRAY,) * 3
        for i in range(cols + 1):
            x = layout.x0 + i * layout.cell_px
            draw.line([(x, layout.y0), (x, layout.y0 + maze_h)], fill=gray, width=DEF_GRID_PX)
        for i in range(rows + 1):
            y = layout.y0 + i * layout.cell_px
            draw.line([(layout.x0, y), (layout.x0 + maze_w, y)], fill=gray, width=DEF_GRID_PX)

    walls = border_segments(maze_w, maze_h, wall_px) + wall_segments(grid, maze_w, maze_h, wall_px)
    for rect in walls:
        _fill_rect(draw, rect, layout.x0, layout.y0, WALL_COLOR)

    radius = knob_px // 2
    for cell, color in ((start, START_COLOR), (goal, GOAL_COLOR)):
        if cell is not None:
            cx, cy = layout.center(cell)
            draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=color)

    if draw_axes:
        _draw_axes(draw, layout, rows, cols)

    if out_png:
        im.save(out_png)
        log.info("Saved %dx%d maze image to %s", rows, cols, out_png)
    return im


# -------------------------
# matplotlib
# -------------------------

def plot_maze(grid: Grid, start: Optional[Cell] = None, goal: Optional[Cell] = None,
              ax=None, wall_width: float = 3.5, out_png: Optional[str] = None):
    """
    Draws the maze on `ax` (a new figure when None) with row 0 at the top.
    Returns the axes; when out_png is given the figure is also saved there.
    """
    rows, cols = grid.rows, grid.cols
    if ax is None:
        fig = Figure(figsize=(7.2, 4.8), dpi=100)  # 720x480 @ 100 dpi
        ax = fig.add_subplot(111)
    fig = ax.figure
    ax.set_aspect('equal', adjustable='box')
    ax.set_xlim(0, cols)
    ax.set_ylim(rows, 0)
    ax.set_xticks([c + 0.5 for c in range(cols)]); ax.set_xticklabels(range(cols)); ax.set_xlabel("col")
    ax.set_yticks([r + 0.5 for r in range(rows)]); ax.set_yticklabels(range(rows)); ax.set_ylabel("row")

    # Outer border
    ax.plot([0, cols, cols, 0, 0], [0, 0, rows, rows, 0], 'k-', linewidth=wall_width, zorder=1)

    # Inner walls
    for r, c in np.argwhere(~grid.horiz_walls).tolist():
        ax.plot([c, c + 1], [r + 1, r + 1], 'k-', linewidth=wall_width, zorder=2)
    for r, c in np.argwhere(~grid.vert_walls).tolist():
        ax.plot([c + 1, c + 1], [r, r + 1], 'k-', linewidth=wall_width, zorder=2)

    if start is not None:
        ax.scatter(start[1] + 0.5, start[0] + 0.5, s=300, c='red', edgecolors='none', zorder=3)
    if goal is not None:
        ax.scatter(goal[1] + 0.5, goal[0] + 0.5, s=300, c='green', edgecolors='none', zorder=3)

    if out_png:
        fig.savefig(out_png, dpi=100)
        log.info("Saved %dx%d maze plot to %s", rows, cols, out_png)
    return ax


# -------------------------
# Text
# -------------------------

def ascii_maze(grid: Grid, start: Optional[Cell] = None, goal: Optional[Cell] = None) -> str:
    """'+---+' style drawing; S and G mark start and goal."""
    rows, cols = grid.rows, grid.cols
    horiz, vert = grid.horiz_walls, grid.vert_walls
    start = tuple(start) if start is not None else None
    goal = tuple(goal) if goal is not None else None
    lines = ["+" + "---+" * cols]
    for r in range(rows):
        row = "|"
        for c in range(cols):
            mark = "S" if start == (r, c) else "G" if goal == (r, c) else " "
            row += f" {mark} "
            row += " " if c < cols - 1 and vert[r, c] else "|"
        lines.append(row)
        below = "+"
        for c in range(cols):
            below += "   +" if r < rows - 1 and horiz[r, c] else "---+"
        lines.append(below)
    return "\n".join(lines)
