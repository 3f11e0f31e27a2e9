# carver.py
"""
Randomized depth-first maze carving ("recursive backtracker").

    visit(cell):
        mark cell visited
        for each neighbour in a random order of up/down/left/right:
            skip if outside the grid or already visited
            open the wall towards it, visit(neighbour)

The recursion is unrolled into an explicit stack of (cell, pending neighbours)
frames, so the visiting order is the same as the recursive form and grid size
is not limited by the interpreter's recursion limit.
"""

import logging
import random
from enum import Enum
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from mazecarve.grid import Cell, Grid

log = logging.getLogger("mazecarve.carver")


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    def step(self, cell: Cell) -> Cell:
        r, c = cell
        return r + self.dr, c + self.dc


DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

# Given the cell being visited, returns the order its neighbours are tried in.
NeighbourOrder = Callable[[Cell], List[Direction]]


def shuffled_directions(rng: random.Random) -> List[Direction]:
    dirs = list(DIRECTIONS)
    rng.shuffle(dirs)
    return dirs


class MazeCarver:
    def __init__(self, grid: Grid, rng: Optional[random.Random] = None,
                 order: Optional[NeighbourOrder] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.order = order if order is not None else (lambda cell: shuffled_directions(self.rng))

    def _neighbours(self, cell: Cell) -> Iterator[Cell]:
        for d in self.order(cell):
            yield d.step(cell)

    def generate(self, start_row: int, start_col: int) -> Grid:
        grid = self.grid
        start = (start_row, start_col)
        if grid.is_visited(*start):
            return grid
        grid.mark_visited(*start)
        stack = [(start, self._neighbours(start))]
        while stack:
            cell, pending = stack[-1]
            for nr, nc in pending:
                if not grid.in_bounds(nr, nc) or grid.is_visited(nr, nc):
                    continue
                grid.open_wall_between(cell, (nr, nc))
                grid.mark_visited(nr, nc)
                stack.append(((nr, nc), self._neighbours((nr, nc))))
                break
            else:
                stack.pop()
        log.debug("Carved %dx%d maze from %s: %d cells, %d openings",
                  grid.rows, grid.cols, start, grid.visited_count, grid.open_wall_count)
        return grid


def carve_maze(grid: Grid, rng: random.Random,
               start_r: Optional[int] = None, start_c: Optional[int] = None) -> Tuple[int, int]:
    """Carves `grid` in place. Missing start coordinates are drawn from `rng`; returns the start cell."""
    if start_r is None:
        start_r = rng.randrange(grid.rows)
    if start_c is None:
        start_c = rng.randrange(grid.cols)
    MazeCarver(grid, rng).generate(start_r, start_c)
    return start_r, start_c


# -------------------------
# Start/goal policy
# -------------------------

def farthest_corner(rows: int, cols: int, start: Cell) -> Cell:
    """Corner with the largest Manhattan distance from start; ties go to bottom-right first."""
    sr, sc = start
    corners = [(rows - 1, cols - 1), (rows - 1, 0), (0, cols - 1), (0, 0)]
    return max(corners, key=lambda rc: abs(rc[0] - sr) + abs(rc[1] - sc))


class Maze(NamedTuple):
    grid: Grid
    start: Cell
    goal: Cell

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols


def generate_maze(rows: int, cols: int, rng: Optional[random.Random] = None,
                  seed: Optional[int] = None,
                  start: Optional[Cell] = None, goal: Optional[Cell] = None) -> Maze:
    if rng is None:
        rng = random.Random(seed)
    grid = Grid(rows, cols)
    if start is None:
        start = (rng.randrange(rows), rng.randrange(cols))
    start = tuple(start)
    MazeCarver(grid, rng).generate(*start)
    if goal is None:
        goal = farthest_corner(rows, cols, start)
    else:
        goal = tuple(goal)
        grid.check_cell(*goal)
    return Maze(grid, start, goal)
