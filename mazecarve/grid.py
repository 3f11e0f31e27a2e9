# grid.py
"""
Grid state for maze carving.

Three boolean matrices, all False at creation:
  visited     (rows, cols)      cell has been entered by the traversal
  vert_walls  (rows, cols - 1)  [r, c] is the wall between columns c and c+1 of row r
  horiz_walls (rows - 1, cols)  [r, c] is the wall between rows r and r+1 of column c

For the wall matrices True means "open" (no wall drawn), False means "wall".
"""

from numbers import Integral
from typing import Tuple

import numpy as np

from mazecarve.errors import InvalidDimensions, NotAdjacent, OutOfBounds

Cell = Tuple[int, int]


def _is_index(v) -> bool:
    return isinstance(v, Integral) and not isinstance(v, bool)


def _frozen(a: np.ndarray) -> np.ndarray:
    view = a.copy()
    view.flags.writeable = False
    return view


class Grid:
    def __init__(self, rows: int, cols: int):
        if not (_is_index(rows) and _is_index(cols)) or rows < 1 or cols < 1:
            raise InvalidDimensions(rows, cols)
        self.rows = int(rows)
        self.cols = int(cols)
        self._visited = np.zeros((self.rows, self.cols), dtype=bool)
        self._vert = np.zeros((self.rows, self.cols - 1), dtype=bool)
        self._horiz = np.zeros((self.rows - 1, self.cols), dtype=bool)

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols}, visited={self.visited_count})"

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    # -------------------------
    # Cells
    # -------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        if not (_is_index(row) and _is_index(col)):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_cell(self, row: int, col: int):
        # numpy would happily wrap negative indices
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)

    def is_visited(self, row: int, col: int) -> bool:
        self.check_cell(row, col)
        return bool(self._visited[row, col])

    def mark_visited(self, row: int, col: int):
        self.check_cell(row, col)
        self._visited[row, col] = True

    @property
    def visited_count(self) -> int:
        return int(self._visited.sum())

    # -------------------------
    # Walls
    # -------------------------

    def _wall_index(self, cell_a: Cell, cell_b: Cell):
        """Returns (matrix, index) of the wall shared by two neighbouring cells."""
        (ra, ca), (rb, cb) = cell_a, cell_b
        self.check_cell(ra, ca)
        self.check_cell(rb, cb)
        if ra == rb and abs(ca - cb) == 1:
            return self._vert, (ra, min(ca, cb))
        if ca == cb and abs(ra - rb) == 1:
            return self._horiz, (min(ra, rb), ca)
        raise NotAdjacent(cell_a, cell_b)

    def open_wall_between(self, cell_a: Cell, cell_b: Cell):
        matrix, idx = self._wall_index(cell_a, cell_b)
        matrix[idx] = True

    def is_open_between(self, cell_a: Cell, cell_b: Cell) -> bool:
        matrix, idx = self._wall_index(cell_a, cell_b)
        return bool(matrix[idx])

    @property
    def open_wall_count(self) -> int:
        return int(self._vert.sum() + self._horiz.sum())

    # -------------------------
    # Read-only snapshots for consumers
    # -------------------------

    @property
    def visited(self) -> np.ndarray:
        return _frozen(self._visited)

    @property
    def vert_walls(self) -> np.ndarray:
        return _frozen(self._vert)

    @property
    def horiz_walls(self) -> np.ndarray:
        return _frozen(self._horiz)


def create(rows: int, cols: int) -> Grid:
    return Grid(rows, cols)
