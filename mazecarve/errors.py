# errors.py
"""Contract violations raised by the grid model and the carver."""


class MazeError(Exception):
    """Base class for every error raised by mazecarve."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, rows, cols):
        super().__init__(f"Grid dimensions must be positive integers, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols


class OutOfBounds(MazeError, IndexError):
    def __init__(self, row, col, rows, cols):
        super().__init__(f"Cell ({row},{col}) is outside a {rows}x{cols} grid.")
        self.row = row
        self.col = col


class NotAdjacent(MazeError, ValueError):
    def __init__(self, cell_a, cell_b):
        super().__init__(f"Cells {tuple(cell_a)} and {tuple(cell_b)} are not orthogonal neighbours.")
        self.cell_a = tuple(cell_a)
        self.cell_b = tuple(cell_b)
