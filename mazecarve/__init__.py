from mazecarve.carver import (
    DIRECTIONS, Direction, Maze, MazeCarver, carve_maze, farthest_corner, generate_maze,
    shuffled_directions,
)
from mazecarve.errors import InvalidDimensions, MazeError, NotAdjacent, OutOfBounds
from mazecarve.grid import Grid, create

__version__ = "0.1.0"

__all__ = [
    "Grid", "create",
    "Direction", "DIRECTIONS", "MazeCarver", "Maze",
    "carve_maze", "generate_maze", "farthest_corner", "shuffled_directions",
    "MazeError", "InvalidDimensions", "OutOfBounds", "NotAdjacent",
]
