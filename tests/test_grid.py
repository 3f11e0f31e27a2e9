import numpy as np
import pytest

from mazecarve.errors import InvalidDimensions, MazeError, NotAdjacent, OutOfBounds
from mazecarve.grid import Grid, create


def test_create_allocates_closed_unvisited_matrices():
    grid = create(3, 4)
    assert grid.shape == (3, 4)
    assert grid.visited.shape == (3, 4)
    assert grid.vert_walls.shape == (3, 3)
    assert grid.horiz_walls.shape == (2, 4)
    assert not grid.visited.any()
    assert not grid.vert_walls.any()
    assert not grid.horiz_walls.any()
    assert grid.visited_count == 0
    assert grid.open_wall_count == 0


def test_single_cell_grid_has_empty_wall_matrices():
    grid = Grid(1, 1)
    assert grid.vert_walls.shape == (1, 0)
    assert grid.horiz_walls.shape == (0, 1)
    assert grid.vert_walls.size == 0
    assert grid.horiz_walls.size == 0


@pytest.mark.parametrize("rows, cols", [
    (0, 3), (3, 0), (-1, 2), (2, -5), (2.5, 3), ("3", 3), (True, True), (3, False),
])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(InvalidDimensions):
        Grid(rows, cols)


def test_errors_share_a_base_class():
    assert issubclass(InvalidDimensions, MazeError)
    assert issubclass(OutOfBounds, MazeError)
    assert issubclass(NotAdjacent, MazeError)
    assert issubclass(OutOfBounds, IndexError)
    assert issubclass(NotAdjacent, ValueError)


@pytest.mark.parametrize("row, col", [
    (-1, 0), (0, -1), (3, 0), (0, 4), (10, 10), (0.5, 0), (1, 2.0), (True, 0), ("1", 1),
])
def test_out_of_bounds_is_never_clamped(row, col):
    grid = Grid(3, 4)
    with pytest.raises(OutOfBounds):
        grid.is_visited(row, col)
    with pytest.raises(OutOfBounds):
        grid.mark_visited(row, col)
    assert grid.visited_count == 0


def test_mark_visited_is_idempotent():
    grid = Grid(2, 2)
    grid.mark_visited(1, 0)
    once = grid.visited.copy()
    grid.mark_visited(1, 0)
    assert np.array_equal(grid.visited, once)
    assert grid.is_visited(1, 0)
    assert not grid.is_visited(0, 0)
    assert grid.visited_count == 1


def test_open_wall_between_horizontal_neighbours():
    grid = Grid(2, 3)
    grid.open_wall_between((1, 2), (1, 1))
    assert grid.vert_walls[1, 1]
    assert grid.open_wall_count == 1
    assert grid.is_open_between((1, 1), (1, 2))
    assert not grid.is_open_between((0, 1), (0, 2))


def test_open_wall_between_vertical_neighbours():
    grid = Grid(3, 2)
    grid.open_wall_between((0, 1), (1, 1))
    assert grid.horiz_walls[0, 1]
    assert grid.is_open_between((1, 1), (0, 1))
    assert grid.open_wall_count == 1


@pytest.mark.parametrize("a, b", [((0, 0), (1, 1)), ((0, 0), (0, 2)), ((0, 0), (0, 0)), ((2, 0), (0, 0))])
def test_open_wall_between_rejects_non_neighbours(a, b):
    grid = Grid(3, 3)
    with pytest.raises(NotAdjacent):
        grid.open_wall_between(a, b)
    assert grid.open_wall_count == 0


def test_open_wall_between_rejects_cells_off_the_grid():
    grid = Grid(2, 2)
    with pytest.raises(OutOfBounds):
        grid.open_wall_between((1, 1), (1, 2))
    with pytest.raises(OutOfBounds):
        grid.open_wall_between((0, 0), (-1, 0))


def test_snapshots_are_read_only_copies():
    grid = Grid(2, 2)
    snap = grid.vert_walls
    with pytest.raises(ValueError):
        snap[0, 0] = True
    grid.open_wall_between((0, 0), (0, 1))
    assert not snap[0, 0]
    assert grid.vert_walls[0, 0]


def test_numpy_integer_coordinates_are_accepted():
    grid = Grid(np.int64(3), np.int32(2))
    grid.mark_visited(np.int64(2), np.int8(1))
    assert grid.is_visited(2, 1)
    assert not grid.in_bounds(1.0, 1)


def test_open_wall_between_rejects_fractional_cells():
    grid = Grid(3, 3)
    with pytest.raises(OutOfBounds):
        grid.open_wall_between((0, 0), (0.5, 0))
    assert grid.open_wall_count == 0
