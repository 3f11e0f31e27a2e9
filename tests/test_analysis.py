from mazecarve.analysis import (
    dead_ends, encode_maze, grid_to_graph, is_perfect, reachable, shortest_path, walls_to_lists,
)
from mazecarve.grid import Grid


def _corridor():
    # 2x2 U shape: (0,0)-(1,0)-(1,1)-(0,1)
    grid = Grid(2, 2)
    grid.open_wall_between((0, 0), (1, 0))
    grid.open_wall_between((1, 0), (1, 1))
    grid.open_wall_between((1, 1), (0, 1))
    return grid


def test_grid_to_graph_follows_open_walls():
    graph = grid_to_graph(_corridor())
    assert sorted(graph[(0, 0)]) == [(1, 0)]
    assert sorted(graph[(1, 0)]) == [(0, 0), (1, 1)]
    assert sorted(graph[(0, 1)]) == [(1, 1)]


def test_shortest_path_through_corridor():
    graph = grid_to_graph(_corridor())
    assert shortest_path(graph, (0, 0), (0, 1)) == [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert shortest_path(graph, (1, 1), (1, 1)) == [(1, 1)]


def test_shortest_path_when_disconnected():
    graph = grid_to_graph(Grid(2, 2))
    assert shortest_path(graph, (0, 0), (1, 1)) == []
    assert reachable(graph, (0, 0)) == {(0, 0)}


def test_is_perfect():
    assert is_perfect(_corridor())
    assert is_perfect(Grid(1, 1))
    assert not is_perfect(Grid(2, 2))

    loop = _corridor()
    loop.open_wall_between((0, 0), (0, 1))
    assert not is_perfect(loop)


def test_dead_ends():
    assert sorted(dead_ends(_corridor())) == [(0, 0), (0, 1)]


def test_encode_maze_is_stable_and_distinguishes_mazes(carved):
    a = carved(6, 6, seed=1)
    b = carved(6, 6, seed=1)
    c = carved(6, 6, seed=2)
    assert encode_maze(a) == encode_maze(b)
    assert len(encode_maze(a)) == 64
    assert encode_maze(a) != encode_maze(c)


def test_encode_maze_includes_dimensions():
    # both have empty wall matrices
    assert encode_maze(Grid(1, 1)) != encode_maze(Grid(1, 2))


def test_walls_to_lists():
    vert, horiz = walls_to_lists(_corridor())
    assert vert == [[0], [1]]
    assert horiz == [[1, 1]]
