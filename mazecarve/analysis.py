# analysis.py
# Graph view of a carved grid: neighbours through open walls, BFS paths, signatures.

import hashlib
from collections import deque
from typing import Dict, List, Tuple

from mazecarve.grid import Cell, Grid

# Row increases downward, col increases rightward.
DIRS = {'N': (-1, 0), 'S': (1, 0), 'E': (0, 1), 'W': (0, -1)}


def grid_to_graph(grid: Grid) -> Dict[Cell, List[Cell]]:
    G = {}
    for r in range(grid.rows):
        for c in range(grid.cols):
            nbrs = []
            for dr, dc in DIRS.values():
                nr, nc = r + dr, c + dc
                if grid.in_bounds(nr, nc) and grid.is_open_between((r, c), (nr, nc)):
                    nbrs.append((nr, nc))
            G[(r, c)] = nbrs
    return G


def shortest_path(graph: Dict[Cell, List[Cell]], start: Cell, goal: Cell) -> List[Cell]:
    q = deque([start])
    parent = {start: None}
    while q:
        u = q.popleft()
        if u == goal:
            break
        for v in graph[u]:
            if v not in parent:
                parent[v] = u
                q.append(v)
    if goal not in parent:
        return []
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    return list(reversed(path))


def reachable(graph: Dict[Cell, List[Cell]], start: Cell) -> set:
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v in graph[u]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def is_perfect(grid: Grid) -> bool:
    """
    True when the open walls form a spanning tree over all cells:
    rows*cols - 1 openings and every cell reachable from (0, 0).
    A connected graph with n - 1 edges has no cycle.
    """
    if grid.open_wall_count != grid.rows * grid.cols - 1:
        return False
    return len(reachable(grid_to_graph(grid), (0, 0))) == grid.rows * grid.cols


def dead_ends(grid: Grid) -> List[Cell]:
    return [cell for cell, nbrs in grid_to_graph(grid).items() if len(nbrs) == 1]


def encode_maze(grid: Grid) -> str:
    h = hashlib.sha256(f"{grid.rows}x{grid.cols}:".encode('ascii'))
    h.update(grid.vert_walls.tobytes())
    h.update(grid.horiz_walls.tobytes())
    return h.hexdigest()


def walls_to_lists(grid: Grid) -> Tuple[List[List[int]], List[List[int]]]:
    """Wall matrices as nested 0/1 lists for JSON."""
    return grid.vert_walls.astype(int).tolist(), grid.horiz_walls.astype(int).tolist()
