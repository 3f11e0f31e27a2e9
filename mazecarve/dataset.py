# dataset.py
"""
JSONL dataset of unique mazes (+ optional PNGs).

Each record carries the wall matrices as 0/1 lists (1 = open), the start and
goal cells, the seed that reproduces the maze and the shortest start->goal
path through it.
"""

import json
import logging
import os
import random
from typing import Optional, Tuple

from mazecarve.analysis import encode_maze, grid_to_graph, shortest_path, walls_to_lists
from mazecarve.carver import generate_maze
from mazecarve.constants import DEF_BASE_SEED
from mazecarve.render import draw_maze_image

log = logging.getLogger("mazecarve.dataset")


def maze_record(maze, index: int, seed: Optional[int] = None) -> dict:
    vert, horiz = walls_to_lists(maze.grid)
    path = shortest_path(grid_to_graph(maze.grid), maze.start, maze.goal)
    return {
        "index": index,
        "rows": maze.rows,
        "cols": maze.cols,
        "seed": seed,
        "start_pos": [maze.start[0], maze.start[1]],
        "end_pos": [maze.goal[0], maze.goal[1]],
        "signature": encode_maze(maze.grid),
        "vert_walls": vert,
        "horiz_walls": horiz,
        "true_path": [[r, c] for (r, c) in path],
    }


def generate_dataset(count: int, rows: int, cols: int, out_jsonl: str,
                     base_seed: int = DEF_BASE_SEED,
                     png_dir: Optional[str] = None,
                     max_attempts: Optional[int] = None) -> Tuple[int, int]:
    """
    Writes up to `count` distinct mazes. Seeds run base_seed, base_seed+1, ...;
    a maze whose signature was already written is skipped. Small grids have
    few distinct mazes, so generation stops after `max_attempts` seeds
    (default 20 * count). Returns (records written, seeds tried).
    """
    if max_attempts is None:
        max_attempts = 20 * count
    if png_dir:
        os.makedirs(png_dir, exist_ok=True)

    seen = set()
    made = 0
    idx = 0
    with open(out_jsonl, "w") as f:
        while made < count and idx < max_attempts:
            seed = base_seed + idx
            idx += 1
            maze = generate_maze(rows, cols, rng=random.Random(seed))
            sig = encode_maze(maze.grid)
            if sig in seen:
                continue
            seen.add(sig)

            f.write(json.dumps(maze_record(maze, made, seed)) + "\n")
            if png_dir:
                draw_maze_image(maze.grid, maze.start, maze.goal, f"{png_dir}/maze_{made:05d}.png")
            made += 1
            if made % 500 == 0:
                log.info("%d/%d mazes written", made, count)

    if made < count:
        log.warning("Only %d distinct %dx%d mazes found in %d seeds", made, rows, cols, idx)
    return made, idx
