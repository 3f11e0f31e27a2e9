#!/usr/bin/env python3
"""
mazecarve command line.

Image:
  mazecarve image --rows 15 --cols 25 --seed 42 --out maze.png
  # Optional: --start "r,c" --goal "r,c" --backend mpl

Dataset (JSONL + optional PNGs):
  mazecarve dataset --count 5000 --rows 10 --cols 10 --out mazes.jsonl --png-dir mazes_out

Terminal:
  mazecarve show --rows 5 --cols 8 --seed 7
"""

import argparse
import logging
import random
import sys
from typing import Optional, Tuple

from mazecarve.analysis import encode_maze
from mazecarve.carver import generate_maze
from mazecarve.constants import (
    DEF_BASE_SEED, DEF_CANVAS_H, DEF_CANVAS_W, DEF_COLS, DEF_KNOB_PX, DEF_ROWS, DEF_WALL_PX,
)
from mazecarve.dataset import generate_dataset
from mazecarve.errors import MazeError
from mazecarve.log_utils import setup_logging
from mazecarve.render import ascii_maze, draw_maze_image, plot_maze

log = logging.getLogger("mazecarve.main")


def parse_pair(s: Optional[str]) -> Optional[Tuple[int,int]]:
    if s is None:
        return None
    try:
        a, b = s.split(",")
        return int(a), int(b)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'a,b', got {s!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazecarve", description="Perfect maze generator (randomized depth-first carving).")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--color", action="store_true", help="Colour log output.")
    parser.add_argument("--log-file", type=str, default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    def add_maze_args(p, rows, cols):
        p.add_argument("--rows", type=int, default=rows)
        p.add_argument("--cols", type=int, default=cols)
        p.add_argument("--seed", type=int, default=None, help="RNG seed (random when omitted)")
        p.add_argument("--start", type=parse_pair, default=None, help="start 'r,c' (optional)")
        p.add_argument("--goal", type=parse_pair, default=None, help="goal 'r,c' (optional, farthest corner by default)")

    p_img = sub.add_parser("image", help="Generate a single maze PNG.")
    add_maze_args(p_img, DEF_ROWS, DEF_COLS)
    p_img.add_argument("--backend", choices=["pil", "mpl"], default="pil")
    p_img.add_argument("--canvas", type=parse_pair, default=(DEF_CANVAS_W, DEF_CANVAS_H), help="W,H (default 720,480)")
    p_img.add_argument("--cell_px", type=int, default=None, help="Fixed cell size in px (optional)")
    p_img.add_argument("--wall_px", type=int, default=DEF_WALL_PX)
    p_img.add_argument("--knob_px", type=int, default=DEF_KNOB_PX)
    p_img.add_argument("--no-grid", action="store_true")
    p_img.add_argument("--no-axes", action="store_true")
    p_img.add_argument("--out", type=str, required=True)

    p_ds = sub.add_parser("dataset", help="Generate a JSONL dataset of unique mazes.")
    p_ds.add_argument("--count", type=int, default=5000)
    p_ds.add_argument("--rows", type=int, default=10)
    p_ds.add_argument("--cols", type=int, default=10)
    p_ds.add_argument("--out", type=str, default="mazes.jsonl")
    p_ds.add_argument("--base-seed", type=int, default=DEF_BASE_SEED)
    p_ds.add_argument("--png-dir", type=str, default=None, help="Directory to write per-maze PNGs")

    p_show = sub.add_parser("show", help="Print a maze to the terminal.")
    add_maze_args(p_show, 8, 12)
    return parser


def _maze_from_args(args):
    rng = random.Random(args.seed)
    maze = generate_maze(args.rows, args.cols, rng=rng, start=args.start, goal=args.goal)
    log.info("Generated %dx%d maze, start=%s goal=%s signature=%s",
             maze.rows, maze.cols, maze.start, maze.goal, encode_maze(maze.grid)[:12])
    return maze


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.color, args.log_file)

    try:
        if args.cmd == "image":
            maze = _maze_from_args(args)
            if args.backend == "mpl":
                plot_maze(maze.grid, maze.start, maze.goal, out_png=args.out)
            else:
                draw_maze_image(
                    maze.grid, maze.start, maze.goal, args.out,
                    canvas=args.canvas, cell_px=args.cell_px,
                    wall_px=args.wall_px, knob_px=args.knob_px,
                    draw_grid=not args.no_grid, draw_axes=not args.no_axes,
                )
            print(f"Wrote {maze.rows}x{maze.cols} maze to {args.out}")

        elif args.cmd == "dataset":
            made, tried = generate_dataset(
                count=args.count,
                rows=args.rows,
                cols=args.cols,
                out_jsonl=args.out,
                base_seed=args.base_seed,
                png_dir=args.png_dir,
            )
            print(f"Wrote {made} records to {args.out} (seeds tried: {tried}).")
            if args.png_dir:
                print(f"PNGs saved to {args.png_dir}")

        elif args.cmd == "show":
            maze = _maze_from_args(args)
            print(ascii_maze(maze.grid, maze.start, maze.goal))

    # ValueError: drawing options (canvas, cell size) that cannot hold the maze
    except (MazeError, ValueError) as e:
        log.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
