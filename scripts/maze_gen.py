#!/usr/bin/env python3
"""
maze_gen.py

Checkout-local entry point, same as the installed `mazecarve` command:
  python scripts/maze_gen.py image --rows 15 --cols 25 --seed 42 --out maze.png
  python scripts/maze_gen.py dataset --count 1000 --rows 10 --cols 10 --out mazes.jsonl
"""

import sys

from mazecarve.cli import main

if __name__ == "__main__":
    sys.exit(main())
