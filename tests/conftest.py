import logging
import random

import pytest

from mazecarve.carver import MazeCarver
from mazecarve.grid import Grid


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    # setup_logging() detaches the package logger from the root; undo that for caplog
    logger = logging.getLogger("mazecarve")
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def carved():
    def _carved(rows, cols, seed=0, start=(0, 0)):
        grid = Grid(rows, cols)
        MazeCarver(grid, random.Random(seed)).generate(*start)
        return grid
    return _carved
