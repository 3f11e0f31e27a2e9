# constants.py
# Defaults shared by the carver, the renderers and the CLI.

# Grid
DEF_ROWS = 15
DEF_COLS = 25

# Physics-layer geometry (pixels)
WALL_WIDTH = 5

# Raster output
DEF_CANVAS_W = 720
DEF_CANVAS_H = 480

DEF_WALL_PX   = 4     # wall thickness (px)
DEF_KNOB_PX   = 16    # start/goal circle diameter (px)
DEF_GRID_GRAY = 220   # light grid color channel (None to disable)
DEF_GRID_PX   = 1     # light grid thickness (px)

# Axis pads reserve space for tick numbers + "row"/"col" captions
AXIS_PAD_LEFT   = 34  # px
AXIS_PAD_TOP    = 28  # px
AXIS_PAD_RIGHT  = 8   # px
AXIS_PAD_BOTTOM = 8   # px
DEF_PADS = (AXIS_PAD_LEFT, AXIS_PAD_TOP, AXIS_PAD_RIGHT, AXIS_PAD_BOTTOM)

# Colours
BACKGROUND_COLOR = (255, 255, 255)
WALL_COLOR  = (0, 0, 0)
START_COLOR = (255, 0, 0)
GOAL_COLOR  = (0, 200, 0)

# Dataset
DEF_BASE_SEED = 20250924
