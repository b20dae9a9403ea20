"""Fixed visual and timing constants."""

# Chain
NODES = 5
LINES = 2

# Timing
STEP = 0.02  # progress per tick
DELAY = 30  # ms between ticks

# Geometry
STROKE_FACTOR = 90
SIZE_FACTOR = 2.9

# Colors
FORE_COLOR = "#2196F3"
BACK_COLOR = "#BDBDBD"
