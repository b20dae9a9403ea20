"""Window and loop constants for the demo."""

FPS = 60

SCREEN_W = 900
SCREEN_H = 420

MIN_NODES = 1
MAX_NODES = 12
