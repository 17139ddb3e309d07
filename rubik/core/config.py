"""
Configuration: defaults for the shuffle driver and the net renderers.
Values in config.yaml override these at runtime.
"""
from typing import Dict, Tuple

# Shuffle
DEFAULT_SHUFFLE_MOVES = 10
SHUFFLE_SEED = None  # None -> fresh entropy on every run
AVOID_INVERSE = True  # never follow a move with its own inverse

# Net image (pixels)
NET_TILE_SIZE = 24
NET_TILE_GAP = 2
NET_MARGIN = 10
NET_SCALE = 0.28

# BGR, keyed by color letter
COLOR_TO_BGR: Dict[str, Tuple[int, int, int]] = {
    'W': (255, 255, 255),
    'G': (0, 255, 0),
    'R': (0, 0, 255),
    'B': (255, 0, 0),
    'O': (0, 128, 255),
    'Y': (0, 255, 255),
    '?': (40, 40, 40),
}

# Text net
SHOW_TEXT_NET = True
