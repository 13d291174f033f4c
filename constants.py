"""
Shared configuration for the tile map runtime and the event spawner.

This module defines constants used throughout the project, such as tile
dimensions, facing directions and the naming pattern of map data files.
Keeping these values in one place makes it easy to tweak the look of the
sprites or point the loaders at a different data layout.
"""

from typing import Dict, Tuple

# Frames per second of the demo window
FPS = 30

# Default window size used by ``main.py`` when the map is smaller
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480

TILE_SIZE = 48  # pixel size of each square on the map

# Facing directions follow numeric keypad layout
DIR_DOWN = 2
DIR_LEFT = 4
DIR_RIGHT = 6
DIR_UP = 8
DIRECTIONS: Tuple[int, ...] = (DIR_DOWN, DIR_LEFT, DIR_RIGHT, DIR_UP)

# File name of a map's data file, formatted with the numeric map id
MAP_FILE_TEMPLATE = "Map{:03d}.json"

# Passage character marking an impassable tile in map data
BLOCKED_TILE = "#"

# Vehicle kinds; airships fly over events and never block spawns
VEHICLE_KINDS = ("boat", "ship", "airship")
GROUND_VEHICLES = {"boat", "ship"}

# Sprite layers inside the tilemap group
LAYER_BELOW = 0
LAYER_CHARACTERS = 1
LAYER_ABOVE = 2

# Colours
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (34, 139, 34)
GREY = (128, 128, 128)
BLUE = (65, 105, 225)
RED = (220, 20, 60)
YELLOW = (255, 215, 0)

# Fill colours for character sprites when no image is available
CHARACTER_COLOURS: Dict[str, Tuple[int, int, int]] = {
    "player": BLUE,
    "event": RED,
    "boat": YELLOW,
    "ship": YELLOW,
    "airship": WHITE,
}
