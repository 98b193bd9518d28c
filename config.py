# === Global configuration & tuning ===
import os

WIDTH, HEIGHT = 800, 600
FPS = 60
WINDOW_TITLE = "Tilegrid"

# Colors (24-bit 0xRRGGBB)
BG = 0x000000  # Clear color for every frame
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
WHITE = (240, 240, 240)

FLOOR_COLOR = RED
WALL_COLOR = BLUE
PLAYER_COLOR = GREEN

# Outline thickness for every tile rect (pixels)
TILE_OUTLINE_WIDTH = 1

# === Map Symbols ===
SYMBOL_EMPTY = '_'
SYMBOL_FLOOR = '%'
SYMBOL_WALL = '|'
SYMBOL_SPAWN = '@'

# Paths (anchored to the project directory, not the working directory)
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_MAP_PATH = os.path.join(ROOT_DIR, "maps", "level.map")
CONFIG_PATH = os.path.join(ROOT_DIR, "config", "game_config.json")
