"""Layout, color, and rendering constants."""
from __future__ import annotations

from tick_hearth import (
    BED,
    BUILDING,
    BUILT,
    CHOPPING,
    DOOR,
    FIREPLACE,
    GRASS,
    IDLE,
    MOVING,
    TREE,
    TREES_GREW,
    WALL,
    WORKER_ARRIVED,
)

# Map defaults (overridden by CLI --width / --height)
DEFAULT_WIDTH = 24
DEFAULT_HEIGHT = 18

# Layout
SIDEBAR_W = 200
LOG_H = 90
FPS = 60

# Tile colors
TILE_COLORS: dict[str, tuple[int, int, int]] = {
    GRASS: (70, 130, 60),
    TREE: (30, 90, 30),
    WALL: (110, 100, 95),
    DOOR: (150, 100, 50),
    BED: (170, 80, 90),
    FIREPLACE: (220, 110, 40),
}

# Agent state colors
STATE_COLORS: dict[str, tuple[int, int, int]] = {
    IDLE: (180, 180, 180),
    MOVING: (220, 200, 90),
    CHOPPING: (120, 220, 90),
    BUILDING: (200, 120, 60),
}

# Overlays (r, g, b, alpha)
WARM_TINT = (255, 150, 50, 45)
DRAG_TINT = (255, 255, 255, 50)

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_LOG_BG = (18, 18, 25)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_CHOP_MARK = (240, 230, 120)
COLOR_WARM_RING = (255, 170, 60)

# Notice colors
LOG_COLORS: dict[str, tuple[int, int, int]] = {
    TREES_GREW: (100, 220, 100),
    WORKER_ARRIVED: (100, 200, 220),
    BUILT: (255, 160, 60),
    "default": (170, 170, 170),
}


def compute_layout(width: int, height: int) -> dict[str, int]:
    """Compute layout dimensions from map size."""
    tile_size = max(12, min(32, 640 // max(width, height)))
    grid_w = width * tile_size
    grid_h = height * tile_size
    return {
        "tile_size": tile_size,
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": grid_w + SIDEBAR_W,
        "screen_h": grid_h + LOG_H,
    }
