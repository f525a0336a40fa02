"""Random starting maps."""
from __future__ import annotations

import random

from tick_hearth.grid import TileGrid
from tick_hearth.types import GRASS, TREE, Coord


def generate_map(width: int, height: int, rng: random.Random, tree_density: float) -> TileGrid:
    """Grass everywhere, each tile independently a tree with ``tree_density``."""
    grid = TileGrid(width, height)
    for y in range(height):
        for x in range(width):
            if rng.random() < tree_density:
                grid.set(x, y, TREE)
    return grid


def pick_start(grid: TileGrid, rng: random.Random) -> Coord:
    """Uniformly random grass tile for the first worker; (0, 0) on a grassless map."""
    grass = grid.of_type(GRASS)
    if not grass:
        return (0, 0)
    return rng.choice(grass)
