"""Tree growth, warmth flood fill, and spawn-site search."""
from __future__ import annotations

import random
from collections import deque
from typing import TYPE_CHECKING, Iterable

from tick_hearth.grid import blocks_warmth
from tick_hearth.types import FIREPLACE, GRASS, TREE, Coord

if TYPE_CHECKING:
    from tick_hearth.grid import TileGrid


def tree_coverage(grid: TileGrid) -> float:
    return grid.count(TREE) / grid.size


def growth_chance(coverage: float, base_chance: float, max_coverage: float) -> float:
    """Full ``base_chance`` on a bare map, falling linearly to 0 at ``max_coverage``."""
    if coverage >= max_coverage:
        return 0.0
    return base_chance * (1.0 - coverage / max_coverage)


def grow_trees(
    grid: TileGrid,
    rng: random.Random,
    base_chance: float,
    max_coverage: float,
    radius: int,
) -> tuple[TileGrid, int]:
    """Run one propagation pass. Returns ``(grid, trees_added)``.

    Every tree rolls independently; a success nominates one random grass
    tile within ``radius``. Nominations are applied together to a fresh
    copy, and one that lands on a tile already claimed this pass is
    skipped. The input grid is returned untouched when nothing grows.
    """
    coverage = tree_coverage(grid)
    if coverage >= max_coverage:
        return grid, 0
    chance = growth_chance(coverage, base_chance, max_coverage)

    nominations: list[Coord] = []
    for x, y in grid.of_type(TREE):
        if rng.random() >= chance:
            continue
        candidates = [c for c in grid.in_square(x, y, radius) if grid.type_at(*c) == GRASS]
        if candidates:
            nominations.append(rng.choice(candidates))

    if not nominations:
        return grid, 0

    grown = grid.copy()
    added = 0
    for x, y in nominations:
        if grown.type_at(x, y) == GRASS:
            grown.set(x, y, TREE)
            added += 1
    return grown, added


def warm_tiles(grid: TileGrid, radius: int) -> frozenset[Coord]:
    """Cells within ``radius`` steps of any fireplace, not passing walls or doors."""
    warm: set[Coord] = set()
    for origin in grid.of_type(FIREPLACE):
        visited: set[Coord] = {origin}
        frontier: deque[tuple[Coord, int]] = deque([(origin, 0)])
        while frontier:
            current, dist = frontier.popleft()
            warm.add(current)
            if dist >= radius:
                continue
            for neighbor in grid.neighbors(*current):
                if neighbor in visited:
                    continue
                if blocks_warmth(grid.type_at(*neighbor)):
                    continue
                visited.add(neighbor)
                frontier.append((neighbor, dist + 1))
    return frozenset(warm)


def find_spawn_tile(
    grid: TileGrid,
    origin: Coord,
    occupied: Iterable[Coord],
    radius: int,
    rng: random.Random,
) -> Coord | None:
    """Random unoccupied grass tile within ``radius`` of ``origin``, or None."""
    taken = set(occupied)
    spots = [
        c for c in grid.in_square(origin[0], origin[1], radius)
        if grid.type_at(*c) == GRASS and c not in taken
    ]
    if not spots:
        return None
    return rng.choice(spots)
