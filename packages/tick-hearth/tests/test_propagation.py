"""Tests for tree growth, warmth flood fill, and spawn-site search."""
from __future__ import annotations

import random

import pytest
from tick_hearth import (
    DOOR,
    FIREPLACE,
    GRASS,
    TREE,
    WALL,
    TileGrid,
    find_spawn_tile,
    grow_trees,
    tree_coverage,
    warm_tiles,
)
from tick_hearth.propagation import growth_chance


class AlwaysRandom(random.Random):
    """Every roll succeeds and every choice takes the first option."""

    def random(self) -> float:
        return 0.0

    def choice(self, seq):  # type: ignore[no-untyped-def,override]
        return seq[0]


class NeverRandom(random.Random):
    def random(self) -> float:
        return 0.999999


def _grid_with_trees(width: int, height: int, n_trees: int) -> TileGrid:
    grid = TileGrid(width, height)
    for i in range(n_trees):
        grid.set(i % width, i // width, TREE)
    return grid


class TestGrowthChance:
    def test_full_chance_on_bare_map(self) -> None:
        assert growth_chance(0.0, 0.10, 0.70) == pytest.approx(0.10)

    def test_half_way(self) -> None:
        assert growth_chance(0.35, 0.10, 0.70) == pytest.approx(0.05)

    def test_zero_at_ceiling(self) -> None:
        assert growth_chance(0.70, 0.10, 0.70) == 0.0
        assert growth_chance(0.90, 0.10, 0.70) == 0.0

    def test_coverage(self) -> None:
        assert tree_coverage(_grid_with_trees(10, 10, 25)) == pytest.approx(0.25)


class TestGrowTrees:
    def test_no_growth_at_max_coverage(self) -> None:
        grid = _grid_with_trees(10, 10, 70)
        result, added = grow_trees(grid, AlwaysRandom(), 0.10, 0.70, 3)
        assert added == 0
        assert result is grid
        assert result.count(TREE) == 70

    def test_no_growth_above_max_coverage(self) -> None:
        grid = _grid_with_trees(10, 10, 85)
        _, added = grow_trees(grid, AlwaysRandom(), 1.0, 0.70, 3)
        assert added == 0

    def test_lone_tree_seeds_one_neighbour(self) -> None:
        grid = TileGrid(7, 7)
        grid.set(3, 3, TREE)
        result, added = grow_trees(grid, AlwaysRandom(), 1.0, 0.70, 3)
        assert added == 1
        assert result.count(TREE) == 2
        new = [c for c in result.of_type(TREE) if c != (3, 3)][0]
        assert max(abs(new[0] - 3), abs(new[1] - 3)) <= 3

    def test_input_grid_not_mutated(self) -> None:
        grid = TileGrid(7, 7)
        grid.set(3, 3, TREE)
        grow_trees(grid, AlwaysRandom(), 1.0, 0.70, 3)
        assert grid.count(TREE) == 1

    def test_failed_rolls_add_nothing(self) -> None:
        grid = TileGrid(7, 7)
        grid.set(3, 3, TREE)
        result, added = grow_trees(grid, NeverRandom(), 0.10, 0.70, 3)
        assert added == 0
        assert result is grid

    def test_colliding_nominations_count_once(self) -> None:
        # Both trees can only seed the middle tile.
        grid = TileGrid.from_rows([[TREE, GRASS, TREE, WALL, WALL, WALL, WALL]])
        result, added = grow_trees(grid, AlwaysRandom(), 1.0, 0.70, 1)
        assert added == 1
        assert result.type_at(1, 0) == TREE

    def test_only_grass_is_nominated(self) -> None:
        grid = TileGrid.from_rows([[TREE, WALL, FIREPLACE, GRASS, GRASS]])
        result, added = grow_trees(grid, AlwaysRandom(), 1.0, 0.70, 2)
        assert added == 0
        assert result.type_at(1, 0) == WALL
        assert result.type_at(2, 0) == FIREPLACE

    def test_seeded_growth_is_repeatable(self) -> None:
        grid = _grid_with_trees(12, 12, 20)
        a, added_a = grow_trees(grid, random.Random(7), 0.5, 0.70, 3)
        b, added_b = grow_trees(grid, random.Random(7), 0.5, 0.70, 3)
        assert a == b
        assert added_a == added_b


class TestWarmth:
    def test_no_fireplace_no_warmth(self) -> None:
        assert warm_tiles(TileGrid(5, 5), 3) == frozenset()

    def test_open_field_is_a_diamond(self) -> None:
        grid = TileGrid(11, 11)
        grid.set(5, 5, FIREPLACE)
        warm = warm_tiles(grid, 2)
        expected = {
            (x, y) for x in range(11) for y in range(11)
            if abs(x - 5) + abs(y - 5) <= 2
        }
        assert warm == expected
        assert len(warm) == 13

    def test_radius_zero_warms_only_the_fireplace(self) -> None:
        grid = TileGrid(3, 3)
        grid.set(1, 1, FIREPLACE)
        assert warm_tiles(grid, 0) == {(1, 1)}

    def test_wall_blocks_corridor(self) -> None:
        grid = TileGrid.from_rows([[FIREPLACE, GRASS, WALL, GRASS, GRASS]])
        assert warm_tiles(grid, 5) == {(0, 0), (1, 0)}

    def test_door_blocks_corridor(self) -> None:
        grid = TileGrid.from_rows([[FIREPLACE, DOOR, GRASS]])
        assert warm_tiles(grid, 5) == {(0, 0)}

    def test_wall_forces_detour_within_radius(self) -> None:
        grid = TileGrid.from_rows([
            [GRASS, GRASS, GRASS],
            [FIREPLACE, WALL, GRASS],
        ])
        # (2, 1) is 2 steps away in a straight line but 4 around the wall.
        assert (2, 1) not in warm_tiles(grid, 3)
        assert (2, 1) in warm_tiles(grid, 4)

    def test_trees_do_not_block(self) -> None:
        grid = TileGrid.from_rows([[FIREPLACE, TREE, GRASS]])
        assert warm_tiles(grid, 2) == {(0, 0), (1, 0), (2, 0)}

    def test_union_of_fireplaces(self) -> None:
        grid = TileGrid(9, 1)
        grid.set(0, 0, FIREPLACE)
        grid.set(8, 0, FIREPLACE)
        assert warm_tiles(grid, 1) == {(0, 0), (1, 0), (7, 0), (8, 0)}


class TestFindSpawnTile:
    def test_picks_grass_near_origin(self) -> None:
        grid = TileGrid(5, 5)
        grid.set(2, 2, FIREPLACE)
        spot = find_spawn_tile(grid, (2, 2), [], 2, random.Random(1))
        assert spot is not None
        assert spot != (2, 2)
        assert grid.type_at(*spot) == GRASS

    def test_skips_occupied_tiles(self) -> None:
        grid = TileGrid.from_rows([[FIREPLACE, GRASS, GRASS]])
        spot = find_spawn_tile(grid, (0, 0), [(1, 0)], 2, random.Random(1))
        assert spot == (2, 0)

    def test_none_when_boxed_in(self) -> None:
        grid = TileGrid.from_rows([
            [WALL, TREE, WALL],
            [TREE, FIREPLACE, WALL],
            [WALL, WALL, TREE],
        ])
        assert find_spawn_tile(grid, (1, 1), [], 1, random.Random(1)) is None
