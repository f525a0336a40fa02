"""
Test suite for BFS pathfinding.

Tests cover:
- Straight paths and path structure
- Same start and goal
- Wall avoidance and detours
- Goal tile always enterable
- Unreachable goals
- Determinism of tie-breaking
"""
from __future__ import annotations

from tick_hearth import GRASS, TREE, WALL, TileGrid, next_step, pathfind


def _walled(rows: list[str]) -> TileGrid:
    """Build a grid from strings: '#' wall, 'T' tree, '.' grass."""
    mapping = {"#": WALL, "T": TREE, ".": GRASS}
    return TileGrid.from_rows([[mapping[c] for c in row] for row in rows])


class TestPathfindBasics:
    def test_straight_horizontal(self) -> None:
        grid = TileGrid(10, 10)
        path = pathfind(grid, (0, 0), (5, 0))
        assert path == [(x, 0) for x in range(6)]

    def test_path_includes_start_and_goal(self) -> None:
        grid = TileGrid(10, 10)
        path = pathfind(grid, (2, 3), (7, 8))
        assert path is not None
        assert path[0] == (2, 3)
        assert path[-1] == (7, 8)

    def test_path_is_shortest_manhattan(self) -> None:
        grid = TileGrid(10, 10)
        path = pathfind(grid, (1, 1), (4, 6))
        assert path is not None
        assert len(path) - 1 == 3 + 5

    def test_steps_are_4_connected(self) -> None:
        grid = TileGrid(8, 8)
        path = pathfind(grid, (0, 7), (6, 1))
        assert path is not None
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            assert abs(ax - bx) + abs(ay - by) == 1

    def test_same_start_and_goal(self) -> None:
        grid = TileGrid(5, 5)
        assert pathfind(grid, (2, 2), (2, 2)) == [(2, 2)]


class TestObstacles:
    def test_routes_around_wall(self) -> None:
        grid = _walled([
            ".....",
            ".###.",
            ".....",
        ])
        path = pathfind(grid, (2, 0), (2, 2))
        assert path is not None
        assert len(path) - 1 == 6
        for x, y in path:
            assert grid.type_at(x, y) != WALL

    def test_trees_are_passable(self) -> None:
        grid = _walled([".T."])
        assert pathfind(grid, (0, 0), (2, 0)) == [(0, 0), (1, 0), (2, 0)]

    def test_goal_on_wall_is_enterable(self) -> None:
        grid = _walled(["..#"])
        assert pathfind(grid, (0, 0), (2, 0)) == [(0, 0), (1, 0), (2, 0)]

    def test_unreachable_returns_none(self) -> None:
        grid = _walled([
            "..#..",
            "..#..",
            "..#..",
        ])
        assert pathfind(grid, (0, 0), (4, 2)) is None

    def test_goal_out_of_bounds_returns_none(self) -> None:
        grid = TileGrid(3, 3)
        assert pathfind(grid, (0, 0), (5, 5)) is None

    def test_enclosed_start_returns_none(self) -> None:
        grid = _walled([
            ".#...",
            "##...",
            ".....",
        ])
        assert pathfind(grid, (0, 0), (4, 2)) is None


class TestNextStep:
    def test_first_step(self) -> None:
        grid = TileGrid(5, 5)
        assert next_step(grid, (0, 0), (0, 3)) == (0, 1)

    def test_already_there_returns_start(self) -> None:
        grid = TileGrid(5, 5)
        assert next_step(grid, (3, 3), (3, 3)) == (3, 3)

    def test_unreachable_returns_none(self) -> None:
        grid = _walled([".#."])
        assert next_step(grid, (0, 0), (2, 0)) is None

    def test_tie_break_prefers_vertical_first(self) -> None:
        # Both (0, 1) and (1, 0) start shortest paths; "down" is expanded before "right".
        grid = TileGrid(5, 5)
        assert next_step(grid, (0, 0), (4, 4)) == (0, 1)

    def test_tie_break_prefers_up_over_left(self) -> None:
        grid = TileGrid(5, 5)
        assert next_step(grid, (4, 4), (0, 0)) == (4, 3)

    def test_deterministic(self) -> None:
        grid = _walled([
            ".....",
            ".#.#.",
            ".....",
            ".#.#.",
            ".....",
        ])
        steps = {next_step(grid, (0, 0), (4, 4)) for _ in range(20)}
        assert len(steps) == 1

    def test_replans_after_wall_built(self) -> None:
        grid = TileGrid(3, 3)
        assert next_step(grid, (0, 0), (0, 2)) == (0, 1)
        grid.set(0, 1, WALL)
        assert next_step(grid, (0, 0), (0, 2)) == (1, 0)
