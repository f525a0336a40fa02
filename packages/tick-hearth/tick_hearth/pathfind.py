"""Breadth-first pathfinding over a TileGrid."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from tick_hearth.types import Coord

if TYPE_CHECKING:
    from tick_hearth.grid import TileGrid


def pathfind(grid: TileGrid, start: Coord, goal: Coord) -> list[Coord] | None:
    """Shortest 4-connected path from ``start`` to ``goal``, both included.

    Walls are impassable except for the goal itself, which is always
    enterable. Neighbours are expanded up, down, left, right, so equal
    length paths resolve the same way every time.
    """
    if start == goal:
        return [start]
    if not grid.in_bounds(*goal):
        return None

    came_from: dict[Coord, Coord] = {}
    visited: set[Coord] = {start}
    frontier: deque[Coord] = deque([start])

    while frontier:
        current = frontier.popleft()
        for neighbor in grid.neighbors(*current):
            if neighbor in visited:
                continue
            if neighbor != goal and grid.is_blocking(*neighbor):
                continue
            visited.add(neighbor)
            came_from[neighbor] = current
            if neighbor == goal:
                path: list[Coord] = [neighbor]
                while path[-1] in came_from:
                    path.append(came_from[path[-1]])
                path.reverse()
                return path
            frontier.append(neighbor)

    return None


def next_step(grid: TileGrid, start: Coord, goal: Coord) -> Coord | None:
    """First move along the shortest path, ``start`` if already there, or None."""
    path = pathfind(grid, start, goal)
    if path is None:
        return None
    if len(path) == 1:
        return start
    return path[1]
