"""Grid rendering: tiles, warmth, queued tasks, agents, drag box."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from tick_hearth import BuildTask, ChopTask
from ui.constants import (
    COLOR_CHOP_MARK,
    COLOR_WARM_RING,
    DRAG_TINT,
    STATE_COLORS,
    TILE_COLORS,
    WARM_TINT,
)

if TYPE_CHECKING:
    from tick_hearth import Coord, WorldSnapshot


def draw_tiles(surface: pygame.Surface, snap: WorldSnapshot, tile_size: int) -> None:
    for tile in snap.grid.tiles():
        rect = pygame.Rect(tile.x * tile_size, tile.y * tile_size, tile_size, tile_size)
        pygame.draw.rect(surface, TILE_COLORS.get(tile.type, (255, 0, 255)), rect)
        pygame.draw.rect(surface, (0, 0, 0), rect, 1)


def draw_warmth(surface: pygame.Surface, snap: WorldSnapshot, tile_size: int) -> None:
    """Tint every warm tile."""
    overlay = pygame.Surface((tile_size, tile_size), pygame.SRCALPHA)
    overlay.fill(WARM_TINT)
    for x, y in snap.warm:
        surface.blit(overlay, (x * tile_size, y * tile_size))


def draw_tasks(surface: pygame.Surface, snap: WorldSnapshot, tile_size: int) -> None:
    """Mark queued and in-progress tasks: a cross for chops, an outline for builds."""
    tasks = list(snap.tasks) + [a.task for a in snap.agents if a.task is not None]
    pad = max(2, tile_size // 5)
    for task in tasks:
        left = task.x * tile_size
        top = task.y * tile_size
        if isinstance(task, ChopTask):
            pygame.draw.line(surface, COLOR_CHOP_MARK, (left + pad, top + pad),
                             (left + tile_size - pad, top + tile_size - pad), 2)
            pygame.draw.line(surface, COLOR_CHOP_MARK, (left + tile_size - pad, top + pad),
                             (left + pad, top + tile_size - pad), 2)
        elif isinstance(task, BuildTask):
            rect = pygame.Rect(left + pad, top + pad, tile_size - 2 * pad, tile_size - 2 * pad)
            pygame.draw.rect(surface, TILE_COLORS[task.build_type], rect, 2)


def draw_agents(surface: pygame.Surface, snap: WorldSnapshot, tile_size: int) -> None:
    """Draw agents as circles colored by state, ringed when warm."""
    radius = max(3, tile_size // 3)
    for agent in snap.agents:
        cx = agent.x * tile_size + tile_size // 2
        cy = agent.y * tile_size + tile_size // 2
        pygame.draw.circle(surface, STATE_COLORS.get(agent.state, (180, 180, 180)), (cx, cy), radius)
        if agent.is_warm:
            pygame.draw.circle(surface, COLOR_WARM_RING, (cx, cy), radius + 2, 2)


def draw_drag(surface: pygame.Surface, start: Coord, end: Coord, tile_size: int) -> None:
    """Highlight the rectangle of an area chop being dragged out."""
    x1, x2 = sorted((start[0], end[0]))
    y1, y2 = sorted((start[1], end[1]))
    w = (x2 - x1 + 1) * tile_size
    h = (y2 - y1 + 1) * tile_size
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill(DRAG_TINT)
    surface.blit(overlay, (x1 * tile_size, y1 * tile_size))
    pygame.draw.rect(surface, (255, 255, 255), (x1 * tile_size, y1 * tile_size, w, h), 1)
