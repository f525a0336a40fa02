"""HUD: sidebar stats, build palette, and the pause overlay."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from tick_hearth import BUILDABLE_TYPES
from ui.constants import COLOR_SIDEBAR_BG, COLOR_TEXT, COLOR_TEXT_DIM, TILE_COLORS

if TYPE_CHECKING:
    from game.session import Session
    from tick_hearth import WorldSnapshot


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    session: Session,
    snap: WorldSnapshot,
    x: int,
    w: int,
    h: int,
) -> None:
    """Draw stats, the build palette, and control hints down the right edge."""
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x, 0, w, h))
    pygame.draw.line(surface, (50, 50, 60), (x, 0), (x, h))

    ty = 8
    line_h = 16

    def line(text: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        nonlocal ty
        surface.blit(font.render(text, True, color), (x + 8, ty))
        ty += line_h

    line(f"Tick:    {snap.tick}")
    line(f"Wood:    {snap.wood}")
    line(f"Workers: {len(snap.agents)}")
    line(f"Queued:  {len(snap.tasks)}")
    line("Running" if snap.running else "Paused", COLOR_TEXT if snap.running else COLOR_TEXT_DIM)
    ty += line_h // 2

    line("Build mode: " + ("ON" if session.build_mode else "off"))
    engine = session.engine
    for i, build_type in enumerate(BUILDABLE_TYPES, start=1):
        selected = build_type == session.build_type
        swatch = pygame.Rect(x + 8, ty + 2, 10, 10)
        pygame.draw.rect(surface, TILE_COLORS[build_type], swatch)
        if selected:
            pygame.draw.rect(surface, (255, 255, 255), swatch.inflate(4, 4), 1)
        text = f"{i} {build_type} ({engine.build_cost(build_type)})"
        color = COLOR_TEXT if selected else COLOR_TEXT_DIM
        surface.blit(font.render(text, True, color), (x + 24, ty))
        ty += line_h
    ty += line_h // 2

    for hint in ("Space  play/pause", "R      new map", "B      build mode",
                 "1-4    build type", "Click  chop/build", "Drag   area chop",
                 "Esc    quit"):
        line(hint, COLOR_TEXT_DIM)

    if session.message:
        ty += line_h // 2
        line(session.message)


def draw_pause_overlay(
    surface: pygame.Surface,
    font: pygame.font.Font,
    grid_w: int,
    grid_h: int,
) -> None:
    """Draw a semi-transparent pause overlay over the grid."""
    overlay = pygame.Surface((grid_w, grid_h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 100))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    text = big_font.render("PAUSED", True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(grid_w // 2, grid_h // 2)))

    hint = font.render("Space to start", True, (180, 180, 180))
    surface.blit(hint, hint.get_rect(center=(grid_w // 2, grid_h // 2 + 30)))
