"""Notice panel at the bottom of the screen."""
from __future__ import annotations

from typing import Iterable

import pygame

from tick_hearth import Notice
from ui.constants import COLOR_LOG_BG, COLOR_TEXT_DIM, LOG_COLORS


def draw_notices(
    surface: pygame.Surface,
    font: pygame.font.Font,
    notices: Iterable[Notice],
    x: int, y: int, w: int, h: int,
) -> None:
    """Draw the live notices, newest at the bottom."""
    pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
    pygame.draw.line(surface, (50, 50, 60), (x, y), (x + w, y))

    line_h = 14
    max_lines = max(1, (h - 8) // line_h)
    shown = list(notices)[-max_lines:]

    ty = y + 4
    for notice in shown:
        stamp = font.render(f"[{notice.tick:>5}]", True, COLOR_TEXT_DIM)
        surface.blit(stamp, (x + 6, ty))
        color = LOG_COLORS.get(notice.kind, LOG_COLORS["default"])
        surface.blit(font.render(notice.message, True, color), (x + 12 + stamp.get_width(), ty))
        ty += line_h
