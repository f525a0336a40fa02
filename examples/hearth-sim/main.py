"""Hearth-Sim - Chop, build, and keep the fire going.

A small interactive colony on a tile map. Workers chop the trees you
mark and build what you queue; fireplaces warm the tiles around them and
now and then draw in a new visitor. Trees slowly spread back.

Controls:
  Space       Play / Pause
  R           New map
  B           Toggle build mode
  1-4         Build type (wall / door / bed / fireplace)
  Left-click  Mark a tree for chopping, or build in build mode
  Left-drag   Mark every tree in the rectangle
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from game.session import new_session
from ui.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, FPS, LOG_H, SIDEBAR_W, compute_layout
from ui.grid import draw_agents, draw_drag, draw_tasks, draw_tiles, draw_warmth
from ui.hud import draw_pause_overlay, draw_sidebar
from ui.log_panel import draw_notices

_BUILD_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2, pygame.K_4: 3}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Hearth-Sim - tick-hearth visual demo")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                   help=f"Map width (8-64, default: {DEFAULT_WIDTH})")
    p.add_argument("--height", type=int, default=DEFAULT_HEIGHT,
                   help=f"Map height (8-64, default: {DEFAULT_HEIGHT})")
    p.add_argument("--tps", type=int, default=2, help="Ticks per second (default: 2)")
    p.add_argument("--chronicle", type=str, default=None,
                   metavar="FILE", help="Save JSONL chronicle to FILE on quit")
    args = p.parse_args()
    args.width = max(8, min(64, args.width))
    args.height = max(8, min(64, args.height))
    args.tps = max(1, args.tps)
    return args


def main() -> None:
    args = parse_args()
    layout = compute_layout(args.width, args.height)
    tile_size = layout["tile_size"]
    grid_w = layout["grid_w"]
    grid_h = layout["grid_h"]
    screen_w = layout["screen_w"]
    screen_h = layout["screen_h"]

    session = new_session(args.seed, args.width, args.height, args.tps)
    engine = session.engine

    # JSONL chronicle recorder (opt-in via --chronicle)
    chronicle = None
    if args.chronicle:
        from game.chronicle import ChronicleRecorder
        chronicle = ChronicleRecorder(engine)

    pygame.init()
    screen = pygame.display.set_mode((screen_w, screen_h))
    pygame.display.set_caption("Hearth-Sim - tick-hearth demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)
    small_font = pygame.font.SysFont("monospace", 11)

    tick_interval = 1.0 / args.tps
    accumulator = 0.0
    running = True

    def grid_coord(pos: tuple[int, int]) -> tuple[int, int] | None:
        mx, my = pos
        if mx >= grid_w or my >= grid_h:
            return None
        return mx // tile_size, my // tile_size

    while running:
        dt = clock.tick(FPS) / 1000.0
        if engine.running:
            accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    engine.toggle_simulation()
                elif event.key == pygame.K_r:
                    session.reset()
                    accumulator = 0.0
                elif event.key == pygame.K_b:
                    session.toggle_build_mode()
                elif event.key in _BUILD_KEYS:
                    session.select_build_type(_BUILD_KEYS[event.key])

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                coord = grid_coord(event.pos)
                if coord is not None:
                    session.press(coord)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                coord = grid_coord(event.pos)
                if coord is not None:
                    session.release(coord)
                else:
                    session.drag_start = None

            elif event.type == pygame.MOUSEMOTION:
                session.hover = grid_coord(event.pos)

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            engine.tick()
            accumulator -= tick_interval
        # Drain excess accumulator to prevent spiral of death
        if accumulator > tick_interval * 4:
            accumulator = tick_interval * 2

        # --- Render ---
        snap = engine.snapshot()
        screen.fill((20, 20, 30))
        draw_tiles(screen, snap, tile_size)
        draw_warmth(screen, snap, tile_size)
        draw_tasks(screen, snap, tile_size)
        draw_agents(screen, snap, tile_size)
        if session.drag_start is not None and session.hover is not None and not session.build_mode:
            draw_drag(screen, session.drag_start, session.hover, tile_size)

        if not snap.running:
            draw_pause_overlay(screen, font, grid_w, grid_h)

        draw_sidebar(screen, font, session, snap, grid_w, SIDEBAR_W, screen_h)
        draw_notices(screen, small_font, snap.notices, 0, grid_h, grid_w, LOG_H)

        pygame.display.flip()

    pygame.quit()

    # Write chronicle if requested
    if chronicle is not None and args.chronicle:
        n = chronicle.write(args.chronicle)
        print(f"Chronicle: {n} events written to {args.chronicle}")

    sys.exit()


if __name__ == "__main__":
    main()
