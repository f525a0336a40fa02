"""HearthEngine - world ownership, tick pipeline, and the command API."""
from __future__ import annotations

import os
import random
import time
from typing import Callable

from tick_hearth import scheduler
from tick_hearth.clock import Clock
from tick_hearth.config import HearthConfig
from tick_hearth.grid import TileGrid
from tick_hearth.mapgen import generate_map, pick_start
from tick_hearth.notices import NoticeLog
from tick_hearth.propagation import warm_tiles
from tick_hearth.state import WorldSnapshot, WorldState
from tick_hearth.systems import (
    make_agent_system,
    make_growth_system,
    make_notice_expiry_system,
    make_spawn_system,
    make_warmth_system,
)
from tick_hearth.types import (
    Agent,
    BuildTask,
    ChopTask,
    Coord,
    EngineStateError,
    Notice,
    System,
    Task,
    Tile,
)

_Handler = Callable[[str, Notice], None]


class HearthEngine:
    def __init__(self, config: HearthConfig | None = None, seed: int | None = None) -> None:
        self._config = config if config is not None else HearthConfig()
        self._clock = Clock(self._config.tps)
        self._state: WorldState | None = None
        self._extra_systems: list[System] = []
        self._subscribers: dict[str, list[_Handler]] = {}
        self._stop_requested: bool = False

        # Order is the tick contract: growth, spawning, agents, warmth.
        self._systems: list[System] = [
            make_growth_system(self._config),
            make_spawn_system(self._config),
            make_agent_system(self._config),
            make_warmth_system(self._config),
            make_notice_expiry_system(self._config),
        ]

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    # --- Properties ---

    @property
    def config(self) -> HearthConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> WorldState:
        """The live committed state. Prefer ``snapshot()`` for reading."""
        return self._world()

    @property
    def grid(self) -> TileGrid:
        return self._world().grid

    @property
    def agents(self) -> tuple[Agent, ...]:
        return tuple(self._world().agents)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._world().tasks)

    @property
    def wood(self) -> int:
        return self._world().wood

    @property
    def tick_count(self) -> int:
        return self._world().tick

    @property
    def running(self) -> bool:
        return self._world().running

    @property
    def notices(self) -> tuple[Notice, ...]:
        return tuple(self._world().notices)

    @property
    def warm_tiles(self) -> frozenset[Coord]:
        return self._world().warm

    def _world(self) -> WorldState:
        if self._state is None:
            raise EngineStateError("No world yet: call initialize_game() or load_grid() first")
        return self._state

    def snapshot(self) -> WorldSnapshot:
        return self._world().snapshot()

    def agent(self, agent_id: str) -> Agent:
        for agent in self._world().agents:
            if agent.id == agent_id:
                return agent
        raise KeyError(f"No agent {agent_id!r}")

    def tile_at(self, x: int, y: int) -> Tile | None:
        grid = self._world().grid
        if not grid.in_bounds(x, y):
            return None
        return grid.at(x, y)

    # --- World setup ---

    def initialize_game(self, width: int, height: int) -> None:
        """Fresh random map with one idle worker. Discards any previous world."""
        grid = generate_map(width, height, self._rng, self._config.tree_density)
        self._reset(grid, pick_start(grid, self._rng))

    def load_grid(self, grid: TileGrid, start: Coord | None = None) -> None:
        """Like ``initialize_game`` but on a caller-supplied map."""
        if start is None:
            start = pick_start(grid, self._rng)
        elif grid.is_blocking(*start):
            raise ValueError(f"Start {start} is outside the grid or on a wall")
        self._reset(grid.copy(), start)

    def _reset(self, grid: TileGrid, start: Coord) -> None:
        state = WorldState(grid=grid, notices=NoticeLog(self._config.max_notices))
        state.spawn_agent(*start)
        state.warm = warm_tiles(grid, self._config.warmth_radius)
        for agent in state.agents:
            agent.is_warm = agent.pos in state.warm
        self._state = state
        self._clock.reset()
        self._stop_requested = False

    # --- Simulation control ---

    def add_system(self, system: System) -> None:
        """Append a system that runs after the built-in ones each tick."""
        self._extra_systems.append(system)

    def start_simulation(self) -> None:
        self._world().running = True

    def stop_simulation(self) -> None:
        self._world().running = False

    def toggle_simulation(self) -> None:
        state = self._world()
        state.running = not state.running

    def _request_stop(self) -> None:
        self._stop_requested = True

    def tick(self) -> bool:
        """Run one tick if the simulation is running. Returns whether it ran.

        Systems work on a draft copy that replaces the committed state
        only after all of them finish.
        """
        state = self._world()
        if not state.running:
            return False

        self._stop_requested = False
        ctx = self._clock.context(self._request_stop, self._rng)
        draft = state.copy()
        draft.tick = ctx.tick_number
        for system in self._systems:
            system(draft, ctx)
        for system in self._extra_systems:
            system(draft, ctx)
        if self._stop_requested:
            draft.running = False

        fresh = draft.notices.take_fresh()
        self._state = draft
        self._clock.commit(draft.tick)
        self._dispatch(fresh)
        return True

    def run(self, n: int) -> int:
        """Tick up to ``n`` times, stopping early once paused. Returns ticks run."""
        ran = 0
        for _ in range(n):
            if not self.tick():
                break
            ran += 1
        return ran

    def run_forever(self) -> None:
        """Tick at the configured rate until the simulation is stopped."""
        self.start_simulation()
        dt = self._clock.dt
        while self.running:
            start = time.monotonic()
            if not self.tick():
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

    # --- Notices ---

    def subscribe(self, kind: str, handler: _Handler) -> None:
        self._subscribers.setdefault(kind, []).append(handler)

    def unsubscribe(self, kind: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(kind)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def _dispatch(self, notices: list[Notice]) -> None:
        for notice in notices:
            for handler in list(self._subscribers.get(notice.kind, ())):
                handler(notice.kind, notice)

    # --- Commands ---

    def enqueue_chop_task(self, x: int, y: int) -> ChopTask | None:
        return scheduler.enqueue_chop(self._world(), x, y)

    def enqueue_chop_area(self, x1: int, y1: int, x2: int, y2: int) -> list[ChopTask]:
        return scheduler.enqueue_chop_area(self._world(), x1, y1, x2, y2)

    def enqueue_build_task(self, x: int, y: int, build_type: str) -> BuildTask | None:
        return scheduler.enqueue_build(self._world(), self._config, x, y, build_type)

    def is_task_queued(self, x: int, y: int) -> bool:
        return self._world().is_claimed(x, y)

    def is_build_queued(self, x: int, y: int) -> BuildTask | None:
        task = self._world().tasks.find(x, y)
        return task if isinstance(task, BuildTask) else None

    def build_cost(self, build_type: str) -> int:
        return self._config.build_cost(build_type)

    def is_tile_warm(self, x: int, y: int) -> bool:
        return (x, y) in self._world().warm
