"""System factories for the per-tick pipeline."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_hearth.agents import update_agent
from tick_hearth.propagation import find_spawn_tile, grow_trees, warm_tiles
from tick_hearth.types import FIREPLACE, TREES_GREW, WORKER_ARRIVED

if TYPE_CHECKING:
    from tick_hearth.config import HearthConfig
    from tick_hearth.state import WorldState
    from tick_hearth.types import System, TickContext


def make_growth_system(config: HearthConfig) -> System:
    """Return a system that spreads trees every ``growth_interval`` ticks."""

    def growth_system(state: WorldState, ctx: TickContext) -> None:
        if ctx.tick_number % config.growth_interval != 0:
            return
        grid, added = grow_trees(
            state.grid, ctx.random,
            config.growth_chance, config.max_tree_coverage, config.growth_radius,
        )
        state.grid = grid
        if added > 0:
            noun = "tree" if added == 1 else "trees"
            state.notices.post(ctx.tick_number, TREES_GREW, f"{added} new {noun} grew",
                               count=added)

    return growth_system


def make_spawn_system(config: HearthConfig) -> System:
    """Return a system that may add a worker next to a fireplace."""

    def spawn_system(state: WorldState, ctx: TickContext) -> None:
        if ctx.tick_number % config.spawn_interval != 0:
            return
        if len(state.agents) >= config.max_workers:
            return
        fireplaces = state.grid.of_type(FIREPLACE)
        if not fireplaces or ctx.random.random() >= config.spawn_chance:
            return
        fireplace = ctx.random.choice(fireplaces)
        spot = find_spawn_tile(state.grid, fireplace, state.occupied(),
                               config.spawn_radius, ctx.random)
        if spot is None:
            return
        agent = state.spawn_agent(*spot)
        state.notices.post(ctx.tick_number, WORKER_ARRIVED, "A new visitor has arrived!",
                           agent=agent.id, x=agent.x, y=agent.y)

    return spawn_system


def make_agent_system(config: HearthConfig) -> System:
    """Return a system that updates agents one after another in list order."""

    def agent_system(state: WorldState, ctx: TickContext) -> None:
        for agent in state.agents:
            update_agent(state, config, agent)

    return agent_system


def make_warmth_system(config: HearthConfig) -> System:
    """Return a system that rebuilds the warm set and agent warmth flags."""

    def warmth_system(state: WorldState, ctx: TickContext) -> None:
        state.warm = warm_tiles(state.grid, config.warmth_radius)
        for agent in state.agents:
            agent.is_warm = agent.pos in state.warm

    return warmth_system


def make_notice_expiry_system(config: HearthConfig) -> System:
    """Return a system that drops notices older than ``notice_ttl`` ticks."""

    def notice_expiry_system(state: WorldState, ctx: TickContext) -> None:
        state.notices.expire(ctx.tick_number, config.notice_ttl)

    return notice_expiry_system
