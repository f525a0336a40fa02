"""Per-agent state machine: idle -> moving -> chopping | building -> idle."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_hearth.pathfind import next_step
from tick_hearth.scheduler import abandon_task, claim_task, refund
from tick_hearth.types import (
    BUILDING,
    BUILT,
    CHOPPING,
    GRASS,
    IDLE,
    MOVING,
    TREE,
    WALL,
    Agent,
    BuildTask,
)

if TYPE_CHECKING:
    from tick_hearth.config import HearthConfig
    from tick_hearth.state import WorldState


def update_agent(state: WorldState, config: HearthConfig, agent: Agent) -> None:
    """Advance one agent by one tick.

    An idle agent only looks for work this tick. A busy agent either
    takes one step toward its target, works on arrival, or gives the
    task up when no path exists.
    """
    target = agent.target
    if target is None:
        claim_task(state, config, agent)
        return

    if agent.pos == target:
        _work(state, config, agent)
        return

    step = next_step(state.grid, agent.pos, target)
    if step is None or step == agent.pos:
        abandon_task(state, config, agent)
        return
    agent.x, agent.y = step
    agent.state = MOVING


def _work(state: WorldState, config: HearthConfig, agent: Agent) -> None:
    task = agent.task
    agent.task = None
    x, y = agent.pos
    tile_type = state.grid.type_at(x, y)

    if tile_type == TREE:
        state.grid.set(x, y, GRASS)
        state.credit(config.chop_yield)
        agent.state = CHOPPING
        if isinstance(task, BuildTask):
            refund(state, config, task)
        return

    if isinstance(task, BuildTask) and tile_type == GRASS and _can_vacate(state, task):
        state.grid.set(x, y, task.build_type)
        agent.state = BUILDING
        state.notices.post(
            state.tick, BUILT, f"Built {task.build_type}",
            build_type=task.build_type, x=x, y=y, agent=agent.id,
        )
        if state.grid.is_blocking(x, y):
            _step_off(state, (x, y))
        return

    # The tile changed under the task, or a wall here would trap the builder.
    agent.state = IDLE
    if task is not None:
        refund(state, config, task)


def _can_vacate(state: WorldState, task: BuildTask) -> bool:
    """False if the build would block its tile and leave the builder no way off."""
    if task.build_type != WALL:
        return True
    grid = state.grid
    return any(not grid.is_blocking(nx, ny) for nx, ny in grid.neighbors(task.x, task.y))


def _step_off(state: WorldState, coord: tuple[int, int]) -> None:
    """Move every agent standing on ``coord`` to its first walkable neighbour."""
    for other in state.agents:
        if other.pos != coord:
            continue
        for nx, ny in state.grid.neighbors(*coord):
            if not state.grid.is_blocking(nx, ny):
                other.x, other.y = nx, ny
                break
