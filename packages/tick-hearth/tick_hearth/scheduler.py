"""Task creation, nearest-task assignment, and abandonment.

Build tasks pay for themselves up front: the cost is debited when the
task is queued and credited back whenever the task leaves play without
the structure being built (pruned as invalid, or abandoned as
unreachable). Chop tasks cost nothing and are retried when abandoned.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_hearth.types import (
    BUILDABLE_TYPES,
    GRASS,
    IDLE,
    MOVING,
    TREE,
    Agent,
    BuildTask,
    ChopTask,
    Task,
)

if TYPE_CHECKING:
    from tick_hearth.config import HearthConfig
    from tick_hearth.grid import TileGrid
    from tick_hearth.state import WorldState


def enqueue_chop(state: WorldState, x: int, y: int) -> ChopTask | None:
    """Queue a chop of the tree at (x, y). No-op unless it is an unclaimed tree."""
    if state.grid.type_at(x, y) != TREE or state.is_claimed(x, y):
        return None
    task = state.tasks.new_chop(x, y)
    state.tasks.push(task)
    return task


def enqueue_chop_area(
    state: WorldState, x1: int, y1: int, x2: int, y2: int
) -> list[ChopTask]:
    """Queue a chop for every tree in the inclusive rectangle, row by row.

    The rectangle is clipped to the grid first.
    """
    grid = state.grid
    left = max(min(x1, x2), 0)
    right = min(max(x1, x2), grid.width - 1)
    top = max(min(y1, y2), 0)
    bottom = min(max(y1, y2), grid.height - 1)
    created: list[ChopTask] = []
    for y in range(top, bottom + 1):
        for x in range(left, right + 1):
            task = enqueue_chop(state, x, y)
            if task is not None:
                created.append(task)
    return created


def enqueue_build(
    state: WorldState, config: HearthConfig, x: int, y: int, build_type: str
) -> BuildTask | None:
    """Reserve the cost and queue a build. No-op on non-grass, claimed or unaffordable tiles."""
    if build_type not in BUILDABLE_TYPES:
        return None
    if state.grid.type_at(x, y) != GRASS or state.is_claimed(x, y):
        return None
    if not state.debit(config.build_cost(build_type)):
        return None
    task = state.tasks.new_build(x, y, build_type)
    state.tasks.push(task)
    return task


def is_task_valid(grid: TileGrid, task: Task) -> bool:
    """A chop needs a tree, a build needs grass. Cost was paid at enqueue."""
    tile_type = grid.type_at(task.x, task.y)
    if isinstance(task, ChopTask):
        return tile_type == TREE
    return tile_type == GRASS


def refund(state: WorldState, config: HearthConfig, task: Task) -> None:
    if isinstance(task, BuildTask):
        state.credit(config.build_cost(task.build_type))


def claim_task(state: WorldState, config: HearthConfig, agent: Agent) -> Task | None:
    """Hand the nearest valid queued task to an idle agent.

    Every task whose tile no longer fits it is pruned on the way, with
    build reservations refunded. Distance is Manhattan; the first task
    found at the best distance wins.
    """
    best: Task | None = None
    best_dist = 0
    keep: list[Task] = []
    for task in state.tasks:
        if not is_task_valid(state.grid, task):
            refund(state, config, task)
            continue
        keep.append(task)
        dist = abs(task.x - agent.x) + abs(task.y - agent.y)
        if best is None or dist < best_dist:
            best = task
            best_dist = dist

    if best is not None:
        keep.remove(best)
    state.tasks.retain(keep)

    if best is None:
        agent.state = IDLE
        return None
    agent.task = best
    agent.state = MOVING
    return best


def abandon_task(state: WorldState, config: HearthConfig, agent: Agent) -> Task | None:
    """Drop the agent's task: chops go back to the queue, builds are refunded."""
    task = agent.task
    agent.task = None
    agent.state = IDLE
    if task is None:
        return None
    if isinstance(task, ChopTask):
        state.tasks.push(task)
    else:
        refund(state, config, task)
    return task
