"""tick-hearth - Tick-driven colony simulation: trees, workers, and warm hearths."""
from __future__ import annotations

from tick_hearth.clock import Clock
from tick_hearth.config import DEFAULT_BUILD_COSTS, HearthConfig
from tick_hearth.engine import HearthEngine
from tick_hearth.grid import TileGrid, blocks_warmth
from tick_hearth.mapgen import generate_map, pick_start
from tick_hearth.notices import NoticeLog
from tick_hearth.pathfind import next_step, pathfind
from tick_hearth.propagation import find_spawn_tile, grow_trees, tree_coverage, warm_tiles
from tick_hearth.state import WorldSnapshot, WorldState
from tick_hearth.tasks import TaskQueue
from tick_hearth.types import (
    AGENT_STATES,
    BED,
    BUILDABLE_TYPES,
    BUILDING,
    BUILT,
    CHOPPING,
    DOOR,
    FIREPLACE,
    GRASS,
    IDLE,
    MOVING,
    NOTICE_KINDS,
    TILE_TYPES,
    TREE,
    TREES_GREW,
    WALL,
    WORKER_ARRIVED,
    Agent,
    BuildTask,
    ChopTask,
    Coord,
    EngineStateError,
    Notice,
    Task,
    TickContext,
    Tile,
)

__all__ = [
    # Engine
    "HearthEngine",
    "HearthConfig",
    "DEFAULT_BUILD_COSTS",
    "Clock",
    "TickContext",
    "EngineStateError",
    # World
    "WorldState",
    "WorldSnapshot",
    "TileGrid",
    "Tile",
    "Coord",
    "Agent",
    "ChopTask",
    "BuildTask",
    "Task",
    "TaskQueue",
    "Notice",
    "NoticeLog",
    # Algorithms
    "blocks_warmth",
    "pathfind",
    "next_step",
    "grow_trees",
    "tree_coverage",
    "warm_tiles",
    "find_spawn_tile",
    "generate_map",
    "pick_start",
    # Constants
    "GRASS",
    "TREE",
    "WALL",
    "DOOR",
    "BED",
    "FIREPLACE",
    "TILE_TYPES",
    "BUILDABLE_TYPES",
    "IDLE",
    "MOVING",
    "CHOPPING",
    "BUILDING",
    "AGENT_STATES",
    "TREES_GREW",
    "WORKER_ARRIVED",
    "BUILT",
    "NOTICE_KINDS",
]
