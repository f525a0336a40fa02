"""Shared types, tile constants, and context for tick-hearth."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, ClassVar, Union

Coord = tuple[int, int]

# Tile types
GRASS = "grass"
TREE = "tree"
WALL = "wall"
DOOR = "door"
BED = "bed"
FIREPLACE = "fireplace"

TILE_TYPES = frozenset({GRASS, TREE, WALL, DOOR, BED, FIREPLACE})
BUILDABLE_TYPES = (WALL, DOOR, BED, FIREPLACE)

# Agent states
IDLE = "idle"
MOVING = "moving"
CHOPPING = "chopping"
BUILDING = "building"

AGENT_STATES = frozenset({IDLE, MOVING, CHOPPING, BUILDING})

# Notice kinds
TREES_GREW = "trees_grew"
WORKER_ARRIVED = "worker_arrived"
BUILT = "built"

NOTICE_KINDS = (TREES_GREW, WORKER_ARRIVED, BUILT)


@dataclass(frozen=True, slots=True)
class Tile:
    """Immutable view of one grid cell. Identity is its position."""

    type: str
    x: int
    y: int


@dataclass(frozen=True)
class ChopTask:
    kind: ClassVar[str] = "chop"

    id: int
    x: int
    y: int

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


@dataclass(frozen=True)
class BuildTask:
    kind: ClassVar[str] = "build"

    id: int
    x: int
    y: int
    build_type: str

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)


Task = Union[ChopTask, BuildTask]


@dataclass
class Agent:
    """A worker. Its target is the coordinate of the task it carries.

    Deriving the target from the task keeps "has a task" and "has a
    target" from ever disagreeing.
    """

    id: str
    x: int
    y: int
    state: str = IDLE
    task: Task | None = None
    is_warm: bool = False

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)

    @property
    def target(self) -> Coord | None:
        return self.task.coord if self.task is not None else None


@dataclass(frozen=True)
class Notice:
    id: int
    tick: int
    kind: str
    message: str
    data: dict[str, object]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    request_stop: Callable[[], None]
    random: _random.Random


class EngineStateError(RuntimeError):
    """Raised when the engine is used before a world has been created."""


if TYPE_CHECKING:
    from tick_hearth.state import WorldState

System = Callable[["WorldState", TickContext], None]
