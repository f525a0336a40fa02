"""WorldState - the single owned bundle of simulation state."""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from tick_hearth.grid import TileGrid
from tick_hearth.notices import NoticeLog
from tick_hearth.tasks import TaskQueue
from tick_hearth.types import IDLE, Agent, Coord, Notice, Task


@dataclass
class WorldState:
    """Everything one tick reads and writes.

    The engine ticks a ``copy()`` and swaps it in only once every system
    has run, so a half-finished tick is never visible.
    """

    grid: TileGrid
    agents: list[Agent] = field(default_factory=list)
    tasks: TaskQueue = field(default_factory=TaskQueue)
    wood: int = 0
    tick: int = 0
    running: bool = False
    notices: NoticeLog = field(default_factory=NoticeLog)
    warm: frozenset[Coord] = frozenset()
    next_agent_id: int = 1

    def copy(self) -> WorldState:
        return WorldState(
            grid=self.grid.copy(),
            agents=[replace(a) for a in self.agents],
            tasks=self.tasks.copy(),
            wood=self.wood,
            tick=self.tick,
            running=self.running,
            notices=self.notices.copy(),
            warm=self.warm,
            next_agent_id=self.next_agent_id,
        )

    def spawn_agent(self, x: int, y: int) -> Agent:
        agent = Agent(id=f"agent-{self.next_agent_id}", x=x, y=y, state=IDLE)
        self.next_agent_id += 1
        self.agents.append(agent)
        return agent

    def occupied(self) -> set[Coord]:
        return {a.pos for a in self.agents}

    def is_claimed(self, x: int, y: int) -> bool:
        """True if a queued task or an agent's current task targets (x, y)."""
        if self.tasks.find(x, y) is not None:
            return True
        return any(a.target == (x, y) for a in self.agents)

    def credit(self, amount: int) -> None:
        self.wood += amount

    def debit(self, amount: int) -> bool:
        if amount > self.wood:
            return False
        self.wood -= amount
        return True

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            grid=self.grid.copy(),
            agents=tuple(replace(a) for a in self.agents),
            tasks=tuple(self.tasks),
            wood=self.wood,
            tick=self.tick,
            running=self.running,
            notices=tuple(self.notices),
            warm=self.warm,
        )


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only copy of committed state for renderers."""

    grid: TileGrid
    agents: tuple[Agent, ...]
    tasks: tuple[Task, ...]
    wood: int
    tick: int
    running: bool
    notices: tuple[Notice, ...]
    warm: frozenset[Coord]
