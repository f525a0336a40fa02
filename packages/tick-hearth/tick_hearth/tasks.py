"""TaskQueue - ordered chop/build tasks keyed by tile."""
from __future__ import annotations

from typing import Iterator

from tick_hearth.types import BuildTask, ChopTask, Task


class TaskQueue:
    """FIFO of outstanding tasks with monotonic ids.

    The queue does not enforce one task per tile on its own; the
    scheduler checks ``find`` before pushing.
    """

    def __init__(self, next_id: int = 1) -> None:
        self._tasks: list[Task] = []
        self._next_id = next_id

    def new_chop(self, x: int, y: int) -> ChopTask:
        task = ChopTask(id=self._next_id, x=x, y=y)
        self._next_id += 1
        return task

    def new_build(self, x: int, y: int, build_type: str) -> BuildTask:
        task = BuildTask(id=self._next_id, x=x, y=y, build_type=build_type)
        self._next_id += 1
        return task

    def push(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, task: Task) -> None:
        self._tasks.remove(task)

    def retain(self, keep: list[Task]) -> None:
        """Replace the contents with ``keep``, preserving its order."""
        self._tasks = list(keep)

    def find(self, x: int, y: int) -> Task | None:
        for task in self._tasks:
            if task.x == x and task.y == y:
                return task
        return None

    def copy(self) -> TaskQueue:
        clone = TaskQueue(self._next_id)
        clone._tasks = list(self._tasks)
        return clone

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task: object) -> bool:
        return task in self._tasks
