"""Bounded notice log with monotonic ids."""
from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from tick_hearth.types import Notice


class NoticeLog:
    """Keeps the newest ``max_entries`` notices for display.

    Notices posted since the last ``take_fresh`` are also held aside in
    full, so subscribers see every one even when the display window
    overflows within a single tick.
    """

    def __init__(self, max_entries: int = 5, next_id: int = 1) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max = max_entries
        self._notices: deque[Notice] = deque(maxlen=max_entries)
        self._fresh: list[Notice] = []
        self._next_id = next_id

    def post(self, tick: int, kind: str, message: str, **data: Any) -> Notice:
        notice = Notice(id=self._next_id, tick=tick, kind=kind, message=message, data=data)
        self._next_id += 1
        self._notices.append(notice)
        self._fresh.append(notice)
        return notice

    def expire(self, tick: int, ttl: int) -> int:
        """Drop notices older than ``ttl`` ticks. Returns how many went."""
        before = len(self._notices)
        kept = [n for n in self._notices if tick - n.tick < ttl]
        self._notices.clear()
        self._notices.extend(kept)
        return before - len(kept)

    def take_fresh(self) -> list[Notice]:
        fresh = self._fresh
        self._fresh = []
        return fresh

    def last(self, kind: str) -> Notice | None:
        for n in reversed(self._notices):
            if n.kind == kind:
                return n
        return None

    def copy(self) -> NoticeLog:
        clone = NoticeLog(self._max, self._next_id)
        clone._notices.extend(self._notices)
        return clone

    def __iter__(self) -> Iterator[Notice]:
        return iter(self._notices)

    def __len__(self) -> int:
        return len(self._notices)
