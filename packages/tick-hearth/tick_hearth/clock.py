"""Clock - tick counter and TickContext factory for the fixed-period timer."""
from __future__ import annotations

import random
from typing import Callable

from tick_hearth.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        """Number of the last committed tick."""
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        """Context for the tick about to run."""
        tick_number = self._tick_number + 1
        return TickContext(
            tick_number=tick_number,
            request_stop=stop_fn,
            random=rng,
        )

    def commit(self, tick_number: int) -> None:
        self._tick_number = tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
