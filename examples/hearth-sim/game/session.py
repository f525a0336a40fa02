"""Session - UI-side build mode and drag state around one engine."""
from __future__ import annotations

from dataclasses import dataclass

from tick_hearth import BUILDABLE_TYPES, WALL, Coord, HearthConfig, HearthEngine


@dataclass
class Session:
    engine: HearthEngine
    width: int
    height: int
    build_mode: bool = False
    build_type: str = WALL
    drag_start: Coord | None = None
    hover: Coord | None = None
    message: str = ""

    def reset(self) -> None:
        """Throw the world away and generate a fresh map."""
        self.engine.initialize_game(self.width, self.height)
        self.drag_start = None
        self.message = "New map"

    def toggle_build_mode(self) -> None:
        self.build_mode = not self.build_mode
        self.drag_start = None

    def select_build_type(self, index: int) -> None:
        """Pick a build type by its 0-based palette slot; switches build mode on."""
        if 0 <= index < len(BUILDABLE_TYPES):
            self.build_type = BUILDABLE_TYPES[index]
            self.build_mode = True

    def press(self, coord: Coord) -> None:
        self.drag_start = coord

    def release(self, coord: Coord) -> None:
        """Finish a click or drag at ``coord`` and issue the matching command."""
        start = self.drag_start if self.drag_start is not None else coord
        self.drag_start = None
        engine = self.engine

        if self.build_mode:
            x, y = coord
            if engine.enqueue_build_task(x, y, self.build_type) is not None:
                self.message = f"Queued {self.build_type}"
            elif engine.wood < engine.build_cost(self.build_type):
                self.message = "Not enough wood"
            else:
                self.message = "Can't build there"
            return

        if start != coord:
            created = engine.enqueue_chop_area(start[0], start[1], coord[0], coord[1])
            self.message = f"Marked {len(created)} tree(s)"
        elif engine.enqueue_chop_task(*coord) is not None:
            self.message = "Marked tree"
        else:
            self.message = ""


def new_session(seed: int, width: int, height: int, tps: int) -> Session:
    engine = HearthEngine(HearthConfig(tps=tps), seed=seed)
    engine.initialize_game(width, height)
    return Session(engine=engine, width=width, height=height)
