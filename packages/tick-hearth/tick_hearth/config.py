"""Simulation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from tick_hearth.types import BED, BUILDABLE_TYPES, DOOR, FIREPLACE, WALL

DEFAULT_BUILD_COSTS: Mapping[str, int] = MappingProxyType({
    WALL: 1,
    DOOR: 2,
    BED: 3,
    FIREPLACE: 5,
})


@dataclass(frozen=True)
class HearthConfig:
    """Immutable tuning for one simulation.

    Attributes:
        tps: Ticks per second of the driving timer.
        tree_density: Fraction of tiles seeded as trees by map generation.
        chop_yield: Wood credited for each chopped tree.
        build_costs: Wood reserved per build type when a build is queued.
        growth_interval: Ticks between tree propagation passes.
        growth_chance: Per-tree spread probability at zero coverage.
        max_tree_coverage: Coverage at or above which trees stop spreading.
        growth_radius: Chebyshev radius in which a tree may seed a new one.
        spawn_interval: Ticks between worker spawn checks.
        spawn_chance: Probability that a spawn check produces a worker.
        spawn_radius: Chebyshev radius searched around a fireplace.
        max_workers: Spawning stops once this many agents exist.
        warmth_radius: Step limit of the warmth flood fill.
        max_notices: Notices retained before the oldest is dropped.
        notice_ttl: Ticks a notice stays visible.
    """

    tps: int = 2
    tree_density: float = 0.12
    chop_yield: int = 10
    build_costs: Mapping[str, int] = field(default_factory=lambda: DEFAULT_BUILD_COSTS)
    growth_interval: int = 100
    growth_chance: float = 0.10
    max_tree_coverage: float = 0.70
    growth_radius: int = 3
    spawn_interval: int = 10
    spawn_chance: float = 0.10
    spawn_radius: int = 2
    max_workers: int = 2
    warmth_radius: int = 5
    max_notices: int = 5
    notice_ttl: int = 10

    def __post_init__(self) -> None:
        for name in ("tps", "growth_interval", "spawn_interval", "max_notices", "notice_ttl"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("growth_radius", "spawn_radius", "warmth_radius", "chop_yield", "max_workers"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        for name in ("tree_density", "growth_chance", "spawn_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if not 0.0 < self.max_tree_coverage <= 1.0:
            raise ValueError(
                f"max_tree_coverage must be within (0, 1], got {self.max_tree_coverage}"
            )
        for build_type, cost in self.build_costs.items():
            if build_type not in BUILDABLE_TYPES:
                raise ValueError(f"Cannot assign a build cost to {build_type!r}")
            if cost < 0:
                raise ValueError(f"Build cost for {build_type!r} must be >= 0, got {cost}")
        # Freeze caller-supplied dicts so the config stays immutable.
        object.__setattr__(self, "build_costs", MappingProxyType(dict(self.build_costs)))

    def build_cost(self, build_type: str) -> int:
        return self.build_costs.get(build_type, 0)
