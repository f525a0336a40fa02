"""Clearing -- chop a tree, spend the wood, and warm a hut.

Demonstrates:
- Loading a hand-made map with a fixed starting tile
- Queueing chop and build tasks through the engine
- Subscribing to notices as they are committed
- Reading warmth from the committed state

Run: python -m examples.clearing
"""

from tick_hearth import BUILT, FIREPLACE, TREE, WALL, HearthConfig, HearthEngine, TileGrid
from tick_hearth.types import Notice


def on_built(kind: str, notice: Notice) -> None:
    print(f"  tick {notice.tick:3d}  |  {notice.message} at ({notice.data['x']}, {notice.data['y']})")


def main() -> None:
    print("=== Clearing ===\n")

    # A 9x5 meadow with two trees on the east edge.
    grid = TileGrid(9, 5)
    grid.set(8, 1, TREE)
    grid.set(8, 3, TREE)

    engine = HearthEngine(HearthConfig(max_workers=1), seed=42)
    engine.load_grid(grid, start=(0, 2))
    engine.subscribe(BUILT, on_built)

    # Chopping is free; every tree is worth chop_yield wood.
    engine.enqueue_chop_area(0, 0, 8, 4)
    engine.start_simulation()
    engine.run(30)
    print(f"  wood after chopping: {engine.wood}")

    # A fireplace with a short wall to its east.
    engine.enqueue_build_task(2, 2, FIREPLACE)
    for y in (1, 2, 3):
        engine.enqueue_build_task(5, y, WALL)
    print(f"  wood reserved, {engine.wood} left over")
    engine.run(40)

    west = sum(1 for x, _ in engine.warm_tiles if x < 5)
    east = sum(1 for x, _ in engine.warm_tiles if x > 5)
    print(f"\nWarm tiles west of the wall: {west}, east of it: {east}")
    print(f"Done at tick {engine.tick_count}.")


if __name__ == "__main__":
    main()
