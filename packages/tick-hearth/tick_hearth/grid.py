"""TileGrid - dense, fixed-size 2D tile storage."""
from __future__ import annotations

from typing import Iterator

from tick_hearth.types import DOOR, GRASS, TILE_TYPES, WALL, Coord, Tile

# Neighbour order is part of the pathfinding contract: up, down, left, right.
DIRECTIONS: tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

_WARMTH_BLOCKERS = frozenset({WALL, DOOR})


def blocks_warmth(tile_type: str) -> bool:
    return tile_type in _WARMTH_BLOCKERS


class TileGrid:
    """Row-major store of tile types.

    Tiles are handed out as immutable ``Tile`` values; mutation goes
    through ``set``. Copies share nothing, so a draft grid can be edited
    while the committed one is still being read.
    """

    def __init__(self, width: int, height: int, fill: str = GRASS) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        _check_type(fill)
        self._width = width
        self._height = height
        self._cells: list[str] = [fill] * (width * height)

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> TileGrid:
        """Build a grid from ``rows[y][x]`` tile type names."""
        if not rows or not rows[0]:
            raise ValueError("rows must be a non-empty rectangle")
        width = len(rows[0])
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} tiles, expected {width}")
            for x, tile_type in enumerate(row):
                grid.set(x, y, tile_type)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self._width}x{self._height} grid"
            )

    # --- Queries ---

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def type_at(self, x: int, y: int) -> str | None:
        """Tile type at (x, y), or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return self._cells[y * self._width + x]

    def at(self, x: int, y: int) -> Tile:
        self._check_bounds(x, y)
        return Tile(self._cells[y * self._width + x], x, y)

    def is_blocking(self, x: int, y: int) -> bool:
        """Walls block movement, and so does everything off the grid."""
        tile_type = self.type_at(x, y)
        return tile_type is None or tile_type == WALL

    def neighbors(self, x: int, y: int) -> list[Coord]:
        """In-bounds 4-connected neighbours in DIRECTIONS order."""
        result: list[Coord] = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def in_square(self, x: int, y: int, r: int) -> list[Coord]:
        """In-bounds cells within Chebyshev radius ``r``, centre excluded."""
        result: list[Coord] = []
        for dy in range(-r, r + 1):
            for dx in range(-r, r + 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    result.append((nx, ny))
        return result

    def of_type(self, tile_type: str) -> list[Coord]:
        """Coordinates holding ``tile_type``, in row-major order."""
        w = self._width
        return [(i % w, i // w) for i, t in enumerate(self._cells) if t == tile_type]

    def count(self, tile_type: str) -> int:
        return self._cells.count(tile_type)

    def tiles(self) -> Iterator[Tile]:
        w = self._width
        for i, tile_type in enumerate(self._cells):
            yield Tile(tile_type, i % w, i // w)

    def rows(self) -> list[list[str]]:
        w = self._width
        return [self._cells[y * w:(y + 1) * w] for y in range(self._height)]

    # --- Mutation ---

    def set(self, x: int, y: int, tile_type: str) -> None:
        self._check_bounds(x, y)
        _check_type(tile_type)
        self._cells[y * self._width + x] = tile_type

    def copy(self) -> TileGrid:
        clone = TileGrid.__new__(TileGrid)
        clone._width = self._width
        clone._height = self._height
        clone._cells = list(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"TileGrid({self._width}x{self._height})"


def _check_type(tile_type: str) -> None:
    if tile_type not in TILE_TYPES:
        raise ValueError(f"Unknown tile type {tile_type!r}")
