"""Grid world map where each tile is either walkable or blocked."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

STRAIGHT_COST = 1.0
DIAGONAL_COST = 1.45


@dataclass(frozen=True)
class Tile:
    """A single map cell."""

    is_blocked: bool

    @classmethod
    def walkable(cls) -> Tile:
        return cls(False)

    @classmethod
    def blocked(cls) -> Tile:
        return cls(True)


@dataclass
class WorldMap:
    """A rectangular grid of tiles; a new map is entirely blocked."""

    width: int
    height: int
    tiles: list[Tile] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [Tile.blocked()] * (self.width * self.height)

    @classmethod
    def from_data(cls, width: int, height: int, data: Sequence[bool]) -> WorldMap:
        """Build a map from row-major blocked flags."""
        if width * height != len(data):
            raise ValueError(
                f"expected {width * height} tiles for a {width}x{height} map, got {len(data)}"
            )
        return cls(width, height, [Tile(bool(b)) for b in data])

    @classmethod
    def from_string(cls, map_string: str) -> WorldMap:
        """Build a map from text: spaces are walkable, anything else is blocked."""
        lines = [line.strip() for line in map_string.split("\n")]
        lines = [line for line in lines if line]
        cols = max((len(line) for line in lines), default=1)
        world = cls(cols, len(lines))
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                if ch == " ":
                    world.set_tile(x, y, Tile.walkable())
        return world

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Tile:
        """Tile at the location; everything outside the map is blocked."""
        if not self._inside(x, y):
            return Tile.blocked()
        return self.tiles[self.xy_idx(x, y)]

    def available_exits(self, x: int, y: int) -> list[tuple[int, int, float]]:
        """Walkable neighbours of a tile with the cost of moving there."""
        candidates = [
            (x - 1, y, STRAIGHT_COST),
            (x + 1, y, STRAIGHT_COST),
            (x, y - 1, STRAIGHT_COST),
            (x, y + 1, STRAIGHT_COST),
            (x - 1, y - 1, DIAGONAL_COST),
            (x + 1, y - 1, DIAGONAL_COST),
            (x - 1, y + 1, DIAGONAL_COST),
            (x + 1, y + 1, DIAGONAL_COST),
        ]
        return [(cx, cy, cost) for cx, cy, cost in candidates if not self.at(cx, cy).is_blocked]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Replace a tile; locations outside the map are ignored."""
        if self._inside(x, y):
            self.tiles[self.xy_idx(x, y)] = tile

    def xy_idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def __str__(self) -> str:
        return "".join(
            "".join("#" if self.at(x, y).is_blocked else " " for x in range(self.width)) + "\n"
            for y in range(self.height)
        )