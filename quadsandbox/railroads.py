"""A tile map with railway tracks laid on it and trains standing on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

WORLD_WIDTH = 8
WORLD_HEIGHT = 6
GRASS_COLOR = "lime"


@dataclass(frozen=True)
class Tile:
    """A map cell, described by the colour it is drawn with."""

    color: str


class Track(Enum):
    """Shape of a piece of track occupying one tile."""

    STRAIGHT = auto()


@dataclass
class TrackPos:
    """A position on a track piece: its index and the distance along it."""

    track_id: int
    distance: float = 0.0


@dataclass
class TileMap:
    """A row-major grid of tiles."""

    width: int
    height: int
    tiles: list[Tile] = field(default_factory=list, repr=False)

    def xy_to_idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def tile_at(self, x: int, y: int) -> Tile | None:
        """Tile at (x, y), or None when the index falls outside the tiles."""
        idx = self.xy_to_idx(x, y)
        if 0 <= idx < len(self.tiles):
            return self.tiles[idx]
        return None


@dataclass
class Train:
    """A train standing on a track."""

    position: TrackPos
    speed: float = 0.0


@dataclass
class World:
    """A map with a track slot per tile and the trains running on it."""

    map: TileMap
    tracks: list[Track | None] = field(default_factory=list, repr=False)
    trains: list[Train] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tracks:
            self.tracks = [None] * (self.map.width * self.map.height)

    def put_track(self, x: int, y: int, track: Track) -> int:
        """Lay track at (x, y) and return its index; out-of-range indices are ignored."""
        idx = self.map.xy_to_idx(x, y)
        if 0 <= idx < len(self.tracks):
            self.tracks[idx] = track
        return idx

    def track_at(self, x: int, y: int) -> Track | None:
        idx = self.map.xy_to_idx(x, y)
        if 0 <= idx < len(self.tracks):
            return self.tracks[idx]
        return None

    def add_train(self, train: Train) -> None:
        self.trains.append(train)

    def update(self, dt: float) -> None:
        """Advance every train along its track by its speed over ``dt`` seconds."""
        for train in self.trains:
            train.position.distance += train.speed * dt


def init_world() -> World:
    """A small grass map with a straight line of track and one train on it."""
    tiles = [Tile(GRASS_COLOR)] * (WORLD_WIDTH * WORLD_HEIGHT)
    world = World(TileMap(WORLD_WIDTH, WORLD_HEIGHT, tiles))
    first = world.put_track(1, 2, Track.STRAIGHT)
    for x in range(2, 7):
        world.put_track(x, 2, Track.STRAIGHT)
    world.add_train(Train(TrackPos(first)))
    return world