"""Trains following schedules across a track network."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from quadsandbox.railroads import Tile
from quadsandbox.transnet import Edge, Graph, GraphPos, Node

MAP_WIDTH = 80
MAP_HEIGHT = 60
GROUND_COLOR = "darkgreen"


@dataclass
class TileMap:
    """A row-major grid of tiles, by default an 80x60 field of ground."""

    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    tiles: list[Tile] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [Tile(GROUND_COLOR)] * (self.width * self.height)

    def tile_at(self, x: int, y: int) -> Tile | None:
        """Tile at (x, y), or None when the index falls outside the tiles."""
        idx = y * self.width + x
        if 0 <= idx < len(self.tiles):
            return self.tiles[idx]
        return None


@dataclass
class Train:
    """A train on the network moving at ``speed`` along its schedule's edges."""

    pos: GraphPos
    speed: float
    schedule_id: int


@dataclass
class World:
    """The map, the track network, the schedules and the trains."""

    map: TileMap
    trans_net: Graph
    schedules: list[Sequence[int]]
    trains: list[Train] = field(default_factory=list)

    def update(self, dt: float) -> None:
        """Move every train ``speed * dt`` along its scheduled route."""
        for train in self.trains:
            route = self.schedules[train.schedule_id]
            train.pos = self.trans_net.update_pos(train.pos, route, train.speed * dt)

    def train_locations(self) -> list[Node]:
        """Plane coordinates of every train, in train order."""
        return [self.trans_net.pos_to_location(train.pos) for train in self.trains]


def init_world() -> World:
    """A rectangle-and-diagonal network with three trains on their schedules."""
    nodes = [
        Node(100.0, 100.0),
        Node(700.0, 100.0),
        Node(700.0, 500.0),
        Node(100.0, 500.0),
    ]
    edges = [
        Edge.between(0, 1, nodes),
        Edge.between(1, 3, nodes),
        Edge.between(3, 0, nodes),
        Edge.between(1, 2, nodes),
    ]
    schedules: list[Sequence[int]] = [[0, 1, 2], [3], [0, 1]]
    trains = [
        Train(GraphPos.start(0), 200.0, 0),
        Train(GraphPos.start(3), 140.0, 1),
        Train(GraphPos.start(0), 150.0, 2),
    ]
    return World(TileMap(), Graph(nodes, edges), schedules, trains)