"""Units moving across a world map towards chosen destinations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from quadsandbox.pathfinding import find_path
from quadsandbox.world_map import WorldMap

Vec = tuple[float, float]
TICK_STEP = 0.1


def _cell_center(x: int, y: int) -> Vec:
    return (x + 0.5, y + 0.5)


@dataclass
class Unit:
    """A unit at a position, heading for a destination."""

    pos: Vec
    dest: Vec | None = None

    def __post_init__(self) -> None:
        if self.dest is None:
            self.dest = self.pos

    def update_pos(self, amount: float) -> None:
        """Step ``amount`` towards the destination."""
        dx = self.dest[0] - self.pos[0]
        dy = self.dest[1] - self.pos[1]
        length = math.hypot(dx, dy)
        if length == 0.0 or not math.isfinite(length):
            return
        self.pos = (self.pos[0] + dx / length * amount, self.pos[1] + dy / length * amount)


@dataclass
class Universe:
    """The map, its units and the last planned path."""

    world_map: WorldMap
    units: list[Unit] = field(default_factory=list)
    path: list[Vec] = field(default_factory=list)

    def add_unit(self, x: int, y: int) -> None:
        """Place a unit at the centre of cell (x, y)."""
        self.units.append(Unit(_cell_center(x, y)))

    def move_to(self, x: int, y: int) -> None:
        """Send the first unit to cell (x, y), planning a path there."""
        if not self.units:
            return
        unit = self.units[0]
        origin = (int(unit.dest[0]), int(unit.dest[1]))
        cells = find_path(self.world_map, origin, (x, y))
        self.path = [_cell_center(i, j) for i, j in cells]
        unit.dest = _cell_center(x, y)

    def tick(self) -> None:
        """Advance the simulation by one clock tick."""
        for unit in self.units:
            unit.update_pos(TICK_STEP)