"""Conway's game of life on a wrapping grid."""

from __future__ import annotations

import random
import tomllib
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

DEAD_SYMBOL = "◻"
ALIVE_SYMBOL = "◼"


class Cell(IntEnum):
    """State of a single cell; the value counts as a live neighbour."""

    DEAD = 0
    ALIVE = 1


@dataclass(frozen=True)
class SimParams:
    """Simulation parameters read from a TOML file."""

    width: int
    height: int
    prob: float


def _non_negative_int(data: dict, key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"parameter {key!r} must be a non-negative integer, got {value!r}")
    return value


def load_params(path: str | Path) -> SimParams:
    """Read width, height and prob from a TOML file."""
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    try:
        width = _non_negative_int(data, "width")
        height = _non_negative_int(data, "height")
        prob = data["prob"]
    except KeyError as exc:
        raise ValueError(f"missing parameter {exc.args[0]!r}") from None
    if isinstance(prob, bool) or not isinstance(prob, (int, float)):
        raise ValueError(f"parameter 'prob' must be a number, got {prob!r}")
    return SimParams(width=width, height=height, prob=float(prob))


@dataclass
class Universe:
    """A grid of cells whose edges wrap around."""

    width: int
    height: int
    cells: list[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [Cell.DEAD] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        prob: float,
        rng: random.Random | None = None,
    ) -> Universe:
        """Fill a grid at random; a cell is alive when a draw exceeds ``prob``."""
        rng = rng if rng is not None else random.Random()
        cells = [
            Cell.ALIVE if rng.random() > prob else Cell.DEAD for _ in range(width * height)
        ]
        return cls(width, height, cells)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the universe")
        return row * self.width + col

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[self._index(row, col)]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        self.cells[self._index(row, col)] = cell

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Number of live cells among the eight wrapped neighbours."""
        north = (row - 1) % self.height
        south = (row + 1) % self.height
        west = (col - 1) % self.width
        east = (col + 1) % self.width
        neighbours = (
            (north, west), (north, col), (north, east),
            (row, west), (row, east),
            (south, west), (south, col), (south, east),
        )
        return sum(self.cell_at(r, c) for r, c in neighbours)

    def tick(self) -> None:
        """Advance one generation."""
        next_cells = list(self.cells)
        for row in range(self.height):
            for col in range(self.width):
                alive = self.cell_at(row, col) is Cell.ALIVE
                live = self.live_neighbor_count(row, col)
                if alive:
                    state = Cell.ALIVE if live in (2, 3) else Cell.DEAD
                else:
                    state = Cell.ALIVE if live == 3 else Cell.DEAD
                next_cells[row * self.width + col] = state
        self.cells = next_cells

    def __str__(self) -> str:
        rows = (
            self.cells[start:start + self.width]
            for start in range(0, len(self.cells), max(self.width, 1))
        )
        return "".join(
            "".join(DEAD_SYMBOL if c is Cell.DEAD else ALIVE_SYMBOL for c in row) + "\n"
            for row in rows
        )