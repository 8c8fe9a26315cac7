"""A simplified grid fluid: per-cell density and velocity with diffusion."""

from __future__ import annotations

from dataclasses import dataclass, field

SOURCE_SIZE = 1
RELAXATION_STEPS = 20


@dataclass(frozen=True)
class Vec2d:
    """A two dimensional vector."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vec2d:
        return cls(0.0, 0.0)

    def scale(self, s: float) -> Vec2d:
        return Vec2d(self.x * s, self.y * s)


class UniverseBuilder:
    """Configures and creates a :class:`Universe`."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._velocity = Vec2d.zero()
        self._density = 0.0
        self._diffusion_rate = 0.0

    def with_velocity(self, velocity: Vec2d) -> UniverseBuilder:
        """Set the same velocity for all cells."""
        self._velocity = velocity
        return self

    def with_density(self, density: float) -> UniverseBuilder:
        """Set the same density for all cells."""
        self._density = density
        return self

    def with_diffusion_rate(self, rate: float) -> UniverseBuilder:
        self._diffusion_rate = rate
        return self

    def build(self) -> Universe:
        count = self.width * self.height
        return Universe(
            width=self.width,
            height=self.height,
            velocities=[self._velocity] * count,
            densities=[self._density] * count,
            diffusion_rate=self._diffusion_rate,
        )


@dataclass
class Universe:
    """A grid of cells, each with a density and a velocity."""

    width: int
    height: int
    velocities: list[Vec2d] = field(repr=False)
    densities: list[float] = field(repr=False)
    diffusion_rate: float = 0.0

    def _index(self, x: int, y: int) -> int:
        idx = y * self.width + x
        if not 0 <= idx < len(self.densities):
            raise IndexError(f"cell ({x}, {y}) is outside the universe")
        return idx

    def density_at(self, x: int, y: int) -> float:
        """Density of a cell; cells outside the grid have none."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return 0.0
        return self.densities[y * self.width + x]

    def increase_density(self, x: int, y: int, amount: float) -> None:
        """Add density to a cell, saturating at 1."""
        idx = self._index(x, y)
        self.densities[idx] = min(self.densities[idx] + amount, 1.0)

    def velocity_at(self, x: int, y: int) -> Vec2d:
        return self.velocities[self._index(x, y)]

    def diffuse(self, dt: float) -> None:
        """Spread density to neighbours using Gauss-Seidel relaxation."""
        a = dt * self.diffusion_rate * (self.width * self.height)
        initial = list(self.densities)
        for _ in range(RELAXATION_STEPS):
            for x in range(self.width):
                for y in range(self.height):
                    idx = y * self.width + x
                    neighbours = (
                        self.density_at(x - 1, y)
                        + self.density_at(x + 1, y)
                        + self.density_at(x, y - 1)
                        + self.density_at(x, y + 1)
                    )
                    self.densities[idx] = (initial[idx] + a * neighbours) / (1.0 + 4.0 * a)


def add_particles(universe: Universe, dt: float, x: int, y: int) -> None:
    """Inject density around cell (x, y), proportional to the elapsed time."""
    power = dt / 1.0
    for i in range(max(x - SOURCE_SIZE + 1, 0), min(x + SOURCE_SIZE, universe.width)):
        for j in range(max(y - SOURCE_SIZE + 1, 0), min(y + SOURCE_SIZE, universe.height)):
            universe.increase_density(i, j, power)