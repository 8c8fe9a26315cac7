"""A glider flying a triangle course between turnpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vec = tuple[float, float]

TURN_RATE = 0.5
KMH_PER_MS = 3.6


def _rotate(v: Vec, angle: float) -> Vec:
    c, s = math.cos(angle), math.sin(angle)
    return (v[0] * c - v[1] * s, v[1] * c + v[0] * s)


def _format_number(value: float) -> str:
    """Shortest form of a number, without a trailing ``.0`` for whole values."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


@dataclass
class Glider:
    """Glider state: position in metres, heading as a unit vector."""

    pos: Vec = (150.0, 100.0)
    velocity: float = 10.0
    orientation: Vec = (0.0, 1.0)
    altitude: float = 100.0
    hvelocity: float = -1.0

    def update(self, dt: float) -> None:
        """Fly forward along the heading and sink by the vertical speed."""
        step = dt * self.velocity
        self.pos = (
            self.pos[0] + step * self.orientation[0],
            self.pos[1] + step * self.orientation[1],
        )
        self.altitude += self.hvelocity * dt

    def turn_left(self, dt: float) -> None:
        self.orientation = _rotate(self.orientation, -TURN_RATE * dt)

    def turn_right(self, dt: float) -> None:
        self.orientation = _rotate(self.orientation, TURN_RATE * dt)

    def yaw_degrees(self) -> float:
        """Heading angle in degrees, measured from the x axis."""
        return math.degrees(math.atan2(self.orientation[1], self.orientation[0]))


@dataclass(frozen=True)
class FlyingField:
    """The competition area and its three turnpoints, in metres."""

    area_size: Vec = (700.0, 400.0)
    tp1: Vec = (550.0, 300.0)
    tp2: Vec = (350.0, 100.0)
    tp3: Vec = (150.0, 300.0)

    def turnpoints(self) -> tuple[Vec, Vec, Vec]:
        return (self.tp1, self.tp2, self.tp3)


def map_to_screen(point: Vec, area_size: Vec, view_pos: Vec, view_size: Vec) -> Vec:
    """Scale a point of the flying area into a view rectangle on screen."""
    if area_size[0] == 0 or area_size[1] == 0:
        raise ValueError("area size must be non-zero")
    scale_x = view_size[0] / area_size[0]
    scale_y = view_size[1] / area_size[1]
    return (view_pos[0] + point[0] * scale_x, view_pos[1] + point[1] * scale_y)


def position_text(glider: Glider) -> tuple[str, str]:
    """Lines of the position panel."""
    return (
        f"Position: {glider.pos[0]:.1f} m, {glider.pos[1]:.1f} m",
        f"Altitude: {glider.altitude:.1f} m",
    )


def orientation_text(glider: Glider) -> tuple[str]:
    """Lines of the orientation panel."""
    return (f"Yaw: {glider.yaw_degrees():.2f} deg",)


def velocity_text(glider: Glider) -> tuple[str, str]:
    """Lines of the velocity panel."""
    speed = _format_number(glider.velocity)
    kmh = _format_number(glider.velocity * KMH_PER_MS)
    return (
        f"speed: {speed} m/s ({kmh} km/h)",
        f"variometer: {_format_number(glider.hvelocity)} m/s",
    )