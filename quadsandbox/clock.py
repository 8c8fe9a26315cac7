"""Simulation time that can run at several speeds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TimeSpeed(Enum):
    """How fast simulated time passes relative to real time."""

    PAUSE = 0.0
    SLOW = 0.5
    NORMAL = 1.0
    FAST = 2.0
    VERY_FAST = 5.0

    @property
    def factor(self) -> float:
        return self.value


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


@dataclass
class GameTime:
    """Elapsed simulated time in milliseconds."""

    current_time_ms: int = 0
    speed: TimeSpeed = TimeSpeed.NORMAL

    def tick(self, dt: float) -> None:
        """Advance by ``dt`` real seconds scaled by the current speed."""
        self.current_time_ms += int(1000.0 * dt * self.speed.factor)

    def current_time_sec(self) -> int:
        return _trunc_div(self.current_time_ms, 1000)

    def hour(self) -> int:
        return _trunc_div(self.current_time_sec(), 60 * 60)

    def minute(self) -> int:
        return _trunc_rem(_trunc_div(self.current_time_sec(), 60), 60)

    def second(self) -> int:
        return _trunc_rem(self.current_time_sec(), 60)

    def __str__(self) -> str:
        return f"{self.hour()}:{self.minute():02}:{self.second():02}"