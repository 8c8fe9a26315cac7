"""Balls bouncing around inside a box."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

BOX_WIDTH = 1024.0
BOX_HEIGHT = 800.0
BALL_RADIUS = 20.0
NUM_BALLS = 10
MAX_START_SPEED = 5.0


@dataclass
class Vec2d:
    """A mutable two dimensional vector."""

    x: float
    y: float


@dataclass
class Ball:
    """A ball with a position, a velocity and a radius."""

    pos: Vec2d
    velocity: Vec2d
    radius: float

    @classmethod
    def random(
        cls,
        width: float,
        height: float,
        radius: float,
        rng: random.Random | None = None,
    ) -> Ball:
        """A ball placed fully inside the box with a random velocity."""
        rng = rng if rng is not None else random.Random()
        pos = Vec2d(rng.uniform(radius, width - radius), rng.uniform(radius, height - radius))
        velocity = Vec2d(
            rng.uniform(-MAX_START_SPEED, MAX_START_SPEED),
            rng.uniform(-MAX_START_SPEED, MAX_START_SPEED),
        )
        return cls(pos, velocity, radius)


@dataclass
class Universe:
    """A box holding balls."""

    width: float
    height: float
    balls: list[Ball] = field(default_factory=list)

    @classmethod
    def random(
        cls,
        width: float,
        height: float,
        num_balls: int,
        ball_radius: float,
        rng: random.Random | None = None,
    ) -> Universe:
        rng = rng if rng is not None else random.Random()
        balls = [Ball.random(width, height, ball_radius, rng) for _ in range(num_balls)]
        return cls(width, height, balls)

    def tick(self) -> None:
        """Move every ball by its velocity, bouncing off the walls."""
        for ball in self.balls:
            ball.pos.x += ball.velocity.x
            if ball.pos.x <= ball.radius or ball.pos.x >= self.width - ball.radius:
                ball.velocity.x = -ball.velocity.x
            ball.pos.y += ball.velocity.y
            if ball.pos.y <= ball.radius or ball.pos.y >= self.height - ball.radius:
                ball.velocity.y = -ball.velocity.y


def speed_color_index(ball: Ball, num_colors: int) -> int:
    """Colour index for a ball: its taxicab speed, capped at ``num_colors``."""
    speed = abs(ball.velocity.x) + abs(ball.velocity.y)
    return min(int(speed), num_colors)