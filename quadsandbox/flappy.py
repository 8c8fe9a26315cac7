"""A flappy bird style game: keep the dragon flying through gaps."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 700
SINK_SPEED = 100.0
FLAP_SPEED = 150.0
PLAYER_WIDTH = 60.0
PLAYER_HEIGHT = 40.0
NEXT_OBSTACLE_DISTANCE = 1200.0
GAP_MIN = 20.0
GAP_MAX = 400.0


class GameMode(Enum):
    MENU = auto()
    PLAYING = auto()
    END = auto()


@dataclass
class Player:
    """The dragon; ``y`` is the centre of its body."""

    x: float
    y: float
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT

    def gravity_and_move(self, dt: float, is_flapping: bool) -> None:
        """Rise while flapping, sink otherwise, and move forward one unit."""
        if is_flapping:
            self.y -= dt * FLAP_SPEED
        else:
            self.y += dt * SINK_SPEED
        self.x += 1.0
        self.y = max(self.y, 0.0)


def _new_player(x: float, y: float) -> Player:
    return Player(x, y + PLAYER_HEIGHT / 2.0)


@dataclass
class Obstacle:
    """A wall with a gap starting at ``gap_y`` and ``size`` tall."""

    x: float
    gap_y: float
    size: float
    score: int

    @classmethod
    def spawn(cls, x: float, score: int, rng: random.Random | None = None) -> Obstacle:
        """An obstacle with a random gap; higher scores give narrower gaps."""
        rng = rng if rng is not None else random.Random()
        return cls(x, rng.uniform(GAP_MIN, GAP_MAX), (20 - score) * 10.0, score)

    def hit(self, player: Player) -> bool:
        """Whether the player is level with the wall but outside its gap."""
        half_width = player.width
        x_match = player.x - half_width < self.x < player.x + half_width
        above_gap = player.y < self.gap_y
        below_gap = player.y > self.gap_y + self.size
        return x_match and (above_gap or below_gap)


@dataclass
class State:
    """Whole game state, driven one frame at a time by :meth:`tick`."""

    rng: random.Random = field(default_factory=random.Random, repr=False)
    mode: GameMode = GameMode.MENU
    player: Player = field(default_factory=lambda: _new_player(0.0, 0.0))
    obstacles: list[Obstacle] = field(default_factory=list)
    score: int = 0

    def new_game(self) -> None:
        self.player = _new_player(5.0, 25.0)
        self.mode = GameMode.PLAYING
        self.obstacles = [
            Obstacle.spawn(400.0, 10, self.rng),
            Obstacle.spawn(800.0, 11, self.rng),
            Obstacle.spawn(1200.0, 12, self.rng),
        ]
        self.score = 0

    def play(self, dt: float, is_flapping: bool) -> None:
        """Advance a playing frame: move, check collisions, recycle obstacles."""
        self.player.gravity_and_move(dt, is_flapping)
        for obstacle in self.obstacles:
            if obstacle.hit(self.player) or self.player.y > SCREEN_HEIGHT:
                self.mode = GameMode.END
        if self.obstacles and self.obstacles[0].x < self.player.x:
            passed = self.obstacles.pop(0)
            self.score += passed.score
            self.obstacles.append(
                Obstacle.spawn(self.player.x + NEXT_OBSTACLE_DISTANCE, 10, self.rng)
            )

    def tick(self, dt: float, play_pressed: bool, is_flapping: bool) -> None:
        """Run one frame for the current mode."""
        if self.mode is GameMode.PLAYING:
            self.play(dt, is_flapping)
        elif play_pressed:
            self.new_game()