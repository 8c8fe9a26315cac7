import random

import pytest

from quadsandbox.balls import Ball, Universe, Vec2d, speed_color_index


def test_random_universe_balls_inside_box():
    universe = Universe.random(300.0, 200.0, 25, 10.0, random.Random(3))
    assert len(universe.balls) == 25
    for ball in universe.balls:
        assert ball.radius == 10.0
        assert 10.0 <= ball.pos.x <= 290.0
        assert 10.0 <= ball.pos.y <= 190.0
        assert -5.0 <= ball.velocity.x <= 5.0
        assert -5.0 <= ball.velocity.y <= 5.0


def test_random_ball_reproducible():
    a = Ball.random(100.0, 100.0, 5.0, random.Random(9))
    b = Ball.random(100.0, 100.0, 5.0, random.Random(9))
    assert a == b


def test_tick_moves_by_velocity():
    ball = Ball(Vec2d(100.0, 120.0), Vec2d(3.0, -2.0), 10.0)
    universe = Universe(500.0, 500.0, [ball])
    universe.tick()
    assert ball.pos.x - 100.0 == pytest.approx(ball.velocity.x)
    assert ball.pos.y - 120.0 == pytest.approx(ball.velocity.y)


def test_bounces_off_right_wall():
    ball = Ball(Vec2d(488.0, 250.0), Vec2d(4.0, 0.5), 10.0)
    universe = Universe(500.0, 500.0, [ball])
    universe.tick()
    assert ball.velocity.x == -4.0
    assert ball.velocity.y == 0.5


def test_bounces_off_top_wall():
    ball = Ball(Vec2d(250.0, 12.0), Vec2d(0.5, -3.0), 10.0)
    universe = Universe(500.0, 500.0, [ball])
    universe.tick()
    assert ball.velocity.y == 3.0
    assert ball.velocity.x == 0.5


def test_balls_stay_near_box_over_time():
    universe = Universe.random(400.0, 300.0, 10, 20.0, random.Random(5))
    for _ in range(500):
        universe.tick()
    for ball in universe.balls:
        assert -5.0 <= ball.pos.x <= 405.0
        assert -5.0 <= ball.pos.y <= 305.0


def test_color_index_capped():
    ball = Ball(Vec2d(0.0, 0.0), Vec2d(100.0, -100.0), 1.0)
    assert speed_color_index(ball, 25) == 25


def test_color_index_from_speed():
    ball = Ball(Vec2d(0.0, 0.0), Vec2d(1.5, -2.0), 1.0)
    assert speed_color_index(ball, 25) == 3