import math
import random

import pytest

from pong_config import CFG
from pong_match import check_scoring, reset_scores, serve, set_speed_factor, start_match, toggle_running
from pong_world import RunState, Side, new_world


@pytest.fixture
def world():
    return new_world(CFG, "circle")


def test_serve_right_stays_within_angle_window(world):
    for seed in range(200):
        serve(world, 1, random.Random(seed))
        ball = world.ball
        assert (ball.x, ball.y) == (CFG.width / 2, CFG.height / 2)
        assert ball.vx > 0
        assert abs(math.atan2(ball.vy, ball.vx)) <= CFG.serve_angle + 1e-12
        assert ball.speed == pytest.approx(CFG.ball_speed_start)


def test_serve_left_and_random_side(world):
    serve(world, -1, random.Random(1))
    assert world.ball.vx < 0
    assert world.serve_to == -1
    sides = set()
    for seed in range(50):
        serve(world, None, random.Random(seed))
        sides.add(world.serve_to)
    assert sides == {-1, 1}


def test_serve_speed_scales_and_is_capped(world):
    world.speed_factor = 2.0
    serve(world, 1, random.Random(0))
    assert world.ball.speed == pytest.approx(CFG.ball_speed_start * 2)

    world.speed_factor = 1.0
    world.hit_count = 100
    serve(world, 1, random.Random(0))
    assert world.ball.speed == pytest.approx(CFG.max_ball_speed)


def test_start_match_is_paused_with_ball_served():
    world = start_match(CFG, "rect", random.Random(5))
    assert world.state is RunState.PAUSED
    assert world.ball.speed > 0
    assert world.ball.x == CFG.width / 2


def test_toggle_flips_state_and_sets_clock(world):
    toggle_running(world, 1234.0)
    assert world.state is RunState.RUNNING
    assert world.last_time == 1234.0
    toggle_running(world, 2000.0)
    assert world.state is RunState.PAUSED
    assert world.last_time == 1234.0


def test_left_crossing_scores_once_for_opponent(world):
    world.state = RunState.RUNNING
    world.hit_count = 6
    world.ball.x = -world.ball.radius - 1
    world.ball.vx = -5.0

    assert check_scoring(world, random.Random(0)) is Side.RIGHT
    assert world.scores.as_tuple() == (0, 1)
    assert world.hit_count == 0
    assert world.state is RunState.PAUSED
    assert world.ball.x == CFG.width / 2
    assert world.ball.vx < 0  # next serve goes left

    assert check_scoring(world, random.Random(0)) is None
    assert world.scores.as_tuple() == (0, 1)


def test_right_crossing_scores_for_player(world):
    world.state = RunState.RUNNING
    world.ball.x = CFG.width + world.ball.radius + 1
    assert check_scoring(world, random.Random(0)) is Side.LEFT
    assert world.scores.as_tuple() == (1, 0)
    assert world.ball.vx > 0


def test_partial_crossing_does_not_score(world):
    world.ball.x = -world.ball.radius + 1
    assert check_scoring(world) is None
    assert world.scores.as_tuple() == (0, 0)


def test_reset_zeroes_scores_and_pauses_only(world):
    world.scores.left, world.scores.right = 3, 5
    world.hit_count = 7
    world.state = RunState.RUNNING
    world.ball.x, world.ball.y = 123.0, 456.0
    world.left.y = 200.0
    world.right.y = 400.0

    reset_scores(world)

    assert world.scores.as_tuple() == (0, 0)
    assert world.state is RunState.PAUSED
    assert (world.ball.x, world.ball.y) == (123.0, 456.0)
    assert (world.left.y, world.right.y) == (200.0, 400.0)
    assert world.hit_count == 7


def test_speed_factor_rescales_ball(world):
    world.ball.vx, world.ball.vy = 4.0, 3.0
    assert set_speed_factor(world, 2.0) == 2.0
    assert (world.ball.vx, world.ball.vy) == (8.0, 6.0)
    set_speed_factor(world, 1.0)
    assert (world.ball.vx, world.ball.vy) == (4.0, 3.0)


def test_speed_factor_is_clamped_or_ignored(world):
    assert set_speed_factor(world, 10) == CFG.max_speed_factor
    assert set_speed_factor(world, 0) == CFG.min_speed_factor
    assert set_speed_factor(world, float("nan")) == CFG.min_speed_factor
    assert set_speed_factor(world, "fast") == CFG.min_speed_factor
    assert world.speed_factor == CFG.min_speed_factor
