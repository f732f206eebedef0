# pong_match.py
"""Match rules: serving, pausing, scoring and the speed multiplier."""
import logging
import math
import random

from pong_config import CFG
from pong_physics import rescale_velocity
from pong_world import RunState, Side, new_world

logger = logging.getLogger(__name__)

STATUS_PLAYING = "Playing - use mouse or Up/Down to move"
STATUS_PAUSED = "Paused - click or press Space to start"
STATUS_RESET = "Scores reset. Click or press Space to start"
STATUS_POINT = {
    Side.LEFT: "Point for Player. Click or press Space to serve.",
    Side.RIGHT: "Point for Computer. Click or press Space to serve.",
}


def serve(world, serve_to=None, rng=None, cfg=CFG):
    """Centre the ball and give it a fresh velocity toward ``serve_to`` (-1 left, +1 right)."""
    rng = rng or random
    if serve_to is None:
        serve_to = 1 if rng.random() < 0.5 else -1
    world.serve_to = serve_to

    ball = world.ball
    ball.x = world.width / 2
    ball.y = world.height / 2
    angle = rng.uniform(-cfg.serve_angle, cfg.serve_angle)
    base = cfg.ball_speed_start + min(world.hit_count * cfg.ball_speed_inc, cfg.max_ball_speed)
    speed = min(base * world.speed_factor, cfg.max_ball_speed * world.speed_factor)
    ball.vx = serve_to * speed * math.cos(angle)
    ball.vy = speed * math.sin(angle)


def start_match(cfg=CFG, paddles="circle", rng=None):
    """New paused world with the ball already served toward a random side."""
    world = new_world(cfg, paddles)
    serve(world, None, rng, cfg)
    return world


def toggle_running(world, now):
    if world.running:
        world.state = RunState.PAUSED
        world.status = STATUS_PAUSED
    else:
        world.state = RunState.RUNNING
        world.last_time = now
        world.status = STATUS_PLAYING
    logger.debug("run state -> %s", world.state.value)


def reset_scores(world):
    world.scores.left = 0
    world.scores.right = 0
    world.state = RunState.PAUSED
    world.status = STATUS_RESET
    logger.debug("scores reset")


def award_point(world, side, rng=None, cfg=CFG):
    if side is Side.LEFT:
        world.scores.left += 1
    else:
        world.scores.right += 1
    world.state = RunState.PAUSED
    world.status = STATUS_POINT[side]
    world.hit_count = 0
    # next serve goes toward whoever just missed
    serve(world, 1 if side is Side.LEFT else -1, rng, cfg)
    logger.debug("point %s, score %d:%d", side.value, world.scores.left, world.scores.right)


def check_scoring(world, rng=None, cfg=CFG):
    """Award a point if the ball has fully left the playfield; returns the scoring side."""
    ball = world.ball
    if ball.x + ball.radius < 0:
        scorer = Side.RIGHT
    elif ball.x - ball.radius > world.width:
        scorer = Side.LEFT
    else:
        return None
    award_point(world, scorer, rng, cfg)
    return scorer


def set_speed_factor(world, factor, cfg=CFG):
    """Change the speed multiplier and scale the ball's current velocity to match."""
    try:
        factor = float(factor)
    except (TypeError, ValueError):
        logger.warning("ignoring speed factor %r", factor)
        return world.speed_factor
    if not math.isfinite(factor):
        logger.warning("ignoring speed factor %r", factor)
        return world.speed_factor
    factor = max(cfg.min_speed_factor, min(cfg.max_speed_factor, factor))
    old = world.speed_factor
    if old > 0:
        rescale_velocity(world.ball, factor / old)
    world.speed_factor = factor
    return factor
