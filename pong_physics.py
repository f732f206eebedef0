# pong_physics.py
from pong_config import CFG


def frame_factor(elapsed_ms, cfg=CFG):
    """Elapsed time as a multiple of the nominal frame, capped after a stall."""
    dt = elapsed_ms / cfg.frame_ms
    return max(0.0, min(dt, cfg.max_frame_factor))


def integrate_ball(ball, dt):
    ball.x += ball.vx * dt
    ball.y += ball.vy * dt


def rescale_velocity(ball, ratio):
    ball.vx *= ratio
    ball.vy *= ratio


def clamp_paddle(paddle, height):
    extent = paddle.half_extent
    paddle.y = max(extent, min(height - extent, paddle.y))


def move_paddle_to(paddle, y, height):
    # pointer drives the paddle centre directly
    before = paddle.y
    paddle.y = y
    clamp_paddle(paddle, height)
    paddle.vy = paddle.y - before


def move_paddle_keys(paddle, direction, distance, height):
    """Move by ``distance`` in ``direction`` (-1 up, +1 down); returns the displacement."""
    before = paddle.y
    paddle.y += direction * distance
    clamp_paddle(paddle, height)
    paddle.vy = paddle.y - before
    return paddle.vy
