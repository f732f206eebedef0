# pong_ai.py
"""Computer opponent: predictive follow with limited speed and imperfect aim."""
import random

from pong_config import CFG
from pong_physics import clamp_paddle


class OpponentController:
    """
    Reactive tracker for the right paddle.

    - leads the ball by extrapolating its vertical velocity, further as the
      rally grows
    - aims with a random error that shrinks over a long rally
    - moves at most ``max_move(hit_count)`` per frame
    """

    def __init__(self, cfg=CFG, rng=None):
        self.cfg = cfg
        self.rng = rng or random.Random()

    def lead_factor(self, hit_count):
        cfg = self.cfg
        return cfg.ai_lead_base + min(hit_count * cfg.ai_lead_per_hit, cfg.ai_lead_cap)

    def error_scale(self, hit_count):
        cfg = self.cfg
        return cfg.ai_error * (1 - min(hit_count / cfg.ai_error_hits, cfg.ai_error_floor))

    def max_move(self, hit_count):
        cfg = self.cfg
        return cfg.ai_move_base + min(hit_count * cfg.ai_move_per_hit, cfg.ai_move_cap)

    def target(self, ball, hit_count):
        target_y = ball.y + ball.vy * self.cfg.ai_lead_frames * self.lead_factor(hit_count)
        # Add small randomness for human-like mistakes
        error = (self.rng.random() - 0.5) * self.error_scale(hit_count)
        return target_y + error

    def update(self, paddle, ball, hit_count, height):
        """Move ``paddle`` one frame toward the target; returns the displacement."""
        before = paddle.y
        dy = self.target(ball, hit_count) - paddle.y
        if abs(dy) > self.cfg.ai_dead_zone:
            step = min(abs(dy), self.max_move(hit_count))
            paddle.y += step if dy > 0 else -step
        clamp_paddle(paddle, height)
        paddle.vy = paddle.y - before
        return paddle.vy
