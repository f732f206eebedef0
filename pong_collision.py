# pong_collision.py
"""Ball vs paddle and ball vs wall collision tests and responses.

Paddle shapes carry the collision capability, so the simulation never needs to
know which paddle variant is in play:

- ``RectShape``: nearest point on an axis-aligned rectangle, simple horizontal
  reflection plus spin from where along the paddle the ball struck.
- ``CircleShape``: circle-circle test and a mirror reflection about the contact
  normal, plus spin from the normal's vertical component.
"""
import math
from dataclasses import dataclass

from pong_physics import rescale_velocity


def _normalise(dx, dy, fallback):
    dist = math.hypot(dx, dy)
    if dist <= 1e-9:
        return fallback
    return dx / dist, dy / dist


def boost_speed(ball, increment, max_speed):
    """Add ``increment`` to the ball's speed, capped at ``max_speed``."""
    current = ball.speed
    if current <= 0.0:
        return
    new_speed = min(current + increment, max_speed)
    rescale_velocity(ball, new_speed / current)


def bounce_walls(ball, height) -> bool:
    if ball.y - ball.radius <= 0:
        ball.y = ball.radius
        ball.vy = -ball.vy
        return True
    if ball.y + ball.radius >= height:
        ball.y = height - ball.radius
        ball.vy = -ball.vy
        return True
    return False


@dataclass(frozen=True)
class RectShape:
    width: float
    height: float

    @property
    def half_extent(self) -> float:
        return self.height / 2

    def nearest_point(self, ball, paddle):
        hw, hh = self.width / 2, self.height / 2
        px = max(paddle.x - hw, min(ball.x, paddle.x + hw))
        py = max(paddle.y - hh, min(ball.y, paddle.y + hh))
        return px, py

    def hits(self, ball, paddle) -> bool:
        px, py = self.nearest_point(ball, paddle)
        dx, dy = ball.x - px, ball.y - py
        return dx * dx + dy * dy <= ball.radius * ball.radius

    def contact_normal(self, ball, paddle):
        px, py = self.nearest_point(ball, paddle)
        return _normalise(ball.x - px, ball.y - py, (float(paddle.facing), 0.0))

    def respond(self, ball, paddle, cfg, speed_factor=1.0):
        px, py = self.nearest_point(ball, paddle)
        nx, ny = self.contact_normal(ball, paddle)
        if px == ball.x and py == ball.y:
            # centre is inside the rect: push out through the hitting face
            px = paddle.x + paddle.facing * self.width / 2

        # Compute relative hit position and add a bit of "spin"
        rel = (ball.y - paddle.y) / (self.height / 2)
        rel = max(-1.0, min(1.0, rel))
        ball.vx = -ball.vx
        ball.vy += rel * cfg.rect_spin

        gap = ball.radius + cfg.contact_epsilon
        ball.x = px + nx * gap
        ball.y = py + ny * gap

        boost_speed(ball, cfg.ball_speed_inc, cfg.max_ball_speed * speed_factor)


@dataclass(frozen=True)
class CircleShape:
    radius: float
    handle_length: float = 0.0  # rendering only
    handle_width: float = 0.0   # rendering only

    @property
    def half_extent(self) -> float:
        return self.radius

    def hits(self, ball, paddle) -> bool:
        dx, dy = ball.x - paddle.x, ball.y - paddle.y
        return math.hypot(dx, dy) <= ball.radius + self.radius

    def contact_normal(self, ball, paddle):
        return _normalise(ball.x - paddle.x, ball.y - paddle.y, (float(paddle.facing), 0.0))

    def respond(self, ball, paddle, cfg, speed_factor=1.0):
        nx, ny = self.contact_normal(ball, paddle)

        # Place ball outside paddle to avoid sticking
        gap = self.radius + ball.radius + cfg.contact_epsilon
        ball.x = paddle.x + nx * gap
        ball.y = paddle.y + ny * gap

        # Reflect velocity off the collision normal. A ball already separating
        # (v.n >= 0, e.g. clipped from behind the head) keeps its velocity;
        # it still gets spin and the speed boost below.
        dot = ball.vx * nx + ball.vy * ny
        if dot < 0:
            ball.vx -= 2 * dot * nx
            ball.vy -= 2 * dot * ny

        ball.vy += ny * cfg.circle_spin

        boost_speed(ball, cfg.ball_speed_inc, cfg.max_ball_speed * speed_factor)


def ball_hits_paddle(ball, paddle) -> bool:
    return paddle.shape.hits(ball, paddle)


def resolve_paddle_hit(ball, paddle, cfg, speed_factor=1.0) -> bool:
    """Test the paddle the ball is travelling toward and respond on contact."""
    approaching = ball.vx * paddle.facing < 0
    if not approaching or not ball_hits_paddle(ball, paddle):
        return False
    paddle.shape.respond(ball, paddle, cfg, speed_factor)
    return True
