# pong_world.py
"""World state for one session: paddles, ball, scores and run state.

Everything the simulation mutates lives on a :class:`World` that is passed
explicitly to each call.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from pong_collision import CircleShape, RectShape
from pong_config import CFG, GameConfig

Shape = Union[RectShape, CircleShape]


class Side(Enum):
    LEFT = "left"    # player
    RIGHT = "right"  # opponent


class RunState(Enum):
    PAUSED = "paused"
    RUNNING = "running"


@dataclass
class Ball:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = CFG.ball_r

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)


@dataclass
class Paddle:
    x: float
    y: float              # centre, the only axis of motion
    shape: Shape
    facing: int = 1       # +1 faces right (left paddle), -1 faces left
    vy: float = 0.0

    @property
    def half_extent(self) -> float:
        return self.shape.half_extent


@dataclass
class Scores:
    left: int = 0
    right: int = 0

    def as_tuple(self):
        return (self.left, self.right)


@dataclass
class World:
    width: float
    height: float
    left: Paddle
    right: Paddle
    ball: Ball
    scores: Scores = field(default_factory=Scores)
    hit_count: int = 0
    state: RunState = RunState.PAUSED
    speed_factor: float = 1.0
    serve_to: int = 1
    last_time: float = 0.0
    sound_enabled: bool = True
    status: str = "Click or press Space to start. Use mouse or Up/Down arrows to move."

    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    def paddle(self, side: Side) -> Paddle:
        return self.left if side is Side.LEFT else self.right


def make_paddles(cfg: GameConfig = CFG, paddles: str = "circle"):
    """Build the (left, right) paddle pair for the requested variant."""
    cy = cfg.height / 2
    if paddles == "circle":
        left = Paddle(
            cfg.circle_margin, cy,
            CircleShape(cfg.player_radius, cfg.handle_length, cfg.handle_width),
            facing=1,
        )
        right = Paddle(
            cfg.width - cfg.circle_margin, cy,
            CircleShape(cfg.opponent_radius, cfg.handle_length, cfg.handle_width),
            facing=-1,
        )
    elif paddles == "rect":
        # x is the paddle centre, so offset by half the width from the margin
        left = Paddle(
            cfg.rect_margin + cfg.paddle_w / 2, cy,
            RectShape(cfg.paddle_w, cfg.paddle_h),
            facing=1,
        )
        right = Paddle(
            cfg.width - cfg.rect_margin - cfg.paddle_w / 2, cy,
            RectShape(cfg.paddle_w, cfg.paddle_h),
            facing=-1,
        )
    else:
        raise ValueError(f"unknown paddle variant: {paddles!r}")
    return left, right


def new_world(cfg: GameConfig = CFG, paddles: str = "circle") -> World:
    left, right = make_paddles(cfg, paddles)
    ball = Ball(cfg.width / 2, cfg.height / 2, radius=cfg.ball_r)
    return World(cfg.width, cfg.height, left, right, ball)
