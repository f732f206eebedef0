# pong_config.py
from dataclasses import dataclass

FONT_NAME = "arial"

WHITE = (240, 240, 240)
BG = (25, 25, 30)
DIM = (120, 120, 140)
ACCENT = (120, 200, 255)
CENTER_LINE = (70, 70, 80)
PLAYER_COLOR = (22, 163, 74)
OPPONENT_COLOR = (220, 38, 38)


@dataclass(frozen=True)
class GameConfig:
    width: int = 900
    height: int = 600

    # circular head paddles (head centre sits margin px from the edge)
    circle_margin: int = 60
    opponent_radius: float = 40.0
    player_radius_scale: float = 1.5   # player paddle is bigger
    handle_length: float = 35.0        # visual
    handle_width: float = 8.0          # visual

    # rectangular paddles
    rect_margin: int = 30
    paddle_w: float = 14.0
    paddle_h: float = 100.0

    paddle_speed: float = 5.5          # keyboard movement per frame
    key_acceleration: float = 1.6

    ball_r: float = 8.0
    ball_speed_start: float = 4.2
    ball_speed_inc: float = 0.25
    max_ball_speed: float = 12.0
    serve_angle: float = 0.3           # radians either side of horizontal

    contact_epsilon: float = 0.5
    circle_spin: float = 2.0
    rect_spin: float = 2.0

    frame_ms: float = 16.6667          # ~60fps baseline
    max_frame_factor: float = 4.0
    idle_interval_ms: float = 30.0

    min_speed_factor: float = 0.25
    max_speed_factor: float = 3.0

    # opponent
    ai_lead_base: float = 0.10
    ai_lead_per_hit: float = 0.007
    ai_lead_cap: float = 0.18
    ai_lead_frames: float = 8.0
    ai_error: float = 18.0
    ai_error_hits: float = 20.0
    ai_error_floor: float = 0.6
    ai_move_base: float = 4.0
    ai_move_per_hit: float = 0.08
    ai_move_cap: float = 5.0
    ai_dead_zone: float = 0.5

    @property
    def player_radius(self) -> float:
        return self.opponent_radius * self.player_radius_scale


CFG = GameConfig()
