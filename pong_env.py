# pong_env.py
"""
Headless Pong for scripted play and rally analysis (no pygame dependency).

A policy drives the player (left) paddle with discrete actions; the right
paddle is the regular computer opponent. Observations are normalised to
roughly [-1, 1].
"""
import random

import numpy as np

from pong_collision import CircleShape
from pong_config import ACCENT, BG, CENTER_LINE, CFG, OPPONENT_COLOR, PLAYER_COLOR
from pong_match import set_speed_factor, start_match, toggle_running
from pong_sim import EventKind, InputSnapshot, Phase, Simulation
from pong_world import Side

ACTIONS = ("stay", "up", "down")


class PongEnv:
    def __init__(self, paddles="rect", cfg=CFG, max_steps=2000, seed=None):
        self.cfg = cfg
        self.paddles = paddles
        self.max_steps = max_steps
        self.rng = random.Random(seed)
        self.reset()

    def reset(self):
        self.world = start_match(self.cfg, self.paddles, self.rng)
        self.sim = Simulation(self.world, self.cfg, rng=self.rng)
        self.now = 0.0
        toggle_running(self.world, self.now)
        self.t = 0
        return self._state()

    def _state(self):
        w = self.world
        half_w, half_h = w.width / 2, w.height / 2
        vmax = self.cfg.max_ball_speed
        s = np.array([
            (w.left.y - half_h) / half_h,
            (w.right.y - half_h) / half_h,
            (w.ball.x - half_w) / half_w,
            (w.ball.y - half_h) / half_h,
            w.ball.vx / vmax,
            w.ball.vy / vmax,
        ], dtype=np.float32)
        return s

    def step(self, a):
        # a in {0: stay, 1: up, 2: down}; one nominal frame per step
        self.now += self.cfg.frame_ms
        events = self.sim.step(self.now, InputSnapshot(up=a == 1, down=a == 2), Phase.ACTIVE)

        reward = 0.0
        done = False
        for event in events:
            if event.kind is EventKind.SCORE:
                reward = 1.0 if event.side is Side.LEFT else -1.0
                done = True

        self.t += 1
        if self.t >= self.max_steps:
            done = True

        info = {"hit_count": self.world.hit_count, "scores": self.world.scores.as_tuple()}
        return self._state(), reward, done, info

    def render_rgb(self, scale=1):
        """Return an RGB image (H, W, 3) of the court."""
        w = self.world
        W, H = int(w.width), int(w.height)
        img = np.zeros((H, W, 3), dtype=np.uint8)
        img[:] = BG
        for y in range(0, H, 30):  # center dashed line
            img[y:y+18, W//2-2:W//2+2] = CENTER_LINE

        yy, xx = np.ogrid[:H, :W]
        for paddle, color in ((w.left, PLAYER_COLOR), (w.right, OPPONENT_COLOR)):
            shape = paddle.shape
            if isinstance(shape, CircleShape):
                mask = (xx - paddle.x) ** 2 + (yy - paddle.y) ** 2 <= shape.radius ** 2
            else:
                mask = ((np.abs(xx - paddle.x) <= shape.width / 2)
                        & (np.abs(yy - paddle.y) <= shape.height / 2))
            img[mask] = color

        ball = w.ball
        img[(xx - ball.x) ** 2 + (yy - ball.y) ** 2 <= ball.radius ** 2] = ACCENT
        if scale != 1:
            img = np.repeat(np.repeat(img, scale, axis=0), scale, axis=1)
        return img


def tracking_action(env, dead_zone=6.0):
    """Autopilot for the player paddle: follow the ball's height."""
    w = env.world
    dy = w.ball.y - w.left.y
    if abs(dy) <= dead_zone:
        return ACTIONS.index("stay")
    return ACTIONS.index("down") if dy > 0 else ACTIONS.index("up")


def simulate_points(points=20, paddles="rect", speed_factor=1.0, seed=None, policy=tracking_action):
    """
    Play ``points`` points headlessly and collect per-point statistics.

    Returns numpy arrays:
    - ``rallies``: most paddle returns reached in each point
    - ``outcomes``: +1 player won the point, -1 computer won, 0 step cap hit
    - ``ball_speed``: ball speed after every simulated frame, all points joined
    """
    env = PongEnv(paddles=paddles, seed=seed)
    rallies, outcomes, speeds = [], [], []
    for _ in range(points):
        env.reset()
        set_speed_factor(env.world, speed_factor, env.cfg)
        longest = 0
        reward = 0.0
        done = False
        while not done:
            # hit_count is zeroed on the scoring frame, so read it first
            longest = max(longest, env.world.hit_count)
            _, reward, done, _ = env.step(policy(env))
            speeds.append(env.world.ball.speed)
        rallies.append(longest)
        outcomes.append(reward)
    return {
        "rallies": np.array(rallies, dtype=np.int64),
        "outcomes": np.array(outcomes, dtype=np.float32),
        "ball_speed": np.array(speeds, dtype=np.float32),
    }
