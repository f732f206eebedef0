# pong_sim.py
"""
One step function drives the whole game.

Input handlers only write into an :class:`InputBuffer`; the loop takes a
snapshot at the top of each step, so the world has a single writer. The same
``Simulation.step`` serves the display-refresh cadence (``Phase.ACTIVE``) and
the slower idle tick while paused (``Phase.IDLE``), which only moves the
player's paddle.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from pong_ai import OpponentController
from pong_collision import bounce_walls, resolve_paddle_hit
from pong_config import CFG
from pong_match import check_scoring, reset_scores, set_speed_factor, toggle_running
from pong_physics import frame_factor, integrate_ball, move_paddle_keys, move_paddle_to
from pong_world import Side, World

logger = logging.getLogger(__name__)


class Phase(Enum):
    ACTIVE = "active"
    IDLE = "idle"


class EventKind(Enum):
    WALL_BOUNCE = "wall_bounce"
    PADDLE_HIT = "paddle_hit"
    SCORE = "score"


@dataclass(frozen=True)
class SoundEvent:
    kind: EventKind
    side: Optional[Side] = None


class Presenter(Protocol):
    def render(self, world: World) -> None:
        ...

    def notify_sound(self, event: SoundEvent) -> None:
        ...


class NullPresenter:
    """Presenter that draws nothing and stays silent (headless runs)."""

    def render(self, world):
        pass

    def notify_sound(self, event):
        pass


@dataclass(frozen=True)
class InputSnapshot:
    up: bool = False
    down: bool = False
    pointer_active: bool = False
    pointer_y: Optional[float] = None
    toggle: bool = False
    reset: bool = False
    speed_factor: Optional[float] = None
    toggle_sound: bool = False

    @property
    def direction(self) -> int:
        return int(self.down) - int(self.up)


class InputBuffer:
    """Collects input events between steps."""

    def __init__(self):
        self.up = False
        self.down = False
        self.pointer_active = False
        self.pointer_y = None
        self._toggle = False
        self._reset = False
        self._speed_factor = None
        self._toggle_sound = False

    def key(self, direction, pressed):
        if direction == "up":
            self.up = pressed
        elif direction == "down":
            self.down = pressed

    def pointer_move(self, y):
        self.pointer_active = True
        self.pointer_y = y

    def pointer_leave(self):
        self.pointer_active = False
        self.pointer_y = None

    def toggle(self):
        # two presses between steps cancel out
        self._toggle = not self._toggle

    def reset(self):
        self._reset = True

    def speed_factor(self, factor):
        self._speed_factor = factor

    def toggle_sound(self):
        self._toggle_sound = not self._toggle_sound

    def take(self) -> InputSnapshot:
        snap = InputSnapshot(
            up=self.up,
            down=self.down,
            pointer_active=self.pointer_active,
            pointer_y=self.pointer_y,
            toggle=self._toggle,
            reset=self._reset,
            speed_factor=self._speed_factor,
            toggle_sound=self._toggle_sound,
        )
        self.pointer_y = None
        self._toggle = False
        self._reset = False
        self._speed_factor = None
        self._toggle_sound = False
        return snap


class Simulation:
    def __init__(self, world, cfg=CFG, presenter=None, controller=None, rng=None):
        self.world = world
        self.cfg = cfg
        self.presenter = presenter or NullPresenter()
        self.rng = rng or random.Random()
        self.controller = controller or OpponentController(cfg, self.rng)

    # --------------- collaborator calls ---------------
    def _render(self):
        try:
            self.presenter.render(self.world)
        except Exception:
            logger.exception("render failed")

    def _notify(self, event, events):
        events.append(event)
        if not self.world.sound_enabled:
            return
        try:
            self.presenter.notify_sound(event)
        except Exception:
            logger.exception("sound notification failed: %s", event.kind.value)

    # --------------- stepping ---------------
    def _apply_commands(self, inputs, now):
        world = self.world
        if inputs.reset:
            reset_scores(world)
        if inputs.speed_factor is not None:
            set_speed_factor(world, inputs.speed_factor, self.cfg)
        if inputs.toggle_sound:
            world.sound_enabled = not world.sound_enabled
        if inputs.pointer_active and inputs.pointer_y is not None:
            move_paddle_to(world.left, inputs.pointer_y, world.height)
        if inputs.toggle:
            toggle_running(world, now)

    def _idle(self, inputs):
        world = self.world
        if not inputs.pointer_active:
            move_paddle_keys(world.left, inputs.direction, self.cfg.paddle_speed, world.height)

    def _active(self, inputs, now, events):
        world, cfg = self.world, self.cfg
        dt = frame_factor(now - world.last_time, cfg)
        world.last_time = now

        # Keyboard paddle movement only when the pointer is not in use
        if not inputs.pointer_active:
            move_paddle_keys(
                world.left, inputs.direction, cfg.paddle_speed * dt * cfg.key_acceleration, world.height
            )

        self.controller.update(world.right, world.ball, world.hit_count, world.height)

        ball = world.ball
        integrate_ball(ball, dt)
        if bounce_walls(ball, world.height):
            self._notify(SoundEvent(EventKind.WALL_BOUNCE), events)

        for side in (Side.LEFT, Side.RIGHT):
            if resolve_paddle_hit(ball, world.paddle(side), cfg, world.speed_factor):
                world.hit_count += 1
                self._notify(SoundEvent(EventKind.PADDLE_HIT, side), events)

        scorer = check_scoring(world, self.rng, cfg)
        if scorer is not None:
            self._notify(SoundEvent(EventKind.SCORE, scorer), events)

    def step(self, now, inputs=None, phase=Phase.ACTIVE) -> List[SoundEvent]:
        """Advance the world to ``now`` (ms) and render; returns the sound events raised."""
        inputs = inputs or InputSnapshot()
        events = []
        self._apply_commands(inputs, now)
        if phase is Phase.ACTIVE and self.world.running:
            self._active(inputs, now, events)
        else:
            self._idle(inputs)
        self._render()
        return events
