# pong.py
import argparse
import logging
import random
import sys

import pygame

from pong_audio import SoundBank
from pong_collision import CircleShape
from pong_config import ACCENT, BG, CENTER_LINE, CFG, DIM, FONT_NAME, OPPONENT_COLOR, PLAYER_COLOR, WHITE
from pong_match import start_match
from pong_sim import InputBuffer, Phase, Simulation

SPEED_STEP = 0.25

KEY_DIRECTIONS = {pygame.K_UP: "up", pygame.K_DOWN: "down"}


def draw_center_dashed_line(surface, width, height):
    dash_h = 18
    gap = 12
    x = width // 2 - 2
    for y in range(0, height, dash_h + gap):
        pygame.draw.rect(surface, CENTER_LINE, (x, y, 4, dash_h), border_radius=2)


def draw_paddle(surface, paddle, color):
    shape = paddle.shape
    cx, cy = int(paddle.x), int(paddle.y)
    if isinstance(shape, CircleShape):
        # handle points toward the middle of the court
        end_x = int(paddle.x + paddle.facing * shape.handle_length)
        pygame.draw.line(surface, color, (cx, cy), (end_x, cy), int(shape.handle_width))
        r = int(shape.radius)
        pygame.draw.circle(surface, color, (cx, cy), r)
        rubber = tuple(int(c * 0.7) for c in color)
        pygame.draw.circle(surface, rubber, (cx, cy), r - 3)
        pygame.draw.circle(surface, WHITE, (cx, cy), r - 1, 1)
    else:
        rect = pygame.Rect(0, 0, int(shape.width), int(shape.height))
        rect.center = (cx, cy)
        pygame.draw.rect(surface, color, rect, border_radius=4)


class PygamePresenter:
    """Draws the world into the display surface and plays event beeps."""

    def __init__(self, screen, sounds):
        self.screen = screen
        self.sounds = sounds
        self.font_small = pygame.font.SysFont(FONT_NAME, 20)
        self.font_big = pygame.font.SysFont(FONT_NAME, 54, bold=True)

    def render(self, world):
        screen = self.screen
        w, h = int(world.width), int(world.height)
        screen.fill(BG)
        draw_center_dashed_line(screen, w, h)
        draw_paddle(screen, world.left, PLAYER_COLOR)
        draw_paddle(screen, world.right, OPPONENT_COLOR)
        ball = world.ball
        pygame.draw.circle(screen, ACCENT, (int(ball.x), int(ball.y)), int(ball.radius))

        # UI
        score_text = self.font_big.render(f"{world.scores.left}   {world.scores.right}", True, WHITE)
        screen.blit(score_text, (w // 2 - score_text.get_width() // 2, 20))
        screen.blit(self.font_small.render("Player", True, DIM), (18, 12))
        label = self.font_small.render("Computer", True, DIM)
        screen.blit(label, (w - label.get_width() - 18, 12))

        sound = "on" if world.sound_enabled else "off"
        info = f"{world.status} | speed {world.speed_factor:.2f}x | R: reset  M: sound {sound}  [ ]: speed"
        screen.blit(self.font_small.render(info, True, DIM), (20, h - 28))
        pygame.display.flip()

    def notify_sound(self, event):
        self.sounds.play(event)


def handle_event(event, inputs, world):
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_SPACE:
            inputs.toggle()
        elif event.key in KEY_DIRECTIONS:
            inputs.key(KEY_DIRECTIONS[event.key], True)
        elif event.key == pygame.K_r:
            inputs.reset()
        elif event.key == pygame.K_m:
            inputs.toggle_sound()
        elif event.key == pygame.K_LEFTBRACKET:
            inputs.speed_factor(world.speed_factor - SPEED_STEP)
        elif event.key == pygame.K_RIGHTBRACKET:
            inputs.speed_factor(world.speed_factor + SPEED_STEP)
    elif event.type == pygame.KEYUP:
        if event.key in KEY_DIRECTIONS:
            inputs.key(KEY_DIRECTIONS[event.key], False)
    elif event.type == pygame.MOUSEMOTION:
        inputs.pointer_move(event.pos[1])
    elif event.type == pygame.WINDOWLEAVE:
        # fall back to the keyboard once the pointer leaves
        inputs.pointer_leave()
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        inputs.toggle()


def game(paddles="circle", speed=1.0, mute=False, seed=None):
    pygame.init()
    cfg = CFG
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Pong")
    clock = pygame.time.Clock()

    rng = random.Random(seed)
    world = start_match(cfg, paddles, rng)
    world.sound_enabled = not mute
    presenter = PygamePresenter(screen, SoundBank())
    sim = Simulation(world, cfg, presenter, rng=rng)
    inputs = InputBuffer()
    if speed != 1.0:
        inputs.speed_factor(speed)

    last_idle = 0
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit(0)
            handle_event(event, inputs, world)

        now = pygame.time.get_ticks()
        if world.running:
            sim.step(now, inputs.take(), Phase.ACTIVE)
        elif now - last_idle >= cfg.idle_interval_ms:
            last_idle = now
            sim.step(now, inputs.take(), Phase.IDLE)

        clock.tick(60)


def positive_float(text):
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--paddles", choices=["circle", "rect"], default="circle")
    parser.add_argument("--speed", type=positive_float, default=1.0)
    parser.add_argument("--mute", action="store_true")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    game(args.paddles, args.speed, args.mute, args.seed)
