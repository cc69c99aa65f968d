# game.py
# ──────────────────────────────────────────────────────────────
# Penger Flight – simulation + drawing for one session.
# update() and draw() are separate calls; update() needs no display.
# ──────────────────────────────────────────────────────────────

import pygame

from config import THRUST_KEY_NAME, WIDTH, HEIGHT
from background import Background
from entities import check_collisions
from game_state import GameState
from log_utils import log_debug
from managers import FrameClock, ObstacleManager
from ui import ScoreLabel, fit_canvas


def thrust_key(name=THRUST_KEY_NAME):
    key = getattr(pygame, name, None)
    if not name.startswith("K_") or not isinstance(key, int):
        raise ValueError(f"PENGER_THRUST_KEY={name!r} is not a pygame key constant (e.g. K_SPACE)")
    return key


class Game:
    def __init__(self, image, rng=None, window_size=(WIDTH, HEIGHT)):
        log_debug("Game.__init__", "start")
        self.image = image
        self.thrust_key = thrust_key()

        canvas_w, canvas_h = fit_canvas(*window_size)
        self.state = GameState(canvas_w, canvas_h, image.get_size())
        self.obstacle_manager = ObstacleManager(rng)
        self.frame_clock = FrameClock()
        self.background = Background()
        self.score_label = ScoreLabel()
        log_debug("Game.__init__", f"canvas {canvas_w:.0f} x {canvas_h:.0f}")

    @property
    def canvas_size(self):
        return int(self.state.width), int(self.state.height)

    # ──────────────────────────────────────────────────────
    # Event handling
    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == self.thrust_key:
            self.state.penger.thrust()
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)

    def resize(self, window_w, window_h):
        canvas_w, canvas_h = fit_canvas(window_w, window_h)
        self.state.resize(canvas_w, canvas_h, self.image.get_size())
        log_debug("Game.resize", f"new canvas dimensions: {canvas_w:.0f} x {canvas_h:.0f}")

    # ──────────────────────────────────────────────────────
    # Update loop
    def update(self, dt):
        """Advance one frame of ``dt`` milliseconds. Returns True once over."""
        state = self.state
        if state.over:
            return True

        dt = self.frame_clock.tick(state, dt)
        self.obstacle_manager.update(state, dt)
        state.penger.update(dt, state.max_velocity)

        # floor and ceiling exits end silently
        if check_collisions(state) == "obstacle":
            print("GAME OVER")
        return state.over

    # ──────────────────────────────────────────────────────
    # Draw loop
    def draw(self, surf):
        self.background.draw(surf)
        for o in self.state.obstacles:
            o.draw(surf)
        self.state.penger.draw(surf, self.image)
        self.score_label.draw(surf, self.state.score, self.state.width)
