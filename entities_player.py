# entities_player.py
#
# The penger: a falling actor with a one-shot jet thrust.
# ------------------------------------------------------

import enum

import numpy as np
import pygame

from config import (
    GRAVITY, PENGER_JET_PROPULSION_ACCELERATION,
    PENGER_SCALE, PENGER_START_X, PENGER_START_Y, SCROLL_SPEED
)
from log_utils import log_debug


class AccelerationMode(enum.Enum):
    FALLING = "falling"
    THRUSTING = "thrusting"


# ──────────────────────────────────────────────────────────
# Penger entity
# ──────────────────────────────────────────────────────────
class Penger:
    def __init__(self, image_size=(0, 0)):
        self.pos = np.array([PENGER_START_X, PENGER_START_Y], dtype=float)
        # vel[0] is the world scroll speed shared with the obstacles
        self.vel = np.array([SCROLL_SPEED, 0.0], dtype=float)
        self.ay = 0.0
        self.mode = AccelerationMode.FALLING

        self.width = 0.0
        self.height = 0.0
        self._scaled = None
        self.resize(image_size)

    @property
    def scroll_speed(self):
        return self.vel[0]

    def resize(self, image_size):
        """Derive the collision/render box from the image's intrinsic size."""
        img_w, img_h = image_size
        self.width = PENGER_SCALE * img_w
        self.height = PENGER_SCALE * img_h

    def bounds(self):
        return (self.pos[0], self.pos[1], self.width, self.height)

    # ──────────────────────────────────────────────────────
    # Movement / physics
    # ──────────────────────────────────────────────────────
    def thrust(self):
        """Fire the jet; takes effect on the next update."""
        self.ay = PENGER_JET_PROPULSION_ACCELERATION
        self.mode = AccelerationMode.THRUSTING
        log_debug("Penger.thrust", f"y={self.pos[1]:.2f} vy={self.vel[1]:.4f}")

    def update(self, dt, max_velocity):
        """Integrate one frame of gravity/thrust over ``dt`` milliseconds.

        The stored acceleration decays back toward gravity: each frame the
        thrust branch of ``min()`` is GRAVITY higher than the last, until
        gravity alone wins and the actor is falling again.
        """
        a = min(GRAVITY, GRAVITY + self.ay)
        self.vel[1] = min(max_velocity, self.vel[1] + a * dt)
        self.pos[1] += self.vel[1] * dt

        self.ay = a
        if self.ay < 0:
            self.mode = AccelerationMode.THRUSTING
        else:
            self.mode = AccelerationMode.FALLING

    # ──────────────────────────────────────────────────────
    # Draw
    # ──────────────────────────────────────────────────────
    def draw(self, surf, image):
        size = (max(0, int(self.width)), max(0, int(self.height)))
        if self._scaled is None or self._scaled[0] is not image or self._scaled[1].get_size() != size:
            self._scaled = (image, pygame.transform.scale(image, size))
        surf.blit(self._scaled[1], (self.pos[0], self.pos[1]))
