# entities_obstacles.py

import numpy as np
import pygame

from config import (
    OBSTACLE_WIDTH, OBSTACLE_HEIGHT, OBSTACLE_COLOR, OBSTACLE_SPAWN_OFFSET
)


class Obstacle:
    width = OBSTACLE_WIDTH
    height = OBSTACLE_HEIGHT

    def __init__(self, x, y=0.0):
        self.pos = np.array([x, y], dtype=float)
        self.color = OBSTACLE_COLOR

    def is_offscreen(self):
        return self.pos[0] < 0

    def recycle(self, area_width, area_height, rng):
        """Move back to the right edge at a fresh vertical offset.

        The offset may put the obstacle partly above the top edge.
        """
        self.pos[0] = area_width
        self.pos[1] = rng.random() * area_height - area_height * OBSTACLE_SPAWN_OFFSET

    def update(self, dt, scroll_speed):
        self.pos[0] -= scroll_speed * dt

    def bounds(self):
        return (self.pos[0], self.pos[1], self.width, self.height)

    def draw(self, surf):
        pygame.draw.rect(surf, self.color, pygame.Rect(*self.bounds()))
