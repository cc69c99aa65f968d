# background.py

from config import BACKGROUND_COLOR


class Background:
    def __init__(self, color=BACKGROUND_COLOR):
        self.color = color

    def draw(self, surf):
        surf.fill(self.color)
