# ui.py
import pygame

from config import (
    ASPECT_RATIO, SCORE_COLOR, SCORE_FONT, SCORE_FONT_SIZE,
    SCORE_RIGHT_MARGIN, SCORE_BASELINE_Y
)


def fit_canvas(window_w, window_h, ratio=ASPECT_RATIO):
    """Largest (width, height) with the given aspect ratio inside the window."""
    if window_w <= 0 or window_h <= 0:
        return 0, 0
    if window_w / window_h > ratio:
        # use height, truncate width
        return ratio * window_h, window_h
    # use width, truncate height
    return window_w, window_w / ratio


def canvas_offset(window_size, canvas_size):
    """Top-left corner that centres the canvas in the window."""
    return ((window_size[0] - int(canvas_size[0])) // 2,
            (window_size[1] - int(canvas_size[1])) // 2)


class ScoreLabel:
    def __init__(self, font_size=SCORE_FONT_SIZE):
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont(SCORE_FONT, font_size)

    def text(self, score):
        return f"Score: {score}"

    def draw(self, surf, score, area_width):
        txt = self.font.render(self.text(score), True, SCORE_COLOR)
        # positioned by baseline like a canvas fillText
        surf.blit(txt, (area_width - SCORE_RIGHT_MARGIN, SCORE_BASELINE_Y - self.font.get_ascent()))
