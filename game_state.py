"""Mutable per-session game state shared by the simulation steps."""

from __future__ import annotations

from typing import List, Optional, Tuple

from config import MAX_VELOCITY, OBSTACLE_COUNT, SCORE_INCREMENT
from entities import Obstacle, Penger
from log_utils import log_debug


class GameState:
    """Everything one frame reads and writes.

    Created once per session and handed to each update step; nothing here is
    persisted.
    """

    def __init__(
        self,
        width: float,
        height: float,
        image_size: Tuple[int, int] = (0, 0),
        obstacle_count: int = OBSTACLE_COUNT,
        score_increment: int = SCORE_INCREMENT,
        max_velocity: float = MAX_VELOCITY,
    ) -> None:
        self.width = width
        self.height = height
        self.image_size = tuple(image_size)

        self.over = False
        self.end_reason: Optional[str] = None
        self.elapsed_ms = 0.0
        self.score = 0
        self.score_increment = score_increment
        self.max_velocity = max_velocity

        self.penger = Penger(self.image_size)
        self.obstacles: List[Obstacle] = [Obstacle(width) for _ in range(obstacle_count)]

    def resize(self, width: float, height: float, image_size: Optional[Tuple[int, int]] = None) -> None:
        """Apply a new play-area size; positions and speeds are left alone."""
        self.width = width
        self.height = height
        if image_size is not None:
            self.image_size = tuple(image_size)
        self.penger.resize(self.image_size)

    def add_score(self) -> None:
        self.score += self.score_increment

    def end(self, reason: str) -> None:
        """Mark the session over. Later calls keep the first reason."""
        if self.over:
            return
        self.over = True
        self.end_reason = reason
        log_debug("GameState.end", f"reason={reason} score={self.score}")
