# managers.py

import math
import random
from typing import Protocol, Sequence

from config import LOG_ENABLED, MAX_FRAME_DT_MS
from log_utils import log_debug


class RandomSource(Protocol):
    def random(self) -> float:
        """Next float in [0, 1)."""


class SequenceRandom:
    """Deterministic stand-in for random.Random that cycles fixed values."""
    def __init__(self, values: Sequence[float]):
        if not values:
            raise ValueError("SequenceRandom needs at least one value")
        self.values = list(values)
        self.index = 0
    def random(self):
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


class FrameClock:
    def __init__(self, max_dt=MAX_FRAME_DT_MS):
        self.max_dt = max_dt
    def clamp(self, dt):
        """Sanitise a raw frame delta in milliseconds.

        Negative or non-finite deltas integrate nothing; deltas above max_dt
        are capped.
        """
        if not math.isfinite(dt) or dt <= 0:
            if dt != 0:
                log_debug("FrameClock.clamp", f"dropped dt={dt}")
            return 0.0
        if dt > self.max_dt:
            log_debug("FrameClock.clamp", f"capped dt={dt:.1f}")
            return self.max_dt
        return float(dt)
    def tick(self, state, raw_dt):
        state.elapsed_ms = self.clamp(raw_dt)
        return state.elapsed_ms


class ObstacleManager:
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
    def update(self, state, dt):
        """Recycle obstacles past the left edge, then scroll all of them.

        Returns how many obstacles were recycled this frame.
        """
        recycled = 0
        scroll_speed = state.penger.scroll_speed
        for obstacle in state.obstacles:
            if obstacle.is_offscreen():
                state.add_score()
                obstacle.recycle(state.width, state.height, self.rng)
                recycled += 1
                if LOG_ENABLED:
                    log_debug("ObstacleManager.recycle",
                              f"y={obstacle.pos[1]:.1f} score={state.score}")
            obstacle.update(dt, scroll_speed)
        return recycled
