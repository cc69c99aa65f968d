# entities.py

# re‑export the entity classes and collision helpers

from entities_utils import (
    is_intersect,
    check_collision,
    check_collisions
)

from entities_player import Penger, AccelerationMode

from entities_obstacles import Obstacle
