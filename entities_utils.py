# entities_utils.py

from log_utils import log_debug


def is_intersect(ax, ay, aw, ah, bx, by, bw, bh):
    """Return True if boxes A and B overlap. Touching edges do not count."""
    if ax + aw <= bx or ax >= bx + bw:
        return False
    if ay + ah <= by or ay >= by + bh:
        return False
    return True


def check_collision(a, b):
    """Return True if objects a and b overlap based on their bounds()."""
    return is_intersect(*a.bounds(), *b.bounds())


def check_collisions(state):
    """End the game on a boundary exit or obstacle hit.

    Checks run in order and stop at the first hit. Returns the reason
    ("floor", "ceiling" or "obstacle") or None.
    """
    penger = state.penger

    if penger.pos[1] + penger.height > state.height:
        reason = "floor"
    elif penger.pos[1] <= 0:
        reason = "ceiling"
    else:
        reason = None
        for obstacle in state.obstacles:
            if check_collision(penger, obstacle):
                reason = "obstacle"
                break

    if reason is not None:
        log_debug("check_collisions", f"hit {reason} at y={penger.pos[1]:.2f}")
        state.end(reason)
    return reason
