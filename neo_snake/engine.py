"""Board rules: movement, reversal filtering, food placement and speed."""

import random

from .config import (
    GRID_SIZE,
    INITIAL_SPEED,
    MIN_SPEED,
    QUEUE_CAPACITY,
    SPEED_DECREMENT,
)
from .errors import BoardFullError


def direction_to_text(direction):
    """Convert a direction vector into a compact label for debug UI."""
    mapping = {
        None: "none",
        (0, -1): "up",
        (0, 1): "down",
        (-1, 0): "left",
        (1, 0): "right",
    }
    return mapping.get(direction, "unknown")


def is_reversal(requested, last):
    """Return True if requested points straight back along last's axis."""
    rx, ry = requested
    lx, ly = last
    if rx == 0 and ly != 0 and ry == -ly:
        return True
    if ry == 0 and lx != 0 and rx == -lx:
        return True
    return False


def enqueue_direction(pending, current, requested, capacity=QUEUE_CAPACITY):
    """Append requested to the pending deque unless it is full or a reversal.

    Reversal is judged against the most recently queued direction, or the
    current direction when nothing is queued. Returns True if queued.
    """
    last = pending[-1] if pending else current
    if is_reversal(requested, last):
        return False
    if len(pending) >= capacity:
        return False
    pending.append(requested)
    return True


def move_head(head, direction):
    """Return the cell one step from head along direction."""
    return (head[0] + direction[0], head[1] + direction[1])


def in_bounds(cell, grid_size=GRID_SIZE):
    """Return True if cell lies on the board."""
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def collision_body(snake, will_grow):
    """Return the segments the new head must not touch.

    The tail moves away this tick unless the snake is growing, so it is only
    part of the body when eating.
    """
    if will_grow:
        return list(snake)
    return list(snake)[:-1]


def place_food(occupied, rng=random, grid_size=GRID_SIZE):
    """Return a random grid position that is not in occupied."""
    taken = set(occupied)
    if len(taken) >= grid_size * grid_size:
        raise BoardFullError(f"no free cell left on a {grid_size}x{grid_size} board")
    while True:
        pos = (rng.randint(0, grid_size - 1), rng.randint(0, grid_size - 1))
        if pos not in taken:
            return pos


def next_speed(speed):
    """Tick interval after one more food has been eaten."""
    return max(MIN_SPEED, speed - SPEED_DECREMENT)


def speed_after(eaten):
    """Tick interval after eaten foods, starting from INITIAL_SPEED."""
    return max(MIN_SPEED, INITIAL_SPEED - eaten * SPEED_DECREMENT)
