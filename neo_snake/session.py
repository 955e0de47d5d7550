"""Game session: owns the snake, the input queue, the timer and the score."""

import logging
import random
from collections import deque, namedtuple

from .config import INITIAL_DIRECTION, INITIAL_SNAKE, INITIAL_SPEED, SCORE_INCREMENT
from .engine import (
    collision_body,
    enqueue_direction,
    in_bounds,
    move_head,
    next_speed,
    place_food,
)
from .timers import ManualTimer

logger = logging.getLogger(__name__)

NOT_STARTED = "not_started"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"

Snapshot = namedtuple(
    "Snapshot",
    [
        "snake",
        "food",
        "state",
        "score",
        "high_score",
        "speed",
        "direction",
        "game_over_reason",
    ],
)


class GameSession:
    """Single-player snake session.

    The session is the only mutator of game state. A timer calls step() while
    the session is running, input calls enqueue(), and collaborators read
    snapshot(). The timer is armed exactly while the state is RUNNING.
    """

    def __init__(self, rng=None, timer=None, store=None, high_score=None):
        self.rng = rng if rng is not None else random.Random()
        self.timer = timer if timer is not None else ManualTimer()
        self.store = store
        if high_score is None:
            high_score = store.load() if store is not None else 0
        self.high_score = high_score

        self.state = NOT_STARTED
        self.game_over_reason = None
        self._reset()

    def _reset(self):
        self.snake = deque(INITIAL_SNAKE)
        self.direction = INITIAL_DIRECTION
        self.pending = deque()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.food = place_food(self.snake, self.rng)

    def start(self):
        """Reset all per-session state and begin running."""
        self._reset()
        self.game_over_reason = None
        self.state = RUNNING
        self.timer.start(self.speed)
        logger.info("Session started, food at %s", self.food)

    def toggle_pause(self):
        """Flip between RUNNING and PAUSED; ignored in any other state."""
        if self.state == RUNNING:
            self.state = PAUSED
            self.timer.stop()
        elif self.state == PAUSED:
            self.state = RUNNING
            self.timer.start(self.speed)
        else:
            return self.state
        logger.debug("Session %s", self.state)
        return self.state

    def enqueue(self, direction):
        """Queue a direction change for a coming tick. Returns True if queued."""
        if self.state != RUNNING:
            return False
        return enqueue_direction(self.pending, self.direction, direction)

    def step(self):
        """Advance the snake by one cell.

        Returns "moved", "ate", "wall" or "self", or None if the session is
        not running.
        """
        if self.state != RUNNING:
            return None

        if self.pending:
            self.direction = self.pending.popleft()

        new_head = move_head(self.snake[0], self.direction)
        if not in_bounds(new_head):
            self._end("wall")
            return "wall"

        will_grow = new_head == self.food
        if new_head in collision_body(self.snake, will_grow):
            self._end("self")
            return "self"

        self.snake.appendleft(new_head)
        if not will_grow:
            self.snake.pop()
            return "moved"

        self.score += SCORE_INCREMENT
        self._record_score()
        self.food = place_food(self.snake, self.rng)
        self.speed = next_speed(self.speed)
        self.timer.start(self.speed)
        return "ate"

    def _record_score(self):
        if self.score <= self.high_score:
            return
        self.high_score = self.score
        if self.store is not None:
            self.store.save(self.high_score)

    def _end(self, reason):
        self.state = GAME_OVER
        self.game_over_reason = reason
        self.timer.stop()
        logger.info("Game over (%s) with score %d", reason, self.score)

    def close(self):
        """Stop the timer so no tick outlives the session."""
        self.timer.stop()

    def snapshot(self):
        """Return an immutable view of the session for drawing."""
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            speed=self.speed,
            direction=self.direction,
            game_over_reason=self.game_over_reason,
        )
