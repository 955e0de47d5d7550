import os
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from neo_snake.session import GameSession  # noqa: E402
from neo_snake.timers import ManualTimer  # noqa: E402


class FakeStore:
    """In-memory stand-in for HighScoreStore that records every save."""

    def __init__(self, value=0):
        self.value = value
        self.saved = []

    def load(self):
        return self.value

    def save(self, value):
        self.saved.append(value)
        self.value = value
        return True


@pytest.fixture
def make_store():
    return FakeStore


@pytest.fixture
def store(make_store):
    return make_store()


@pytest.fixture
def session(store):
    return GameSession(rng=random.Random(1234), timer=ManualTimer(), store=store)


@pytest.fixture
def running(session):
    session.start()
    return session
