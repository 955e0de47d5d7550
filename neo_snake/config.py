"""Game constants and runtime settings."""

import os
from collections import namedtuple
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError
from .themes import THEMES, DEFAULT_THEME

# Simulation
GRID_SIZE = 20
INITIAL_SPEED = 150
MIN_SPEED = 60
SPEED_DECREMENT = 3
SCORE_INCREMENT = 10
QUEUE_CAPACITY = 2

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = {"up": UP, "down": DOWN, "left": LEFT, "right": RIGHT}

# Vertical, head on top, heading up.
INITIAL_SNAKE = ((10, 10), (10, 11), (10, 12))
INITIAL_DIRECTION = UP

HIGHSCORE_KEY = "snake-highscore"

# Window layout (pixels)
CELL_SIZE = 24
MARGIN = 16
HEADER_HEIGHT = 64
BOARD_SIZE = GRID_SIZE * CELL_SIZE
BOARD_LEFT = MARGIN
BOARD_TOP = MARGIN + HEADER_HEIGHT
CONTROLS_TOP = BOARD_TOP + BOARD_SIZE + MARGIN
CONTROLS_HEIGHT = 132
WINDOW_WIDTH = BOARD_SIZE + MARGIN * 2
WINDOW_HEIGHT = CONTROLS_TOP + CONTROLS_HEIGHT + MARGIN
FPS = 60

SAMPLE_RATE = 44100

DEFAULT_DATA_FILE = Path.home() / ".neo_snake" / "scores.json"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

Settings = namedtuple("Settings", ["data_file", "theme", "sound", "log_level", "debug"])

_FALSE_VALUES = {"0", "false", "no", "off"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_flag(name, raw):
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be one of 1/0, true/false, yes/no, on/off (got {raw!r})")


def load_settings(environ=None, dotenv=True):
    """Build Settings from the environment, reading a .env file first if present.

    Raises ConfigError when a variable holds a value the game cannot use.
    """
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ

    data_file = environ.get("NEO_SNAKE_DATA_FILE")
    data_file = Path(data_file).expanduser() if data_file else DEFAULT_DATA_FILE

    theme = environ.get("NEO_SNAKE_THEME", DEFAULT_THEME).strip().upper()
    if theme not in THEMES:
        raise ConfigError(
            f"NEO_SNAKE_THEME must be one of {', '.join(THEMES)} (got {theme!r})"
        )

    sound = _parse_flag("NEO_SNAKE_SOUND", environ.get("NEO_SNAKE_SOUND", "1"))

    log_level = environ.get("NEO_SNAKE_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"NEO_SNAKE_LOG_LEVEL {log_level!r} is not a logging level")

    return Settings(
        data_file=data_file,
        theme=theme,
        sound=sound,
        log_level=log_level,
        debug=False,
    )
