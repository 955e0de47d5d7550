"""Durable high score storage in a small JSON key-value file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from .config import HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Reads and writes the high score under a fixed key of a JSON object file."""

    def __init__(self, path, key=HIGHSCORE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_all(self):
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError("score file does not hold a JSON object")
        return data

    def load(self):
        """Return the stored high score, or 0 if it is absent or malformed."""
        try:
            data = self._read_all()
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, e)
            return 0

        raw = data.get(self.key, 0)
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Ignoring malformed high score %r in %s", raw, self.path)
            return 0
        if isinstance(raw, bool) or value < 0:
            logger.warning("Ignoring malformed high score %r in %s", raw, self.path)
            return 0
        return value

    def save(self, value):
        """Write value under the key, keeping any other keys in the file."""
        try:
            data = self._read_all()
        except (OSError, ValueError):
            data = {}
        data[self.key] = int(value)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".scores-", suffix=".tmp"
            )
            try:
                try:
                    fh = os.fdopen(fd, "w", encoding="utf-8")
                except BaseException:
                    os.close(fd)
                    raise
                with fh:
                    json.dump(data, fh)
                os.replace(tmp_name, self.path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return False
        logger.debug("Saved high score %d to %s", value, self.path)
        return True
