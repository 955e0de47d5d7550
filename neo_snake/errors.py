"""Exceptions raised by Neo Snake."""


class NeoSnakeError(Exception):
    """Base class for all Neo Snake errors."""


class BoardFullError(NeoSnakeError):
    """Raised when food cannot be placed because every cell is occupied."""


class ConfigError(NeoSnakeError):
    """Raised when runtime settings cannot be parsed."""
