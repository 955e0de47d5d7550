"""Neo Snake: a single-player grid snake game drawn with pygame."""

__version__ = "1.0.0"
