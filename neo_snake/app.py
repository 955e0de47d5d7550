"""Window, event loop and command line entry point."""

import argparse
import logging
import math
from pathlib import Path

import pygame

from .audio import SoundCues
from .config import FPS, LOG_FORMAT, SAMPLE_RATE, WINDOW_HEIGHT, WINDOW_WIDTH, load_settings
from .controls import UiState, apply_action, event_to_action
from .errors import ConfigError
from .render import Fonts, draw_frame
from .session import GameSession
from .storage import HighScoreStore
from .themes import THEMES
from .timers import TICK_EVENT, PygameTimer

logger = logging.getLogger(__name__)

STEP_CUES = {"ate": "eat", "wall": "game_over", "self": "game_over"}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="neo-snake",
        description="Play Neo Snake: eat food, grow, and avoid walls and your own tail.",
    )
    parser.add_argument("--theme", type=str.upper, choices=list(THEMES),
                        help="Starting colour theme (default from NEO_SNAKE_THEME or GREEN)")
    parser.add_argument("--no-sound", action="store_true",
                        help="Disable sound cues")
    parser.add_argument("--data-file", type=Path,
                        help="JSON file that stores the high score")
    parser.add_argument("--debug", action="store_true",
                        help="Show the debug status line from the start")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default from NEO_SNAKE_LOG_LEVEL or WARNING)")
    return parser


def resolve_settings(args, parser, environ=None):
    """Merge command line arguments over environment settings."""
    try:
        settings = load_settings(environ)
    except ConfigError as e:
        parser.error(str(e))

    overrides = {"debug": args.debug}
    if args.theme:
        overrides["theme"] = args.theme
    if args.no_sound:
        overrides["sound"] = False
    if args.data_file:
        overrides["data_file"] = args.data_file
    if args.log_level:
        overrides["log_level"] = args.log_level
    return settings._replace(**overrides)


def run(settings):
    """Open the window and play until the player quits."""
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Neo Snake")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()
    fonts = Fonts()
    cues = SoundCues(enabled=settings.sound)

    store = HighScoreStore(settings.data_file)
    session = GameSession(timer=PygameTimer(), store=store)
    ui = UiState(theme=settings.theme, show_debug=settings.debug)
    logger.info("High score %d loaded from %s", session.high_score, store.path)

    try:
        while not ui.quit_requested:
            for event in pygame.event.get():
                if event.type == TICK_EVENT:
                    cues.play(STEP_CUES.get(session.step()))
                    continue
                cues.play(apply_action(session, ui, event_to_action(event)))

            pulse = 0.5 + 0.5 * math.sin(pygame.time.get_ticks() / 250.0)
            draw_frame(screen, fonts, session.snapshot(), ui, pulse)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        session.close()
        pygame.quit()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = resolve_settings(args, parser)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    run(settings)


if __name__ == "__main__":
    main()
