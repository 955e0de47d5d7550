"""Keyboard and pointer mapping.

Raw pygame events become action strings, and actions are applied to a
session plus the small bit of UI state the window keeps (theme, overlays).
"""

import logging

import pygame

from .config import (
    CONTROLS_TOP,
    DIRECTIONS,
    MARGIN,
    WINDOW_WIDTH,
)
from .session import GAME_OVER, NOT_STARTED
from .themes import DEFAULT_THEME, THEME_ORDER, next_theme, theme_by_number

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_SPACE: "space",
    pygame.K_r: "restart",
    pygame.K_RETURN: "restart",
    pygame.K_t: "theme_next",
    pygame.K_h: "help",
    pygame.K_F3: "debug",
    pygame.K_ESCAPE: "quit",
}
for _number, _key in enumerate((pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4), start=1):
    KEY_ACTIONS[_key] = f"theme:{theme_by_number(_number)}"

DPAD_BUTTON = 40
DPAD_STEP = 44


class UiState:
    """Window-level toggles that live outside the simulation."""

    def __init__(self, theme=DEFAULT_THEME, show_debug=False):
        self.theme = theme
        self.show_help = False
        self.show_debug = show_debug
        self.quit_requested = False


def control_rects():
    """Return the clickable regions of the control bar keyed by action."""
    rects = {"primary": pygame.Rect(MARGIN, CONTROLS_TOP + 42, 150, 48)}

    for i, theme_id in enumerate(THEME_ORDER):
        rect = pygame.Rect(0, 0, 28, 28)
        rect.center = (MARGIN + 190 + i * 40, CONTROLS_TOP + 66)
        rects[f"theme:{theme_id}"] = rect

    cx = WINDOW_WIDTH - MARGIN - 66
    cy = CONTROLS_TOP + 66
    offsets = {"up": (0, -1), "down": (0, 1), "left": (-1, 0), "right": (1, 0)}
    for name, (dx, dy) in offsets.items():
        rect = pygame.Rect(0, 0, DPAD_BUTTON, DPAD_BUTTON)
        rect.center = (cx + dx * DPAD_STEP, cy + dy * DPAD_STEP)
        rects[name] = rect
    return rects


def key_to_action(key):
    """Map a pygame key code to an action name, or None."""
    return KEY_ACTIONS.get(key)


def pointer_to_action(pos):
    """Map a click position to an action name, or None."""
    for action, rect in control_rects().items():
        if rect.collidepoint(pos):
            return action
    return None


def event_to_action(event):
    """Translate a pygame event into an action name, or None."""
    if event.type == pygame.QUIT:
        return "quit"
    if event.type == pygame.KEYDOWN:
        return key_to_action(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return pointer_to_action(event.pos)
    return None


def apply_action(session, ui, action):
    """Apply an action to the session and UI state.

    Returns the name of the sound cue to play, if any.
    """
    if action is None:
        return None

    if action in DIRECTIONS:
        # Directional input is ignored once the game is over.
        if session.state != GAME_OVER:
            session.enqueue(DIRECTIONS[action])
        return None

    if action == "space":
        if session.state == NOT_STARTED:
            session.start()
            return None
        if session.state == GAME_OVER:
            return None
        session.toggle_pause()
        return "pause_toggle"

    if action == "primary":
        # The on-screen button doubles as "Try again" after a crash.
        if session.state in (NOT_STARTED, GAME_OVER):
            session.start()
            return None
        session.toggle_pause()
        return "pause_toggle"

    if action == "restart":
        if session.state in (NOT_STARTED, GAME_OVER):
            session.start()
        return None

    if action.startswith("theme:"):
        ui.theme = action.split(":", 1)[1]
        logger.debug("theme set to %s", ui.theme)
    elif action == "theme_next":
        ui.theme = next_theme(ui.theme)
        logger.debug("theme set to %s", ui.theme)
    elif action == "help":
        ui.show_help = not ui.show_help
    elif action == "debug":
        ui.show_debug = not ui.show_debug
    elif action == "quit":
        ui.quit_requested = True
    return None
