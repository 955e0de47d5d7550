"""Drawing of a session snapshot. Nothing here touches game state."""

import pygame

from .config import (
    BOARD_LEFT,
    BOARD_SIZE,
    BOARD_TOP,
    CELL_SIZE,
    CONTROLS_HEIGHT,
    CONTROLS_TOP,
    MARGIN,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .controls import control_rects
from .engine import direction_to_text
from .session import GAME_OVER, NOT_STARTED, PAUSED
from .themes import THEME_ORDER, THEMES, blend

# Colors (R, G, B)
BG_TOP = (15, 23, 42)
BG_BOTTOM = (2, 6, 23)
BOARD_BG = (15, 23, 42)
BOARD_BORDER = (51, 65, 85)
GRID_LINE = (30, 41, 59)
WHITE = (240, 240, 240)
MUTED = (100, 116, 139)
CRASH = (244, 63, 94)
AMBER = (245, 158, 11)
BUTTON_IDLE = (30, 41, 59)
SHADOW = (0, 0, 0)

TITLE = "NEO-SNAKE"


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI Black", "Arial Black", "DejaVu Sans"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


class Fonts:
    """Fonts used by the renderer, loaded once after pygame.init()."""

    def __init__(self):
        self.title = get_ui_font(30)
        self.score = get_ui_font(24)
        self.label = get_ui_font(13)
        self.overlay = get_ui_font(44)
        self.text = get_ui_font(16)


def grid_rect(grid_pos, padding=0):
    """Return a pixel rectangle for a grid position."""
    x, y = grid_pos
    return pygame.Rect(
        BOARD_LEFT + x * CELL_SIZE + padding,
        BOARD_TOP + y * CELL_SIZE + padding,
        CELL_SIZE - padding * 2,
        CELL_SIZE - padding * 2,
    )


def board_rect():
    return pygame.Rect(BOARD_LEFT, BOARD_TOP, BOARD_SIZE, BOARD_SIZE)


def draw_background(surface):
    """Fill the window with a vertical gradient."""
    for y in range(WINDOW_HEIGHT):
        color = blend(BG_TOP, BG_BOTTOM, y / WINDOW_HEIGHT)
        pygame.draw.line(surface, color, (0, y), (WINDOW_WIDTH, y))


def draw_board(surface):
    """Draw the board panel with its grid lines and border."""
    board = board_rect()
    pygame.draw.rect(surface, BOARD_BG, board)
    for i in range(1, BOARD_SIZE // CELL_SIZE):
        x = board.left + i * CELL_SIZE
        y = board.top + i * CELL_SIZE
        pygame.draw.line(surface, GRID_LINE, (x, board.top), (x, board.bottom - 1), 1)
        pygame.draw.line(surface, GRID_LINE, (board.left, y), (board.right - 1, y), 1)
    pygame.draw.rect(surface, BOARD_BORDER, board.inflate(8, 8), 4, border_radius=8)


def draw_food(surface, grid_pos, theme, pulse):
    """Draw a round pellet that breathes with pulse in [0, 1]."""
    rect = grid_rect(grid_pos, padding=3)
    radius = int(rect.width // 2 * (0.8 + 0.2 * pulse))
    glow = pygame.Surface((CELL_SIZE * 2, CELL_SIZE * 2), pygame.SRCALPHA)
    pygame.draw.circle(glow, theme["food"] + (int(60 + 50 * pulse),), (CELL_SIZE, CELL_SIZE), CELL_SIZE - 2)
    surface.blit(glow, (rect.centerx - CELL_SIZE, rect.centery - CELL_SIZE))
    pygame.draw.circle(surface, theme["food"], rect.center, radius)


def draw_snake(surface, snake, direction, theme):
    """Draw snake body with rounded corners and a distinct head."""
    for segment in reversed(snake[1:]):
        pygame.draw.rect(surface, theme["body"], grid_rect(segment, padding=1), border_radius=4)

    head_rect = grid_rect(snake[0], padding=1)
    halo = pygame.Surface((CELL_SIZE * 2, CELL_SIZE * 2), pygame.SRCALPHA)
    pygame.draw.rect(halo, theme["head"] + (70,), halo.get_rect(), border_radius=CELL_SIZE // 2)
    surface.blit(halo, (head_rect.centerx - CELL_SIZE, head_rect.centery - CELL_SIZE))
    pygame.draw.rect(surface, theme["head"], head_rect, border_radius=4)

    # Eyes face the direction of travel.
    cx, cy = head_rect.center
    dx, dy = direction
    side_x, side_y = -dy, dx
    for sign in (-1, 1):
        ex = cx + dx * 5 + side_x * 4 * sign
        ey = cy + dy * 5 + side_y * 4 * sign
        pygame.draw.circle(surface, SHADOW, (ex, ey), 2)


def draw_title(surface, font, theme):
    """Draw the title with the theme's accent gradient across its letters."""
    start, end = theme["gradient"]
    x = MARGIN
    for i, letter in enumerate(TITLE):
        color = blend(start, end, i / max(1, len(TITLE) - 1))
        glyph = font.render(letter, True, color)
        surface.blit(glyph, (x, MARGIN))
        x += glyph.get_width()


def draw_header(surface, fonts, snapshot, theme):
    """Draw title plus score and high score in the top-right corner."""
    draw_title(surface, fonts.title, theme)
    sub = fonts.label.render("PYGAME EDITION", True, MUTED)
    surface.blit(sub, (MARGIN, MARGIN + fonts.title.get_height()))

    right = WINDOW_WIDTH - MARGIN
    columns = [
        ("HIGH", str(snapshot.high_score), (203, 213, 225)),
        ("SCORE", str(snapshot.score), theme["ui"]),
    ]
    for label, value, color in columns:
        value_text = fonts.score.render(value, True, color)
        label_text = fonts.label.render(label, True, MUTED)
        width = max(value_text.get_width(), label_text.get_width())
        surface.blit(label_text, (right - label_text.get_width(), MARGIN))
        surface.blit(value_text, (right - value_text.get_width(), MARGIN + label_text.get_height() + 2))
        right -= width + 24


def draw_overlay(surface, fonts, snapshot, theme):
    """Dim the board and show the start, paused or crashed banner."""
    if snapshot.state == GAME_OVER:
        lines = [(fonts.overlay, "GAME OVER", CRASH), (fonts.text, "CRASHED", (203, 213, 225))]
    elif snapshot.state == PAUSED:
        lines = [(fonts.overlay, "PAUSED", theme["ui"])]
    elif snapshot.state == NOT_STARTED:
        lines = [(fonts.text, "Press Space to start", WHITE)]
    else:
        return

    board = board_rect()
    shade = pygame.Surface(board.size, pygame.SRCALPHA)
    shade.fill((15, 23, 42, 200))
    surface.blit(shade, board.topleft)

    rendered = [font.render(text, True, color) for font, text, color in lines]
    total_h = sum(r.get_height() for r in rendered) + 8 * (len(rendered) - 1)
    y = board.centery - total_h // 2
    for r in rendered:
        surface.blit(r, r.get_rect(centerx=board.centerx, y=y))
        y += r.get_height() + 8


def draw_help_overlay(surface, title_font, text_font):
    """Draw centered help panel with full controls."""
    lines = [
        "Arrows / WASD: move",
        "Space: start / pause",
        "R or Enter: play again",
        "1-4 or T: change theme",
        "F3: debug line",
        "Esc: quit",
    ]
    title = title_font.render("Controls", True, WHITE)
    line_surfaces = [text_font.render(line, True, WHITE) for line in lines]
    content_w = max(title.get_width(), max(s.get_width() for s in line_surfaces))
    content_h = title.get_height() + 14 + len(line_surfaces) * (text_font.get_height() + 6) - 6

    panel_rect = pygame.Rect(0, 0, content_w + 48, content_h + 36)
    panel_rect.center = board_rect().center
    panel_surface = pygame.Surface(panel_rect.size, pygame.SRCALPHA)
    panel_surface.fill((0, 0, 0, 190))
    surface.blit(panel_surface, panel_rect.topleft)

    y = panel_rect.top + 18
    surface.blit(title, title.get_rect(centerx=panel_rect.centerx, y=y))
    y += title.get_height() + 14
    for line_surface in line_surfaces:
        surface.blit(line_surface, line_surface.get_rect(centerx=panel_rect.centerx, y=y))
        y += text_font.get_height() + 6


def draw_debug_status(surface, font, snapshot):
    """Draw debug line along the bottom of the board."""
    debug = (
        f"state={snapshot.state}  "
        f"direction={direction_to_text(snapshot.direction)}  "
        f"speed={snapshot.speed}ms  "
        f"game_over_reason={snapshot.game_over_reason or 'none'}"
    )
    text = font.render(debug, True, WHITE)
    board = board_rect()
    panel = pygame.Surface((board.width, text.get_height() + 8), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 150))
    surface.blit(panel, (board.left, board.bottom - panel.get_height()))
    surface.blit(text, (board.left + 8, board.bottom - panel.get_height() + 4))


def draw_controls(surface, fonts, snapshot, theme_id):
    """Draw the pointer control bar: start/pause button, theme dots and d-pad."""
    theme = THEMES[theme_id]
    rects = control_rects()

    panel = pygame.Rect(MARGIN, CONTROLS_TOP, WINDOW_WIDTH - MARGIN * 2, CONTROLS_HEIGHT)
    pygame.draw.rect(surface, (15, 23, 42), panel, border_radius=16)

    primary = rects["primary"]
    if snapshot.state in (NOT_STARTED, GAME_OVER):
        label = "Try Again" if snapshot.state == GAME_OVER else "Start Game"
        pygame.draw.rect(surface, theme["dot"], primary, border_radius=primary.height // 2)
        text = fonts.text.render(label, True, BG_BOTTOM)
    elif snapshot.state == PAUSED:
        pygame.draw.rect(surface, AMBER, primary, 2, border_radius=primary.height // 2)
        text = fonts.text.render("Resume", True, AMBER)
    else:
        pygame.draw.rect(surface, BUTTON_IDLE, primary, border_radius=primary.height // 2)
        text = fonts.text.render("Pause", True, (148, 163, 184))
    surface.blit(text, text.get_rect(center=primary.center))

    for tid in THEME_ORDER:
        rect = rects[f"theme:{tid}"]
        radius = rect.width // 2
        if tid == theme_id:
            pygame.draw.circle(surface, THEMES[tid]["dot"], rect.center, radius + 2)
            pygame.draw.circle(surface, WHITE, rect.center, radius + 2, 2)
        else:
            dimmed = blend(THEMES[tid]["dot"], (15, 23, 42), 0.5)
            pygame.draw.circle(surface, dimmed, rect.center, radius)

    arrows = {
        "up": ((0, -1), (-1, 1), (1, 1)),
        "down": ((0, 1), (-1, -1), (1, -1)),
        "left": ((-1, 0), (1, -1), (1, 1)),
        "right": ((1, 0), (-1, -1), (-1, 1)),
    }
    for name, points in arrows.items():
        rect = rects[name]
        pygame.draw.rect(surface, BUTTON_IDLE, rect, border_radius=8)
        cx, cy = rect.center
        pygame.draw.polygon(surface, (203, 213, 225), [(cx + px * 8, cy + py * 8) for px, py in points])


def draw_frame(surface, fonts, snapshot, ui, pulse=0.0):
    """Draw one complete frame for snapshot with the UI's active theme."""
    theme = THEMES[ui.theme]
    draw_background(surface)
    draw_header(surface, fonts, snapshot, theme)
    draw_board(surface)
    draw_food(surface, snapshot.food, theme, pulse)
    draw_snake(surface, snapshot.snake, snapshot.direction, theme)
    if ui.show_debug:
        draw_debug_status(surface, fonts.label, snapshot)
    draw_overlay(surface, fonts, snapshot, theme)
    if ui.show_help:
        draw_help_overlay(surface, fonts.score, fonts.text)
    draw_controls(surface, fonts, snapshot, ui.theme)
