"""Colour presets. Themes only change how the board is drawn."""

# Colors (R, G, B)
THEMES = {
    "GREEN": {
        "id": "GREEN",
        "name": "Matrix",
        "head": (52, 211, 153),
        "body": (5, 150, 105),
        "food": (244, 63, 94),
        "gradient": ((52, 211, 153), (34, 211, 238)),
        "ui": (52, 211, 153),
        "dot": (16, 185, 129),
    },
    "BLUE": {
        "id": "BLUE",
        "name": "Cyber",
        "head": (34, 211, 238),
        "body": (8, 145, 178),
        "food": (245, 158, 11),
        "gradient": ((34, 211, 238), (59, 130, 246)),
        "ui": (34, 211, 238),
        "dot": (6, 182, 212),
    },
    "PURPLE": {
        "id": "PURPLE",
        "name": "Synth",
        "head": (232, 121, 249),
        "body": (192, 38, 211),
        "food": (45, 212, 191),
        "gradient": ((232, 121, 249), (139, 92, 246)),
        "ui": (232, 121, 249),
        "dot": (217, 70, 239),
    },
    "ORANGE": {
        "id": "ORANGE",
        "name": "Magma",
        "head": (251, 146, 60),
        "body": (234, 88, 12),
        "food": (99, 102, 241),
        "gradient": ((251, 146, 60), (239, 68, 68)),
        "ui": (251, 146, 60),
        "dot": (249, 115, 22),
    },
}
THEME_ORDER = tuple(THEMES)
DEFAULT_THEME = "GREEN"


def get_theme(theme_id):
    """Return the preset for theme_id; raises KeyError for unknown ids."""
    return THEMES[theme_id]


def next_theme(theme_id):
    """Return the id of the preset after theme_id, wrapping around."""
    index = THEME_ORDER.index(theme_id)
    return THEME_ORDER[(index + 1) % len(THEME_ORDER)]


def theme_by_number(number):
    """Map a 1-based selector number (keys 1-4) to a theme id, or None."""
    if 1 <= number <= len(THEME_ORDER):
        return THEME_ORDER[number - 1]
    return None


def blend(start, end, t):
    """Linearly interpolate between two RGB colours."""
    return tuple(int(a + (b - a) * t) for a, b in zip(start, end))
