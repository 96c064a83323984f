"""Theme system for the cardpile preview.

Provides theme presets controlling how cards and the table are drawn.
All colors are stored as normalized RGBA tuples (0.0-1.0).
"""

from dataclasses import dataclass


@dataclass
class CardTheme:
    """Visual theme for the pile preview.

    Attributes:
        name: Human-readable theme name
        background_color: Table background color (RGBA)
        card_color: Card face color (RGBA)
        border_color: Card border color (RGBA)
        highlight_color: Border color of the top card of the pile (RGBA)
        origin_color: Origin marker color (RGBA)
        label_color: Card index label color (RGBA)
    """

    name: str
    background_color: tuple[float, float, float, float]
    card_color: tuple[float, float, float, float]
    border_color: tuple[float, float, float, float]
    highlight_color: tuple[float, float, float, float]
    origin_color: tuple[float, float, float, float]
    label_color: tuple[float, float, float, float] = (0.1, 0.1, 0.1, 1.0)


# Theme Presets

# Green felt card table
FELT = CardTheme(
    name="Felt",
    background_color=(0.05, 0.35, 0.18, 1.0),
    card_color=(0.97, 0.96, 0.92, 1.0),
    border_color=(0.2, 0.2, 0.2, 1.0),
    highlight_color=(0.95, 0.3, 0.2, 1.0),
    origin_color=(1.0, 0.85, 0.2, 0.8),
)

DARK_MODE = CardTheme(
    name="Dark Mode",
    background_color=(0.1, 0.1, 0.12, 1.0),
    card_color=(0.25, 0.27, 0.32, 1.0),
    border_color=(0.6, 0.65, 0.75, 1.0),
    highlight_color=(1.0, 0.5, 0.2, 1.0),
    origin_color=(0.3, 0.8, 1.0, 0.8),
    label_color=(0.9, 0.9, 0.9, 1.0),
)

CASINO = CardTheme(
    name="Casino",
    background_color=(0.35, 0.05, 0.08, 1.0),
    card_color=(1.0, 1.0, 1.0, 1.0),
    border_color=(0.85, 0.7, 0.2, 1.0),
    highlight_color=(0.2, 0.8, 1.0, 1.0),
    origin_color=(0.85, 0.7, 0.2, 0.8),
)

DEFAULT_THEME = FELT

BUILTIN_THEMES: dict[str, CardTheme] = {
    "felt": FELT,
    "dark_mode": DARK_MODE,
    "casino": CASINO,
}


def get_theme(name: str) -> CardTheme:
    """Get a theme by its identifier.

    Args:
        name: Theme identifier (e.g., "felt", "dark_mode")

    Returns:
        The matching theme

    Raises:
        KeyError: If theme name is not found
    """
    key = name.lower().replace(" ", "_")
    if key not in BUILTIN_THEMES:
        raise KeyError(f"Unknown theme '{name}'. Available: {', '.join(list_themes())}")
    return BUILTIN_THEMES[key]


def list_themes() -> list[str]:
    """Get list of all available theme identifiers."""
    return list(BUILTIN_THEMES.keys())
