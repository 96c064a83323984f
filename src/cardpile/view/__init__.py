"""View layer for the cardpile preview.

This module provides the Qt rendering side of a pile:

- SceneVisualFactory: Visual factory creating cards in a QGraphicsScene
- PileView: QGraphicsView over the card table
- MainWindow: Main application window with menu bar and controls
- ControlPanel: Side panel with pile sliders
- CardTheme: Theme dataclass for visual styling
"""

from cardpile.view.visuals import CardItem, SceneVisualFactory, to_qcolor
from cardpile.view.pile_view import PileView
from cardpile.view.main_window import MainWindow, ControlPanel
from cardpile.view.theme import (
    CardTheme,
    FELT,
    DARK_MODE,
    CASINO,
    DEFAULT_THEME,
    BUILTIN_THEMES,
    get_theme,
    list_themes,
)

__all__ = [
    "CardItem",
    "SceneVisualFactory",
    "to_qcolor",
    "PileView",
    "MainWindow",
    "ControlPanel",
    # Theme exports
    "CardTheme",
    "FELT",
    "DARK_MODE",
    "CASINO",
    "DEFAULT_THEME",
    "BUILTIN_THEMES",
    "get_theme",
    "list_themes",
]
