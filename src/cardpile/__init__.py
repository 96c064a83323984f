"""cardpile - lay out card piles along a curved line.

The model and layout layers have no UI dependency. The Qt preview lives
in cardpile.view and cardpile.controller.
"""

from cardpile.errors import CardPileError, SettingsError, ValidationError
from cardpile.layout import NodeTransform, NullVisualFactory, PileLayoutEngine, VisualFactory
from cardpile.model import PileControls, PileNode, PileSettings

__version__ = "0.1.0"

__all__ = [
    "CardPileError",
    "NodeTransform",
    "NullVisualFactory",
    "PileControls",
    "PileLayoutEngine",
    "PileNode",
    "PileSettings",
    "SettingsError",
    "ValidationError",
    "VisualFactory",
]
