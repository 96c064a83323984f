"""Model layer for cardpile.

This module contains the data models describing a pile: its settings,
the normalized controls that drive it and the per-node records.
"""

from cardpile.model.controls import PileControls
from cardpile.model.node import PileNode
from cardpile.model.settings import PileSettings, load_settings, save_settings

__all__ = ["PileControls", "PileNode", "PileSettings", "load_settings", "save_settings"]
