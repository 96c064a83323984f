"""Layout engine for card piles.

This module contains the curve model and the engine that keeps a list
of nodes positioned along it.
"""

from cardpile.layout.curve import curvature_sign, evaluate_curve, line_width, node_transform
from cardpile.layout.engine import PileLayoutEngine
from cardpile.layout.factory import NullVisualFactory, VisualFactory
from cardpile.layout.transform import NodeTransform

__all__ = [
    "NodeTransform",
    "NullVisualFactory",
    "PileLayoutEngine",
    "VisualFactory",
    "curvature_sign",
    "evaluate_curve",
    "line_width",
    "node_transform",
]
