"""Normalized control parameters driving a pile."""

from dataclasses import dataclass


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high], testing the lower bound first."""
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass
class PileControls:
    """Externally driven amounts, usually bound to UI sliders.

    Attributes:
        nodes_amount: Fraction of max_nodes currently active, in [0, 1]
        node_spacing_amount: Fraction of max_node_spacing used, in [0, 1]
        curvature_amount: Signed fraction of max_curvature, in [-1, 1]
    """

    nodes_amount: float = 0.0
    node_spacing_amount: float = 1.0
    curvature_amount: float = 0.0

    def __post_init__(self) -> None:
        self.nodes_amount = clamp(float(self.nodes_amount), 0.0, 1.0)
        self.node_spacing_amount = clamp(float(self.node_spacing_amount), 0.0, 1.0)
        self.curvature_amount = clamp(float(self.curvature_amount), -1.0, 1.0)

    def set_nodes_amount(self, value: float) -> None:
        self.nodes_amount = clamp(float(value), 0.0, 1.0)

    def set_node_spacing_amount(self, value: float) -> None:
        self.node_spacing_amount = clamp(float(value), 0.0, 1.0)

    def set_curvature_amount(self, value: float) -> None:
        self.curvature_amount = clamp(float(value), -1.0, 1.0)
