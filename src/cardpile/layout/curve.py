"""Parabolic curve model for card piles.

Nodes are spread evenly along a line centered on the local origin, then
lifted onto the parabola ``y = curvature * 0.001 * x^2``. Each node is
rolled to follow the curve, plus a share of the configured rotation
offset whose direction follows the sign of the curvature.
"""

import numpy as np

from cardpile.layout.transform import NodeTransform
from cardpile.model.controls import PileControls, clamp
from cardpile.model.settings import PileSettings

# Scale factors of the curve model
HEIGHT_SCALE = 0.001
ANGLE_SCALE = 0.1
ROTATION_OFFSET_SCALE = 0.01


def curvature_sign(curvature: float) -> float:
    """Sign of the curvature, 0.0 for a flat pile.

    The rotation offset term is multiplied by this, so it vanishes
    when the curvature is exactly zero and flips as it crosses zero.
    """
    if curvature > 0:
        return 1.0
    if curvature < 0:
        return -1.0
    return 0.0


def line_width(spacing: float, count: int, max_width: float) -> float:
    """Total span of the pile.

    Args:
        spacing: Spacing between two neighbouring nodes
        count: Number of nodes
        max_width: Upper bound of the span

    Returns:
        spacing * count, no smaller than one spacing and no wider than max_width
    """
    return clamp(spacing * count, spacing, max_width)


def evaluate_curve(count: int, settings: PileSettings, controls: PileControls) -> np.ndarray:
    """Evaluate the curve part of every node transform.

    Offsets (host origin, origin offset, per node offset) are not
    included; the caller adds them to the x and y columns.

    Args:
        count: Number of nodes in the pile
        settings: Pile settings
        controls: Current control amounts

    Returns:
        Array of shape (count, 3) holding x, y and angle in degrees
    """
    if count <= 0:
        return np.zeros((0, 3), dtype=np.float64)

    # A single node sits on the origin, only the rotation offset applies
    if count == 1:
        return np.array([[0.0, 0.0, settings.rotation_offset]], dtype=np.float64)

    curvature = settings.max_curvature * controls.curvature_amount
    spacing = settings.max_node_spacing * controls.node_spacing_amount
    width = line_width(spacing, count, settings.max_width)
    node_distance = width / (count - 1)

    x = -width / 2 + np.arange(count, dtype=np.float64) * node_distance
    y = (curvature * HEIGHT_SCALE) * x * x

    angle = x * ANGLE_SCALE * curvature
    angle += (x * settings.rotation_offset * ROTATION_OFFSET_SCALE) * curvature_sign(curvature)

    return np.column_stack((x, y, angle))


def node_transform(
    index: int,
    count: int,
    settings: PileSettings,
    controls: PileControls,
) -> NodeTransform | None:
    """Evaluate the curve transform of a single node.

    Args:
        index: Node index, 0 is the left end
        count: Number of nodes in the pile
        settings: Pile settings
        controls: Current control amounts

    Returns:
        The node's curve transform, or None if index is out of range
    """
    if not 0 <= index < count:
        return None
    x, y, angle = evaluate_curve(count, settings, controls)[index]
    return NodeTransform(x=float(x), y=float(y), angle=float(angle))
