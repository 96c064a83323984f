"""Node record for one slot along the pile's curve."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PileNode:
    """Represents one card placement in the pile.

    Attributes:
        position: Local position, with origin and offsets already applied
        position_offset: Custom offset layered on top of the curve position
        rotation: Roll angle in degrees, counter-clockwise positive
        visual: Opaque handle returned by the visual factory
    """

    position: tuple[float, float] = (0.0, 0.0)
    position_offset: tuple[float, float] = (0.0, 0.0)
    rotation: float = 0.0
    visual: Any = field(default=None, repr=False)
