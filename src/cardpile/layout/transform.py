"""2D transform of a laid out node."""

from dataclasses import dataclass


@dataclass
class NodeTransform:
    """2D position with a roll angle.

    Attributes:
        x: X coordinate
        y: Y coordinate (pointing up)
        angle: Roll angle in degrees, counter-clockwise positive
    """

    x: float
    y: float
    angle: float

    @property
    def position(self) -> tuple[float, float]:
        """Get the position as an (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        """Convert to a JSON compatible dictionary."""
        return {"x": self.x, "y": self.y, "angle": self.angle}

    def __repr__(self) -> str:
        """String representation."""
        return f"NodeTransform(x={self.x:.2f}, y={self.y:.2f}, angle={self.angle:.2f})"
