"""Visual factory interface used by the layout engine.

The engine never touches a rendering surface directly. It asks a
factory for an opaque handle per node, pushes transforms to it and
asks the factory to destroy it when the node goes away.
"""

from typing import Any, Protocol


class VisualFactory(Protocol):
    """Creates, moves and destroys the visual of a node."""

    def create_visual(self) -> Any:
        """Create a new visual and return its handle."""
        ...

    def destroy_visual(self, handle: Any) -> None:
        """Destroy a visual previously returned by create_visual."""
        ...

    def set_local_position(self, handle: Any, position: tuple[float, float]) -> None:
        """Move a visual to a local position (y pointing up)."""
        ...

    def set_local_rotation(self, handle: Any, angle: float) -> None:
        """Roll a visual by angle degrees, counter-clockwise positive."""
        ...


class NullVisualFactory:
    """Factory without a rendering surface, for headless layouts."""

    def create_visual(self) -> None:
        return None

    def destroy_visual(self, handle: Any) -> None:
        pass

    def set_local_position(self, handle: Any, position: tuple[float, float]) -> None:
        pass

    def set_local_rotation(self, handle: Any, angle: float) -> None:
        pass
