"""Shared fixtures for cardpile tests."""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingVisualFactory:
    """Visual factory recording every call, with integer handles."""

    def __init__(self) -> None:
        self.next_handle = 0
        self.alive: set[int] = set()
        self.created: list[int] = []
        self.destroyed: list[int] = []
        self.positions: dict[int, tuple[float, float]] = {}
        self.rotations: dict[int, float] = {}
        self.events: list[tuple[str, int]] = []

    def create_visual(self) -> int:
        handle = self.next_handle
        self.next_handle += 1
        self.alive.add(handle)
        self.created.append(handle)
        self.events.append(("create", handle))
        return handle

    def destroy_visual(self, handle: int) -> None:
        assert handle in self.alive, f"handle {handle} destroyed twice or never created"
        self.alive.remove(handle)
        self.destroyed.append(handle)
        self.events.append(("destroy", handle))

    def set_local_position(self, handle: int, position: tuple[float, float]) -> None:
        self.positions[handle] = position

    def set_local_rotation(self, handle: int, angle: float) -> None:
        self.rotations[handle] = angle


@pytest.fixture
def factory() -> RecordingVisualFactory:
    return RecordingVisualFactory()


@pytest.fixture(scope="session")
def qapp():
    """Session wide QApplication for widget tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
