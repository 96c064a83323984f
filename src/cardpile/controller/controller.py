"""Main controller for the preview application.

Coordinates between the Model, View, and Layout layers, turning slider
and button input into control changes and pile updates.
"""

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QKeySequence, QShortcut

from cardpile.errors import SettingsError
from cardpile.layout.engine import PileLayoutEngine
from cardpile.model.controls import PileControls
from cardpile.model.settings import PileSettings, load_settings, save_settings
from cardpile.view.main_window import MainWindow
from cardpile.view.theme import DEFAULT_THEME, CardTheme, get_theme
from cardpile.view.visuals import CardItem, SceneVisualFactory

logger = logging.getLogger(__name__)


class Controller(QObject):
    """Main application controller.

    Owns the layout engine and forwards its node callbacks as Qt signals.
    """

    # Signals for UI updates
    node_added = pyqtSignal(int)  # Emits index of the new node
    node_removing = pyqtSignal(int)  # Emits index of the node about to go
    node_removed = pyqtSignal(int)  # Emits index the node was removed from
    pile_updated = pyqtSignal(int)  # Emits node count after an update

    def __init__(
        self,
        settings: PileSettings | None = None,
        controls: PileControls | None = None,
        theme: CardTheme | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            settings: Pile settings (uses defaults if None)
            controls: Initial control amounts (uses defaults if None)
            theme: Card theme (uses default if None)
        """
        super().__init__()

        self._theme = theme or DEFAULT_THEME
        self._origin: tuple[float, float] = (0.0, 0.0)
        self._show_labels = True

        # Create main window
        self._window = MainWindow()
        self._view = self._window.pile_view
        self._panel = self._window.control_panel

        # Create layout engine drawing into the view's scene
        self._factory = SceneVisualFactory(self._view.pile_scene, theme=self._theme)
        self._engine = PileLayoutEngine(settings, self._factory, controls)
        self._engine.set_node_added_callback(self._on_node_added)
        self._engine.set_node_removing_callback(self._on_node_removing)
        self._engine.set_node_removed_callback(self._on_node_removed)

        self._view.apply_theme(self._theme)

        self._connect_signals()
        self._setup_shortcuts()

    def _connect_signals(self) -> None:
        """Connect window signals."""
        self._panel.nodes_amount_changed.connect(self._on_nodes_amount_changed)
        self._panel.spacing_amount_changed.connect(self._on_spacing_amount_changed)
        self._panel.curvature_amount_changed.connect(self._on_curvature_amount_changed)
        self._panel.add_requested.connect(self.add_node)
        self._panel.remove_requested.connect(self.remove_node)
        self._panel.labels_toggled.connect(self.set_labels_visible)
        self._panel.origin_toggled.connect(self._view.set_origin_visible)

        self._window.save_settings_requested.connect(self.save_settings)
        self._window.load_settings_requested.connect(self.load_settings)
        self._window.theme_requested.connect(self.set_theme)

    def _setup_shortcuts(self) -> None:
        """Keyboard shortcuts for adding and removing cards."""
        self._shortcuts = []
        for keys, slot in (("+", self.add_node), ("=", self.add_node), ("-", self.remove_node)):
            shortcut = QShortcut(QKeySequence(keys), self._window)
            shortcut.activated.connect(slot)
            self._shortcuts.append(shortcut)

    @property
    def engine(self) -> PileLayoutEngine:
        """Get the layout engine."""
        return self._engine

    @property
    def window(self) -> MainWindow:
        """Get the main window."""
        return self._window

    @property
    def factory(self) -> SceneVisualFactory:
        """Get the scene visual factory."""
        return self._factory

    def set_origin(self, origin: tuple[float, float]) -> None:
        """Move the pile origin and update the pile."""
        self._origin = (float(origin[0]), float(origin[1]))
        self.refresh()

    def refresh(self) -> None:
        """Update the pile and every widget showing its state."""
        self._engine.update(self._origin)

        offset_x, offset_y = self._engine.settings.origin_offset
        self._view.set_origin((self._origin[0] + offset_x, self._origin[1] + offset_y))

        count = len(self._engine)
        self._panel.set_controls(self._engine.controls)
        self._panel.update_stats(count, self._engine.settings.max_nodes)
        self.pile_updated.emit(count)

    def add_node(self) -> None:
        """Add one card to the pile."""
        self._engine.request_grow()
        self.refresh()

    def remove_node(self) -> None:
        """Remove one card from the pile."""
        self._engine.request_shrink()
        self.refresh()

    def _on_nodes_amount_changed(self, value: float) -> None:
        self._engine.controls.set_nodes_amount(value)
        self.refresh()

    def _on_spacing_amount_changed(self, value: float) -> None:
        self._engine.controls.set_node_spacing_amount(value)
        self.refresh()

    def _on_curvature_amount_changed(self, value: float) -> None:
        self._engine.controls.set_curvature_amount(value)
        self.refresh()

    def _card(self, index: int) -> CardItem | None:
        return self._engine.get_visual_handle(index)

    def _on_node_added(self, index: int) -> None:
        """Label the new card and make it the highlighted top card."""
        card = self._card(index)
        if card is not None:
            card.set_label(str(index + 1) if self._show_labels else "")
            card.set_highlighted(True)
        previous = self._card(index - 1)
        if previous is not None:
            previous.set_highlighted(False)
        self.node_added.emit(index)

    def _on_node_removing(self, index: int) -> None:
        logger.debug(f"Removing card {index + 1}")
        self.node_removing.emit(index)

    def _on_node_removed(self, index: int) -> None:
        """Highlight the card that is now on top."""
        top = self._card(index - 1)
        if top is not None:
            top.set_highlighted(True)
        self.node_removed.emit(index)

    def set_labels_visible(self, visible: bool) -> None:
        """Show or hide the index label of every card."""
        self._show_labels = visible
        for index in range(len(self._engine)):
            card = self._card(index)
            if card is not None:
                card.set_label(str(index + 1) if visible else "")

    def set_theme(self, name: str) -> None:
        """Switch to a built-in theme by name."""
        try:
            theme = get_theme(name)
        except KeyError as e:
            logger.warning(str(e))
            self._window.set_status_message(f"Unknown theme: {name}")
            return

        self._theme = theme
        self._factory.set_theme(theme)
        self._view.apply_theme(theme)
        # Restore the top card highlight lost by repainting
        top = self._card(len(self._engine) - 1)
        if top is not None:
            top.set_highlighted(True)
        self._window.set_status_message(f"Theme: {theme.name}")

    def save_settings(self, path: Path) -> None:
        """Save the current pile settings to a JSON file."""
        try:
            saved = save_settings(self._engine.settings, path)
        except OSError as e:
            logger.error(f"Failed to save pile settings: {e}")
            self._window.set_status_message(f"Cannot save settings: {e}")
            return
        self._window.set_status_message(f"Saved settings to {saved}")

    def load_settings(self, path: Path) -> None:
        """Load pile settings from a JSON file and update the pile."""
        try:
            settings = load_settings(path, strict=True)
        except SettingsError as e:
            logger.warning(e.reason)
            self._window.set_status_message(str(e))
            return

        self._engine.settings = settings
        self.refresh()
        self._window.set_status_message(f"Loaded settings from {path}")

    def start(self) -> None:
        """Lay out the initial pile."""
        self.refresh()
        logger.info(f"Pile started with {len(self._engine)} cards")

    def show(self) -> None:
        """Show the main window."""
        self._window.show()
