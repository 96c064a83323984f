"""Main window for the cardpile preview application."""

from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QActionGroup, QKeySequence
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSlider,
    QSplitter,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from cardpile.model.controls import PileControls
from cardpile.view.pile_view import PileView
from cardpile.view.theme import BUILTIN_THEMES

# Slider steps per unit of a normalized amount
SLIDER_RESOLUTION = 1000


class ControlPanel(QWidget):
    """Control panel widget with pile sliders and buttons."""

    # Signals
    nodes_amount_changed = pyqtSignal(float)
    spacing_amount_changed = pyqtSignal(float)
    curvature_amount_changed = pyqtSignal(float)
    add_requested = pyqtSignal()
    remove_requested = pyqtSignal()
    labels_toggled = pyqtSignal(bool)
    origin_toggled = pyqtSignal(bool)

    def __init__(self, parent=None) -> None:
        """Initialize control panel."""
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the control panel UI."""
        self.setFixedWidth(220)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        # Title
        title = QLabel("<b>cardpile</b>")
        title.setStyleSheet("font-size: 14px;")
        layout.addWidget(title)

        layout.addSpacing(8)

        layout.addWidget(QLabel("<b>Pile:</b>"))

        self._nodes_slider = self._add_slider(layout, "Nodes", 0, SLIDER_RESOLUTION)
        self._spacing_slider = self._add_slider(layout, "Spacing", 0, SLIDER_RESOLUTION)
        self._curvature_slider = self._add_slider(
            layout, "Curvature", -SLIDER_RESOLUTION, SLIDER_RESOLUTION
        )

        self._nodes_slider.valueChanged.connect(
            lambda v: self.nodes_amount_changed.emit(v / SLIDER_RESOLUTION)
        )
        self._spacing_slider.valueChanged.connect(
            lambda v: self.spacing_amount_changed.emit(v / SLIDER_RESOLUTION)
        )
        self._curvature_slider.valueChanged.connect(
            lambda v: self.curvature_amount_changed.emit(v / SLIDER_RESOLUTION)
        )

        # Add/remove buttons
        node_layout = QHBoxLayout()
        self._remove_btn = QPushButton("−")
        self._remove_btn.setFixedWidth(40)
        self._remove_btn.setToolTip("Remove a card (-)")
        node_layout.addWidget(self._remove_btn)

        self._add_btn = QPushButton("+")
        self._add_btn.setFixedWidth(40)
        self._add_btn.setToolTip("Add a card (+)")
        node_layout.addWidget(self._add_btn)

        node_layout.addStretch()
        layout.addLayout(node_layout)

        self._add_btn.clicked.connect(self.add_requested.emit)
        self._remove_btn.clicked.connect(self.remove_requested.emit)

        layout.addSpacing(12)

        # View options
        layout.addWidget(QLabel("<b>View Options:</b>"))

        self._show_labels_btn = QPushButton("Show Labels")
        self._show_labels_btn.setCheckable(True)
        self._show_labels_btn.setChecked(True)
        self._show_labels_btn.setToolTip("Toggle card index labels")
        layout.addWidget(self._show_labels_btn)

        self._show_origin_btn = QPushButton("Show Origin")
        self._show_origin_btn.setCheckable(True)
        self._show_origin_btn.setChecked(True)
        self._show_origin_btn.setToolTip("Toggle the pile origin marker")
        layout.addWidget(self._show_origin_btn)

        self._show_labels_btn.clicked.connect(self.labels_toggled.emit)
        self._show_origin_btn.clicked.connect(self.origin_toggled.emit)

        layout.addStretch()

        # Stats section
        self._stats_label = QLabel("<b>Stats:</b><br>Cards: 0")
        self._stats_label.setStyleSheet("font-size: 10px;")
        layout.addWidget(self._stats_label)

    def _add_slider(self, layout: QVBoxLayout, name: str, minimum: int, maximum: int) -> QSlider:
        layout.addWidget(QLabel(name))
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(minimum, maximum)
        slider.setToolTip(name)
        layout.addWidget(slider)
        return slider

    def set_controls(self, controls: PileControls) -> None:
        """Move the sliders to match controls without emitting signals.

        Args:
            controls: Current control amounts
        """
        pairs = (
            (self._nodes_slider, controls.nodes_amount),
            (self._spacing_slider, controls.node_spacing_amount),
            (self._curvature_slider, controls.curvature_amount),
        )
        for slider, amount in pairs:
            slider.blockSignals(True)
            slider.setValue(round(amount * SLIDER_RESOLUTION))
            slider.blockSignals(False)

    def update_stats(self, node_count: int, max_nodes: int) -> None:
        """Update statistics display.

        Args:
            node_count: Number of cards in the pile
            max_nodes: Max cards allowed
        """
        self._stats_label.setText(f"<b>Stats:</b><br>Cards: {node_count} / {max_nodes}")

    @property
    def stats_text(self) -> str:
        return self._stats_label.text()


class MainWindow(QMainWindow):
    """Main window for the cardpile preview."""

    # Signals
    save_settings_requested = pyqtSignal(Path)
    load_settings_requested = pyqtSignal(Path)
    theme_requested = pyqtSignal(str)

    def __init__(self, title: str = "cardpile") -> None:
        """Initialize main window.

        Args:
            title: Window title
        """
        super().__init__()

        self._title = title
        self._pile_view = None
        self._control_panel = None

        self._setup_ui()
        self._setup_menu_bar()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(self._title)
        self.resize(1200, 700)

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Create main splitter for resizable panels
        main_splitter = QSplitter(Qt.Orientation.Horizontal)
        main_layout.addWidget(main_splitter, stretch=1)

        self._pile_view = PileView(parent=self)
        main_splitter.addWidget(self._pile_view)

        self._control_panel = ControlPanel()
        main_splitter.addWidget(self._control_panel)

        # Set initial splitter sizes
        main_splitter.setSizes([980, 220])

        # Create status bar
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready")

    def _setup_menu_bar(self) -> None:
        """Set up the menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        load_action = QAction("&Load Settings...", self)
        load_action.setShortcut(QKeySequence.StandardKey.Open)
        load_action.triggered.connect(self._load_settings)
        file_menu.addAction(load_action)

        save_action = QAction("&Save Settings...", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self._save_settings)
        file_menu.addAction(save_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        # View menu with one checkable entry per theme
        view_menu = menubar.addMenu("&View")
        theme_menu = view_menu.addMenu("&Theme")
        theme_group = QActionGroup(self)
        for key, theme in BUILTIN_THEMES.items():
            action = QAction(theme.name, self)
            action.setCheckable(True)
            action.triggered.connect(lambda checked, k=key: self.theme_requested.emit(k))
            theme_group.addAction(action)
            theme_menu.addAction(action)

    def _load_settings(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Load Pile Settings", "", "JSON (*.json)")
        if path:
            self.load_settings_requested.emit(Path(path))

    def _save_settings(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Save Pile Settings", "", "JSON (*.json)")
        if path:
            self.save_settings_requested.emit(Path(path))

    @property
    def pile_view(self) -> PileView:
        """Get the pile view widget."""
        return self._pile_view

    @property
    def control_panel(self) -> ControlPanel:
        """Get the control panel widget."""
        return self._control_panel

    def set_status_message(self, message: str) -> None:
        """Set status bar message.

        Args:
            message: Message to display
        """
        self._status_bar.showMessage(message)
