"""Graphics view showing the pile on a card table."""

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QPainter, QPen
from PyQt6.QtWidgets import QGraphicsItemGroup, QGraphicsScene, QGraphicsView

from cardpile.view.theme import DEFAULT_THEME, CardTheme
from cardpile.view.visuals import to_qcolor


class PileView(QGraphicsView):
    """View over the pile scene, centered on the pile origin.

    The scene rect is fixed around the origin so the pile stays put
    while cards are added or removed.
    """

    MARKER_SIZE = 12.0

    def __init__(self, scene_extent: tuple[float, float] = (1200.0, 700.0), parent=None) -> None:
        """Initialize the view.

        Args:
            scene_extent: Width and height of the visible table area
            parent: Parent widget
        """
        scene = QGraphicsScene()
        super().__init__(scene, parent)
        self._scene = scene

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        width, height = scene_extent
        self._scene.setSceneRect(QRectF(-width / 2, -height / 2, width, height))

        self._origin_marker = self._create_origin_marker()
        self._theme = DEFAULT_THEME
        self.apply_theme(DEFAULT_THEME)

    @property
    def pile_scene(self) -> QGraphicsScene:
        """Scene the card visuals live in."""
        return self._scene

    def _create_origin_marker(self) -> QGraphicsItemGroup:
        half = self.MARKER_SIZE / 2
        horizontal = self._scene.addLine(-half, 0, half, 0)
        vertical = self._scene.addLine(0, -half, 0, half)
        marker = self._scene.createItemGroup([horizontal, vertical])
        # Always drawn above the cards
        marker.setZValue(1_000_000)
        return marker

    def apply_theme(self, theme: CardTheme) -> None:
        """Apply theme colors to the table and origin marker."""
        self._theme = theme
        self.setBackgroundBrush(QBrush(to_qcolor(theme.background_color)))
        pen = QPen(to_qcolor(theme.origin_color), 2.0)
        for line in self._origin_marker.childItems():
            line.setPen(pen)

    def set_origin(self, origin: tuple[float, float]) -> None:
        """Move the origin marker, origin given with y pointing up."""
        x, y = origin
        self._origin_marker.setPos(x, -y)

    def set_origin_visible(self, visible: bool) -> None:
        self._origin_marker.setVisible(visible)

    def resizeEvent(self, event) -> None:
        """Keep the whole table in view."""
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
