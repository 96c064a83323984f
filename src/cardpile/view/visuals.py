"""Card visuals backed by a QGraphicsScene.

The layout engine works with y pointing up and counter-clockwise angles,
while Qt scene coordinates have y pointing down and clockwise rotation.
SceneVisualFactory flips both when applying transforms.
"""

import logging

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSimpleTextItem

from cardpile.view.theme import DEFAULT_THEME, CardTheme

logger = logging.getLogger(__name__)


def to_qcolor(color: tuple[float, float, float, float]) -> QColor:
    """Convert a normalized RGBA tuple to a QColor."""
    r, g, b, a = color
    return QColor.fromRgbF(r, g, b, a)


class CardItem(QGraphicsRectItem):
    """A card centered on its own position, with an optional label."""

    def __init__(self, width: float, height: float, theme: CardTheme) -> None:
        """Initialize card item.

        Args:
            width: Card width in scene units
            height: Card height in scene units
            theme: Theme providing card colors
        """
        super().__init__(QRectF(-width / 2, -height / 2, width, height))
        self._theme = theme
        self._label = QGraphicsSimpleTextItem(self)
        self._label.setFont(QFont("Sans", 10))
        self.apply_theme(theme)

    def apply_theme(self, theme: CardTheme) -> None:
        """Repaint the card with a theme."""
        self._theme = theme
        self.setBrush(QBrush(to_qcolor(theme.card_color)))
        self.setPen(QPen(to_qcolor(theme.border_color), 1.5))
        self._label.setBrush(QBrush(to_qcolor(theme.label_color)))

    def set_label(self, text: str) -> None:
        """Set the text drawn at the card's top left corner."""
        self._label.setText(text)
        rect = self.rect()
        self._label.setPos(rect.left() + 4, rect.top() + 2)

    @property
    def label(self) -> str:
        return self._label.text()

    def set_highlighted(self, highlighted: bool) -> None:
        """Draw the border in the highlight color."""
        color = self._theme.highlight_color if highlighted else self._theme.border_color
        self.setPen(QPen(to_qcolor(color), 3.0 if highlighted else 1.5))


class SceneVisualFactory:
    """Visual factory placing cards in a QGraphicsScene."""

    def __init__(
        self,
        scene: QGraphicsScene,
        card_size: tuple[float, float] = (70.0, 100.0),
        theme: CardTheme | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            scene: Scene that owns the card items
            card_size: Card width and height in scene units
            theme: Card theme (uses default if None)
        """
        self._scene = scene
        self._card_size = card_size
        self._theme = theme or DEFAULT_THEME
        self._items: list[CardItem] = []

    @property
    def items(self) -> list[CardItem]:
        """Cards currently alive, in creation order."""
        return list(self._items)

    def set_theme(self, theme: CardTheme) -> None:
        """Repaint every live card with a new theme."""
        self._theme = theme
        for item in self._items:
            item.apply_theme(theme)

    def create_visual(self) -> CardItem:
        width, height = self._card_size
        item = CardItem(width, height, self._theme)
        # Later cards overlap earlier ones
        item.setZValue(len(self._items))
        self._scene.addItem(item)
        self._items.append(item)
        return item

    def destroy_visual(self, handle: CardItem) -> None:
        if handle is None or handle not in self._items:
            logger.warning("Ignoring destroy request for an unknown card")
            return
        self._items.remove(handle)
        self._scene.removeItem(handle)

    def set_local_position(self, handle: CardItem, position: tuple[float, float]) -> None:
        x, y = position
        handle.setPos(x, -y)

    def set_local_rotation(self, handle: CardItem, angle: float) -> None:
        handle.setTransformOriginPoint(0.0, 0.0)
        handle.setRotation(-angle)
