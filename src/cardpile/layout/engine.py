"""Layout engine for card piles."""

import logging
from collections.abc import Callable

import numpy as np

from cardpile.layout.curve import evaluate_curve
from cardpile.layout.factory import NullVisualFactory, VisualFactory
from cardpile.layout.transform import NodeTransform
from cardpile.model.controls import PileControls
from cardpile.model.node import PileNode
from cardpile.model.settings import PileSettings

logger = logging.getLogger(__name__)


class PileLayoutEngine:
    """Engine keeping a list of nodes laid out along a curved line.

    The number of nodes is never stored; it is derived from the controls
    on every read. Call update() after changing settings, controls or
    offsets to reconcile the node list and recompute every transform.
    There is no need to update every frame when nothing changed.
    """

    def __init__(
        self,
        settings: PileSettings | None = None,
        factory: VisualFactory | None = None,
        controls: PileControls | None = None,
    ) -> None:
        """Initialize the layout engine.

        Args:
            settings: Pile settings (uses defaults if None)
            factory: Visual factory for node handles (headless if None)
            controls: Control amounts (uses defaults if None)

        Raises:
            SettingsError: If the settings are invalid
        """
        self.settings = settings or PileSettings()
        self.settings.validate()
        self.controls = controls or PileControls()
        self._factory: VisualFactory = factory or NullVisualFactory()
        self._nodes: list[PileNode] = []
        self._origin: tuple[float, float] = (0.0, 0.0)

        # Callbacks
        self._on_node_added: Callable[[int], None] | None = None
        self._on_node_removing: Callable[[int], None] | None = None
        self._on_node_removed: Callable[[int], None] | None = None

    @property
    def node_count(self) -> int:
        """Target number of nodes derived from the controls."""
        return self.current_node_count()

    def current_node_count(self) -> int:
        """Get the target number of nodes.

        Returns:
            nodes_amount * max_nodes rounded to the nearest integer
        """
        return round(self.controls.nodes_amount * self.settings.max_nodes)

    def __len__(self) -> int:
        """Number of nodes currently held, as of the last update."""
        return len(self._nodes)

    @property
    def origin(self) -> tuple[float, float]:
        """Host origin used by the last update."""
        return self._origin

    def set_node_added_callback(self, callback: Callable[[int], None] | None) -> None:
        """Set callback fired once a new node has its transform applied."""
        self._on_node_added = callback

    def set_node_removing_callback(self, callback: Callable[[int], None] | None) -> None:
        """Set callback fired before a node is removed.

        The node can still be queried by index from this callback.
        """
        self._on_node_removing = callback

    def set_node_removed_callback(self, callback: Callable[[int], None] | None) -> None:
        """Set callback fired after a node has been removed.

        The index only tells where the node was; it no longer refers
        to a valid node.
        """
        self._on_node_removed = callback

    def update(self, origin: tuple[float, float] = (0.0, 0.0)) -> None:
        """Reconcile the node list, then update all node transforms.

        Args:
            origin: Local position of the host, added to every node
        """
        self._origin = (float(origin[0]), float(origin[1]))
        target = self.current_node_count()
        curve = evaluate_curve(target, self.settings, self.controls)

        delta = target - len(self._nodes)
        if delta > 0:
            self._grow(target, curve)
        elif delta < 0:
            self._shrink(target)

        self._evaluate_nodes(curve)

        if delta:
            logger.debug(f"Pile reconciled to {target} nodes ({delta:+d})")

    def _grow(self, target: int, curve: np.ndarray) -> None:
        """Append nodes at the tail until the list holds target nodes."""
        for index in range(len(self._nodes), target):
            node = PileNode(position=self._origin)
            node.visual = self._factory.create_visual()
            self._nodes.append(node)
            self._evaluate_node(index, curve)
            logger.debug(f"Created node {index}")

            if self._on_node_added:
                self._on_node_added(index)

    def _shrink(self, target: int) -> None:
        """Remove nodes from the tail one at a time."""
        while len(self._nodes) > target:
            index = len(self._nodes) - 1

            if self._on_node_removing:
                self._on_node_removing(index)

            node = self._nodes[index]
            self._factory.destroy_visual(node.visual)
            del self._nodes[index]
            logger.debug(f"Destroyed node {index}")

            if self._on_node_removed:
                self._on_node_removed(index)

    def _evaluate_nodes(self, curve: np.ndarray) -> None:
        """Update the transform of every node."""
        for index in range(len(self._nodes)):
            self._evaluate_node(index, curve)

    def _evaluate_node(self, index: int, curve: np.ndarray) -> None:
        """Apply the curve, origin and offsets to one node and its visual.

        Args:
            index: Node index
            curve: Curve transforms from evaluate_curve
        """
        node = self._nodes[index]
        x, y, angle = curve[index]
        origin_x, origin_y = self._origin
        offset_x, offset_y = self.settings.origin_offset
        node_x, node_y = node.position_offset

        node.position = (
            origin_x + float(x) + offset_x + node_x,
            origin_y + float(y) + offset_y + node_y,
        )
        node.rotation = float(angle)

        self._factory.set_local_position(node.visual, node.position)
        self._factory.set_local_rotation(node.visual, node.rotation)

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._nodes)

    def get_position(self, index: int) -> tuple[float, float]:
        """Get the local position of a node, offsets already applied.

        Args:
            index: Node index

        Returns:
            The position, or (0.0, 0.0) if index is out of range
        """
        if not self._is_valid_index(index):
            return (0.0, 0.0)
        return self._nodes[index].position

    def get_position_offset(self, index: int) -> tuple[float, float]:
        """Get the custom offset of a node.

        Args:
            index: Node index

        Returns:
            The offset, or (0.0, 0.0) if index is out of range
        """
        if not self._is_valid_index(index):
            return (0.0, 0.0)
        return self._nodes[index].position_offset

    def get_rotation(self, index: int) -> float:
        """Get the roll angle of a node in degrees.

        Args:
            index: Node index

        Returns:
            The angle, or 0.0 if index is out of range
        """
        if not self._is_valid_index(index):
            return 0.0
        return self._nodes[index].rotation

    def get_visual_handle(self, index: int) -> object | None:
        """Get the visual handle of a node.

        Args:
            index: Node index

        Returns:
            The handle, or None if index is out of range
        """
        if not self._is_valid_index(index):
            return None
        return self._nodes[index].visual

    def set_position_offset(self, index: int, offset: tuple[float, float]) -> None:
        """Set the custom offset of a node.

        Ignored if index is out of range. The offset shows up in
        positions after the next update().

        Args:
            index: Node index
            offset: Offset added to the node's curve position
        """
        if not self._is_valid_index(index):
            return
        self._nodes[index].position_offset = (float(offset[0]), float(offset[1]))

    def request_grow(self) -> None:
        """Raise the target by one node, up to max_nodes.

        Call update() afterwards to apply it.
        """
        self.controls.set_nodes_amount(self.controls.nodes_amount + 1.0 / self.settings.max_nodes)

    def request_shrink(self) -> None:
        """Lower the target by one node, down to zero.

        Call update() afterwards to apply it.
        """
        self.controls.set_nodes_amount(self.controls.nodes_amount - 1.0 / self.settings.max_nodes)

    def set_node_count(self, count: int) -> None:
        """Set the target as a node count instead of a fraction.

        Args:
            count: Desired number of nodes, clamped to [0, max_nodes]
        """
        self.controls.set_nodes_amount(count / self.settings.max_nodes)

    def transforms(self) -> list[NodeTransform]:
        """Get the transforms computed by the last update, in index order."""
        return [
            NodeTransform(x=node.position[0], y=node.position[1], angle=node.rotation)
            for node in self._nodes
        ]

    def clear(self) -> None:
        """Remove every node, firing the removal callbacks."""
        self.controls.set_nodes_amount(0.0)
        self.update(self._origin)
