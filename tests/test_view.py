"""Tests for the Qt preview: scene visuals and controller."""

import json

import pytest

from cardpile.layout.engine import PileLayoutEngine
from cardpile.model.controls import PileControls
from cardpile.model.settings import PileSettings


@pytest.fixture
def scene(qapp):
    from PyQt6.QtWidgets import QGraphicsScene

    return QGraphicsScene()


@pytest.fixture
def controller(qapp):
    from cardpile.controller.controller import Controller

    ctrl = Controller(PileSettings(max_nodes=10), PileControls(nodes_amount=0.3))
    ctrl.start()
    yield ctrl
    ctrl.window.close()


def test_scene_factory_creates_and_destroys_cards(scene):
    """Test cards are added to and removed from the scene."""
    from cardpile.view.visuals import SceneVisualFactory

    factory = SceneVisualFactory(scene)
    card = factory.create_visual()

    assert card.scene() is scene
    assert factory.items == [card]

    factory.destroy_visual(card)
    assert card.scene() is None
    assert factory.items == []

    # Unknown handles are ignored
    factory.destroy_visual(card)


def test_scene_factory_flips_y_and_rotation(scene):
    """Test y up / counter-clockwise transforms map to Qt coordinates."""
    from cardpile.view.visuals import SceneVisualFactory

    factory = SceneVisualFactory(scene)
    card = factory.create_visual()

    factory.set_local_position(card, (12.0, 30.0))
    factory.set_local_rotation(card, 15.0)

    assert (card.pos().x(), card.pos().y()) == (12.0, -30.0)
    assert card.rotation() == -15.0


def test_engine_drives_scene_cards(scene):
    """Test the engine places scene cards along the pile."""
    from cardpile.view.visuals import SceneVisualFactory

    factory = SceneVisualFactory(scene)
    engine = PileLayoutEngine(PileSettings(max_nodes=10), factory, PileControls(nodes_amount=0.3))
    engine.update()

    assert [card.pos().x() for card in factory.items] == [-150.0, 0.0, 150.0]
    assert [card.zValue() for card in factory.items] == [0.0, 1.0, 2.0]

    engine.clear()
    assert factory.items == []


def test_theme_lookup():
    """Test built-in themes resolve by identifier or display name."""
    from cardpile.view.theme import DARK_MODE, get_theme, list_themes

    assert "felt" in list_themes()
    assert get_theme("dark_mode") is DARK_MODE
    assert get_theme("Dark Mode") is DARK_MODE
    with pytest.raises(KeyError):
        get_theme("neon")


def test_controller_lays_out_initial_pile(controller):
    """Test starting the controller builds labelled cards."""
    cards = controller.factory.items

    assert len(controller.engine) == 3
    assert [card.label for card in cards] == ["1", "2", "3"]
    assert "Cards: 3 / 10" in controller.window.control_panel.stats_text


def test_controller_highlights_top_card(controller):
    """Test only the last card carries the highlight border."""
    widths = [card.pen().widthF() for card in controller.factory.items]
    assert widths == [1.5, 1.5, 3.0]

    controller.remove_node()
    widths = [card.pen().widthF() for card in controller.factory.items]
    assert widths == [1.5, 3.0]


def test_controller_forwards_node_signals(controller):
    """Test engine callbacks are re-emitted as Qt signals."""
    events = []
    controller.node_added.connect(lambda i: events.append(("added", i)))
    controller.node_removing.connect(lambda i: events.append(("removing", i)))
    controller.node_removed.connect(lambda i: events.append(("removed", i)))
    counts = []
    controller.pile_updated.connect(counts.append)

    controller.add_node()
    controller.remove_node()
    controller.remove_node()

    assert events == [
        ("added", 3),
        ("removing", 3),
        ("removed", 3),
        ("removing", 2),
        ("removed", 2),
    ]
    assert counts == [4, 3, 2]


def test_controller_labels_toggle(controller):
    """Test hiding labels clears the text of every card."""
    controller.set_labels_visible(False)
    assert [card.label for card in controller.factory.items] == ["", "", ""]

    controller.add_node()
    assert controller.factory.items[-1].label == ""

    controller.set_labels_visible(True)
    assert [card.label for card in controller.factory.items] == ["1", "2", "3", "4"]


def test_controller_theme_switch(controller):
    """Test switching theme keeps the top card highlighted."""
    controller.set_theme("casino")
    assert controller.factory.items[-1].pen().widthF() == 3.0

    # Unknown names leave the theme unchanged
    controller.set_theme("neon")


def test_controller_load_settings(controller, tmp_path):
    """Test loading settings resizes the pile."""
    path = tmp_path / "pile.json"
    path.write_text(json.dumps({"settings": {"max_nodes": 20}}))

    controller.load_settings(path)

    assert controller.engine.settings.max_nodes == 20
    assert len(controller.engine) == 6


def test_controller_load_bad_settings_keeps_pile(controller, tmp_path):
    """Test a broken settings file does not touch the pile."""
    path = tmp_path / "pile.json"
    path.write_text("{broken")

    controller.load_settings(path)

    assert controller.engine.settings.max_nodes == 10
    assert len(controller.engine) == 3


def test_controller_save_settings(controller, tmp_path):
    """Test the current settings are written to disk."""
    path = tmp_path / "out" / "pile.json"

    controller.save_settings(path)

    assert json.loads(path.read_text())["settings"]["max_nodes"] == 10


def test_controller_slider_amounts(controller):
    """Test panel amounts feed the controls and update the pile."""
    panel = controller.window.control_panel

    panel.nodes_amount_changed.emit(0.5)
    assert len(controller.engine) == 5

    panel.curvature_amount_changed.emit(-0.5)
    assert controller.engine.controls.curvature_amount == -0.5
    assert controller.engine.get_position(0)[1] < 0.0
