"""Unit tests for pile settings, controls and their persistence."""

import json

import pytest

from cardpile.errors import SettingsError, ValidationError, validate_range
from cardpile.model.controls import PileControls
from cardpile.model.settings import PileSettings, load_settings, save_settings


def test_default_settings():
    """Test defaults match the stock pile."""
    settings = PileSettings()

    assert settings.max_nodes == 100
    assert settings.max_curvature == 1.0
    assert settings.max_node_spacing == 100.0
    assert settings.max_width == 800.0
    assert settings.rotation_offset == 0.0
    assert settings.origin_offset == (0.0, 0.0)
    settings.validate()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_nodes": 0},
        {"max_nodes": -3},
        {"max_width": -1.0},
        {"max_node_spacing": -0.5},
        {"max_width": float("nan")},
        {"max_curvature": float("inf")},
        {"origin_offset": (0.0, float("nan"))},
    ],
)
def test_validate_rejects_bad_bounds(kwargs):
    """Test out of range bounds are reported."""
    with pytest.raises(SettingsError):
        PileSettings(**kwargs).validate()


def test_dict_round_trip():
    """Test settings survive conversion to and from a dictionary."""
    settings = PileSettings(max_nodes=12, max_curvature=2.5, origin_offset=(3.0, -4.0))

    data = settings.to_dict()
    assert data["origin_offset"] == [3.0, -4.0]
    assert PileSettings.from_dict(data) == settings


def test_from_dict_fills_defaults_and_ignores_unknown():
    """Test partial mappings keep defaults and extra keys are skipped."""
    settings = PileSettings.from_dict({"max_width": 500, "colour": "red"})

    assert settings.max_width == 500.0
    assert isinstance(settings.max_width, float)
    assert settings.max_nodes == 100


@pytest.mark.parametrize(
    "data",
    [
        {"max_nodes": 2.5},
        {"max_nodes": True},
        {"max_width": "wide"},
        {"origin_offset": [1.0]},
        {"origin_offset": [1.0, "up"]},
        {"max_width": float("nan")},
        {"rotation_offset": float("-inf")},
        {"origin_offset": [float("nan"), 0.0]},
        ["not", "a", "mapping"],
    ],
)
def test_from_dict_rejects_bad_types(data):
    """Test values of the wrong type raise a settings error."""
    with pytest.raises(SettingsError):
        PileSettings.from_dict(data)


def test_save_and_load(tmp_path):
    """Test settings saved to disk load back unchanged."""
    path = tmp_path / "nested" / "pile.json"
    settings = PileSettings(max_nodes=7, rotation_offset=-12.0)

    assert save_settings(settings, path) == path
    assert json.loads(path.read_text())["version"] == "1.0"
    assert load_settings(path) == settings


def test_load_top_level_mapping(tmp_path):
    """Test a plain mapping without the version envelope is accepted."""
    path = tmp_path / "pile.json"
    path.write_text(json.dumps({"max_nodes": 5}))

    assert load_settings(path).max_nodes == 5


def test_load_missing_file(tmp_path):
    """Test a missing file falls back to defaults unless strict."""
    path = tmp_path / "missing.json"

    assert load_settings(path) == PileSettings()
    with pytest.raises(SettingsError):
        load_settings(path, strict=True)


def test_load_broken_file(tmp_path):
    """Test unreadable or invalid files fall back to defaults unless strict."""
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"settings": {"max_nodes": 0}}))

    assert load_settings(broken) == PileSettings()
    assert load_settings(invalid) == PileSettings()
    with pytest.raises(SettingsError):
        load_settings(broken, strict=True)
    with pytest.raises(SettingsError):
        load_settings(invalid, strict=True)


def test_controls_are_clamped():
    """Test control amounts stay within their ranges."""
    controls = PileControls(nodes_amount=1.5, node_spacing_amount=-0.2, curvature_amount=-3.0)

    assert controls.nodes_amount == 1.0
    assert controls.node_spacing_amount == 0.0
    assert controls.curvature_amount == -1.0

    controls.set_curvature_amount(0.25)
    controls.set_nodes_amount(-1.0)
    controls.set_node_spacing_amount(2.0)
    assert controls.curvature_amount == 0.25
    assert controls.nodes_amount == 0.0
    assert controls.node_spacing_amount == 1.0


def test_validate_range():
    """Test range validation reports the field name."""
    validate_range(0.5, 0.0, 1.0, "nodes")

    with pytest.raises(ValidationError) as exc_info:
        validate_range(1.5, 0.0, 1.0, "nodes")
    assert exc_info.value.field == "nodes"
    assert "nodes" in str(exc_info.value)


def test_load_file_with_non_finite_values(tmp_path):
    """Test NaN written by the JSON encoder is rejected on load."""
    path = tmp_path / "pile.json"
    path.write_text('{"settings": {"max_width": NaN, "max_nodes": 5}}')

    assert load_settings(path) == PileSettings()
    with pytest.raises(SettingsError):
        load_settings(path, strict=True)


def test_load_file_that_is_not_utf8(tmp_path):
    """Test undecodable bytes fall back to defaults unless strict."""
    path = tmp_path / "pile.json"
    path.write_bytes(b"\xff\xfe\x80{")

    assert load_settings(path) == PileSettings()
    with pytest.raises(SettingsError):
        load_settings(path, strict=True)
