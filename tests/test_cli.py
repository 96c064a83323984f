"""Tests for the cardpile command line."""

import json

import pytest

from cardpile.__main__ import dump_layout, main, parse_args
from cardpile.model.controls import PileControls
from cardpile.model.settings import PileSettings, save_settings


def test_parse_defaults():
    """Test argument defaults."""
    args = parse_args([])

    assert args.settings is None
    assert args.nodes == 0.0
    assert args.spacing == 1.0
    assert args.curvature == 0.0
    assert not args.dump


def test_dump_prints_layout(capsys):
    """Test --dump prints every node as JSON."""
    code = main(["--dump", "--max-nodes", "10", "--nodes", "0.3"])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["node_count"] == 3
    assert [node["index"] for node in output["nodes"]] == [0, 1, 2]
    assert [node["x"] for node in output["nodes"]] == [-150.0, 0.0, 150.0]


def test_dump_uses_settings_file(tmp_path, capsys):
    """Test settings are read from file and overrides applied on top."""
    path = save_settings(PileSettings(max_nodes=4, origin_offset=(0.0, 10.0)), tmp_path / "pile.json")

    code = main(["--dump", "--settings", str(path), "--nodes", "0.25"])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["node_count"] == 1
    assert output["nodes"][0] == {"index": 0, "x": 0.0, "y": 10.0, "angle": 0.0}


def test_out_of_range_amount(capsys):
    """Test amounts outside their range are reported."""
    code = main(["--dump", "--nodes", "2"])

    assert code == 1
    assert "nodes" in capsys.readouterr().err


def test_bad_settings_file(tmp_path, capsys):
    """Test an unreadable settings file is reported."""
    path = tmp_path / "pile.json"
    path.write_text("{broken")

    code = main(["--dump", "--settings", str(path)])

    assert code == 1
    assert "Error" in capsys.readouterr().err


def test_settings_file_not_utf8(tmp_path, capsys):
    """Test a settings file with undecodable bytes is reported."""
    path = tmp_path / "pile.json"
    path.write_bytes(b"\xff\xfe\x80{")

    code = main(["--dump", "--settings", str(path)])

    assert code == 1
    assert "Error" in capsys.readouterr().err


def test_bad_max_nodes(capsys):
    """Test a pile without nodes is rejected."""
    assert main(["--dump", "--max-nodes", "0"]) == 1


def test_dump_layout_matches_curve():
    """Test the dump of a curved pile."""
    settings = PileSettings(max_nodes=2, max_curvature=1.0)
    controls = PileControls(nodes_amount=1.0, curvature_amount=1.0)

    output = dump_layout(settings, controls)

    # Two nodes 200 wide: x = -100 and 100, y = 0.001 * 100^2
    assert output["node_count"] == 2
    assert output["nodes"][0]["x"] == -100.0
    assert output["nodes"][1]["y"] == pytest.approx(10.0)
    assert output["nodes"][1]["angle"] == pytest.approx(10.0)
