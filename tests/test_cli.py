"""Unit tests for the command line interface."""

import json
import sys
import types
from datetime import datetime
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from pywarehouse.__main__ import main, parse_args


@pytest.fixture
def inventory(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps({"plastic-bottle": 8.0, "glass": 2.0}))
    return path


def test_parse_args_defaults(inventory):
    args = parse_args([str(inventory)])

    assert (args.length, args.width, args.height) == (10.0, 10.0, 2.0)
    assert args.format == "table"
    assert not args.weights
    assert not args.view


def test_table_output(inventory, capsys):
    """Test the plain text report."""
    assert main([str(inventory)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Usage: 5.0%")
    assert "plastic-bottle" in out
    assert out.index("plastic-bottle") < out.index("glass")


def test_json_output(inventory, capsys):
    """Test that JSON output carries bounds, usage and placements."""
    assert main([str(inventory), "--format", "json", "--length", "12"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["bounds"] == {"length": 12.0, "width": 10.0, "height": 2.0}
    assert payload["usage"]["level"] == "normal"
    assert [p["category"] for p in payload["placements"]] == ["plastic-bottle", "glass"]
    assert len(payload["placements"][0]["center"]) == 3


def test_weights_flag(tmp_path, capsys):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"paper": 50}))

    assert main([str(path), "--weights", "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["placements"][0]["volume"] == pytest.approx(10.0)


def test_empty_inventory(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text("{}")

    assert main([str(path)]) == 0
    assert "Nothing to place" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_invalid_dimensions(inventory, capsys):
    """Test that non-positive warehouse dimensions are rejected."""
    assert main([str(inventory), "--length=-1"]) == 1
    assert "length" in capsys.readouterr().err


def test_non_positive_factor_is_rejected(inventory, capsys):
    assert main([str(inventory), "--weights", "--factor", "0"]) == 1
    assert "factor" in capsys.readouterr().err


def test_viewer_receives_factor_and_batch_dates(tmp_path, monkeypatch, capsys):
    """Test that --view hands the conversion factor and batch dates to the window."""
    path = tmp_path / "records.json"
    path.write_text(json.dumps([{"category": "paper", "weight": 20, "date": "2024-03-04"}]))
    calls = []

    def record_call(placements, bounds, title="", factor=None, oldest=None):
        calls.append((placements, factor, oldest))
        return 0

    fake_viewer = types.ModuleType("pywarehouse.view.viewer")
    fake_viewer.show_viewer = record_call
    monkeypatch.setitem(sys.modules, "pywarehouse.view.viewer", fake_viewer)

    assert main([str(path), "--factor", "0.5", "--view"]) == 0

    (placements, factor, oldest), = calls
    assert factor == 0.5
    assert placements[0].volume == pytest.approx(10.0)
    assert oldest == {"paper": datetime(2024, 3, 4)}


def test_table_shows_alert_and_oldest_batch(tmp_path, capsys):
    """Test that a nearly full warehouse prints its alert and batch dates."""
    path = tmp_path / "records.json"
    path.write_text(json.dumps([
        {"category": "plastic", "weight": 800, "date": "2024-02-01"},
        {"category": "plastic", "weight": 100, "date": "2023-12-24"},
        {"category": "glass", "weight": 50},
    ]))

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    # 190 of 200 m³
    assert out.startswith("Usage: 95.0%")
    assert "URGENT: Capacity critical." in out
    assert "  - Schedule a transfer to the central waste bank within 24 hours" in out
    assert "2023-12-24" in out


def test_json_includes_alert_and_oldest_batches(tmp_path, capsys):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([{"category": "plastic", "weight": 650, "date": "2024-02-01T08:00:00"}]))

    assert main([str(path), "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["usage"]["alert"]["level"] == "notice"
    assert payload["oldest_batches"] == {"plastic": "2024-02-01T08:00:00"}


def test_quiet_warehouse_has_no_alert(inventory, capsys):
    assert main([str(inventory), "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["usage"]["alert"] is None
    assert payload["oldest_batches"] == {}
