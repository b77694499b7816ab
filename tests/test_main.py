import argparse
import json

import pytest

import main
from ecosim.state import EnvironmentalState


def test_parse_assignments():
    assert main.parse_assignments(["co2Levels=450", "forestCover = 12.5"]) == {
        "co2Levels": 450.0,
        "forestCover": 12.5,
    }


def test_parse_assignments_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_assignments(["co2Levels"])
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_assignments(["co2Levels=high"])


def test_headless_run_exports_summary(tmp_path):
    out = tmp_path / "results.json"
    summary = main.run_headless(120, EnvironmentalState(), seed=42, export_json=str(out), frame_rate=60)

    assert summary.elapsed_seconds == 2
    data = json.loads(out.read_text())
    assert data["xpEarned"] == 96
    assert data["finalMetrics"]["speciesCount"] == 1320


def test_cli_headless_with_overrides(tmp_path):
    out = tmp_path / "results.json"
    main.main(["--headless", "--frames", "10", "--seed", "1", "--set", "co2Levels=480", "--export-json", str(out)])
    data = json.loads(out.read_text())
    assert data["finalState"]["co2Levels"] == 480
    assert data["finalMetrics"]["airQuality"] == "Moderate"


def test_cli_rejects_unknown_parameter():
    with pytest.raises(SystemExit):
        main.main(["--headless", "--set", "salinity=3"])
