"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from quake_risk import cli as cli_module


@pytest.fixture
def runner(monkeypatch):
    # Keep the root logger untouched between tests
    monkeypatch.setattr(cli_module, "configure_logging", lambda level: None)
    return CliRunner()


def _predict_args(lat="35.6762", lon="139.6503", depth="15.0", days="1", mag="6.2"):
    return ["predict", "--lat", lat, "--lon", lon, "--depth", depth, "--days", days, "--magnitude", mag]


class TestCli:
    def test_classify(self, runner):
        result = runner.invoke(cli_module.cli, ["classify", "5.0", "60", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "high"

    def test_classify_drops_after_day_two(self, runner):
        result = runner.invoke(cli_module.cli, ["classify", "5.0", "60", "3"])
        assert result.output.strip() == "medium"

    def test_classify_rejects_nan(self, runner):
        result = runner.invoke(cli_module.cli, ["classify", "nan", "10", "1"])
        assert result.exit_code == 1
        assert "Invalid Input" in result.output

    def test_classify_rejects_out_of_range(self, runner):
        result = runner.invoke(cli_module.cli, ["classify", "--", "50", "-900", "-5"])
        assert result.exit_code == 1
        assert "Range Error" in result.output

    def test_predict_json(self, runner):
        result = runner.invoke(cli_module.cli, _predict_args() + ["--json"])
        assert result.exit_code == 0
        body = json.loads(result.output)
        assert body["combined"]["score"] == pytest.approx(83.5)
        assert body["refined"]["category"] == "high"

    def test_predict_table(self, runner):
        result = runner.invoke(cli_module.cli, _predict_args(depth="45.0", days="8", mag="4.8"))
        assert result.exit_code == 0
        assert "55.0" in result.output

    def test_predict_rejects_out_of_japan(self, runner):
        result = runner.invoke(cli_module.cli, _predict_args(lat="10"))
        assert result.exit_code == 1
        assert "Location Error" in result.output

    def test_predict_with_catalog_file(self, runner, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{
            "city": "Test", "latitude": 35.6762, "longitude": 139.6503,
            "depth_km": 10.0, "avg_magnitude": 6.0, "days_since_last_eq": 1,
        }]), encoding="utf-8")
        result = runner.invoke(cli_module.cli, _predict_args() + ["--catalog", str(path), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["refined"]["nearest_location_name"] == "Test"

    def test_catalog_listing(self, runner):
        result = runner.invoke(cli_module.cli, ["catalog"])
        assert result.exit_code == 0
        assert "Sapporo" in result.output

    def test_catalog_single_city(self, runner):
        result = runner.invoke(cli_module.cli, ["catalog", "--name", "sendai"])
        assert result.exit_code == 0
        assert "Sendai" in result.output
        assert "Sapporo" not in result.output

    def test_catalog_unknown_city(self, runner):
        result = runner.invoke(cli_module.cli, ["catalog", "--name", "Atlantis"])
        assert result.exit_code == 1
        assert "City not found" in result.output

    def test_samples(self, runner):
        result = runner.invoke(cli_module.cli, ["samples"])
        assert result.exit_code == 0
        assert "83.5" in result.output
        assert "25.0" in result.output
