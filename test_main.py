"""End-to-end tests for the calendar-report command."""

import json

import pytest
from loguru import logger
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()


@pytest.fixture
def no_settings(tmp_path, monkeypatch):
    path = str(tmp_path / "absent.json")
    monkeypatch.setenv("CALENDAR_REPORT_SETTINGS", path)
    return path


class TestCli:
    def test_default_year(self, no_settings):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Target Year: 2025" in result.output
        assert "             January 2025" in result.output
        assert "            December 2025" in result.output
        assert "Weekend Percentage: 28.5%" in result.output
        assert "CALENDAR GENERATION COMPLETED SUCCESSFULLY" in result.output
        assert "Months Generated: 12" in result.output

    def test_year_option(self, no_settings):
        result = runner.invoke(app, ["--year", "2024"])
        assert result.exit_code == 0
        assert "Total Days: 366" in result.output
        assert "Leap Year Status: TRUE" in result.output

    @pytest.mark.parametrize("year", ["1899", "2101"])
    def test_out_of_range_year_exits_1(self, no_settings, year):
        result = runner.invoke(app, ["--year", year])
        assert result.exit_code == 1
        assert "ERROR: Invalid calendar parameters detected." in result.output
        assert "PROCESSING MONTH" not in result.output

    def test_progress_can_be_hidden(self, no_settings):
        result = runner.invoke(app, ["--no-progress", "--quiet-months"])
        assert result.exit_code == 0
        assert "Progress Bar" not in result.output
        assert "Month Analysis" not in result.output
        assert "PROCESSING MONTH: 12 (December)" in result.output

    def test_settings_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"year": 2000, "show_progress": False}), encoding="utf-8")
        result = runner.invoke(app, ["--settings", str(path)])
        assert result.exit_code == 0
        assert "Target Year: 2000" in result.output
        assert "Progress Bar" not in result.output

    def test_year_option_beats_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"year": 2000}), encoding="utf-8")
        result = runner.invoke(app, ["--settings", str(path), "--year", "2030"])
        assert result.exit_code == 0
        assert "Target Year: 2030" in result.output
