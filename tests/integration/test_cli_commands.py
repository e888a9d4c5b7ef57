"""Integration tests for the cabinet, run and build CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cabinet_builder.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestCabinetCommand:
    """Tests for the cabinet command."""

    def test_default_base_cabinet(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinet"])
        assert result.exit_code == 0, result.output
        assert "Built" in result.output
        assert "in Run 1" in result.output

    def test_verbose_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--verbose", "cabinet", "--type", "wall"])
        assert result.exit_code == 0, result.output

    def test_list_boxes(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinet", "--fronts", "drawer_bank_3", "--list"])
        assert result.exit_code == 0, result.output
        assert "Carcass/Bottom" in result.output
        assert "Hardware/Pull 3" in result.output

    def test_corner_cabinet(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["cabinet", "--type", "corner_base", "--corner", "outside_36", "--list"]
        )
        assert result.exit_code == 0, result.output
        assert "Carcass/Return/Wall Side" in result.output

    def test_appliance_width_warning(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinet", "--type", "range", "--width", "33"])
        assert result.exit_code == 0, result.output
        assert "Warning: Range width" in result.output

    def test_front_fallback_note(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinet", "--fronts", "banana"])
        assert result.exit_code == 0, result.output
        assert "Note: [config_fallback]" in result.output

    def test_unknown_type(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinet", "--type", "hutch"])
        assert result.exit_code == 1
        assert "cabinet_type" in result.output

    def test_bad_drawer_heights(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["cabinet", "--fronts", "custom_drawers", "--drawer-heights", "6,tall"]
        )
        assert result.exit_code == 1
        assert "custom_drawer_heights[1]" in result.output

    def test_json_export(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["cabinet", "--format", "json", "--output", str(tmp_path)]
        )
        assert result.exit_code == 0, result.output
        assert "Exported files:" in result.output
        data = json.loads((tmp_path / "cabinet.json").read_text())
        assert data["box_count"] > 0

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["cabinet", "--format", "obj"])
        assert result.exit_code == 1
        assert "Unknown formats: obj" in result.output


class TestRunCommand:
    """Tests for the run command."""

    def test_run_around_range(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "--length", "120", "--gap", "48:30:Range"])
        assert result.exit_code == 0, result.output
        assert "2 cabinets" in result.output
        assert "Filler" not in result.output
        assert "x=  78.000" in result.output

    def test_filler_listed(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "--length", "100"])
        assert result.exit_code == 0, result.output
        assert "1 fillers" in result.output
        assert "x=  96.000  w=4" in result.output

    def test_unfilled_remainder_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "-l", "48.25"])
        assert result.exit_code == 0, result.output
        assert "Unfilled: 0.250" in result.output

    def test_restricted_widths(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "-l", "66", "--widths", "24,18"])
        assert result.exit_code == 0, result.output
        assert "w=18" in result.output

    def test_bad_gap(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "-l", "120", "--gap", "48"])
        assert result.exit_code == 1
        assert "Invalid gap" in result.output

    def test_overlapping_gaps(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["run", "-l", "120", "-g", "10:30:Range", "-g", "30:24:Dishwasher"]
        )
        assert result.exit_code == 1
        assert "overlap" in result.output

    def test_corner_run_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["run", "-l", "96", "--type", "corner_base"])
        assert result.exit_code == 1

    def test_export_named_after_run(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["run", "-l", "96", "--name", "Sink", "--format", "dxf", "-o", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "Sink.dxf").exists()


class TestBuildCommand:
    """Tests for the build command."""

    def test_build_project(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["build", str(FIXTURES_PATH / "valid_kitchen.json"), "--output", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert "in Sink Wall" in result.output
        assert "in Run 2" in result.output
        data = json.loads((tmp_path / "kitchen.json").read_text())
        labels = {box["label"] for box in data["boxes"]}
        assert "Countertop/Run Slab" in labels
        assert "Carcass/Toe Kick/Corner" in labels

    def test_format_override(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "build",
                str(FIXTURES_PATH / "valid_kitchen.json"),
                "--format",
                "stl,dxf",
                "-o",
                str(tmp_path),
            ],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "kitchen.stl").exists()
        assert (tmp_path / "kitchen.dxf").exists()
        assert not (tmp_path / "kitchen.json").exists()

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["build", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output
