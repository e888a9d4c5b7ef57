"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid project files pass validation
- Invalid project files produce errors
- Domain warnings (appliance widths, front fallbacks, unfilled runs)
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from cabinet_builder.application.config import load_config
from cabinet_builder.cli.commands import check_project
from cabinet_builder.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_project(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_kitchen.json")])
        assert result.exit_code == 0
        assert "Validation passed." in result.output

    def test_warnings_exit_with_two(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "warnings.json")])
        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "cabinets[0]: Range width" in result.output
        assert "runs[0]:" in result.output
        assert "Validation passed with warnings." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 4" in result.output

    def test_schema_errors_show_json_path(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_schema.json")])
        assert result.exit_code == 1
        assert "cabinets[0].cabinet_type" in result.output
        assert "Validation failed." in result.output


class TestCheckProject:
    """Tests for the domain-level project checks."""

    def test_clean_project(self) -> None:
        errors, warnings = check_project(load_config(FIXTURES_PATH / "valid_kitchen.json"))
        assert errors == []
        assert warnings == []

    def test_warnings_are_prefixed(self) -> None:
        errors, warnings = check_project(load_config(FIXTURES_PATH / "warnings.json"))
        assert errors == []
        assert any(w.startswith("cabinets[0]: Range width") for w in warnings)
        assert any(w.startswith("cabinets[1]:") for w in warnings)
        assert any(w.startswith("runs[0]:") and "unfilled" in w for w in warnings)
