"""Validate command for checking project files.

Checks a JSON project file for syntax and schema errors, then builds every
cabinet specification without emitting geometry to surface domain errors
and warnings (non-standard appliance widths, front config fallbacks).
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinet_builder.application.config import (
    ConfigError,
    ProjectConfiguration,
    config_to_cabinet_spec,
    config_to_run,
    load_config,
)
from cabinet_builder.domain.front_config import resolve_sections


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a cabinet project file.

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors (cannot be built)
        2 - Project is valid but has warnings

    Example:
        cabinet-builder validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    errors, warnings = check_project(config)

    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()

    if errors:
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)
    if warnings:
        typer.echo("Validation passed with warnings.")
        raise typer.Exit(code=2)
    typer.echo("Validation passed.")


def check_project(config: ProjectConfiguration) -> tuple[list[str], list[str]]:
    """Domain-level checks for every cabinet and run in a project.

    Returns:
        Tuple of (errors, warnings), each prefixed with the item's JSON path.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for i, cabinet_config in enumerate(config.cabinets):
        where = f"cabinets[{i}]"
        spec = config_to_cabinet_spec(cabinet_config)
        result = spec.validate()
        errors.extend(f"{where}: {e}" for e in result.errors)
        warnings.extend(f"{where}: {w}" for w in result.warnings)
        if result.is_valid:
            plan = resolve_sections(
                spec.front_config,
                spec.interior_height,
                spec.custom_drawer_heights,
                spec.single_door,
            )
            warnings.extend(f"{where}: {d.message}" for d in plan.diagnostics)

    for i, run_config in enumerate(config.runs):
        where = f"runs[{i}]"
        try:
            run = config_to_run(run_config)
        except ValueError as e:
            errors.append(f"{where}: {e}")
            continue
        run.auto_layout()
        if run.unfilled_length > 0:
            warnings.append(
                f"{where}: {run.unfilled_length:.3f}\" left unfilled "
                f"(remainders too narrow for a filler)"
            )

    return errors, warnings


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
