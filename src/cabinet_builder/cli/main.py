"""Typer CLI for cabinet geometry generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cabinet_builder.application import BuildOutput, ProjectOutput, ServiceFactory
from cabinet_builder.application.config import (
    ConfigError,
    load_cabinet_request,
    load_config,
    load_run_config,
)
from cabinet_builder.cli.commands import display_load_error, validate_command
from cabinet_builder.infrastructure.exporters import ExporterRegistry, ExportManager


def _parse_formats(formats_str: str | None) -> list[str]:
    """Parse a comma-separated format list ("all" selects every exporter)."""
    if not formats_str:
        return []
    if formats_str.lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def _parse_gap(value: str) -> dict:
    """Parse an appliance gap given as ``position:width[:label]``."""
    parts = value.split(":", 2)
    if len(parts) < 2:
        typer.echo(
            f"Invalid gap '{value}': expected position:width[:label]", err=True
        )
        raise typer.Exit(code=1)
    try:
        gap: dict = {"position": float(parts[0]), "width": float(parts[1])}
    except ValueError:
        typer.echo(f"Invalid gap '{value}': position and width must be numbers", err=True)
        raise typer.Exit(code=1)
    if len(parts) == 3 and parts[2]:
        gap["label"] = parts[2]
    return gap


def _export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: BuildOutput | ProjectOutput,
) -> None:
    """Export the build through the exporter registry."""
    if not formats:
        return

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def _report(output: BuildOutput) -> None:
    """Print a build summary with its warnings and diagnostics."""
    if not output.is_valid:
        typer.echo("Errors:", err=True)
        for error in output.errors:
            typer.echo(f"  {error}", err=True)
        return

    typer.echo(output.summary())
    for warning in output.warnings:
        typer.echo(f"  Warning: {warning}")
    for diagnostic in output.diagnostics:
        typer.echo(f"  Note: {diagnostic}")
    if output.unfilled_length > 0:
        typer.echo(f"  Unfilled: {output.unfilled_length:.3f}\"")


def _list_boxes(output: BuildOutput | ProjectOutput) -> None:
    for box in output.boxes:
        bounds = box.bounds
        x0, y0, z0 = bounds.origin.as_tuple()
        x1, y1, z1 = bounds.max_point.as_tuple()
        typer.echo(
            f"  {box.label:<32} {box.material.value:<12} "
            f"x {x0:8.3f}..{x1:8.3f}  y {y0:8.3f}..{y1:8.3f}  z {z0:8.3f}..{z1:8.3f}"
        )


app = typer.Typer(
    name="cabinet-builder",
    help="Generate parametric cabinet and cabinet-run geometry.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log geometry decisions to stderr"),
    ] = False,
) -> None:
    """Generate parametric cabinet and cabinet-run geometry."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def cabinet(
    cabinet_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Cabinet kind: base, wall, tall, corner_base, ..."),
    ] = "base",
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Width in inches (default per kind)"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Depth in inches (default per kind)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Height in inches (default per kind)"),
    ] = None,
    frame_type: Annotated[
        str,
        typer.Option("--frame", help="Construction: frameless or framed"),
    ] = "frameless",
    corner_type: Annotated[
        str | None,
        typer.Option("--corner", help="Corner geometry: inside_24, inside_36, outside_24 or outside_36"),
    ] = None,
    fronts: Annotated[
        str,
        typer.Option("--fronts", "-f", help="Door/drawer config, e.g. 'doors', 'drawer_bank_3' or '2_drawers+door'"),
    ] = "doors",
    drawer_heights: Annotated[
        str | None,
        typer.Option("--drawer-heights", help="Comma-separated drawer heights, bottom first"),
    ] = None,
    single_door: Annotated[
        bool,
        typer.Option("--single-door", help="Use one door instead of a pair"),
    ] = False,
    countertop: Annotated[
        bool | None,
        typer.Option("--countertop/--no-countertop", help="Override the room's countertop default"),
    ] = None,
    backsplash: Annotated[
        bool | None,
        typer.Option("--backsplash/--no-backsplash", help="Override the room's backsplash default"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", help="Export formats: json, stl, dxf (comma-separated) or all"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Directory for exported files"),
    ] = None,
    list_boxes: Annotated[
        bool,
        typer.Option("--list", help="Print every generated box"),
    ] = False,
) -> None:
    """Build a single cabinet.

    Example:
        cabinet-builder cabinet --type base --width 30 --fronts drawer_bank_3 --format stl
    """
    formats = _parse_formats(output_format)

    data: dict = {
        "cabinet_type": cabinet_type,
        "frame_type": frame_type,
        "door_drawer_config": fronts,
        "single_door": single_door,
    }
    for key, value in (
        ("width", width),
        ("depth", depth),
        ("height", height),
        ("corner_type", corner_type),
        ("has_countertop", countertop),
        ("has_backsplash", backsplash),
    ):
        if value is not None:
            data[key] = value
    if drawer_heights:
        # Numeric coercion and its error reporting happen in the schema
        data["custom_drawer_heights"] = [
            h.strip() for h in drawer_heights.split(",") if h.strip()
        ]

    try:
        request = load_cabinet_request(data)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    output = ServiceFactory().create_build_cabinet_command().execute(request)
    _report(output)
    if not output.is_valid:
        raise typer.Exit(code=1)
    if list_boxes:
        _list_boxes(output)
    _export(formats, output_dir, "cabinet", output)


@app.command()
def run(
    length: Annotated[
        float,
        typer.Option("--length", "-l", help="Total run length in inches"),
    ],
    gaps: Annotated[
        list[str] | None,
        typer.Option("--gap", "-g", help="Appliance gap as position:width[:label] (repeatable)"),
    ] = None,
    cabinet_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Cabinet kind for auto-filled units"),
    ] = "base",
    frame_type: Annotated[
        str,
        typer.Option("--frame", help="Construction: frameless or framed"),
    ] = "frameless",
    room: Annotated[
        str,
        typer.Option("--room", "-r", help="Room preset: kitchen, bathroom or closet"),
    ] = "kitchen",
    fronts: Annotated[
        str,
        typer.Option("--fronts", "-f", help="Door/drawer config for every cabinet"),
    ] = "doors",
    widths: Annotated[
        str | None,
        typer.Option("--widths", help="Comma-separated standard widths, largest first"),
    ] = None,
    countertop: Annotated[
        bool,
        typer.Option("--countertop/--no-countertop", help="Emit a continuous run countertop"),
    ] = True,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Run name"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", help="Export formats: json, stl, dxf (comma-separated) or all"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Directory for exported files"),
    ] = None,
    list_boxes: Annotated[
        bool,
        typer.Option("--list", help="Print every generated box"),
    ] = False,
) -> None:
    """Auto-fill a run of cabinets around appliance gaps.

    Example:
        cabinet-builder run --length 120 --gap 48:30:Range --format json,dxf
    """
    formats = _parse_formats(output_format)

    data: dict = {
        "name": name,
        "total_length": length,
        "cabinet_type": cabinet_type,
        "frame_type": frame_type,
        "room": room,
        "door_drawer_config": fronts,
        "appliance_gaps": [_parse_gap(g) for g in gaps or []],
        "include_countertop": countertop,
    }
    if widths:
        try:
            data["standard_widths"] = [
                float(w.strip()) for w in widths.split(",") if w.strip()
            ]
        except ValueError:
            typer.echo(f"Invalid widths '{widths}'", err=True)
            raise typer.Exit(code=1)

    try:
        request = load_run_config(data)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    output = ServiceFactory().create_build_run_command().execute(request)
    _report(output)
    if not output.is_valid:
        raise typer.Exit(code=1)
    for spec in output.cabinets:
        typer.echo(f"  {spec.group_name:<24} x={spec.position.x:8.3f}  w={spec.width:g}")
    for filler in output.filler_strips:
        typer.echo(f"  {'Filler':<24} x={filler.position:8.3f}  w={filler.width:g}")
    if list_boxes:
        _list_boxes(output)
    _export(formats, output_dir, output.run_name or "run", output)


@app.command()
def build(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        str | None,
        typer.Option("--format", help="Override the file's export formats"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Override the file's output directory"),
    ] = None,
) -> None:
    """Build every run and cabinet described by a project file.

    Example:
        cabinet-builder build kitchen.json --format all -o out/
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    formats = (
        _parse_formats(output_format)
        if output_format
        else list(config.output.formats)
    )
    if output_dir is None and config.output.output_dir:
        output_dir = Path(config.output.output_dir)

    factory = ServiceFactory(room_name=config.room_name)
    project = factory.create_build_project_command().execute(config)
    for output in project.outputs:
        _report(output)

    if not project.is_valid:
        typer.echo("Build failed.", err=True)
        raise typer.Exit(code=1)
    _export(formats, output_dir, factory.context.material_suffix.lower() or "project", project)


if __name__ == "__main__":
    app()
