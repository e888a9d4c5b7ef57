"""Application commands (use cases) for cabinet generation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cabinet_builder.application.config import (
    CabinetRequestConfig,
    ConnectionMode,
    ProjectConfiguration,
    RunConfig,
    config_to_cabinet_spec,
    config_to_run,
)
from cabinet_builder.application.context import RunContext
from cabinet_builder.application.dtos import BuildOutput, ProjectOutput
from cabinet_builder.application.run_registry import RunRegistry
from cabinet_builder.contracts.renderer import MaterialManager, Renderer
from cabinet_builder.domain.constants import FILLER_THICKNESS, WALL_MOUNTING_HEIGHT
from cabinet_builder.domain.entities import CabinetSpec
from cabinet_builder.domain.exceptions import (
    EmissionError,
    InvalidSpecError,
    RunNotFoundError,
)
from cabinet_builder.domain.results import Diagnostic, DiagnosticKind, GeometryResult
from cabinet_builder.domain.services import (
    BoxCollector,
    CabinetRun,
    countertop_for_cabinet,
    countertop_for_run,
    decompose,
    plan_fronts,
)
from cabinet_builder.domain.value_objects import MaterialTag, OrientedBox, Point3D

logger = logging.getLogger(__name__)


def generate_cabinet_geometry(
    spec: CabinetSpec, include_countertop: bool | None = None
) -> GeometryResult:
    """Carcass, fronts and (optionally) countertop for one cabinet.

    Args:
        spec: Cabinet specification.
        include_countertop: Override the spec's countertop flag.

    Returns:
        GeometryResult in cabinet-local coordinates.

    Raises:
        InvalidSpecError: If the spec fails validation.
    """
    result = decompose(spec).merged(plan_fronts(spec))
    wants_countertop = spec.has_countertop if include_countertop is None else include_countertop
    if wants_countertop:
        result = result.merged(countertop_for_cabinet(spec))
    return result


def filler_geometry(run: CabinetRun, origin: Point3D, elevation: float) -> GeometryResult:
    """Filler panels for a laid-out run, in document coordinates."""
    c = BoxCollector()
    for i, filler in enumerate(run.filler_strips, start=1):
        c.box(
            f"Carcass/Filler {i}",
            MaterialTag.BOX,
            origin.offset(dx=filler.position, dz=elevation),
            filler.width,
            FILLER_THICKNESS,
            filler.height,
        )
    return c.result()


class _Emitter:
    """Hands boxes to a renderer inside one operation.

    A box the renderer rejects with ``EmissionError`` is a soft failure:
    it is counted and recorded, and the operation continues. Any other
    exception aborts the operation and propagates.
    """

    def __init__(self, renderer: Renderer, materials: MaterialManager) -> None:
        self.renderer = renderer
        self.materials = materials

    def emit(
        self,
        operation: str,
        items: Sequence[tuple[OrientedBox, str]],
        output: BuildOutput,
    ) -> list[OrientedBox]:
        accepted: list[OrientedBox] = []
        self.renderer.start_operation(operation)
        try:
            for box, group in items:
                material = self.materials.get_material(box.material)
                try:
                    self.renderer.emit_box(box, material, group)
                except EmissionError as e:
                    logger.warning(f"Failed to emit {box.label}: {e.reason}")
                    output.failed_count += 1
                    output.diagnostics.append(
                        Diagnostic(DiagnosticKind.EMISSION_FAILURE, e.reason, box.label)
                    )
                    continue
                accepted.append(box)
        except Exception:
            self.renderer.abort_operation()
            raise
        self.renderer.commit_operation()
        output.emitted_count += len(accepted)
        return accepted


class BuildCabinetCommand:
    """Command to build one cabinet into a run.

    The cabinet is validated, decomposed, placed after the run's existing
    cabinets and emitted in a single renderer operation.
    """

    def __init__(
        self,
        renderer: Renderer,
        materials: MaterialManager,
        registry: RunRegistry | None = None,
        context: RunContext | None = None,
    ) -> None:
        self.renderer = renderer
        self.materials = materials
        self.registry = registry if registry is not None else RunRegistry()
        self.context = context if context is not None else RunContext()

    def execute(
        self,
        request: CabinetRequestConfig | CabinetSpec,
        connection_mode: ConnectionMode | None = None,
        target_run: str | None = None,
    ) -> BuildOutput:
        """Execute the build.

        Args:
            request: Validated cabinet request or a ready CabinetSpec.
            connection_mode: Overrides the request's connection mode.
            target_run: Overrides the request's target run.

        Returns:
            BuildOutput; ``errors`` is non-empty when nothing was built.
        """
        output = BuildOutput()
        if isinstance(request, CabinetRequestConfig):
            spec = config_to_cabinet_spec(request)
            mode = connection_mode or request.connection_mode
            target = target_run or request.target_run
        else:
            spec = request
            mode = connection_mode or ConnectionMode.AUTO
            target = target_run

        validation = spec.validate()
        output.warnings.extend(validation.warnings)
        if not validation.is_valid:
            output.errors.extend(validation.errors)
            return output

        try:
            geometry = generate_cabinet_geometry(spec)
        except InvalidSpecError as e:
            output.errors.extend(e.errors)
            return output
        output.diagnostics.extend(geometry.diagnostics)

        previous_run = self.context.current_run
        known_runs = {r.name for r in self.registry.runs}
        try:
            record = self.registry.resolve(
                mode,
                self.context,
                target,
                kind=spec.kind,
                frame_type=spec.frame,
                flags={
                    "has_countertop": spec.has_countertop,
                    "has_backsplash": spec.has_backsplash,
                },
            )
        except (RunNotFoundError, ValueError) as e:
            output.errors.append(str(e))
            return output

        previous_depth = record.placement.reference_depth
        position = record.place(spec)
        group = f"{record.name}/{spec.group_name}"
        placed = [(box.translated(position), group) for box in geometry.boxes]

        try:
            accepted = _Emitter(self.renderer, self.materials).emit(
                f"Build {spec.group_name}", placed, output
            )
        except Exception as e:
            record.placement.remove(spec, previous_depth)
            if record.name not in known_runs:
                self.registry.remove(record.name)
            self.context.current_run = previous_run
            logger.error(f"Build of {spec.group_name} aborted: {e}")
            output.errors.append(f"Build aborted: {e}")
            return output

        for box in accepted:
            record.add_box(box)
        output.boxes = accepted
        output.cabinets = [spec]
        output.run_name = record.name
        logger.info(output.summary())
        return output


class BuildRunCommand:
    """Command to auto-fill and build a whole run."""

    def __init__(
        self,
        renderer: Renderer,
        materials: MaterialManager,
        registry: RunRegistry | None = None,
        context: RunContext | None = None,
    ) -> None:
        self.renderer = renderer
        self.materials = materials
        self.registry = registry if registry is not None else RunRegistry()
        self.context = context if context is not None else RunContext()

    def execute(
        self,
        request: RunConfig | CabinetRun,
        name: str | None = None,
        include_countertop: bool = True,
    ) -> BuildOutput:
        """Lay out the run and emit every cabinet, filler and countertop.

        Args:
            request: Validated run configuration or a CabinetRun.
            name: Run name; defaults to the configuration's name.
            include_countertop: Emit one continuous countertop (floor runs
                in rooms with countertops only).

        Returns:
            BuildOutput with placed cabinets and fillers.
        """
        output = BuildOutput()
        if isinstance(request, RunConfig):
            try:
                run = config_to_run(request)
            except ValueError as e:
                output.errors.append(str(e))
                return output
            name = name or request.name
            include_countertop = include_countertop and request.include_countertop
        else:
            run = request

        run.auto_layout()
        try:
            record = self.registry.create_run(
                name=name,
                room=self.context.room_name,
                kind=run.kind,
                frame_type=run.frame,
                flags={
                    "has_countertop": run.room.has_countertop,
                    "has_backsplash": run.room.has_backsplash,
                },
            )
        except ValueError as e:
            output.errors.append(str(e))
            return output
        previous_run = self.context.current_run
        self.context.current_run = record.name

        items: list[tuple[OrientedBox, str]] = []
        for spec in run.cabinets:
            geometry = generate_cabinet_geometry(spec, include_countertop=False)
            output.diagnostics.extend(geometry.diagnostics)
            position = record.placement.place_at(spec, spec.position.x)
            group = f"{record.name}/{spec.group_name}"
            items.extend((box.translated(position), group) for box in geometry.boxes)

        elevation = WALL_MOUNTING_HEIGHT if run.kind.is_wall_mounted else 0.0
        fillers = filler_geometry(run, record.origin, elevation)
        output.diagnostics.extend(fillers.diagnostics)
        items.extend((box, record.name) for box in fillers.boxes)

        if include_countertop and run.room.has_countertop and not run.kind.is_wall_mounted:
            top = countertop_for_run(run.cabinets, include_backsplash=run.room.has_backsplash)
            output.diagnostics.extend(top.diagnostics)
            items.extend((box, record.name) for box in top.boxes)

        try:
            accepted = _Emitter(self.renderer, self.materials).emit(
                f"Build Run {record.name}", items, output
            )
        except Exception as e:
            self.registry.remove(record.name)
            self.context.current_run = previous_run
            logger.error(f"Build of run {record.name} aborted: {e}")
            output.errors.append(f"Build aborted: {e}")
            return output

        for box in accepted:
            record.add_box(box)
        output.boxes = accepted
        output.cabinets = list(run.cabinets)
        output.filler_strips = list(run.filler_strips)
        output.unfilled_length = run.unfilled_length
        output.run_name = record.name
        logger.info(output.summary())
        return output


class BuildProjectCommand:
    """Command to build every run and cabinet of a project file."""

    def __init__(
        self,
        cabinet_command: BuildCabinetCommand,
        run_command: BuildRunCommand,
    ) -> None:
        self.cabinet_command = cabinet_command
        self.run_command = run_command

    def execute(self, config: ProjectConfiguration) -> ProjectOutput:
        """Build runs first, then standalone cabinets, in file order."""
        room = config.room_name
        self.cabinet_command.context.room_name = room
        self.run_command.context.room_name = room

        project = ProjectOutput()
        for run_config in config.runs:
            project.outputs.append(self.run_command.execute(run_config))
        for cabinet_config in config.cabinets:
            project.outputs.append(self.cabinet_command.execute(cabinet_config))
        return project

