"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinet_builder.domain.entities import CabinetSpec
from cabinet_builder.domain.results import Diagnostic, DiagnosticKind
from cabinet_builder.domain.value_objects import FillerStrip, OrientedBox


@dataclass
class BuildOutput:
    """Result of building a cabinet or a run.

    Attributes:
        boxes: Boxes handed to the renderer, in document coordinates.
        diagnostics: Non-fatal problems (skipped geometry, config
            fallbacks, per-box emission failures).
        errors: Hard failures; when non-empty nothing was committed.
        warnings: Validation warnings (non-standard appliance sizes, ...).
        run_name: Run the geometry was added to.
        cabinets: Cabinets placed by the build, with positions.
        filler_strips: Fillers placed by a run build.
        unfilled_length: Run length left empty by sub-threshold remainders.
        emitted_count: Boxes the renderer accepted.
        failed_count: Boxes the renderer rejected.
    """

    boxes: list[OrientedBox] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    run_name: str | None = None
    cabinets: list[CabinetSpec] = field(default_factory=list)
    filler_strips: list[FillerStrip] = field(default_factory=list)
    unfilled_length: float = 0.0
    emitted_count: int = 0
    failed_count: int = 0

    @property
    def is_valid(self) -> bool:
        """Check if the build completed without hard failures."""
        return len(self.errors) == 0

    @property
    def skipped_count(self) -> int:
        return sum(
            1 for d in self.diagnostics if d.kind == DiagnosticKind.DEGENERATE_GEOMETRY
        )

    @property
    def used_fallback(self) -> bool:
        return any(d.kind == DiagnosticKind.CONFIG_FALLBACK for d in self.diagnostics)

    def summary(self) -> str:
        """One-line human-readable summary."""
        if not self.is_valid:
            return f"Build failed: {'; '.join(self.errors)}"
        parts = [f"{self.emitted_count} boxes"]
        if self.cabinets:
            parts.append(f"{len(self.cabinets)} cabinets")
        if self.filler_strips:
            parts.append(f"{len(self.filler_strips)} fillers")
        if self.skipped_count:
            parts.append(f"{self.skipped_count} skipped")
        if self.failed_count:
            parts.append(f"{self.failed_count} failed")
        where = f" in {self.run_name}" if self.run_name else ""
        return f"Built {', '.join(parts)}{where}"


@dataclass
class ProjectOutput:
    """Result of building every cabinet and run in a project file."""

    outputs: list[BuildOutput] = field(default_factory=list)

    @property
    def boxes(self) -> list[OrientedBox]:
        return [box for output in self.outputs for box in output.boxes]

    @property
    def errors(self) -> list[str]:
        return [error for output in self.outputs for error in output.errors]

    @property
    def is_valid(self) -> bool:
        return all(output.is_valid for output in self.outputs)
