"""Result types for cabinet validation and geometry generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .value_objects import OrientedBox


@dataclass(frozen=True)
class ValidationResult:
    """Result of cabinet validation.

    Contains any errors or warnings found during validation. A cabinet
    is considered valid if there are no errors, even if there are warnings.

    Attributes:
        errors: Tuple of error messages (validation failures).
        warnings: Tuple of warning messages (non-fatal issues).
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Returns:
            True if there are no errors, False otherwise.
        """
        return len(self.errors) == 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        """Create a successful validation result.

        Args:
            warnings: Optional list of warning messages.

        Returns:
            A ValidationResult with no errors and the provided warnings.
        """
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a failed validation result.

        Args:
            errors: List of error messages.
            warnings: Optional list of warning messages.

        Returns:
            A ValidationResult with the provided errors and warnings.
        """
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))


class DiagnosticKind(str, Enum):
    """Categories of non-fatal problems reported alongside geometry."""

    DEGENERATE_GEOMETRY = "degenerate_geometry"
    CONFIG_FALLBACK = "config_fallback"
    IGNORED_CONFIG_PART = "ignored_config_part"
    EMISSION_FAILURE = "emission_failure"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while deriving or emitting geometry.

    Attributes:
        kind: Category of the problem.
        message: Human-readable description.
        label: Semantic group name of the affected box, if any.
    """

    kind: DiagnosticKind
    message: str
    label: str | None = None

    def __str__(self) -> str:
        if self.label:
            return f"[{self.kind.value}] {self.label}: {self.message}"
        return f"[{self.kind.value}] {self.message}"


@dataclass(frozen=True)
class GeometryResult:
    """Boxes produced by a geometry service plus any diagnostics.

    Attributes:
        boxes: Emitted boxes in emission order.
        diagnostics: Non-fatal problems (skipped boxes, config fallbacks).
    """

    boxes: tuple[OrientedBox, ...] = field(default_factory=tuple)
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def skipped_count(self) -> int:
        """Number of boxes skipped as degenerate."""
        return sum(
            1 for d in self.diagnostics if d.kind == DiagnosticKind.DEGENERATE_GEOMETRY
        )

    @property
    def has_skipped_panels(self) -> bool:
        return self.skipped_count > 0

    def labels(self) -> list[str]:
        """Labels of the emitted boxes in order."""
        return [box.label for box in self.boxes]

    def find(self, label: str) -> OrientedBox | None:
        """Return the first box with the given label, if any."""
        return next((box for box in self.boxes if box.label == label), None)

    def with_prefix(self, prefix: str) -> list[OrientedBox]:
        """Return boxes whose label starts with prefix."""
        return [box for box in self.boxes if box.label.startswith(prefix)]

    def merged(self, other: GeometryResult) -> GeometryResult:
        """Concatenate two results, keeping emission order."""
        return GeometryResult(
            boxes=self.boxes + other.boxes,
            diagnostics=self.diagnostics + other.diagnostics,
        )
