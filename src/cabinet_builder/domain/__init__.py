"""Domain layer - core business logic."""

from .entities import CabinetSpec
from .exceptions import (
    CabinetBuilderError,
    EmissionError,
    InvalidSpecError,
    RunNotFoundError,
)
from .front_config import (
    CompositeConfig,
    FrontConfig,
    FrontPreset,
    PresetConfig,
    SectionPlan,
    parse_front_config,
    resolve_sections,
)
from .results import Diagnostic, DiagnosticKind, GeometryResult, ValidationResult
from .value_objects import (
    BoundingBox3D,
    CabinetKind,
    CornerSubtype,
    FrameType,
    MaterialTag,
    OrientedBox,
    Point2D,
    Point3D,
)

__all__ = [
    "BoundingBox3D",
    "CabinetBuilderError",
    "CabinetKind",
    "CabinetSpec",
    "CompositeConfig",
    "CornerSubtype",
    "Diagnostic",
    "DiagnosticKind",
    "EmissionError",
    "FrameType",
    "FrontConfig",
    "FrontPreset",
    "GeometryResult",
    "InvalidSpecError",
    "MaterialTag",
    "OrientedBox",
    "Point2D",
    "Point3D",
    "PresetConfig",
    "RunNotFoundError",
    "SectionPlan",
    "ValidationResult",
    "parse_front_config",
    "resolve_sections",
]
