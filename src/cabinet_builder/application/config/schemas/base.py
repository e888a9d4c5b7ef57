"""Base constants and shared models for configuration schemas.

Enums are taken from the domain layer so that JSON values and domain
values stay identical.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cabinet_builder.domain.value_objects import CabinetKind, FrameType

# Supported schema versions for configuration files
# Version 1.0: Single cabinets and auto-filled runs
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

EXPORT_FORMATS: frozenset[str] = frozenset({"json", "stl", "dxf"})

CABINET_KIND_VALUES: frozenset[str] = frozenset(kind.value for kind in CabinetKind)
FRAME_TYPE_VALUES: frozenset[str] = frozenset(frame.value for frame in FrameType)


class ConnectionMode(str, Enum):
    """How a new cabinet attaches to the document's runs.

    Attributes:
        AUTO: Use the current run, creating one when none exists.
        NEW_RUN: Always start a new run.
        EXTEND_RUN: Append to a named existing run.
    """

    AUTO = "auto"
    NEW_RUN = "new_run"
    EXTEND_RUN = "extend_run"


class OutputConfig(BaseModel):
    """Export settings.

    Attributes:
        formats: Export formats to write (json, stl, dxf).
        output_dir: Directory for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=list)
    output_dir: str | None = None

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        unknown = [f for f in v if f not in EXPORT_FORMATS]
        if unknown:
            raise ValueError(
                f"Unknown export format(s) {unknown}; expected one of {sorted(EXPORT_FORMATS)}"
            )
        return v
