"""Root configuration schema.

This module contains the root ProjectConfiguration model which represents
the top-level structure of a project file: a room, standalone cabinets,
auto-filled runs and export settings.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cabinet_builder.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    OutputConfig,
)
from cabinet_builder.application.config.schemas.cabinet_schema import (
    CabinetRequestConfig,
)
from cabinet_builder.application.config.schemas.run_schema import RunConfig


class ProjectConfiguration(BaseModel):
    """Root configuration model for a cabinet project file.

    Attributes:
        schema_version: Configuration schema version
        room_name: Room name used for material naming
        cabinets: Standalone cabinets, placed in order
        runs: Auto-filled runs
        output: Export settings
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    room_name: str = Field(default="Kitchen", min_length=1)
    cabinets: list[CabinetRequestConfig] = Field(default_factory=list)
    runs: list[RunConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version {v!r}; supported: {sorted(SUPPORTED_VERSIONS)}"
            )
        return v

    @model_validator(mode="after")
    def validate_not_empty(self) -> "ProjectConfiguration":
        if not self.cabinets and not self.runs:
            raise ValueError("Project must define at least one cabinet or run")
        return self
