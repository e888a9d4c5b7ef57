"""Configuration schema models."""

from cabinet_builder.application.config.schemas.base import (
    EXPORT_FORMATS,
    SUPPORTED_VERSIONS,
    ConnectionMode,
    OutputConfig,
)
from cabinet_builder.application.config.schemas.cabinet_schema import (
    CabinetRequestConfig,
)
from cabinet_builder.application.config.schemas.root import ProjectConfiguration
from cabinet_builder.application.config.schemas.run_schema import (
    ApplianceGapConfig,
    RunConfig,
)

__all__ = [
    "ApplianceGapConfig",
    "CabinetRequestConfig",
    "ConnectionMode",
    "EXPORT_FORMATS",
    "OutputConfig",
    "ProjectConfiguration",
    "RunConfig",
    "SUPPORTED_VERSIONS",
]
