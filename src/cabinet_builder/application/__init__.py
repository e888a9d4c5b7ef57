"""Application layer - use cases and orchestration."""

from .commands import (
    BuildCabinetCommand,
    BuildProjectCommand,
    BuildRunCommand,
    generate_cabinet_geometry,
)
from .context import RunContext
from .dtos import BuildOutput, ProjectOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory
from .run_registry import RunRecord, RunRegistry

__all__ = [
    "BuildCabinetCommand",
    "BuildOutput",
    "BuildProjectCommand",
    "BuildRunCommand",
    "ProjectOutput",
    "RunContext",
    "RunRecord",
    "RunRegistry",
    "ServiceFactory",
    "generate_cabinet_geometry",
    "get_factory",
    "reset_factory",
    "set_factory",
]
