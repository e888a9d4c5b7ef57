"""Configuration schema and loading system for cabinet projects.

This package provides JSON-based configuration loading and validation.
It includes pydantic models for schema validation, a loader with
comprehensive error handling, and adapters that build domain objects.

Public API:
    - ProjectConfiguration: Root configuration model
    - CabinetRequestConfig: Single cabinet request
    - RunConfig / ApplianceGapConfig: Auto-filled run
    - ConnectionMode: How cabinets attach to runs
    - load_config / load_config_from_dict: Load a project
    - load_cabinet_request / load_run_config: Validate single requests
    - ConfigError: Exception for configuration errors
    - config_to_cabinet_spec / config_to_run: Domain adapters

Example:
    >>> from pathlib import Path
    >>> from cabinet_builder.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.runs)} runs in {config.room_name}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_builder.application.config.adapter import (
    config_to_appliance_gaps,
    config_to_cabinet_spec,
    config_to_run,
)
from cabinet_builder.application.config.loader import (
    ConfigError,
    load_cabinet_request,
    load_config,
    load_config_from_dict,
    load_run_config,
)
from cabinet_builder.application.config.schemas import (
    EXPORT_FORMATS,
    SUPPORTED_VERSIONS,
    ApplianceGapConfig,
    CabinetRequestConfig,
    ConnectionMode,
    OutputConfig,
    ProjectConfiguration,
    RunConfig,
)

__all__ = [
    "ApplianceGapConfig",
    "CabinetRequestConfig",
    "ConfigError",
    "ConnectionMode",
    "EXPORT_FORMATS",
    "OutputConfig",
    "ProjectConfiguration",
    "RunConfig",
    "SUPPORTED_VERSIONS",
    "config_to_appliance_gaps",
    "config_to_cabinet_spec",
    "config_to_run",
    "load_cabinet_request",
    "load_config",
    "load_config_from_dict",
    "load_run_config",
]
