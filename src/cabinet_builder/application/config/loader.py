"""Loading of project files and cabinet/run requests.

Every failure surfaces as a ``ConfigError`` whose ``error_type`` tells the
CLI how to present it and whose ``details`` carry JSON paths (for schema
errors) or line/column positions (for syntax errors).
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cabinet_builder.application.config.schemas import (
    CabinetRequestConfig,
    ProjectConfiguration,
    RunConfig,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """A project file or request could not be turned into a configuration.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, file_read_error, json_parse,
            validation.
        path: File the configuration came from, if any.
        details: Per-problem dictionaries.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_validation(
        cls, error: PydanticValidationError, path: Path | None = None
    ) -> "ConfigError":
        """Flatten a pydantic error into one detail per failing field."""
        details = [
            {
                "path": json_path(item["loc"]),
                "message": item["msg"],
                "value": item.get("input"),
                "error_type": item["type"],
            }
            for item in error.errors()
        ]
        source = f" in {path}" if path else ""
        lines = [f"Invalid configuration{source}:"]
        for detail in details:
            where = detail["path"] or "(root)"
            value = detail["value"]
            shown = "" if isinstance(value, (dict, list)) or value is None else f" [{value!r}]"
            lines.append(f"  {where}: {detail['message']}{shown}")
        return cls("\n".join(lines), "validation", path, details)


def json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    >>> json_path(("runs", 0, "appliance_gaps", 1, "width"))
    'runs[0].appliance_gaps[1].width'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}", "file_read_error", path) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path}:{e.lineno}:{e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def _validate(model: type[ModelT], data: Any, path: Path | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation(e, path) from e


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project file.

    Args:
        path: JSON project file.

    Returns:
        The validated ProjectConfiguration.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.

    Example:
        >>> try:
        ...     config = load_config(Path("kitchen.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(detail.get("path"), detail["message"])
    """
    path = Path(path)
    return _validate(ProjectConfiguration, _read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate an in-memory project dictionary."""
    return _validate(ProjectConfiguration, data)


def load_cabinet_request(data: dict[str, Any]) -> CabinetRequestConfig:
    """Validate a flat key-value cabinet request.

    Raises:
        ConfigError: If the request fails validation.
    """
    return _validate(CabinetRequestConfig, data)


def load_run_config(data: dict[str, Any]) -> RunConfig:
    return _validate(RunConfig, data)
