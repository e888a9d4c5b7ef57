"""CLI command implementations for the cabinet-builder application.

This package contains subcommands for the CLI, including:
- validate: Validate a project file
"""

from cabinet_builder.cli.commands.validate import (
    check_project,
    display_load_error,
    validate_command,
)

__all__ = ["check_project", "display_load_error", "validate_command"]
