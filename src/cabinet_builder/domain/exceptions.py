"""Exceptions raised by the cabinet geometry domain.

Hard failures (an invalid cabinet specification, a missing run) abort an
operation before any geometry exists. Degenerate geometry is never raised;
it is reported through ``Diagnostic`` records instead.
"""

from __future__ import annotations


class CabinetBuilderError(Exception):
    """Base class for cabinet builder errors."""


class InvalidSpecError(CabinetBuilderError):
    """Raised when a cabinet specification fails validation."""

    def __init__(self, errors: list[str] | tuple[str, ...]) -> None:
        self.errors = tuple(errors)
        super().__init__("Invalid cabinet specification: " + "; ".join(self.errors))


class RunNotFoundError(CabinetBuilderError):
    """Raised when a request references a run that does not exist."""

    def __init__(self, run_name: str) -> None:
        self.run_name = run_name
        super().__init__(f"Run not found: {run_name}")


class EmissionError(CabinetBuilderError):
    """Raised by a renderer that rejects a single box."""

    def __init__(self, label: str, reason: str) -> None:
        self.label = label
        self.reason = reason
        super().__init__(f"Failed to emit {label}: {reason}")
