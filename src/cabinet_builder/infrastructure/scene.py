"""In-memory implementation of the Renderer protocol.

The scene stands in for a host CAD document: it keeps committed solids
grouped by name and supports undoable operations. Exporters read the
committed objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cabinet_builder.contracts.renderer import MaterialHandle
from cabinet_builder.domain.constants import DEGENERATE_EPSILON
from cabinet_builder.domain.exceptions import EmissionError
from cabinet_builder.domain.value_objects import OrientedBox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneObject:
    """A committed solid."""

    box: OrientedBox
    material: MaterialHandle
    group: str


class InMemoryScene:
    """Renderer that stores solids in memory.

    Solids the scene cannot build (degenerate extents or duplicate
    vertices) are rejected with ``EmissionError``.

    Attributes:
        objects: Committed solids in emission order.
        operations: Names of committed operations.
    """

    def __init__(self, eps: float = DEGENERATE_EPSILON) -> None:
        self.eps = eps
        self.objects: list[SceneObject] = []
        self.operations: list[str] = []
        self._pending: list[SceneObject] | None = None
        self._operation: str | None = None

    @property
    def in_operation(self) -> bool:
        return self._pending is not None

    def start_operation(self, name: str) -> None:
        if self._pending is not None:
            raise RuntimeError(
                f"Operation {self._operation!r} is still open; cannot start {name!r}"
            )
        self._pending = []
        self._operation = name

    def emit_box(self, box: OrientedBox, material: MaterialHandle, group: str) -> None:
        if self._pending is None:
            raise RuntimeError("emit_box called outside an operation")
        if box.is_degenerate(self.eps):
            raise EmissionError(box.label, "degenerate solid")
        self._pending.append(SceneObject(box=box, material=material, group=group))

    def commit_operation(self) -> None:
        if self._pending is None:
            raise RuntimeError("No operation to commit")
        self.objects.extend(self._pending)
        self.operations.append(self._operation or "")
        logger.debug(f"Committed {self._operation!r}: {len(self._pending)} solids")
        self._pending = None
        self._operation = None

    def abort_operation(self) -> None:
        if self._pending is None:
            return
        logger.debug(f"Aborted {self._operation!r}: {len(self._pending)} solids discarded")
        self._pending = None
        self._operation = None

    # --- Queries ---

    @property
    def boxes(self) -> list[OrientedBox]:
        return [obj.box for obj in self.objects]

    def groups(self) -> list[str]:
        """Group names in first-seen order."""
        return list(dict.fromkeys(obj.group for obj in self.objects))

    def in_group(self, group: str) -> list[SceneObject]:
        """Objects in a group or any of its sub-groups."""
        return [
            obj
            for obj in self.objects
            if obj.group == group or obj.group.startswith(f"{group}/")
        ]

    def clear(self) -> None:
        self.objects.clear()
        self.operations.clear()
        self._pending = None
        self._operation = None
