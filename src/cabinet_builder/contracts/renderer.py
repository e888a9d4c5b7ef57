"""Rendering collaborator protocols.

Geometry engines never talk to a host application directly. They produce
``OrientedBox`` values which the application layer hands to a ``Renderer``
inside a transaction, resolving each box's ``MaterialTag`` to a concrete
material through a ``MaterialManager``.

Example:
    ```python
    renderer.start_operation("Build Cabinet")
    try:
        for box in result.boxes:
            renderer.emit_box(box, materials.get_material(box.material), group)
    except Exception:
        renderer.abort_operation()
        raise
    renderer.commit_operation()
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_builder.domain.value_objects import MaterialTag, OrientedBox


@dataclass(frozen=True)
class MaterialHandle:
    """A resolved material: display name plus RGB color."""

    name: str
    color: tuple[int, int, int]
    tag: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Material name must not be empty")
        if len(self.color) != 3 or any(not 0 <= c <= 255 for c in self.color):
            raise ValueError(f"Invalid RGB color: {self.color}")


@runtime_checkable
class MaterialManager(Protocol):
    """Resolves material tags to renderer materials."""

    def get_material(self, tag: MaterialTag) -> MaterialHandle:
        """Return the material for tag, creating it on first use."""
        ...


@runtime_checkable
class Renderer(Protocol):
    """Receives emitted boxes inside an undoable operation.

    ``emit_box`` may raise ``EmissionError`` for a single box; callers
    treat that as a soft failure and continue with the remaining boxes.
    Any other failure aborts the whole operation.
    """

    def start_operation(self, name: str) -> None:
        """Open a transaction."""
        ...

    def emit_box(self, box: OrientedBox, material: MaterialHandle, group: str) -> None:
        """Create one solid in the named group."""
        ...

    def commit_operation(self) -> None:
        """Keep everything emitted since start_operation."""
        ...

    def abort_operation(self) -> None:
        """Discard everything emitted since start_operation."""
        ...
