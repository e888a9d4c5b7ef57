"""Contracts module - protocols for the rendering collaborator.

The application layer emits geometry through these protocols rather than a
concrete CAD document, so the in-memory scene, exporters and any host
adapter are interchangeable.

Example:
    ```python
    from cabinet_builder.contracts import MaterialManager, Renderer

    def emit(renderer: Renderer, materials: MaterialManager, box) -> None:
        renderer.start_operation("Build")
        renderer.emit_box(box, materials.get_material(box.material), box.group)
        renderer.commit_operation()
    ```
"""

from .renderer import MaterialHandle, MaterialManager, Renderer

__all__ = [
    "MaterialHandle",
    "MaterialManager",
    "Renderer",
]
