"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cabinet_builder.application.context import RunContext
from cabinet_builder.application.run_registry import RunRegistry

if TYPE_CHECKING:
    from cabinet_builder.application.commands import (
        BuildCabinetCommand,
        BuildProjectCommand,
        BuildRunCommand,
    )
    from cabinet_builder.contracts.renderer import MaterialManager, Renderer
    from cabinet_builder.infrastructure.exporters import Exporter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Commands created by one factory share its renderer, material manager,
    run registry and context, so cabinets built by successive commands land
    in the same document.

    Example:
        ```python
        factory = ServiceFactory()
        factory.context.room_name = "Kitchen"
        output = factory.create_build_cabinet_command().execute(request)
        ```
    """

    room_name: str = "Kitchen"
    registry: RunRegistry = field(default_factory=RunRegistry)
    context: RunContext = field(init=False)

    # Cached instances (use field with init=False for dataclass)
    _renderer: "Renderer | None" = field(default=None, init=False, repr=False)
    _materials: "MaterialManager | None" = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.context = RunContext(room_name=self.room_name)

    def set_renderer(self, renderer: "Renderer") -> None:
        """Use a custom renderer (e.g. a host CAD adapter)."""
        self._renderer = renderer

    def get_renderer(self) -> "Renderer":
        """Get or create the renderer (in-memory scene by default)."""
        if self._renderer is None:
            from cabinet_builder.infrastructure.scene import InMemoryScene

            self._renderer = InMemoryScene()
        return self._renderer

    def get_material_manager(self) -> "MaterialManager":
        """Get or create the room's material manager."""
        if self._materials is None:
            from cabinet_builder.infrastructure.materials import RoomMaterialManager

            self._materials = RoomMaterialManager(self.context.room_name)
        return self._materials

    def get_exporter(self, format_name: str) -> "Exporter":
        """Create an exporter by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        from cabinet_builder.infrastructure.exporters import ExporterRegistry

        return ExporterRegistry.get(format_name)()

    def create_build_cabinet_command(self) -> "BuildCabinetCommand":
        from cabinet_builder.application.commands import BuildCabinetCommand

        return BuildCabinetCommand(
            renderer=self.get_renderer(),
            materials=self.get_material_manager(),
            registry=self.registry,
            context=self.context,
        )

    def create_build_run_command(self) -> "BuildRunCommand":
        from cabinet_builder.application.commands import BuildRunCommand

        return BuildRunCommand(
            renderer=self.get_renderer(),
            materials=self.get_material_manager(),
            registry=self.registry,
            context=self.context,
        )

    def create_build_project_command(self) -> "BuildProjectCommand":
        from cabinet_builder.application.commands import BuildProjectCommand

        return BuildProjectCommand(
            cabinet_command=self.create_build_cabinet_command(),
            run_command=self.create_build_run_command(),
        )


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the process-wide factory, creating it on first use."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Replace the process-wide factory (useful in tests)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    global _default_factory
    _default_factory = None
