"""Exporter protocol, format registry and multi-format export."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, Union, runtime_checkable

from cabinet_builder.domain.value_objects import OrientedBox

if TYPE_CHECKING:
    from cabinet_builder.application.dtos import BuildOutput, ProjectOutput
    from cabinet_builder.infrastructure.scene import InMemoryScene

ExportInput = Union["BuildOutput", "ProjectOutput", "InMemoryScene", Sequence[OrientedBox]]

logger = logging.getLogger(__name__)


def boxes_of(output: ExportInput) -> list[OrientedBox]:
    """Boxes carried by a build output, project output, scene or plain sequence.

    Raises:
        TypeError: If the input carries no boxes.
    """
    boxes = getattr(output, "boxes", output)
    if isinstance(boxes, (list, tuple)) and all(isinstance(b, OrientedBox) for b in boxes):
        return list(boxes)
    raise TypeError(f"Cannot export {type(output).__name__}: expected boxes")


@runtime_checkable
class Exporter(Protocol):
    """Writes emitted boxes in one file format.

    Attributes:
        format_name: Registry key ("json", "stl", "dxf").
        file_extension: Extension used by ``ExportManager``, without the dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: ExportInput, path: Path) -> None: ...

    def export_string(self, output: ExportInput) -> str:
        """Render to text instead of a file.

        Raises:
            NotImplementedError: For binary formats.
        """
        raise NotImplementedError(f"{self.format_name} export has no text form")


class ExporterRegistry:
    """Exporter classes by format name.

    Example:
        @ExporterRegistry.register("json")
        class JsonSceneExporter:
            format_name = "json"
            file_extension = "json"
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"{exporter_class.__name__} replaces {previous.__name__} for {format_name}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If the format is not registered.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            raise KeyError(
                f"Unknown export format {format_name!r}; "
                f"available: {', '.join(cls.available_formats()) or 'none'}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)


class ExportManager:
    """Writes one output in several formats into a directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: ExportInput,
        project_name: str = "cabinet",
    ) -> dict[str, Path]:
        """Write ``{project_name}.{ext}`` for every format.

        Returns:
            Written file per format name.

        Raises:
            KeyError: If a format is not registered; nothing is written.
        """
        exporters = [(name, ExporterRegistry.get(name)()) for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters:
            target = self.output_dir / f"{project_name}.{exporter.file_extension}"
            exporter.export(output, target)
            logger.info(f"Exported {len(boxes_of(output))} boxes as {name} to {target}")
            written[name] = target
        return written
