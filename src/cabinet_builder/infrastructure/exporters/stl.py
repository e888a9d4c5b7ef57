"""STL export using numpy-stl."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

import numpy as np
from stl import mesh

from cabinet_builder.domain.value_objects import OrientedBox
from cabinet_builder.infrastructure.exporters.base import (
    ExporterRegistry,
    ExportInput,
    boxes_of,
)

logger = logging.getLogger(__name__)


class StlMeshBuilder:
    """Builds STL meshes from oriented boxes.

    Coordinate System Transformation:
    The domain uses Z-up coordinates (X=width, Y=depth, Z=height), while
    many STL viewers use Y-up. Vertices are written as (x, z, y) so height
    becomes the viewer's vertical axis.
    """

    def build_box_mesh(self, box: OrientedBox) -> mesh.Mesh:
        """Create a mesh for one box, triangulating polygon faces."""
        vertices = np.array([(p.x, p.z, p.y) for p in box.vertices])
        triangles = box.get_triangles()

        box_mesh = mesh.Mesh(np.zeros(len(triangles), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(triangles):
            # The Y/Z swap mirrors the geometry; reverse winding to keep
            # normals pointing outward.
            box_mesh.vectors[i] = [vertices[v0], vertices[v2], vertices[v1]]
        return box_mesh

    def build_mesh(self, boxes: list[OrientedBox]) -> mesh.Mesh:
        """Combine all boxes into a single mesh."""
        if not boxes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))
        meshes = [self.build_box_mesh(box) for box in boxes]
        return mesh.Mesh(np.concatenate([m.data for m in meshes]))


@ExporterRegistry.register("stl")
class StlSceneExporter:
    """Exports boxes to a single STL file for 3D visualization.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(self, mesh_builder: StlMeshBuilder | None = None) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()

    def export(self, output: ExportInput, path: Path) -> None:
        boxes = boxes_of(output)
        combined = self.mesh_builder.build_mesh(boxes)
        combined.save(str(path))
        logger.info(f"Wrote {len(combined.vectors)} triangles for {len(boxes)} boxes to {path}")

    def export_string(self, output: ExportInput) -> str:
        """STL format does not support string export.

        Raises:
            NotImplementedError: Always raises this exception.
        """
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )
