"""Exporter framework for emitted cabinet geometry.

Registered exporters:
- dxf: Plan or front-elevation outlines per material layer
- json: Boxes with labels, materials, bounds and base polygons
- stl: Triangulated mesh for 3D visualization

Usage:
    from cabinet_builder.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("stl")()
    exporter.export(build_output, Path("kitchen.stl"))
"""

from cabinet_builder.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportInput,
    ExportManager,
    boxes_of,
)

# Import exporters to trigger registration
from cabinet_builder.infrastructure.exporters.dxf import DxfExporter
from cabinet_builder.infrastructure.exporters.json_exporter import JsonSceneExporter
from cabinet_builder.infrastructure.exporters.stl import StlMeshBuilder, StlSceneExporter

__all__ = [
    "DxfExporter",
    "ExportInput",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonSceneExporter",
    "StlMeshBuilder",
    "StlSceneExporter",
    "boxes_of",
]
