"""Infrastructure layer - renderers, materials and exporters."""

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonSceneExporter,
    StlMeshBuilder,
    StlSceneExporter,
)
from .materials import RoomMaterialManager, material_name
from .scene import InMemoryScene, SceneObject

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "InMemoryScene",
    "JsonSceneExporter",
    "RoomMaterialManager",
    "SceneObject",
    "StlMeshBuilder",
    "StlSceneExporter",
    "material_name",
]
