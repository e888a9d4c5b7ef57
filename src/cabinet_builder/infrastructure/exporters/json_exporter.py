"""JSON exporter for emitted boxes.

Each box is written with its label, material, bounds and the full base
polygon plus extrusion vector, so polygonal solids (corner bottoms, burner
discs) survive the round trip.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, ClassVar

from cabinet_builder.domain.value_objects import OrientedBox
from cabinet_builder.infrastructure.exporters.base import (
    ExporterRegistry,
    ExportInput,
    boxes_of,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def _round(value: float, places: int) -> float:
    return round(value, places) + 0.0


@ExporterRegistry.register("json")
class JsonSceneExporter:
    """Exports boxes as a JSON document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2, precision: int = 4) -> None:
        self.indent = indent
        self.precision = precision

    def _point(self, x: float, y: float, z: float) -> list[float]:
        return [_round(x, self.precision), _round(y, self.precision), _round(z, self.precision)]

    def box_to_dict(self, box: OrientedBox) -> dict[str, Any]:
        o = box.origin
        return {
            "label": box.label,
            "group": box.group,
            "material": box.material.value,
            "origin": self._point(o.x, o.y, o.z),
            "size": self._point(box.size_x, box.size_y, box.size_z),
            "base": [self._point(p.x, p.y, p.z) for p in box.base],
            "extrusion": self._point(*box.extrusion.as_tuple()),
        }

    def to_dict(self, output: ExportInput) -> dict[str, Any]:
        boxes = boxes_of(output)
        data: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "units": "inches",
            "box_count": len(boxes),
            "boxes": [self.box_to_dict(box) for box in boxes],
        }
        diagnostics = getattr(output, "diagnostics", None)
        if diagnostics:
            data["diagnostics"] = [
                {"kind": d.kind.value, "message": d.message, "label": d.label}
                for d in diagnostics
            ]
        return data

    def export(self, output: ExportInput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Wrote JSON to {path}")

    def export_string(self, output: ExportInput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)
