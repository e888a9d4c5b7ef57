"""DXF exporter for plan and elevation drawings.

Generates 2D DXF files (R2010 format) with one closed outline per box on a
layer per material. The plan view projects each box's footprint onto XY;
the front elevation projects its bounds onto XZ.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from cabinet_builder.domain.constants import MATERIAL_COLORS
from cabinet_builder.domain.value_objects import MaterialTag, OrientedBox
from cabinet_builder.infrastructure.exporters.base import (
    ExporterRegistry,
    ExportInput,
    boxes_of,
)
from cabinet_builder.infrastructure.materials import TAG_COLORS

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace


logger = logging.getLogger(__name__)

VIEWS = ("plan", "front")

# AutoCAD color index per material layer
LAYER_ACI: dict[MaterialTag, int] = {
    MaterialTag.BOX: 7,
    MaterialTag.DOOR_FACE: 1,
    MaterialTag.DRAWER_FACE: 6,
    MaterialTag.INTERIOR: 8,
    MaterialTag.COUNTERTOP: 4,
    MaterialTag.HARDWARE: 3,
    MaterialTag.EDGE_BAND: 2,
    MaterialTag.APPLIANCE: 5,
}


def layer_name(tag: MaterialTag) -> str:
    return tag.value.upper()


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports box outlines to DXF.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, view: str = "plan", units: str = "inches") -> None:
        """Initialize the DXF exporter.

        Args:
            view: "plan" (top-down XY) or "front" (elevation XZ).
            units: Output units, "inches" or "mm".
        """
        if view not in VIEWS:
            raise ValueError(f"Invalid view: {view}. Must be one of {VIEWS}")
        if units not in ("inches", "mm"):
            raise ValueError(f"Invalid units: {units}. Must be 'inches' or 'mm'")
        self.view = view
        self.units = units
        self.scale = 25.4 if units == "mm" else 1.0

    def export(self, output: ExportInput, path: Path) -> None:
        doc = self.build_document(boxes_of(output))
        doc.saveas(path)
        logger.info(f"Wrote DXF {self.view} view to {path}")

    def export_string(self, output: ExportInput) -> str:
        doc = self.build_document(boxes_of(output))
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, boxes: list[OrientedBox]) -> Drawing:
        """Create a document with one outline per box."""
        doc = ezdxf.new("R2010")
        self._setup_layers(doc)
        msp = doc.modelspace()
        for box in boxes:
            self._draw_box(msp, box)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for tag in MaterialTag:
            layer = doc.layers.add(layer_name(tag), color=LAYER_ACI[tag])
            layer.rgb = MATERIAL_COLORS[TAG_COLORS[tag]]

    def outline(self, box: OrientedBox) -> list[tuple[float, float]]:
        """Projected outline of a box in output units."""
        s = self.scale
        if self.view == "plan":
            return [(p.x * s, p.y * s) for p in box.plan_footprint()]
        o = box.origin
        x0, z0 = o.x * s, o.z * s
        x1, z1 = (o.x + box.size_x) * s, (o.z + box.size_z) * s
        return [(x0, z0), (x1, z0), (x1, z1), (x0, z1)]

    def _draw_box(self, msp: Modelspace, box: OrientedBox) -> None:
        msp.add_lwpolyline(
            self.outline(box),
            close=True,
            dxfattribs={"layer": layer_name(box.material)},
        )
