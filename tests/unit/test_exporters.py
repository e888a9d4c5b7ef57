"""Unit tests for the JSON, STL and DXF exporters."""

import json
from pathlib import Path

import ezdxf
import numpy as np
import pytest

from cabinet_builder.application.dtos import BuildOutput
from cabinet_builder.domain import CabinetSpec
from cabinet_builder.domain.results import Diagnostic, DiagnosticKind
from cabinet_builder.domain.services import decompose
from cabinet_builder.domain.value_objects import MaterialTag, OrientedBox, Point3D
from cabinet_builder.infrastructure.exporters import (
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    JsonSceneExporter,
    StlMeshBuilder,
    StlSceneExporter,
    boxes_of,
)


@pytest.fixture
def panel() -> OrientedBox:
    return OrientedBox.from_extents(
        "Carcass/Left Side", MaterialTag.BOX, Point3D(1, 2, 3), 0.75, 24.0, 30.0
    )


@pytest.fixture
def door() -> OrientedBox:
    return OrientedBox.from_extents(
        "Fronts/Door 1", MaterialTag.DOOR_FACE, Point3D(0, -0.75, 4), 12.0, 0.75, 30.0
    )


class TestRegistry:
    """Tests for ExporterRegistry and boxes_of."""

    def test_formats_registered(self) -> None:
        assert ExporterRegistry.available_formats() == ["dxf", "json", "stl"]
        assert ExporterRegistry.get("json") is JsonSceneExporter

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="Unknown export format"):
            ExporterRegistry.get("obj")

    def test_boxes_of_accepts_sequences_and_outputs(self, panel: OrientedBox) -> None:
        assert boxes_of([panel]) == [panel]
        assert boxes_of(BuildOutput(boxes=[panel])) == [panel]

    def test_boxes_of_rejects_other_input(self) -> None:
        with pytest.raises(TypeError, match="expected boxes"):
            boxes_of("not boxes")  # type: ignore[arg-type]

    def test_export_manager_writes_every_format(
        self, tmp_path: Path, panel: OrientedBox
    ) -> None:
        paths = ExportManager(tmp_path / "out").export_all(
            ["json", "stl", "dxf"], [panel], project_name="kitchen"
        )
        assert paths["json"] == tmp_path / "out" / "kitchen.json"
        assert all(p.exists() for p in paths.values())


class TestJsonSceneExporter:
    """Tests for JSON export."""

    def test_document_shape(self, panel: OrientedBox, door: OrientedBox) -> None:
        data = JsonSceneExporter().to_dict([panel, door])
        assert data["schema_version"] == "1.0"
        assert data["units"] == "inches"
        assert data["box_count"] == 2
        first = data["boxes"][0]
        assert first["label"] == "Carcass/Left Side"
        assert first["group"] == "Carcass"
        assert first["material"] == "Box"
        assert first["origin"] == [1.0, 2.0, 3.0]
        assert first["size"] == [0.75, 24.0, 30.0]
        assert len(first["base"]) == 4
        assert "diagnostics" not in data

    def test_diagnostics_included(self, panel: OrientedBox) -> None:
        output = BuildOutput(
            boxes=[panel],
            diagnostics=[
                Diagnostic(DiagnosticKind.CONFIG_FALLBACK, "fell back", None)
            ],
        )
        data = json.loads(JsonSceneExporter().export_string(output))
        assert data["diagnostics"] == [
            {"kind": "config_fallback", "message": "fell back", "label": None}
        ]

    def test_polygon_base_preserved(self) -> None:
        spec = CabinetSpec.create("corner_base", corner_subtype="inside_24")
        data = JsonSceneExporter().to_dict(decompose(spec))
        bottom = next(b for b in data["boxes"] if b["label"] == "Carcass/Bottom")
        assert len(bottom["base"]) == 6
        assert bottom["extrusion"] == [0.0, 0.0, 0.75]

    def test_export_writes_file(self, tmp_path: Path, panel: OrientedBox) -> None:
        path = tmp_path / "scene.json"
        JsonSceneExporter().export([panel], path)
        assert json.loads(path.read_text())["box_count"] == 1


class TestStlExport:
    """Tests for STL mesh building and export."""

    def test_box_mesh_has_twelve_triangles(self, panel: OrientedBox) -> None:
        assert len(StlMeshBuilder().build_box_mesh(panel).vectors) == 12

    def test_height_becomes_vertical_axis(self) -> None:
        box = OrientedBox.from_extents(
            "Carcass/Block", MaterialTag.BOX, Point3D.zero(), 1.0, 2.0, 3.0
        )
        vectors = StlMeshBuilder().build_box_mesh(box).vectors
        assert vectors[:, :, 1].max() == pytest.approx(3.0)
        assert vectors[:, :, 2].max() == pytest.approx(2.0)

    def test_normals_point_outward(self, panel: OrientedBox) -> None:
        vectors = StlMeshBuilder().build_box_mesh(panel).vectors
        centroid = vectors.reshape(-1, 3).mean(axis=0)
        for tri in vectors:
            normal = np.cross(tri[1] - tri[0], tri[2] - tri[0])
            outward = tri.mean(axis=0) - centroid
            assert np.dot(normal, outward) > 0

    def test_combined_mesh(self, panel: OrientedBox, door: OrientedBox) -> None:
        combined = StlMeshBuilder().build_mesh([panel, door])
        assert len(combined.vectors) == 24

    def test_empty_mesh(self) -> None:
        assert len(StlMeshBuilder().build_mesh([]).vectors) == 0

    def test_export_writes_file(self, tmp_path: Path, panel: OrientedBox) -> None:
        path = tmp_path / "scene.stl"
        StlSceneExporter().export([panel], path)
        assert path.exists()
        assert path.stat().st_size > 0

    def test_no_string_export(self, panel: OrientedBox) -> None:
        with pytest.raises(NotImplementedError):
            StlSceneExporter().export_string([panel])


class TestDxfExporter:
    """Tests for DXF export."""

    def test_one_polyline_per_box(
        self, tmp_path: Path, panel: OrientedBox, door: OrientedBox
    ) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export([panel, door], path)
        doc = ezdxf.readfile(path)
        polylines = doc.modelspace().query("LWPOLYLINE")
        assert len(polylines) == 2
        assert {p.dxf.layer for p in polylines} == {"BOX", "DOORFACE"}

    def test_material_layers_exist(self, panel: OrientedBox) -> None:
        doc = DxfExporter().build_document([panel])
        for name in ("BOX", "DOORFACE", "DRAWERFACE", "COUNTERTOP", "APPLIANCE"):
            assert doc.layers.has(name)

    def test_plan_outline_of_polygon(self) -> None:
        spec = CabinetSpec.create("corner_base", corner_subtype="inside_24")
        bottom = decompose(spec).find("Carcass/Bottom")
        assert bottom is not None
        assert len(DxfExporter().outline(bottom)) == 6

    def test_front_view_outline(self, panel: OrientedBox) -> None:
        outline = DxfExporter(view="front").outline(panel)
        assert outline == pytest.approx([(1, 3), (1.75, 3), (1.75, 33), (1, 33)])

    def test_millimetre_scale(self, panel: OrientedBox) -> None:
        outline = DxfExporter(units="mm").outline(panel)
        assert outline[0] == pytest.approx((25.4, 50.8))

    def test_string_export(self, panel: OrientedBox) -> None:
        assert "LWPOLYLINE" in DxfExporter().export_string([panel])

    @pytest.mark.parametrize("kwargs", [{"view": "side"}, {"units": "feet"}])
    def test_invalid_options(self, kwargs: dict[str, str]) -> None:
        with pytest.raises(ValueError, match="Invalid"):
            DxfExporter(**kwargs)
