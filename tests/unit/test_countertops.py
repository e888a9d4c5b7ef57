"""Unit tests for countertops and backsplashes."""

import pytest

from cabinet_builder.domain import CabinetSpec
from cabinet_builder.domain.constants import (
    BACKSPLASH_HEIGHT,
    COUNTERTOP_FRONT_OVERHANG,
    COUNTERTOP_THICKNESS,
)
from cabinet_builder.domain.services import (
    corner_countertop_outline,
    countertop_for_cabinet,
    countertop_for_run,
)
from cabinet_builder.domain.value_objects import MaterialTag, Point3D


def _placed(x: float, width: float = 24.0, **kwargs) -> CabinetSpec:
    spec = CabinetSpec.create("base", width=width, **kwargs)
    spec.position = Point3D(x, 0.0, 0.0)
    return spec


class TestCountertopForCabinet:
    """Single-cabinet slabs."""

    def test_slab_overhangs_front(self, base_cabinet: CabinetSpec) -> None:
        slab = countertop_for_cabinet(base_cabinet).find("Countertop/Slab")
        assert slab is not None
        assert slab.material == MaterialTag.COUNTERTOP
        assert slab.origin.x == pytest.approx(0.0)
        assert slab.origin.y == pytest.approx(-COUNTERTOP_FRONT_OVERHANG)
        assert slab.origin.z == pytest.approx(34.5)
        assert slab.size_x == pytest.approx(24.0)
        assert slab.size_y == pytest.approx(25.5)
        assert slab.size_z == pytest.approx(COUNTERTOP_THICKNESS)

    def test_side_overhang(self, base_cabinet: CabinetSpec) -> None:
        slab = countertop_for_cabinet(base_cabinet, include_side_overhang=True).find(
            "Countertop/Slab"
        )
        assert slab is not None
        assert slab.origin.x == pytest.approx(-0.75)
        assert slab.size_x == pytest.approx(25.5)

    def test_island_seating_overhang(self) -> None:
        spec = CabinetSpec.create("island", has_seating_side=True)
        slab = countertop_for_cabinet(spec).find("Countertop/Slab")
        assert slab is not None
        assert slab.size_y == pytest.approx(36.0 + 1.5 + 15.0)

    def test_seating_flag_ignored_off_island(self) -> None:
        spec = CabinetSpec.create("base", has_seating_side=True)
        slab = countertop_for_cabinet(spec).find("Countertop/Slab")
        assert slab is not None
        assert slab.size_y == pytest.approx(25.5)

    def test_backsplash_on_slab(self) -> None:
        spec = CabinetSpec.create("base", has_backsplash=True)
        splash = countertop_for_cabinet(spec).find("Backsplash/Main")
        assert splash is not None
        assert splash.origin.z == pytest.approx(36.0)
        assert splash.size_z == pytest.approx(BACKSPLASH_HEIGHT)
        assert splash.origin.y + splash.size_y == pytest.approx(24.0)

    def test_no_backsplash_by_default(self, base_cabinet: CabinetSpec) -> None:
        assert countertop_for_cabinet(base_cabinet).with_prefix("Backsplash") == []


class TestCountertopForRun:
    """Continuous run slabs."""

    def test_slab_spans_members_with_side_overhang(self) -> None:
        result = countertop_for_run([_placed(0.0), _placed(24.0)])
        slab = result.find("Countertop/Run Slab")
        assert slab is not None
        assert slab.origin.x == pytest.approx(-0.75)
        assert slab.size_x == pytest.approx(49.5)
        assert slab.size_y == pytest.approx(25.5)

    def test_backsplash_follows_members(self) -> None:
        result = countertop_for_run([_placed(0.0, has_backsplash=True), _placed(24.0)])
        assert result.find("Backsplash/Run") is not None

    def test_backsplash_can_be_forced_off(self) -> None:
        result = countertop_for_run(
            [_placed(0.0, has_backsplash=True)], include_backsplash=False
        )
        assert result.find("Backsplash/Run") is None

    def test_depth_comes_from_first_cabinet(self) -> None:
        shallow = _placed(0.0, depth=21.0)
        deep = _placed(24.0, depth=24.0)
        slab = countertop_for_run([shallow, deep]).find("Countertop/Run Slab")
        assert slab is not None
        assert slab.size_y == pytest.approx(22.5)

    def test_empty_run_has_no_slab(self) -> None:
        assert countertop_for_run([]).boxes == ()


class TestCornerCountertops:
    """L-shaped corner slabs."""

    def test_inside_outline_is_l_shaped(self) -> None:
        spec = CabinetSpec.create("corner_base", corner_subtype="inside_24")
        assert len(corner_countertop_outline(spec)) == 6

    def test_outside_outline_without_return(self) -> None:
        spec = CabinetSpec.create("corner_base", corner_subtype="outside_24", depth=24)
        assert len(corner_countertop_outline(spec)) == 4

    def test_corner_slab_is_a_prism(self) -> None:
        spec = CabinetSpec.create(
            "corner_base", corner_subtype="inside_36", has_backsplash=True
        )
        result = countertop_for_cabinet(spec)
        slab = result.find("Countertop/Slab")
        assert slab is not None
        assert slab.vertex_count == 6
        assert slab.origin.z == pytest.approx(34.5)
        assert result.find("Backsplash/Main") is not None
        assert result.find("Backsplash/Return") is not None

    def test_outside_corner_backsplash(self) -> None:
        spec = CabinetSpec.create(
            "corner_base", corner_subtype="outside_36", has_backsplash=True
        )
        result = countertop_for_cabinet(spec)
        assert len(result.with_prefix("Backsplash/")) == 2
        assert result.skipped_count == 0
