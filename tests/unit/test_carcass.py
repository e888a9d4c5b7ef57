"""Unit tests for carcass decomposition."""

import pytest

from cabinet_builder.domain import CabinetSpec, InvalidSpecError
from cabinet_builder.domain.constants import (
    BACK_THICKNESS,
    PANEL_THICKNESS,
    TOE_KICK_DEPTH,
    TOE_KICK_HEIGHT,
)
from cabinet_builder.domain.services import (
    decompose,
    display_shelf_offsets,
    wall_stack_units,
)
from cabinet_builder.domain.value_objects import CabinetKind, MaterialTag


class TestStandardBase:
    """A 24" frameless base cabinet with two doors."""

    def test_panels(self, base_cabinet: CabinetSpec) -> None:
        result = decompose(base_cabinet)
        assert set(result.labels()) == {
            "Carcass/Left Side",
            "Carcass/Right Side",
            "Carcass/Left Side Lower",
            "Carcass/Right Side Lower",
            "Carcass/Bottom",
            "Carcass/Back",
            "Carcass/Shelf",
            "Carcass/Toe Kick",
        }
        assert result.skipped_count == 0

    def test_no_top_panel(self, base_cabinet: CabinetSpec) -> None:
        assert decompose(base_cabinet).find("Carcass/Top") is None

    def test_sides_notched_at_toe_kick(self, base_cabinet: CabinetSpec) -> None:
        result = decompose(base_cabinet)
        side = result.find("Carcass/Left Side")
        lower = result.find("Carcass/Left Side Lower")
        assert side is not None and lower is not None
        assert side.origin.z == pytest.approx(TOE_KICK_HEIGHT)
        assert side.size_z == pytest.approx(30.5)
        assert lower.origin.y == pytest.approx(TOE_KICK_DEPTH)
        assert lower.size_y == pytest.approx(24.0 - TOE_KICK_DEPTH)
        assert lower.size_z == pytest.approx(TOE_KICK_HEIGHT)

    def test_toe_kick_is_recessed(self, base_cabinet: CabinetSpec) -> None:
        kick = decompose(base_cabinet).find("Carcass/Toe Kick")
        assert kick is not None
        assert kick.origin.y == pytest.approx(TOE_KICK_DEPTH)
        assert kick.size_x == pytest.approx(24.0 - 2 * PANEL_THICKNESS)

    def test_back_at_rear(self, base_cabinet: CabinetSpec) -> None:
        back = decompose(base_cabinet).find("Carcass/Back")
        assert back is not None
        assert back.origin.y == pytest.approx(24.0 - BACK_THICKNESS)
        assert back.size_y == pytest.approx(BACK_THICKNESS)

    def test_shelf_at_mid_height(self, base_cabinet: CabinetSpec) -> None:
        shelf = decompose(base_cabinet).find("Carcass/Shelf")
        assert shelf is not None
        assert shelf.material == MaterialTag.INTERIOR
        assert shelf.origin.z == pytest.approx(TOE_KICK_HEIGHT + 30.5 / 2)

    def test_no_shelf_at_threshold(self) -> None:
        """The mid shelf needs an interior strictly taller than 24"."""
        spec = CabinetSpec.create("base", height=28.0)
        assert spec.interior_height == pytest.approx(24.0)
        assert decompose(spec).find("Carcass/Shelf") is None

    def test_shelf_just_above_threshold(self) -> None:
        spec = CabinetSpec.create("wall", height=24.5)
        assert decompose(spec).find("Carcass/Shelf") is not None

    def test_invalid_spec_raises(self) -> None:
        with pytest.raises(InvalidSpecError) as exc_info:
            decompose(CabinetSpec.create("base", width=-5))
        assert any("width" in e for e in exc_info.value.errors)


class TestOtherStandardKinds:
    """Closed-top, framed and display variants of the standard box."""

    def test_wall_cabinet_has_top_and_no_toe_kick(self, wall_cabinet: CabinetSpec) -> None:
        result = decompose(wall_cabinet)
        assert result.find("Carcass/Top") is not None
        assert result.find("Carcass/Toe Kick") is None
        assert result.find("Carcass/Left Side").origin.z == 0.0

    def test_island_has_toe_kick_and_open_top(self) -> None:
        result = decompose(CabinetSpec.create("island"))
        assert result.find("Carcass/Toe Kick") is not None
        assert result.find("Carcass/Top") is None

    def test_tall_cabinet(self) -> None:
        result = decompose(CabinetSpec.create("tall"))
        assert result.find("Carcass/Top") is not None
        assert result.find("Carcass/Left Side").size_z == pytest.approx(84.0)

    def test_framed_cabinet_adds_face_frame(self) -> None:
        result = decompose(CabinetSpec.create("base", frame="framed"))
        frame = result.with_prefix("Carcass/Face Frame/")
        assert len(frame) == 4
        assert all(box.origin.y == pytest.approx(-0.75) for box in frame)

    def test_frameless_cabinet_has_no_face_frame(self, base_cabinet: CabinetSpec) -> None:
        assert decompose(base_cabinet).with_prefix("Carcass/Face Frame") == []

    def test_display_base_uses_shelf_ladder(self) -> None:
        result = decompose(CabinetSpec.create("display_base"))
        assert result.find("Carcass/Shelf") is None
        assert result.find("Carcass/Top") is not None
        assert len(result.with_prefix("Carcass/Shelf ")) == 1

    def test_display_wall_shelves(self) -> None:
        result = decompose(CabinetSpec.create("display_wall", height=50.0))
        shelves = result.with_prefix("Carcass/Shelf ")
        assert len(shelves) == 2


class TestDisplayShelfOffsets:
    """Tests for the display shelf ladder."""

    def test_gaps_near_sixteen_inches(self) -> None:
        assert display_shelf_offsets(48.0) == pytest.approx([16.0, 32.0])

    def test_gaps_stay_within_bounds(self) -> None:
        for height in (29.0, 48.0, 61.0, 90.0):
            offsets = display_shelf_offsets(height)
            edges = [0.0, *offsets, height]
            gaps = [b - a for a, b in zip(edges, edges[1:])]
            assert all(14.0 - 1e-9 <= g <= 18.0 + 1e-9 for g in gaps)

    def test_short_cabinet_keeps_single_gap(self) -> None:
        assert display_shelf_offsets(20.0) == []

    def test_no_height_no_shelves(self) -> None:
        assert display_shelf_offsets(0.0) == []


class TestWallStack:
    """Stacked wall cabinets."""

    def test_units(self) -> None:
        units = wall_stack_units(CabinetKind.WALL_STACK)
        assert [name for name, _, _ in units] == ["Lower", "Upper 1", "Upper 2"]
        assert units[1][1] == pytest.approx(42.125)
        assert units[2][1] == pytest.approx(54.25)

    def test_nine_foot_stack_has_one_upper(self) -> None:
        assert len(wall_stack_units(CabinetKind.WALL_STACK_9FT)) == 2

    def test_each_unit_is_a_closed_box(self) -> None:
        result = decompose(CabinetSpec.create("wall_stack"))
        for unit in ("Lower", "Upper 1", "Upper 2"):
            assert result.find(f"Carcass/{unit}/Top") is not None
            assert result.find(f"Carcass/{unit}/Bottom") is not None
        assert result.find("Carcass/Lower/Shelf") is not None
        assert result.find("Carcass/Upper 1/Shelf") is None
        assert len(result.boxes) == 16

    def test_upper_units_are_raised(self) -> None:
        result = decompose(CabinetSpec.create("wall_stack"))
        bottom = result.find("Carcass/Upper 2/Bottom")
        assert bottom is not None
        assert bottom.origin.z == pytest.approx(54.25)
