"""Unit tests for run auto-fill and sequential placement.

These tests verify:
- Greedy largest-first filling around appliance gaps
- Filler strips and sub-threshold remainders
- Deterministic re-layout
- Room presets
- Sequential placement, height bands and the wall-depth ratchet
"""

import pytest

from cabinet_builder.domain import CabinetSpec
from cabinet_builder.domain.constants import STANDARD_WIDTHS
from cabinet_builder.domain.services import (
    CabinetRun,
    PlacementSequence,
    apply_room_preset,
    get_room_preset,
)
from cabinet_builder.domain.value_objects import (
    ApplianceGap,
    CabinetKind,
    Point3D,
)


class TestAutoLayout:
    """Tests for CabinetRun.auto_layout."""

    def test_fills_around_range_gap(self) -> None:
        run = CabinetRun(120.0, [ApplianceGap(48.0, 30.0, "Range")])
        run.auto_layout()
        assert run.cabinet_widths == [48.0, 42.0]
        assert [c.position.x for c in run.cabinets] == [0.0, 78.0]
        assert run.filler_strips == []
        assert run.accounted_length == pytest.approx(120.0)
        assert all(w in STANDARD_WIDTHS for w in run.cabinet_widths)

    def test_leftover_becomes_filler(self) -> None:
        run = CabinetRun(100.0)
        run.auto_layout()
        assert run.cabinet_widths == [48.0, 48.0]
        assert len(run.filler_strips) == 1
        filler = run.filler_strips[0]
        assert filler.position == pytest.approx(96.0)
        assert filler.width == pytest.approx(4.0)
        assert filler.height == pytest.approx(34.5)

    def test_tiny_remainder_is_left_unfilled(self) -> None:
        run = CabinetRun(48.25)
        run.auto_layout()
        assert run.cabinet_widths == [48.0]
        assert run.filler_strips == []
        assert run.unfilled_length == pytest.approx(0.25)

    def test_layout_is_deterministic(self) -> None:
        run = CabinetRun(150.0, [ApplianceGap(60.0, 24.0, "Dishwasher")])
        run.auto_layout()
        first = (run.cabinet_widths, [f.width for f in run.filler_strips])
        run.auto_layout()
        assert (run.cabinet_widths, [f.width for f in run.filler_strips]) == first

    def test_restricted_widths(self) -> None:
        run = CabinetRun(72.0, standard_widths=(24.0, 18.0))
        run.auto_layout()
        assert run.cabinet_widths == [24.0, 24.0, 24.0]

    def test_restricted_widths_use_smaller_size_last(self) -> None:
        run = CabinetRun(66.0, standard_widths=(24.0, 18.0))
        run.auto_layout()
        assert run.cabinet_widths == [24.0, 24.0, 18.0]

    def test_cabinets_follow_room_preset(self) -> None:
        run = CabinetRun(48.0, room=get_room_preset("closet"))
        run.auto_layout()
        cabinet = run.cabinets[0]
        assert cabinet.depth == 24.0
        assert not cabinet.has_countertop
        assert not cabinet.has_backsplash

    def test_wall_run_uses_wall_dimensions(self) -> None:
        run = CabinetRun(36.0, kind=CabinetKind.WALL)
        run.auto_layout()
        cabinet = run.cabinets[0]
        assert (cabinet.depth, cabinet.height) == (12.0, 36.0)
        assert not cabinet.has_countertop


class TestRunValidation:
    """Tests for run construction errors."""

    def test_segments(self) -> None:
        run = CabinetRun(120.0, [ApplianceGap(48.0, 30.0)])
        segments = run.segments()
        assert [(s.start, s.end, s.is_free) for s in segments] == [
            (0.0, 48.0, True),
            (48.0, 78.0, False),
            (78.0, 120.0, True),
        ]

    def test_gap_at_run_start(self) -> None:
        run = CabinetRun(60.0, [ApplianceGap(0.0, 30.0)])
        assert run.segments()[0].gap is not None

    def test_gap_past_end_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="beyond run length"):
            CabinetRun(120.0, [ApplianceGap(100.0, 30.0, "Range")])

    def test_overlapping_gaps_are_rejected(self) -> None:
        run = CabinetRun(120.0, [ApplianceGap(10.0, 30.0, "Range")])
        with pytest.raises(ValueError, match="overlaps"):
            run.add_appliance_gap(ApplianceGap(30.0, 24.0, "Dishwasher"))

    def test_corner_kind_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="not corners"):
            CabinetRun(120.0, kind=CabinetKind.CORNER_BASE)

    def test_length_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="Run length"):
            CabinetRun(0.0)

    def test_invalid_gap_width(self) -> None:
        with pytest.raises(ValueError):
            ApplianceGap(10.0, 0.0)


class TestRoomPresets:
    """Tests for room preset lookup."""

    def test_lookup_normalises_name(self) -> None:
        assert get_room_preset(" Kitchen ").base_depth == 24.0

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Unknown room preset"):
            get_room_preset("garage")

    def test_apply_preset_clears_layout(self) -> None:
        run = CabinetRun(96.0)
        run.auto_layout()
        apply_room_preset(run, "bathroom")
        assert run.cabinets == []
        assert run.room.base_depth == 21.0
        assert run.cabinet_depth == 21.0
        run.auto_layout()
        assert all(c.depth == 21.0 for c in run.cabinets)


class TestPlacementSequence:
    """Tests for PlacementSequence."""

    def test_bases_place_side_by_side(self) -> None:
        seq = PlacementSequence()
        first = seq.place(CabinetSpec.create("base", width=24))
        second = seq.place(CabinetSpec.create("base", width=18))
        assert first == Point3D(0.0, 0.0, 0.0)
        assert second == Point3D(24.0, 0.0, 0.0)

    def test_wall_cabinet_starts_its_own_row(self) -> None:
        seq = PlacementSequence()
        seq.place(CabinetSpec.create("base", width=24))
        position = seq.place(CabinetSpec.create("wall", width=30))
        assert position.x == 0.0
        assert position.z == 54.0

    def test_run_origin_offsets_positions(self) -> None:
        seq = PlacementSequence(origin=Point3D(0.0, -72.0, 0.0))
        position = seq.place(CabinetSpec.create("base"))
        assert position.y == -72.0

    def test_inside_corner_pushes_next_cabinet(self) -> None:
        seq = PlacementSequence()
        seq.place(CabinetSpec.create("corner_base", corner_subtype="inside_24"))
        position = seq.place(CabinetSpec.create("base"))
        assert position.x == pytest.approx(48.0)

    def test_wall_depth_ratchet_aligns_backs(self) -> None:
        seq = PlacementSequence()
        seq.place(CabinetSpec.create("wall", depth=12))
        seq.place(CabinetSpec.create("wall", depth=15))
        third = CabinetSpec.create("wall", depth=12)
        position = seq.place(third)
        assert seq.reference_depth == 15.0
        assert position.y == pytest.approx(3.0)
        assert position.x == pytest.approx(48.0)
        assert third.position == position

    def test_ratchet_never_decreases(self) -> None:
        seq = PlacementSequence()
        seq.place(CabinetSpec.create("wall", depth=15))
        seq.place(CabinetSpec.create("wall", depth=12))
        assert seq.reference_depth == 15.0

    def test_next_position_does_not_record(self) -> None:
        seq = PlacementSequence()
        seq.next_position(CabinetSpec.create("base"))
        assert seq.placed == []

    def test_place_at_fixed_offset(self) -> None:
        seq = PlacementSequence(origin=Point3D(0.0, -72.0, 0.0))
        position = seq.place_at(CabinetSpec.create("base"), 10.0)
        assert position == Point3D(10.0, -72.0, 0.0)
        assert len(seq.placed) == 1

    def test_remove_restores_reference_depth(self) -> None:
        seq = PlacementSequence()
        seq.place(CabinetSpec.create("wall", depth=12))
        deep = CabinetSpec.create("wall", depth=15)
        previous = seq.reference_depth
        seq.place(deep)
        seq.remove(deep, previous)
        assert seq.reference_depth == 12.0
        assert len(seq.placed) == 1
