"""Unit tests for door/drawer configuration parsing and resolution.

These tests verify:
- Preset and composite descriptors parse into the right variant
- Resolved section ratios always sum to 1.0
- Sections are ordered bottom to top
- Fallback and ignored-part diagnostics
- Custom drawer heights in presets and composites
"""

import pytest

from cabinet_builder.domain.front_config import (
    CompositeConfig,
    FrontPreset,
    PresetConfig,
    parse_front_config,
    resolve_sections,
)
from cabinet_builder.domain.results import DiagnosticKind
from cabinet_builder.domain.value_objects import SectionRole, SizingPolicy

INTERIOR_HEIGHT = 30.5


class TestParseFrontConfig:
    """Tests for parse_front_config."""

    def test_preset_value_parses_to_preset(self) -> None:
        """A string naming a preset becomes a PresetConfig."""
        config = parse_front_config("drawer_bank_3")
        assert config == PresetConfig(FrontPreset.DRAWER_BANK_3)

    def test_preset_lookup_is_case_and_space_insensitive(self) -> None:
        """Presets are matched after lowercasing and replacing spaces."""
        assert parse_front_config("  Drawer Bank 4 ") == PresetConfig(
            FrontPreset.DRAWER_BANK_4
        )

    def test_enum_member_parses_to_preset(self) -> None:
        config = parse_front_config(FrontPreset.DOORS)
        assert isinstance(config, PresetConfig)
        assert config.preset == FrontPreset.DOORS

    def test_parsed_config_passes_through(self) -> None:
        """An already parsed configuration is returned unchanged."""
        config = CompositeConfig()
        assert parse_front_config(config) is config

    def test_composite_parts_keep_order_and_counts(self) -> None:
        """Composite parts are kept in order with their leading counts."""
        config = parse_front_config("3_drawers+door")
        assert isinstance(config, CompositeConfig)
        assert [p.role for p in config.parts] == [SectionRole.DRAWER, SectionRole.DOOR]
        assert config.parts[0].count == 3
        assert config.parts[1].count is None

    def test_drawer_checked_before_door(self) -> None:
        """A part mentioning both words is classified as a drawer."""
        config = parse_front_config("drawer_over_door+door")
        assert isinstance(config, CompositeConfig)
        assert config.parts[0].role == SectionRole.DRAWER

    def test_unrecognised_parts_are_ignored(self) -> None:
        config = parse_front_config("door+shelf")
        assert isinstance(config, CompositeConfig)
        assert len(config.parts) == 1
        assert config.ignored == ("shelf",)


class TestSectionRatios:
    """Resolved section ratios always sum to 1.0."""

    @pytest.mark.parametrize("preset", list(FrontPreset))
    def test_every_preset_sums_to_one(self, preset: FrontPreset) -> None:
        plan = resolve_sections(
            PresetConfig(preset), INTERIOR_HEIGHT, custom_heights=(6.0, 8.0)
        )
        assert plan.ratio_sum == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize(
        "descriptor",
        [
            "door",
            "drawer+door",
            "door+2_drawers",
            "drawer+drawer+drawer",
            "4_drawers+door+door",
            "custom_drawers+door",
            "drawer+banana+door",
            "",
            "banana",
        ],
    )
    def test_every_composite_sums_to_one(self, descriptor: str) -> None:
        plan = resolve_sections(parse_front_config(descriptor), INTERIOR_HEIGHT)
        assert plan.ratio_sum == pytest.approx(1.0, abs=1e-6)

    def test_custom_heights_composite_sums_to_one(self) -> None:
        plan = resolve_sections(
            parse_front_config("drawers+door"), 30.0, custom_heights=[6.0, 6.0]
        )
        assert plan.ratio_sum == pytest.approx(1.0, abs=1e-6)


class TestResolvePresets:
    """Tests for preset resolution."""

    def test_doors_preset_is_two_equal_doors(self) -> None:
        plan = resolve_sections(PresetConfig(FrontPreset.DOORS), INTERIOR_HEIGHT)
        assert len(plan.sections) == 1
        section = plan.sections[0]
        assert section.role == SectionRole.DOOR
        assert section.item_count == 2
        assert section.sizing == SizingPolicy.EQUAL
        assert not plan.used_fallback

    def test_single_door_flag_reduces_doors_preset(self) -> None:
        plan = resolve_sections(
            PresetConfig(FrontPreset.DOORS), INTERIOR_HEIGHT, single_door=True
        )
        assert plan.sections[0].item_count == 1

    def test_drawer_bank_puts_drawers_below_door(self) -> None:
        """Sections are ordered bottom to top."""
        plan = resolve_sections(PresetConfig(FrontPreset.DRAWER_BANK_3), INTERIOR_HEIGHT)
        assert [s.role for s in plan.sections] == [SectionRole.DRAWER, SectionRole.DOOR]
        assert plan.sections[0].item_count == 3
        assert plan.sections[0].sizing == SizingPolicy.GRADUATED
        assert plan.sections[0].height_ratio == pytest.approx(0.45)

    def test_drawer_bank_4_has_four_drawers(self) -> None:
        plan = resolve_sections(PresetConfig(FrontPreset.DRAWER_BANK_4), INTERIOR_HEIGHT)
        assert plan.sections[0].item_count == 4

    def test_two_drawers_door_ratios(self) -> None:
        plan = resolve_sections(parse_front_config("2_drawers+door"), INTERIOR_HEIGHT)
        assert [s.height_ratio for s in plan.sections] == pytest.approx([0.4, 0.6])

    def test_custom_drawers_uses_custom_heights(self) -> None:
        plan = resolve_sections(
            PresetConfig(FrontPreset.CUSTOM_DRAWERS),
            INTERIOR_HEIGHT,
            custom_heights=[10.0, 8.0, 6.0],
        )
        section = plan.sections[0]
        assert section.sizing == SizingPolicy.CUSTOM
        assert section.item_count == 3
        assert section.custom_heights == (10.0, 8.0, 6.0)

    def test_custom_drawers_without_heights_uses_one_drawer(self) -> None:
        """Missing custom heights degrade to one drawer with a diagnostic."""
        plan = resolve_sections(PresetConfig(FrontPreset.CUSTOM_DRAWERS), INTERIOR_HEIGHT)
        assert plan.sections[0].item_count == 1
        assert plan.diagnostics[0].kind == DiagnosticKind.CONFIG_FALLBACK
        assert plan.used_fallback

    def test_custom_heights_matching_interior_are_clean(self) -> None:
        plan = resolve_sections(
            PresetConfig(FrontPreset.CUSTOM_DRAWERS),
            INTERIOR_HEIGHT,
            custom_heights=[12.0, 10.0, 8.5],
        )
        assert plan.diagnostics == ()
        assert not plan.used_fallback

    def test_custom_heights_shortfall_is_reported(self) -> None:
        """Heights that do not fill the interior are kept but noted."""
        plan = resolve_sections(
            PresetConfig(FrontPreset.CUSTOM_DRAWERS),
            INTERIOR_HEIGHT,
            custom_heights=[5.0, 5.0],
        )
        assert plan.sections[0].custom_heights == (5.0, 5.0)
        assert not plan.used_fallback
        assert len(plan.diagnostics) == 1
        assert plan.diagnostics[0].kind == DiagnosticKind.CONFIG_FALLBACK
        assert "sum to 10" in plan.diagnostics[0].message


class TestResolveComposites:
    """Tests for composite resolution."""

    def test_parts_share_height_equally(self) -> None:
        plan = resolve_sections(parse_front_config("door+2_drawers"), INTERIOR_HEIGHT)
        assert [(s.role.value, s.height_ratio) for s in plan.sections] == [
            ("door", pytest.approx(0.5)),
            ("drawer", pytest.approx(0.5)),
        ]

    def test_small_drawer_parts_are_equal(self) -> None:
        plan = resolve_sections(parse_front_config("2_drawers+door+door"), INTERIOR_HEIGHT)
        assert plan.sections[0].sizing == SizingPolicy.EQUAL

    def test_three_or_more_drawers_are_graduated(self) -> None:
        plan = resolve_sections(parse_front_config("3_drawers+door"), INTERIOR_HEIGHT)
        assert plan.sections[0].sizing == SizingPolicy.GRADUATED

    def test_empty_config_falls_back_to_two_doors(self) -> None:
        plan = resolve_sections(parse_front_config(""), INTERIOR_HEIGHT)
        assert plan.used_fallback
        assert len(plan.sections) == 1
        assert plan.sections[0].role == SectionRole.DOOR
        assert plan.sections[0].item_count == 2
        assert any(d.kind == DiagnosticKind.CONFIG_FALLBACK for d in plan.diagnostics)

    def test_unrecognised_config_falls_back_with_ignored_note(self) -> None:
        plan = resolve_sections(parse_front_config("banana"), INTERIOR_HEIGHT)
        kinds = {d.kind for d in plan.diagnostics}
        assert plan.used_fallback
        assert DiagnosticKind.IGNORED_CONFIG_PART in kinds
        assert DiagnosticKind.CONFIG_FALLBACK in kinds

    def test_custom_heights_attach_to_first_drawer_part(self) -> None:
        """Custom heights set the drawer ratio; other parts share the rest."""
        plan = resolve_sections(
            parse_front_config("drawers+door"), 30.0, custom_heights=[6.0, 6.0]
        )
        drawer, door = plan.sections
        assert drawer.sizing == SizingPolicy.CUSTOM
        assert drawer.height_ratio == pytest.approx(0.4)
        assert door.height_ratio == pytest.approx(0.6)

    def test_custom_heights_filling_cabinet_drop_other_parts(self) -> None:
        plan = resolve_sections(
            parse_front_config("drawers+door"), 30.0, custom_heights=[20.0, 15.0]
        )
        assert len(plan.sections) == 1
        assert plan.sections[0].role == SectionRole.DRAWER
        assert any(
            d.kind == DiagnosticKind.IGNORED_CONFIG_PART for d in plan.diagnostics
        )
