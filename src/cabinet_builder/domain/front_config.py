"""Door/drawer configuration parsing.

A cabinet front is described either by a named preset ("doors",
"drawer_bank_3", ...) or by a composite expression such as
"2_drawers+door". The descriptor is parsed once at the input boundary into
a closed tagged variant (``PresetConfig`` or ``CompositeConfig``) and later
resolved into an ordered list of ``Section`` objects, bottom to top, whose
height ratios sum to 1.0.

Example:
    >>> config = parse_front_config("door+2_drawers")
    >>> plan = resolve_sections(config, interior_height=30.5)
    >>> [(s.role.value, s.height_ratio) for s in plan.sections]
    [('door', 0.5), ('drawer', 0.5)]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .results import Diagnostic, DiagnosticKind
from .value_objects import Section, SectionRole, SizingPolicy

logger = logging.getLogger(__name__)

RATIO_TOLERANCE = 1e-6
CUSTOM_HEIGHT_TOLERANCE = 0.01

# Composite drawer parts switch to graduated sizing above this count
GRADUATED_DRAWER_MIN_COUNT = 3

FALLBACK_DOOR_COUNT = 2


class FrontPreset(str, Enum):
    """Named front configurations."""

    DOOR = "door"
    DOORS = "doors"
    THREE_DOORS_GRADUATED = "3_doors_graduated"
    ONE_DRAWER = "1_drawer"
    TWO_DRAWERS = "2_drawers"
    TWO_EQUAL_DRAWERS = "2_equal_drawers"
    DRAWERS = "drawers"
    THREE_DRAWERS = "3_drawers"
    FOUR_DRAWERS = "4_drawers"
    FIVE_DRAWERS = "5_drawers"
    THREE_EQUAL_DRAWERS = "3_equal_drawers"
    FOUR_EQUAL_DRAWERS = "4_equal_drawers"
    CUSTOM_DRAWERS = "custom_drawers"
    DRAWER_DOOR = "1_drawer+door"
    TWO_DRAWERS_DOOR = "2_drawers+door"
    DRAWER_BANK_3 = "drawer_bank_3"
    DRAWER_BANK_4 = "drawer_bank_4"


# (role, ratio, count, sizing) bottom to top
_SectionTemplate = tuple[SectionRole, float, int, SizingPolicy]

PRESET_SECTIONS: dict[FrontPreset, tuple[_SectionTemplate, ...]] = {
    FrontPreset.DOOR: ((SectionRole.DOOR, 1.0, 1, SizingPolicy.EQUAL),),
    FrontPreset.DOORS: ((SectionRole.DOOR, 1.0, 2, SizingPolicy.EQUAL),),
    FrontPreset.THREE_DOORS_GRADUATED: (
        (SectionRole.DOOR, 1.0, 3, SizingPolicy.GRADUATED),
    ),
    FrontPreset.ONE_DRAWER: ((SectionRole.DRAWER, 1.0, 1, SizingPolicy.EQUAL),),
    FrontPreset.TWO_DRAWERS: ((SectionRole.DRAWER, 1.0, 2, SizingPolicy.EQUAL),),
    FrontPreset.TWO_EQUAL_DRAWERS: (
        (SectionRole.DRAWER, 1.0, 2, SizingPolicy.EQUAL),
    ),
    FrontPreset.DRAWERS: ((SectionRole.DRAWER, 1.0, 3, SizingPolicy.GRADUATED),),
    FrontPreset.THREE_DRAWERS: (
        (SectionRole.DRAWER, 1.0, 3, SizingPolicy.GRADUATED),
    ),
    FrontPreset.FOUR_DRAWERS: (
        (SectionRole.DRAWER, 1.0, 4, SizingPolicy.GRADUATED),
    ),
    FrontPreset.FIVE_DRAWERS: (
        (SectionRole.DRAWER, 1.0, 5, SizingPolicy.GRADUATED),
    ),
    FrontPreset.THREE_EQUAL_DRAWERS: (
        (SectionRole.DRAWER, 1.0, 3, SizingPolicy.EQUAL),
    ),
    FrontPreset.FOUR_EQUAL_DRAWERS: (
        (SectionRole.DRAWER, 1.0, 4, SizingPolicy.EQUAL),
    ),
    FrontPreset.DRAWER_DOOR: (
        (SectionRole.DRAWER, 0.3, 1, SizingPolicy.EQUAL),
        (SectionRole.DOOR, 0.7, 1, SizingPolicy.EQUAL),
    ),
    FrontPreset.TWO_DRAWERS_DOOR: (
        (SectionRole.DRAWER, 0.4, 2, SizingPolicy.EQUAL),
        (SectionRole.DOOR, 0.6, 1, SizingPolicy.EQUAL),
    ),
    FrontPreset.DRAWER_BANK_3: (
        (SectionRole.DRAWER, 0.45, 3, SizingPolicy.GRADUATED),
        (SectionRole.DOOR, 0.55, 1, SizingPolicy.EQUAL),
    ),
    FrontPreset.DRAWER_BANK_4: (
        (SectionRole.DRAWER, 0.45, 4, SizingPolicy.GRADUATED),
        (SectionRole.DOOR, 0.55, 1, SizingPolicy.EQUAL),
    ),
}


@dataclass(frozen=True)
class PartSpec:
    """One '+'-separated part of a composite front expression.

    Attributes:
        role: Door or drawer.
        count: Leading integer of the part, or None when absent.
        custom: True when the part mentions custom heights.
        text: The normalized source text of the part.
    """

    role: SectionRole
    count: int | None = None
    custom: bool = False
    text: str = ""


@dataclass(frozen=True)
class PresetConfig:
    """A front configuration naming a preset."""

    preset: FrontPreset

    def describe(self) -> str:
        return self.preset.value


@dataclass(frozen=True)
class CompositeConfig:
    """A front configuration built from '+'-separated parts.

    Attributes:
        parts: Recognised parts in stacking order (bottom first).
        ignored: Parts that matched neither door nor drawer.
    """

    parts: tuple[PartSpec, ...] = field(default_factory=tuple)
    ignored: tuple[str, ...] = field(default_factory=tuple)

    def describe(self) -> str:
        return "+".join(part.text for part in self.parts)


FrontConfig = Union[PresetConfig, CompositeConfig]


@dataclass(frozen=True)
class SectionPlan:
    """Resolved front sections.

    Attributes:
        sections: Sections in bottom-to-top order; ratios sum to 1.0.
        used_fallback: True when the requested configuration could not be
            used and a default section was substituted.
        diagnostics: Non-fatal notes gathered while resolving.
    """

    sections: tuple[Section, ...]
    used_fallback: bool = False
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def ratio_sum(self) -> float:
        return sum(s.height_ratio for s in self.sections)


_LEADING_COUNT = re.compile(r"^\s*(\d+)")


def _parse_part(text: str) -> PartSpec | None:
    if "drawer" in text:
        role = SectionRole.DRAWER
    elif "door" in text:
        role = SectionRole.DOOR
    else:
        return None
    match = _LEADING_COUNT.match(text)
    count = max(int(match.group(1)), 1) if match else None
    return PartSpec(role=role, count=count, custom="custom" in text, text=text)


def parse_front_config(raw: str | FrontPreset | FrontConfig) -> FrontConfig:
    """Parse a front descriptor into a tagged configuration.

    A string equal to a preset value becomes a PresetConfig; anything else
    is treated as a composite expression. Parts are classified by substring
    ("drawer" is checked before "door") and an optional leading integer is
    taken as the item count.

    Args:
        raw: Preset, preset value, composite expression, or an already
            parsed configuration.

    Returns:
        A PresetConfig or CompositeConfig.
    """
    if isinstance(raw, (PresetConfig, CompositeConfig)):
        return raw
    if isinstance(raw, FrontPreset):
        return PresetConfig(raw)

    normalized = raw.strip().lower().replace(" ", "_")
    try:
        return PresetConfig(FrontPreset(normalized))
    except ValueError:
        pass

    parts: list[PartSpec] = []
    ignored: list[str] = []
    for chunk in raw.lower().split("+"):
        text = chunk.strip().replace(" ", "_")
        if not text:
            continue
        part = _parse_part(text)
        if part is None:
            ignored.append(text)
        else:
            parts.append(part)
    return CompositeConfig(parts=tuple(parts), ignored=tuple(ignored))


def _normalize(sections: list[Section]) -> tuple[Section, ...]:
    total = sum(s.height_ratio for s in sections)
    if abs(total - 1.0) <= RATIO_TOLERANCE:
        return tuple(sections)
    logger.debug(f"Normalizing section ratios summing to {total:.6f}")
    return tuple(
        Section(
            role=s.role,
            height_ratio=s.height_ratio / total,
            item_count=s.item_count,
            sizing=s.sizing,
            custom_heights=s.custom_heights,
        )
        for s in sections
    )


def _fallback_plan(reason: str, notes: list[Diagnostic]) -> SectionPlan:
    logger.warning(f"Front configuration fallback to {FALLBACK_DOOR_COUNT} doors: {reason}")
    notes.append(Diagnostic(DiagnosticKind.CONFIG_FALLBACK, reason))
    section = Section(SectionRole.DOOR, 1.0, FALLBACK_DOOR_COUNT, SizingPolicy.EQUAL)
    return SectionPlan(sections=(section,), used_fallback=True, diagnostics=tuple(notes))


def _resolve_preset(
    config: PresetConfig,
    interior_height: float,
    custom_heights: tuple[float, ...],
    single_door: bool,
) -> SectionPlan:
    preset = config.preset
    if preset == FrontPreset.CUSTOM_DRAWERS:
        if custom_heights:
            section = Section(
                SectionRole.DRAWER,
                1.0,
                len(custom_heights),
                SizingPolicy.CUSTOM,
                custom_heights,
            )
            total = sum(custom_heights)
            if abs(total - interior_height) <= CUSTOM_HEIGHT_TOLERANCE:
                return SectionPlan(sections=(section,))
            note = Diagnostic(
                DiagnosticKind.CONFIG_FALLBACK,
                f"Custom drawer heights sum to {total:g}\" but the interior is "
                f"{interior_height:g}\"; heights are used as given",
            )
            logger.warning(note.message)
            return SectionPlan(sections=(section,), diagnostics=(note,))
        note = Diagnostic(
            DiagnosticKind.CONFIG_FALLBACK,
            "custom_drawers requested without custom heights; using one drawer",
        )
        logger.warning(note.message)
        section = Section(SectionRole.DRAWER, 1.0, 1, SizingPolicy.EQUAL)
        return SectionPlan(sections=(section,), used_fallback=True, diagnostics=(note,))

    sections = []
    for role, ratio, count, sizing in PRESET_SECTIONS[preset]:
        if preset == FrontPreset.DOORS and single_door:
            count = 1
        sections.append(Section(role, ratio, count, sizing))
    return SectionPlan(sections=_normalize(sections))


def _composite_drawer_sizing(count: int) -> SizingPolicy:
    if count >= GRADUATED_DRAWER_MIN_COUNT:
        return SizingPolicy.GRADUATED
    return SizingPolicy.EQUAL


def _resolve_composite(
    config: CompositeConfig,
    interior_height: float,
    custom_heights: tuple[float, ...],
) -> SectionPlan:
    notes: list[Diagnostic] = [
        Diagnostic(DiagnosticKind.IGNORED_CONFIG_PART, f"Ignored front part {text!r}")
        for text in config.ignored
    ]
    parts = config.parts
    if not parts:
        return _fallback_plan("empty or unrecognised front configuration", notes)

    drawer_index = next(
        (i for i, part in enumerate(parts) if part.role == SectionRole.DRAWER), None
    )
    if custom_heights and drawer_index is not None and interior_height > 0:
        drawer_ratio = min(sum(custom_heights) / interior_height, 1.0)
        others = len(parts) - 1
        remainder = 1.0 - drawer_ratio
        if others and remainder <= RATIO_TOLERANCE:
            notes.append(
                Diagnostic(
                    DiagnosticKind.IGNORED_CONFIG_PART,
                    "Custom drawer heights fill the cabinet; other parts dropped",
                )
            )
            others = 0
        sections = []
        for i, part in enumerate(parts):
            if i == drawer_index:
                sections.append(
                    Section(
                        SectionRole.DRAWER,
                        drawer_ratio,
                        len(custom_heights),
                        SizingPolicy.CUSTOM,
                        custom_heights,
                    )
                )
            elif others:
                sections.append(_section_for_part(part, remainder / others))
        return SectionPlan(sections=_normalize(sections), diagnostics=tuple(notes))

    ratio = 1.0 / len(parts)
    sections = [_section_for_part(part, ratio) for part in parts]
    return SectionPlan(sections=_normalize(sections), diagnostics=tuple(notes))


def _section_for_part(part: PartSpec, ratio: float) -> Section:
    count = part.count or 1
    if part.role == SectionRole.DRAWER:
        return Section(SectionRole.DRAWER, ratio, count, _composite_drawer_sizing(count))
    return Section(SectionRole.DOOR, ratio, count, SizingPolicy.EQUAL)


def resolve_sections(
    config: FrontConfig,
    interior_height: float,
    custom_heights: list[float] | tuple[float, ...] = (),
    single_door: bool = False,
) -> SectionPlan:
    """Resolve a front configuration into bottom-to-top sections.

    Args:
        config: Parsed front configuration.
        interior_height: Interior height used to turn custom drawer heights
            into a ratio and to check custom_drawers heights against.
        custom_heights: Optional explicit drawer heights, bottom first.
        single_door: Use one door instead of two for the "doors" preset.

    Returns:
        SectionPlan whose section ratios sum to 1.0. An empty or
        unrecognised composite yields a single two-door section, and
        custom_drawers without heights a single drawer, both with
        ``used_fallback`` set.
    """
    heights = tuple(float(h) for h in custom_heights if h > 0)
    match config:
        case PresetConfig():
            plan = _resolve_preset(config, interior_height, heights, single_door)
        case CompositeConfig():
            plan = _resolve_composite(config, interior_height, heights)
        case _:
            raise TypeError(f"Unsupported front configuration: {config!r}")
    logger.debug(
        f"Resolved front config {config.describe()!r} into "
        f"{len(plan.sections)} section(s)"
    )
    return plan
