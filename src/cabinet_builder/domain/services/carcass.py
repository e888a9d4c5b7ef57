"""Carcass decomposition for cabinet specifications.

``decompose`` turns a CabinetSpec into the boxes of its structural carcass
in cabinet-local coordinates (origin at the front-bottom-left, Z up, Y
running front to back). Geometry is only ever composed additively: toe-kick
notches are modelled by splitting side panels into two boxes and corner
cutouts by choosing the panel outlines, never by subtracting solids.

Branches by kind:
- standard rectangular box (base, wall, island, tall, floating, display)
- inside/outside corners (see ``corners``)
- stacked wall units
- appliance placeholders (see ``appliances``)
"""

from __future__ import annotations

import logging

from ..constants import (
    WALL_STACK_9FT_UPPER_COUNT,
    WALL_STACK_LOWER_HEIGHT,
    WALL_STACK_REVEAL,
    WALL_STACK_UPPER_COUNT,
    WALL_STACK_UPPER_HEIGHT,
)
from ..entities import CabinetSpec
from ..exceptions import InvalidSpecError
from ..results import GeometryResult
from ..value_objects import CabinetKind, Point3D
from .appliances import build_dishwasher, build_fridge, build_range, build_wall_oven
from .corners import build_inside_corner, build_outside_corner
from .geometry import BoxCollector
from .standard_box import add_standard_box

logger = logging.getLogger(__name__)

__all__ = [
    "decompose",
    "wall_stack_units",
]


def wall_stack_units(kind: CabinetKind) -> list[tuple[str, float, float]]:
    """Units of a stacked wall cabinet as (name, z, height), bottom first."""
    uppers = (
        WALL_STACK_9FT_UPPER_COUNT
        if kind == CabinetKind.WALL_STACK_9FT
        else WALL_STACK_UPPER_COUNT
    )
    units = [("Lower", 0.0, WALL_STACK_LOWER_HEIGHT)]
    z = WALL_STACK_LOWER_HEIGHT + WALL_STACK_REVEAL
    for i in range(1, uppers + 1):
        units.append((f"Upper {i}", z, WALL_STACK_UPPER_HEIGHT))
        z += WALL_STACK_UPPER_HEIGHT + WALL_STACK_REVEAL
    return units


def _build_wall_stack(spec: CabinetSpec) -> GeometryResult:
    collector = BoxCollector()
    for name, z, height in wall_stack_units(spec.kind):
        unit = BoxCollector(prefix=name, offset=Point3D(0, 0, z))
        add_standard_box(
            unit,
            spec.width,
            spec.depth,
            height,
            top_panel=True,
            face_frame=spec.is_framed,
        )
        collector.extend(unit.result())
    return collector.result()


def _build_standard(spec: CabinetSpec) -> GeometryResult:
    collector = BoxCollector()
    add_standard_box(
        collector,
        spec.width,
        spec.depth,
        spec.interior_height,
        toe_kick=spec.kind.has_toe_kick_panel,
        top_panel=spec.kind.has_top_panel,
        shelf_ladder=spec.kind.is_display,
        face_frame=spec.is_framed,
    )
    return collector.result()


def decompose(spec: CabinetSpec) -> GeometryResult:
    """Derive the carcass boxes for a cabinet.

    Args:
        spec: Cabinet specification.

    Returns:
        GeometryResult with the carcass (and appliance placeholder) boxes in
        cabinet-local coordinates, plus diagnostics for skipped boxes.

    Raises:
        InvalidSpecError: If the spec fails validation. No geometry is
            produced in that case.
    """
    validation = spec.validate()
    if not validation.is_valid:
        raise InvalidSpecError(validation.errors)

    match spec.kind:
        case CabinetKind.CORNER_BASE | CabinetKind.CORNER_WALL:
            if spec.corner_subtype.is_inside:  # type: ignore[union-attr]
                result = build_inside_corner(spec)
            else:
                result = build_outside_corner(spec)
        case CabinetKind.WALL_STACK | CabinetKind.WALL_STACK_9FT:
            result = _build_wall_stack(spec)
        case CabinetKind.SUBZERO_FRIDGE:
            result = build_fridge(spec)
        case CabinetKind.MIELE_DISHWASHER:
            result = build_dishwasher(spec)
        case CabinetKind.RANGE:
            result = build_range(spec)
        case CabinetKind.WALL_OVEN:
            result = build_wall_oven(spec)
        case _:
            result = _build_standard(spec)

    logger.debug(
        f"Decomposed {spec.group_name} into {len(result.boxes)} carcass boxes "
        f"({result.skipped_count} skipped)"
    )
    return result
