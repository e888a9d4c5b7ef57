"""Door and drawer front layout.

Fronts are laid out section by section, bottom to top. Each section spans
``height_ratio * interior_height`` starting above the toe-kick plinth and
any face-frame rail. Doors and drawers hang in front of the carcass face
(negative Y) with hardware markers in front of them.

Reveal policy: frameless fronts keep a small reveal to the cabinet edges,
framed fronts keep the larger framed reveal; adjacent doors are always
separated by the center reveal.
"""

from __future__ import annotations

import logging

from ..constants import (
    CENTER_REVEAL,
    DOOR_REVEAL,
    DOOR_THICKNESS,
    DRAWER_GRADUATIONS,
    FRAMELESS_REVEAL,
    GRADUATED_DOOR_RATIOS,
    HANDLE_INSET,
    HARDWARE_MARKER_SIZE,
    PANEL_THICKNESS,
    PULL_DROP,
    WALL_OVEN_OPENING_BOTTOM,
    WALL_OVEN_OPENING_HEIGHT,
    WIDE_DOOR_THRESHOLD,
)
from ..entities import CabinetSpec
from ..exceptions import InvalidSpecError
from ..front_config import resolve_sections
from ..results import GeometryResult
from ..value_objects import (
    CabinetKind,
    HandleSide,
    MaterialTag,
    Point3D,
    Section,
    SectionRole,
    SizingPolicy,
)
from .carcass import wall_stack_units
from .geometry import BoxCollector

logger = logging.getLogger(__name__)

__all__ = [
    "DRAWER_BOX_DEPTH_RATIO",
    "calculate_door_widths",
    "calculate_drawer_heights",
    "edge_reveal",
    "handle_side",
    "layout_fronts",
    "plan_fronts",
]

DRAWER_BOX_DEPTH_RATIO = 0.75
DRAWER_SLIDE_CLEARANCE = 0.5


def calculate_drawer_heights(
    count: int,
    total_height: float,
    equal_sizing: bool,
    custom_heights: list[float] | tuple[float, ...] | None = None,
) -> list[float]:
    """Split a drawer bank's height among its drawers.

    Graduated sizing is always largest at the bottom.

    Args:
        count: Number of drawers.
        total_height: Height of the drawer bank.
        equal_sizing: Divide the height evenly.
        custom_heights: Explicit heights, bottom first; overrides everything
            else when supplied.

    Returns:
        Drawer heights, bottom first.

    Example:
        >>> calculate_drawer_heights(3, 30.0, equal_sizing=False)
        [13.5, 9.0, 7.5]
    """
    if custom_heights:
        return [float(h) for h in custom_heights]
    if count <= 0:
        return []
    fractions = DRAWER_GRADUATIONS.get(count)
    if equal_sizing or fractions is None:
        return [total_height / count] * count
    return [total_height * fraction for fraction in fractions]


def edge_reveal(spec: CabinetSpec) -> float:
    """Reveal between fronts and the cabinet edges."""
    return DOOR_REVEAL if spec.is_framed else FRAMELESS_REVEAL


def calculate_door_widths(
    width: float, count: int, reveal: float, graduated: bool = False
) -> list[float]:
    """Widths of side-by-side doors, left to right.

    Args:
        width: Overall width available to the doors.
        count: Number of doors.
        reveal: Reveal at each outer edge.
        graduated: Apply the fixed 20/30/50 split (three doors only).

    Returns:
        Door widths, left to right.
    """
    if count <= 0:
        return []
    net = width - 2 * reveal - (count - 1) * CENTER_REVEAL
    if graduated and count == len(GRADUATED_DOOR_RATIOS):
        return [net * ratio for ratio in GRADUATED_DOOR_RATIOS]
    return [net / count] * count


def handle_side(index: int, count: int, dishwasher: bool = False) -> HandleSide:
    """Handle position for the door at index among count doors.

    A single door takes its handle on the right; pairs and rows alternate
    right, left, right... so paired doors pull from the middle. Dishwasher
    panels always take a top-center handle.
    """
    if dishwasher:
        return HandleSide.TOP_CENTER
    if count == 1:
        return HandleSide.RIGHT
    return HandleSide.RIGHT if index % 2 == 0 else HandleSide.LEFT


class _FrontBuilder:
    """Collects fronts and hardware with running door/drawer numbering."""

    def __init__(self, spec: CabinetSpec, front_offset: float | None = None) -> None:
        self.spec = spec
        self.collector = BoxCollector()
        self.reveal = edge_reveal(spec)
        offset = spec.front_offset if front_offset is None else front_offset
        self.y_front = -offset - DOOR_THICKNESS
        self.doors = 0
        self.drawers = 0

    def door(
        self,
        x: float,
        z: float,
        width: float,
        height: float,
        side: HandleSide | None,
    ) -> None:
        self.doors += 1
        n = self.doors
        box = self.collector.box(
            f"Fronts/Door {n}",
            MaterialTag.DOOR_FACE,
            Point3D(x, self.y_front, z),
            width,
            DOOR_THICKNESS,
            height,
        )
        if box is None or side is None:
            return
        m = HARDWARE_MARKER_SIZE
        match side:
            case HandleSide.RIGHT:
                hx, hz = x + width - HANDLE_INSET - m / 2, z + height / 2 - m / 2
            case HandleSide.LEFT:
                hx, hz = x + HANDLE_INSET - m / 2, z + height / 2 - m / 2
            case HandleSide.TOP_CENTER:
                hx, hz = x + width / 2 - m / 2, z + height - HANDLE_INSET - m / 2
        self.collector.box(
            f"Hardware/Handle {n}",
            MaterialTag.HARDWARE,
            Point3D(hx, self.y_front - m, hz),
            m,
            m,
            m,
        )

    def door_row(
        self,
        z0: float,
        span: float,
        count: int,
        graduated: bool = False,
        dishwasher: bool = False,
    ) -> None:
        """Doors side by side across the full width of a section."""
        r = self.reveal
        widths = calculate_door_widths(self.spec.width, count, r, graduated)
        x = r
        for i, w in enumerate(widths):
            self.door(x, z0 + r, w, span - 2 * r, handle_side(i, count, dishwasher))
            x += w + CENTER_REVEAL

    def drawer_bank(self, z0: float, span: float, section: Section) -> None:
        """Drawers stacked bottom to top within a section."""
        r = self.reveal
        m = HARDWARE_MARKER_SIZE
        spec = self.spec
        heights = calculate_drawer_heights(
            section.item_count,
            span,
            equal_sizing=section.sizing == SizingPolicy.EQUAL,
            custom_heights=(
                section.custom_heights if section.sizing == SizingPolicy.CUSTOM else None
            ),
        )
        front_width = spec.width - 2 * r
        box_width = spec.width - 2 * PANEL_THICKNESS - 2 * DRAWER_SLIDE_CLEARANCE
        box_depth = spec.depth * DRAWER_BOX_DEPTH_RATIO
        z = z0
        for drawer_height in heights:
            self.drawers += 1
            n = self.drawers
            front_z = z + r
            front_height = drawer_height - 2 * r
            front = self.collector.box(
                f"Fronts/Drawer {n}",
                MaterialTag.DRAWER_FACE,
                Point3D(r, self.y_front, front_z),
                front_width,
                DOOR_THICKNESS,
                front_height,
            )
            if front is not None:
                pull_z = front_z + front_height - min(PULL_DROP, front_height / 2) - m / 2
                self.collector.box(
                    f"Hardware/Pull {n}",
                    MaterialTag.HARDWARE,
                    Point3D(r + front_width / 2 - m / 2, self.y_front - m, pull_z),
                    m,
                    m,
                    m,
                )
                self.collector.box(
                    f"Fronts/Drawer {n} Box",
                    MaterialTag.INTERIOR,
                    Point3D(PANEL_THICKNESS + DRAWER_SLIDE_CLEARANCE, 0, front_z),
                    box_width,
                    box_depth,
                    front_height - DRAWER_SLIDE_CLEARANCE,
                )
            z += drawer_height

    def sections(
        self,
        sections: list[Section] | tuple[Section, ...],
        z0: float,
        total_height: float,
        dishwasher: bool = False,
    ) -> None:
        z = z0
        for section in sections:
            span = section.height_ratio * total_height
            if section.role == SectionRole.DOOR:
                self.door_row(
                    z,
                    span,
                    section.item_count,
                    graduated=section.sizing == SizingPolicy.GRADUATED,
                    dishwasher=dishwasher,
                )
            else:
                self.drawer_bank(z, span, section)
            z += span


def _inside_corner_fronts(spec: CabinetSpec, builder: _FrontBuilder) -> None:
    size = spec.corner_size or 0.0
    r = builder.reveal
    thickness = DOOR_THICKNESS
    z = spec.toe_kick_offset + r
    height = spec.interior_height - 2 * r

    # Main-face door stops one door thickness short of the return leg
    builder.door(r, z, size - thickness - 2 * r, height, HandleSide.RIGHT)
    builder.doors += 1
    builder.collector.box(
        f"Fronts/Door {builder.doors}",
        MaterialTag.DOOR_FACE,
        Point3D(size - thickness, -size + r, z),
        thickness,
        size - 2 * r,
        height,
    )


def _outside_corner_fronts(spec: CabinetSpec, builder: _FrontBuilder) -> None:
    size = spec.corner_size or 0.0
    r = builder.reveal
    z = spec.toe_kick_offset + r
    height = spec.interior_height - 2 * r
    far_y = max(size, spec.depth)

    builder.collector.box(
        "Fronts/Wrap Panel",
        MaterialTag.DOOR_FACE,
        Point3D(size, r, z),
        DOOR_THICKNESS,
        far_y - 2 * r,
        height,
    )
    builder.door(r, z, size - 2 * r, height, HandleSide.RIGHT)


def _stacked_door_count(width: float) -> int:
    return 2 if width > WIDE_DOOR_THRESHOLD else 1


def layout_fronts(
    spec: CabinetSpec, sections: list[Section] | tuple[Section, ...]
) -> GeometryResult:
    """Lay out door and drawer fronts with their hardware markers.

    Args:
        spec: Cabinet specification.
        sections: Resolved sections, bottom to top.

    Returns:
        GeometryResult with front and hardware boxes in cabinet-local
        coordinates.

    Raises:
        InvalidSpecError: If the spec fails validation.
    """
    validation = spec.validate()
    if not validation.is_valid:
        raise InvalidSpecError(validation.errors)

    builder = _FrontBuilder(spec)
    z0 = spec.toe_kick_offset + spec.frame_offset

    match spec.kind:
        case CabinetKind.RANGE:
            pass
        case CabinetKind.CORNER_BASE | CabinetKind.CORNER_WALL:
            corner_builder = _FrontBuilder(spec, front_offset=0.0)
            if spec.corner_subtype.is_inside:  # type: ignore[union-attr]
                _inside_corner_fronts(spec, corner_builder)
            else:
                _outside_corner_fronts(spec, corner_builder)
            builder = corner_builder
        case CabinetKind.WALL_STACK | CabinetKind.WALL_STACK_9FT:
            units = wall_stack_units(spec.kind)
            _, lower_z, lower_height = units[0]
            builder.sections(sections, lower_z + z0, lower_height)
            for _, unit_z, unit_height in units[1:]:
                builder.door_row(
                    unit_z + z0, unit_height, _stacked_door_count(spec.width)
                )
        case CabinetKind.WALL_OVEN:
            count = _stacked_door_count(spec.width)
            lower_span = WALL_OVEN_OPENING_BOTTOM - PANEL_THICKNESS - z0
            upper_z = WALL_OVEN_OPENING_BOTTOM + WALL_OVEN_OPENING_HEIGHT + PANEL_THICKNESS
            upper_span = spec.height - upper_z - spec.frame_offset
            builder.door_row(z0, lower_span, count)
            builder.door_row(upper_z, upper_span, count)
        case CabinetKind.MIELE_DISHWASHER:
            builder.sections(sections, z0, spec.interior_height, dishwasher=True)
        case _:
            builder.sections(sections, z0, spec.interior_height)

    result = builder.collector.result()
    logger.debug(
        f"Laid out {builder.doors} door(s) and {builder.drawers} drawer(s) "
        f"for {spec.group_name}"
    )
    return result


def plan_fronts(spec: CabinetSpec) -> GeometryResult:
    """Resolve the spec's front configuration and lay out its fronts.

    Configuration diagnostics (fallbacks, ignored parts) are carried into
    the returned result.
    """
    plan = resolve_sections(
        spec.front_config,
        spec.interior_height,
        custom_heights=spec.custom_drawer_heights,
        single_door=spec.single_door,
    )
    fronts = layout_fronts(spec, plan.sections)
    return GeometryResult(
        boxes=fronts.boxes, diagnostics=plan.diagnostics + fronts.diagnostics
    )
