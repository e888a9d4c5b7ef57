"""Adapters from configuration schemas to domain objects.

Schemas hold raw, validated user input. These functions apply the room
preset to unset surface flags and build the domain ``CabinetSpec`` and
``CabinetRun`` values the commands operate on.
"""

from cabinet_builder.application.config.schemas import (
    ApplianceGapConfig,
    CabinetRequestConfig,
    RunConfig,
)
from cabinet_builder.domain.constants import STANDARD_WIDTHS
from cabinet_builder.domain.entities import CabinetSpec
from cabinet_builder.domain.services.run_layout import CabinetRun, get_room_preset
from cabinet_builder.domain.value_objects import (
    ApplianceGap,
    CabinetKind,
    FrameType,
    RoomPreset,
)


def config_to_cabinet_spec(
    config: CabinetRequestConfig, room: RoomPreset | None = None
) -> CabinetSpec:
    """Convert a cabinet request into a CabinetSpec.

    Countertop and backsplash flags left unset follow the room preset for
    floor-standing kinds and default to off for wall-mounted kinds.

    Args:
        config: Validated cabinet request.
        room: Room preset for unset surface flags; kitchen when omitted.

    Returns:
        A CabinetSpec. Callers still check ``is_valid()``.
    """
    room = room or get_room_preset("kitchen")
    kind = CabinetKind(config.cabinet_type)
    surfaces = not kind.is_wall_mounted and not kind.is_appliance

    has_countertop = config.has_countertop
    if has_countertop is None:
        has_countertop = surfaces and room.has_countertop
    has_backsplash = config.has_backsplash
    if has_backsplash is None:
        has_backsplash = has_countertop and room.has_backsplash

    return CabinetSpec.create(
        kind=kind,
        frame=config.frame_type,
        width=config.width,
        depth=config.depth,
        height=config.height,
        corner_subtype=config.corner_type,
        front_config=config.door_drawer_config,
        custom_drawer_heights=config.custom_drawer_heights,
        single_door=config.single_door,
        has_countertop=has_countertop,
        has_backsplash=has_backsplash,
        has_seating_side=config.has_seating_side,
        height_from_floor=config.height_from_floor,
    )


def config_to_appliance_gaps(gaps: list[ApplianceGapConfig]) -> list[ApplianceGap]:
    return [ApplianceGap(position=g.position, width=g.width, label=g.label) for g in gaps]


def config_to_run(config: RunConfig) -> CabinetRun:
    """Convert a run configuration into an (un-laid-out) CabinetRun."""
    widths = (
        tuple(config.standard_widths) if config.standard_widths else STANDARD_WIDTHS
    )
    return CabinetRun(
        total_length=config.total_length,
        appliance_gaps=config_to_appliance_gaps(config.appliance_gaps),
        kind=CabinetKind(config.cabinet_type),
        frame=FrameType(config.frame_type),
        room=get_room_preset(config.room),
        standard_widths=widths,
        front_config=config.door_drawer_config,
    )
