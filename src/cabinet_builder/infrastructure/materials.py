"""Room-scoped material naming and colors."""

from __future__ import annotations

import logging

from cabinet_builder.application.context import sanitize_room_name
from cabinet_builder.contracts.renderer import MaterialHandle
from cabinet_builder.domain.constants import MATERIAL_COLORS
from cabinet_builder.domain.value_objects import MaterialTag

logger = logging.getLogger(__name__)

# Material tag -> MATERIAL_COLORS key
TAG_COLORS: dict[MaterialTag, str] = {
    MaterialTag.BOX: "box_wood",
    MaterialTag.DOOR_FACE: "door_face",
    MaterialTag.DRAWER_FACE: "door_face",
    MaterialTag.INTERIOR: "interior",
    MaterialTag.COUNTERTOP: "countertop",
    MaterialTag.HARDWARE: "hardware",
    MaterialTag.EDGE_BAND: "box_wood",
    MaterialTag.APPLIANCE: "appliance",
}


def material_name(tag: MaterialTag, room_name: str) -> str:
    """Name of a tag's material in a room.

    Examples:
        >>> material_name(MaterialTag.DOOR_FACE, "Master Bath")
        'DoorFace_Master_Bath'
    """
    return f"{tag.value}_{sanitize_room_name(room_name)}"


class RoomMaterialManager:
    """Creates one material per tag per room and reuses it.

    Attributes:
        room_name: Room the materials belong to.
    """

    def __init__(self, room_name: str = "Kitchen") -> None:
        self.room_name = room_name
        self._cache: dict[MaterialTag, MaterialHandle] = {}

    def get_material(self, tag: MaterialTag) -> MaterialHandle:
        """Return the room's material for tag, creating it on first use."""
        handle = self._cache.get(tag)
        if handle is None:
            handle = MaterialHandle(
                name=material_name(tag, self.room_name),
                color=MATERIAL_COLORS[TAG_COLORS[tag]],
                tag=tag.value,
            )
            self._cache[tag] = handle
            logger.debug(f"Created material {handle.name}")
        return handle

    @property
    def materials(self) -> list[MaterialHandle]:
        return list(self._cache.values())
