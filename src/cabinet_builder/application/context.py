"""Explicit per-session context replacing module-level mutable state."""

from __future__ import annotations

import re
from dataclasses import dataclass


def sanitize_room_name(room_name: str) -> str:
    """Reduce a room name to a material-safe identifier.

    Examples:
        >>> sanitize_room_name("Master Bath #2")
        'Master_Bath_2'
    """
    cleaned = re.sub(r"[^A-Za-z0-9]+", "_", room_name).strip("_")
    return cleaned or "Room"


@dataclass
class RunContext:
    """The session's current run and room.

    Attributes:
        current_run: Name of the run new cabinets attach to in auto mode.
        room_name: Room used for material naming.
    """

    current_run: str | None = None
    room_name: str = "Kitchen"

    @property
    def material_suffix(self) -> str:
        return sanitize_room_name(self.room_name)
