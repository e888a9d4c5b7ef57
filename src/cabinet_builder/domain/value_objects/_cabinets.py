"""Cabinet classification value objects."""

from __future__ import annotations

import re
from enum import Enum


class CabinetKind(str, Enum):
    """Kinds of cabinet the geometry services know how to decompose."""

    BASE = "base"
    WALL = "wall"
    WALL_STACK = "wall_stack"
    WALL_STACK_9FT = "wall_stack_9ft"
    ISLAND = "island"
    TALL = "tall"
    CORNER_BASE = "corner_base"
    CORNER_WALL = "corner_wall"
    FLOATING = "floating"
    SUBZERO_FRIDGE = "subzero_fridge"
    MIELE_DISHWASHER = "miele_dishwasher"
    RANGE = "range"
    WALL_OVEN = "wall_oven"
    DISPLAY_BASE = "display_base"
    DISPLAY_WALL = "display_wall"

    @property
    def is_corner(self) -> bool:
        return self in (CabinetKind.CORNER_BASE, CabinetKind.CORNER_WALL)

    @property
    def is_display(self) -> bool:
        return self in (CabinetKind.DISPLAY_BASE, CabinetKind.DISPLAY_WALL)

    @property
    def is_wall_stack(self) -> bool:
        return self in (CabinetKind.WALL_STACK, CabinetKind.WALL_STACK_9FT)

    @property
    def is_appliance(self) -> bool:
        return self in (
            CabinetKind.SUBZERO_FRIDGE,
            CabinetKind.MIELE_DISHWASHER,
            CabinetKind.RANGE,
            CabinetKind.WALL_OVEN,
        )

    @property
    def is_wall_mounted(self) -> bool:
        """Kinds hung on the wall rather than standing on the floor."""
        return self in (
            CabinetKind.WALL,
            CabinetKind.WALL_STACK,
            CabinetKind.WALL_STACK_9FT,
            CabinetKind.CORNER_WALL,
            CabinetKind.FLOATING,
            CabinetKind.DISPLAY_WALL,
        )

    @property
    def subtracts_toe_kick(self) -> bool:
        """Kinds whose interior height is measured above a toe-kick plinth."""
        return self in (
            CabinetKind.BASE,
            CabinetKind.ISLAND,
            CabinetKind.CORNER_BASE,
            CabinetKind.MIELE_DISHWASHER,
            CabinetKind.DISPLAY_BASE,
        )

    @property
    def has_toe_kick_panel(self) -> bool:
        """Kinds that get a recessed toe-kick panel and notched sides."""
        return self in (
            CabinetKind.BASE,
            CabinetKind.ISLAND,
            CabinetKind.CORNER_BASE,
            CabinetKind.DISPLAY_BASE,
        )

    @property
    def has_top_panel(self) -> bool:
        """Closed-top kinds in the standard rectangular recipe."""
        return self in (
            CabinetKind.WALL,
            CabinetKind.TALL,
            CabinetKind.FLOATING,
            CabinetKind.DISPLAY_BASE,
            CabinetKind.DISPLAY_WALL,
        )


class FrameType(str, Enum):
    """Cabinet construction style."""

    FRAMED = "framed"
    FRAMELESS = "frameless"


class CornerSubtype(str, Enum):
    """Corner cabinet geometry.

    Inside corners sit in a concave room corner and form an L with a
    square bite taken out of the front. Outside corners wrap a projecting
    corner with a main wing and a return wing.
    """

    INSIDE_SMALL = "inside_24"
    INSIDE_LARGE = "inside_36"
    OUTSIDE_SMALL = "outside_24"
    OUTSIDE_LARGE = "outside_36"

    @property
    def is_inside(self) -> bool:
        return self in (CornerSubtype.INSIDE_SMALL, CornerSubtype.INSIDE_LARGE)

    @property
    def is_outside(self) -> bool:
        return not self.is_inside

    @property
    def size(self) -> float:
        """Corner size in inches (24 or 36)."""
        if self in (CornerSubtype.INSIDE_SMALL, CornerSubtype.OUTSIDE_SMALL):
            return 24.0
        return 36.0

    @classmethod
    def from_parts(cls, side: str, size: float | None = None) -> CornerSubtype:
        """Build a subtype from a side name and a requested size.

        Sizes other than 24 snap to 36.

        Raises:
            ValueError: If side is neither "inside" nor "outside".
        """
        side = side.strip().lower()
        small = snap_corner_size(size) == 24.0 if size is not None else False
        if side == "inside":
            return cls.INSIDE_SMALL if small else cls.INSIDE_LARGE
        if side == "outside":
            return cls.OUTSIDE_SMALL if small else cls.OUTSIDE_LARGE
        raise ValueError(f"Unknown corner side: {side!r}")

    @classmethod
    def from_string(cls, value: str) -> CornerSubtype:
        """Parse a corner-type string such as "inside_24" or "outside".

        Raises:
            ValueError: If the string names neither an inside nor an outside
                corner.
        """
        match = re.match(r"^\s*(inside|outside)(?:[_\s-]*(\d+(?:\.\d+)?))?", value.lower())
        if not match:
            raise ValueError(f"Unknown corner type: {value!r}")
        size = float(match.group(2)) if match.group(2) else None
        return cls.from_parts(match.group(1), size)


def snap_corner_size(size: float) -> float:
    """Snap a requested corner size to the closed set {24, 36}.

    Any size other than 24 becomes 36.
    """
    return 24.0 if abs(size - 24.0) < 1e-9 else 36.0
