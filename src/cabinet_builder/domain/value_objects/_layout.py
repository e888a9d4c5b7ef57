"""Run layout value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApplianceGap:
    """A span of a run reserved for an appliance.

    Attributes:
        position: Distance from the run start in inches.
        width: Width of the reserved span in inches.
        label: Human-readable name ("Range", "Dishwasher", ...).
    """

    position: float
    width: float
    label: str = "Appliance"

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("Appliance gap position must be non-negative")
        if self.width <= 0:
            raise ValueError("Appliance gap width must be positive")

    @property
    def end(self) -> float:
        return self.position + self.width

    def overlaps(self, other: ApplianceGap) -> bool:
        return self.position < other.end and other.position < self.end


@dataclass(frozen=True)
class FillerStrip:
    """A narrow non-standard panel filling leftover run space."""

    position: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Filler width must be positive")
        if self.height <= 0:
            raise ValueError("Filler height must be positive")

    @property
    def end(self) -> float:
        return self.position + self.width


@dataclass(frozen=True)
class RoomPreset:
    """Default depths, heights and surfaces for a type of room.

    Attributes:
        name: Preset key ("kitchen", "bathroom", "closet").
        base_depth: Depth for floor-standing cabinets.
        wall_depth: Depth for wall-mounted cabinets.
        wall_height: Height for wall-mounted cabinets.
        has_countertop: Whether base runs get a countertop.
        has_backsplash: Whether base runs get a backsplash.
    """

    name: str
    base_depth: float
    wall_depth: float
    wall_height: float
    has_countertop: bool = True
    has_backsplash: bool = True

    def __post_init__(self) -> None:
        if self.base_depth <= 0 or self.wall_depth <= 0 or self.wall_height <= 0:
            raise ValueError("Room preset dimensions must be positive")
