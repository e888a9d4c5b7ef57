"""Core geometry and material value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialTag(str, Enum):
    """Semantic material tags attached to every emitted box.

    The rendering collaborator resolves a tag into a concrete material
    through a MaterialManager; the geometry services never see colors.
    """

    BOX = "Box"
    DOOR_FACE = "DoorFace"
    DRAWER_FACE = "DrawerFace"
    INTERIOR = "Interior"
    COUNTERTOP = "Countertop"
    HARDWARE = "Hardware"
    EDGE_BAND = "EdgeBand"
    APPLIANCE = "Appliance"


@dataclass(frozen=True)
class Point2D:
    """2D point in plan (XY) coordinates. Negative values are valid."""

    x: float
    y: float


@dataclass(frozen=True)
class Point3D:
    """3D point in space.

    Cabinet-local coordinates put the origin at the front-bottom-left of
    the carcass with Z up, X along the width and Y running front to back.
    Fronts hang in front of the carcass, so negative Y is common.
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Point3D:
        """Return a copy moved by the given deltas."""
        return Point3D(self.x + dx, self.y + dy, self.z + dz)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def zero(cls) -> Point3D:
        return cls(0.0, 0.0, 0.0)
