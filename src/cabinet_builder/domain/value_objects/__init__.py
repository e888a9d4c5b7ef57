"""Value objects for the cabinet geometry domain.

This module provides immutable data types used throughout the cabinet
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry and materials
from ._core_geometry import (
    MaterialTag,
    Point2D,
    Point3D,
)

# 3D geometry and emission primitive
from ._3d_geometry import (
    BoundingBox3D,
    OrientedBox,
)

# Cabinet classification
from ._cabinets import (
    CabinetKind,
    CornerSubtype,
    FrameType,
    snap_corner_size,
)

# Front sections
from ._sections import (
    HandleSide,
    Section,
    SectionRole,
    SizingPolicy,
)

# Run layout
from ._layout import (
    ApplianceGap,
    FillerStrip,
    RoomPreset,
)

__all__ = [
    # Core geometry
    "MaterialTag",
    "Point2D",
    "Point3D",
    # 3D geometry
    "BoundingBox3D",
    "OrientedBox",
    # Cabinets
    "CabinetKind",
    "CornerSubtype",
    "FrameType",
    "snap_corner_size",
    # Sections
    "HandleSide",
    "Section",
    "SectionRole",
    "SizingPolicy",
    # Layout
    "ApplianceGap",
    "FillerStrip",
    "RoomPreset",
]
