"""Appliance placeholder geometry.

Appliance cabinets are low-fidelity space reservations: enclosure panels
with the utility clearances applied, plus marker volumes for the appliance
itself. They are not functional hardware models.
"""

from __future__ import annotations

import math

from ..constants import (
    APPLIANCE_MARKER_THICKNESS,
    BACK_THICKNESS,
    MIELE_CLEARANCE_BACK,
    PANEL_THICKNESS,
    RANGE_BURNER_HEIGHT,
    RANGE_BURNER_MARGIN,
    RANGE_BURNER_MIN_WIDTH,
    RANGE_BURNER_RADIUS,
    RANGE_BURNER_SEGMENTS,
    RANGE_CLEARANCE_BACK,
    RANGE_COOKTOP_DROP,
    RANGE_COOKTOP_THICKNESS,
    SUBZERO_CLEARANCE_BACK,
    WALL_OVEN_OPENING_BOTTOM,
    WALL_OVEN_OPENING_HEIGHT,
)
from ..entities import CabinetSpec
from ..results import GeometryResult
from ..value_objects import MaterialTag, Point2D, Point3D
from .geometry import BoxCollector
from .standard_box import add_standard_box

__all__ = [
    "build_dishwasher",
    "build_fridge",
    "build_range",
    "build_wall_oven",
    "burner_centers",
    "disc_points",
]


def build_fridge(spec: CabinetSpec) -> GeometryResult:
    """Refrigerator enclosure.

    Side panels stop short of the wall by the back clearance, the top panel
    sits below the ventilation gap, and the appliance volume fills the
    opening between the sides.
    """
    t = PANEL_THICKNESS
    w, d, h = spec.width, spec.depth, spec.height
    usable_depth = d - SUBZERO_CLEARANCE_BACK
    top_z = spec.interior_height - t

    c = BoxCollector()
    c.box("Carcass/Left Side", MaterialTag.BOX, Point3D(0, 0, 0), t, usable_depth, h)
    c.box("Carcass/Right Side", MaterialTag.BOX, Point3D(w - t, 0, 0), t, usable_depth, h)
    c.box("Carcass/Top", MaterialTag.BOX, Point3D(t, 0, top_z), w - 2 * t, usable_depth, t)
    c.box(
        "Carcass/Back",
        MaterialTag.INTERIOR,
        Point3D(0, d - BACK_THICKNESS, 0),
        w,
        BACK_THICKNESS,
        h,
    )
    c.box(
        "Appliances/Refrigerator",
        MaterialTag.APPLIANCE,
        Point3D(t, 0, 0),
        w - 2 * t,
        usable_depth,
        top_z,
    )
    return c.result()


def build_dishwasher(spec: CabinetSpec) -> GeometryResult:
    """Dishwasher opening marker and appliance volume."""
    w, d = spec.width, spec.depth
    usable_depth = d - MIELE_CLEARANCE_BACK

    c = BoxCollector()
    c.box(
        "Appliances/Opening Marker",
        MaterialTag.APPLIANCE,
        Point3D(0, 0, 0),
        w,
        usable_depth,
        APPLIANCE_MARKER_THICKNESS,
    )
    c.box(
        "Appliances/Dishwasher",
        MaterialTag.APPLIANCE,
        Point3D(0, 0, spec.toe_kick_offset),
        w,
        usable_depth,
        spec.interior_height,
    )
    return c.result()


def disc_points(
    center: Point2D, radius: float, segments: int = RANGE_BURNER_SEGMENTS
) -> list[Point2D]:
    """Regular polygon approximating a circle, counter-clockwise."""
    return [
        Point2D(
            center.x + radius * math.cos(2 * math.pi * i / segments),
            center.y + radius * math.sin(2 * math.pi * i / segments),
        )
        for i in range(segments)
    ]


def burner_centers(width: float, cooktop_depth: float) -> list[Point2D]:
    """Centers of the four burners: front-left, front-right, back-left, back-right."""
    inset = RANGE_BURNER_MARGIN + RANGE_BURNER_RADIUS
    left, right = inset, width - inset
    front, back = inset, cooktop_depth - inset
    return [
        Point2D(left, front),
        Point2D(right, front),
        Point2D(left, back),
        Point2D(right, back),
    ]


def build_range(spec: CabinetSpec) -> GeometryResult:
    """Range placeholder: side markers, cooktop surface and burner discs.

    Burners are only drawn on ranges at least 30" wide.
    """
    w, h = spec.width, spec.height
    usable_depth = spec.depth - RANGE_CLEARANCE_BACK
    cooktop_top = h - RANGE_COOKTOP_DROP
    marker = APPLIANCE_MARKER_THICKNESS

    c = BoxCollector()
    c.box(
        "Appliances/Left Marker",
        MaterialTag.APPLIANCE,
        Point3D(0, 0, 0),
        marker,
        usable_depth,
        h,
    )
    c.box(
        "Appliances/Right Marker",
        MaterialTag.APPLIANCE,
        Point3D(w - marker, 0, 0),
        marker,
        usable_depth,
        h,
    )
    c.box(
        "Appliances/Cooktop",
        MaterialTag.APPLIANCE,
        Point3D(0, 0, cooktop_top - RANGE_COOKTOP_THICKNESS),
        w,
        usable_depth,
        RANGE_COOKTOP_THICKNESS,
    )
    if w >= RANGE_BURNER_MIN_WIDTH:
        for i, center in enumerate(burner_centers(w, usable_depth), start=1):
            c.prism(
                f"Appliances/Burner {i}",
                MaterialTag.HARDWARE,
                disc_points(center, RANGE_BURNER_RADIUS),
                cooktop_top,
                RANGE_BURNER_HEIGHT,
            )
    return c.result()


def build_wall_oven(spec: CabinetSpec) -> GeometryResult:
    """Tall closed-top box with support shelves around an oven opening."""
    t = PANEL_THICKNESS
    w, d = spec.width, spec.depth
    inner_width = w - 2 * t
    shelf_depth = d - BACK_THICKNESS
    opening_top = WALL_OVEN_OPENING_BOTTOM + WALL_OVEN_OPENING_HEIGHT

    c = BoxCollector()
    add_standard_box(
        c,
        w,
        d,
        spec.interior_height,
        top_panel=True,
        face_frame=spec.is_framed,
        mid_shelf=False,
    )
    c.box(
        "Carcass/Oven Support",
        MaterialTag.BOX,
        Point3D(t, 0, WALL_OVEN_OPENING_BOTTOM - t),
        inner_width,
        shelf_depth,
        t,
    )
    c.box(
        "Carcass/Oven Top Shelf",
        MaterialTag.BOX,
        Point3D(t, 0, opening_top),
        inner_width,
        shelf_depth,
        t,
    )
    c.box(
        "Appliances/Oven Opening",
        MaterialTag.APPLIANCE,
        Point3D(t, 0, WALL_OVEN_OPENING_BOTTOM),
        inner_width,
        shelf_depth,
        WALL_OVEN_OPENING_HEIGHT,
    )
    return c.result()
