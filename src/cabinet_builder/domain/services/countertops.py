"""Countertop and backsplash geometry.

Slabs overhang the front of the cabinets they sit on and optionally their
exposed sides. Runs share one continuous slab whose depth and elevation
come from the first cabinet in the run; mixed-depth runs are not
reconciled. Corner countertops follow the cabinet's L footprint and only
overhang its exposed edges.
"""

from __future__ import annotations

import logging

from ..constants import (
    BACKSPLASH_HEIGHT,
    BACKSPLASH_THICKNESS,
    COUNTERTOP_BACK_OVERHANG,
    COUNTERTOP_FRONT_OVERHANG,
    COUNTERTOP_SIDE_OVERHANG,
    COUNTERTOP_THICKNESS,
    DEGENERATE_EPSILON,
    ISLAND_SEATING_OVERHANG,
)
from ..entities import CabinetSpec
from ..results import GeometryResult
from ..value_objects import CabinetKind, MaterialTag, Point2D, Point3D
from .geometry import BoxCollector

logger = logging.getLogger(__name__)

__all__ = [
    "corner_countertop_outline",
    "countertop_for_cabinet",
    "countertop_for_corner",
    "countertop_for_run",
]


def _add_backsplash(
    c: BoxCollector,
    label: str,
    origin: Point3D,
    size_x: float,
    size_y: float,
) -> None:
    c.box(label, MaterialTag.COUNTERTOP, origin, size_x, size_y, BACKSPLASH_HEIGHT)


def countertop_for_cabinet(
    spec: CabinetSpec, include_side_overhang: bool = False
) -> GeometryResult:
    """Countertop slab (and backsplash) for a single cabinet.

    Args:
        spec: Cabinet the slab sits on.
        include_side_overhang: Overhang both sides by the standard side
            overhang.

    Returns:
        GeometryResult in cabinet-local coordinates.
    """
    if spec.kind in (CabinetKind.CORNER_BASE, CabinetKind.CORNER_WALL):
        return countertop_for_corner(spec)

    side = COUNTERTOP_SIDE_OVERHANG if include_side_overhang else 0.0
    seating = (
        ISLAND_SEATING_OVERHANG
        if spec.kind == CabinetKind.ISLAND and spec.has_seating_side
        else 0.0
    )
    width = spec.width + 2 * side
    depth = spec.depth + COUNTERTOP_FRONT_OVERHANG + COUNTERTOP_BACK_OVERHANG + seating
    x0 = -side
    y0 = -COUNTERTOP_FRONT_OVERHANG
    z = spec.carcass_top

    c = BoxCollector()
    c.box(
        "Countertop/Slab",
        MaterialTag.COUNTERTOP,
        Point3D(x0, y0, z),
        width,
        depth,
        COUNTERTOP_THICKNESS,
    )
    if spec.has_backsplash:
        _add_backsplash(
            c,
            "Backsplash/Main",
            Point3D(x0, y0 + depth - BACKSPLASH_THICKNESS, z + COUNTERTOP_THICKNESS),
            width,
            BACKSPLASH_THICKNESS,
        )
    return c.result()


def countertop_for_run(
    cabinets: list[CabinetSpec], include_backsplash: bool | None = None
) -> GeometryResult:
    """One continuous slab across a run of placed cabinets.

    The slab spans the min/max X of the members plus side overhangs. Its
    depth, Y and elevation come from the first cabinet only.

    Args:
        cabinets: Placed cabinets, in run order.
        include_backsplash: Force the backsplash on or off; by default it
            is emitted when any member asks for one.

    Returns:
        GeometryResult in run coordinates (cabinet positions applied).
    """
    if not cabinets:
        return GeometryResult()

    first = cabinets[0]
    min_x = min(cab.position.x for cab in cabinets)
    max_x = max(cab.position.x + cab.footprint_width for cab in cabinets)
    depths = {cab.depth for cab in cabinets}
    if len(depths) > 1:
        logger.debug(
            f"Run countertop uses first cabinet depth {first.depth}; "
            f"member depths {sorted(depths)} are not reconciled"
        )

    width = max_x - min_x + 2 * COUNTERTOP_SIDE_OVERHANG
    depth = first.depth + COUNTERTOP_FRONT_OVERHANG + COUNTERTOP_BACK_OVERHANG
    x0 = min_x - COUNTERTOP_SIDE_OVERHANG
    y0 = first.position.y - COUNTERTOP_FRONT_OVERHANG
    z = first.position.z + first.carcass_top

    c = BoxCollector()
    c.box(
        "Countertop/Run Slab",
        MaterialTag.COUNTERTOP,
        Point3D(x0, y0, z),
        width,
        depth,
        COUNTERTOP_THICKNESS,
    )
    backsplash = (
        any(cab.has_backsplash for cab in cabinets)
        if include_backsplash is None
        else include_backsplash
    )
    if backsplash:
        _add_backsplash(
            c,
            "Backsplash/Run",
            Point3D(x0, y0 + depth - BACKSPLASH_THICKNESS, z + COUNTERTOP_THICKNESS),
            width,
            BACKSPLASH_THICKNESS,
        )
    return c.result()


def corner_countertop_outline(spec: CabinetSpec) -> list[Point2D]:
    """L-shaped countertop outline for a corner cabinet.

    The footprint is pushed out by the front overhang along the exposed
    front faces only. Edges against walls or abutting the neighbouring
    runs get no overhang.
    """
    size = spec.corner_size or 0.0
    depth = spec.depth
    o = COUNTERTOP_FRONT_OVERHANG
    back = depth + COUNTERTOP_BACK_OVERHANG

    if spec.corner_subtype.is_inside:  # type: ignore[union-attr]
        return [
            Point2D(0.0, -o),
            Point2D(size - o, -o),
            Point2D(size - o, -size),
            Point2D(size + depth, -size),
            Point2D(size + depth, back),
            Point2D(0.0, back),
        ]

    return_depth = spec.return_depth
    if return_depth < DEGENERATE_EPSILON:
        far = max(size, back)
        return [
            Point2D(0.0, -o),
            Point2D(size + o, -o),
            Point2D(size + o, far),
            Point2D(0.0, far),
        ]
    return [
        Point2D(0.0, -o),
        Point2D(size + o, -o),
        Point2D(size + o, size),
        Point2D(return_depth, size),
        Point2D(return_depth, back),
        Point2D(0.0, back),
    ]


def countertop_for_corner(spec: CabinetSpec) -> GeometryResult:
    """L-shaped slab plus one backsplash segment per back edge."""
    size = spec.corner_size or 0.0
    depth = spec.depth
    bt = BACKSPLASH_THICKNESS
    z = spec.carcass_top
    top = z + COUNTERTOP_THICKNESS

    c = BoxCollector()
    c.prism(
        "Countertop/Slab",
        MaterialTag.COUNTERTOP,
        corner_countertop_outline(spec),
        z,
        COUNTERTOP_THICKNESS,
    )
    if not spec.has_backsplash:
        return c.result()

    if spec.corner_subtype.is_inside:  # type: ignore[union-attr]
        _add_backsplash(
            c, "Backsplash/Main", Point3D(0, depth - bt, top), size + depth, bt
        )
        _add_backsplash(
            c,
            "Backsplash/Return",
            Point3D(size + depth - bt, -size, top),
            bt,
            size + depth - bt,
        )
        return c.result()

    return_depth = spec.return_depth
    if return_depth < DEGENERATE_EPSILON:
        far = max(size, depth)
        _add_backsplash(c, "Backsplash/Main", Point3D(0, far - bt, top), size, bt)
        return c.result()

    _add_backsplash(c, "Backsplash/Main", Point3D(0, depth - bt, top), return_depth, bt)
    _add_backsplash(
        c,
        "Backsplash/Return",
        Point3D(return_depth, depth - bt, top),
        bt,
        size - depth + bt,
    )
    return c.result()
