"""Corner cabinet geometry.

Inside corners sit in a concave room corner. With corner size S and depth
D, the plan footprint is the (S + D) square minus an S x S bite at the
front-left::

    (0,D) +-----------------+ (S+D,D)
          |                 |
    (0,0) +-------+ (S,0)   |
                  |         |
                  |  return |
            (S,-S)+---------+ (S+D,-S)

The main wing faces -Y like every other cabinet; the return wing faces -X
along the right-hand wall. The bottom and top are single hexagonal panels.

Outside corners wrap a projecting corner: a main wing [0,S] x [0,D] and a
return wing [R,S] x [D,S] where the return depth R = S - D. When the depth
equals the corner size the return wing vanishes and its panels are not
emitted at all.
"""

from __future__ import annotations

import logging

from ..constants import (
    BACK_THICKNESS,
    DEGENERATE_EPSILON,
    PANEL_THICKNESS,
    TOE_KICK_DEPTH,
)
from ..entities import CabinetSpec
from ..results import GeometryResult
from ..value_objects import MaterialTag, Point2D, Point3D
from .geometry import BoxCollector

logger = logging.getLogger(__name__)

__all__ = [
    "build_inside_corner",
    "build_outside_corner",
    "inside_corner_footprint",
    "outside_corner_footprint",
]


def inside_corner_footprint(size: float, depth: float) -> list[Point2D]:
    """Hexagonal plan outline of an inside corner, counter-clockwise."""
    return [
        Point2D(0.0, 0.0),
        Point2D(size, 0.0),
        Point2D(size, -size),
        Point2D(size + depth, -size),
        Point2D(size + depth, depth),
        Point2D(0.0, depth),
    ]


def outside_corner_footprint(size: float, depth: float) -> list[Point2D]:
    """Plan outline of an outside corner, counter-clockwise.

    Six points with a return wing, four when the return depth is zero.
    """
    return_depth = size - depth
    if return_depth < DEGENERATE_EPSILON:
        far = max(size, depth)
        return [
            Point2D(0.0, 0.0),
            Point2D(size, 0.0),
            Point2D(size, far),
            Point2D(0.0, far),
        ]
    return [
        Point2D(0.0, 0.0),
        Point2D(size, 0.0),
        Point2D(size, size),
        Point2D(return_depth, size),
        Point2D(return_depth, depth),
        Point2D(0.0, depth),
    ]


def build_inside_corner(spec: CabinetSpec) -> GeometryResult:
    """Decompose an inside corner cabinet.

    Emits the hexagonal bottom and top, the left and return end sides
    (each split at the toe kick when the kind has one), two backs along the
    walls, a post at the inner corner, and a three-segment L toe kick
    (main run, corner block, return run).
    """
    size = spec.corner_size or 0.0
    depth = spec.depth
    height = spec.interior_height
    k = spec.toe_kick_offset
    t = PANEL_THICKNESS
    bt = BACK_THICKNESS
    kd = TOE_KICK_DEPTH
    toe_kick = spec.kind.has_toe_kick_panel
    box = MaterialTag.BOX
    side_height = height - 2 * t
    footprint = inside_corner_footprint(size, depth)

    c = BoxCollector()
    c.prism("Carcass/Bottom", box, footprint, k, t)
    c.prism("Carcass/Top", box, footprint, k + height - t, t)

    c.box("Carcass/Left Side", box, Point3D(0, 0, k + t), t, depth, side_height)
    c.box(
        "Carcass/Return Side", box, Point3D(size, -size, k + t), depth, t, side_height
    )
    if toe_kick:
        c.box("Carcass/Left Side Lower", box, Point3D(0, kd, 0), t, depth - kd, k)
        c.box(
            "Carcass/Return Side Lower",
            box,
            Point3D(size + kd, -size, 0),
            depth - kd,
            t,
            k,
        )

    c.box(
        "Carcass/Back",
        box,
        Point3D(t, depth - bt, k + t),
        size + depth - t - bt,
        bt,
        side_height,
    )
    c.box(
        "Carcass/Return Back",
        box,
        Point3D(size + depth - bt, -size + t, k + t),
        bt,
        size + depth - t,
        side_height,
    )
    c.box("Carcass/Corner Post", box, Point3D(size, -t, k + t), t, t, side_height)

    if toe_kick:
        c.box("Carcass/Toe Kick/Main", box, Point3D(t, kd, 0), size + kd - t, t, k)
        c.box("Carcass/Toe Kick/Corner", box, Point3D(size + kd, kd, 0), t, t, k)
        c.box(
            "Carcass/Toe Kick/Return",
            box,
            Point3D(size + kd, -size + t, 0),
            t,
            size + kd - t,
            k,
        )

    logger.debug(f"Inside corner {size}x{depth}: {len(c)} boxes")
    return c.result()


def build_outside_corner(spec: CabinetSpec) -> GeometryResult:
    """Decompose an outside corner cabinet.

    The main wing carries the bottom, left side, wrap-around end side and
    back. The return wing (bottom, wall-side back, far back, optional top)
    is only emitted when the return depth is non-zero. The toe kick runs
    along the two exposed faces: the front and the wrap-around end.
    """
    size = spec.corner_size or 0.0
    depth = spec.depth
    height = spec.interior_height
    k = spec.toe_kick_offset
    t = PANEL_THICKNESS
    bt = BACK_THICKNESS
    kd = TOE_KICK_DEPTH
    toe_kick = spec.kind.has_toe_kick_panel
    closed_top = not toe_kick
    box = MaterialTag.BOX

    return_depth = spec.return_depth
    has_return = return_depth >= DEGENERATE_EPSILON
    far_y = max(size, depth)
    main_depth = depth if has_return else depth - bt

    c = BoxCollector()
    c.box("Carcass/Bottom", box, Point3D(t, 0, k), size - 2 * t, main_depth, t)
    c.box("Carcass/Left Side", box, Point3D(0, 0, k), t, depth, height)
    if toe_kick:
        c.box("Carcass/Left Side Lower", box, Point3D(0, kd, 0), t, depth - kd, k)
    c.box("Carcass/End Side", box, Point3D(size - t, 0, k), t, far_y, height)

    back_width = (return_depth if has_return else size - t) - t
    c.box("Carcass/Back", box, Point3D(t, depth - bt, k), back_width, bt, height)
    if closed_top:
        c.box(
            "Carcass/Top",
            box,
            Point3D(t, 0, k + height - t),
            size - 2 * t,
            main_depth,
            t,
        )

    if has_return:
        x0 = return_depth
        c.box(
            "Carcass/Return/Wall Side",
            box,
            Point3D(x0, depth - bt, k),
            bt,
            return_depth,
            height,
        )
        c.box(
            "Carcass/Return/Back",
            box,
            Point3D(x0, size - bt, k),
            size - t - x0,
            bt,
            height,
        )
        c.box(
            "Carcass/Return/Bottom",
            box,
            Point3D(x0 + bt, depth, k),
            size - t - x0 - bt,
            return_depth - bt,
            t,
        )
        if closed_top:
            c.box(
                "Carcass/Return/Top",
                box,
                Point3D(x0 + bt, depth, k + height - t),
                size - t - x0 - bt,
                return_depth - bt,
                t,
            )
    else:
        logger.debug(f"Outside corner {size}x{depth} has no return wing")

    if toe_kick:
        c.box(
            "Carcass/Toe Kick/Front",
            box,
            Point3D(t, kd, 0),
            size - kd - 2 * t,
            t,
            k,
        )
        c.box(
            "Carcass/Toe Kick/End",
            box,
            Point3D(size - kd - t, kd, 0),
            t,
            far_y - kd - t,
            k,
        )

    return c.result()
