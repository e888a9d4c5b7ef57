"""The standard rectangular carcass recipe.

Shared by the plain cabinet kinds, each unit of a stacked wall cabinet and
the wall-oven tower. Side panels of toe-kick kinds are split at the kick
boundary into a lower panel behind the kick line and a full panel above
it, so the notch is two boxes rather than a cut.
"""

from __future__ import annotations

from ..constants import (
    BACK_THICKNESS,
    DISPLAY_SHELF_SPACING,
    DISPLAY_SHELF_SPACING_MAX,
    DISPLAY_SHELF_SPACING_MIN,
    FRAME_THICKNESS,
    FRAME_WIDTH,
    PANEL_THICKNESS,
    SHELF_THRESHOLD,
    TOE_KICK_DEPTH,
    TOE_KICK_HEIGHT,
)
from ..value_objects import MaterialTag, Point3D
from .geometry import BoxCollector

__all__ = [
    "add_face_frame",
    "add_standard_box",
    "display_shelf_offsets",
]


def display_shelf_offsets(usable_height: float) -> list[float]:
    """Shelf offsets for a display cabinet's shelf ladder.

    The clear height is divided into gaps of roughly 16", adjusted so each
    gap stays within 14-18".

    Args:
        usable_height: Clear height between the bottom and top panels.

    Returns:
        Offsets of each shelf above the clear-space floor, bottom first.
    """
    if usable_height <= 0:
        return []
    gaps = max(1, round(usable_height / DISPLAY_SHELF_SPACING))
    spacing = usable_height / gaps
    while spacing > DISPLAY_SHELF_SPACING_MAX:
        gaps += 1
        spacing = usable_height / gaps
    while spacing < DISPLAY_SHELF_SPACING_MIN and gaps > 1:
        gaps -= 1
        spacing = usable_height / gaps
    return [i * spacing for i in range(1, gaps)]


def add_standard_box(
    collector: BoxCollector,
    width: float,
    depth: float,
    interior_height: float,
    *,
    toe_kick: bool = False,
    top_panel: bool = False,
    shelf_ladder: bool = False,
    face_frame: bool = False,
    mid_shelf: bool = True,
) -> None:
    """Add the standard rectangular carcass to a collector.

    Args:
        collector: Destination for the boxes.
        width: Carcass width.
        depth: Carcass depth.
        interior_height: Height of the sides above the toe-kick plinth.
        toe_kick: Notch the sides and add a recessed toe-kick panel.
        top_panel: Close the top (closed-top kinds only).
        shelf_ladder: Use the display shelf ladder instead of a mid shelf.
        face_frame: Add face-frame stiles and rails (framed construction).
        mid_shelf: Allow the single mid-height shelf.
    """
    t = PANEL_THICKNESS
    bt = BACK_THICKNESS
    k = TOE_KICK_HEIGHT if toe_kick else 0.0
    inner_width = width - 2 * t
    box = MaterialTag.BOX

    collector.box("Carcass/Left Side", box, Point3D(0, 0, k), t, depth, interior_height)
    collector.box(
        "Carcass/Right Side", box, Point3D(width - t, 0, k), t, depth, interior_height
    )
    if toe_kick:
        lower_depth = depth - TOE_KICK_DEPTH
        collector.box(
            "Carcass/Left Side Lower", box, Point3D(0, TOE_KICK_DEPTH, 0), t, lower_depth, k
        )
        collector.box(
            "Carcass/Right Side Lower",
            box,
            Point3D(width - t, TOE_KICK_DEPTH, 0),
            t,
            lower_depth,
            k,
        )

    collector.box("Carcass/Bottom", box, Point3D(t, 0, k), inner_width, depth - bt, t)
    collector.box(
        "Carcass/Back", box, Point3D(t, depth - bt, k), inner_width, bt, interior_height
    )
    if top_panel:
        collector.box(
            "Carcass/Top",
            box,
            Point3D(t, 0, k + interior_height - t),
            inner_width,
            depth - bt,
            t,
        )

    if shelf_ladder:
        floor = k + t
        ceiling = k + interior_height - (t if top_panel else 0.0)
        for i, offset in enumerate(display_shelf_offsets(ceiling - floor), start=1):
            collector.box(
                f"Carcass/Shelf {i}",
                MaterialTag.INTERIOR,
                Point3D(t, 0, floor + offset),
                inner_width,
                depth - bt,
                t,
            )
    elif mid_shelf and interior_height > SHELF_THRESHOLD:
        collector.box(
            "Carcass/Shelf",
            MaterialTag.INTERIOR,
            Point3D(t, 0, k + interior_height / 2),
            inner_width,
            depth - bt,
            t,
        )

    if toe_kick:
        collector.box(
            "Carcass/Toe Kick", box, Point3D(t, TOE_KICK_DEPTH, 0), inner_width, t, k
        )

    if face_frame:
        add_face_frame(collector, width, k, interior_height)


def add_face_frame(
    collector: BoxCollector, width: float, z: float, height: float
) -> None:
    """Add face-frame stiles and rails in front of the carcass face."""
    fw = FRAME_WIDTH
    ft = FRAME_THICKNESS
    box = MaterialTag.BOX
    collector.box("Carcass/Face Frame/Left Stile", box, Point3D(0, -ft, z), fw, ft, height)
    collector.box(
        "Carcass/Face Frame/Right Stile", box, Point3D(width - fw, -ft, z), fw, ft, height
    )
    collector.box(
        "Carcass/Face Frame/Bottom Rail", box, Point3D(fw, -ft, z), width - 2 * fw, ft, fw
    )
    collector.box(
        "Carcass/Face Frame/Top Rail",
        box,
        Point3D(fw, -ft, z + height - fw),
        width - 2 * fw,
        ft,
        fw,
    )


