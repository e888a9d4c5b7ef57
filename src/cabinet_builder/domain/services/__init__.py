"""Domain services for cabinet geometry.

This package provides the geometry engines that turn a CabinetSpec into
oriented boxes:
- Carcass decomposition (standard, stacked, corner and appliance cabinets)
- Front layout (doors, drawers, handles and pulls)
- Countertops and backsplashes
- Run auto-fill and sequential placement
"""

from .appliances import (
    build_dishwasher,
    build_fridge,
    build_range,
    build_wall_oven,
    burner_centers,
    disc_points,
)
from .carcass import decompose, wall_stack_units
from .corners import (
    build_inside_corner,
    build_outside_corner,
    inside_corner_footprint,
    outside_corner_footprint,
)
from .countertops import (
    corner_countertop_outline,
    countertop_for_cabinet,
    countertop_for_corner,
    countertop_for_run,
)
from .fronts import (
    calculate_door_widths,
    calculate_drawer_heights,
    edge_reveal,
    handle_side,
    layout_fronts,
    plan_fronts,
)
from .geometry import BoxCollector
from .run_layout import (
    CabinetRun,
    PlacementSequence,
    RunSegment,
    apply_room_preset,
    get_room_preset,
)
from .standard_box import add_face_frame, add_standard_box, display_shelf_offsets

__all__ = [
    # Geometry primitives
    "BoxCollector",
    # Carcass decomposition
    "add_face_frame",
    "add_standard_box",
    "decompose",
    "display_shelf_offsets",
    "wall_stack_units",
    # Corners
    "build_inside_corner",
    "build_outside_corner",
    "inside_corner_footprint",
    "outside_corner_footprint",
    # Appliances
    "build_dishwasher",
    "build_fridge",
    "build_range",
    "build_wall_oven",
    "burner_centers",
    "disc_points",
    # Fronts
    "calculate_door_widths",
    "calculate_drawer_heights",
    "edge_reveal",
    "handle_side",
    "layout_fronts",
    "plan_fronts",
    # Countertops
    "corner_countertop_outline",
    "countertop_for_cabinet",
    "countertop_for_corner",
    "countertop_for_run",
    # Runs
    "CabinetRun",
    "PlacementSequence",
    "RunSegment",
    "apply_room_preset",
    "get_room_preset",
]
