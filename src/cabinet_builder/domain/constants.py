"""Standard dimensions for cabinet geometry derivation.

All values are in inches unless noted. These are pure data; the geometry
services read them but never mutate them.
"""

from __future__ import annotations

from .value_objects import CabinetKind, RoomPreset

# --- Panel Stock ---

PANEL_THICKNESS = 0.75
BACK_THICKNESS = PANEL_THICKNESS / 2

# --- Toe Kick ---

TOE_KICK_HEIGHT = 4.0
TOE_KICK_DEPTH = 3.0

# --- Shelving ---

SHELF_THRESHOLD = 24.0  # mid shelf only when interior height exceeds this
DISPLAY_SHELF_SPACING = 16.0
DISPLAY_SHELF_SPACING_MIN = 14.0
DISPLAY_SHELF_SPACING_MAX = 18.0

# --- Base / Wall / Island / Tall ---

BASE_DEPTH = 24.0
BASE_HEIGHT = 34.5

WALL_DEPTH = 12.0
WALL_HEIGHTS = (30.0, 36.0, 42.0)
WALL_HEIGHT = 36.0
WALL_MOUNTING_HEIGHT = 54.0

WALL_STACK_LOWER_HEIGHT = 42.0
WALL_STACK_UPPER_HEIGHT = 12.0
WALL_STACK_REVEAL = 0.125
WALL_STACK_UPPER_COUNT = 2
WALL_STACK_9FT_UPPER_COUNT = 1

ISLAND_DEPTH = 36.0
ISLAND_HEIGHT = 34.5
ISLAND_SEATING_OVERHANG = 15.0

TALL_DEPTH = 24.0
TALL_HEIGHT = 84.0
TALL_PANTRY_HEIGHT = 96.0

# --- Appliances ---

SUBZERO_WIDTHS = (30.0, 36.0, 42.0, 48.0)
SUBZERO_DEPTH = 24.0
SUBZERO_HEIGHT = 84.0
SUBZERO_CLEARANCE_TOP = 1.0  # ventilation gap above the unit
SUBZERO_CLEARANCE_BACK = 2.0

MIELE_WIDTH = 24.0
MIELE_DEPTH = 24.0
MIELE_HEIGHT = 34.5
MIELE_CLEARANCE_BACK = 1.0

RANGE_WIDTHS = (30.0, 36.0, 48.0)
RANGE_DEPTHS = {30.0: 26.0, 36.0: 26.0, 48.0: 27.0}
RANGE_HEIGHT = 36.0
RANGE_CLEARANCE_BACK = 3.0
RANGE_COOKTOP_DROP = 2.0  # cooktop surface sits this far below the top
RANGE_COOKTOP_THICKNESS = 0.25
RANGE_BURNER_RADIUS = 4.0
RANGE_BURNER_MARGIN = 4.0
RANGE_BURNER_HEIGHT = 0.5
RANGE_BURNER_MIN_WIDTH = 30.0
RANGE_BURNER_SEGMENTS = 16

WALL_OVEN_WIDTH = 30.0
WALL_OVEN_DEPTH = 24.0
WALL_OVEN_HEIGHT = 84.0
WALL_OVEN_OPENING_HEIGHT = 28.5
WALL_OVEN_OPENING_BOTTOM = 30.0

APPLIANCE_MARKER_THICKNESS = 0.25

# --- Face Frame ---

FRAME_WIDTH = 1.5
FRAME_THICKNESS = 0.75

# --- Doors / Drawers ---

DOOR_THICKNESS = 0.75
DOOR_OVERLAY = 0.375
DOOR_REVEAL = 0.125  # framed edge reveal
FRAMELESS_REVEAL = 0.0625
CENTER_REVEAL = 0.125
HARDWARE_MARKER_SIZE = 0.5
HANDLE_INSET = 2.0  # from the non-hinge edge
PULL_DROP = 2.0  # from the top of a drawer front
WIDE_DOOR_THRESHOLD = 30.0  # stacked units wider than this get two doors

GRADUATED_DOOR_RATIOS = (0.20, 0.30, 0.50)

# Fraction of the drawer bank per drawer, bottom (largest) first
DRAWER_GRADUATIONS: dict[int, tuple[float, ...]] = {
    1: (1.0,),
    2: (0.55, 0.45),
    3: (0.45, 0.30, 0.25),
    4: (0.30, 0.25, 0.25, 0.20),
    5: (0.25, 0.22, 0.20, 0.18, 0.15),
}

# --- Countertop ---

COUNTERTOP_THICKNESS = 1.5
COUNTERTOP_FRONT_OVERHANG = 1.5
COUNTERTOP_SIDE_OVERHANG = 0.75
COUNTERTOP_BACK_OVERHANG = 0.0
BACKSPLASH_HEIGHT = 4.0
BACKSPLASH_THICKNESS = 0.75

# --- Corners ---

CORNER_SIZE_SMALL = 24.0
CORNER_SIZE_LARGE = 36.0
CORNER_SIZES = (CORNER_SIZE_SMALL, CORNER_SIZE_LARGE)
DEFAULT_CORNER_SIZE = CORNER_SIZE_LARGE

# --- Runs ---

STANDARD_WIDTHS = (9.0, 12.0, 15.0, 18.0, 24.0, 30.0, 36.0, 42.0, 48.0)
FILLER_MIN_WIDTH = 0.5  # remainders at or below this are left unfilled
FILLER_THICKNESS = 0.75
RUN_OFFSET = 72.0  # Y spacing between separate runs in a document
PLACEMENT_HEIGHT_TOLERANCE = 3.0
LAYOUT_EPSILON = 1e-6

# --- Geometry ---

DEGENERATE_EPSILON = 0.001

# --- Default Dimensions by Kind (width, depth, height) ---

DEFAULT_DIMENSIONS: dict[CabinetKind, tuple[float, float, float]] = {
    CabinetKind.BASE: (24.0, BASE_DEPTH, BASE_HEIGHT),
    CabinetKind.WALL: (24.0, WALL_DEPTH, WALL_HEIGHT),
    CabinetKind.WALL_STACK: (
        24.0,
        WALL_DEPTH,
        WALL_STACK_LOWER_HEIGHT
        + WALL_STACK_UPPER_COUNT * (WALL_STACK_UPPER_HEIGHT + WALL_STACK_REVEAL),
    ),
    CabinetKind.WALL_STACK_9FT: (
        24.0,
        WALL_DEPTH,
        WALL_STACK_LOWER_HEIGHT
        + WALL_STACK_9FT_UPPER_COUNT * (WALL_STACK_UPPER_HEIGHT + WALL_STACK_REVEAL),
    ),
    CabinetKind.ISLAND: (36.0, ISLAND_DEPTH, ISLAND_HEIGHT),
    CabinetKind.TALL: (24.0, TALL_DEPTH, TALL_HEIGHT),
    CabinetKind.CORNER_BASE: (DEFAULT_CORNER_SIZE, BASE_DEPTH, BASE_HEIGHT),
    CabinetKind.CORNER_WALL: (DEFAULT_CORNER_SIZE, WALL_DEPTH, WALL_HEIGHT),
    CabinetKind.FLOATING: (24.0, WALL_DEPTH, WALL_HEIGHT),
    CabinetKind.SUBZERO_FRIDGE: (SUBZERO_WIDTHS[1], SUBZERO_DEPTH, SUBZERO_HEIGHT),
    CabinetKind.MIELE_DISHWASHER: (MIELE_WIDTH, MIELE_DEPTH, MIELE_HEIGHT),
    CabinetKind.RANGE: (RANGE_WIDTHS[0], RANGE_DEPTHS[RANGE_WIDTHS[0]], RANGE_HEIGHT),
    CabinetKind.WALL_OVEN: (WALL_OVEN_WIDTH, WALL_OVEN_DEPTH, WALL_OVEN_HEIGHT),
    CabinetKind.DISPLAY_BASE: (24.0, BASE_DEPTH, BASE_HEIGHT),
    CabinetKind.DISPLAY_WALL: (24.0, WALL_DEPTH, WALL_HEIGHT),
}

# --- Rooms ---

ROOM_PRESETS: dict[str, RoomPreset] = {
    "kitchen": RoomPreset(
        name="kitchen",
        base_depth=24.0,
        wall_depth=12.0,
        wall_height=36.0,
        has_countertop=True,
        has_backsplash=True,
    ),
    "bathroom": RoomPreset(
        name="bathroom",
        base_depth=21.0,
        wall_depth=12.0,
        wall_height=30.0,
        has_countertop=True,
        has_backsplash=True,
    ),
    "closet": RoomPreset(
        name="closet",
        base_depth=24.0,
        wall_depth=14.0,
        wall_height=42.0,
        has_countertop=False,
        has_backsplash=False,
    ),
}

# --- Materials (RGB) ---

MATERIAL_COLORS: dict[str, tuple[int, int, int]] = {
    "box_wood": (139, 90, 43),
    "door_face": (160, 120, 80),
    "countertop": (240, 240, 235),
    "hardware": (180, 180, 180),
    "interior": (245, 235, 220),
    "appliance": (200, 200, 205),
}
