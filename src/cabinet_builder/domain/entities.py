"""Domain entities for the cabinet geometry system."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .constants import (
    DEFAULT_DIMENSIONS,
    FRAME_THICKNESS,
    FRAME_WIDTH,
    RANGE_WIDTHS,
    SUBZERO_CLEARANCE_TOP,
    SUBZERO_WIDTHS,
    TOE_KICK_HEIGHT,
    WALL_MOUNTING_HEIGHT,
)
from .front_config import FrontConfig, FrontPreset, PresetConfig, parse_front_config
from .results import ValidationResult
from .value_objects import CabinetKind, CornerSubtype, FrameType, Point3D

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4


def _coerce_enum(enum_cls: Any, value: Any) -> Any:
    """Convert a raw value to an enum member, keeping it unchanged if unknown."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return value


@dataclass
class CabinetSpec:
    """Declarative description of a single cabinet.

    A spec is created once and treated as immutable except for
    ``position``, which the run layout assigns. Construction never raises:
    an invalid spec (unknown kind, non-positive dimension, missing corner
    subtype) is representable and reported by ``validate()``.

    Attributes:
        kind: Cabinet kind; drives every decomposition branch.
        frame: Framed or frameless construction.
        width: Nominal width in inches.
        depth: Nominal depth in inches.
        height: Nominal height in inches.
        corner_subtype: Inside/outside corner geometry (corner kinds only).
        front_config: Parsed door/drawer configuration.
        custom_drawer_heights: Explicit drawer heights, bottom first.
        single_door: Use one door for the "doors" preset.
        has_countertop: Emit a countertop slab.
        has_backsplash: Emit a backsplash on the countertop.
        has_seating_side: Islands get a seating overhang on the back edge.
        height_from_floor: Mounting height for wall-mounted kinds.
        position: Placement offset assigned by the run layout.
    """

    kind: CabinetKind
    frame: FrameType = FrameType.FRAMELESS
    width: float = 24.0
    depth: float = 24.0
    height: float = 34.5
    corner_subtype: CornerSubtype | None = None
    front_config: FrontConfig = field(
        default_factory=lambda: PresetConfig(FrontPreset.DOORS)
    )
    custom_drawer_heights: tuple[float, ...] = field(default_factory=tuple)
    single_door: bool = False
    has_countertop: bool = False
    has_backsplash: bool = False
    has_seating_side: bool = False
    height_from_floor: float = 0.0
    position: Point3D = field(default_factory=Point3D.zero)

    @classmethod
    def create(
        cls,
        kind: CabinetKind | str,
        frame: FrameType | str = FrameType.FRAMELESS,
        width: float | None = None,
        depth: float | None = None,
        height: float | None = None,
        corner_subtype: CornerSubtype | str | None = None,
        front_config: FrontConfig | FrontPreset | str | None = None,
        custom_drawer_heights: list[float] | tuple[float, ...] = (),
        single_door: bool = False,
        has_countertop: bool = False,
        has_backsplash: bool = False,
        has_seating_side: bool = False,
        height_from_floor: float | None = None,
    ) -> CabinetSpec:
        """Build a spec, filling unspecified dimensions from per-kind defaults.

        Raw strings are accepted for enum fields; unknown values are kept
        as-is so that ``validate()`` can report them. Corner kinds take
        their width from the corner subtype's size.

        Returns:
            A new CabinetSpec (possibly invalid).
        """
        kind = _coerce_enum(CabinetKind, kind)
        frame = _coerce_enum(FrameType, frame)
        if isinstance(corner_subtype, str):
            try:
                corner_subtype = CornerSubtype.from_string(corner_subtype)
            except ValueError:
                logger.debug(f"Unrecognized corner type {corner_subtype!r}")

        default_w, default_d, default_h = DEFAULT_DIMENSIONS.get(kind, (24.0, 24.0, 34.5))
        if isinstance(kind, CabinetKind) and kind.is_corner and isinstance(
            corner_subtype, CornerSubtype
        ):
            width = corner_subtype.size

        if front_config is None:
            front_config = (
                FrontPreset.DOOR if kind == CabinetKind.MIELE_DISHWASHER else FrontPreset.DOORS
            )
        if height_from_floor is None:
            mounted = isinstance(kind, CabinetKind) and kind.is_wall_mounted
            height_from_floor = WALL_MOUNTING_HEIGHT if mounted else 0.0

        return cls(
            kind=kind,
            frame=frame,
            width=default_w if width is None else float(width),
            depth=default_d if depth is None else float(depth),
            height=default_h if height is None else float(height),
            corner_subtype=corner_subtype,
            front_config=parse_front_config(front_config),
            custom_drawer_heights=tuple(float(h) for h in custom_drawer_heights),
            single_door=single_door,
            has_countertop=has_countertop,
            has_backsplash=has_backsplash,
            has_seating_side=has_seating_side,
            height_from_floor=float(height_from_floor),
        )

    # --- Validation ---

    def validate(self) -> ValidationResult:
        """Check the spec without raising.

        Returns:
            ValidationResult with errors for unrecognised enums, non-positive
            dimensions and corner-subtype mismatches, and warnings for
            non-standard appliance widths.
        """
        errors: list[str] = []
        warnings: list[str] = []

        if not isinstance(self.kind, CabinetKind):
            errors.append(f"Unrecognized cabinet kind: {self.kind!r}")
        if not isinstance(self.frame, FrameType):
            errors.append(f"Unrecognized frame type: {self.frame!r}")
        for name in ("width", "depth", "height"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or value <= 0:
                errors.append(f"Cabinet {name} must be positive, got {value!r}")
        if self.height_from_floor < 0:
            errors.append("height_from_floor must be non-negative")
        if any(h <= 0 for h in self.custom_drawer_heights):
            errors.append("Custom drawer heights must be positive")

        if isinstance(self.kind, CabinetKind):
            if self.kind.is_corner:
                if self.corner_subtype is None:
                    errors.append(f"{self.kind.value} requires a corner subtype")
                elif not isinstance(self.corner_subtype, CornerSubtype):
                    errors.append(f"Unrecognized corner subtype: {self.corner_subtype!r}")
            elif self.corner_subtype is not None:
                errors.append(f"{self.kind.value} cannot have a corner subtype")

            if self.kind == CabinetKind.SUBZERO_FRIDGE and self.width not in SUBZERO_WIDTHS:
                warnings.append(
                    f"Refrigerator width {self.width} is not a standard size {SUBZERO_WIDTHS}"
                )
            if self.kind == CabinetKind.RANGE and self.width not in RANGE_WIDTHS:
                warnings.append(
                    f"Range width {self.width} is not a standard size {RANGE_WIDTHS}"
                )

        if errors:
            return ValidationResult.fail(errors, warnings)
        return ValidationResult.ok(warnings)

    def is_valid(self) -> bool:
        return self.validate().is_valid

    # --- Derived dimensions ---

    @property
    def is_framed(self) -> bool:
        return self.frame == FrameType.FRAMED

    @property
    def toe_kick_offset(self) -> float:
        """Height of the toe-kick plinth below the interior, or 0."""
        if isinstance(self.kind, CabinetKind) and self.kind.subtracts_toe_kick:
            return TOE_KICK_HEIGHT
        return 0.0

    @property
    def interior_height(self) -> float:
        """Height available inside the carcass.

        Toe-kick kinds lose the toe-kick height, the refrigerator loses its
        ventilation clearance, and every other kind keeps its full height.
        """
        if self.kind == CabinetKind.SUBZERO_FRIDGE:
            return self.height - SUBZERO_CLEARANCE_TOP
        return self.height - self.toe_kick_offset

    @property
    def interior_width(self) -> float:
        if self.is_framed:
            return self.width - 2 * FRAME_WIDTH
        return self.width

    @property
    def interior_depth(self) -> float:
        if self.is_framed:
            return self.depth - 2 * FRAME_WIDTH
        return self.depth

    @property
    def frame_offset(self) -> float:
        """Vertical offset of the first front above the interior bottom."""
        return FRAME_WIDTH if self.is_framed else 0.0

    @property
    def front_offset(self) -> float:
        """Distance fronts sit forward of the carcass face."""
        return FRAME_THICKNESS if self.is_framed else 0.0

    @property
    def carcass_top(self) -> float:
        """Elevation of the carcass top, where a countertop seats."""
        return self.toe_kick_offset + self.interior_height

    @property
    def corner_size(self) -> float | None:
        if isinstance(self.corner_subtype, CornerSubtype):
            return self.corner_subtype.size
        return None

    @property
    def return_depth(self) -> float:
        """Depth of an outside corner's return wing (0 when it collapses)."""
        size = self.corner_size
        if size is None:
            return 0.0
        return max(size - self.depth, 0.0)

    @property
    def footprint_width(self) -> float:
        """X-extent the cabinet occupies in a run."""
        size = self.corner_size
        if size is not None and self.corner_subtype.is_inside:  # type: ignore[union-attr]
            return size + self.depth
        if size is not None:
            return max(size, self.width)
        return self.width

    @property
    def footprint_y_range(self) -> tuple[float, float]:
        """(min_y, max_y) of the carcass in cabinet-local coordinates."""
        size = self.corner_size
        if size is not None and self.corner_subtype.is_inside:  # type: ignore[union-attr]
            return (-size, self.depth)
        if size is not None:
            return (0.0, max(size, self.depth))
        return (0.0, self.depth)

    @property
    def group_name(self) -> str:
        """Scene group name, e.g. "CABINET_Base_610x610_Frameless"."""
        kind = self.kind.value if isinstance(self.kind, CabinetKind) else str(self.kind)
        frame = self.frame.value if isinstance(self.frame, FrameType) else str(self.frame)
        type_name = "".join(part.capitalize() for part in kind.split("_"))
        w_mm = round(self.width * MM_PER_INCH)
        d_mm = round(self.depth * MM_PER_INCH)
        return f"CABINET_{type_name}_{w_mm}x{d_mm}_{frame.capitalize()}"
