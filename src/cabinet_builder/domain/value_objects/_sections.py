"""Front section value objects (door/drawer stacking)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SectionRole(str, Enum):
    """What fills a vertical band of the cabinet front."""

    DOOR = "door"
    DRAWER = "drawer"


class SizingPolicy(str, Enum):
    """How items inside a section share its space.

    Attributes:
        EQUAL: Every item gets the same share.
        GRADUATED: Fixed fractional splits (largest drawer at the bottom,
            or 20/30/50 widths for three graduated doors).
        CUSTOM: Explicit drawer heights supplied by the caller.
    """

    EQUAL = "equal"
    GRADUATED = "graduated"
    CUSTOM = "custom"


class HandleSide(str, Enum):
    """Where a front's handle marker sits."""

    LEFT = "left"
    RIGHT = "right"
    TOP_CENTER = "top_center"


@dataclass(frozen=True)
class Section:
    """A vertical band of the cabinet front.

    Sections are ordered bottom-to-top and their height ratios sum to 1.0.

    Attributes:
        role: Door or drawer.
        height_ratio: Fraction of the interior height, in (0, 1].
        item_count: Number of doors side by side or drawers stacked.
        sizing: Equal, graduated, or custom sizing.
        custom_heights: Explicit drawer heights, bottom first.
    """

    role: SectionRole
    height_ratio: float
    item_count: int = 1
    sizing: SizingPolicy = SizingPolicy.EQUAL
    custom_heights: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not 0 < self.height_ratio <= 1.0 + 1e-9:
            raise ValueError("Section height ratio must be in (0, 1]")
        if self.item_count < 1:
            raise ValueError("Section item count must be at least 1")
        if self.sizing == SizingPolicy.CUSTOM and not self.custom_heights:
            raise ValueError("Custom sizing requires custom heights")
        if any(h <= 0 for h in self.custom_heights):
            raise ValueError("Custom heights must be positive")

    @property
    def is_door(self) -> bool:
        return self.role == SectionRole.DOOR

    @property
    def is_drawer(self) -> bool:
        return self.role == SectionRole.DRAWER
