"""Cabinet run layout: auto-fill and sequential placement.

``CabinetRun.auto_layout`` fills a wall of a given length around reserved
appliance gaps, greedily taking the widest standard cabinet that fits in
each free segment and turning the leftover into a filler strip. The fill is
deliberately greedy and deterministic: widths are tried strictly largest
first with no attempt to balance sizes or minimise fillers.

``PlacementSequence`` places cabinets one at a time against the rightmost
cabinet at the same height. Wall-mounted cabinets of differing depths are
aligned on their backs using a reference depth that only ever grows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..constants import (
    DEFAULT_DIMENSIONS,
    FILLER_MIN_WIDTH,
    LAYOUT_EPSILON,
    PLACEMENT_HEIGHT_TOLERANCE,
    ROOM_PRESETS,
    STANDARD_WIDTHS,
)
from ..entities import CabinetSpec
from ..front_config import FrontPreset
from ..value_objects import (
    ApplianceGap,
    CabinetKind,
    FillerStrip,
    FrameType,
    Point3D,
    RoomPreset,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CabinetRun",
    "PlacementSequence",
    "RunSegment",
    "apply_room_preset",
    "get_room_preset",
]


def get_room_preset(name: str) -> RoomPreset:
    """Look up a room preset by name.

    Raises:
        ValueError: If the preset does not exist.
    """
    try:
        return ROOM_PRESETS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown room preset {name!r}; expected one of {sorted(ROOM_PRESETS)}"
        ) from None


@dataclass(frozen=True)
class RunSegment:
    """A span of a run: free for cabinets, or reserved by an appliance gap."""

    start: float
    end: float
    gap: ApplianceGap | None = None

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def is_free(self) -> bool:
        return self.gap is None


@dataclass
class CabinetRun:
    """A straight run of cabinets along one wall.

    Attributes:
        total_length: Length of the run in inches.
        appliance_gaps: Reserved appliance spans, kept sorted by position.
        kind: Cabinet kind used to fill free segments.
        frame: Construction style of the filled cabinets.
        room: Room preset supplying depths, heights and surfaces.
        standard_widths: Widths the fill may use.
        front_config: Front configuration for filled cabinets.
        cabinets: Cabinets placed by ``auto_layout``.
        filler_strips: Fillers placed by ``auto_layout``.
    """

    total_length: float
    appliance_gaps: list[ApplianceGap] = field(default_factory=list)
    kind: CabinetKind = CabinetKind.BASE
    frame: FrameType = FrameType.FRAMELESS
    room: RoomPreset = field(default_factory=lambda: ROOM_PRESETS["kitchen"])
    standard_widths: tuple[float, ...] = STANDARD_WIDTHS
    front_config: str = FrontPreset.DOORS.value
    cabinets: list[CabinetSpec] = field(default_factory=list, init=False)
    filler_strips: list[FillerStrip] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.total_length <= 0:
            raise ValueError("Run length must be positive")
        if not self.standard_widths or any(w <= 0 for w in self.standard_widths):
            raise ValueError("Standard widths must be a non-empty list of positive widths")
        if self.kind.is_corner:
            raise ValueError("Runs are filled with straight cabinets, not corners")
        gaps = list(self.appliance_gaps)
        self.appliance_gaps = []
        for gap in gaps:
            self.add_appliance_gap(gap)

    # --- Gaps ---

    def add_appliance_gap(self, gap: ApplianceGap) -> None:
        """Reserve a span for an appliance.

        Raises:
            ValueError: If the gap extends past the run or overlaps another.
        """
        if gap.end > self.total_length + LAYOUT_EPSILON:
            raise ValueError(
                f"Appliance gap {gap.label!r} ends at {gap.end}, "
                f"beyond run length {self.total_length}"
            )
        for existing in self.appliance_gaps:
            if gap.overlaps(existing):
                raise ValueError(
                    f"Appliance gap {gap.label!r} overlaps {existing.label!r}"
                )
        self.appliance_gaps.append(gap)
        self.appliance_gaps.sort(key=lambda g: g.position)

    def segments(self) -> list[RunSegment]:
        """Partition [0, total_length) into free and reserved segments."""
        result: list[RunSegment] = []
        cursor = 0.0
        for gap in sorted(self.appliance_gaps, key=lambda g: g.position):
            if gap.position > cursor + LAYOUT_EPSILON:
                result.append(RunSegment(cursor, gap.position))
            result.append(RunSegment(gap.position, gap.end, gap))
            cursor = gap.end
        if self.total_length > cursor + LAYOUT_EPSILON:
            result.append(RunSegment(cursor, self.total_length))
        return result

    # --- Cabinet dimensions for this run ---

    @property
    def cabinet_depth(self) -> float:
        if self.kind.is_wall_mounted:
            return self.room.wall_depth
        if self.kind in (CabinetKind.BASE, CabinetKind.DISPLAY_BASE):
            return self.room.base_depth
        return DEFAULT_DIMENSIONS[self.kind][1]

    @property
    def cabinet_height(self) -> float:
        if self.kind in (CabinetKind.WALL, CabinetKind.DISPLAY_WALL, CabinetKind.FLOATING):
            return self.room.wall_height
        return DEFAULT_DIMENSIONS[self.kind][2]

    def _make_cabinet(self, x: float, width: float) -> CabinetSpec:
        surfaces = not self.kind.is_wall_mounted
        spec = CabinetSpec.create(
            kind=self.kind,
            frame=self.frame,
            width=width,
            depth=self.cabinet_depth,
            height=self.cabinet_height,
            front_config=self.front_config,
            has_countertop=surfaces and self.room.has_countertop,
            has_backsplash=surfaces and self.room.has_backsplash,
        )
        spec.position = Point3D(x, 0.0, 0.0)
        return spec

    # --- Layout ---

    def _fill_segment(self, segment: RunSegment) -> None:
        widths = sorted(self.standard_widths, reverse=True)
        position = segment.start
        remaining = segment.width
        while True:
            fit = next((w for w in widths if w <= remaining + LAYOUT_EPSILON), None)
            if fit is None:
                break
            self.cabinets.append(self._make_cabinet(position, fit))
            position += fit
            remaining -= fit

        if remaining > FILLER_MIN_WIDTH:
            self.filler_strips.append(
                FillerStrip(position=position, width=remaining, height=self.cabinet_height)
            )
        elif remaining > LAYOUT_EPSILON:
            logger.debug(
                f"Leaving {remaining:.3f}\" unfilled at {position:.3f} "
                f"(not above {FILLER_MIN_WIDTH}\")"
            )

    def auto_layout(self) -> None:
        """Fill every free segment with standard cabinets and fillers.

        Re-running replaces the previous layout, so the result depends only
        on the run's inputs.
        """
        self.cabinets = []
        self.filler_strips = []
        self.appliance_gaps.sort(key=lambda g: g.position)
        for segment in self.segments():
            if segment.is_free:
                self._fill_segment(segment)
        logger.info(
            f"Auto layout of {self.total_length}\" run: {len(self.cabinets)} cabinets, "
            f"{len(self.appliance_gaps)} gaps, {len(self.filler_strips)} fillers"
        )

    # --- Accounting ---

    @property
    def cabinet_widths(self) -> list[float]:
        return [cab.width for cab in self.cabinets]

    @property
    def accounted_length(self) -> float:
        """Cabinet + gap + filler widths."""
        return (
            sum(cab.width for cab in self.cabinets)
            + sum(gap.width for gap in self.appliance_gaps)
            + sum(filler.width for filler in self.filler_strips)
        )

    @property
    def unfilled_length(self) -> float:
        """Sub-threshold remainders left empty by the fill."""
        return max(self.total_length - self.accounted_length, 0.0)


@dataclass
class PlacementSequence:
    """Sequential placement of cabinets within one run.

    Attributes:
        origin: Run origin in document coordinates.
        placed: Cabinets placed so far, in order.
        reference_depth: Deepest wall-mounted cabinet seen so far; backs of
            wall-mounted cabinets align to it. Only ever increases.
    """

    origin: Point3D = field(default_factory=Point3D.zero)
    placed: list[CabinetSpec] = field(default_factory=list)
    reference_depth: float = 0.0

    def _elevation(self, spec: CabinetSpec) -> float:
        if spec.kind.is_wall_mounted:
            return self.origin.z + spec.height_from_floor
        return self.origin.z

    def _front_y(self, spec: CabinetSpec) -> float:
        if spec.kind.is_wall_mounted:
            reference = max(self.reference_depth, spec.depth)
            return self.origin.y + reference - spec.depth
        return self.origin.y

    @staticmethod
    def _y_span(spec: CabinetSpec, y: float) -> tuple[float, float]:
        lo, hi = spec.footprint_y_range
        return (y + lo, y + hi)

    def next_position(self, spec: CabinetSpec) -> Point3D:
        """Position flush against the rightmost cabinet at the same height.

        Candidates are placed cabinets whose elevation is within the
        height tolerance and whose plan Y span overlaps the new cabinet's.
        Does not modify the sequence.
        """
        z = self._elevation(spec)
        y = self._front_y(spec)
        y_lo, y_hi = self._y_span(spec, y)

        x = self.origin.x
        for other in self.placed:
            if abs(other.position.z - z) > PLACEMENT_HEIGHT_TOLERANCE:
                continue
            o_lo, o_hi = self._y_span(other, other.position.y)
            if o_hi <= y_lo or y_hi <= o_lo:
                continue
            x = max(x, other.position.x + other.footprint_width)
        return Point3D(x, y, z)

    def _record(self, spec: CabinetSpec, position: Point3D) -> Point3D:
        if spec.kind.is_wall_mounted and spec.depth > self.reference_depth:
            logger.debug(
                f"Reference depth ratchets from {self.reference_depth} to {spec.depth}"
            )
            self.reference_depth = spec.depth
        spec.position = position
        self.placed.append(spec)
        return position

    def place(self, spec: CabinetSpec) -> Point3D:
        """Assign the next position to spec and record it."""
        return self._record(spec, self.next_position(spec))

    def place_at(self, spec: CabinetSpec, x: float) -> Point3D:
        """Record spec at a fixed offset along the run.

        Used for auto-filled runs, whose cabinets already carry their run
        offsets. Elevation and back alignment follow the usual rules.
        """
        position = Point3D(self.origin.x + x, self._front_y(spec), self._elevation(spec))
        return self._record(spec, position)

    def remove(self, spec: CabinetSpec, reference_depth: float) -> None:
        """Undo a placement, restoring the previous reference depth."""
        self.placed.remove(spec)
        self.reference_depth = reference_depth


def apply_room_preset(run: CabinetRun, preset: str | RoomPreset) -> CabinetRun:
    """Switch a run to a room preset and clear its layout.

    Raises:
        ValueError: If the preset name is unknown.
    """
    run.room = preset if isinstance(preset, RoomPreset) else get_room_preset(preset)
    run.cabinets = []
    run.filler_strips = []
    return run
