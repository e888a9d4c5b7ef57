"""Document-level store of cabinet runs.

Each run owns six named sub-collections that emitted boxes are routed into
by their label's top-level group, plus the placement state used to position
the next cabinet. Runs persist as flat string-keyed attribute dictionaries
so a host document can store them alongside its own objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from cabinet_builder.application.config.schemas import ConnectionMode
from cabinet_builder.application.context import RunContext
from cabinet_builder.domain.constants import RUN_OFFSET
from cabinet_builder.domain.entities import CabinetSpec
from cabinet_builder.domain.exceptions import RunNotFoundError
from cabinet_builder.domain.services.run_layout import PlacementSequence
from cabinet_builder.domain.value_objects import (
    CabinetKind,
    FrameType,
    OrientedBox,
    Point3D,
)

logger = logging.getLogger(__name__)

RUN_COLLECTIONS: tuple[str, ...] = (
    "carcass",
    "fronts",
    "hardware",
    "countertops",
    "backsplash",
    "appliances",
)

# Top-level label group -> run sub-collection
GROUP_COLLECTIONS: dict[str, str] = {
    "Carcass": "carcass",
    "Fronts": "fronts",
    "Hardware": "hardware",
    "Countertop": "countertops",
    "Backsplash": "backsplash",
    "Appliances": "appliances",
}

_REQUIRED_ATTRIBUTES = ("run_id", "run_name", "room", "cabinet_type", "frame_type")


def collection_for(box: OrientedBox) -> str:
    """Name of the run sub-collection a box belongs in.

    Unknown groups fall back to the carcass collection.
    """
    return GROUP_COLLECTIONS.get(box.group, "carcass")


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")


@dataclass
class RunRecord:
    """One run in the document.

    Attributes:
        id: Stable identifier.
        name: Display name, unique within the registry.
        room: Room name.
        kind: Cabinet kind the run was started with.
        frame_type: Construction style of the run.
        flags: Surface flags (has_countertop, has_backsplash).
        y_offset: Y offset of the run origin; runs are spaced apart in Y.
        collections: Emitted boxes by sub-collection name.
        placement: Sequential placement state for cabinets in the run.
    """

    id: str
    name: str
    room: str = "Kitchen"
    kind: CabinetKind = CabinetKind.BASE
    frame_type: FrameType = FrameType.FRAMELESS
    flags: dict[str, bool] = field(default_factory=dict)
    y_offset: float = 0.0
    collections: dict[str, list[OrientedBox]] = field(
        default_factory=lambda: {name: [] for name in RUN_COLLECTIONS}
    )
    placement: PlacementSequence = field(init=False)

    def __post_init__(self) -> None:
        self.placement = PlacementSequence(origin=Point3D(0.0, self.y_offset, 0.0))

    @property
    def origin(self) -> Point3D:
        return self.placement.origin

    @property
    def cabinets(self) -> list[CabinetSpec]:
        return self.placement.placed

    @property
    def box_count(self) -> int:
        return sum(len(boxes) for boxes in self.collections.values())

    def add_box(self, box: OrientedBox) -> str:
        """Route a box into its sub-collection and return the collection name."""
        name = collection_for(box)
        self.collections[name].append(box)
        return name

    def place(self, spec: CabinetSpec) -> Point3D:
        """Position a cabinet after the run's existing cabinets."""
        return self.placement.place(spec)

    def to_attributes(self) -> dict[str, str]:
        """Flatten the record's identity into string attributes."""
        return {
            "run_id": self.id,
            "run_name": self.name,
            "room": self.room,
            "cabinet_type": self.kind.value,
            "frame_type": self.frame_type.value,
            "has_countertop": str(self.flags.get("has_countertop", False)).lower(),
            "has_backsplash": str(self.flags.get("has_backsplash", False)).lower(),
            "y_offset": repr(self.y_offset),
            "collections": ",".join(RUN_COLLECTIONS),
        }

    @classmethod
    def from_attributes(cls, attributes: dict[str, Any]) -> RunRecord:
        """Rebuild a record from ``to_attributes`` output.

        Emitted geometry and placement state are not part of the
        attributes; a restored record starts with empty collections.

        Raises:
            ValueError: If a required attribute is missing or invalid.
        """
        missing = [key for key in _REQUIRED_ATTRIBUTES if key not in attributes]
        if missing:
            raise ValueError(f"Run attributes missing: {', '.join(missing)}")
        return cls(
            id=str(attributes["run_id"]),
            name=str(attributes["run_name"]),
            room=str(attributes["room"]),
            kind=CabinetKind(str(attributes["cabinet_type"])),
            frame_type=FrameType(str(attributes["frame_type"])),
            flags={
                "has_countertop": _flag(str(attributes.get("has_countertop", "false"))),
                "has_backsplash": _flag(str(attributes.get("has_backsplash", "false"))),
            },
            y_offset=float(attributes.get("y_offset", 0.0)),
        )


class RunRegistry:
    """All runs in a document, in creation order."""

    def __init__(self) -> None:
        self._runs: dict[str, RunRecord] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._runs)

    def __contains__(self, name: object) -> bool:
        return name in self._runs

    @property
    def runs(self) -> list[RunRecord]:
        return list(self._runs.values())

    def get(self, name: str) -> RunRecord | None:
        return self._runs.get(name)

    def find(self, name: str) -> RunRecord:
        """Look up a run by name.

        Raises:
            RunNotFoundError: If no run has that name.
        """
        record = self._runs.get(name)
        if record is None:
            raise RunNotFoundError(name)
        return record

    def _unique_name(self) -> str:
        index = len(self._runs) + 1
        while f"Run {index}" in self._runs:
            index += 1
        return f"Run {index}"

    def create_run(
        self,
        name: str | None = None,
        room: str = "Kitchen",
        kind: CabinetKind = CabinetKind.BASE,
        frame_type: FrameType = FrameType.FRAMELESS,
        flags: dict[str, bool] | None = None,
    ) -> RunRecord:
        """Create a run offset in Y behind the existing ones.

        Raises:
            ValueError: If a run with that name already exists.
        """
        name = name or self._unique_name()
        if name in self._runs:
            raise ValueError(f"Run {name!r} already exists")
        record = RunRecord(
            id=f"run_{self._next_id:03d}",
            name=name,
            room=room,
            kind=kind,
            frame_type=frame_type,
            flags=dict(flags or {}),
            y_offset=-RUN_OFFSET * len(self._runs),
        )
        self._next_id += 1
        self._runs[name] = record
        logger.info(f"Created run {name!r} at y offset {record.y_offset}")
        return record

    def remove(self, name: str) -> RunRecord:
        """Delete a run.

        Raises:
            RunNotFoundError: If no run has that name.
        """
        record = self.find(name)
        del self._runs[name]
        return record

    def resolve(
        self,
        mode: ConnectionMode,
        context: RunContext,
        target: str | None = None,
        **create_kwargs: Any,
    ) -> RunRecord:
        """Pick the run a new cabinet attaches to and make it current.

        Args:
            mode: Connection mode.
            context: Session context; its current run is updated.
            target: Run name, required for EXTEND_RUN.
            **create_kwargs: Passed to ``create_run`` when a run is created.

        Raises:
            ValueError: If EXTEND_RUN is used without a target.
            RunNotFoundError: If the target run does not exist.
        """
        create_kwargs.setdefault("room", context.room_name)
        match mode:
            case ConnectionMode.EXTEND_RUN:
                if not target:
                    raise ValueError("extend_run requires a target run name")
                record = self.find(target)
            case ConnectionMode.NEW_RUN:
                record = self.create_run(**create_kwargs)
            case _:
                current = context.current_run
                record = self._runs.get(current) if current else None
                if record is None:
                    record = self.create_run(**create_kwargs)
        context.current_run = record.name
        return record

    def to_attributes(self) -> list[dict[str, str]]:
        return [record.to_attributes() for record in self._runs.values()]

    @classmethod
    def from_attributes(cls, items: list[dict[str, Any]]) -> RunRegistry:
        """Rebuild a registry from ``to_attributes`` output."""
        registry = cls()
        for attributes in items:
            record = RunRecord.from_attributes(attributes)
            registry._runs[record.name] = record
            registry._next_id += 1
        return registry
