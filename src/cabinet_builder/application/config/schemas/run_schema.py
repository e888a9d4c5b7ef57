"""Run configuration schema.

A run is a straight wall of cabinets auto-filled around appliance gaps.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cabinet_builder.application.config.schemas.base import (
    CABINET_KIND_VALUES,
    FRAME_TYPE_VALUES,
)
from cabinet_builder.domain.constants import ROOM_PRESETS
from cabinet_builder.domain.value_objects import CabinetKind


class ApplianceGapConfig(BaseModel):
    """Reserved span for an appliance.

    Attributes:
        position: Distance from the run start in inches
        width: Width of the span in inches
        label: Display name of the appliance
    """

    model_config = ConfigDict(extra="forbid")

    position: float = Field(..., ge=0)
    width: float = Field(..., gt=0)
    label: str = "Appliance"


class RunConfig(BaseModel):
    """Configuration for an auto-filled cabinet run.

    Attributes:
        name: Run name; generated when omitted
        total_length: Run length in inches
        cabinet_type: Kind used to fill the run
        frame_type: "framed" or "frameless"
        room: Room preset ("kitchen", "bathroom", "closet")
        door_drawer_config: Front configuration for every filled cabinet
        appliance_gaps: Reserved appliance spans
        standard_widths: Widths the fill may use; defaults to the standard set
        include_countertop: Emit one continuous countertop for the run
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    total_length: float = Field(..., gt=0, le=1200.0)
    cabinet_type: str = "base"
    frame_type: str = "frameless"
    room: str = "kitchen"
    door_drawer_config: str = "doors"
    appliance_gaps: list[ApplianceGapConfig] = Field(default_factory=list)
    standard_widths: list[float] | None = None
    include_countertop: bool = True

    @field_validator("cabinet_type")
    @classmethod
    def validate_cabinet_type(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in CABINET_KIND_VALUES:
            raise ValueError(f"Unknown cabinet type {v!r}")
        if CabinetKind(value).is_corner:
            raise ValueError("Runs cannot be filled with corner cabinets")
        return value

    @field_validator("frame_type")
    @classmethod
    def validate_frame_type(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in FRAME_TYPE_VALUES:
            raise ValueError(f"Unknown frame type {v!r}; expected framed or frameless")
        return value

    @field_validator("room")
    @classmethod
    def validate_room(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in ROOM_PRESETS:
            raise ValueError(
                f"Unknown room preset {v!r}; expected one of {sorted(ROOM_PRESETS)}"
            )
        return value

    @field_validator("standard_widths")
    @classmethod
    def validate_standard_widths(cls, v: list[float] | None) -> list[float] | None:
        if v is not None and (not v or any(w <= 0 for w in v)):
            raise ValueError("standard_widths must be a non-empty list of positive widths")
        return v

    @model_validator(mode="after")
    def validate_gaps(self) -> "RunConfig":
        gaps = sorted(self.appliance_gaps, key=lambda g: g.position)
        for gap in gaps:
            if gap.position + gap.width > self.total_length:
                raise ValueError(
                    f"Appliance gap {gap.label!r} extends past the run length "
                    f"({gap.position + gap.width} > {self.total_length})"
                )
        for prev, cur in zip(gaps, gaps[1:]):
            if cur.position < prev.position + prev.width:
                raise ValueError(f"Appliance gaps {prev.label!r} and {cur.label!r} overlap")
        return self
