"""Cabinet request schema.

A cabinet request is the flat key-value form a user fills in for one
cabinet: type, dimensions, frame style, front configuration and corner
geometry, plus how it attaches to the document's runs.
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
    ConnectionMode,
)
from cabinet_builder.domain.value_objects import CabinetKind, CornerSubtype


class CabinetRequestConfig(BaseModel):
    """Configuration for a single cabinet.

    Dimensions left unset take the per-kind defaults. Countertop and
    backsplash flags left unset follow the room preset.

    Attributes:
        cabinet_type: Cabinet kind value ("base", "wall", "corner_base", ...)
        frame_type: "framed" or "frameless"
        width: Width in inches (corner kinds take the corner size)
        depth: Depth in inches
        height: Height in inches
        corner_type: Corner geometry such as "inside_24" (corner kinds only)
        door_drawer_config: Front preset or composite such as "door+2_drawers"
        custom_drawer_heights: Explicit drawer heights, bottom first
        single_door: Use one door for the "doors" preset
        has_countertop: Emit a countertop slab
        has_backsplash: Emit a backsplash
        has_seating_side: Island seating overhang
        height_from_floor: Mounting height for wall-mounted kinds
        connection_mode: How the cabinet attaches to runs
        target_run: Run name for connection_mode "extend_run"
    """

    model_config = ConfigDict(extra="forbid")

    cabinet_type: str = "base"
    frame_type: str = "frameless"
    width: float | None = Field(default=None, gt=0, le=240.0)
    depth: float | None = Field(default=None, gt=0, le=60.0)
    height: float | None = Field(default=None, gt=0, le=120.0)
    corner_type: str | None = None
    door_drawer_config: str = "doors"
    custom_drawer_heights: list[float] = Field(default_factory=list)
    single_door: bool = False
    has_countertop: bool | None = None
    has_backsplash: bool | None = None
    has_seating_side: bool = False
    height_from_floor: float | None = Field(default=None, ge=0)
    connection_mode: ConnectionMode = ConnectionMode.AUTO
    target_run: str | None = None

    @field_validator("cabinet_type")
    @classmethod
    def validate_cabinet_type(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in CABINET_KIND_VALUES:
            raise ValueError(
                f"Unknown cabinet type {v!r}; expected one of {sorted(CABINET_KIND_VALUES)}"
            )
        return value

    @field_validator("frame_type")
    @classmethod
    def validate_frame_type(cls, v: str) -> str:
        value = v.strip().lower()
        if value not in FRAME_TYPE_VALUES:
            raise ValueError(f"Unknown frame type {v!r}; expected framed or frameless")
        return value

    @field_validator("corner_type")
    @classmethod
    def validate_corner_type(cls, v: str | None) -> str | None:
        if v is None:
            return v
        CornerSubtype.from_string(v)
        return v

    @field_validator("custom_drawer_heights")
    @classmethod
    def validate_custom_drawer_heights(cls, v: list[float]) -> list[float]:
        if any(h <= 0 for h in v):
            raise ValueError("Custom drawer heights must be positive")
        return v

    @model_validator(mode="after")
    def validate_corner_and_connection(self) -> "CabinetRequestConfig":
        is_corner = CabinetKind(self.cabinet_type).is_corner
        if is_corner and self.corner_type is None:
            raise ValueError(f"{self.cabinet_type} requires corner_type")
        if not is_corner and self.corner_type is not None:
            raise ValueError("corner_type is only valid for corner cabinets")
        if self.connection_mode == ConnectionMode.EXTEND_RUN and not self.target_run:
            raise ValueError("connection_mode 'extend_run' requires target_run")
        return self
