# File: src/medical_gas_engineering/schemas/room_models.py
"""
Input models for room and facility payloads.

Raw payloads from the room-data supplier are validated here and converted
to the immutable domain records in core.models. Two room shapes are
accepted:

- RoomModel: explicit outlet groups (gas type, quantity, location)
- OutletCountRoomModel: template-style rows with one outlet count per gas,
  as produced by facility templates (camelCase keys accepted)
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import InvalidInputError
from ..core.gas_types import GasType, Pressurization
from ..core.models import OutletLocation, GasOutlet, RoomGasRequirements


class OutletLocationModel(BaseModel):
    """Outlet placement within a room."""
    room: str = Field(default="", description="Room label")
    wall_location: str = Field(default="", description="Wall or headwall position")
    height_from_floor: float = Field(
        default=0.0,
        description="Outlet height above finished floor in inches",
        ge=0
    )

    def to_domain(self) -> OutletLocation:
        return OutletLocation(
            room=self.room,
            wall_location=self.wall_location,
            height_from_floor=self.height_from_floor,
        )


class GasOutletModel(BaseModel):
    """A group of identical outlets for one gas type."""
    model_config = ConfigDict(populate_by_name=True)

    gas_type: GasType = Field(
        alias="type",
        description="Gas type (oxygen, air, vacuum, co2, n2o, nitrogen, argon)"
    )
    quantity: int = Field(description="Number of outlets", ge=0)
    flow_rate: Optional[float] = Field(
        default=None,
        description="Informational per-outlet flow rate",
        ge=0
    )
    pressure: float = Field(default=0.0, description="Informational outlet pressure")
    simultaneous_factor: float = Field(default=1.0, ge=0, le=1)
    backup_required: bool = False
    location: OutletLocationModel = Field(default_factory=OutletLocationModel)

    @field_validator("gas_type", mode="before")
    @classmethod
    def normalize_gas_type(cls, v: Any) -> Any:
        """Accept gas names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def to_domain(self) -> GasOutlet:
        return GasOutlet(
            gas_type=self.gas_type,
            quantity=self.quantity,
            flow_rate=self.flow_rate,
            pressure=self.pressure,
            simultaneous_factor=self.simultaneous_factor,
            backup_required=self.backup_required,
            location=self.location.to_domain(),
        )


class RoomModel(BaseModel):
    """Room with explicit outlet groups."""
    room_id: str = Field(description="Unique room identifier", min_length=1)
    room_name: Optional[str] = Field(default=None, description="Display name")
    room_type: str = Field(
        default="",
        description="Room classification (e.g., 'Operating Room', 'ICU')"
    )
    area: float = Field(description="Floor area in square feet", ge=0)
    ceiling_height: float = Field(default=0.0, description="Ceiling height in feet", ge=0)
    outlets: List[GasOutletModel] = Field(default_factory=list)
    pressurization: Pressurization = Pressurization.NEUTRAL
    air_changes_per_hour: float = Field(default=0.0, ge=0)
    filtration_level: str = ""
    special_requirements: List[str] = Field(default_factory=list)

    def to_domain(self) -> RoomGasRequirements:
        return RoomGasRequirements(
            room_id=self.room_id,
            room_name=self.room_name or self.room_id,
            room_type=self.room_type,
            area=self.area,
            ceiling_height=self.ceiling_height,
            outlets=tuple(outlet.to_domain() for outlet in self.outlets),
            pressurization=self.pressurization,
            air_changes_per_hour=self.air_changes_per_hour,
            filtration_level=self.filtration_level,
            special_requirements=tuple(self.special_requirements),
        )


# Outlet count field -> gas type, in output order
_COUNT_FIELDS = (
    ("oxygen_outlets", GasType.OXYGEN),
    ("air_outlets", GasType.AIR),
    ("vacuum_outlets", GasType.VACUUM),
    ("co2_outlets", GasType.CO2),
    ("n2o_outlets", GasType.N2O),
)


class OutletCountRoomModel(BaseModel):
    """
    Template-style room row with a single outlet count per gas.

    Accepts either snake_case or camelCase keys, e.g. ``oxygenOutlets``.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Room display name", min_length=1)
    type: str = Field(description="Room classification")
    area: float = Field(ge=0)
    ceiling_height: float = Field(default=0.0, alias="ceilingHeight", ge=0)
    oxygen_outlets: int = Field(default=0, alias="oxygenOutlets", ge=0)
    air_outlets: int = Field(default=0, alias="airOutlets", ge=0)
    vacuum_outlets: int = Field(default=0, alias="vacuumOutlets", ge=0)
    co2_outlets: int = Field(default=0, alias="co2Outlets", ge=0)
    n2o_outlets: int = Field(default=0, alias="n2oOutlets", ge=0)
    backup_required: bool = Field(default=False, alias="backupRequired")
    special_requirements: Optional[str] = Field(default=None, alias="specialRequirements")

    def to_domain(self, room_id: str) -> RoomGasRequirements:
        """
        Convert to a domain room, one outlet group per non-zero count.

        Args:
            room_id: Identifier to assign; template rows carry none

        Returns:
            RoomGasRequirements
        """
        outlets = tuple(
            GasOutlet(
                gas_type=gas_type,
                quantity=getattr(self, field_name),
                backup_required=self.backup_required,
                location=OutletLocation(room=self.name),
            )
            for field_name, gas_type in _COUNT_FIELDS
            if getattr(self, field_name) > 0
        )
        special = (self.special_requirements,) if self.special_requirements else ()

        return RoomGasRequirements(
            room_id=room_id,
            room_name=self.name,
            room_type=self.type,
            area=self.area,
            ceiling_height=self.ceiling_height,
            outlets=outlets,
            special_requirements=special,
        )


class FacilityModel(BaseModel):
    """A facility: a named collection of rooms in either shape."""
    name: str = Field(default="", description="Facility name")
    rooms: List[Union[RoomModel, OutletCountRoomModel]] = Field(default_factory=list)

    def to_domain(self) -> List[RoomGasRequirements]:
        """
        Convert all rooms, assigning ids to template rows.

        Template rows get ``room-<n>`` ids (1-based position in the list).
        """
        rooms = []
        for index, room in enumerate(self.rooms, start=1):
            if isinstance(room, OutletCountRoomModel):
                rooms.append(room.to_domain(f"room-{index}"))
            else:
                rooms.append(room.to_domain())
        return rooms


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}")
    return "; ".join(messages)


def parse_rooms(
    payload: Union[Dict[str, Any], List[Dict[str, Any]]]
) -> List[RoomGasRequirements]:
    """
    Validate a raw payload and convert it to domain rooms.

    Args:
        payload: Either a facility dict with a "rooms" list, or a bare list
            of room dicts

    Returns:
        Validated rooms in payload order

    Raises:
        InvalidInputError: If the payload fails validation
    """
    if isinstance(payload, list):
        payload = {"rooms": payload}

    try:
        facility = FacilityModel.model_validate(payload)
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid room payload: {_format_validation_error(e)}",
            extra={"errors": e.errors(include_url=False)},
        ) from e

    return facility.to_domain()
