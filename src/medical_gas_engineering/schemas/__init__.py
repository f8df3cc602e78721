# File: src/medical_gas_engineering/schemas/__init__.py
"""Pydantic input models for room and facility payloads."""

from .room_models import (
    OutletLocationModel,
    GasOutletModel,
    RoomModel,
    OutletCountRoomModel,
    FacilityModel,
    parse_rooms,
)

__all__ = [
    "OutletLocationModel",
    "GasOutletModel",
    "RoomModel",
    "OutletCountRoomModel",
    "FacilityModel",
    "parse_rooms",
]
