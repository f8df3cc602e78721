# tests/conftest.py
import sys
import os

# Add repository root to path so tests can import src.medical_gas_engineering
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.medical_gas_engineering.core import (
    GasType,
    GasOutlet,
    RoomGasRequirements,
)


def make_room(room_id, room_type, outlets, area=300.0, **kwargs):
    """
    Build a room from a {gas type: quantity} mapping.

    Args:
        room_id: Room identifier
        room_type: Room classification
        outlets: Mapping of GasType to outlet quantity
        area: Floor area in square feet
    """
    return RoomGasRequirements(
        room_id=room_id,
        room_name=kwargs.pop("room_name", room_id),
        room_type=room_type,
        area=area,
        outlets=tuple(
            GasOutlet(gas_type=gas, quantity=qty) for gas, qty in outlets.items()
        ),
        **kwargs
    )


@pytest.fixture
def operating_room():
    """General surgery OR with all five standard gases."""
    return make_room(
        "OR-1",
        "Operating Room",
        {
            GasType.OXYGEN: 6,
            GasType.AIR: 4,
            GasType.VACUUM: 6,
            GasType.CO2: 2,
            GasType.N2O: 4,
        },
        area=600.0,
        ceiling_height=12.0,
    )


@pytest.fixture
def icu_room():
    """ICU bay with oxygen, air and vacuum."""
    return make_room(
        "ICU-1",
        "ICU",
        {GasType.OXYGEN: 2, GasType.AIR: 1, GasType.VACUUM: 2},
        area=250.0,
    )


@pytest.fixture
def patient_room():
    """Standard patient room."""
    return make_room(
        "PT-101",
        "Patient Room",
        {GasType.OXYGEN: 1, GasType.AIR: 1, GasType.VACUUM: 1},
        area=200.0,
    )


@pytest.fixture
def facility(operating_room, icu_room, patient_room):
    """Small mixed facility."""
    return [operating_room, icu_room, patient_room]


@pytest.fixture
def room_factory():
    """Factory for rooms built from {gas type: quantity} mappings."""
    return make_room
