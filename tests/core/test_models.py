# File: tests/core/test_models.py
"""Tests for medical gas data records."""

import dataclasses

import pytest
from src.medical_gas_engineering.core import (
    GasType,
    PipeMaterial,
    Pressurization,
    InvalidInputError,
    OutletLocation,
    GasOutlet,
    RoomGasRequirements,
    GasDemand,
    PipeCalculation,
    DistributionSummary,
)


class TestGasOutlet:
    """Test cases for GasOutlet."""

    def test_defaults(self):
        outlet = GasOutlet(gas_type=GasType.OXYGEN, quantity=2)
        assert outlet.flow_rate is None
        assert outlet.simultaneous_factor == 1.0
        assert outlet.location == OutletLocation()

    def test_from_dict_type_alias(self):
        """'type' is accepted in place of 'gas_type'."""
        outlet = GasOutlet.from_dict({
            "type": "Vacuum",
            "quantity": 3,
            "location": {"room": "OR 1", "wall_location": "Headwall"},
        })
        assert outlet.gas_type == GasType.VACUUM
        assert outlet.quantity == 3
        assert outlet.location.wall_location == "Headwall"

    def test_from_dict_unknown_gas(self):
        with pytest.raises(InvalidInputError):
            GasOutlet.from_dict({"gas_type": "helium", "quantity": 1})

    def test_frozen(self):
        outlet = GasOutlet(gas_type=GasType.OXYGEN, quantity=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outlet.quantity = 3


class TestRoomGasRequirements:
    """Test cases for RoomGasRequirements."""

    def test_outlet_count(self, operating_room):
        """Outlets are counted per gas and in total."""
        assert operating_room.outlet_count(GasType.OXYGEN) == 6
        assert operating_room.outlet_count(GasType.NITROGEN) == 0
        assert operating_room.outlet_count() == 22

    def test_lists_stored_as_tuples(self):
        room = RoomGasRequirements(
            room_id="R1",
            room_name="Room 1",
            room_type="ICU",
            area=100,
            outlets=[GasOutlet(gas_type=GasType.AIR, quantity=1)],
            special_requirements=["HEPA"],
        )
        assert isinstance(room.outlets, tuple)
        assert room.special_requirements == ("HEPA",)

    def test_dict_round_trip(self, operating_room):
        """to_dict output is accepted by from_dict."""
        restored = RoomGasRequirements.from_dict(operating_room.to_dict())
        assert restored == operating_room

    def test_from_dict_defaults(self):
        room = RoomGasRequirements.from_dict({"room_id": "R2", "room_type": "ICU"})
        assert room.room_name == "R2"
        assert room.pressurization == Pressurization.NEUTRAL
        assert room.outlets == ()


class TestResultRecords:
    """Test cases for derived result records."""

    def test_gas_demand_has_demand(self):
        assert GasDemand(GasType.OXYGEN, 10.0, 7.5, 0.75).has_demand
        assert not GasDemand(GasType.OXYGEN, 0.0, 0.0, 0.75).has_demand

    def test_pipe_velocity_flag(self):
        pipe = PipeCalculation(
            diameter=8, length=100, material=PipeMaterial.COPPER,
            pressure_drop=0.1, velocity=30.0, flow_rate=5000,
            roughness=5e-6, reynolds_number=1e5, friction_factor=0.02,
            velocity_limit=25.0,
        )
        assert pipe.exceeds_velocity_limit
        assert pipe.to_dict()["material"] == "copper"
        assert pipe.to_dict()["exceeds_velocity_limit"] is True

    def test_distribution_all_lines(self):
        main = PipeCalculation(
            diameter=3, length=100, material=PipeMaterial.COPPER,
            pressure_drop=0.04, velocity=22.9, flow_rate=67.5,
            roughness=5e-6, reynolds_number=36000, friction_factor=0.022,
            velocity_limit=25.0,
        )
        branch = dataclasses.replace(main, length=25)
        summary = DistributionSummary(main_lines=(main,), branch_lines=(branch,))
        assert summary.all_lines == [main, branch]
        assert len(summary.to_dict()["branch_lines"]) == 1
