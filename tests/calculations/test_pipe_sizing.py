# File: tests/calculations/test_pipe_sizing.py
"""Tests for Darcy-Weisbach pipe sizing."""

import math

import pytest
from src.medical_gas_engineering.core import (
    GasType,
    PipeMaterial,
    InvalidInputError,
)
from src.medical_gas_engineering.config import (
    StandardsTable,
    DesignPolicy,
    STANDARD_PIPE_DIAMETERS,
)
from src.medical_gas_engineering.calculations import (
    pipe_area,
    flow_velocity,
    reynolds_number,
    swamee_jain_friction_factor,
    darcy_weisbach_pressure_drop,
    size_pipe,
    size_distribution,
    aggregate_demand,
)


class TestFormulas:
    """Test cases for the hydraulic formulas."""

    def test_pipe_area(self):
        """1 inch pipe has area pi/576 sq ft."""
        assert pipe_area(1) == pytest.approx(math.pi / 576)

    def test_flow_velocity(self):
        """60 SCFM through 1 sq ft is 1 ft/s."""
        diameter = 24 / math.sqrt(math.pi)  # area of exactly 1 sq ft
        assert flow_velocity(60, diameter) == pytest.approx(1.0)

    def test_reynolds_number(self):
        assert reynolds_number(10, 12) == pytest.approx(10 / 1.57e-4)

    def test_friction_factor_turbulent_range(self):
        """Smooth copper at moderate Reynolds numbers."""
        f = swamee_jain_friction_factor(36000, 0.000005, 3)
        assert 0.02 < f < 0.025

    def test_pressure_drop_scales_with_length(self):
        short = darcy_weisbach_pressure_drop(0.02, 50, 2, 20)
        long = darcy_weisbach_pressure_drop(0.02, 100, 2, 20)
        assert long == pytest.approx(2 * short)


class TestSizePipe:
    """Test cases for size_pipe."""

    def test_oxygen_main(self):
        """67.5 SCFM oxygen needs a 3 inch main."""
        result = size_pipe(67.5, 100)
        assert result.diameter == 3
        assert result.velocity <= 25
        assert not result.exceeds_velocity_limit

    def test_smallest_adequate_diameter(self):
        """The next smaller size would exceed the ceiling."""
        result = size_pipe(67.5, 100)
        index = STANDARD_PIPE_DIAMETERS.index(result.diameter)
        assert flow_velocity(67.5, STANDARD_PIPE_DIAMETERS[index - 1]) > 25

    def test_small_flow_uses_smallest(self):
        assert size_pipe(0.5, 25).diameter == 0.5

    def test_velocity_recomputable(self):
        """Reported velocity matches the velocity formula at the chosen size."""
        result = size_pipe(90, 25)
        assert result.velocity == pytest.approx(flow_velocity(90, result.diameter))
        assert result.flow_rate == 90
        assert result.length == 25

    def test_idempotent(self):
        assert size_pipe(48, 25, "copper", "air") == size_pipe(48, 25, "copper", "air")

    def test_vacuum_ceiling(self):
        """Vacuum uses the 5000 ft/min ceiling."""
        main = size_pipe(24, 100, gas_type=GasType.VACUUM)
        branch = size_pipe(48, 25, gas_type=GasType.VACUUM)
        assert main.diameter == 1
        assert branch.diameter == 1.5
        assert main.velocity_limit == pytest.approx(5000 / 60)

    def test_pressure_drop_positive(self):
        assert size_pipe(36, 100, gas_type="air").pressure_drop > 0

    def test_rougher_material_larger_drop(self):
        copper = size_pipe(36, 100, PipeMaterial.COPPER)
        chrome = size_pipe(36, 100, PipeMaterial.CHROME_MOLY)
        assert chrome.diameter == copper.diameter
        assert chrome.pressure_drop > copper.pressure_drop

    def test_largest_size_fallback(self, caplog):
        """Flows too large for every size return 8 inch with the flag set."""
        result = size_pipe(10000, 100)
        assert result.diameter == 8
        assert result.exceeds_velocity_limit
        assert "No standard size" in caplog.text

    @pytest.mark.parametrize("flow, length", [
        (0, 100),
        (-5, 100),
        (10, 0),
        (10, -1),
        (float("nan"), 100),
    ])
    def test_invalid_inputs(self, flow, length):
        with pytest.raises(InvalidInputError):
            size_pipe(flow, length)

    def test_unknown_material(self):
        with pytest.raises(InvalidInputError, match="pipe material"):
            size_pipe(10, 10, material="pvc")

    def test_gas_without_standards(self):
        with pytest.raises(InvalidInputError, match="No standards configured"):
            size_pipe(10, 10, gas_type=GasType.ARGON)

    def test_custom_diameter_list(self):
        standards = StandardsTable(standard_diameters=(1, 2))
        assert size_pipe(67.5, 100, standards=standards).diameter == 2


class TestSizeDistribution:
    """Test cases for size_distribution."""

    def test_operating_room_oxygen(self, operating_room):
        demand = aggregate_demand([operating_room])[GasType.OXYGEN]

        distribution = size_distribution(demand)

        assert len(distribution.main_lines) == 1
        assert len(distribution.branch_lines) == 1
        assert distribution.main_lines[0].diameter == 3
        assert distribution.branch_lines[0].diameter == 4
        assert distribution.total_length == 125
        assert distribution.total_pressure_drop == pytest.approx(
            sum(line.pressure_drop for line in distribution.all_lines)
        )

    def test_one_branch_per_room(self, facility):
        demand = aggregate_demand(facility)[GasType.VACUUM]
        distribution = size_distribution(demand)
        assert len(distribution.branch_lines) == 3
        assert distribution.total_length == 100 + 3 * 25

    def test_policy_lengths(self, operating_room):
        demand = aggregate_demand([operating_room])[GasType.AIR]
        policy = DesignPolicy(main_line_length_ft=200, branch_line_length_ft=40)
        distribution = size_distribution(demand, policy=policy)
        assert distribution.total_length == 240

    def test_no_demand_is_empty(self):
        demand = aggregate_demand([])[GasType.OXYGEN]
        distribution = size_distribution(demand)
        assert distribution.all_lines == []
        assert distribution.total_length == 0
