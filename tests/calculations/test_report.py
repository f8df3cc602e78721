# File: tests/calculations/test_report.py
"""Tests for the facility engineering report."""

import random
from dataclasses import replace

import pytest
from src.medical_gas_engineering.core import (
    GasType,
    ComplianceStatus,
    InvalidInputError,
)
from src.medical_gas_engineering.config import EngineeringConfig, DesignPolicy, StandardsTable
from src.medical_gas_engineering.calculations import (
    generate_engineering_report,
    compliance_score,
    generate_recommendations,
    build_system,
    aggregate_demand,
)


class TestSingleOperatingRoom:
    """One general-surgery OR with all five gases."""

    @pytest.fixture
    def report(self, operating_room):
        return generate_engineering_report([operating_room])

    def test_summary(self, report):
        summary = report.summary
        assert summary.total_rooms == 1
        assert summary.total_outlets == 22
        assert summary.gas_types_required == (
            GasType.OXYGEN, GasType.AIR, GasType.VACUUM, GasType.CO2, GasType.N2O
        )
        assert summary.compliance_score == 100.0
        assert summary.recommendation_count == 0

    def test_twenty_compliant_checks(self, report):
        assert len(report.compliance) == 20
        assert all(c.status == ComplianceStatus.COMPLIANT for c in report.compliance)

    def test_demands(self, report):
        assert report.demands[GasType.OXYGEN].peak_demand == pytest.approx(67.5)
        assert report.demands[GasType.VACUUM].peak_demand == pytest.approx(24)
        assert report.demands[GasType.CO2].total_demand == pytest.approx(10)

    def test_pipe_sizes(self, report):
        oxygen = report.systems[GasType.OXYGEN].distribution
        vacuum = report.systems[GasType.VACUUM].distribution
        assert oxygen.main_lines[0].diameter == 3
        assert oxygen.branch_lines[0].diameter == 4
        assert vacuum.main_lines[0].diameter == 1
        assert vacuum.branch_lines[0].diameter == 1.5

    def test_costs(self, report):
        assert report.systems[GasType.OXYGEN].estimated_cost == 187250
        assert report.summary.total_system_cost == sum(
            s.estimated_cost for s in report.systems.values()
        )
        assert report.summary.total_system_cost == 642250

    def test_no_warnings(self, report):
        assert report.warnings == ()

    def test_to_dict_keys(self, report):
        data = report.to_dict()
        assert list(data["systems"]) == ["oxygen", "air", "vacuum", "co2", "n2o"]
        assert data["summary"]["compliance_score"] == 100.0


class TestEmptyFacility:
    """A facility with no rooms."""

    def test_zero_rooms(self):
        report = generate_engineering_report([])

        assert report.summary.total_rooms == 0
        assert report.summary.total_outlets == 0
        assert report.summary.total_system_cost == 0
        assert report.summary.gas_types_required == ()
        assert report.summary.compliance_score is None
        assert report.systems == {}
        assert report.compliance == ()
        assert all(d.total_demand == 0 for d in report.demands.values())

    def test_rooms_without_outlets(self, room_factory):
        report = generate_engineering_report([room_factory("CORR-1", "Corridor", {})])
        assert report.summary.total_rooms == 1
        assert report.summary.compliance_score is None


class TestOrderIndependence:
    """Reports do not depend on room order."""

    def test_permutations(self, facility, room_factory):
        rooms = facility + [
            room_factory(f"PT-{n}", "Patient Room", {GasType.OXYGEN: 1, GasType.VACUUM: 2})
            for n in range(200, 210)
        ]
        shuffled = list(rooms)
        random.Random(7).shuffle(shuffled)

        ordered = generate_engineering_report(rooms)
        permuted = generate_engineering_report(shuffled)

        assert ordered.summary == permuted.summary
        for gas in ordered.demands:
            assert ordered.demands[gas].total_demand == permuted.demands[gas].total_demand
            assert ordered.demands[gas].peak_demand == permuted.demands[gas].peak_demand
        for gas in ordered.systems:
            assert (
                ordered.systems[gas].estimated_cost
                == permuted.systems[gas].estimated_cost
            )


class TestUnmodeledRoomType:
    """Room types outside the flow-rate catalog."""

    def test_default_rate_and_warning(self, room_factory):
        room = room_factory("HB-1", "Hyperbaric Chamber", {GasType.OXYGEN: 2})

        report = generate_engineering_report([room])

        assert report.demands[GasType.OXYGEN].total_demand == 10
        assert report.summary.gas_types_required == (GasType.OXYGEN,)
        assert len(report.warnings) == 1
        assert "Hyperbaric Chamber" in report.warnings[0]


class TestRecommendations:
    """Test cases for design recommendations."""

    def test_non_compliant_pressure(self, operating_room):
        config = EngineeringConfig(
            policy=DesignPolicy(operating_pressure_overrides={GasType.OXYGEN: 60.0})
        )
        report = generate_engineering_report([operating_room], config)

        assert "Address 1 compliance issues for oxygen system" in report.recommendations
        assert report.summary.compliance_score == pytest.approx(95.0)

    def test_high_simultaneous_factor(self, operating_room):
        standards = StandardsTable()
        gas_standards = dict(standards.gas_standards)
        gas_standards[GasType.AIR] = replace(
            gas_standards[GasType.AIR], simultaneous_factor=1.0
        )
        config = EngineeringConfig(standards=StandardsTable(gas_standards=gas_standards))

        report = generate_engineering_report([operating_room], config)

        assert report.recommendations == (
            "High simultaneous use factor for air - consider increasing backup capacity",
        )

    def test_high_pressure_drop(self, operating_room):
        """Long runs push the total drop over 3 PSI."""
        config = EngineeringConfig(
            policy=DesignPolicy(main_line_length_ft=2000, branch_line_length_ft=500)
        )
        systems = {
            GasType.VACUUM: build_system(
                aggregate_demand([operating_room])[GasType.VACUUM], config
            )
        }
        assert systems[GasType.VACUUM].distribution.total_pressure_drop > 3

        recommendations = generate_recommendations(systems, config.policy)

        assert recommendations[0] == (
            "Consider larger pipe sizes for vacuum system to reduce pressure drop"
        )


class TestScore:
    """Test cases for compliance_score."""

    def test_none_without_checks(self):
        assert compliance_score([]) is None


class TestInvalidInput:
    """Invalid rooms fail the whole report."""

    def test_negative_outlets(self, operating_room, room_factory):
        bad = room_factory("BAD-1", "ICU", {GasType.OXYGEN: -3})
        with pytest.raises(InvalidInputError, match="BAD-1"):
            generate_engineering_report([operating_room, bad])
