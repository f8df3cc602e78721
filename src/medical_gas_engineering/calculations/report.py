# File: src/medical_gas_engineering/calculations/report.py
"""
Facility engineering report.

Runs the full pipeline for a facility in a single forward pass:

    rooms -> demand -> pipe sizing -> system synthesis -> compliance + cost

then aggregates total cost, outlet count, compliance score and design
recommendations into an EngineeringReport.
"""

import logging
from collections import OrderedDict
from dataclasses import replace
from typing import Dict, List, Iterable, Optional

from ..core.gas_types import GasType, ComplianceStatus
from ..core.models import (
    RoomGasRequirements,
    GasDemand,
    ComplianceCheck,
    MedicalGasSystem,
    ReportSummary,
    EngineeringReport,
)
from ..config.engineering_config import EngineeringConfig
from ..config.design_policy import DesignPolicy
from .demand import aggregate_demand
from .pipe_sizing import size_distribution
from .system_synthesis import synthesize_system
from .compliance import evaluate_compliance
from .cost import estimate_system_cost

logger = logging.getLogger(__name__)


def build_system(
    demand: GasDemand,
    config: Optional[EngineeringConfig] = None
) -> MedicalGasSystem:
    """
    Size, synthesize, check and cost one gas system.

    Args:
        demand: Aggregated demand for a gas with non-zero demand
        config: Engine configuration

    Returns:
        Complete MedicalGasSystem
    """
    config = config or EngineeringConfig()

    distribution = size_distribution(demand, config.standards, config.policy)
    system = synthesize_system(demand, distribution, config.standards, config.policy)
    system = replace(system, compliance=evaluate_compliance(system, config.standards))
    return replace(system, estimated_cost=estimate_system_cost(system, config.costs))


def compliance_score(checks: Iterable[ComplianceCheck]) -> Optional[float]:
    """
    Percentage of checks that are compliant.

    Returns:
        Score in [0, 100], or None when there are no checks
    """
    checks = list(checks)
    if not checks:
        return None
    compliant = sum(1 for c in checks if c.status is ComplianceStatus.COMPLIANT)
    return compliant / len(checks) * 100


def generate_recommendations(
    systems: Dict[GasType, MedicalGasSystem],
    policy: Optional[DesignPolicy] = None
) -> List[str]:
    """
    Derive design recommendations from synthesized systems.

    Per gas system, in order:
    - pressure drop above the policy threshold: larger pipes
    - peak/total ratio above the policy ratio: more backup capacity
    - any non-compliant check: address compliance issues

    Args:
        systems: Synthesized systems by gas type
        policy: Design policy thresholds

    Returns:
        List of recommendation strings
    """
    policy = policy or DesignPolicy()
    recommendations = []

    for gas_type, system in systems.items():
        if system.distribution.total_pressure_drop > policy.high_pressure_drop_threshold:
            recommendations.append(
                f"Consider larger pipe sizes for {gas_type} system to reduce pressure drop"
            )

        if system.peak_demand > system.total_demand * policy.high_simultaneous_ratio:
            recommendations.append(
                f"High simultaneous use factor for {gas_type} - "
                f"consider increasing backup capacity"
            )

        non_compliant = [
            c for c in system.compliance
            if c.status is ComplianceStatus.NON_COMPLIANT
        ]
        if non_compliant:
            recommendations.append(
                f"Address {len(non_compliant)} compliance issues for {gas_type} system"
            )

    return recommendations


def _collect_warnings(
    demands: Dict[GasType, GasDemand],
    systems: Dict[GasType, MedicalGasSystem],
    default_rate: float
) -> List[str]:
    warnings = []

    for gas_type, demand in demands.items():
        for room_type in demand.unmodeled_room_types:
            warnings.append(
                f"Room type '{room_type}' not in {gas_type} flow-rate catalog; "
                f"used default {default_rate:g} {gas_type.flow_unit} per outlet"
            )

    for gas_type, system in systems.items():
        for line in system.distribution.all_lines:
            if line.exceeds_velocity_limit:
                warnings.append(
                    f"{gas_type} run of {line.flow_rate:.1f} {gas_type.flow_unit} "
                    f"exceeds {line.velocity_limit:.1f} ft/s at largest size "
                    f"{line.diameter:g}\" ({line.velocity:.1f} ft/s)"
                )

    return warnings


def generate_engineering_report(
    rooms: Iterable[RoomGasRequirements],
    config: Optional[EngineeringConfig] = None
) -> EngineeringReport:
    """
    Generate the engineering report for a facility.

    Args:
        rooms: Rooms in the facility
        config: Engine configuration; defaults if None

    Returns:
        EngineeringReport. A facility with no rooms (or no outlets) has zero
        demand for every gas, no systems and a compliance score of None.

    Raises:
        InvalidInputError: If any room fails validation
    """
    config = config or EngineeringConfig()
    rooms = list(rooms)

    demands = aggregate_demand(rooms, config.flow_rates, config.standards)

    systems: Dict[GasType, MedicalGasSystem] = OrderedDict()
    for gas_type, demand in demands.items():
        if demand.has_demand:
            systems[gas_type] = build_system(demand, config)

    all_compliance = tuple(
        check for system in systems.values() for check in system.compliance
    )
    recommendations = generate_recommendations(systems, config.policy)
    warnings = _collect_warnings(demands, systems, config.flow_rates.default_rate)

    summary = ReportSummary(
        total_rooms=len(rooms),
        total_outlets=sum(room.outlet_count() for room in rooms),
        total_system_cost=sum(s.estimated_cost for s in systems.values()),
        gas_types_required=tuple(systems.keys()),
        compliance_score=compliance_score(all_compliance),
        recommendation_count=len(recommendations),
    )

    logger.info(
        f"Engineering report: {summary.total_rooms} rooms, "
        f"{summary.total_outlets} outlets, {len(systems)} gas systems, "
        f"total cost {summary.total_system_cost}"
    )

    return EngineeringReport(
        summary=summary,
        demands=demands,
        systems=systems,
        recommendations=tuple(recommendations),
        compliance=all_compliance,
        warnings=tuple(warnings),
    )
