# File: src/medical_gas_engineering/calculations/system_synthesis.py
"""
Gas system synthesis.

Combines aggregated demand and sized distribution for one gas type into a
MedicalGasSystem: pressure requirements, redundancy level, primary and
backup supply, manifold and regulator counts, and alarm features.
Compliance checks and cost are added by later stages.
"""

import logging
import math
from typing import Optional

from ..core.gas_types import GasType, RedundancyLevel
from ..core.models import (
    AlarmSetPoints,
    SystemPressureRequirements,
    EquipmentBlock,
    DistributionSummary,
    GasDemand,
    MedicalGasSystem,
)
from ..config.standards import StandardsTable
from ..config.design_policy import DesignPolicy

logger = logging.getLogger(__name__)


def select_redundancy(
    gas_type: GasType,
    peak_demand: float,
    policy: Optional[DesignPolicy] = None
) -> RedundancyLevel:
    """
    Select the redundancy level for a gas system.

    A per-gas override wins; otherwise triple redundancy applies above the
    policy's demand threshold (if set); otherwise the policy default.
    """
    policy = policy or DesignPolicy()

    if gas_type in policy.redundancy_overrides:
        return policy.redundancy_overrides[gas_type]

    threshold = policy.triple_redundancy_threshold
    if threshold is not None and peak_demand > threshold:
        return RedundancyLevel.TRIPLE

    return policy.default_redundancy


def pressure_requirements(
    gas_type: GasType,
    peak_demand: float = 0.0,
    standards: Optional[StandardsTable] = None,
    policy: Optional[DesignPolicy] = None
) -> SystemPressureRequirements:
    """
    Derive pressure requirements for a gas type.

    Pressures are magnitudes (vacuum values are stored negative in the
    standards table, and a signed override is accepted the same way). Switchover sits below the low alarm by the standards
    switchover offset.

    Args:
        gas_type: Gas type
        peak_demand: Peak demand, used for redundancy selection
        standards: Standards table
        policy: Design policy (pressure and redundancy overrides)

    Returns:
        SystemPressureRequirements for the gas
    """
    standards = standards or StandardsTable()
    policy = policy or DesignPolicy()
    standard = standards.get(gas_type)

    operating_pressure = abs(policy.operating_pressure_overrides.get(
        gas_type, standard.operating_pressure
    ))
    low_pressure = abs(standard.low_pressure_alarm)

    return SystemPressureRequirements(
        operating_pressure=operating_pressure,
        alarm_set_points=AlarmSetPoints(
            high_pressure=abs(standard.high_pressure_alarm),
            low_pressure=low_pressure,
            switchover=low_pressure - standards.switchover_offset,
        ),
        backup_capacity=standards.backup_capacity,
        redundancy_level=select_redundancy(gas_type, peak_demand, policy),
    )


def primary_supply_recommendation(
    gas_type: GasType,
    peak_demand: float,
    policy: Optional[DesignPolicy] = None
) -> str:
    """
    Recommend a primary supply from the gas type's demand tiers.

    Args:
        gas_type: Gas type
        peak_demand: Peak demand
        policy: Design policy holding the tiers

    Returns:
        Primary supply description
    """
    policy = policy or DesignPolicy()
    tiers = policy.primary_supply_tiers.get(gas_type)
    if not tiers:
        return policy.default_primary_supply

    for threshold, recommendation in tiers:
        if peak_demand > threshold:
            return recommendation

    return policy.primary_supply_base.get(gas_type, policy.default_primary_supply)


def backup_supply_recommendation(
    gas_type: GasType,
    policy: Optional[DesignPolicy] = None
) -> str:
    """Backup supply for a gas type; fixed per gas, independent of demand."""
    policy = policy or DesignPolicy()
    return policy.backup_supplies.get(gas_type, policy.default_backup_supply)


def size_equipment(
    gas_type: GasType,
    peak_demand: float,
    policy: Optional[DesignPolicy] = None
) -> EquipmentBlock:
    """
    Size supply equipment for a gas system.

    Manifolds: 2 above the manifold threshold (100 SCFM), else 1.
    Regulators: one per regulator capacity (50 SCFM), rounded up.

    Args:
        gas_type: Gas type
        peak_demand: Peak demand
        policy: Design policy

    Returns:
        EquipmentBlock
    """
    policy = policy or DesignPolicy()

    return EquipmentBlock(
        primary_supply=primary_supply_recommendation(gas_type, peak_demand, policy),
        backup_supply=backup_supply_recommendation(gas_type, policy),
        manifolds=2 if peak_demand > policy.manifold_threshold else 1,
        regulators=math.ceil(peak_demand / policy.regulator_capacity),
        alarms=policy.alarm_features,
    )


def synthesize_system(
    demand: GasDemand,
    distribution: DistributionSummary,
    standards: Optional[StandardsTable] = None,
    policy: Optional[DesignPolicy] = None
) -> MedicalGasSystem:
    """
    Build the system description for one gas type.

    Args:
        demand: Aggregated demand for the gas
        distribution: Sized piping for the gas
        standards: Standards table
        policy: Design policy

    Returns:
        MedicalGasSystem without compliance checks or cost
    """
    standards = standards or StandardsTable()
    policy = policy or DesignPolicy()
    gas_type = demand.gas_type

    system = MedicalGasSystem(
        gas_type=gas_type,
        total_demand=demand.total_demand,
        peak_demand=demand.peak_demand,
        system_pressure=pressure_requirements(
            gas_type, demand.peak_demand, standards, policy
        ),
        distribution=distribution,
        equipment=size_equipment(gas_type, demand.peak_demand, policy),
    )

    logger.debug(
        f"{gas_type}: {system.equipment.primary_supply}, "
        f"{system.equipment.manifolds} manifolds, "
        f"{system.equipment.regulators} regulators, "
        f"{system.system_pressure.redundancy_level} redundancy"
    )
    return system
