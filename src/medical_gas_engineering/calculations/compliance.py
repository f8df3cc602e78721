# File: src/medical_gas_engineering/calculations/compliance.py
"""
NFPA 99 compliance rules for synthesized gas systems.

evaluate_compliance() runs a fixed, ordered set of rules against a
MedicalGasSystem. Each rule returns one ComplianceCheck with the cited
section, the requirement, a status and a note carrying the measured value.
Scoring is left to the report stage.

Rules:
    1. Operating pressure within tolerance of nominal (5.1.3.2)
    2. Automatic backup supply present (5.1.11)
    3. Alarm system features (5.1.12) - warning, never a hard failure
    4. Total pressure drop ceiling (5.1.3.6) - compliant or warning only

validate_system() is a stricter design review that splits findings into
errors and warnings.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ..core.gas_types import ComplianceStatus
from ..core.models import ComplianceCheck, MedicalGasSystem, SystemValidation
from ..config.standards import StandardsTable

logger = logging.getLogger(__name__)

NFPA_OPERATING_PRESSURE = "NFPA 99-2021 Section 5.1.3.2"
NFPA_BACKUP_SUPPLY = "NFPA 99-2021 Section 5.1.11"
NFPA_ALARMS = "NFPA 99-2021 Section 5.1.12"
NFPA_PRESSURE_DROP = "NFPA 99-2021 Section 5.1.3.6"

# Design review margins (PSI) below the hard limits
PRESSURE_WARNING_MARGIN = 2.0
PRESSURE_DROP_WARNING = 3.0

ComplianceRule = Callable[[MedicalGasSystem, StandardsTable], ComplianceCheck]


def check_operating_pressure(
    system: MedicalGasSystem,
    standards: StandardsTable
) -> ComplianceCheck:
    """Compliant iff |system pressure - nominal| <= pressure tolerance."""
    standard = standards.get(system.gas_type)
    nominal = abs(standard.operating_pressure)
    pressure = system.system_pressure.operating_pressure
    within = abs(pressure - nominal) <= standards.pressure_tolerance

    return ComplianceCheck(
        standard=NFPA_OPERATING_PRESSURE,
        requirement=(
            f"Operating pressure: {standard.operating_pressure:g} PSI "
            f"±{standards.pressure_tolerance:g} PSI"
        ),
        status=ComplianceStatus.COMPLIANT if within else ComplianceStatus.NON_COMPLIANT,
        notes=f"System pressure: {pressure:g} PSI",
        gas_type=system.gas_type,
    )


def check_backup_supply(
    system: MedicalGasSystem,
    standards: StandardsTable
) -> ComplianceCheck:
    """Compliant iff a backup supply is specified."""
    backup = system.equipment.backup_supply

    return ComplianceCheck(
        standard=NFPA_BACKUP_SUPPLY,
        requirement="Automatic backup system required",
        status=ComplianceStatus.COMPLIANT if backup else ComplianceStatus.NON_COMPLIANT,
        notes=backup or "No backup system specified",
        gas_type=system.gas_type,
    )


def check_alarm_features(
    system: MedicalGasSystem,
    standards: StandardsTable
) -> ComplianceCheck:
    """Compliant with enough alarm features, otherwise a warning."""
    count = len(system.equipment.alarms)

    return ComplianceCheck(
        standard=NFPA_ALARMS,
        requirement="Master alarm system with local and remote monitoring",
        status=(
            ComplianceStatus.COMPLIANT
            if count >= standards.min_alarm_features
            else ComplianceStatus.WARNING
        ),
        notes=f"{count} alarm features specified",
        gas_type=system.gas_type,
    )


def check_total_pressure_drop(
    system: MedicalGasSystem,
    standards: StandardsTable
) -> ComplianceCheck:
    """Compliant at or below the pressure-drop ceiling, otherwise a warning."""
    total_drop = system.distribution.total_pressure_drop
    limit = standards.max_total_pressure_drop

    return ComplianceCheck(
        standard=NFPA_PRESSURE_DROP,
        requirement=f"Total pressure drop should not exceed {limit:g} PSI",
        status=(
            ComplianceStatus.WARNING
            if total_drop > limit
            else ComplianceStatus.COMPLIANT
        ),
        notes=f"Total pressure drop: {total_drop:.2f} PSI",
        gas_type=system.gas_type,
    )


COMPLIANCE_RULES: Tuple[ComplianceRule, ...] = (
    check_operating_pressure,
    check_backup_supply,
    check_alarm_features,
    check_total_pressure_drop,
)


def evaluate_compliance(
    system: MedicalGasSystem,
    standards: Optional[StandardsTable] = None
) -> Tuple[ComplianceCheck, ...]:
    """
    Run all compliance rules against a gas system.

    Args:
        system: Synthesized gas system
        standards: Standards table

    Returns:
        Compliance checks in rule order
    """
    standards = standards or StandardsTable()
    checks = tuple(rule(system, standards) for rule in COMPLIANCE_RULES)

    failing = [c for c in checks if c.status is not ComplianceStatus.COMPLIANT]
    for check in failing:
        logger.info(
            f"{system.gas_type}: {check.standard} {check.status} ({check.notes})"
        )

    return checks


def validate_system(
    system: MedicalGasSystem,
    standards: Optional[StandardsTable] = None
) -> SystemValidation:
    """
    Review a gas system against NFPA 99 limits and design margins.

    Errors:
        - Operating pressure outside tolerance
        - No backup supply
        - Total pressure drop above the ceiling
    Warnings:
        - Operating pressure more than 2 PSI from nominal
        - Fewer alarm features than required
        - Total pressure drop above 3 PSI
        - Pipe runs whose velocity exceeds the ceiling

    Args:
        system: Synthesized gas system
        standards: Standards table

    Returns:
        SystemValidation; valid when there are no errors
    """
    standards = standards or StandardsTable()
    errors: List[str] = []
    warnings: List[str] = []

    pressure = system.system_pressure.operating_pressure
    nominal = abs(standards.get(system.gas_type).operating_pressure)
    pressure_diff = abs(pressure - nominal)
    if pressure_diff > standards.pressure_tolerance:
        errors.append(
            f"Operating pressure ({pressure:g} PSI) exceeds NFPA 99 tolerance"
        )
    elif pressure_diff > PRESSURE_WARNING_MARGIN:
        warnings.append(
            f"Operating pressure ({pressure:g} PSI) approaching NFPA 99 limits"
        )

    if not system.equipment.backup_supply:
        errors.append("Backup supply system is required per NFPA 99")

    if len(system.equipment.alarms) < standards.min_alarm_features:
        warnings.append("Consider additional alarm features for enhanced monitoring")

    total_drop = system.distribution.total_pressure_drop
    if total_drop > standards.max_total_pressure_drop:
        errors.append(
            f"Total pressure drop ({total_drop:.2f} PSI) exceeds NFPA 99 limits"
        )
    elif total_drop > PRESSURE_DROP_WARNING:
        warnings.append(
            f"Pressure drop ({total_drop:.2f} PSI) is high - consider larger pipes"
        )

    for line in system.distribution.all_lines:
        if line.exceeds_velocity_limit:
            warnings.append(
                f"{line.diameter:g}\" run at {line.velocity:.1f} ft/s exceeds "
                f"{line.velocity_limit:.1f} ft/s velocity limit"
            )

    return SystemValidation(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )
