# File: src/medical_gas_engineering/calculations/pipe_sizing.py
"""
Pipe sizing using the Darcy-Weisbach equation.

For a required flow, the sizer walks the standard diameter list in
ascending order and selects the smallest diameter whose velocity does not
exceed the gas type's ceiling. Pressure drop at the selected diameter is:

    ΔP = f · (L/D) · (ρ · V²) / (2 · gc)     [lbf/ft², converted to PSI]

with the friction factor f from the Swamee-Jain approximation to the
Colebrook equation. Swamee-Jain is only accurate for roughly
5e3 < Re < 1e8 and 1e-6 < ε/D < 1e-2; it is applied unconditionally here,
including laminar and transitional flow.

If no standard diameter meets the velocity ceiling, the largest diameter is
returned and the result reports exceeds_velocity_limit.
"""

import logging
import math
from typing import List, Optional, Union

from ..core.errors import InvalidInputError
from ..core.gas_types import GasType, PipeMaterial
from ..core.models import PipeCalculation, DistributionSummary, GasDemand
from ..config.standards import (
    StandardsTable,
    AIR_DENSITY,
    GRAVITATIONAL_CONSTANT,
    AIR_KINEMATIC_VISCOSITY,
    SQ_IN_PER_SQ_FT,
)
from ..config.design_policy import DesignPolicy

logger = logging.getLogger(__name__)


def pipe_area(diameter_in: float) -> float:
    """
    Cross-sectional area of a pipe.

    Args:
        diameter_in: Diameter in inches

    Returns:
        Area in square feet
    """
    return math.pi * (diameter_in / 12 / 2) ** 2


def flow_velocity(flow_rate: float, diameter_in: float) -> float:
    """
    Mean flow velocity.

    Args:
        flow_rate: Flow in SCFM (CFM for vacuum)
        diameter_in: Diameter in inches

    Returns:
        Velocity in ft/s
    """
    return (flow_rate / 60) / pipe_area(diameter_in)


def reynolds_number(
    velocity: float,
    diameter_in: float,
    kinematic_viscosity: float = AIR_KINEMATIC_VISCOSITY
) -> float:
    """Reynolds number for air at standard conditions."""
    return (velocity * diameter_in / 12) / kinematic_viscosity


def swamee_jain_friction_factor(
    reynolds: float,
    roughness: float,
    diameter_in: float
) -> float:
    """
    Darcy friction factor from the Swamee-Jain approximation.

    Args:
        reynolds: Reynolds number (must be positive)
        roughness: Absolute roughness in feet
        diameter_in: Diameter in inches

    Returns:
        Friction factor (dimensionless)
    """
    relative_roughness = roughness / (diameter_in / 12)
    return 0.25 / math.log10(
        relative_roughness / 3.7 + 5.74 / reynolds ** 0.9
    ) ** 2


def darcy_weisbach_pressure_drop(
    friction_factor: float,
    length: float,
    diameter_in: float,
    velocity: float,
    density: float = AIR_DENSITY
) -> float:
    """
    Pressure drop over a straight run.

    Args:
        friction_factor: Darcy friction factor
        length: Run length in feet
        diameter_in: Diameter in inches
        velocity: Velocity in ft/s
        density: Gas density in lb/ft³

    Returns:
        Pressure drop in PSI
    """
    drop_psf = (
        friction_factor
        * (length / (diameter_in / 12))
        * (density * velocity ** 2)
        / (2 * GRAVITATIONAL_CONSTANT)
    )
    return drop_psf / SQ_IN_PER_SQ_FT


def _evaluate_diameter(
    flow_rate: float,
    length: float,
    material: PipeMaterial,
    roughness: float,
    diameter: float,
    velocity_limit: float
) -> PipeCalculation:
    velocity = flow_velocity(flow_rate, diameter)
    reynolds = reynolds_number(velocity, diameter)
    friction = swamee_jain_friction_factor(reynolds, roughness, diameter)
    pressure_drop = darcy_weisbach_pressure_drop(friction, length, diameter, velocity)

    return PipeCalculation(
        diameter=diameter,
        length=length,
        material=material,
        pressure_drop=pressure_drop,
        velocity=velocity,
        flow_rate=flow_rate,
        roughness=roughness,
        reynolds_number=reynolds,
        friction_factor=friction,
        velocity_limit=velocity_limit,
    )


def size_pipe(
    flow_rate: float,
    length: float,
    material: Union[PipeMaterial, str] = PipeMaterial.COPPER,
    gas_type: Union[GasType, str] = GasType.OXYGEN,
    standards: Optional[StandardsTable] = None
) -> PipeCalculation:
    """
    Select the smallest standard diameter that meets the velocity ceiling.

    Args:
        flow_rate: Required flow in SCFM (CFM for vacuum), must be positive
        length: Run length in feet, must be positive
        material: Pipe material
        gas_type: Gas carried; selects the velocity ceiling
        standards: Standards table (diameters, roughness, ceilings)

    Returns:
        PipeCalculation for the selected diameter; if no diameter meets the
        ceiling, the largest standard diameter with exceeds_velocity_limit set

    Raises:
        InvalidInputError: On non-positive flow or length, or an unknown
            material or gas type
    """
    standards = standards or StandardsTable()
    material = PipeMaterial.from_string(material)
    gas_type = GasType.from_string(gas_type)

    if not math.isfinite(flow_rate) or flow_rate <= 0:
        raise InvalidInputError(
            f"Flow rate must be positive, got {flow_rate}",
            field="flow_rate",
        )

    if not math.isfinite(length) or length <= 0:
        raise InvalidInputError(
            f"Pipe length must be positive, got {length}",
            field="length",
        )

    roughness = standards.roughness(material)
    velocity_limit = standards.max_velocity_fps(gas_type)

    for diameter in standards.standard_diameters:
        if flow_velocity(flow_rate, diameter) <= velocity_limit:
            return _evaluate_diameter(
                flow_rate, length, material, roughness, diameter, velocity_limit
            )

    largest = standards.standard_diameters[-1]
    result = _evaluate_diameter(
        flow_rate, length, material, roughness, largest, velocity_limit
    )
    logger.warning(
        f"No standard size keeps {gas_type} flow of {flow_rate:.1f} "
        f"{gas_type.flow_unit} under {velocity_limit:.1f} ft/s; "
        f"using {largest}\" at {result.velocity:.1f} ft/s"
    )
    return result


def size_distribution(
    demand: GasDemand,
    standards: Optional[StandardsTable] = None,
    policy: Optional[DesignPolicy] = None
) -> DistributionSummary:
    """
    Size the main and branch runs for one gas system.

    One main line carries the system peak demand over the policy's main
    line length. Each room with outlets of the gas gets one branch line
    carrying that room's demand over the policy's branch length. Totals are
    the sums over all runs.

    Args:
        demand: Aggregated demand for the gas
        standards: Standards table
        policy: Design policy (run lengths, pipe material)

    Returns:
        DistributionSummary; empty when the gas has no demand
    """
    standards = standards or StandardsTable()
    policy = policy or DesignPolicy()

    if not demand.has_demand:
        return DistributionSummary()

    main_lines: List[PipeCalculation] = []
    if demand.peak_demand > 0:
        main_lines.append(size_pipe(
            demand.peak_demand,
            policy.main_line_length_ft,
            policy.pipe_material,
            demand.gas_type,
            standards,
        ))

    branch_lines = [
        size_pipe(
            room_demand.demand,
            policy.branch_line_length_ft,
            policy.pipe_material,
            demand.gas_type,
            standards,
        )
        for room_demand in demand.room_demands
        if room_demand.demand > 0
    ]

    runs = main_lines + branch_lines
    return DistributionSummary(
        main_lines=tuple(main_lines),
        branch_lines=tuple(branch_lines),
        total_length=math.fsum(run.length for run in runs),
        total_pressure_drop=math.fsum(run.pressure_drop for run in runs),
    )
