# File: src/medical_gas_engineering/calculations/__init__.py
"""
Engineering calculations for medical gas systems.

Submodules, in pipeline order:
    demand: Total and peak demand per gas type
    pipe_sizing: Darcy-Weisbach pipe sizing
    system_synthesis: Pressure requirements and equipment
    compliance: NFPA 99 rule checks and design review
    cost: Cost estimation
    report: Facility-wide orchestration
"""

from .demand import (
    validate_room,
    room_gas_demand,
    aggregate_demand,
)
from .pipe_sizing import (
    pipe_area,
    flow_velocity,
    reynolds_number,
    swamee_jain_friction_factor,
    darcy_weisbach_pressure_drop,
    size_pipe,
    size_distribution,
)
from .system_synthesis import (
    select_redundancy,
    pressure_requirements,
    primary_supply_recommendation,
    backup_supply_recommendation,
    size_equipment,
    synthesize_system,
)
from .compliance import (
    COMPLIANCE_RULES,
    check_operating_pressure,
    check_backup_supply,
    check_alarm_features,
    check_total_pressure_drop,
    evaluate_compliance,
    validate_system,
)
from .cost import (
    CostBreakdown,
    cost_breakdown,
    estimate_system_cost,
)
from .report import (
    build_system,
    compliance_score,
    generate_recommendations,
    generate_engineering_report,
)

__all__ = [
    # Demand
    "validate_room",
    "room_gas_demand",
    "aggregate_demand",
    # Pipe sizing
    "pipe_area",
    "flow_velocity",
    "reynolds_number",
    "swamee_jain_friction_factor",
    "darcy_weisbach_pressure_drop",
    "size_pipe",
    "size_distribution",
    # System synthesis
    "select_redundancy",
    "pressure_requirements",
    "primary_supply_recommendation",
    "backup_supply_recommendation",
    "size_equipment",
    "synthesize_system",
    # Compliance
    "COMPLIANCE_RULES",
    "check_operating_pressure",
    "check_backup_supply",
    "check_alarm_features",
    "check_total_pressure_drop",
    "evaluate_compliance",
    "validate_system",
    # Cost
    "CostBreakdown",
    "cost_breakdown",
    "estimate_system_cost",
    # Report
    "build_system",
    "compliance_score",
    "generate_recommendations",
    "generate_engineering_report",
]
