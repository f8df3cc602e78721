# File: src/medical_gas_engineering/config/__init__.py

"""
Configuration package for the medical gas engineering engine.
Provides a unified interface to all configuration tables:
- NFPA 99 per-gas standards and pipe constants
- Per-outlet flow rates by room type
- Cost tiers and unit rates
- Facility design policy
"""

from .standards import (
    GasStandard,
    StandardsTable,
    DEFAULT_GAS_STANDARDS,
    DEFAULT_PIPE_ROUGHNESS,
    STANDARD_PIPE_DIAMETERS,
    AIR_DENSITY,
    GRAVITATIONAL_CONSTANT,
    AIR_KINEMATIC_VISCOSITY,
)

from .flow_rates import (
    FlowRateCatalog,
    FlowRateLookup,
    DEFAULT_FLOW_RATES,
    DEFAULT_FLOW_RATE,
)

from .costs import (
    CostTable,
    CostTiers,
    DEFAULT_BASE_COSTS,
    DEFAULT_REDUNDANCY_MULTIPLIERS,
)

from .design_policy import (
    DesignPolicy,
    DEFAULT_ALARM_FEATURES,
    DEFAULT_PRIMARY_SUPPLY_TIERS,
    DEFAULT_BACKUP_SUPPLIES,
)

from .engineering_config import EngineeringConfig
from .loader import load_config

__all__ = [
    "GasStandard",
    "StandardsTable",
    "DEFAULT_GAS_STANDARDS",
    "DEFAULT_PIPE_ROUGHNESS",
    "STANDARD_PIPE_DIAMETERS",
    "AIR_DENSITY",
    "GRAVITATIONAL_CONSTANT",
    "AIR_KINEMATIC_VISCOSITY",
    "FlowRateCatalog",
    "FlowRateLookup",
    "DEFAULT_FLOW_RATES",
    "DEFAULT_FLOW_RATE",
    "CostTable",
    "CostTiers",
    "DEFAULT_BASE_COSTS",
    "DEFAULT_REDUNDANCY_MULTIPLIERS",
    "DesignPolicy",
    "DEFAULT_ALARM_FEATURES",
    "DEFAULT_PRIMARY_SUPPLY_TIERS",
    "DEFAULT_BACKUP_SUPPLIES",
    "EngineeringConfig",
    "load_config",
]
