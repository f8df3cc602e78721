# File: src/medical_gas_engineering/config/costs.py
"""
Cost tables for medical gas system estimates.

Base system cost is tiered by peak demand; piping, manifolds, regulators
and alarm features are priced per unit; the total is scaled by a
redundancy multiplier. All amounts are in whole currency units (USD).
"""

from dataclasses import dataclass, field
from typing import Dict

from ..core.errors import ConfigurationError
from ..core.gas_types import GasType, RedundancyLevel


@dataclass(frozen=True)
class CostTiers:
    """Base system cost by demand tier."""
    low: float
    medium: float
    high: float


DEFAULT_BASE_COSTS: Dict[GasType, CostTiers] = {
    GasType.OXYGEN: CostTiers(low=25000, medium=75000, high=200000),
    GasType.AIR: CostTiers(low=35000, medium=85000, high=250000),
    GasType.VACUUM: CostTiers(low=30000, medium=80000, high=220000),
    GasType.CO2: CostTiers(low=15000, medium=40000, high=100000),
    GasType.N2O: CostTiers(low=20000, medium=50000, high=120000),
}

# Peak demand (SCFM) upper bounds for the low and medium tiers
LOW_DEMAND_THRESHOLD = 50
MEDIUM_DEMAND_THRESHOLD = 200

PIPING_COST_PER_FOOT = 150
MANIFOLD_COST = 15000
REGULATOR_COST = 2500
ALARM_FEATURE_COST = 5000

DEFAULT_REDUNDANCY_MULTIPLIERS: Dict[RedundancyLevel, float] = {
    RedundancyLevel.SINGLE: 1.0,
    RedundancyLevel.DUAL: 1.4,
    RedundancyLevel.TRIPLE: 1.8,
}


@dataclass(frozen=True)
class CostTable:
    """
    Read-only cost configuration.

    Attributes:
        base_costs: Tiered base cost per gas type
        low_demand_threshold: Peak demand at or below which the low tier applies
        medium_demand_threshold: Peak demand at or below which the medium
            tier applies; above it the high tier applies
        piping_cost_per_foot: Installed piping cost per linear foot
        manifold_cost: Cost per manifold
        regulator_cost: Cost per regulator
        alarm_feature_cost: Cost per alarm feature
        redundancy_multipliers: Multiplier per redundancy level
    """
    base_costs: Dict[GasType, CostTiers] = field(
        default_factory=lambda: dict(DEFAULT_BASE_COSTS)
    )
    low_demand_threshold: float = LOW_DEMAND_THRESHOLD
    medium_demand_threshold: float = MEDIUM_DEMAND_THRESHOLD
    piping_cost_per_foot: float = PIPING_COST_PER_FOOT
    manifold_cost: float = MANIFOLD_COST
    regulator_cost: float = REGULATOR_COST
    alarm_feature_cost: float = ALARM_FEATURE_COST
    redundancy_multipliers: Dict[RedundancyLevel, float] = field(
        default_factory=lambda: dict(DEFAULT_REDUNDANCY_MULTIPLIERS)
    )

    def __post_init__(self):
        multipliers = [
            self.redundancy_multipliers.get(level) for level in RedundancyLevel
        ]
        if any(m is None for m in multipliers):
            raise ConfigurationError(
                "Redundancy multipliers must cover single, dual and triple"
            )
        if multipliers != sorted(multipliers):
            raise ConfigurationError(
                "Redundancy multipliers must not decrease from single to triple"
            )

    def tiers_for(self, gas_type: GasType) -> CostTiers:
        """
        Get the base cost tiers for a gas type.

        Raises:
            ConfigurationError: If no tiers are configured for the gas
        """
        tiers = self.base_costs.get(gas_type)
        if tiers is None:
            raise ConfigurationError(
                f"No base cost tiers configured for gas type '{gas_type}'"
            )
        return tiers

    def base_cost(self, gas_type: GasType, peak_demand: float) -> float:
        """Base system cost for the demand tier the peak demand falls in."""
        tiers = self.tiers_for(gas_type)
        if peak_demand > self.medium_demand_threshold:
            return tiers.high
        if peak_demand > self.low_demand_threshold:
            return tiers.medium
        return tiers.low

    def redundancy_multiplier(self, level: RedundancyLevel) -> float:
        return self.redundancy_multipliers[level]
