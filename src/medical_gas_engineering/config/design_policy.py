# File: src/medical_gas_engineering/config/design_policy.py
"""
Design policy for system synthesis and distribution sizing.

Covers the decisions that are facility policy rather than standards
values: equipment demand tiers, backup supply mapping, manifold and
regulator rules, alarm features, redundancy selection, pipe run lengths
and the thresholds used to raise recommendations.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..core.gas_types import GasType, PipeMaterial, RedundancyLevel

# (peak demand threshold, recommendation), checked from the highest threshold
# down; a tier applies when peak demand is strictly greater than its threshold
DEFAULT_PRIMARY_SUPPLY_TIERS: Dict[GasType, Tuple[Tuple[float, str], ...]] = {
    GasType.OXYGEN: (
        (200, "Liquid oxygen bulk tank (1500+ gallon)"),
        (50, "Liquid oxygen bulk tank (500-1500 gallon)"),
    ),
    GasType.AIR: (
        (100, "Dual rotary screw compressors with dryers"),
        (25, "Single rotary screw compressor with backup"),
    ),
    GasType.VACUUM: (
        (60, "Dual liquid ring vacuum pumps"),
        (20, "Single liquid ring with backup rotary vane"),
    ),
}

# Recommendation below the lowest tier
DEFAULT_PRIMARY_SUPPLY_BASE: Dict[GasType, str] = {
    GasType.OXYGEN: "High-pressure cylinder manifold (6-12 cylinders)",
    GasType.AIR: "Reciprocating compressor with backup",
    GasType.VACUUM: "Rotary vane vacuum pumps (duplex)",
}

DEFAULT_PRIMARY_SUPPLY = "High-pressure cylinder manifold"

DEFAULT_BACKUP_SUPPLIES: Dict[GasType, str] = {
    GasType.OXYGEN: "High-pressure cylinder manifold (automatic switchover)",
    GasType.AIR: "Secondary compressor with automatic start",
    GasType.VACUUM: "Secondary vacuum pump with automatic start",
}

DEFAULT_BACKUP_SUPPLY = "Secondary cylinder manifold"

DEFAULT_ALARM_FEATURES: Tuple[str, ...] = (
    "Master alarm panel",
    "Local pressure switches",
    "Automatic switchover",
    "Remote monitoring capability",
)


@dataclass(frozen=True)
class DesignPolicy:
    """
    Facility design policy.

    Attributes:
        primary_supply_tiers: Demand tiers for primary supply selection, stored
            highest threshold first
        primary_supply_base: Primary supply below the lowest tier, per gas
        default_primary_supply: Primary supply for gases without tiers
        backup_supplies: Backup supply per gas type
        default_backup_supply: Backup supply for gases without a mapping
        alarm_features: Alarm features provided for every system
        manifold_threshold: Peak demand above which dual manifolds are used
        regulator_capacity: Peak demand served per regulator
        default_redundancy: Redundancy level when no rule applies
        triple_redundancy_threshold: Peak demand above which triple
            redundancy is used; None disables the rule
        redundancy_overrides: Fixed redundancy level per gas type
        operating_pressure_overrides: Operating pressure per gas type,
            replacing the standards value
        main_line_length_ft: Length of the main supply run per gas
        branch_line_length_ft: Length of each room branch run
        pipe_material: Material used for all runs
        high_pressure_drop_threshold: Total pressure drop (PSI) above which
            larger pipes are recommended
        high_simultaneous_ratio: Peak/total ratio above which more backup
            capacity is recommended
    """
    primary_supply_tiers: Dict[GasType, Tuple[Tuple[float, str], ...]] = field(
        default_factory=lambda: dict(DEFAULT_PRIMARY_SUPPLY_TIERS)
    )
    primary_supply_base: Dict[GasType, str] = field(
        default_factory=lambda: dict(DEFAULT_PRIMARY_SUPPLY_BASE)
    )
    default_primary_supply: str = DEFAULT_PRIMARY_SUPPLY
    backup_supplies: Dict[GasType, str] = field(
        default_factory=lambda: dict(DEFAULT_BACKUP_SUPPLIES)
    )
    default_backup_supply: str = DEFAULT_BACKUP_SUPPLY
    alarm_features: Tuple[str, ...] = DEFAULT_ALARM_FEATURES
    manifold_threshold: float = 100
    regulator_capacity: float = 50
    default_redundancy: RedundancyLevel = RedundancyLevel.DUAL
    triple_redundancy_threshold: Optional[float] = None
    redundancy_overrides: Dict[GasType, RedundancyLevel] = field(
        default_factory=dict
    )
    operating_pressure_overrides: Dict[GasType, float] = field(
        default_factory=dict
    )
    main_line_length_ft: float = 100.0
    branch_line_length_ft: float = 25.0
    pipe_material: PipeMaterial = PipeMaterial.COPPER
    high_pressure_drop_threshold: float = 3.0
    high_simultaneous_ratio: float = 0.9

    def __post_init__(self):
        object.__setattr__(self, "alarm_features", tuple(self.alarm_features))
        object.__setattr__(self, "primary_supply_tiers", {
            gas_type: tuple(sorted(tiers, key=lambda tier: tier[0], reverse=True))
            for gas_type, tiers in self.primary_supply_tiers.items()
        })
