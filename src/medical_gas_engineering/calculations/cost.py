# File: src/medical_gas_engineering/calculations/cost.py
"""
Cost estimation for synthesized gas systems.

    base      = tiered base cost (peak demand <= 50, <= 200, > 200)
    piping    = total distribution length x rate per foot
    equipment = manifolds x manifold rate + regulators x regulator rate
                + alarm features x alarm rate
    total     = (base + piping + equipment) x redundancy multiplier

The estimate reads only the fields already computed on the system; it never
re-derives demand or pipe sizes.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Optional

from ..core.models import MedicalGasSystem
from ..config.costs import CostTable


@dataclass(frozen=True)
class CostBreakdown:
    """Itemized cost estimate for one gas system."""
    base_cost: float
    piping_cost: float
    manifold_cost: float
    regulator_cost: float
    alarm_cost: float
    redundancy_multiplier: float

    @property
    def subtotal(self) -> float:
        """Cost before the redundancy multiplier."""
        return (
            self.base_cost
            + self.piping_cost
            + self.manifold_cost
            + self.regulator_cost
            + self.alarm_cost
        )

    @property
    def total(self) -> int:
        """Subtotal x multiplier, rounded half up to whole currency units."""
        return int(math.floor(self.subtotal * self.redundancy_multiplier + 0.5))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_cost": self.base_cost,
            "piping_cost": self.piping_cost,
            "manifold_cost": self.manifold_cost,
            "regulator_cost": self.regulator_cost,
            "alarm_cost": self.alarm_cost,
            "subtotal": self.subtotal,
            "redundancy_multiplier": self.redundancy_multiplier,
            "total": self.total,
        }


def cost_breakdown(
    system: MedicalGasSystem,
    costs: Optional[CostTable] = None
) -> CostBreakdown:
    """
    Itemize the cost of a gas system.

    Args:
        system: Synthesized gas system
        costs: Cost table

    Returns:
        CostBreakdown

    Raises:
        ConfigurationError: If the cost table has no tiers for the gas type
    """
    costs = costs or CostTable()
    equipment = system.equipment

    return CostBreakdown(
        base_cost=costs.base_cost(system.gas_type, system.peak_demand),
        piping_cost=system.distribution.total_length * costs.piping_cost_per_foot,
        manifold_cost=equipment.manifolds * costs.manifold_cost,
        regulator_cost=equipment.regulators * costs.regulator_cost,
        alarm_cost=len(equipment.alarms) * costs.alarm_feature_cost,
        redundancy_multiplier=costs.redundancy_multiplier(
            system.system_pressure.redundancy_level
        ),
    )


def estimate_system_cost(
    system: MedicalGasSystem,
    costs: Optional[CostTable] = None
) -> int:
    """
    Estimate the installed cost of a gas system.

    Args:
        system: Synthesized gas system
        costs: Cost table

    Returns:
        Estimated cost in whole currency units
    """
    return cost_breakdown(system, costs).total
