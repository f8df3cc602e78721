# File: src/medical_gas_engineering/config/flow_rates.py
"""
Standard per-outlet flow rates by gas type and room type.

Rates are in SCFM (CFM for vacuum). Room types that are not in a gas's
table, and gases without a table, use DEFAULT_FLOW_RATE.
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple

from ..core.gas_types import GasType

# Fallback per-outlet flow rate (SCFM) for unmodeled room types
DEFAULT_FLOW_RATE = 5.0

DEFAULT_FLOW_RATES: Dict[GasType, Dict[str, float]] = {
    GasType.OXYGEN: {
        "Operating Room": 15,
        "ICU": 8,
        "Emergency Room": 12,
        "Recovery Room": 6,
        "Patient Room": 4,
        "NICU": 10,
    },
    GasType.AIR: {
        "Operating Room": 12,
        "ICU": 6,
        "Emergency Room": 10,
        "Recovery Room": 5,
        "Patient Room": 3,
        "NICU": 8,
    },
    GasType.VACUUM: {
        "Operating Room": 8,
        "ICU": 5,
        "Emergency Room": 6,
        "Recovery Room": 3,
        "Patient Room": 2,
        "NICU": 4,
    },
}


class FlowRateLookup(NamedTuple):
    """Result of a flow-rate lookup."""
    rate: float
    is_default: bool
    # True when the gas has a table but the room type is missing from it
    is_unmodeled: bool


@dataclass(frozen=True)
class FlowRateCatalog:
    """
    Read-only catalog of per-outlet flow rates.

    Attributes:
        rates: Mapping of gas type to {room type: flow per outlet}
        default_rate: Flow per outlet used when no entry matches
    """
    rates: Dict[GasType, Dict[str, float]] = field(
        default_factory=lambda: {
            gas: dict(table) for gas, table in DEFAULT_FLOW_RATES.items()
        }
    )
    default_rate: float = DEFAULT_FLOW_RATE

    def lookup(self, gas_type: GasType, room_type: str) -> FlowRateLookup:
        """
        Look up the per-outlet flow rate for a room type.

        Room types are matched exactly, as supplied by the caller.

        Args:
            gas_type: Gas type
            room_type: Room classification (e.g., "Operating Room")

        Returns:
            FlowRateLookup with the rate and whether the default was used
        """
        table = self.rates.get(gas_type)
        if table is None:
            return FlowRateLookup(self.default_rate, True, False)

        rate = table.get(room_type)
        if rate is None:
            return FlowRateLookup(self.default_rate, True, True)

        return FlowRateLookup(float(rate), False, False)

    def base_flow_rate(self, gas_type: GasType, room_type: str) -> float:
        """Per-outlet flow rate, falling back to the default rate."""
        return self.lookup(gas_type, room_type).rate
