# File: src/medical_gas_engineering/config/engineering_config.py
"""
Aggregate engine configuration.

EngineeringConfig groups the standards table, flow-rate catalog, cost table
and design policy. Calculation functions take these as explicit arguments;
EngineeringConfig.from_dict() builds a configuration from partial overrides
layered on the defaults, e.g. for a revised edition of NFPA 99.

Override format:
    {
        "standards": {
            "gases": {"oxygen": {"operating_pressure": 55}},
            "pipe_roughness": {"copper": 0.000005},
            "standard_diameters": [0.5, 0.75, 1],
            "pressure_tolerance": 5,
        },
        "flow_rates": {"default_rate": 5, "rates": {"oxygen": {"ICU": 9}}},
        "costs": {"base_costs": {"oxygen": {"low": 1, "medium": 2, "high": 3}}},
        "policy": {"default_redundancy": "triple", "main_line_length_ft": 150},
    }
"""

from dataclasses import dataclass, field, fields, replace
from typing import Dict, Any, Optional

from ..core.errors import ConfigurationError, InvalidInputError
from ..core.gas_types import GasType, PipeMaterial, RedundancyLevel
from .standards import StandardsTable, GasStandard
from .flow_rates import FlowRateCatalog
from .costs import CostTable, CostTiers
from .design_policy import DesignPolicy


@dataclass(frozen=True)
class EngineeringConfig:
    """
    Complete configuration for an engineering run.

    Attributes:
        standards: Per-gas standards and pipe constants
        flow_rates: Per-outlet flow-rate catalog
        costs: Cost tables
        policy: Design policy
    """
    standards: StandardsTable = field(default_factory=StandardsTable)
    flow_rates: FlowRateCatalog = field(default_factory=FlowRateCatalog)
    costs: CostTable = field(default_factory=CostTable)
    policy: DesignPolicy = field(default_factory=DesignPolicy)

    @classmethod
    def from_dict(
        cls,
        data: Optional[Dict[str, Any]],
        base: Optional["EngineeringConfig"] = None
    ) -> "EngineeringConfig":
        """
        Build a configuration by applying overrides to a base configuration.

        Args:
            data: Override dictionary (see module docstring); None or empty
                returns the base unchanged
            base: Configuration to override; defaults if None

        Returns:
            New EngineeringConfig

        Raises:
            ConfigurationError: If a section, key or value is invalid
        """
        base = base or cls()
        if not data:
            return base

        unknown = set(data) - {"standards", "flow_rates", "costs", "policy"}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration sections: {sorted(unknown)}"
            )

        try:
            return cls(
                standards=_apply_standards(base.standards, data.get("standards")),
                flow_rates=_apply_flow_rates(base.flow_rates, data.get("flow_rates")),
                costs=_apply_costs(base.costs, data.get("costs")),
                policy=_apply_policy(base.policy, data.get("policy")),
            )
        except (TypeError, ValueError, KeyError, InvalidInputError) as e:
            raise ConfigurationError(f"Invalid configuration value: {e}") from e


def _check_keys(section: str, values: Dict[str, Any], target) -> None:
    allowed = {f.name for f in fields(target)}
    unknown = set(values) - allowed
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in '{section}': {sorted(unknown)}"
        )


def _gas_keyed(values: Dict[str, Any]) -> Dict[GasType, Any]:
    return {GasType.from_string(k): v for k, v in values.items()}


def _apply_standards(
    base: StandardsTable,
    overrides: Optional[Dict[str, Any]]
) -> StandardsTable:
    if not overrides:
        return base

    overrides = dict(overrides)
    gases = overrides.pop("gases", None)
    roughness = overrides.pop("pipe_roughness", None)
    _check_keys("standards", overrides, base)

    gas_standards = dict(base.gas_standards)
    for gas_type, values in _gas_keyed(gases or {}).items():
        existing = gas_standards.get(gas_type)
        if existing is None:
            gas_standards[gas_type] = GasStandard(gas_type=gas_type, **values)
        else:
            gas_standards[gas_type] = replace(existing, **values)

    pipe_roughness = dict(base.pipe_roughness)
    for material, value in (roughness or {}).items():
        pipe_roughness[PipeMaterial.from_string(material)] = float(value)

    if "standard_diameters" in overrides:
        overrides["standard_diameters"] = tuple(
            float(d) for d in overrides["standard_diameters"]
        )

    return replace(
        base,
        gas_standards=gas_standards,
        pipe_roughness=pipe_roughness,
        **overrides
    )


def _apply_flow_rates(
    base: FlowRateCatalog,
    overrides: Optional[Dict[str, Any]]
) -> FlowRateCatalog:
    if not overrides:
        return base

    overrides = dict(overrides)
    rate_overrides = overrides.pop("rates", None)
    _check_keys("flow_rates", overrides, base)

    rates = {gas: dict(table) for gas, table in base.rates.items()}
    for gas_type, table in _gas_keyed(rate_overrides or {}).items():
        rates.setdefault(gas_type, {}).update(table)

    return replace(base, rates=rates, **overrides)


def _apply_costs(
    base: CostTable,
    overrides: Optional[Dict[str, Any]]
) -> CostTable:
    if not overrides:
        return base

    overrides = dict(overrides)
    base_cost_overrides = overrides.pop("base_costs", None)
    multiplier_overrides = overrides.pop("redundancy_multipliers", None)
    _check_keys("costs", overrides, base)

    base_costs = dict(base.base_costs)
    for gas_type, tiers in _gas_keyed(base_cost_overrides or {}).items():
        base_costs[gas_type] = CostTiers(**tiers)

    multipliers = dict(base.redundancy_multipliers)
    for level, value in (multiplier_overrides or {}).items():
        multipliers[RedundancyLevel.from_string(level)] = float(value)

    return replace(
        base,
        base_costs=base_costs,
        redundancy_multipliers=multipliers,
        **overrides
    )


def _apply_policy(
    base: DesignPolicy,
    overrides: Optional[Dict[str, Any]]
) -> DesignPolicy:
    if not overrides:
        return base

    values = dict(overrides)
    _check_keys("policy", values, base)

    if "primary_supply_tiers" in values:
        tiers = dict(base.primary_supply_tiers)
        for gas_type, entries in _gas_keyed(values["primary_supply_tiers"]).items():
            tiers[gas_type] = tuple(
                (float(threshold), str(text)) for threshold, text in entries
            )
        values["primary_supply_tiers"] = tiers

    for key in ("primary_supply_base", "backup_supplies"):
        if key in values:
            merged = dict(getattr(base, key))
            merged.update(_gas_keyed(values[key]))
            values[key] = merged

    if "redundancy_overrides" in values:
        values["redundancy_overrides"] = {
            gas: RedundancyLevel.from_string(level)
            for gas, level in _gas_keyed(values["redundancy_overrides"]).items()
        }

    if "operating_pressure_overrides" in values:
        values["operating_pressure_overrides"] = {
            gas: float(pressure)
            for gas, pressure in _gas_keyed(values["operating_pressure_overrides"]).items()
        }

    if "default_redundancy" in values:
        values["default_redundancy"] = RedundancyLevel.from_string(
            values["default_redundancy"]
        )

    if "pipe_material" in values:
        values["pipe_material"] = PipeMaterial.from_string(values["pipe_material"])

    return replace(base, **values)
