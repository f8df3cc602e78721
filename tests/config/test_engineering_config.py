# File: tests/config/test_engineering_config.py
"""Tests for configuration overrides and YAML loading."""

import pytest
from src.medical_gas_engineering.core import (
    GasType,
    PipeMaterial,
    RedundancyLevel,
    ConfigurationError,
)
from src.medical_gas_engineering.config import EngineeringConfig, load_config


class TestFromDict:
    """Test cases for EngineeringConfig.from_dict."""

    def test_empty_returns_defaults(self):
        assert EngineeringConfig.from_dict({}) == EngineeringConfig()
        assert EngineeringConfig.from_dict(None) == EngineeringConfig()

    def test_partial_gas_override(self):
        """Only the named field changes; the rest of the entry is kept."""
        config = EngineeringConfig.from_dict({
            "standards": {"gases": {"oxygen": {"operating_pressure": 55}}}
        })
        oxygen = config.standards.get(GasType.OXYGEN)
        assert oxygen.operating_pressure == 55
        assert oxygen.low_pressure_alarm == 45
        assert config.standards.get(GasType.AIR).operating_pressure == 50

    def test_new_gas_standard(self):
        config = EngineeringConfig.from_dict({
            "standards": {"gases": {"nitrogen": {
                "operating_pressure": 160,
                "low_pressure_alarm": 140,
                "high_pressure_alarm": 185,
                "max_velocity": 25,
                "simultaneous_factor": 0.5,
            }}}
        })
        assert GasType.NITROGEN in config.standards.gas_types

    def test_flow_rates_merged(self):
        config = EngineeringConfig.from_dict({
            "flow_rates": {"rates": {"oxygen": {"ICU": 9}, "co2": {"Operating Room": 3}}}
        })
        assert config.flow_rates.lookup(GasType.OXYGEN, "ICU").rate == 9
        assert config.flow_rates.lookup(GasType.OXYGEN, "Operating Room").rate == 15
        assert config.flow_rates.lookup(GasType.CO2, "Operating Room").rate == 3

    def test_cost_overrides(self):
        config = EngineeringConfig.from_dict({
            "costs": {
                "base_costs": {"nitrogen": {"low": 1, "medium": 2, "high": 3}},
                "redundancy_multipliers": {"triple": 2.0},
                "piping_cost_per_foot": 175,
            }
        })
        assert config.costs.base_cost(GasType.NITROGEN, 10) == 1
        assert config.costs.redundancy_multiplier(RedundancyLevel.TRIPLE) == 2.0
        assert config.costs.piping_cost_per_foot == 175

    def test_policy_enums_parsed(self):
        config = EngineeringConfig.from_dict({
            "policy": {
                "default_redundancy": "triple",
                "pipe_material": "stainless_steel",
                "redundancy_overrides": {"co2": "single"},
                "operating_pressure_overrides": {"oxygen": 52},
                "main_line_length_ft": 150,
            }
        })
        policy = config.policy
        assert policy.default_redundancy == RedundancyLevel.TRIPLE
        assert policy.pipe_material == PipeMaterial.STAINLESS_STEEL
        assert policy.redundancy_overrides == {GasType.CO2: RedundancyLevel.SINGLE}
        assert policy.operating_pressure_overrides == {GasType.OXYGEN: 52.0}
        assert policy.main_line_length_ft == 150

    def test_base_is_not_modified(self):
        base = EngineeringConfig()
        EngineeringConfig.from_dict(
            {"flow_rates": {"rates": {"oxygen": {"ICU": 9}}}}, base=base
        )
        assert base.flow_rates.lookup(GasType.OXYGEN, "ICU").rate == 8

    def test_unknown_section(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration sections"):
            EngineeringConfig.from_dict({"pricing": {}})

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown keys in 'policy'"):
            EngineeringConfig.from_dict({"policy": {"pipe_colour": "red"}})

    def test_unknown_gas_wrapped(self):
        with pytest.raises(ConfigurationError, match="Invalid configuration value"):
            EngineeringConfig.from_dict({"flow_rates": {"rates": {"helium": {"ICU": 1}}}})

    def test_invalid_value_wrapped(self):
        with pytest.raises(ConfigurationError):
            EngineeringConfig.from_dict({"policy": {"default_redundancy": "quadruple"}})


class TestLoadConfig:
    """Test cases for the YAML loader."""

    def test_none_returns_defaults(self):
        assert load_config() == EngineeringConfig()

    def test_loads_overrides(self, tmp_path):
        path = tmp_path / "standards.yaml"
        path.write_text(
            "standards:\n"
            "  pressure_tolerance: 4\n"
            "policy:\n"
            "  default_redundancy: single\n"
        )
        config = load_config(path)
        assert config.standards.pressure_tolerance == 4
        assert config.policy.default_redundancy == RedundancyLevel.SINGLE

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("policy: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_config(path)

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == EngineeringConfig()
