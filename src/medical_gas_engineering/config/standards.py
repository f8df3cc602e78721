# File: src/medical_gas_engineering/config/standards.py
"""
NFPA 99 per-gas standards and pipe constants.

Defines the operating pressures, alarm thresholds, velocity ceilings and
simultaneous-use factors for each gas type, plus pipe roughness values and
the standard diameter list used by pipe sizing. The DEFAULT_* tables follow
NFPA 99-2021; StandardsTable lets callers substitute revised values without
touching calculation code.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..core.errors import ConfigurationError, InvalidInputError
from ..core.gas_types import GasType, PipeMaterial

# Physical constants for air at standard conditions
AIR_DENSITY = 0.075                 # lb/ft³
GRAVITATIONAL_CONSTANT = 32.174     # lbm·ft/(lbf·s²)
AIR_KINEMATIC_VISCOSITY = 1.57e-4   # ft²/s
SQ_IN_PER_SQ_FT = 144.0


@dataclass(frozen=True)
class GasStandard:
    """
    Standards values for one gas type.

    Attributes:
        gas_type: Gas type
        operating_pressure: Nominal operating pressure (PSI; inches Hg,
            negative, for vacuum)
        low_pressure_alarm: Low pressure alarm set point
        high_pressure_alarm: High pressure alarm set point
        max_velocity: Velocity ceiling in velocity_unit
        simultaneous_factor: Fraction of outlets in concurrent use
        velocity_unit: "ft/s" or "ft/min"
    """
    gas_type: GasType
    operating_pressure: float
    low_pressure_alarm: float
    high_pressure_alarm: float
    max_velocity: float
    simultaneous_factor: float
    velocity_unit: str = "ft/s"

    def __post_init__(self):
        if not 0 <= self.simultaneous_factor <= 1:
            raise ConfigurationError(
                f"Simultaneous-use factor for {self.gas_type} must be in [0, 1], "
                f"got {self.simultaneous_factor}"
            )
        if self.max_velocity <= 0:
            raise ConfigurationError(
                f"Velocity ceiling for {self.gas_type} must be positive"
            )
        if self.velocity_unit not in ("ft/s", "ft/min"):
            raise ConfigurationError(
                f"Unsupported velocity unit: {self.velocity_unit}"
            )

    @property
    def max_velocity_fps(self) -> float:
        """Velocity ceiling converted to ft/s."""
        if self.velocity_unit == "ft/min":
            return self.max_velocity / 60
        return self.max_velocity


DEFAULT_GAS_STANDARDS: Dict[GasType, GasStandard] = {
    GasType.OXYGEN: GasStandard(
        gas_type=GasType.OXYGEN,
        operating_pressure=50,
        low_pressure_alarm=45,
        high_pressure_alarm=55,
        max_velocity=25,
        simultaneous_factor=0.75,
    ),
    GasType.AIR: GasStandard(
        gas_type=GasType.AIR,
        operating_pressure=50,
        low_pressure_alarm=45,
        high_pressure_alarm=55,
        max_velocity=25,
        simultaneous_factor=0.75,
    ),
    GasType.VACUUM: GasStandard(
        gas_type=GasType.VACUUM,
        operating_pressure=-15,
        low_pressure_alarm=-12,
        high_pressure_alarm=-18,
        max_velocity=5000,
        simultaneous_factor=0.50,
        velocity_unit="ft/min",
    ),
    GasType.CO2: GasStandard(
        gas_type=GasType.CO2,
        operating_pressure=50,
        low_pressure_alarm=45,
        high_pressure_alarm=55,
        max_velocity=25,
        simultaneous_factor=0.25,
    ),
    GasType.N2O: GasStandard(
        gas_type=GasType.N2O,
        operating_pressure=50,
        low_pressure_alarm=45,
        high_pressure_alarm=55,
        max_velocity=25,
        simultaneous_factor=0.25,
    ),
}

# Absolute roughness in feet
DEFAULT_PIPE_ROUGHNESS: Dict[PipeMaterial, float] = {
    PipeMaterial.COPPER: 0.000005,
    PipeMaterial.STAINLESS_STEEL: 0.000015,
    PipeMaterial.CHROME_MOLY: 0.000045,
}

# Standard nominal diameters in inches, ascending
STANDARD_PIPE_DIAMETERS: Tuple[float, ...] = (
    0.5, 0.75, 1, 1.25, 1.5, 2, 2.5, 3, 4, 6, 8
)

PRESSURE_TOLERANCE_PSI = 5.0
MAX_TOTAL_PRESSURE_DROP_PSI = 5.0
SWITCHOVER_OFFSET_PSI = 3.0
BACKUP_CAPACITY_PERCENT = 100.0
MIN_ALARM_FEATURES = 3


@dataclass(frozen=True)
class StandardsTable:
    """
    Read-only standards configuration.

    Attributes:
        gas_standards: Per-gas standards values
        pipe_roughness: Absolute roughness per material (ft)
        standard_diameters: Candidate diameters in ascending order (in)
        pressure_tolerance: Allowed deviation from nominal pressure (PSI)
        max_total_pressure_drop: Distribution pressure-drop ceiling (PSI)
        switchover_offset: Switchover set point below low alarm (PSI)
        backup_capacity: Backup capacity as a percentage of primary
        min_alarm_features: Alarm features needed for a compliant panel
    """
    gas_standards: Dict[GasType, GasStandard] = field(
        default_factory=lambda: dict(DEFAULT_GAS_STANDARDS)
    )
    pipe_roughness: Dict[PipeMaterial, float] = field(
        default_factory=lambda: dict(DEFAULT_PIPE_ROUGHNESS)
    )
    standard_diameters: Tuple[float, ...] = STANDARD_PIPE_DIAMETERS
    pressure_tolerance: float = PRESSURE_TOLERANCE_PSI
    max_total_pressure_drop: float = MAX_TOTAL_PRESSURE_DROP_PSI
    switchover_offset: float = SWITCHOVER_OFFSET_PSI
    backup_capacity: float = BACKUP_CAPACITY_PERCENT
    min_alarm_features: int = MIN_ALARM_FEATURES

    def __post_init__(self):
        diameters = tuple(self.standard_diameters)
        if not diameters:
            raise ConfigurationError("Standard diameter list is empty")
        if list(diameters) != sorted(diameters):
            raise ConfigurationError(
                f"Standard diameters must be ascending: {list(diameters)}"
            )
        object.__setattr__(self, "standard_diameters", diameters)

    @property
    def gas_types(self) -> Tuple[GasType, ...]:
        """Configured gas types in enum order."""
        return tuple(g for g in GasType if g in self.gas_standards)

    def get(self, gas_type: GasType) -> GasStandard:
        """
        Get the standards entry for a gas type.

        Args:
            gas_type: Gas type to look up

        Returns:
            GasStandard for the gas type

        Raises:
            InvalidInputError: If no standards are configured for the gas
        """
        standard = self.gas_standards.get(gas_type)
        if standard is None:
            raise InvalidInputError(
                f"No standards configured for gas type '{gas_type}'",
                field="gas_type",
            )
        return standard

    def roughness(self, material: PipeMaterial) -> float:
        """
        Get absolute roughness for a pipe material.

        Raises:
            InvalidInputError: If the material has no roughness value
        """
        value = self.pipe_roughness.get(material)
        if value is None:
            raise InvalidInputError(
                f"No roughness configured for pipe material '{material}'",
                field="material",
            )
        return value

    def max_velocity_fps(self, gas_type: GasType) -> float:
        """Velocity ceiling for a gas type in ft/s."""
        return self.get(gas_type).max_velocity_fps

    def simultaneous_factor(self, gas_type: GasType) -> float:
        """Simultaneous-use factor for a gas type."""
        return self.get(gas_type).simultaneous_factor
