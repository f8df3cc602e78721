# File: src/medical_gas_engineering/core/gas_types.py
"""
Enumerations for medical gas systems.

This module defines the closed sets of values used across the engine:
- GasType: Medical gases served by a piped distribution system
- PipeMaterial: Pipe materials with a known absolute roughness
- RedundancyLevel: Degree of backup provisioning for a gas system
- ComplianceStatus: Outcome of a single compliance rule
- Pressurization: Room pressurization mode
"""

from enum import Enum

from .errors import InvalidInputError


class _ValueEnum(Enum):
    """Enum with string display and case-insensitive lookup by value."""

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value

    @classmethod
    def from_string(cls, value):
        """
        Create a member from its string value.

        Args:
            value: String value (case-insensitive) or an existing member

        Returns:
            Corresponding enum member

        Raises:
            InvalidInputError: If value doesn't match any member
        """
        if isinstance(value, cls):
            return value
        value_lower = str(value).strip().lower()
        for member in cls:
            if member.value == value_lower:
                return member
        raise InvalidInputError(
            f"Unknown {cls._label()}: {value}. "
            f"Valid values: {[m.value for m in cls]}",
            field=cls._label().replace(" ", "_"),
        )

    @classmethod
    def _label(cls) -> str:
        return cls.__name__


class GasType(_ValueEnum):
    """
    Medical gas types.

    Attributes:
        OXYGEN: Medical oxygen (SCFM)
        AIR: Medical air (SCFM)
        VACUUM: Medical-surgical vacuum (CFM, negative pressure)
        CO2: Carbon dioxide (SCFM)
        N2O: Nitrous oxide (SCFM)
        NITROGEN: Instrument nitrogen (no default standards)
        ARGON: Argon (no default standards)
    """
    OXYGEN = "oxygen"
    AIR = "air"
    VACUUM = "vacuum"
    CO2 = "co2"
    N2O = "n2o"
    NITROGEN = "nitrogen"
    ARGON = "argon"

    @classmethod
    def _label(cls) -> str:
        return "gas type"

    @property
    def flow_unit(self) -> str:
        """Flow unit used for this gas (CFM for vacuum, SCFM otherwise)."""
        return "CFM" if self is GasType.VACUUM else "SCFM"


class PipeMaterial(_ValueEnum):
    """Pipe materials used for medical gas distribution."""
    COPPER = "copper"
    STAINLESS_STEEL = "stainless_steel"
    CHROME_MOLY = "chrome_moly"

    @classmethod
    def _label(cls) -> str:
        return "pipe material"


class RedundancyLevel(_ValueEnum):
    """Backup provisioning levels, ordered from least to most redundant."""
    SINGLE = "single"
    DUAL = "dual"
    TRIPLE = "triple"

    @classmethod
    def _label(cls) -> str:
        return "redundancy level"


class ComplianceStatus(_ValueEnum):
    """Outcome of a compliance rule."""
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    WARNING = "warning"

    @classmethod
    def _label(cls) -> str:
        return "compliance status"


class Pressurization(_ValueEnum):
    """Room pressurization relative to adjacent spaces."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @classmethod
    def _label(cls) -> str:
        return "pressurization"
