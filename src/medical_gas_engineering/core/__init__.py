# File: src/medical_gas_engineering/core/__init__.py
"""
Core types for the medical gas engineering engine.

This module provides the enums, data records and exceptions shared by the
configuration and calculation packages.
"""

from .errors import (
    MedicalGasEngineeringError,
    InvalidInputError,
    ConfigurationError,
)

from .gas_types import (
    GasType,
    PipeMaterial,
    RedundancyLevel,
    ComplianceStatus,
    Pressurization,
)

from .models import (
    # Input records
    OutletLocation,
    GasOutlet,
    RoomGasRequirements,
    # Demand records
    RoomDemand,
    GasDemand,
    # Distribution records
    PipeCalculation,
    DistributionSummary,
    # System records
    AlarmSetPoints,
    SystemPressureRequirements,
    EquipmentBlock,
    ComplianceCheck,
    MedicalGasSystem,
    SystemValidation,
    # Report records
    ReportSummary,
    EngineeringReport,
)

__all__ = [
    # Errors
    "MedicalGasEngineeringError",
    "InvalidInputError",
    "ConfigurationError",
    # Enums
    "GasType",
    "PipeMaterial",
    "RedundancyLevel",
    "ComplianceStatus",
    "Pressurization",
    # Records
    "OutletLocation",
    "GasOutlet",
    "RoomGasRequirements",
    "RoomDemand",
    "GasDemand",
    "PipeCalculation",
    "DistributionSummary",
    "AlarmSetPoints",
    "SystemPressureRequirements",
    "EquipmentBlock",
    "ComplianceCheck",
    "MedicalGasSystem",
    "SystemValidation",
    "ReportSummary",
    "EngineeringReport",
]
