# File: src/medical_gas_engineering/__init__.py
"""
Medical gas distribution sizing and NFPA 99 compliance engine.

Given the rooms of a healthcare facility and their gas outlets, the engine
computes per-gas demand, sizes distribution piping, synthesizes supply
systems, checks NFPA 99 compliance, estimates cost and produces a
facility-wide engineering report.

Subpackages:
    core: Enums, immutable data records and exceptions
    config: Standards, flow-rate, cost and design-policy tables
    calculations: The calculation pipeline
    schemas: Pydantic models for raw input payloads
    utils: Logging configuration

Example:
    >>> from src.medical_gas_engineering import (
    ...     parse_rooms, generate_engineering_report
    ... )
    >>> rooms = parse_rooms([{"name": "OR 1", "type": "Operating Room",
    ...                       "area": 600, "oxygenOutlets": 6}])
    >>> report = generate_engineering_report(rooms)
    >>> report.summary.compliance_score
    100.0
"""

from .core import (
    MedicalGasEngineeringError,
    InvalidInputError,
    ConfigurationError,
    GasType,
    PipeMaterial,
    RedundancyLevel,
    ComplianceStatus,
    Pressurization,
    OutletLocation,
    GasOutlet,
    RoomGasRequirements,
    GasDemand,
    PipeCalculation,
    MedicalGasSystem,
    ComplianceCheck,
    EngineeringReport,
)
from .config import EngineeringConfig, load_config
from .calculations import (
    aggregate_demand,
    size_pipe,
    size_distribution,
    synthesize_system,
    evaluate_compliance,
    validate_system,
    estimate_system_cost,
    generate_engineering_report,
)
from .schemas import parse_rooms

__version__ = "0.1.0"

__all__ = [
    "MedicalGasEngineeringError",
    "InvalidInputError",
    "ConfigurationError",
    "GasType",
    "PipeMaterial",
    "RedundancyLevel",
    "ComplianceStatus",
    "Pressurization",
    "OutletLocation",
    "GasOutlet",
    "RoomGasRequirements",
    "GasDemand",
    "PipeCalculation",
    "MedicalGasSystem",
    "ComplianceCheck",
    "EngineeringReport",
    "EngineeringConfig",
    "load_config",
    "aggregate_demand",
    "size_pipe",
    "size_distribution",
    "synthesize_system",
    "evaluate_compliance",
    "validate_system",
    "estimate_system_cost",
    "generate_engineering_report",
    "parse_rooms",
]
