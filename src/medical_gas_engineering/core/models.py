# File: src/medical_gas_engineering/core/models.py
"""
Data records for medical gas engineering calculations.

Input records describe rooms and their gas outlets as supplied by the
caller. Result records are produced by the calculation modules and are never
mutated once built; later pipeline stages derive new records with
dataclasses.replace().

Units:
    Flow: SCFM (CFM for vacuum)
    Pressure: PSI (vacuum nominal values are negative inches Hg)
    Length: feet, pipe diameter in inches
    Velocity: ft/s
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Tuple, Optional

from .gas_types import (
    GasType,
    PipeMaterial,
    RedundancyLevel,
    ComplianceStatus,
    Pressurization,
)


# =============================================================================
# Input records
# =============================================================================

@dataclass(frozen=True)
class OutletLocation:
    """
    Install location of a gas outlet.

    Attributes:
        room: Room label the outlet is installed in
        wall_location: Wall or headwall position (e.g., "north", "boom")
        height_from_floor: Mounting height in inches
    """
    room: str = ""
    wall_location: str = ""
    height_from_floor: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room": self.room,
            "wall_location": self.wall_location,
            "height_from_floor": self.height_from_floor,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutletLocation":
        return cls(
            room=data.get("room", ""),
            wall_location=data.get("wall_location", ""),
            height_from_floor=data.get("height_from_floor", 0.0),
        )


@dataclass(frozen=True)
class GasOutlet:
    """
    A group of identical gas outlets in a room.

    The demand of an outlet group is derived from the flow-rate catalog;
    flow_rate here is informational and never used to compute demand.

    Attributes:
        gas_type: Gas served by the outlets
        quantity: Number of outlets (non-negative)
        flow_rate: Optional design flow per outlet (SCFM, CFM for vacuum)
        pressure: Outlet pressure in PSI (negative for vacuum)
        simultaneous_factor: Fraction of outlets in concurrent use (0-1)
        backup_required: Whether the outlets need a backup supply
        location: Install location metadata
    """
    gas_type: GasType
    quantity: int
    flow_rate: Optional[float] = None
    pressure: float = 0.0
    simultaneous_factor: float = 1.0
    backup_required: bool = False
    location: OutletLocation = field(default_factory=OutletLocation)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the outlet group
        """
        return {
            "gas_type": self.gas_type.value,
            "quantity": self.quantity,
            "flow_rate": self.flow_rate,
            "pressure": self.pressure,
            "simultaneous_factor": self.simultaneous_factor,
            "backup_required": self.backup_required,
            "location": self.location.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GasOutlet":
        """
        Create GasOutlet from dictionary.

        Args:
            data: Dictionary with outlet data; "type" is accepted as an
                alias for "gas_type"

        Returns:
            GasOutlet instance

        Raises:
            InvalidInputError: If the gas type is unknown
        """
        gas_type = data.get("gas_type", data.get("type"))
        return cls(
            gas_type=GasType.from_string(gas_type),
            quantity=data["quantity"],
            flow_rate=data.get("flow_rate"),
            pressure=data.get("pressure", 0.0),
            simultaneous_factor=data.get("simultaneous_factor", 1.0),
            backup_required=data.get("backup_required", False),
            location=OutletLocation.from_dict(data.get("location", {})),
        )


@dataclass(frozen=True)
class RoomGasRequirements:
    """
    Gas requirements for a single physical room.

    Attributes:
        room_id: Unique identifier for the room
        room_name: Display name (e.g., "OR 1 - General Surgery")
        room_type: Room classification used for flow-rate lookup
            (e.g., "Operating Room", "ICU")
        area: Floor area in square feet
        ceiling_height: Ceiling height in feet
        outlets: Outlet groups in the room, in caller order
        pressurization: Room pressurization mode
        air_changes_per_hour: Ventilation rate
        filtration_level: Filtration description (e.g., "HEPA")
        special_requirements: Free-text requirements
    """
    room_id: str
    room_name: str
    room_type: str
    area: float
    ceiling_height: float = 0.0
    outlets: Tuple[GasOutlet, ...] = ()
    pressurization: Pressurization = Pressurization.NEUTRAL
    air_changes_per_hour: float = 0.0
    filtration_level: str = ""
    special_requirements: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, "outlets", tuple(self.outlets))
        object.__setattr__(
            self, "special_requirements", tuple(self.special_requirements)
        )

    def outlet_count(self, gas_type: Optional[GasType] = None) -> int:
        """
        Count outlets in the room.

        Args:
            gas_type: Only count outlets of this gas; all gases if None

        Returns:
            Total outlet quantity
        """
        return sum(
            outlet.quantity for outlet in self.outlets
            if gas_type is None or outlet.gas_type == gas_type
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the room
        """
        return {
            "room_id": self.room_id,
            "room_name": self.room_name,
            "room_type": self.room_type,
            "area": self.area,
            "ceiling_height": self.ceiling_height,
            "outlets": [outlet.to_dict() for outlet in self.outlets],
            "pressurization": self.pressurization.value,
            "air_changes_per_hour": self.air_changes_per_hour,
            "filtration_level": self.filtration_level,
            "special_requirements": list(self.special_requirements),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoomGasRequirements":
        """
        Create RoomGasRequirements from dictionary.

        Args:
            data: Dictionary with room data

        Returns:
            RoomGasRequirements instance
        """
        return cls(
            room_id=data["room_id"],
            room_name=data.get("room_name", data["room_id"]),
            room_type=data.get("room_type", ""),
            area=data.get("area", 0.0),
            ceiling_height=data.get("ceiling_height", 0.0),
            outlets=tuple(
                GasOutlet.from_dict(outlet) for outlet in data.get("outlets", [])
            ),
            pressurization=Pressurization.from_string(
                data.get("pressurization", "neutral")
            ),
            air_changes_per_hour=data.get("air_changes_per_hour", 0.0),
            filtration_level=data.get("filtration_level", ""),
            special_requirements=tuple(data.get("special_requirements", [])),
        )


# =============================================================================
# Demand records
# =============================================================================

@dataclass(frozen=True)
class RoomDemand:
    """
    Demand contributed by one room for one gas type.

    Attributes:
        room_id: Room the demand belongs to
        room_type: Room type used for the flow-rate lookup
        gas_type: Gas type
        outlet_count: Number of outlets of this gas in the room
        base_flow_rate: Per-outlet flow rate from the catalog
        demand: outlet_count x base_flow_rate
        used_default_rate: True if base_flow_rate is the catalog fallback
    """
    room_id: str
    room_type: str
    gas_type: GasType
    outlet_count: int
    base_flow_rate: float
    demand: float
    used_default_rate: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room_id": self.room_id,
            "room_type": self.room_type,
            "gas_type": self.gas_type.value,
            "outlet_count": self.outlet_count,
            "base_flow_rate": self.base_flow_rate,
            "demand": self.demand,
            "used_default_rate": self.used_default_rate,
        }


@dataclass(frozen=True)
class GasDemand:
    """
    Facility-wide demand for one gas type.

    Attributes:
        gas_type: Gas type
        total_demand: Sum of installed outlet demand
        peak_demand: total_demand x simultaneous-use factor
        simultaneous_factor: Factor applied to get peak demand
        outlet_count: Total outlets of this gas
        room_demands: Per-room contributions, in room input order
        unmodeled_room_types: Room types that fell back to the default rate
    """
    gas_type: GasType
    total_demand: float
    peak_demand: float
    simultaneous_factor: float
    outlet_count: int = 0
    room_demands: Tuple[RoomDemand, ...] = ()
    unmodeled_room_types: Tuple[str, ...] = ()

    @property
    def has_demand(self) -> bool:
        """True if any outlet of this gas draws flow."""
        return self.total_demand > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gas_type": self.gas_type.value,
            "total_demand": self.total_demand,
            "peak_demand": self.peak_demand,
            "simultaneous_factor": self.simultaneous_factor,
            "outlet_count": self.outlet_count,
            "room_demands": [rd.to_dict() for rd in self.room_demands],
            "unmodeled_room_types": list(self.unmodeled_room_types),
        }


# =============================================================================
# Distribution records
# =============================================================================

@dataclass(frozen=True)
class PipeCalculation:
    """
    Result of sizing a single pipe run.

    Attributes:
        diameter: Nominal diameter in inches (from the standard size list)
        length: Run length in feet
        material: Pipe material
        pressure_drop: Pressure drop over the run in PSI
        velocity: Flow velocity in ft/s
        flow_rate: Design flow in SCFM (CFM for vacuum)
        roughness: Absolute roughness in feet
        reynolds_number: Reynolds number at the selected diameter
        friction_factor: Darcy friction factor (Swamee-Jain)
        velocity_limit: Velocity ceiling the run was sized against (ft/s)
    """
    diameter: float
    length: float
    material: PipeMaterial
    pressure_drop: float
    velocity: float
    flow_rate: float
    roughness: float
    reynolds_number: float
    friction_factor: float
    velocity_limit: float

    @property
    def exceeds_velocity_limit(self) -> bool:
        """True when no standard size met the ceiling and the largest was used."""
        return self.velocity > self.velocity_limit

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the pipe run
        """
        return {
            "diameter": self.diameter,
            "length": self.length,
            "material": self.material.value,
            "pressure_drop": self.pressure_drop,
            "velocity": self.velocity,
            "flow_rate": self.flow_rate,
            "roughness": self.roughness,
            "reynolds_number": self.reynolds_number,
            "friction_factor": self.friction_factor,
            "velocity_limit": self.velocity_limit,
            "exceeds_velocity_limit": self.exceeds_velocity_limit,
        }


@dataclass(frozen=True)
class DistributionSummary:
    """
    Piping for one gas system.

    Attributes:
        main_lines: Main supply runs
        branch_lines: Branch runs serving individual rooms
        total_length: Sum of all run lengths (ft)
        total_pressure_drop: Sum of all run pressure drops (PSI)
    """
    main_lines: Tuple[PipeCalculation, ...] = ()
    branch_lines: Tuple[PipeCalculation, ...] = ()
    total_length: float = 0.0
    total_pressure_drop: float = 0.0

    @property
    def all_lines(self) -> List[PipeCalculation]:
        """Main lines followed by branch lines."""
        return list(self.main_lines) + list(self.branch_lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "main_lines": [line.to_dict() for line in self.main_lines],
            "branch_lines": [line.to_dict() for line in self.branch_lines],
            "total_length": self.total_length,
            "total_pressure_drop": self.total_pressure_drop,
        }


# =============================================================================
# System records
# =============================================================================

@dataclass(frozen=True)
class AlarmSetPoints:
    """Alarm pressures in PSI (absolute values for vacuum)."""
    high_pressure: float
    low_pressure: float
    switchover: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "high_pressure": self.high_pressure,
            "low_pressure": self.low_pressure,
            "switchover": self.switchover,
        }


@dataclass(frozen=True)
class SystemPressureRequirements:
    """
    Pressure and redundancy requirements for one gas system.

    Attributes:
        operating_pressure: Operating pressure magnitude
        alarm_set_points: High, low and switchover alarm set points
        backup_capacity: Backup capacity as a percentage of primary
        redundancy_level: Backup provisioning level
    """
    operating_pressure: float
    alarm_set_points: AlarmSetPoints
    backup_capacity: float
    redundancy_level: RedundancyLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operating_pressure": self.operating_pressure,
            "alarm_set_points": self.alarm_set_points.to_dict(),
            "backup_capacity": self.backup_capacity,
            "redundancy_level": self.redundancy_level.value,
        }


@dataclass(frozen=True)
class EquipmentBlock:
    """
    Supply equipment recommended for one gas system.

    Attributes:
        primary_supply: Primary source description
        backup_supply: Backup source description (empty if none)
        manifolds: Number of manifolds
        regulators: Number of line regulators
        alarms: Alarm features provided
    """
    primary_supply: str
    backup_supply: str
    manifolds: int
    regulators: int
    alarms: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary_supply": self.primary_supply,
            "backup_supply": self.backup_supply,
            "manifolds": self.manifolds,
            "regulators": self.regulators,
            "alarms": list(self.alarms),
        }


@dataclass(frozen=True)
class ComplianceCheck:
    """
    A single compliance rule evaluation.

    Attributes:
        standard: Standards citation (e.g., "NFPA 99-2021 Section 5.1.11")
        requirement: Requirement text
        status: Compliant, non-compliant or warning
        notes: Measured value supporting the status
        gas_type: Gas system the check was run against
    """
    standard: str
    requirement: str
    status: ComplianceStatus
    notes: str
    gas_type: Optional[GasType] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "standard": self.standard,
            "requirement": self.requirement,
            "status": self.status.value,
            "notes": self.notes,
            "gas_type": self.gas_type.value if self.gas_type else None,
        }


@dataclass(frozen=True)
class MedicalGasSystem:
    """
    Complete engineering description of one gas system in a facility.

    Attributes:
        gas_type: Gas type
        total_demand: Installed demand
        peak_demand: Diversified (simultaneous-use) demand
        system_pressure: Pressure and redundancy requirements
        distribution: Sized piping
        equipment: Supply equipment
        compliance: Compliance checks, in rule order
        estimated_cost: Estimated installed cost in whole currency units
    """
    gas_type: GasType
    total_demand: float
    peak_demand: float
    system_pressure: SystemPressureRequirements
    distribution: DistributionSummary
    equipment: EquipmentBlock
    compliance: Tuple[ComplianceCheck, ...] = ()
    estimated_cost: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the gas system
        """
        return {
            "gas_type": self.gas_type.value,
            "total_demand": self.total_demand,
            "peak_demand": self.peak_demand,
            "system_pressure": self.system_pressure.to_dict(),
            "distribution": self.distribution.to_dict(),
            "equipment": self.equipment.to_dict(),
            "compliance": [check.to_dict() for check in self.compliance],
            "estimated_cost": self.estimated_cost,
        }


@dataclass(frozen=True)
class SystemValidation:
    """Result of validating a gas system against NFPA 99 limits."""
    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


# =============================================================================
# Report records
# =============================================================================

@dataclass(frozen=True)
class ReportSummary:
    """
    Facility-level summary statistics.

    Attributes:
        total_rooms: Number of rooms in the input
        total_outlets: Number of outlets across all rooms and gases
        total_system_cost: Sum of estimated costs over gas systems
        gas_types_required: Gas types with non-zero demand
        compliance_score: Percentage of compliant checks, None if no checks
        recommendation_count: Number of recommendations
    """
    total_rooms: int
    total_outlets: int
    total_system_cost: int
    gas_types_required: Tuple[GasType, ...]
    compliance_score: Optional[float]
    recommendation_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_rooms": self.total_rooms,
            "total_outlets": self.total_outlets,
            "total_system_cost": self.total_system_cost,
            "gas_types_required": [g.value for g in self.gas_types_required],
            "compliance_score": self.compliance_score,
            "recommendation_count": self.recommendation_count,
        }


@dataclass(frozen=True)
class EngineeringReport:
    """
    Top-level output for one facility run.

    Attributes:
        summary: Summary statistics
        demands: Demand for every configured gas type (zeros included)
        systems: Synthesized systems for gas types with demand
        recommendations: Free-text design recommendations
        compliance: All compliance checks, flattened in gas order
        warnings: Fallbacks taken during the run (unmodeled room types,
            pipe runs over their velocity ceiling)
    """
    summary: ReportSummary
    demands: Dict[GasType, GasDemand]
    systems: Dict[GasType, MedicalGasSystem]
    recommendations: Tuple[str, ...] = ()
    compliance: Tuple[ComplianceCheck, ...] = ()
    warnings: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the report, keyed by gas value
        """
        return {
            "summary": self.summary.to_dict(),
            "demands": {
                gas.value: demand.to_dict() for gas, demand in self.demands.items()
            },
            "systems": {
                gas.value: system.to_dict() for gas, system in self.systems.items()
            },
            "recommendations": list(self.recommendations),
            "compliance": [check.to_dict() for check in self.compliance],
            "warnings": list(self.warnings),
        }
