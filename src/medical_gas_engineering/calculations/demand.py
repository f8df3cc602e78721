# File: src/medical_gas_engineering/calculations/demand.py
"""
Facility demand aggregation.

Turns room-by-room outlet counts into total and peak demand per gas type:

    room demand  = outlet quantity x base flow rate (gas type, room type)
    total demand = sum of room demands
    peak demand  = total demand x simultaneous-use factor

Room types missing from the flow-rate catalog use the catalog's default
rate (5 SCFM per outlet). Sums use math.fsum, so results do not depend on
room order.
"""

import logging
import math
from collections import OrderedDict
from typing import Dict, List, Iterable, Optional

from ..core.errors import InvalidInputError
from ..core.gas_types import GasType
from ..core.models import RoomGasRequirements, RoomDemand, GasDemand
from ..config.flow_rates import FlowRateCatalog
from ..config.standards import StandardsTable

logger = logging.getLogger(__name__)


def validate_room(
    room: RoomGasRequirements,
    standards: Optional[StandardsTable] = None
) -> None:
    """
    Validate a room before its demand is calculated.

    Args:
        room: Room to validate
        standards: Standards table; outlets must use a gas type it covers

    Raises:
        InvalidInputError: On negative area or ceiling height, a negative
            or non-integer outlet quantity, or an unconfigured gas type
    """
    standards = standards or StandardsTable()

    if room.area < 0:
        raise InvalidInputError(
            f"Area must be non-negative, got {room.area}",
            field="area",
            room_id=room.room_id,
        )

    if room.ceiling_height < 0:
        raise InvalidInputError(
            f"Ceiling height must be non-negative, got {room.ceiling_height}",
            field="ceiling_height",
            room_id=room.room_id,
        )

    for outlet in room.outlets:
        if not isinstance(outlet.gas_type, GasType):
            raise InvalidInputError(
                f"Unknown gas type: {outlet.gas_type}",
                field="gas_type",
                room_id=room.room_id,
            )

        if isinstance(outlet.quantity, bool) or not isinstance(outlet.quantity, int):
            raise InvalidInputError(
                f"Outlet quantity must be an integer, got {outlet.quantity!r}",
                field="quantity",
                room_id=room.room_id,
            )

        if outlet.quantity < 0:
            raise InvalidInputError(
                f"Outlet quantity for {outlet.gas_type} must be non-negative, "
                f"got {outlet.quantity}",
                field="quantity",
                room_id=room.room_id,
            )

        if outlet.gas_type not in standards.gas_standards:
            raise InvalidInputError(
                f"No standards configured for gas type '{outlet.gas_type}'",
                field="gas_type",
                room_id=room.room_id,
            )


def room_gas_demand(
    room: RoomGasRequirements,
    gas_type: GasType,
    catalog: Optional[FlowRateCatalog] = None
) -> RoomDemand:
    """
    Calculate the demand one room places on one gas system.

    All outlet groups of the gas in the room are summed.

    Args:
        room: Validated room
        gas_type: Gas type
        catalog: Flow-rate catalog

    Returns:
        RoomDemand for the room and gas
    """
    catalog = catalog or FlowRateCatalog()
    lookup = catalog.lookup(gas_type, room.room_type)
    outlet_count = room.outlet_count(gas_type)

    return RoomDemand(
        room_id=room.room_id,
        room_type=room.room_type,
        gas_type=gas_type,
        outlet_count=outlet_count,
        base_flow_rate=lookup.rate,
        demand=outlet_count * lookup.rate,
        used_default_rate=lookup.is_default,
    )


def aggregate_demand(
    rooms: Iterable[RoomGasRequirements],
    catalog: Optional[FlowRateCatalog] = None,
    standards: Optional[StandardsTable] = None
) -> Dict[GasType, GasDemand]:
    """
    Aggregate total and peak demand per gas type across a facility.

    Args:
        rooms: Rooms in the facility
        catalog: Flow-rate catalog
        standards: Standards table (provides simultaneous-use factors)

    Returns:
        Ordered mapping of every configured gas type to its GasDemand;
        gas types with no outlets have zero demand

    Raises:
        InvalidInputError: If any room fails validation
    """
    catalog = catalog or FlowRateCatalog()
    standards = standards or StandardsTable()
    rooms = list(rooms)

    for room in rooms:
        validate_room(room, standards)

    demands: Dict[GasType, GasDemand] = OrderedDict()

    for gas_type in standards.gas_types:
        room_demands: List[RoomDemand] = []
        unmodeled = set()

        for room in rooms:
            if room.outlet_count(gas_type) == 0:
                continue

            room_demand = room_gas_demand(room, gas_type, catalog)
            room_demands.append(room_demand)

            if catalog.lookup(gas_type, room.room_type).is_unmodeled:
                unmodeled.add(room.room_type)
                logger.warning(
                    f"Room '{room.room_id}': room type '{room.room_type}' not in "
                    f"{gas_type} flow-rate catalog, using default "
                    f"{catalog.default_rate} {gas_type.flow_unit} per outlet"
                )

        total_demand = math.fsum(rd.demand for rd in room_demands)
        factor = standards.simultaneous_factor(gas_type)

        demands[gas_type] = GasDemand(
            gas_type=gas_type,
            total_demand=total_demand,
            peak_demand=total_demand * factor,
            simultaneous_factor=factor,
            outlet_count=sum(rd.outlet_count for rd in room_demands),
            room_demands=tuple(room_demands),
            unmodeled_room_types=tuple(sorted(unmodeled)),
        )

        logger.debug(
            f"{gas_type}: total {total_demand:.2f}, peak {total_demand * factor:.2f} "
            f"{gas_type.flow_unit} from {len(room_demands)} rooms"
        )

    return demands
