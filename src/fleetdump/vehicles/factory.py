"""fleetdump vehicle factory for creating vehicles from raw attributes.

This module provides the VehicleFactory class that looks up a kind in
the registry and validates an attribute mapping against its model.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from fleetdump.exceptions import FleetConfigError
from fleetdump.vehicles.base import Vehicle
from fleetdump.vehicles.registry import VehicleRegistry, get_vehicle_registry


class VehicleFactory:
    """Factory for creating vehicle instances from attribute mappings.

    Example:
        >>> factory = VehicleFactory()
        >>> car = factory.create_vehicle(
        ...     "car",
        ...     {"name": "BMW G30", "manufacturer": "BMW", "weight": 1600,
        ...      "power": 252, "year": 2020, "doors": 4, "passenger_seats": 5,
        ...      "fuel_type": "petrol", "engine_volume": 2.0},
        ... )
    """

    def __init__(self, registry: VehicleRegistry | None = None) -> None:
        """Initialize the factory.

        Args:
            registry: Optional VehicleRegistry to use. If not provided,
                      the global registry is used.
        """
        self._registry = registry or get_vehicle_registry()

    def create_vehicle(
        self, kind: str, attributes: dict[str, Any] | None = None
    ) -> Vehicle:
        """Create a vehicle of the given kind.

        Args:
            kind: The registered kind identifier (e.g., 'car').
            attributes: Field values for the vehicle model.

        Returns:
            A validated, immutable vehicle instance.

        Raises:
            VehicleKindNotFoundError: If kind is not in the registry.
            FleetConfigError: If the attributes fail validation.
        """
        vehicle_class = self._registry.get_kind(kind)

        try:
            return vehicle_class.model_validate(attributes or {})
        except ValidationError as e:
            raise FleetConfigError(
                f"Invalid attributes for vehicle kind '{kind}': {e}"
            ) from e
