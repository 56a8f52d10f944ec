"""fleetdump vehicle models.

This module provides the serializable domain objects:
- Base class: Vehicle
- Built-in kinds: Car, Airplane, Ship
- Registry: VehicleRegistry
- Factory: VehicleFactory
- Decorator: @vehicle_kind
"""

from fleetdump.vehicles.base import Vehicle
from fleetdump.vehicles.decorators import vehicle_kind
from fleetdump.vehicles.factory import VehicleFactory
from fleetdump.vehicles.registry import VehicleRegistry, get_vehicle_registry
from fleetdump.vehicles.types import Airplane, Car, Ship
from fleetdump.vehicles.samples import demo_fleet

__all__ = [
    # Base class
    "Vehicle",
    # Built-in kinds
    "Car",
    "Airplane",
    "Ship",
    # Registry
    "VehicleRegistry",
    "get_vehicle_registry",
    # Factory
    "VehicleFactory",
    # Decorator
    "vehicle_kind",
    # Samples
    "demo_fleet",
]
