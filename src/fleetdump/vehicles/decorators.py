"""fleetdump decorator for vehicle kind registration."""

from __future__ import annotations

from typing import Callable, TypeVar

from fleetdump.vehicles.base import Vehicle
from fleetdump.vehicles.registry import get_vehicle_registry

T = TypeVar("T", bound=type)


def vehicle_kind(kind: str) -> Callable[[T], T]:
    """Decorator for registering a Vehicle subclass under a kind name.

    Args:
        kind: Unique kind identifier used in fleet files.

    Returns:
        A decorator that registers the class and returns it unchanged.

    Raises:
        TypeError: If the decorated class is not a subclass of Vehicle.
        ValueError: If the kind is already registered.

    Example:
        >>> @vehicle_kind("truck")
        ... class Truck(Vehicle):
        ...     type_label = "Truck"
        ...     specific_block = "truck_specific"
        ...     axles: int
        ...
        ...     def serialize_specific(self, serializer):
        ...         serializer.add_field("axles", self.axles)
    """

    def decorator(cls: T) -> T:
        if not issubclass(cls, Vehicle):
            raise TypeError(
                f"Class '{cls.__name__}' must be a subclass of 'Vehicle' "
                f"to be registered as vehicle kind '{kind}'"
            )
        get_vehicle_registry().register_kind(kind, cls)
        return cls

    return decorator
