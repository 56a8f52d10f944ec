"""fleetdump vehicle kind registry.

This module maps kind identifiers used in fleet files ('car',
'airplane', 'ship') to Vehicle subclasses. The registry is a singleton
populated when fleetdump.vehicles.types is imported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from fleetdump.exceptions import VehicleKindNotFoundError

if TYPE_CHECKING:
    from fleetdump.vehicles.base import Vehicle


class VehicleRegistry:
    """Registry for vehicle kinds.

    Example:
        >>> registry = VehicleRegistry()
        >>> registry.get_kind("car")
        <class 'fleetdump.vehicles.types.Car'>
    """

    _instance: ClassVar[VehicleRegistry | None] = None
    _kinds: dict[str, type[Vehicle]]

    def __new__(cls) -> VehicleRegistry:
        """Create or return the singleton instance."""
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._kinds = {}
            cls._instance = instance
        return cls._instance

    def register_kind(self, kind: str, vehicle_class: type[Vehicle]) -> None:
        """Register a vehicle class under a kind identifier.

        Args:
            kind: The kind identifier (e.g., 'car').
            vehicle_class: The Vehicle subclass to register.

        Raises:
            ValueError: If the kind is already registered.
        """
        if kind in self._kinds:
            existing = self._kinds[kind]
            raise ValueError(
                f"Vehicle kind '{kind}' is already registered as {existing.__name__}"
            )
        self._kinds[kind] = vehicle_class

    def get_kind(self, kind: str) -> type[Vehicle]:
        """Get the vehicle class registered for a kind.

        Args:
            kind: The kind identifier to look up.

        Returns:
            The Vehicle subclass.

        Raises:
            VehicleKindNotFoundError: If no class is registered for this kind.
        """
        if kind not in self._kinds:
            raise VehicleKindNotFoundError(kind)
        return self._kinds[kind]

    def unregister_kind(self, kind: str) -> None:
        """Remove a kind from the registry. Primarily for testing."""
        self._kinds.pop(kind, None)

    @property
    def kinds(self) -> dict[str, type[Vehicle]]:
        """Return a copy of the registered kinds mapping."""
        return self._kinds.copy()


_vehicle_registry = VehicleRegistry()


def get_vehicle_registry() -> VehicleRegistry:
    """Get the global VehicleRegistry instance."""
    return _vehicle_registry
