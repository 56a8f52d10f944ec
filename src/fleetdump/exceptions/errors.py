"""fleetdump exception types."""

from __future__ import annotations

from collections.abc import Iterable


class FleetDumpError(Exception):
    """Base exception for all fleetdump errors."""

    pass


class UnsupportedFormatError(FleetDumpError):
    """Raised when a serializer is requested for an unknown format.

    The factory never substitutes a default format. Falling back to JSON
    is left to the caller (see the ``demo`` CLI command).
    """

    def __init__(
        self, format_id: str, available: Iterable[str] | None = None
    ) -> None:
        self.format_id = format_id
        self.available = sorted(available) if available is not None else []
        message = f"Unsupported format: '{format_id}'"
        if self.available:
            message += f". Available: {self.available}"
        super().__init__(message)


class FleetConfigError(FleetDumpError):
    """Raised when a fleet configuration is invalid.

    This includes YAML parsing errors, unknown sections, and vehicle
    attributes that fail model validation.
    """

    pass


class VehicleKindNotFoundError(FleetDumpError):
    """Raised when a vehicle kind is not found in the registry.

    This occurs when configuration references a kind that has not been
    registered via @vehicle_kind.
    """

    def __init__(self, kind: str, message: str | None = None) -> None:
        self.kind = kind
        if message is None:
            message = f"Vehicle kind '{kind}' not found in registry"
        super().__init__(message)
