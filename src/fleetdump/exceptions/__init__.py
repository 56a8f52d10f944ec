"""fleetdump exception types."""

from fleetdump.exceptions.errors import (
    FleetConfigError,
    FleetDumpError,
    UnsupportedFormatError,
    VehicleKindNotFoundError,
)

__all__ = [
    "FleetDumpError",
    "UnsupportedFormatError",
    "FleetConfigError",
    "VehicleKindNotFoundError",
]
