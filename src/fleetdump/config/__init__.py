"""fleetdump configuration system for YAML fleet files.

Example:
    >>> from fleetdump.config import ConfigLoader
    >>>
    >>> loader = ConfigLoader()
    >>> config = loader.load("fleet.yaml")
    >>> vehicles = loader.build_vehicles(config)
"""

from .loader import ConfigLoader
from .models import FleetConfig, GlobalConfig, VehicleEntryConfig

__all__ = [
    # Loader
    "ConfigLoader",
    # Models
    "FleetConfig",
    "GlobalConfig",
    "VehicleEntryConfig",
]
