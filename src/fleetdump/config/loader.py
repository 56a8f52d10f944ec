"""fleetdump configuration loader for YAML fleet files.

This module provides the ConfigLoader class that:
1. Reads and parses YAML fleet files
2. Transforms raw YAML into a validated FleetConfig
3. Validates vehicle kinds against the registry
4. Builds vehicle instances through the VehicleFactory
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fleetdump.exceptions import FleetConfigError
from fleetdump.vehicles import Vehicle, VehicleFactory, VehicleRegistry
from fleetdump.vehicles.registry import get_vehicle_registry

from .models import FleetConfig, GlobalConfig, VehicleEntryConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loader for YAML fleet configurations.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load("fleet.yaml")
        >>> errors = loader.validate(config)
        >>> if not errors:
        ...     vehicles = loader.build_vehicles(config)
    """

    KNOWN_SECTIONS = frozenset({
        "global",
        "vehicles",
    })

    def __init__(self, registry: VehicleRegistry | None = None) -> None:
        """Initialize the loader.

        Args:
            registry: Optional VehicleRegistry for validation.
                      Uses global registry if not provided.
        """
        self._registry = registry or get_vehicle_registry()
        self._factory = VehicleFactory(self._registry)

    def load(self, yaml_path: str | Path) -> FleetConfig:
        """Load and parse a YAML fleet file.

        Args:
            yaml_path: Path to the YAML file.

        Returns:
            Validated FleetConfig instance.

        Raises:
            FleetConfigError: If file cannot be read, parsed, or validated.
        """
        path = Path(yaml_path)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise FleetConfigError(f"Configuration file not found: {path}") from e
        except yaml.YAMLError as e:
            raise FleetConfigError(f"Invalid YAML in {path}: {e}") from e

        return self._parse_raw_config(raw_config, str(path))

    def load_from_string(self, yaml_content: str) -> FleetConfig:
        """Load configuration from a YAML string.

        Args:
            yaml_content: YAML configuration as a string.

        Returns:
            Validated FleetConfig instance.

        Raises:
            FleetConfigError: If content cannot be parsed or validated.
        """
        try:
            raw_config = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise FleetConfigError(f"Invalid YAML: {e}") from e

        return self._parse_raw_config(raw_config, "<string>")

    def _parse_raw_config(self, raw_config: Any, source: str) -> FleetConfig:
        """Parse a raw YAML document into FleetConfig.

        An empty document yields the default configuration.
        """
        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise FleetConfigError(
                f"Configuration must be a YAML mapping, got {type(raw_config).__name__}"
            )

        unknown = sorted(set(raw_config) - self.KNOWN_SECTIONS)
        if unknown:
            raise FleetConfigError(
                f"Unknown section(s) in {source}: {unknown}. "
                f"Allowed: {sorted(self.KNOWN_SECTIONS)}"
            )

        try:
            global_section = raw_config.get("global") or {}
            if not isinstance(global_section, dict):
                raise FleetConfigError("'global' section must be a mapping")
            global_config = GlobalConfig.model_validate(global_section)

            vehicles_section = raw_config.get("vehicles") or []
            if not isinstance(vehicles_section, list):
                raise FleetConfigError("'vehicles' section must be a list")
            vehicles = [VehicleEntryConfig.model_validate(v) for v in vehicles_section]

        except ValidationError as e:
            raise FleetConfigError(
                f"Configuration validation failed for {source}: {e}"
            ) from e

        logger.debug(
            "Parsed fleet '%s' from %s with %d vehicle(s)",
            global_config.name,
            source,
            len(vehicles),
        )
        return FleetConfig(global_config=global_config, vehicles=vehicles)

    def validate(self, config: FleetConfig) -> list[str]:
        """Validate configuration against the registry.

        Checks that every vehicle kind is registered and that vehicle
        names are unique.

        Args:
            config: The FleetConfig to validate.

        Returns:
            List of validation error messages. Empty list means valid.
        """
        errors: list[str] = []
        registered = set(self._registry.kinds)
        seen_names: set[str] = set()

        for i, entry in enumerate(config.vehicles):
            if entry.kind not in registered:
                errors.append(
                    f"Vehicle {i}: unknown kind '{entry.kind}'. "
                    f"Registered kinds: {sorted(registered)}"
                )

            name = entry.attributes.get("name")
            if not isinstance(name, str):
                continue
            if name in seen_names:
                errors.append(f"Vehicle {i}: duplicate vehicle name '{name}'")
            seen_names.add(name)

        return errors

    def build_vehicles(self, config: FleetConfig) -> list[Vehicle]:
        """Validate the configuration and create its vehicles.

        Args:
            config: The FleetConfig to build from.

        Returns:
            Vehicles in configuration order.

        Raises:
            FleetConfigError: If validation fails or any vehicle's
                attributes are invalid.
        """
        errors = self.validate(config)
        if errors:
            raise FleetConfigError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )

        return [
            self._factory.create_vehicle(entry.kind, entry.attributes)
            for entry in config.vehicles
        ]
