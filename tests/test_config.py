"""Tests for the fleetdump configuration system.

This module tests:
- Pydantic configuration models
- ConfigLoader YAML parsing
- Validation against the vehicle registry
- Building vehicles from configuration
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fleetdump import Car, Ship
from fleetdump.config import (
    ConfigLoader,
    FleetConfig,
    GlobalConfig,
    VehicleEntryConfig,
)
from fleetdump.exceptions import FleetConfigError
from fleetdump.serialization import OutputFormat


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def loader() -> ConfigLoader:
    """Create a ConfigLoader instance."""
    return ConfigLoader()


@pytest.fixture
def fleet_yaml() -> str:
    """Valid fleet with a car and a ship."""
    return """
global:
  name: harbour
  format: XML

vehicles:
  - kind: car
    attributes:
      name: BMW G30
      manufacturer: BMW
      weight: 1600
      power: 252
      year: 2020
      doors: 4
      passenger_seats: 5
      fuel_type: petrol
      engine_volume: 2.0
  - kind: ship
    attributes:
      name: MS Queen Victoria
      manufacturer: Fincantieri
      weight: 90000000
      power: 120000
      year: 2007
      length: 294
      displacement: 90000
      crew_capacity: 1000
      propulsion_type: diesel-electric
"""


# =============================================================================
# Model Tests
# =============================================================================


class TestGlobalConfig:
    """Tests for GlobalConfig model."""

    def test_default_values(self) -> None:
        """Defaults are a generic name and JSON output."""
        config = GlobalConfig()
        assert config.name == "fleet"
        assert config.format == OutputFormat.JSON

    def test_format_case_insensitive(self) -> None:
        """The config layer lower-cases format strings."""
        assert GlobalConfig(format="XML").format == OutputFormat.XML
        assert GlobalConfig(format="Json").format == OutputFormat.JSON

    def test_format_accepts_enum(self) -> None:
        """OutputFormat members pass through unchanged."""
        assert GlobalConfig(format=OutputFormat.XML).format == OutputFormat.XML

    def test_invalid_format_raises(self) -> None:
        """Unknown formats raise ValidationError."""
        with pytest.raises(ValidationError):
            GlobalConfig(format="yaml")

    def test_extra_fields_forbidden(self) -> None:
        """Extra fields raise ValidationError."""
        with pytest.raises(ValidationError):
            GlobalConfig(indent=4)


class TestVehicleEntryConfig:
    """Tests for VehicleEntryConfig model."""

    def test_attributes_default_empty(self) -> None:
        """attributes defaults to an empty mapping."""
        entry = VehicleEntryConfig(kind="car")
        assert entry.attributes == {}

    def test_empty_kind_raises(self) -> None:
        """kind must not be empty."""
        with pytest.raises(ValidationError):
            VehicleEntryConfig(kind="")


class TestFleetConfig:
    """Tests for FleetConfig model."""

    def test_defaults(self) -> None:
        """An empty FleetConfig has default globals and no vehicles."""
        config = FleetConfig()
        assert config.global_config.format == OutputFormat.JSON
        assert config.vehicles == []


# =============================================================================
# ConfigLoader Tests
# =============================================================================


class TestConfigLoaderParsing:
    """Tests for YAML parsing."""

    def test_load_from_string(self, loader: ConfigLoader, fleet_yaml: str) -> None:
        """A valid document parses into FleetConfig."""
        config = loader.load_from_string(fleet_yaml)
        assert config.global_config.name == "harbour"
        assert config.global_config.format == OutputFormat.XML
        assert [v.kind for v in config.vehicles] == ["car", "ship"]
        assert config.vehicles[0].attributes["fuel_type"] == "petrol"

    def test_load_from_file(
        self, loader: ConfigLoader, fleet_yaml: str, tmp_path: Path
    ) -> None:
        """load() reads the same document from disk."""
        path = tmp_path / "fleet.yaml"
        path.write_text(fleet_yaml, encoding="utf-8")
        config = loader.load(path)
        assert len(config.vehicles) == 2

    def test_missing_file_raises(self, loader: ConfigLoader, tmp_path: Path) -> None:
        """A missing file raises FleetConfigError."""
        with pytest.raises(FleetConfigError, match="not found"):
            loader.load(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, loader: ConfigLoader) -> None:
        """Malformed YAML raises FleetConfigError."""
        with pytest.raises(FleetConfigError, match="Invalid YAML"):
            loader.load_from_string("global: [unclosed")

    def test_non_mapping_raises(self, loader: ConfigLoader) -> None:
        """A top-level list is rejected."""
        with pytest.raises(FleetConfigError, match="must be a YAML mapping"):
            loader.load_from_string("- car\n- ship\n")

    def test_empty_document_gives_defaults(self, loader: ConfigLoader) -> None:
        """An empty document yields the default configuration."""
        config = loader.load_from_string("")
        assert config.global_config.name == "fleet"
        assert config.vehicles == []

    def test_unknown_section_raises(self, loader: ConfigLoader) -> None:
        """Top-level sections other than global/vehicles are rejected."""
        with pytest.raises(FleetConfigError, match="Unknown section"):
            loader.load_from_string("trucks: []\n")

    def test_vehicles_must_be_list(self, loader: ConfigLoader) -> None:
        """A mapping under 'vehicles' is rejected."""
        with pytest.raises(FleetConfigError, match="must be a list"):
            loader.load_from_string("vehicles:\n  car: {}\n")

    def test_global_must_be_mapping(self, loader: ConfigLoader) -> None:
        """A scalar under 'global' is rejected."""
        with pytest.raises(FleetConfigError, match="must be a mapping"):
            loader.load_from_string("global: fleet\n")

    def test_invalid_format_raises(self, loader: ConfigLoader) -> None:
        """An unknown format in 'global' raises FleetConfigError."""
        with pytest.raises(FleetConfigError, match="validation failed"):
            loader.load_from_string("global:\n  format: yaml\n")

    def test_entry_extra_field_raises(self, loader: ConfigLoader) -> None:
        """Vehicle entries only accept kind and attributes."""
        with pytest.raises(FleetConfigError):
            loader.load_from_string("vehicles:\n  - kind: car\n    color: red\n")


class TestConfigLoaderValidation:
    """Tests for registry validation and vehicle building."""

    def test_valid_config_has_no_errors(
        self, loader: ConfigLoader, fleet_yaml: str
    ) -> None:
        """A valid fleet produces no validation errors."""
        config = loader.load_from_string(fleet_yaml)
        assert loader.validate(config) == []

    def test_unknown_kind_reported(self, loader: ConfigLoader) -> None:
        """Unregistered kinds are reported with their index."""
        config = loader.load_from_string("vehicles:\n  - kind: submarine\n")
        errors = loader.validate(config)
        assert len(errors) == 1
        assert "Vehicle 0" in errors[0]
        assert "submarine" in errors[0]

    def test_duplicate_names_reported(self, loader: ConfigLoader) -> None:
        """Two vehicles with the same name are reported."""
        config = FleetConfig(
            vehicles=[
                VehicleEntryConfig(kind="car", attributes={"name": "A"}),
                VehicleEntryConfig(kind="ship", attributes={"name": "A"}),
            ]
        )
        errors = loader.validate(config)
        assert errors == ["Vehicle 1: duplicate vehicle name 'A'"]

    def test_build_vehicles(self, loader: ConfigLoader, fleet_yaml: str) -> None:
        """build_vehicles returns validated models in file order."""
        config = loader.load_from_string(fleet_yaml)
        vehicles = loader.build_vehicles(config)
        assert [type(v) for v in vehicles] == [Car, Ship]
        assert vehicles[1].propulsion_type == "diesel-electric"

    def test_build_vehicles_with_unknown_kind_raises(
        self, loader: ConfigLoader
    ) -> None:
        """Validation errors are raised together."""
        config = loader.load_from_string("vehicles:\n  - kind: submarine\n")
        with pytest.raises(FleetConfigError, match="submarine"):
            loader.build_vehicles(config)

    def test_build_vehicles_with_bad_attributes_raises(
        self, loader: ConfigLoader
    ) -> None:
        """Invalid attributes raise FleetConfigError."""
        config = loader.load_from_string(
            "vehicles:\n  - kind: car\n    attributes:\n      name: X\n"
        )
        with pytest.raises(FleetConfigError, match="vehicle kind 'car'"):
            loader.build_vehicles(config)
