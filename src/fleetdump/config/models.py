"""fleetdump configuration models for YAML fleet files.

The configuration hierarchy is:

    FleetConfig
    ├── GlobalConfig
    └── VehicleEntryConfig[]
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fleetdump.serialization.enums import OutputFormat


class GlobalConfig(BaseModel):
    """Global fleet configuration.

    Attributes:
        name: Fleet name for identification in logs.
        format: Output format used when rendering the fleet.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="fleet", min_length=1)
    format: OutputFormat = OutputFormat.JSON

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, v: Any) -> OutputFormat:
        """Allow case-insensitive string input for format."""
        if isinstance(v, str):
            return OutputFormat(v.lower())
        return v


class VehicleEntryConfig(BaseModel):
    """Configuration for a single vehicle.

    Attributes:
        kind: Registered vehicle kind (from VehicleRegistry).
        attributes: Field values validated against the kind's model.
    """

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(min_length=1)
    attributes: dict[str, Any] = Field(default_factory=dict)


class FleetConfig(BaseModel):
    """Complete fleet configuration.

    Attributes:
        global_config: Global settings.
        vehicles: Vehicles to render, in file order.
    """

    model_config = ConfigDict(extra="forbid")

    global_config: GlobalConfig = Field(default_factory=GlobalConfig)
    vehicles: list[VehicleEntryConfig] = Field(default_factory=list)
