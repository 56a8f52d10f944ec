"""fleetdump - Render vehicle descriptions as XML or JSON.

fleetdump separates *what* an object says about itself from *how* it is
written out. Domain objects drive a Serializer through four operations
(add_field, add_block, end_block, build) and never learn which output
format is active.

Example:
    >>> from fleetdump import Car, get_serializer
    >>> car = Car(
    ...     name="BMW G30", manufacturer="BMW", weight=1600, power=252,
    ...     year=2020, doors=4, passenger_seats=5, fuel_type="petrol",
    ...     engine_volume=2.0,
    ... )
    >>> serializer = get_serializer("xml")
    >>> car.serialize(serializer)
    >>> print(serializer.build())
    <vehicle>
      <type>Car</type>
    ...

    >>> from fleetdump import FleetRenderer, demo_fleet
    >>> documents = FleetRenderer("json").render_all(demo_fleet())
"""

__version__ = "0.1.0"

from fleetdump.config import (
    ConfigLoader,
    FleetConfig,
    GlobalConfig,
    VehicleEntryConfig,
)
from fleetdump.exceptions import (
    FleetConfigError,
    FleetDumpError,
    UnsupportedFormatError,
    VehicleKindNotFoundError,
)
from fleetdump.rendering import FleetRenderer
from fleetdump.serialization import (
    FieldValue,
    JsonSerializer,
    OutputFormat,
    Serializable,
    Serializer,
    SerializerFactory,
    XmlSerializer,
    get_serializer,
    render_scalar,
)
from fleetdump.vehicles import (
    Airplane,
    Car,
    Ship,
    Vehicle,
    VehicleFactory,
    VehicleRegistry,
    demo_fleet,
    get_vehicle_registry,
    vehicle_kind,
)

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FleetDumpError",
    "UnsupportedFormatError",
    "FleetConfigError",
    "VehicleKindNotFoundError",
    # Serialization
    "FieldValue",
    "OutputFormat",
    "Serializable",
    "Serializer",
    "XmlSerializer",
    "JsonSerializer",
    "SerializerFactory",
    "get_serializer",
    "render_scalar",
    # Vehicles
    "Vehicle",
    "Car",
    "Airplane",
    "Ship",
    "VehicleRegistry",
    "VehicleFactory",
    "get_vehicle_registry",
    "vehicle_kind",
    "demo_fleet",
    # Config
    "ConfigLoader",
    "FleetConfig",
    "GlobalConfig",
    "VehicleEntryConfig",
    # Rendering
    "FleetRenderer",
]
