"""fleetdump built-in vehicle kinds.

This module provides the three kinds a fleet file can reference:
- Car ('car'): road vehicles
- Airplane ('airplane'): fixed-wing aircraft
- Ship ('ship'): sea-going vessels
"""

from __future__ import annotations

from pydantic import Field

from fleetdump.serialization.protocols import Serializer
from fleetdump.vehicles.base import Vehicle
from fleetdump.vehicles.decorators import vehicle_kind


@vehicle_kind("car")
class Car(Vehicle):
    """A road vehicle.

    Attributes:
        doors: Number of doors.
        passenger_seats: Number of passenger seats.
        fuel_type: Fuel name (e.g., 'petrol', 'diesel').
        engine_volume: Engine displacement in litres.
    """

    type_label = "Car"
    specific_block = "car_specific"

    doors: int = Field(ge=0)
    passenger_seats: int = Field(ge=0)
    fuel_type: str
    engine_volume: float = Field(ge=0)

    def serialize_specific(self, serializer: Serializer) -> None:
        serializer.add_field("doors", self.doors)
        serializer.add_field("passenger_seats", self.passenger_seats)
        serializer.add_field("fuel_type", self.fuel_type)
        serializer.add_field("engine_volume", self.engine_volume)


@vehicle_kind("airplane")
class Airplane(Vehicle):
    """A fixed-wing aircraft.

    Attributes:
        wingspan: Wingspan in metres.
        max_altitude: Service ceiling in metres.
        passenger_capacity: Maximum number of passengers.
        max_speed: Maximum speed in km/h.
    """

    type_label = "Airplane"
    specific_block = "airplane_specific"

    wingspan: int = Field(ge=0)
    max_altitude: int = Field(ge=0)
    passenger_capacity: int = Field(ge=0)
    max_speed: float = Field(ge=0)

    def serialize_specific(self, serializer: Serializer) -> None:
        serializer.add_field("wingspan", self.wingspan)
        serializer.add_field("max_altitude", self.max_altitude)
        serializer.add_field("passenger_capacity", self.passenger_capacity)
        serializer.add_field("max_speed", self.max_speed)


@vehicle_kind("ship")
class Ship(Vehicle):
    """A sea-going vessel.

    Attributes:
        length: Overall length in metres.
        displacement: Displacement in tonnes.
        crew_capacity: Maximum crew size.
        propulsion_type: Propulsion system (e.g., 'diesel-electric').
    """

    type_label = "Ship"
    specific_block = "ship_specific"

    length: float = Field(ge=0)
    displacement: float = Field(ge=0)
    crew_capacity: int = Field(ge=0)
    propulsion_type: str

    def serialize_specific(self, serializer: Serializer) -> None:
        serializer.add_field("length", self.length)
        serializer.add_field("displacement", self.displacement)
        serializer.add_field("crew_capacity", self.crew_capacity)
        serializer.add_field("propulsion_type", self.propulsion_type)
