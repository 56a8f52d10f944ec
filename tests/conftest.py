"""Shared pytest fixtures for fleetdump tests."""

from __future__ import annotations

import pytest

from fleetdump import Airplane, Car, JsonSerializer, Ship, XmlSerializer


@pytest.fixture
def xml_serializer() -> XmlSerializer:
    """Fresh XML serializer."""
    return XmlSerializer()


@pytest.fixture
def json_serializer() -> JsonSerializer:
    """Fresh JSON serializer."""
    return JsonSerializer()


@pytest.fixture
def sample_car() -> Car:
    """Car matching the demo fleet entry."""
    return Car(
        name="BMW G30",
        manufacturer="BMW",
        weight=1600,
        power=252,
        year=2020,
        doors=4,
        passenger_seats=5,
        fuel_type="petrol",
        engine_volume=2.0,
    )


@pytest.fixture
def sample_airplane() -> Airplane:
    """Airplane matching the demo fleet entry."""
    return Airplane(
        name="Boeing 747-400",
        manufacturer="Boeing",
        weight=180000,
        power=240000,
        year=1988,
        wingspan=64,
        max_altitude=13700,
        passenger_capacity=416,
        max_speed=988,
    )


@pytest.fixture
def sample_ship() -> Ship:
    """Ship matching the demo fleet entry."""
    return Ship(
        name="MS Queen Victoria",
        manufacturer="Fincantieri",
        weight=90000000,
        power=120000,
        year=2007,
        length=294,
        displacement=90000,
        crew_capacity=1000,
        propulsion_type="diesel-electric",
    )


@pytest.fixture
def car_attributes() -> dict[str, object]:
    """Raw attribute mapping for a valid car."""
    return {
        "name": "BMW G30",
        "manufacturer": "BMW",
        "weight": 1600,
        "power": 252,
        "year": 2020,
        "doors": 4,
        "passenger_seats": 5,
        "fuel_type": "petrol",
        "engine_volume": 2.0,
    }
