"""fleetdump serialization module."""

from fleetdump.serialization.enums import OutputFormat
from fleetdump.serialization.factory import SerializerFactory
from fleetdump.serialization.json_serializer import JsonSerializer
from fleetdump.serialization.protocols import (
    FieldValue,
    Serializable,
    Serializer,
    render_scalar,
)
from fleetdump.serialization.xml_serializer import XmlSerializer

__all__ = [
    "FieldValue",
    "OutputFormat",
    "Serializable",
    "Serializer",
    "SerializerFactory",
    "XmlSerializer",
    "JsonSerializer",
    "get_serializer",
    "render_scalar",
]


def get_serializer(name: str) -> Serializer:
    """Get a fresh serializer by format name.

    Args:
        name: Serializer name ('xml' or 'json').

    Returns:
        Serializer instance.

    Raises:
        UnsupportedFormatError: If name is not recognized.

    Example:
        >>> serializer = get_serializer("json")
        >>> isinstance(serializer, JsonSerializer)
        True
    """
    return SerializerFactory.create(name)
