"""fleetdump serializer factory.

This module maps format identifiers to Serializer implementations and
hands out a fresh, independent instance on every create() call.

New formats register themselves with the @SerializerFactory.register
decorator:

    @SerializerFactory.register("yaml")
    class YamlSerializer(Serializer):
        ...
"""

from __future__ import annotations

import logging
from typing import Callable, ClassVar

from fleetdump.exceptions import UnsupportedFormatError
from fleetdump.serialization.enums import OutputFormat
from fleetdump.serialization.json_serializer import JsonSerializer
from fleetdump.serialization.protocols import Serializer
from fleetdump.serialization.xml_serializer import XmlSerializer

logger = logging.getLogger(__name__)


class SerializerFactory:
    """Factory for creating serializers by format identifier.

    Identifiers are matched exactly. Callers that accept user input are
    expected to lower-case it first.

    Example:
        >>> serializer = SerializerFactory.create("xml")
        >>> isinstance(serializer, XmlSerializer)
        True
    """

    _registry: ClassVar[dict[str, type[Serializer]]] = {
        OutputFormat.XML.value: XmlSerializer,
        OutputFormat.JSON.value: JsonSerializer,
    }

    @classmethod
    def register(
        cls, format_id: str
    ) -> Callable[[type[Serializer]], type[Serializer]]:
        """Decorator to register a serializer class for a format.

        Args:
            format_id: The identifier this serializer handles.

        Returns:
            A decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If the identifier is already registered.
        """

        def decorator(serializer_class: type[Serializer]) -> type[Serializer]:
            if format_id in cls._registry:
                existing = cls._registry[format_id].__name__
                raise ValueError(
                    f"Format '{format_id}' already registered by {existing}"
                )
            cls._registry[format_id] = serializer_class
            return serializer_class

        return decorator

    @classmethod
    def unregister(cls, format_id: str) -> None:
        """Remove a registered format. Unknown identifiers are ignored."""
        cls._registry.pop(format_id, None)

    @classmethod
    def create(cls, format_id: str | OutputFormat) -> Serializer:
        """Create a new serializer for the given format.

        Args:
            format_id: Format identifier ('xml' or 'json') or OutputFormat.

        Returns:
            A fresh serializer with no accumulated content.

        Raises:
            UnsupportedFormatError: If the identifier is not registered.
        """
        if isinstance(format_id, OutputFormat):
            format_id = format_id.value

        serializer_class = cls._registry.get(format_id)
        if serializer_class is None:
            raise UnsupportedFormatError(format_id, cls._registry.keys())

        logger.debug(
            "Creating %s for format '%s'", serializer_class.__name__, format_id
        )
        return serializer_class()

    @classmethod
    def available_formats(cls) -> list[str]:
        """Return the registered format identifiers, sorted."""
        return sorted(cls._registry)

    @classmethod
    def is_supported(cls, format_id: str | OutputFormat) -> bool:
        """Check whether a format identifier is registered."""
        if isinstance(format_id, OutputFormat):
            format_id = format_id.value
        return format_id in cls._registry
