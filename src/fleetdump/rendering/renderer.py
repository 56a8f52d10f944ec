"""fleetdump renderer for turning entities into documents.

This module provides the FleetRenderer class, the driver loop that pairs
every entity with its own freshly created serializer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from fleetdump.exceptions import UnsupportedFormatError
from fleetdump.serialization.enums import OutputFormat
from fleetdump.serialization.factory import SerializerFactory

if TYPE_CHECKING:
    from fleetdump.config.models import FleetConfig
    from fleetdump.serialization.protocols import Serializable

logger = logging.getLogger(__name__)


class FleetRenderer:
    """Render serializable entities in a single output format.

    Each call to render() obtains a new serializer from the factory, so
    no builder state is shared between entities.

    Example:
        >>> renderer = FleetRenderer("xml")
        >>> print(renderer.render_document(demo_fleet()))

    Attributes:
        format_id: The format identifier every document is rendered in.
    """

    def __init__(
        self,
        format_id: str | OutputFormat,
        factory: type[SerializerFactory] = SerializerFactory,
    ) -> None:
        """Initialize the renderer.

        Args:
            format_id: Format identifier ('xml' or 'json') or OutputFormat.
            factory: Factory used to create serializers.

        Raises:
            UnsupportedFormatError: If the format is not registered.
        """
        if isinstance(format_id, OutputFormat):
            format_id = format_id.value
        if not factory.is_supported(format_id):
            raise UnsupportedFormatError(format_id, factory.available_formats())

        self.format_id = format_id
        self._factory = factory

    @classmethod
    def from_config(cls, config: FleetConfig) -> FleetRenderer:
        """Create a renderer using the configured output format."""
        return cls(config.global_config.format)

    def render(self, entity: Serializable) -> str:
        """Render one entity into a complete document.

        Args:
            entity: Object exposing serialize(serializer).

        Returns:
            The built document.
        """
        serializer = self._factory.create(self.format_id)
        entity.serialize(serializer)
        logger.debug("Rendered %s as %s", type(entity).__name__, self.format_id)
        return serializer.build()

    def render_all(self, entities: Iterable[Serializable]) -> list[str]:
        """Render each entity into its own document, preserving order."""
        documents = [self.render(entity) for entity in entities]
        logger.info(
            "Rendered %d document(s) in %s format", len(documents), self.format_id
        )
        return documents

    def render_document(
        self, entities: Iterable[Serializable], separator: str = "\n\n"
    ) -> str:
        """Render all entities and join the documents with a separator.

        Args:
            entities: Objects exposing serialize(serializer).
            separator: Text placed between consecutive documents.

        Returns:
            The joined documents.
        """
        return separator.join(self.render_all(entities))
