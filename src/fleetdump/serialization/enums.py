"""fleetdump output format identifiers."""

from __future__ import annotations

from enum import Enum


class OutputFormat(Enum):
    """Structured text formats a vehicle can be rendered into.

    Values are the lower-case identifiers accepted by SerializerFactory.
    """

    XML = "xml"
    """Nested elements, one field per line."""

    JSON = "json"
    """One implicit top-level object with nested objects per block."""
