"""fleetdump serialization protocols and abstract base classes.

This module defines the builder contract shared by every output format
and the capability that domain objects implement to describe themselves.
Concrete implementations live in the sibling modules (xml_serializer,
json_serializer).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, Union, runtime_checkable

FieldValue = Union[str, int, float]
"""Scalar accepted by Serializer.add_field."""


def render_scalar(value: FieldValue) -> str:
    """Convert a field value to its textual form.

    Integers render as plain decimal, floats with six fractional digits
    and strings verbatim. Both formats share this conversion so a value
    reads the same in XML and JSON.

    Args:
        value: The scalar to render.

    Returns:
        The textual form of the value.

    Raises:
        TypeError: If value is not a str, int or float.

    Example:
        >>> render_scalar(2.0)
        '2.000000'
        >>> render_scalar(4)
        '4'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    raise TypeError(
        f"Field value must be str, int or float, got {type(value).__name__}"
    )


class Serializer(ABC):
    """Abstract base class for block/field document builders.

    A Serializer accumulates nested named blocks and scalar fields and
    renders them on build(). Callers drive it through four operations
    and never learn which format is active.

    Each instance owns a stack of open block names and an indent level
    that always equals the stack depth. Instances are single use: once
    build() has returned, further mutation is not supported.

    Implementations:
        - XmlSerializer: One element per block, one line per field
        - JsonSerializer: One object per block inside an implicit root
    """

    INDENT_WIDTH: ClassVar[int] = 2

    def __init__(self) -> None:
        self._blocks: list[str] = []
        self._content: list[str] = []
        self._indent_level = 0

    @property
    def depth(self) -> int:
        """Number of currently open blocks."""
        return len(self._blocks)

    @property
    def indent_level(self) -> int:
        """Current nesting depth used for line indentation."""
        return self._indent_level

    @property
    def open_blocks(self) -> tuple[str, ...]:
        """Names of the open blocks, outermost first."""
        return tuple(self._blocks)

    def _indent(self) -> str:
        return " " * (self._indent_level * self.INDENT_WIDTH)

    def _push_block(self, name: str) -> None:
        self._blocks.append(name)
        self._indent_level += 1

    def _pop_block(self) -> str:
        self._indent_level -= 1
        return self._blocks.pop()

    def _unwind(self) -> None:
        """Close every open block, innermost first."""
        while self._blocks:
            self.end_block()

    @abstractmethod
    def add_field(self, name: str, value: FieldValue) -> None:
        """Append a labelled scalar at the current nesting level.

        Args:
            name: Field label.
            value: Scalar value (str, int or float).
        """
        ...

    @abstractmethod
    def add_block(self, name: str) -> None:
        """Open a new named nesting level.

        Subsequent fields and blocks are placed inside it until the
        matching end_block() call.

        Args:
            name: Block label.
        """
        ...

    @abstractmethod
    def end_block(self) -> None:
        """Close the innermost open block.

        Does nothing when no block is open.
        """
        ...

    @abstractmethod
    def build(self) -> str:
        """Close any open blocks and return the rendered document.

        Calling build() again returns the same document.

        Returns:
            The complete document as a string.
        """
        ...


@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that describe themselves to a Serializer.

    Implementations call add_block/add_field/end_block in a fixed order
    that does not depend on the concrete serializer.

    Implementations:
        - Car, Airplane, Ship (fleetdump.vehicles)
    """

    def serialize(self, serializer: Serializer) -> None:
        """Drive the serializer to describe this object.

        Args:
            serializer: A fresh serializer to write into.
        """
        ...
