"""fleetdump vehicle base model.

Every vehicle kind shares the same outer shape when serialized: a
``vehicle`` block with six common fields followed by a kind-specific
sub-block. Subclasses only describe the contents of that sub-block.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from fleetdump.serialization.protocols import Serializer


class Vehicle(BaseModel, ABC):
    """Base class for serializable vehicles.

    Vehicles are immutable Pydantic models. serialize() drives a
    Serializer through the same sequence of calls whatever its format.

    Subclasses must set:
        - type_label: Literal emitted as the ``type`` field (e.g. 'Car')
        - specific_block: Name of the kind-specific sub-block

    Subclasses must implement:
        - serialize_specific(): Emit the kind fields in declared order

    Attributes:
        name: Model name.
        manufacturer: Manufacturer name.
        weight: Weight in kilograms.
        power: Engine power.
        year: Year of manufacture.

    Example:
        >>> from fleetdump.serialization import get_serializer
        >>> serializer = get_serializer("xml")
        >>> car.serialize(serializer)
        >>> print(serializer.build())
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_label: ClassVar[str]
    specific_block: ClassVar[str]

    name: str = Field(min_length=1)
    manufacturer: str
    weight: float = Field(ge=0)
    power: float = Field(ge=0)
    year: int

    def serialize(self, serializer: Serializer) -> None:
        """Describe this vehicle to the serializer.

        Args:
            serializer: A fresh serializer to write into.
        """
        serializer.add_block("vehicle")
        serializer.add_field("type", self.type_label)
        serializer.add_field("name", self.name)
        serializer.add_field("manufacturer", self.manufacturer)
        serializer.add_field("weight", self.weight)
        serializer.add_field("power", self.power)
        serializer.add_field("year", self.year)

        serializer.add_block(self.specific_block)
        self.serialize_specific(serializer)
        serializer.end_block()

        serializer.end_block()

    @abstractmethod
    def serialize_specific(self, serializer: Serializer) -> None:
        """Emit the kind-specific fields inside the open sub-block.

        Args:
            serializer: The serializer positioned inside the sub-block.
        """
        ...
