"""XML serializer for fleetdump documents."""

from __future__ import annotations

from fleetdump.serialization.protocols import FieldValue, Serializer, render_scalar


class XmlSerializer(Serializer):
    """XML document builder.

    Blocks become elements and fields become single-line leaf elements,
    indented two spaces per nesting level. The document has no XML
    declaration and no wrapping root beyond the blocks the caller opens.

    Field values are emitted as-is: characters such as ``<`` or ``&`` are
    not entity-escaped.

    Example:
        >>> serializer = XmlSerializer()
        >>> serializer.add_block("a")
        >>> serializer.add_field("x", 1)
        >>> serializer.end_block()
        >>> serializer.build()
        '<a>\\n  <x>1</x>\\n</a>\\n'
    """

    def add_field(self, name: str, value: FieldValue) -> None:
        self._content.append(
            f"{self._indent()}<{name}>{render_scalar(value)}</{name}>\n"
        )

    def add_block(self, name: str) -> None:
        self._content.append(f"{self._indent()}<{name}>\n")
        self._push_block(name)

    def end_block(self) -> None:
        if not self._blocks:
            return
        name = self._pop_block()
        self._content.append(f"{self._indent()}</{name}>\n")

    def build(self) -> str:
        self._unwind()
        return "".join(self._content)
