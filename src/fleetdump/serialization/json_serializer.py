"""JSON serializer for fleetdump documents."""

from __future__ import annotations

from fleetdump.serialization.protocols import FieldValue, Serializer, render_scalar


class JsonSerializer(Serializer):
    """JSON document builder.

    Blocks become nested objects and fields become ``"name": value``
    members. Everything the caller adds sits inside one implicit
    top-level object that build() wraps around the accumulated members.

    A comma flag tracks whether the next member at the current level
    needs a leading separator. It is cleared right after a block opens
    and set after every field and every closed block.

    String values are quoted but not escaped, so embedded quotes or
    backslashes pass through unchanged.

    Attributes:
        _needs_comma: Whether the next member needs a leading comma.

    Example:
        >>> serializer = JsonSerializer()
        >>> serializer.add_block("a")
        >>> serializer.add_field("x", 1)
        >>> serializer.end_block()
        >>> serializer.build()
        '{\\n"a": {\\n  "x": 1\\n}\\n}'
    """

    def __init__(self) -> None:
        super().__init__()
        self._needs_comma = False

    def _start_member(self) -> None:
        # The first member of the document gets its newline from build().
        if self._content:
            if self._needs_comma:
                self._content.append(",")
            self._content.append("\n")
        self._needs_comma = True

    def _literal(self, value: FieldValue) -> str:
        text = render_scalar(value)
        if isinstance(value, str):
            return f'"{text}"'
        return text

    def add_field(self, name: str, value: FieldValue) -> None:
        self._start_member()
        self._content.append(f'{self._indent()}"{name}": {self._literal(value)}')

    def add_block(self, name: str) -> None:
        self._start_member()
        self._content.append(f'{self._indent()}"{name}": {{')
        self._push_block(name)
        self._needs_comma = False

    def end_block(self) -> None:
        if not self._blocks:
            return
        self._pop_block()
        self._content.append(f"\n{self._indent()}}}")
        self._needs_comma = True

    def build(self) -> str:
        """Close any open blocks and return the rendered document.

        An empty builder renders as ``{\\n\\n}``.

        Returns:
            The complete JSON document.
        """
        self._unwind()
        return "{\n" + "".join(self._content) + "\n}"
