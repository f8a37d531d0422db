"""
Bit element type.

A single boolean value used as the element type of BitVector.
"""

from typing import Any


class Bit:
    """Immutable wrapper around one boolean value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = bool(value)

    @classmethod
    def parse(cls, text: str) -> "Bit":
        """
        Parse a bit from its textual form.

        Args:
            text (str): "0" or "1", surrounding whitespace ignored.

        Returns:
            Bit: The parsed bit.

        Raises:
            ValueError: If the text is neither "0" nor "1".
        """
        stripped = text.strip()
        if stripped == "1":
            return cls(True)
        if stripped == "0":
            return cls(False)
        raise ValueError(f"Cannot parse bit from {text!r}, expected '0' or '1'")

    def bit_value(self) -> bool:
        return self._value

    def __bool__(self) -> bool:
        return self._value

    def __int__(self) -> int:
        return int(self._value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Bit):
            return self._value == other._value
        if isinstance(other, (bool, int)):
            return int(self._value) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Bit({int(self._value)})"

    def __str__(self) -> str:
        return str(int(self._value))
