"""A tagged value that can hold one of several simple or nested types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, TextIO

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class VariantType(enum.IntEnum):
    """Kinds of value a :class:`Variant` can carry."""

    BOOL = 1
    INT = 2
    UINT = 3
    DOUBLE = 4
    NULL = 5
    REFERENCE = 6
    STRING = 7
    BYTES = 8
    KVLIST = 10


@dataclass
class Variant:
    """A value together with its type.

    A variant created without a type is uninitialised and formats as
    ``!Unknown Type``. ``size`` is the length of string and bytes payloads
    and 0 for everything else.
    """

    type: VariantType | None = None
    value: Any = None
    size: int = 0

    @classmethod
    def from_string(cls, value: str) -> Variant:
        """Create a string variant."""
        if not isinstance(value, str):
            raise TypeError("string variant needs a str")
        return cls(VariantType.STRING, value, len(value))

    @classmethod
    def from_bytes(cls, value: bytes | bytearray | memoryview) -> Variant:
        """Create a bytes variant holding a copy of ``value``."""
        data = bytes(value)
        return cls(VariantType.BYTES, data, len(data))

    @classmethod
    def from_bool(cls, value: Any) -> Variant:
        """Create a boolean variant from the truth of ``value``."""
        return cls(VariantType.BOOL, bool(value))

    @classmethod
    def from_int64(cls, value: int) -> Variant:
        """Create a signed 64-bit integer variant."""
        number = int(value)
        if not _INT64_MIN <= number <= _INT64_MAX:
            raise OverflowError(f"{number} does not fit in a signed 64-bit integer")
        return cls(VariantType.INT, number)

    @classmethod
    def from_uint64(cls, value: int) -> Variant:
        """Create an unsigned 64-bit integer variant."""
        number = int(value)
        if not 0 <= number <= _UINT64_MAX:
            raise OverflowError(f"{number} does not fit in an unsigned 64-bit integer")
        return cls(VariantType.UINT, number)

    @classmethod
    def from_double(cls, value: float) -> Variant:
        """Create a floating point variant."""
        return cls(VariantType.DOUBLE, float(value))

    @classmethod
    def from_null(cls) -> Variant:
        """Create a null variant."""
        return cls(VariantType.NULL)

    @classmethod
    def from_kvlist(cls, value: Any) -> Variant:
        """Create a variant wrapping a key/value list."""
        return cls(VariantType.KVLIST, value)

    @classmethod
    def from_reference(cls, value: Any) -> Variant:
        """Create a variant holding an opaque reference."""
        return cls(VariantType.REFERENCE, value)

    def format(self) -> str:
        """Return the textual representation of the value."""
        kind = self.type
        if kind is VariantType.STRING:
            return f'"{self.value}"'
        if kind is VariantType.BOOL:
            return "true" if self.value else "false"
        if kind in (VariantType.INT, VariantType.UINT):
            return str(self.value)
        if kind is VariantType.DOUBLE:
            return f"{self.value:f}"
        if kind is VariantType.NULL:
            return "null"
        if kind is VariantType.BYTES:
            return self.value.hex()
        if kind is VariantType.REFERENCE:
            return _format_reference(self.value)
        if kind is VariantType.KVLIST:
            return self.value.format()
        return "!Unknown Type"

    def write(self, stream: TextIO) -> int:
        """Write the textual representation to ``stream``; return its length."""
        text = self.format()
        stream.write(text)
        return len(text)

    def __str__(self) -> str:
        return self.format()


def _format_reference(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int):
        return hex(value)
    return hex(id(value))