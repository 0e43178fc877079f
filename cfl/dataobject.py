"""A container that holds one key/value list or one variant."""

from __future__ import annotations

import enum
import sys
from typing import Any, TextIO

from cfl.kvlist import KVList
from cfl.variant import Variant


class ObjectType(enum.IntEnum):
    """What a :class:`DataObject` currently holds."""

    NONE = 0
    KVLIST = 1
    VARIANT = 2


class DataObject:
    """Wrapper giving a key/value list or a variant one common interface.

    Whatever is stored is held as a variant.
    """

    def __init__(self) -> None:
        self.type = ObjectType.NONE
        self.variant: Variant | None = None

    def set(self, kind: ObjectType | int, value: Any) -> None:
        """Store ``value`` as the given kind.

        Raises ValueError for an unsupported kind and TypeError when
        ``value`` does not match it.
        """
        try:
            kind = ObjectType(kind)
        except ValueError:
            raise ValueError(f"unsupported object type: {kind!r}") from None

        if kind is ObjectType.KVLIST:
            if not isinstance(value, KVList):
                raise TypeError("a kvlist object needs a KVList")
            self.variant = Variant.from_kvlist(value)
        elif kind is ObjectType.VARIANT:
            if not isinstance(value, Variant):
                raise TypeError("a variant object needs a Variant")
            self.variant = value
        else:
            raise ValueError(f"unsupported object type: {kind!r}")
        self.type = kind

    def format(self) -> str:
        """Return the textual form of the held value."""
        if self.variant is None:
            raise ValueError("object holds no value")
        return self.variant.format()

    def print(self, stream: TextIO | None = None) -> None:
        """Write the held value and a newline to ``stream`` (stdout by default)."""
        text = self.format()
        out = sys.stdout if stream is None else stream
        out.write(text)
        out.write("\n")