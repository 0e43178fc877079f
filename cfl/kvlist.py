"""An ordered list of keys mapped to :class:`~cfl.variant.Variant` values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TextIO

from cfl.variant import Variant


@dataclass
class KVPair:
    """One key together with its variant value."""

    key: str
    value: Variant


def _same_key(stored: str, wanted: str) -> bool:
    return len(stored) == len(wanted) and stored.lower() == wanted.lower()


class KVList:
    """Ordered key/value pairs whose values are variants.

    Keys are compared without regard to case. Duplicate keys are allowed;
    :meth:`fetch` returns the value of the first matching pair.
    """

    def __init__(self) -> None:
        self._pairs: list[KVPair] = []

    def insert(self, key: str, value: Variant) -> KVPair:
        """Append ``value`` under ``key`` and return the new pair."""
        if not isinstance(key, str):
            raise TypeError("key must be a str")
        if not isinstance(value, Variant):
            raise TypeError("value must be a Variant")
        pair = KVPair(key, value)
        self._pairs.append(pair)
        return pair

    def insert_string(self, key: str, value: str) -> KVPair:
        """Append a string value."""
        if value is None:
            raise TypeError("value must be a str")
        return self.insert(key, Variant.from_string(value))

    def insert_bytes(self, key: str, value: bytes | bytearray | memoryview) -> KVPair:
        """Append a bytes value."""
        return self.insert(key, Variant.from_bytes(value))

    def insert_reference(self, key: str, value: Any) -> KVPair:
        """Append an opaque reference."""
        return self.insert(key, Variant.from_reference(value))

    def insert_bool(self, key: str, value: Any) -> KVPair:
        """Append a boolean value."""
        return self.insert(key, Variant.from_bool(value))

    def insert_int64(self, key: str, value: int) -> KVPair:
        """Append a signed 64-bit integer value."""
        return self.insert(key, Variant.from_int64(value))

    def insert_uint64(self, key: str, value: int) -> KVPair:
        """Append an unsigned 64-bit integer value."""
        return self.insert(key, Variant.from_uint64(value))

    def insert_double(self, key: str, value: float) -> KVPair:
        """Append a floating point value."""
        return self.insert(key, Variant.from_double(value))

    def insert_kvlist(self, key: str, value: KVList) -> KVPair:
        """Append a nested key/value list."""
        if not isinstance(value, KVList):
            raise TypeError("value must be a KVList")
        return self.insert(key, Variant.from_kvlist(value))

    def fetch(self, key: str) -> Variant | None:
        """Return the value of the first pair whose key matches, or None."""
        for pair in self._pairs:
            if _same_key(pair.key, key):
                return pair.value
        return None

    def contains(self, name: str) -> bool:
        """Tell whether any pair has the key ``name``."""
        return any(_same_key(pair.key, name) for pair in self._pairs)

    def remove(self, name: str) -> int:
        """Remove every pair with the key ``name``; return how many went."""
        kept = [pair for pair in self._pairs if not _same_key(pair.key, name)]
        removed = len(self._pairs) - len(kept)
        self._pairs = kept
        return removed

    def format(self) -> str:
        """Return the list as ``{"key":value,...}``."""
        body = ",".join(f'"{pair.key}":{pair.value.format()}' for pair in self._pairs)
        return "{" + body + "}"

    def write(self, stream: TextIO) -> int:
        """Write the formatted list to ``stream``; return its length."""
        text = self.format()
        stream.write(text)
        return len(text)

    def __str__(self) -> str:
        return self.format()

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[KVPair]:
        return iter(list(self._pairs))