"""An ordered list of string key/value pairs with case-insensitive lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class KeyValue:
    """A key with an optional string value."""

    key: str
    value: str | None = None


class KeyValueList:
    """Ordered collection of :class:`KeyValue` items.

    Keys may repeat; lookups return the first match, compared without
    regard to case.
    """

    def __init__(self) -> None:
        self._items: list[KeyValue] = []

    def add(self, key: str, value: str | None = None) -> KeyValue:
        """Append a new pair and return it. An empty value is stored as None."""
        if key is None:
            raise ValueError("key must not be None")
        item = KeyValue(key, value if value else None)
        self._items.append(item)
        return item

    def get(self, key: str | None) -> str | None:
        """Return the value of the first pair whose key matches ``key``."""
        if not key:
            return None
        wanted = key.lower()
        for item in self._items:
            if len(item.key) == len(key) and item.key.lower() == wanted:
                return item.value
        return None

    def remove(self, item: KeyValue) -> None:
        """Remove ``item`` from the list. Raises ValueError if it is absent."""
        for index, existing in enumerate(self._items):
            if existing is item:
                del self._items[index]
                return
        raise ValueError("item is not in the list")

    def clear(self) -> None:
        """Remove every pair."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[KeyValue]:
        return iter(list(self._items))