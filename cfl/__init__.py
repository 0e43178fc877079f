"""Variants, key/value lists, a data object wrapper, string splitting, CRC-32C and time helpers."""

__version__ = "0.1.0"

__all__ = [
    "checksum",
    "dataobject",
    "kv",
    "kvlist",
    "report",
    "timeutil",
    "utils",
    "variant",
]