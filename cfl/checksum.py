"""CRC-32C (Castagnoli) checksum."""

from __future__ import annotations

_POLYNOMIAL = 0x82F63B78


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ _POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc32c(data: bytes | bytearray | memoryview) -> int:
    """Return the CRC-32C checksum of ``data`` as an unsigned 32-bit integer."""
    checksum = 0xFFFFFFFF
    for byte in bytes(data):
        checksum = _TABLE[(checksum ^ byte) & 0xFF] ^ (checksum >> 8)
    return checksum ^ 0xFFFFFFFF