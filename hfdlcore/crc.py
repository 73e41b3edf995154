"""CRC-16-CCITT (reflected, polynomial 0x1021)."""

from __future__ import annotations


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ 0x8408 if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc16_ccitt(data: bytes | bytearray | memoryview, crc_init: int) -> int:
    """Return the CRC of ``data`` starting from ``crc_init``."""
    crc = crc_init & 0xFFFF
    for byte in bytes(data):
        crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
    return crc