"""Lengths, in code units, that data would take in another encoding.

UTF-16LE and UTF-32 input is a bytes-like object of little-endian code units.
The results count code units of the target encoding: bytes for UTF-8 and
Latin-1, 16-bit units for UTF-16 and 32-bit units for UTF-32. The input is
assumed to be valid; no validation is done here.
"""

from __future__ import annotations

from .validate import _code_units

Buffer = bytes | bytearray | memoryview


def _count_leading_bytes(data: Buffer) -> int:
    """Count the bytes that are not UTF-8 continuation bytes."""
    return sum(1 for byte in bytes(data) if byte & 0xC0 != 0x80)


def utf8_length_from_utf16le(data: Buffer) -> int:
    """Number of UTF-8 bytes needed for the given UTF-16LE data."""
    total = 0
    for unit in _code_units(data, 2):
        if unit <= 0x7F:
            total += 1
        elif unit <= 0x7FF:
            total += 2
        elif unit <= 0xD7FF or unit >= 0xE000:
            total += 3
        else:
            # Each half of a surrogate pair accounts for half of four bytes.
            total += 2
    return total


def utf8_length_from_utf32(data: Buffer) -> int:
    """Number of UTF-8 bytes needed for the given UTF-32 data."""
    return sum(
        1 + (unit > 0x7F) + (unit > 0x7FF) + (unit > 0xFFFF)
        for unit in _code_units(data, 4)
    )


def utf8_length_from_latin1(data: Buffer) -> int:
    """Number of UTF-8 bytes needed for the given Latin-1 data."""
    raw = bytes(data)
    return len(raw) + sum(byte >> 7 for byte in raw)


def utf16_length_from_utf8(data: Buffer) -> int:
    """Number of UTF-16 code units needed for the given UTF-8 data."""
    raw = bytes(data)
    return _count_leading_bytes(raw) + sum(1 for byte in raw if byte >= 0xF0)


def utf16_length_from_utf32(data: Buffer) -> int:
    """Number of UTF-16 code units needed for the given UTF-32 data."""
    return sum(1 + (unit > 0xFFFF) for unit in _code_units(data, 4))


def utf16_length_from_latin1(data: Buffer) -> int:
    """Number of UTF-16 code units needed for the given Latin-1 data."""
    return len(bytes(data))


def utf32_length_from_utf8(data: Buffer) -> int:
    """Number of UTF-32 code units needed for the given UTF-8 data."""
    return _count_leading_bytes(data)


def utf32_length_from_utf16le(data: Buffer) -> int:
    """Number of UTF-32 code units needed for the given UTF-16LE data."""
    return sum(1 for unit in _code_units(data, 2) if unit & 0xFC00 != 0xDC00)


def utf32_length_from_latin1(data: Buffer) -> int:
    """Number of UTF-32 code units needed for the given Latin-1 data."""
    return len(bytes(data))


def latin1_length_from_utf8(data: Buffer) -> int:
    """Number of Latin-1 bytes needed for the given UTF-8 data."""
    return _count_leading_bytes(data)


def latin1_length_from_utf16le(data: Buffer) -> int:
    """Number of Latin-1 bytes needed for the given UTF-16LE data."""
    return sum(1 for _ in _code_units(data, 2))


def latin1_length_from_utf32(data: Buffer) -> int:
    """Number of Latin-1 bytes needed for the given UTF-32 data."""
    return sum(1 for _ in _code_units(data, 4))