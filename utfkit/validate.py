"""Validation of ASCII, UTF-8, UTF-16LE and UTF-32 data.

UTF-16LE and UTF-32 data are bytes-like objects holding little-endian code
units of two and four bytes respectively.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator

_FORMATS = {2: "<H", 4: "<I"}


def _code_units(data: bytes | bytearray | memoryview, width: int) -> Iterator[int]:
    """Yield the little-endian code units of ``width`` bytes held in ``data``."""
    view = memoryview(data).cast("B")
    if len(view) % width:
        raise ValueError(
            f"data of {len(view)} bytes is not a whole number of {width}-byte code units"
        )
    return (unit for (unit,) in struct.iter_unpack(_FORMATS[width], view))


def is_valid_ascii(data: bytes | bytearray | memoryview) -> bool:
    """Return True if every byte of ``data`` is below 0x80."""
    return bytes(data).isascii()


def is_valid_utf8(data: bytes | bytearray | memoryview) -> bool:
    """Return True if ``data`` is well-formed UTF-8.

    Overlong forms, surrogate code points, code points above U+10FFFF,
    stray continuation bytes and truncated sequences are all rejected.
    """
    try:
        bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def is_valid_utf16le(data: bytes | bytearray | memoryview) -> bool:
    """Return True if ``data`` is well-formed UTF-16LE.

    Every high surrogate must be directly followed by a low surrogate, and
    no low surrogate may appear on its own.
    """
    units = _code_units(data, 2)
    for unit in units:
        if 0xD800 <= unit <= 0xDBFF:
            low = next(units, None)
            if low is None or not 0xDC00 <= low <= 0xDFFF:
                return False
        elif 0xDC00 <= unit <= 0xDFFF:
            return False
    return True


def is_valid_utf32(data: bytes | bytearray | memoryview) -> bool:
    """Return True if every code unit is a Unicode scalar value."""
    return all(
        unit <= 0x10FFFF and not 0xD800 <= unit <= 0xDFFF
        for unit in _code_units(data, 4)
    )