"""Conversions from UTF-16LE and UTF-32 data to the other encodings.

Input and output in UTF-16LE and UTF-32 are bytes-like objects holding
little-endian code units of two and four bytes respectively.
"""

from __future__ import annotations

from .convert_utf8 import ConversionError
from .validate import _code_units

Buffer = bytes | bytearray | memoryview


def _decode(raw: bytes, codec: str) -> str:
    try:
        return raw.decode(codec)
    except UnicodeDecodeError as exc:
        raise ConversionError(
            f"invalid {codec.upper()} at offset {exc.start}: {exc.reason}"
        ) from exc


def _utf8_bytes(code_point: int) -> bytes:
    """Encode a value of at most 16 bits as one to three UTF-8 bytes."""
    if code_point < 0x80:
        return bytes((code_point,))
    if code_point < 0x800:
        return bytes((0xC0 | (code_point >> 6), 0x80 | (code_point & 0x3F)))
    return bytes(
        (
            0xE0 | (code_point >> 12),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        )
    )


def utf16le_to_utf8(data: Buffer) -> bytes:
    """Convert UTF-16LE data to UTF-8.

    The conversion is lenient about surrogates: a surrogate is combined with
    whatever code unit follows it into a four-byte sequence without checking
    that the two form a valid pair. A surrogate in the last code unit raises
    ConversionError.
    """
    out = bytearray()
    units = _code_units(data, 2)
    for unit in units:
        if unit & 0xF800 != 0xD800:
            out += _utf8_bytes(unit)
            continue
        following = next(units, None)
        if following is None:
            raise ConversionError("surrogate at the end of UTF-16LE data")
        value = (((unit - 0xD800) << 10) + (following - 0xDC00) + 0x10000) & 0xFFFFFFFF
        out += bytes(
            (
                ((value >> 18) | 0xF0) & 0xFF,
                ((value >> 12) & 0x3F) | 0x80,
                ((value >> 6) & 0x3F) | 0x80,
                (value & 0x3F) | 0x80,
            )
        )
    return bytes(out)


def utf16le_to_utf32(data: Buffer) -> bytes:
    """Convert well-formed UTF-16LE data to UTF-32 (little-endian).

    Raises ConversionError on unpaired or misordered surrogates and on
    truncated data.
    """
    return _decode(bytes(data), "utf-16-le").encode("utf-32-le")


def utf16le_to_latin1(data: Buffer) -> bytes:
    """Convert UTF-16LE data to Latin-1.

    Raises ConversionError if any code unit is above 0x00FF.
    """
    units = list(_code_units(data, 2))
    too_wide = next((unit for unit in units if unit > 0xFF), None)
    if too_wide is not None:
        raise ConversionError(f"code unit 0x{too_wide:04X} does not fit in Latin-1")
    return bytes(units)


def utf32_to_utf8(data: Buffer) -> bytes:
    """Convert UTF-32 (little-endian) data to UTF-8.

    Raises ConversionError on surrogate code points, code points above
    U+10FFFF and truncated data.
    """
    return _decode(bytes(data), "utf-32-le").encode("utf-8")


def utf32_to_utf16le(data: Buffer) -> bytes:
    """Convert UTF-32 (little-endian) data to UTF-16LE.

    Raises ConversionError on surrogate code points, code points above
    U+10FFFF and truncated data.
    """
    return _decode(bytes(data), "utf-32-le").encode("utf-16-le")


def utf32_to_latin1(data: Buffer) -> bytes:
    """Convert UTF-32 (little-endian) data to Latin-1.

    Raises ConversionError if any code unit is above 0x000000FF.
    """
    units = list(_code_units(data, 4))
    too_wide = next((unit for unit in units if unit > 0xFF), None)
    if too_wide is not None:
        raise ConversionError(f"code unit 0x{too_wide:08X} does not fit in Latin-1")
    return bytes(units)