"""Conversions from UTF-8 and Latin-1 data to the other encodings.

UTF-16LE and UTF-32 results are bytes holding little-endian code units.
"""

from __future__ import annotations

import struct

Buffer = bytes | bytearray | memoryview

# Payload mask of a lead byte, keyed by the length of its sequence.
_LEAD_MASKS = {2: 0x1F, 3: 0x0F, 4: 0x07}


class ConversionError(ValueError):
    """Raised when data cannot be converted to the requested encoding."""


def _sequence_width(lead: int) -> int | None:
    """Length of the UTF-8 sequence a lead byte starts, or None if it starts none."""
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return None


def utf8_to_utf16le(data: Buffer) -> bytes:
    """Convert UTF-8 data to UTF-16LE.

    The conversion is lenient: continuation bytes are not checked, and a
    sequence cut short at the end of the data ends the output without it.
    A byte that cannot start a sequence raises ConversionError.
    """
    raw = bytes(data)
    if raw.isascii():
        return raw.decode("ascii").encode("utf-16-le")

    units: list[int] = []
    pos = 0
    while pos < len(raw):
        lead = raw[pos]
        width = _sequence_width(lead)
        if width is None:
            raise ConversionError(f"invalid UTF-8 lead byte 0x{lead:02x} at offset {pos}")
        if width == 1:
            units.append(lead)
            pos += 1
            continue
        if pos + width > len(raw):
            break
        code_point = lead & _LEAD_MASKS[width]
        for byte in raw[pos + 1 : pos + width]:
            code_point = (code_point << 6) | (byte & 0x3F)
        if width < 4:
            units.append(code_point)
        else:
            offset = (code_point - 0x10000) & 0xFFFFFFFF
            units.append((0xD800 + (offset >> 10)) & 0xFFFF)
            units.append((0xDC00 + (offset & 0x3FF)) & 0xFFFF)
        pos += width
    return struct.pack(f"<{len(units)}H", *units)


def _decode_utf8(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConversionError(f"invalid UTF-8 at offset {exc.start}: {exc.reason}") from exc


def utf8_to_utf32(data: Buffer) -> bytes:
    """Convert well-formed UTF-8 data to UTF-32 (little-endian).

    Raises ConversionError on malformed, truncated, overlong or surrogate
    sequences and on code points above U+10FFFF.
    """
    return _decode_utf8(bytes(data)).encode("utf-32-le")


def utf8_to_latin1(data: Buffer) -> bytes:
    """Convert UTF-8 data to Latin-1.

    Raises ConversionError if the data is malformed or holds a code point
    above U+00FF.
    """
    text = _decode_utf8(bytes(data))
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ConversionError(
            f"code point U+{ord(text[exc.start]):04X} does not fit in Latin-1"
        ) from exc


def latin1_to_utf8(data: Buffer) -> bytes:
    """Convert Latin-1 data to UTF-8."""
    return bytes(data).decode("latin-1").encode("utf-8")


def latin1_to_utf16le(data: Buffer) -> bytes:
    """Convert Latin-1 data to UTF-16LE."""
    return bytes(data).decode("latin-1").encode("utf-16-le")


def latin1_to_utf32(data: Buffer) -> bytes:
    """Convert Latin-1 data to UTF-32 (little-endian)."""
    return bytes(data).decode("latin-1").encode("utf-32-le")