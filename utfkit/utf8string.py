"""A growable UTF-8 byte string with in-place editing operations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
Piece = Union["Utf8String", Buffer, str, int]


def _as_bytes(piece: Piece) -> bytes:
    """Turn a string, byte, text or bytes-like object into bytes."""
    if isinstance(piece, Utf8String):
        return bytes(piece._data)
    if isinstance(piece, int):
        if not 0 <= piece <= 0xFF:
            raise ValueError(f"byte value {piece} is outside 0..255")
        return bytes((piece,))
    if isinstance(piece, str):
        return piece.encode("utf-8")
    return bytes(piece)


def _as_byte(c: int | Buffer | str) -> int:
    """Turn a single byte given as an int or a one-byte object into an int."""
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"byte value {c} is outside 0..255")
        return c
    raw = c.encode("utf-8") if isinstance(c, str) else bytes(c)
    if len(raw) != 1:
        raise ValueError(f"expected a single byte, got {len(raw)}")
    return raw[0]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Utf8String:
    """A mutable sequence of UTF-8 bytes.

    Every operation that takes another piece of text accepts a Utf8String,
    a bytes-like object, a str (encoded as UTF-8) or a single byte value.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Piece = b"") -> None:
        self._data = bytearray(_as_bytes(data))

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __str__(self) -> str:
        return self._data.decode("utf-8")

    def __repr__(self) -> str:
        return f"Utf8String({bytes(self._data)!r})"

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self._data))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Utf8String, bytes, bytearray, memoryview, str)):
            return bytes(self._data) == _as_bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def _check_position(self, pos: int) -> None:
        if pos < 0 or pos > len(self._data):
            raise IndexError(f"position {pos} is outside 0..{len(self._data)}")

    def _clip_span(self, pos: int, length: int) -> int:
        if length < 0:
            raise ValueError(f"length {length} is negative")
        return min(pos + length, len(self._data))

    def append(self, other: Piece) -> None:
        """Add ``other`` to the end of the string."""
        self._data += _as_bytes(other)

    def prepend(self, other: Piece) -> None:
        """Add ``other`` to the start of the string."""
        self._data[0:0] = _as_bytes(other)

    def insert(self, pos: int, other: Piece) -> None:
        """Insert ``other`` before byte ``pos``; IndexError if ``pos`` is past the end."""
        self._check_position(pos)
        self._data[pos:pos] = _as_bytes(other)

    def replace(self, pos: int, length: int, other: Piece) -> None:
        """Replace ``length`` bytes from ``pos`` with ``other``.

        The span is cut short at the end of the string; IndexError if
        ``pos`` is past the end.
        """
        self._check_position(pos)
        end = self._clip_span(pos, length)
        self._data[pos:end] = _as_bytes(other)

    def erase(self, pos: int, length: int) -> None:
        """Remove ``length`` bytes from ``pos``, cut short at the end of the string."""
        self._check_position(pos)
        end = self._clip_span(pos, length)
        del self._data[pos:end]

    def concat(self, other: Piece) -> Utf8String:
        """Return a new string holding this one followed by ``other``."""
        return Utf8String(bytes(self._data) + _as_bytes(other))

    def compare(self, other: Piece) -> int:
        """Compare byte-wise with ``other``, returning -1, 0 or 1.

        Bytes are compared as unsigned values up to the shorter length, and
        the comparison stops at a NUL byte both share; if no difference is
        found the shorter string orders first.
        """
        theirs = _as_bytes(other)
        for mine, their in zip(self._data, theirs):
            if mine != their:
                return _sign(mine - their)
            if mine == 0:
                break
        return _sign(len(self._data) - len(theirs))

    def _bounds(self, start: int, end: int | None) -> tuple[int, int]:
        size = len(self._data)
        if end is None or end > size:
            end = size
        if start < 0:
            raise IndexError(f"start {start} is negative")
        if end < 0:
            raise IndexError(f"end {end} is negative")
        return min(start, end), end

    def substring(self, start: int = 0, end: int | None = None) -> bytes:
        """Return the bytes from ``start`` up to ``end``.

        ``end`` of None, or past the end, means the end of the string; a
        ``start`` past ``end`` gives an empty result.
        """
        start, end = self._bounds(start, end)
        return bytes(self._data[start:end])

    def substring_copy(self, start: int = 0, end: int | None = None) -> Utf8String:
        """Like substring, but return a new Utf8String."""
        return Utf8String(self.substring(start, end))

    def index_of(self, c: int | Buffer | str, pos: int = 0) -> int:
        """Index of the first byte ``c`` at or after ``pos``, or -1."""
        if pos < 0:
            raise IndexError(f"position {pos} is negative")
        return self._data.find(_as_byte(c), pos)

    def last_index_of(self, c: int | Buffer | str, pos: int | None = None) -> int:
        """Index of the last byte ``c`` at or before ``pos``, or -1.

        ``pos`` of None means the last byte; a ``pos`` past the end gives -1.
        """
        byte = _as_byte(c)
        if pos is None:
            pos = len(self._data) - 1
        elif pos < 0:
            raise IndexError(f"position {pos} is negative")
        if pos < 0 or pos >= len(self._data):
            return -1
        return self._data.rfind(byte, 0, pos + 1)

    def clear(self) -> None:
        """Remove every byte."""
        self._data.clear()

    def copy(self) -> Utf8String:
        """Return an independent copy."""
        return Utf8String(bytes(self._data))