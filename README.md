# utfkit

Small, dependency-free helpers for working with Unicode text at the
code-unit level: check that a buffer is valid ASCII, UTF-8, UTF-16LE or
UTF-32; work out how long it will be in another encoding; convert between
encodings; and edit UTF-8 bytes in place with `Utf8String`.

All functions take bytes-like objects (`bytes`, `bytearray`, `memoryview`).
UTF-16LE and UTF-32 data are little-endian code units of two and four bytes;
data whose length is not a whole number of code units raises `ValueError`.

## Installation

```
pip install utfkit
```

## Validation

`utfkit.validate` provides `is_valid_ascii`, `is_valid_utf8`,
`is_valid_utf16le` and `is_valid_utf32`, each returning `True` or `False`.

```python
from utfkit.validate import is_valid_utf8, is_valid_utf16le, is_valid_utf32

is_valid_utf8(b"\xc3\xa9")                          # True
is_valid_utf8(b"\xc0\x80")                          # False: overlong encoding
is_valid_utf16le(b"\x01\xd8\x37\xdc")               # True: surrogate pair
is_valid_utf16le(b"\x37\xdc\x01\xd8")               # False: pair in the wrong order
is_valid_utf32((0x110000).to_bytes(4, "little"))    # False: beyond U+10FFFF
```

## Lengths

`utfkit.length` counts how many code units the input would take in the
target encoding, without converting it: bytes for UTF-8 and Latin-1, 16-bit
units for UTF-16, 32-bit units for UTF-32. The input is assumed to be valid.

The functions are `utf8_length_from_utf16le`, `utf8_length_from_utf32`,
`utf8_length_from_latin1`, `utf16_length_from_utf8`,
`utf16_length_from_utf32`, `utf16_length_from_latin1`,
`utf32_length_from_utf8`, `utf32_length_from_utf16le`,
`utf32_length_from_latin1`, `latin1_length_from_utf8`,
`latin1_length_from_utf16le` and `latin1_length_from_utf32`.

```python
from utfkit.length import utf16_length_from_utf8, utf8_length_from_utf16le

utf16_length_from_utf8("AΩ☃中😂".encode())       # 6
utf8_length_from_utf16le(b"\x3d\xd8\x02\xde")     # 4
```

## Conversion

`utfkit.convert_utf8` converts from UTF-8 and Latin-1 (`utf8_to_utf16le`,
`utf8_to_utf32`, `utf8_to_latin1`, `latin1_to_utf8`, `latin1_to_utf16le`,
`latin1_to_utf32`); `utfkit.convert_utf16` converts from UTF-16LE and UTF-32
(`utf16le_to_utf8`, `utf16le_to_utf32`, `utf16le_to_latin1`,
`utf32_to_utf8`, `utf32_to_utf16le`, `utf32_to_latin1`). Every function
returns `bytes`.

```python
from utfkit.convert_utf8 import ConversionError, utf8_to_latin1, utf8_to_utf16le
from utfkit.convert_utf16 import utf16le_to_utf8

utf8_to_latin1(b"\xc3\xb8")              # b"\xf8"
utf8_to_utf16le("中".encode())           # b"\x2d\x4e"
utf16le_to_utf8(b"\x00\xd8\x37\xdc")     # b"\xf0\x90\x80\xb7"

try:
    utf8_to_latin1("AAAД".encode())
except ConversionError:
    ...                                  # Д does not fit in Latin-1
```

Input that is malformed or cannot be represented in the target encoding
raises `ConversionError`, a subclass of `ValueError`. Two conversions are
lenient by design:

- `utf8_to_utf16le` does not check continuation bytes, and a sequence cut
  short at the end of the data is dropped rather than reported. Only a byte
  that cannot start a sequence raises.
- `utf16le_to_utf8` combines a surrogate with whichever code unit follows it
  without checking the pair; only a surrogate in the last code unit raises.

Use the functions in `utfkit.validate` first where strict checking matters.

## Utf8String

`utfkit.utf8string.Utf8String` is a mutable sequence of UTF-8 bytes. Every
method that takes a piece of text accepts another `Utf8String`, a bytes-like
object, a `str` (encoded as UTF-8) or a single byte value as an `int`.

```python
from utfkit.utf8string import Utf8String

s = Utf8String("hello")
s.append(" world")
s.replace(5, 1, " there ")
bytes(s)                  # b"hello there world"
s.substring(0, 5)         # b"hello"
s.index_of("o")           # 4
s.last_index_of("o")      # 13
s.compare("hello")        # 1
```

- `append`, `prepend`, `insert(pos, other)`, `replace(pos, length, other)`
  and `erase(pos, length)` edit in place. A position past the end raises
  `IndexError`; a span running past the end is cut short.
- `concat(other)`, `substring_copy(start, end)` and `copy()` return a new
  `Utf8String`; `substring(start, end)` returns `bytes`. An `end` of `None`
  or past the end means the end of the string.
- `compare(other)` returns -1, 0 or 1, comparing bytes as unsigned values
  (stopping at a shared NUL byte), with the shorter string first on a tie.
- `index_of(c, pos=0)` and `last_index_of(c, pos=None)` return the index of
  a byte, or -1.
- `clear()` empties the string. `len()`, `bytes()`, `str()`, iteration and
  `==` work as expected.

## Scope

utfkit is a library only: it installs no command-line tool. It reads and
writes UTF-16 and UTF-32 in little-endian order only and does not detect or
strip byte-order marks.

## Running the tests

```
pip install utfkit[test]
pytest
```