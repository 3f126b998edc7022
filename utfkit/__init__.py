"""Unicode validation, length calculation and conversion, and a mutable UTF-8 string."""

__version__ = "0.1.0"

__all__ = ["validate", "length", "convert_utf8", "convert_utf16", "utf8string"]