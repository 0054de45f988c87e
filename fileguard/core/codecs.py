#!/usr/bin/env python3
"""
Text codec service used by GetString and Print.

Each TextEncoding maps to one Python codec. Multi-byte encodings are
little-endian and carry no byte-order mark, so the encoded length is exactly
the bytes written to the file.
"""

from enum import Enum


class TextEncoding(Enum):
    """Supported text encodings"""

    ASCII = "ascii"
    UNICODE = "utf-16-le"
    UTF32 = "utf-32-le"
    UTF7 = "utf-7"
    UTF8 = "utf-8"

    @property
    def codec(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: "str | TextEncoding") -> "TextEncoding":
        """
        Resolve an encoding from a member name or codec alias.

        Accepts "ascii", "utf8", "UTF-8", "unicode", "utf16", "utf-32" and so
        on, case-insensitively.

        Raises:
            ValueError: If the name matches no supported encoding
        """
        if isinstance(name, TextEncoding):
            return name
        key = name.strip().upper().replace("-", "").replace("_", "")
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unsupported encoding: {name}")


_ALIASES = {
    "ASCII": TextEncoding.ASCII,
    "USASCII": TextEncoding.ASCII,
    "UNICODE": TextEncoding.UNICODE,
    "UTF16": TextEncoding.UNICODE,
    "UTF16LE": TextEncoding.UNICODE,
    "UTF32": TextEncoding.UTF32,
    "UTF32LE": TextEncoding.UTF32,
    "UTF7": TextEncoding.UTF7,
    "UTF8": TextEncoding.UTF8,
}


def encode(text: str, encoding: TextEncoding) -> bytes:
    """Encode text, raising UnicodeEncodeError on unrepresentable characters"""
    return text.encode(encoding.codec, errors="strict")


def decode(data: bytes | bytearray, encoding: TextEncoding) -> str:
    """Decode bytes, raising UnicodeDecodeError on malformed input"""
    return bytes(data).decode(encoding.codec, errors="strict")


__all__ = ["TextEncoding", "decode", "encode"]
