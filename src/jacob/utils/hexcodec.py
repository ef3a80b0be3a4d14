"""Hexadecimal text <-> bytes conversion.

Each byte is exactly two hex digits; case is ignored on input and output is
uppercase.
"""

from __future__ import annotations

import string

from ..exceptions import HexError

_HEX_DIGITS = frozenset(string.hexdigits)


def bytes_from_hex(text: str) -> bytes:
    """Convert a hexadecimal string into bytes.

    Args:
        text: Hex digits, two per byte, no separators

    Raises:
        HexError: If text has odd length or contains a non-hex character

    Example:
        >>> bytes_from_hex("d2fe28")
        b'\\xd2\\xfe('
    """
    if len(text) % 2:
        raise HexError(f"Hex string has odd length {len(text)}")

    for position, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise HexError(f"Invalid hex digit {char!r} at position {position}")

    return bytes.fromhex(text)


def hex_from_bytes(data: bytes) -> str:
    """Convert bytes into an uppercase hexadecimal string.

    Example:
        >>> hex_from_bytes(b"\\xd2\\xfe\\x28")
        'D2FE28'
    """
    return data.hex().upper()
