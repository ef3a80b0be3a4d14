"""Utility functions for jacob.

This module provides the hex codec and size calculation.
"""

from __future__ import annotations

from .hexcodec import bytes_from_hex, hex_from_bytes
from .sizing import encoded_bits, encoded_size

__all__ = [
    # Hex codec
    "bytes_from_hex",
    "hex_from_bytes",
    # Sizing functions
    "encoded_bits",
    "encoded_size",
]
