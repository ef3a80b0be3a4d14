"""BITS packet codec for jacob.

This module provides decoding and encoding of BITS packet trees.
"""

from __future__ import annotations

from .bitpack import BitPacker, BitUnpacker
from .decoder import decode, decode_hex
from .encoder import encode, encode_hex, write_packet

__all__ = [
    "encode",
    "encode_hex",
    "write_packet",
    "decode",
    "decode_hex",
    "BitPacker",
    "BitUnpacker",
]
