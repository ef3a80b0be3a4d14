"""jacob: BITS packet codec

A Python library for decoding, evaluating, rendering and re-encoding BITS
packets: a recursive, bit-packed binary format in which literal packets carry
integers and operator packets apply sum, product, min, max and comparisons to
their sub-packets.

Key Features:
- Immutable, pydantic-validated packet trees
- Bit-exact round-trip encoding, including each operator's framing
- Evaluation and expression rendering
- Command-line tool (``jacob``)

Quick Start:
    >>> from jacob import Packet
    >>>
    >>> packet = Packet.from_hex("9C0141080250320F1802104A08")
    >>> packet.eval()
    1
    >>> packet.to_expression()
    '(1 + 3) == (2 * 2)'
    >>> packet.to_hex()
    '9C0141080250320F1802104A08'
"""

from __future__ import annotations

from .codec import decode, decode_hex, encode, encode_hex, write_packet
from .config import DecoderConfig
from .evaluate import evaluate, to_literal
from .exceptions import (
    ArgumentError,
    BitsError,
    DecodeError,
    EncodeError,
    HexError,
    LiteralValueError,
    NestingError,
    OperatorError,
    PacketError,
    WriteError,
)
from .expression import to_expression
from .models import (
    Length,
    LiteralKind,
    Operation,
    OperatorKind,
    Packet,
    PacketCount,
    PacketKind,
    TotalBits,
)
from .utils import bytes_from_hex, encoded_bits, encoded_size, hex_from_bytes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Packet",
    "decode",
    "decode_hex",
    "encode",
    "encode_hex",
    "write_packet",
    "evaluate",
    "to_literal",
    "to_expression",
    "DecoderConfig",
    # Models
    "Operation",
    "Length",
    "TotalBits",
    "PacketCount",
    "PacketKind",
    "LiteralKind",
    "OperatorKind",
    # Exceptions
    "PacketError",
    "DecodeError",
    "BitsError",
    "OperatorError",
    "LiteralValueError",
    "NestingError",
    "ArgumentError",
    "HexError",
    "EncodeError",
    "WriteError",
    # Utilities
    "bytes_from_hex",
    "hex_from_bytes",
    "encoded_bits",
    "encoded_size",
    # Version
    "__version__",
]
