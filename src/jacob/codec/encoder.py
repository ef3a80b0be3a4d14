"""BITS packet encoder.

This module provides encode(), encode_hex() and write_packet(), the bit-exact
inverse of the decoder. Operator framing is written exactly as stored on the
tree, never recomputed.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from ..exceptions import EncodeError, WriteError
from ..models.packet import (
    PACKET_COUNT_WIDTH,
    TOTAL_BITS_WIDTH,
    TYPE_ID_BITS,
    VERSION_BITS,
    LiteralKind,
    Packet,
    TotalBits,
)
from ..utils.hexcodec import hex_from_bytes
from .bitpack import BitPacker
from .literal import GROUP_BITS, split_groups

logger = logging.getLogger(__name__)


def encode(packet: Packet) -> bytes:
    """Encode a packet tree, zero-padded to a byte boundary.

    Raises:
        EncodeError: If a field of the tree does not fit its wire width

    Example:
        >>> encode(Packet.literal(2021, version=6)).hex().upper()
        'D2FE28'
    """
    packer = BitPacker()
    pack_packet(packer, packet)
    logger.debug("Encoded %d-bit packet", packer.bit_length())
    return packer.to_bytes()


def encode_hex(packet: Packet) -> str:
    """Encode a packet tree as an uppercase hexadecimal string."""
    return hex_from_bytes(encode(packet))


def write_packet(packet: Packet, stream: BinaryIO) -> int:
    """Encode a packet tree into a binary stream.

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If the tree cannot be encoded
        WriteError: If the stream rejects the write
    """
    data = encode(packet)
    try:
        stream.write(data)
    except OSError as e:
        raise WriteError(f"Failed to write {len(data)} bytes: {e}") from e
    return len(data)


def pack_packet(packer: BitPacker, packet: Packet) -> None:
    """Append the unpadded bits of a packet tree to a packer.

    Raises:
        EncodeError: If a field of the tree does not fit its wire width
    """
    try:
        packer.write_uint(packet.version, VERSION_BITS)
        packer.write_uint(packet.type_id, TYPE_ID_BITS)
    except ValueError as e:
        raise EncodeError(f"Error encoding packet header: {e}") from e

    kind = packet.kind
    if isinstance(kind, LiteralKind):
        groups = split_groups(kind.value)
        for i, group in enumerate(groups):
            packer.write_bool(i < len(groups) - 1)
            packer.write_uint(group, GROUP_BITS)
        return

    try:
        if isinstance(kind.length, TotalBits):
            packer.write_bool(False)
            packer.write_uint(kind.length.bits, TOTAL_BITS_WIDTH)
        else:
            packer.write_bool(True)
            packer.write_uint(kind.length.count, PACKET_COUNT_WIDTH)
    except ValueError as e:
        raise EncodeError(f"Error encoding {kind.operation.name} framing: {e}") from e

    for subpacket in kind.subpackets:
        pack_packet(packer, subpacket)
