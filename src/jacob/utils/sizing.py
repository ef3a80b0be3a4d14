"""Packet size calculation utilities.

This module provides functions to calculate the encoded size of a packet tree.
"""

from __future__ import annotations

from ..codec.bitpack import BitPacker
from ..codec.encoder import pack_packet
from ..models.packet import Packet


def encoded_bits(packet: Packet) -> int:
    """Calculate the encoded size of a packet in bits, without padding.

    This is the value a parent's TotalBits framing counts for this packet.

    Example:
        >>> encoded_bits(Packet.literal(2021))
        21
    """
    packer = BitPacker()
    pack_packet(packer, packet)
    return packer.bit_length()


def encoded_size(packet: Packet) -> int:
    """Calculate the encoded size of a packet in bytes, including padding.

    Example:
        >>> encoded_size(Packet.literal(2021))
        3
    """
    return -(-encoded_bits(packet) // 8)
