"""BITS packet decoder.

This module provides decode() and decode_hex(), which read one packet tree
from a byte buffer by recursive descent.
"""

from __future__ import annotations

import logging

from ..config import DecoderConfig
from ..exceptions import NestingError
from ..models.operation import LITERAL_TYPE_ID, Operation
from ..models.packet import (
    PACKET_COUNT_WIDTH,
    TOTAL_BITS_WIDTH,
    TYPE_ID_BITS,
    VERSION_BITS,
    LiteralKind,
    OperatorKind,
    Packet,
    PacketCount,
    TotalBits,
)
from ..utils.hexcodec import bytes_from_hex
from .bitpack import BitUnpacker
from .literal import GROUP_BITS, join_groups

logger = logging.getLogger(__name__)


def decode(data: bytes, config: DecoderConfig | None = None) -> Packet:
    """Decode the outermost packet of a message.

    Bits after the outermost packet are padding and are not inspected.

    Args:
        data: Encoded message
        config: Decoding limits (defaults to DecoderConfig())

    Returns:
        The decoded packet tree

    Raises:
        BitsError: If the data ends before the packet does
        NestingError: If operators nest deeper than config.max_depth
        OperatorError: If a type id names no operation

    Example:
        >>> decode(bytes.fromhex("D2FE28"))
        Packet(version=6, kind=LiteralKind(type='literal', value=2021))
    """
    config = config or DecoderConfig()
    unpacker = BitUnpacker(data)
    packet = read_packet(unpacker, config)
    logger.debug(
        "Decoded %d-bit packet from %d bytes (%d padding bits)",
        unpacker.position(),
        len(data),
        unpacker.bits_remaining(),
    )
    return packet


def decode_hex(text: str, config: DecoderConfig | None = None) -> Packet:
    """Decode a packet from its hexadecimal representation.

    Raises:
        HexError: If text is not valid hexadecimal
        DecodeError: See decode()
    """
    return decode(bytes_from_hex(text), config)


def read_packet(unpacker: BitUnpacker, config: DecoderConfig, depth: int = 0) -> Packet:
    """Read one packet, leaving the cursor just past its last bit."""
    version = unpacker.read_uint(VERSION_BITS)
    type_id = unpacker.read_uint(TYPE_ID_BITS)

    if type_id == LITERAL_TYPE_ID:
        return Packet(version=version, kind=LiteralKind(value=_read_literal(unpacker)))

    if depth >= config.max_depth:
        raise NestingError(f"Operator nesting exceeds max_depth={config.max_depth}")

    return Packet(version=version, kind=_read_operator(unpacker, type_id, config, depth))


def _read_literal(unpacker: BitUnpacker) -> int:
    groups = []
    more = True
    while more:
        more = unpacker.read_bool()
        groups.append(unpacker.read_uint(GROUP_BITS))
    return join_groups(groups)


def _read_operator(
    unpacker: BitUnpacker, type_id: int, config: DecoderConfig, depth: int
) -> OperatorKind:
    if unpacker.read_bool():
        length: TotalBits | PacketCount = PacketCount(count=unpacker.read_uint(PACKET_COUNT_WIDTH))
    else:
        length = TotalBits(bits=unpacker.read_uint(TOTAL_BITS_WIDTH))

    subpackets: list[Packet] = []
    body = unpacker.sub_reader()
    while _has_more(length, body, subpackets):
        child = body.sub_reader()
        subpackets.append(read_packet(child, config, depth + 1))
        body.skip(child.position())
    unpacker.skip(body.position())

    operation = Operation.from_opcode(type_id)
    logger.debug(
        "Operator %s at depth %d: %d sub-packets over %d bits (%s)",
        operation.name,
        depth,
        len(subpackets),
        body.position(),
        length.framing,
    )
    return OperatorKind(length=length, operation=operation, subpackets=tuple(subpackets))


def _has_more(length: TotalBits | PacketCount, body: BitUnpacker, subpackets: list[Packet]) -> bool:
    if isinstance(length, TotalBits):
        return body.position() < length.bits
    return len(subpackets) < length.count
