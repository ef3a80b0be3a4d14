"""Evaluation of packet trees as nested arithmetic expressions."""

from __future__ import annotations

import math

from .exceptions import ArgumentError
from .models.operation import Operation
from .models.packet import LiteralKind, Packet

_COMPARISONS = {
    Operation.GREATER_THAN: lambda a, b: a > b,
    Operation.LESS_THAN: lambda a, b: a < b,
    Operation.EQUAL_TO: lambda a, b: a == b,
}


def evaluate(packet: Packet) -> int:
    """Evaluate a packet tree.

    Sum of no operands is 0 and product of no operands is 1. Comparisons
    yield 1 when they hold and 0 otherwise.

    Raises:
        ArgumentError: If min/max has no operands or a comparison does not
            have exactly two

    Example:
        >>> evaluate(Packet.from_hex("9C0141080250320F1802104A08"))
        1
    """
    kind = packet.kind
    if isinstance(kind, LiteralKind):
        return kind.value

    operation = kind.operation
    values = [evaluate(subpacket) for subpacket in kind.subpackets]

    if operation is Operation.SUM:
        return sum(values)
    if operation is Operation.PRODUCT:
        return math.prod(values)
    if operation in (Operation.MINIMUM, Operation.MAXIMUM):
        if not values:
            raise ArgumentError(0, operation)
        return min(values) if operation is Operation.MINIMUM else max(values)

    if len(values) != 2:
        raise ArgumentError(len(values), operation)
    return int(_COMPARISONS[operation](*values))


def to_literal(packet: Packet) -> Packet:
    """Collapse a packet tree to a literal of its value with the root's version."""
    return Packet.literal(evaluate(packet), version=packet.version)
