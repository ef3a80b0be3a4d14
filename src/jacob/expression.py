"""Rendering of packet trees as arithmetic expression strings."""

from __future__ import annotations

from .models.packet import LiteralKind, OperatorKind, Packet


def to_expression(packet: Packet) -> str:
    """Render a packet tree as a human-readable expression.

    min and max render as calls. Other operators join their operands with
    their infix symbol, or render as a call (``sum(x)``) when they have a
    single operand. An operand is parenthesized only when it is itself an
    infix-style operator.

    Example:
        >>> to_expression(Packet.from_hex("9C0141080250320F1802104A08"))
        '(1 + 3) == (2 * 2)'
    """
    kind = packet.kind
    if isinstance(kind, LiteralKind):
        return str(kind.value)

    operation = kind.operation
    args = [_operand(subpacket) for subpacket in kind.subpackets]

    if operation.is_function:
        return f"{operation.symbol}({', '.join(args)})"
    if len(args) == 1:
        return f"{operation.func_name}({args[0]})"
    return f" {operation.symbol} ".join(args)


def _operand(packet: Packet) -> str:
    expression = to_expression(packet)
    if isinstance(packet.kind, OperatorKind) and not packet.kind.operation.is_function:
        return f"({expression})"
    return expression
