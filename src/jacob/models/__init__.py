"""Packet tree models for jacob."""

from __future__ import annotations

from .operation import LITERAL_TYPE_ID, Operation
from .packet import (
    Length,
    LiteralKind,
    OperatorKind,
    Packet,
    PacketCount,
    PacketKind,
    TotalBits,
)

__all__ = [
    "LITERAL_TYPE_ID",
    "Operation",
    "Length",
    "LiteralKind",
    "OperatorKind",
    "Packet",
    "PacketCount",
    "PacketKind",
    "TotalBits",
]
