"""Immutable BITS packet tree.

A packet is either a literal leaf holding one unsigned integer or an operator
node holding an operation, the framing it was encoded with, and its ordered
sub-packets. Every model is frozen; transformations build new trees.
"""

from __future__ import annotations

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .operation import LITERAL_TYPE_ID, Operation

VERSION_BITS = 3
TYPE_ID_BITS = 3
TOTAL_BITS_WIDTH = 15
PACKET_COUNT_WIDTH = 11

MAX_VERSION = (1 << VERSION_BITS) - 1
MAX_TOTAL_BITS = (1 << TOTAL_BITS_WIDTH) - 1
MAX_PACKET_COUNT = (1 << PACKET_COUNT_WIDTH) - 1


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )


class TotalBits(_FrozenModel):
    """Framing by the total bit length of the sub-packet sequence."""

    framing: Literal["total_bits"] = "total_bits"
    bits: int = Field(ge=0, le=MAX_TOTAL_BITS)

    @classmethod
    def for_packets(cls, packets: Iterable[Packet]) -> TotalBits:
        """Build the framing that exactly spans the given sub-packets."""
        # Import here to avoid circular dependency
        from ..utils.sizing import encoded_bits

        return cls(bits=sum(encoded_bits(packet) for packet in packets))


class PacketCount(_FrozenModel):
    """Framing by the number of sub-packets."""

    framing: Literal["packet_count"] = "packet_count"
    count: int = Field(ge=0, le=MAX_PACKET_COUNT)

    @classmethod
    def for_packets(cls, packets: Iterable[Packet]) -> PacketCount:
        """Build the framing that counts the given sub-packets."""
        return cls(count=len(list(packets)))


Length = Annotated[Union[TotalBits, PacketCount], Field(discriminator="framing")]


class LiteralKind(_FrozenModel):
    """Leaf packet carrying a single unsigned integer."""

    type: Literal["literal"] = "literal"
    value: int = Field(ge=0)


class OperatorKind(_FrozenModel):
    """Internal packet applying an operation to its sub-packets."""

    type: Literal["operator"] = "operator"
    length: Length
    operation: Operation
    subpackets: tuple[Packet, ...] = ()


PacketKind = Annotated[Union[LiteralKind, OperatorKind], Field(discriminator="type")]


class Packet(_FrozenModel):
    """One node of a BITS packet tree.

    Example:
        >>> packet = Packet.from_hex("C200B40A82")
        >>> packet.eval()
        3
        >>> packet.to_expression()
        '1 + 2'
        >>> packet.to_hex()
        'C200B40A82'
    """

    version: int = Field(ge=0, le=MAX_VERSION)
    kind: PacketKind

    @classmethod
    def literal(cls, value: int, version: int = 0) -> Packet:
        """Build a literal packet."""
        return cls(version=version, kind=LiteralKind(value=value))

    @classmethod
    def operator(
        cls,
        operation: Operation,
        subpackets: Iterable[Packet],
        length: TotalBits | PacketCount,
        version: int = 0,
    ) -> Packet:
        """Build an operator packet.

        The framing is stored verbatim; use ``TotalBits.for_packets`` or
        ``PacketCount.for_packets`` to derive one from the sub-packets.
        """
        return cls(
            version=version,
            kind=OperatorKind(length=length, operation=operation, subpackets=tuple(subpackets)),
        )

    @property
    def is_literal(self) -> bool:
        return isinstance(self.kind, LiteralKind)

    @property
    def is_operator(self) -> bool:
        return isinstance(self.kind, OperatorKind)

    @property
    def type_id(self) -> int:
        """Wire type id: 4 for literals, otherwise the operation's opcode."""
        if isinstance(self.kind, LiteralKind):
            return LITERAL_TYPE_ID
        return self.kind.operation.opcode

    @property
    def subpackets(self) -> tuple[Packet, ...]:
        """Direct children; empty for literals."""
        if isinstance(self.kind, OperatorKind):
            return self.kind.subpackets
        return ()

    # Codec shortcuts

    @classmethod
    def from_bytes(cls, data: bytes) -> Packet:
        from ..codec.decoder import decode

        return decode(data)

    @classmethod
    def from_hex(cls, text: str) -> Packet:
        from ..codec.decoder import decode_hex

        return decode_hex(text)

    def to_bytes(self) -> bytes:
        from ..codec.encoder import encode

        return encode(self)

    def to_hex(self) -> str:
        from ..codec.encoder import encode_hex

        return encode_hex(self)

    # Tree folds

    def eval(self) -> int:
        """Evaluate the tree as a nested arithmetic expression.

        Raises:
            ArgumentError: If an operator has an invalid number of operands
        """
        from ..evaluate import evaluate

        return evaluate(self)

    def to_literal(self) -> Packet:
        """Collapse the tree to a literal holding its value, keeping the version."""
        from ..evaluate import to_literal

        return to_literal(self)

    def to_expression(self) -> str:
        """Render the tree as an arithmetic expression string."""
        from ..expression import to_expression

        return to_expression(self)

    def flat_packets(self) -> list[Packet]:
        """Return every packet in the tree in post-order (children before parent)."""
        flat: list[Packet] = []
        for child in self.subpackets:
            flat.extend(child.flat_packets())
        flat.append(self)
        return flat

    def packet_count(self) -> int:
        """Number of packets nested anywhere below this one."""
        return len(self.flat_packets()) - 1


OperatorKind.model_rebuild()
Packet.model_rebuild()
