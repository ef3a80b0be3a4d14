"""Exception hierarchy for jacob.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PacketError for easy catching of any jacob-specific error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.operation import Operation


class PacketError(Exception):
    """Base exception for all jacob errors."""

    pass


class DecodeError(PacketError):
    """Raised when decoding a BITS packet fails.

    Examples:
        - Truncated data (insufficient bits)
        - Unknown operator type id
        - Operator nesting deeper than the configured limit
    """

    pass


class BitsError(DecodeError, IndexError):
    """Raised when a read requests more bits than remain in the buffer."""

    pass


class OperatorError(DecodeError):
    """Raised when a type id does not name an operation."""

    def __init__(self, op_id: int) -> None:
        super().__init__(f"Invalid operator ID {op_id}")
        self.op_id = op_id


class LiteralValueError(DecodeError):
    """Raised when a literal's continuation chain holds no 4-bit groups."""

    pass


class NestingError(DecodeError):
    """Raised when operator packets nest deeper than DecoderConfig.max_depth."""

    pass


class ArgumentError(PacketError):
    """Raised when an operator is evaluated with an invalid number of operands.

    Examples:
        - min/max with no sub-packets
        - A comparison with anything other than exactly two sub-packets
    """

    def __init__(self, count: int, operation: Operation) -> None:
        super().__init__(
            f"Invalid number of arguments {count} for operation {operation.name}"
        )
        self.count = count
        self.operation = operation


class HexError(PacketError, ValueError):
    """Raised when a string is not valid hexadecimal (odd length or non-hex digit)."""

    pass


class EncodeError(PacketError):
    """Raised when serializing a packet tree fails.

    Examples:
        - A framing length that does not fit its wire field
        - Sink rejected a write (see WriteError)
    """

    pass


class WriteError(EncodeError):
    """Raised when the output sink fails while writing encoded bytes."""

    pass
