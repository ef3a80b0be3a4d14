"""Operator packet operations and their opcodes."""

from __future__ import annotations

import enum

from ..exceptions import OperatorError

LITERAL_TYPE_ID = 4


class Operation(enum.IntEnum):
    """Operation carried by an operator packet.

    The member value is the 3-bit type id on the wire. Type id 4 is reserved
    for literal packets and has no member.
    """

    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

    @classmethod
    def from_opcode(cls, op_id: int) -> Operation:
        """Look up the operation for a type id.

        Raises:
            OperatorError: If op_id is 4 (literal) or not a known opcode
        """
        try:
            return cls(op_id)
        except ValueError as e:
            raise OperatorError(op_id) from e

    @property
    def opcode(self) -> int:
        return int(self)

    @property
    def func_name(self) -> str:
        """Function-call spelling, e.g. ``sum`` or ``gt``."""
        return _FUNC_NAMES[self]

    @property
    def symbol(self) -> str:
        """Infix symbol; function-style operations render with their name."""
        return _SYMBOLS[self]

    @property
    def is_function(self) -> bool:
        """True for operations always rendered as ``name(args)`` (min and max)."""
        return self in (Operation.MINIMUM, Operation.MAXIMUM)

    def __str__(self) -> str:
        return self.symbol


_FUNC_NAMES = {
    Operation.SUM: "sum",
    Operation.PRODUCT: "product",
    Operation.MINIMUM: "min",
    Operation.MAXIMUM: "max",
    Operation.GREATER_THAN: "gt",
    Operation.LESS_THAN: "lt",
    Operation.EQUAL_TO: "eq",
}

_SYMBOLS = {
    Operation.SUM: "+",
    Operation.PRODUCT: "*",
    Operation.MINIMUM: "min",
    Operation.MAXIMUM: "max",
    Operation.GREATER_THAN: ">",
    Operation.LESS_THAN: "<",
    Operation.EQUAL_TO: "==",
}
