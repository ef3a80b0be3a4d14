"""Literal value groups.

A literal's value travels as 4-bit groups, most significant group first,
each preceded by a continuation bit that is 1 for every group but the last.
"""

from __future__ import annotations

from typing import Iterable

from ..exceptions import LiteralValueError

GROUP_BITS = 4
GROUP_MASK = (1 << GROUP_BITS) - 1


def split_groups(value: int) -> list[int]:
    """Split a non-negative integer into its 4-bit groups, most significant first.

    Zero is a single group.

    Example:
        >>> split_groups(2021)
        [7, 14, 5]
    """
    if value < 0:
        raise ValueError(f"Literal value must be non-negative, got {value}")

    num_groups = max(1, -(-value.bit_length() // GROUP_BITS))
    return [
        (value >> (GROUP_BITS * i)) & GROUP_MASK for i in range(num_groups - 1, -1, -1)
    ]


def join_groups(groups: Iterable[int]) -> int:
    """Accumulate 4-bit groups, most significant first, into one integer.

    Raises:
        LiteralValueError: If no groups are given
    """
    value = None
    for group in groups:
        value = group if value is None else (value << GROUP_BITS) | group
    if value is None:
        raise LiteralValueError("Malformed literal value: no 4-bit groups")
    return value
