"""Unit tests for literal value groups."""

from __future__ import annotations

import pytest

from jacob.codec.literal import join_groups, split_groups
from jacob.exceptions import DecodeError, LiteralValueError


class TestSplitGroups:
    """Test splitting values into 4-bit groups."""

    def test_zero_is_one_group(self) -> None:
        assert split_groups(0) == [0]

    def test_single_group(self) -> None:
        assert split_groups(15) == [15]

    def test_most_significant_first(self) -> None:
        assert split_groups(2021) == [0x7, 0xE, 0x5]

    def test_left_padded_to_group_boundary(self) -> None:
        # 0b10000 needs 5 bits, so it spans two groups: 0001 0000
        assert split_groups(16) == [1, 0]

    def test_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            split_groups(-1)


class TestJoinGroups:
    """Test accumulating 4-bit groups."""

    def test_join(self) -> None:
        assert join_groups([0x7, 0xE, 0x5]) == 2021

    def test_leading_zero_groups(self) -> None:
        assert join_groups([0, 0, 1]) == 1

    def test_no_groups(self) -> None:
        with pytest.raises(LiteralValueError, match="no 4-bit groups"):
            join_groups([])

    def test_malformed_literal_is_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            join_groups(iter(()))

    def test_beyond_64_bits(self) -> None:
        value = (1 << 100) + 12345
        assert join_groups(split_groups(value)) == value
