"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from jacob import (
    decode,
    decode_hex,
    encode,
    encode_hex,
    encoded_bits,
    encoded_size,
    to_expression,
)
from jacob.exceptions import BitsError
from jacob.models import Operation, Packet, PacketCount, TotalBits
from jacob.utils.hexcodec import bytes_from_hex, hex_from_bytes

versions = st.integers(min_value=0, max_value=7)
literals = st.builds(Packet.literal, st.integers(min_value=0, max_value=1 << 80), versions)


def _operator(
    operation: Operation, subpackets: list[Packet], by_count: bool, version: int
) -> Packet:
    if by_count:
        length: TotalBits | PacketCount = PacketCount.for_packets(subpackets)
    else:
        length = TotalBits.for_packets(subpackets)
    return Packet.operator(operation, subpackets, length, version)


def _operators(children: st.SearchStrategy[Packet]) -> st.SearchStrategy[Packet]:
    return st.builds(
        _operator,
        st.sampled_from(list(Operation)),
        st.lists(children, max_size=4),
        st.booleans(),
        versions,
    )


packets = st.recursive(literals, _operators, max_leaves=12)


class TestCodecProperties:
    """Property-based tests for the packet codec."""

    @settings(max_examples=200)
    @given(packet=packets)
    def test_encode_decode_roundtrip(self, packet: Packet) -> None:
        """Test encode/decode is invertible, framing included."""
        assert decode(encode(packet)) == packet

    @given(packet=packets)
    def test_hex_reencode_is_identity(self, packet: Packet) -> None:
        """Re-encoding a decoded hex string reproduces it exactly."""
        text = encode_hex(packet)
        assert encode_hex(decode_hex(text)) == text

    @given(packet=packets)
    def test_zero_padding_to_byte_boundary(self, packet: Packet) -> None:
        data = encode(packet)
        padding = len(data) * 8 - encoded_bits(packet)

        assert len(data) == encoded_size(packet)
        assert 0 <= padding < 8
        assert data[-1] & ((1 << padding) - 1) == 0

    @given(packet=packets)
    def test_dropping_last_byte_underflows(self, packet: Packet) -> None:
        with pytest.raises(BitsError):
            decode(encode(packet)[:-1])

    @given(packet=packets)
    def test_render_total(self, packet: Packet) -> None:
        """Rendering never fails, whatever the operand counts."""
        assert isinstance(to_expression(packet), str)


class TestLiteralProperties:
    """Property-based tests for literal values."""

    @given(value=st.integers(min_value=0), version=versions)
    def test_literal_roundtrip(self, value: int, version: int) -> None:
        packet = Packet.literal(value, version=version)
        assert decode(encode(packet)) == packet


class TestHexProperties:
    """Property-based tests for the hex codec."""

    @given(data=st.binary(max_size=200))
    def test_hex_roundtrip(self, data: bytes) -> None:
        assert bytes_from_hex(hex_from_bytes(data)) == data

    @given(data=st.binary(max_size=200))
    def test_lowercase_accepted(self, data: bytes) -> None:
        assert bytes_from_hex(hex_from_bytes(data).lower()) == data
