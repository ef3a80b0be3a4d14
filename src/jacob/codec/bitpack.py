"""Bit-level packing and unpacking utilities.

This module provides low-level bit manipulation for the BITS wire format.
All operations are big-endian: the most significant bit of each byte comes first.
"""

from __future__ import annotations

from ..exceptions import BitsError

MAX_FIELD_BITS = 64


class BitPacker:
    """Packs values bit-by-bit into a byte buffer.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(6, num_bits=3)
        >>> packer.write_bool(True)
        >>> packer.to_bytes()
        b'\\xd0'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._bits: list[int] = []  # List of 0s and 1s

    def write_bool(self, value: bool) -> None:
        """Write a boolean as a single bit.

        Args:
            value: Boolean value to write (True=1, False=0)
        """
        self._bits.append(1 if value else 0)

    def write_uint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (1-64)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bits < 1 or num_bits > MAX_FIELD_BITS:
            raise ValueError(f"num_bits must be 1-{MAX_FIELD_BITS}, got {num_bits}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        for i in range(num_bits - 1, -1, -1):
            self._bits.append((value >> i) & 1)

    def bit_length(self) -> int:
        """Return the current number of bits written."""
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).
        """
        if not self._bits:
            return b""

        padded_bits = self._bits + [0] * ((-len(self._bits)) % 8)

        result = bytearray()
        for i in range(0, len(padded_bits), 8):
            byte = 0
            for j in range(8):
                byte = (byte << 1) | padded_bits[i + j]
            result.append(byte)

        return bytes(result)


class BitUnpacker:
    """Reads values bit-by-bit from a byte buffer.

    Positions are relative to the unpacker's origin. ``sub_reader()`` returns
    a new unpacker over the same buffer whose origin is the current cursor,
    so a nested decode can be measured on its own; the parent then calls
    ``skip()`` with the child's ``position()`` to move past it.

    Example:
        >>> unpacker = BitUnpacker(b"\\xd2\\xfe\\x28")
        >>> unpacker.read_uint(3)
        6
        >>> child = unpacker.sub_reader()
        >>> child.read_uint(3)
        4
        >>> unpacker.skip(child.position())
        >>> unpacker.position()
        6
    """

    def __init__(self, data: bytes, *, _origin: int = 0) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = data
        self._origin = _origin
        self._end = len(data) * 8
        self._position = 0

    def _check_available(self, num_bits: int) -> None:
        remaining = self.bits_remaining()
        if num_bits > remaining:
            raise BitsError(f"Not enough bits: need {num_bits}, have {remaining}")

    def _bit_at(self, index: int) -> int:
        return (self._data[index >> 3] >> (7 - (index & 7))) & 1

    def read_bool(self) -> bool:
        """Read a single bit as a boolean.

        Raises:
            BitsError: If no more bits are available
        """
        if self.bits_remaining() < 1:
            raise BitsError("Attempted to read past end of bit buffer")

        value = self._bit_at(self._origin + self._position) == 1
        self._position += 1
        return value

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Args:
            num_bits: Number of bits to read (1-64)

        Raises:
            ValueError: If num_bits is out of range
            BitsError: If not enough bits are available
        """
        if num_bits < 1 or num_bits > MAX_FIELD_BITS:
            raise ValueError(f"num_bits must be 1-{MAX_FIELD_BITS}, got {num_bits}")
        self._check_available(num_bits)

        value = 0
        start = self._origin + self._position
        for index in range(start, start + num_bits):
            value = (value << 1) | self._bit_at(index)
        self._position += num_bits

        return value

    def skip(self, num_bits: int) -> None:
        """Advance the cursor without reading.

        Raises:
            ValueError: If num_bits is negative
            BitsError: If fewer than num_bits remain
        """
        if num_bits < 0:
            raise ValueError(f"Cannot skip a negative number of bits: {num_bits}")
        self._check_available(num_bits)
        self._position += num_bits

    def sub_reader(self) -> BitUnpacker:
        """Return a reader over the same buffer starting at the current cursor."""
        return BitUnpacker(self._data, _origin=self._origin + self._position)

    def bits_remaining(self) -> int:
        """Return the number of bits remaining in the buffer."""
        return self._end - self._origin - self._position

    def position(self) -> int:
        """Return the number of bits consumed since this reader's origin."""
        return self._position
