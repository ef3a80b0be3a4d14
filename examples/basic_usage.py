#!/usr/bin/env python3
"""Basic usage example for jacob.

This example demonstrates:
1. Decoding a hex transmission into a packet tree
2. Evaluating and rendering the tree
3. Building a tree in code and encoding it
4. Calculating packet sizes
"""

from __future__ import annotations

from jacob import (
    Operation,
    Packet,
    PacketCount,
    TotalBits,
    encoded_bits,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("jacob Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Decoding a transmission...")
    packet = Packet.from_hex("9C0141080250320F1802104A08")
    print(f"   Version: {packet.version}")
    print(f"   Operation: {packet.kind.operation.name}")
    print(f"   Nested packets: {packet.packet_count()}")
    print()

    print("2. Evaluating...")
    print(f"   Expression: {packet.to_expression()}")
    print(f"   Value: {packet.eval()}")
    print()

    print("3. Building a tree in code...")
    operands = [Packet.literal(6), Packet.literal(9)]
    product = Packet.operator(Operation.PRODUCT, operands, TotalBits.for_packets(operands))
    tree = Packet.operator(
        Operation.MAXIMUM, [product, Packet.literal(50)], PacketCount(count=2), version=3
    )
    print(f"   Expression: {tree.to_expression()}")
    print(f"   Value: {tree.eval()}")
    print(f"   Hex: {tree.to_hex()}")
    print()

    print("4. Sizes...")
    print(f"   {encoded_bits(tree)} bits = {encoded_size(tree)} bytes")
    print()

    assert Packet.from_hex(tree.to_hex()) == tree
    print("Round trip OK")


if __name__ == "__main__":
    main()
