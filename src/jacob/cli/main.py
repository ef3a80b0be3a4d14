"""Main CLI entry point for jacob."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec.decoder import decode_hex
from ..exceptions import PacketError
from ..models.packet import Packet

IN_FORMATS = ("hex", "expr")
OUT_FORMATS = ("hex", "expr", "eval")


def parse_input(text: str, in_format: str) -> Packet:
    """Parse one packet string in the given input format.

    Raises:
        PacketError: If the input cannot be decoded
        NotImplementedError: For the expression input format
    """
    if in_format == "hex":
        return decode_hex(text)
    if in_format == "expr":
        raise NotImplementedError("Expression parsing has not yet been implemented.")
    raise ValueError(f"Unknown input format: {in_format}")


def render_output(packet: Packet, out_format: str) -> str:
    """Render a packet in the given output format.

    Raises:
        PacketError: If the packet cannot be encoded or evaluated
    """
    if out_format == "hex":
        return packet.to_hex()
    if out_format == "expr":
        return packet.to_expression()
    if out_format == "eval":
        return str(packet.eval())
    raise ValueError(f"Unknown output format: {out_format}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the jacob CLI.

    Returns:
        Exit code (0 when every input succeeded, 1 otherwise)
    """
    parser = argparse.ArgumentParser(
        description="jacob: BITS packet decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jacob D2FE28                           Evaluate a packet
  jacob -o expr 9C0141080250320F1802104A08
                                         Render a packet as an expression
  echo C200B40A82 | jacob -o hex         Re-encode packets read from stdin
        """,
    )

    parser.add_argument(
        "-i",
        "--in-format",
        choices=IN_FORMATS,
        default="hex",
        help="Input format (default: hex)",
    )

    parser.add_argument(
        "-o",
        "--out-format",
        choices=OUT_FORMATS,
        default="eval",
        help="Output format (default: eval)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log decoding details to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"jacob {__version__}",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="PACKET",
        help="Packets to process; read whitespace-separated from stdin when omitted",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    inputs = args.inputs or sys.stdin.read().split()
    if not inputs:
        parser.error("no packets given")

    failures = 0
    for text in inputs:
        try:
            packet = parse_input(text, args.in_format)
        except (PacketError, NotImplementedError) as e:
            print(f"Failed to parse packet with format `{args.in_format}`: {e}", file=sys.stderr)
            failures += 1
            continue

        try:
            print(render_output(packet, args.out_format))
        except PacketError as e:
            print(f"Failed to evaluate packet. Full error:\n{e}", file=sys.stderr)
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
