"""Configuration for packet decoding."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True)
class DecoderConfig:
    """Limits applied while decoding untrusted input.

    Attributes:
        max_depth: Maximum number of nested operator packets (default 128).
            The grammar allows unbounded nesting, so this caps recursion on
            adversarial input before the interpreter's own recursion limit.

    Examples:
        ```python
        from jacob import DecoderConfig, decode_hex

        packet = decode_hex("9C0141080250320F1802104A08", DecoderConfig(max_depth=8))
        ```
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
