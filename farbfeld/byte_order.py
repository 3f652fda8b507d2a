"""Fixed-width integer <-> byte conversion helpers.

farbfeld is big-endian throughout, but the helpers take the byte order
explicitly so that both directions share one definition of it.
"""

from enum import Enum


class ByteOrder(str, Enum):
    """Byte order of a fixed-width unsigned integer."""

    LITTLE_ENDIAN = "little"
    BIG_ENDIAN = "big"

    @property
    def dtype_prefix(self) -> str:
        """numpy dtype prefix for this byte order (e.g. ``">u2"``)."""
        return "<" if self is ByteOrder.LITTLE_ENDIAN else ">"


def int_to_bytes(value: int, width: int, byte_order: ByteOrder) -> bytes:
    """Serialize an unsigned integer into exactly ``width`` bytes.

    Bits above ``width * 8`` are masked off, so the result always has the
    requested length.

    Args:
        value: Integer to serialize.
        width: Number of output bytes (1, 2, 4, ...).
        byte_order: Order in which the bytes are emitted.

    Returns:
        The ``width``-byte representation of ``value``.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    mask = (1 << (width * 8)) - 1
    return (value & mask).to_bytes(width, ByteOrder(byte_order).value)


def bytes_to_int(data: bytes, byte_order: ByteOrder) -> int:
    """Read an unsigned integer from a byte sequence of any length."""
    return int.from_bytes(bytes(data), ByteOrder(byte_order).value)
