"""Byte and integer conversions used to build contract call arguments."""

from typing import Any

from envoi_resolver.constants import NODE_HASH_SIZE
from envoi_resolver.utils.errors import EncodingError


def bytes_to_uint(data: bytes) -> int:
    """Interpret a byte buffer as a big-endian unsigned integer.

    Args:
        data: Buffer to convert; an empty buffer maps to zero

    Returns:
        The unsigned integer value
    """
    return int.from_bytes(bytes(data), "big")


def uint_to_bytes(value: int) -> bytes:
    """Serialize an unsigned integer into a 32-byte big-endian buffer.

    Args:
        value: Integer in the range [0, 2**256)

    Returns:
        The value left-padded with zero bytes to exactly 32 bytes

    Raises:
        EncodingError: If the value is negative or needs more than 256 bits
    """
    if value < 0:
        raise EncodingError(
            f"Cannot encode negative value {value}",
            details={"value": str(value)}
        )
    try:
        return value.to_bytes(NODE_HASH_SIZE, "big")
    except OverflowError:
        raise EncodingError(
            f"Value needs {value.bit_length()} bits, at most {NODE_HASH_SIZE * 8} allowed",
            details={"value": str(value)}
        )


def strip_null_bytes(value: str) -> str:
    """Remove every null character from a string."""
    return value.replace("\0", "")


def decode_fixed_string(value: Any) -> str:
    """Turn a fixed-width ABI return value into text.

    Contract storage hands back fixed-length buffers whose unused tail is
    null-filled; the nulls are removed rather than kept as content.

    Args:
        value: Decoded ABI value (bytes, a list of byte values, or a string)

    Returns:
        The text with null padding removed
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return strip_null_bytes(value)
    if isinstance(value, (list, tuple)):
        value = bytes(value)
    return strip_null_bytes(bytes(value).decode("utf-8", errors="replace"))
