"""
Utility functions for low-level byte manipulation and value range checks.
"""

import sys
from typing import Union

from .constants import INTEGER_RANGES, PrimitiveKind


def swap_bytes(data: Union[bytes, bytearray]) -> bytes:
    """Returns the byte sequence reversed (byte i exchanged with byte n-1-i)."""
    return bytes(reversed(data))


def check_range(kind: PrimitiveKind, number: int) -> None:
    """Raises ValueError if an integer does not fit in the given kind."""
    if kind not in INTEGER_RANGES:
        return
    low, high = INTEGER_RANGES[kind]
    if not low <= number <= high:
        name = kind.name.lower()
        raise ValueError(f"Value {number} out of {name} range ({low} to {high})")


def needs_swap(byte_order: str) -> bool:
    """
    Returns True if values laid out in the given byte order must be swapped on this host.

    Args:
        byte_order: 'little' or 'big'
    """
    if byte_order not in ("little", "big"):
        raise ValueError(f"Unknown byte order '{byte_order}', expected 'little' or 'big'")
    return byte_order != sys.byteorder
