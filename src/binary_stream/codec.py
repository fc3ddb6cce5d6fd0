"""
Generic encode/decode of fixed-width primitives.

Values are packed in native byte order. When ``swap`` is set the packed bytes
are reversed, which converts between little and big endian layouts. Single
byte kinds are never swapped.
"""

import struct
from typing import Union

from .constants import (
    FLOAT_KINDS,
    PRIMITIVE_SIZES,
    STRUCT_FORMATS,
    PrimitiveKind,
)
from .utils import check_range, swap_bytes

Number = Union[int, float]


def size_of(kind: PrimitiveKind) -> int:
    """Returns the wire width of a kind in bytes."""
    return PRIMITIVE_SIZES[kind]


def encode_value(kind: PrimitiveKind, value: Number, swap: bool = False) -> bytes:
    """
    Packs a value into its fixed-width representation.

    Args:
        kind: The primitive kind to encode as
        value: An int for integer kinds, an int or float for float kinds
        swap: Reverse the byte order of the packed value

    Raises:
        ValueError: If the value does not fit in the kind
        TypeError: If the value is not a number of the right sort
    """
    if kind in FLOAT_KINDS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(
                f"Expected int or float for {kind.name.lower()}, got {type(value).__name__}"
            )
        try:
            value = float(value)
        except OverflowError as e:
            raise ValueError(f"Value {value} out of {kind.name.lower()} range") from e
    else:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"Expected int for {kind.name.lower()}, got {type(value).__name__}"
            )
        if kind == PrimitiveKind.BYTE:
            value &= 0xFF
        else:
            check_range(kind, value)

    try:
        packed = struct.pack("=" + STRUCT_FORMATS[kind], value)
    except OverflowError as e:
        raise ValueError(f"Value {value} out of {kind.name.lower()} range") from e
    if swap and len(packed) > 1:
        packed = swap_bytes(packed)
    return packed


def decode_value(
    kind: PrimitiveKind, data: Union[bytes, bytearray], swap: bool = False
) -> Number:
    """
    Unpacks a value from exactly size_of(kind) bytes.

    Args:
        kind: The primitive kind to decode
        data: The raw bytes as read from the buffer
        swap: Reverse the byte order before unpacking
    """
    width = PRIMITIVE_SIZES[kind]
    if len(data) != width:
        raise ValueError(
            f"{kind.name.lower()} needs exactly {width} bytes, got {len(data)}"
        )
    if swap and width > 1:
        data = swap_bytes(data)
    return struct.unpack("=" + STRUCT_FORMATS[kind], data)[0]
