from enum import IntEnum
from typing import Dict, Final, Tuple


class PrimitiveKind(IntEnum):
    """
    Fixed-width primitive types understood by the typed codec.
    Every kind maps to one entry in each of the tables below.
    """

    INT8 = 0
    UINT8 = 1
    INT16 = 2
    UINT16 = 3
    INT32 = 4
    UINT32 = 5
    INT64 = 6
    UINT64 = 7
    FLOAT32 = 8
    FLOAT64 = 9
    BYTE = 10


class BufferState(IntEnum):
    """
    Lifecycle of a buffer's storage.
    A RELEASED buffer has handed its storage to the caller and rejects every operation.
    """

    LIVE = 0
    RELEASED = 1


# Sizes (bytes) of the wire representation
BYTE_SIZE: Final[int] = 1
SHORT_SIZE: Final[int] = 2
INT_SIZE: Final[int] = 4
LONG_SIZE: Final[int] = 8
FLOAT_SIZE: Final[int] = 4
DOUBLE_SIZE: Final[int] = 8

# Length prefix written in front of every string payload
STRING_PREFIX_SIZE: Final[int] = INT_SIZE

PRIMITIVE_SIZES: Final[Dict[PrimitiveKind, int]] = {
    PrimitiveKind.INT8: BYTE_SIZE,
    PrimitiveKind.UINT8: BYTE_SIZE,
    PrimitiveKind.INT16: SHORT_SIZE,
    PrimitiveKind.UINT16: SHORT_SIZE,
    PrimitiveKind.INT32: INT_SIZE,
    PrimitiveKind.UINT32: INT_SIZE,
    PrimitiveKind.INT64: LONG_SIZE,
    PrimitiveKind.UINT64: LONG_SIZE,
    PrimitiveKind.FLOAT32: FLOAT_SIZE,
    PrimitiveKind.FLOAT64: DOUBLE_SIZE,
    PrimitiveKind.BYTE: BYTE_SIZE,
}

# struct format characters, always combined with the native "=" prefix
STRUCT_FORMATS: Final[Dict[PrimitiveKind, str]] = {
    PrimitiveKind.INT8: "b",
    PrimitiveKind.UINT8: "B",
    PrimitiveKind.INT16: "h",
    PrimitiveKind.UINT16: "H",
    PrimitiveKind.INT32: "i",
    PrimitiveKind.UINT32: "I",
    PrimitiveKind.INT64: "q",
    PrimitiveKind.UINT64: "Q",
    PrimitiveKind.FLOAT32: "f",
    PrimitiveKind.FLOAT64: "d",
    PrimitiveKind.BYTE: "B",
}

# Inclusive value ranges for the integer kinds.
# BYTE is absent on purpose: it wraps modulo 256 instead of being range checked.
INTEGER_RANGES: Final[Dict[PrimitiveKind, Tuple[int, int]]] = {
    PrimitiveKind.INT8: (-128, 127),
    PrimitiveKind.UINT8: (0, 255),
    PrimitiveKind.INT16: (-32768, 32767),
    PrimitiveKind.UINT16: (0, 65535),
    PrimitiveKind.INT32: (-2147483648, 2147483647),
    PrimitiveKind.UINT32: (0, 4294967295),
    PrimitiveKind.INT64: (-9223372036854775808, 9223372036854775807),
    PrimitiveKind.UINT64: (0, 18446744073709551615),
}

FLOAT_KINDS: Final[Tuple[PrimitiveKind, ...]] = (
    PrimitiveKind.FLOAT32,
    PrimitiveKind.FLOAT64,
)
