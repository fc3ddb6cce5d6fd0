from .buffer import ByteBuffer
from .config import get_buffer_config, BufferConfig
from .constants import PrimitiveKind, BufferState
from .errors import (
    ByteBufferError,
    OutOfRangeError,
    InvalidOperationError,
    BufferReleasedError,
)

__all__ = [
    "ByteBuffer",
    "get_buffer_config",
    "BufferConfig",
    "PrimitiveKind",
    "BufferState",
    "ByteBufferError",
    "OutOfRangeError",
    "InvalidOperationError",
    "BufferReleasedError",
]
