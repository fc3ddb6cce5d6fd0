import pytest
from typing import Generator

from binary_stream.buffer import ByteBuffer


@pytest.fixture
def fixed_buffer() -> ByteBuffer:
    """A non-growable 4 byte buffer in native byte order."""
    return ByteBuffer(4)


@pytest.fixture
def growable_buffer() -> ByteBuffer:
    """A growable 4 byte buffer in native byte order."""
    return ByteBuffer(4, growable=True)


@pytest.fixture(autouse=True)
def reset_debug_flag() -> Generator[None, None, None]:
    """Make sure a test enabling debug output does not leak into the next one."""
    ByteBuffer.debug = False
    yield
    ByteBuffer.debug = False
