"""Tests for length-prefixed strings."""

import pytest
from binary_stream.buffer import ByteBuffer
from binary_stream.errors import OutOfRangeError
from binary_stream.utils import needs_swap


def test_empty_string_is_bare_prefix() -> None:
    buffer = ByteBuffer(0, growable=True)
    buffer.write_string("")
    assert buffer.get_buffer() == b"\x00\x00\x00\x00"

    buffer.rewind()
    assert buffer.read_string() == ""
    assert buffer.offset == 4


def test_prefix_counts_bytes_not_characters() -> None:
    buffer = ByteBuffer(0, growable=True, swap_endian=needs_swap("big"))
    buffer.write_string("héllo")  # 5 characters, 6 bytes

    assert buffer.offset == 10
    expected = b"\x00\x00\x00\x06" + "héllo".encode("utf-8")
    assert buffer.get_buffer()[: buffer.offset] == expected
    assert ByteBuffer.string_size("héllo") == 10


def test_round_trip_with_swap() -> None:
    buffer = ByteBuffer(0, growable=True, swap_endian=True)
    buffer.write_string("first")
    buffer.write_string(b"\x00\xFFraw")
    buffer.rewind()

    assert buffer.read_string() == "first"
    assert buffer.read_string_bytes() == b"\x00\xFFraw"
    assert buffer.offset == 4 + 5 + 4 + 5


def test_oversized_prefix_raises_and_restores_cursor() -> None:
    buffer = ByteBuffer(7)
    buffer.write_uint32(1000)
    buffer.write(b"abc")
    buffer.rewind()

    with pytest.raises(OutOfRangeError, match="need 1000, have 3"):
        buffer.read_string()
    assert buffer.offset == 0


def test_truncated_prefix_raises() -> None:
    buffer = ByteBuffer.from_bytes(b"\x01\x00")
    with pytest.raises(OutOfRangeError):
        buffer.read_string()
    assert buffer.offset == 0


def test_fixed_buffer_write_is_all_or_nothing() -> None:
    buffer = ByteBuffer(6)
    with pytest.raises(OutOfRangeError, match="need 7, have 6"):
        buffer.write_string("abc")

    assert buffer.offset == 0
    assert buffer.get_buffer() == bytes(6)


def test_string_size_of_bytes() -> None:
    assert ByteBuffer.string_size(b"") == 4
    assert ByteBuffer.string_size(b"\x01\x02") == 6


def test_invalid_utf8_raises_and_restores_cursor() -> None:
    buffer = ByteBuffer(6)
    buffer.write_string(b"\xff\xfe")
    buffer.rewind()

    with pytest.raises(UnicodeDecodeError):
        buffer.read_string()
    assert buffer.offset == 0
    assert buffer.read_string_bytes() == b"\xff\xfe"


def test_read_string_with_other_encoding() -> None:
    buffer = ByteBuffer(6)
    buffer.write_string(b"\xff\xfe")
    buffer.rewind()

    assert buffer.read_string("latin-1") == "ÿþ"
    assert buffer.offset == 6
