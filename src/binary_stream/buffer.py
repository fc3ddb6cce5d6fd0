import warnings
from typing import Optional, Union

from .codec import Number, decode_value, encode_value, size_of
from .config import BufferConfig
from .constants import STRING_PREFIX_SIZE, BufferState, PrimitiveKind
from .errors import BufferReleasedError, InvalidOperationError, OutOfRangeError
from .utils import check_range

BytesLike = Union[bytes, bytearray, memoryview]


class ByteBuffer(object):
    """
    An owned, contiguous byte region with a read/write cursor.

    Every typed accessor goes through write() and read(). Reads and writes are
    bounds checked and either move the cursor by the full count or raise without
    touching the buffer. A growable buffer doubles its capacity until a write fits.
    """

    debug: bool = False
    """
    Set to true to display every reallocation and release.
    """

    # Instance attributes for type checking
    _storage: Optional[bytearray]
    _offset: int
    _growable: bool
    _state: BufferState
    swap_endian: bool

    def __init__(
        self, capacity: int = 0, growable: bool = False, swap_endian: bool = False
    ) -> None:
        """
        Creates a buffer with zero-filled storage.

        Args:
            capacity: Initial storage size in bytes
            growable: Allow writes past the end to reallocate the storage
            swap_endian: Reverse the byte order of multi-byte primitives
        """
        if capacity < 0:
            raise ValueError(f"Capacity must be >= 0, got {capacity}")
        self._storage = bytearray(capacity)
        self._offset = 0
        self._growable = growable
        self._state = BufferState.LIVE
        self.swap_endian = swap_endian

    @classmethod
    def from_bytes(
        cls,
        data: BytesLike,
        count: Optional[int] = None,
        growable: bool = False,
        swap_endian: bool = False,
    ) -> "ByteBuffer":
        """
        Creates a buffer holding a copy of an external byte region.

        Args:
            data: The bytes to copy
            count: Number of leading bytes to copy, all of them if None
            growable: Allow writes past the end to reallocate the storage
            swap_endian: Reverse the byte order of multi-byte primitives
        """
        if count is None:
            count = len(data)
        elif count < 0:
            raise ValueError(f"Count must be >= 0, got {count}")
        elif count > len(data):
            warnings.warn(
                f"Requested {count} bytes but source only has {len(data)}; "
                f"copying {len(data)}",
                RuntimeWarning,
            )
            count = len(data)

        buffer = cls(0, growable=growable, swap_endian=swap_endian)
        buffer._storage = bytearray(data[:count])
        return buffer

    @classmethod
    def adopt(
        cls,
        storage: bytearray,
        count: Optional[int] = None,
        growable: bool = False,
        swap_endian: bool = False,
    ) -> "ByteBuffer":
        """
        Creates a buffer that takes ownership of an existing bytearray without copying.
        The caller must not touch the bytearray afterwards.

        Args:
            storage: The bytearray to adopt
            count: Usable length; storage beyond it is dropped. Whole storage if None
            growable: Allow writes past the end to reallocate the storage
            swap_endian: Reverse the byte order of multi-byte primitives
        """
        if not isinstance(storage, bytearray):
            raise TypeError(
                f"Only a bytearray can be adopted, got {type(storage).__name__}"
            )
        if count is not None:
            if not 0 <= count <= len(storage):
                raise ValueError(
                    f"Count {count} outside storage of {len(storage)} bytes"
                )
            del storage[count:]

        buffer = cls(0, growable=growable, swap_endian=swap_endian)
        buffer._storage = storage
        return buffer

    @classmethod
    def from_config(cls, config: BufferConfig) -> "ByteBuffer":
        """
        Creates a zero-filled buffer described by a BufferConfig.
        """
        return cls(
            config.capacity, growable=config.growable, swap_endian=config.swap_endian
        )

    @property
    def capacity(self) -> int:
        """Current size of the storage in bytes."""
        return len(self._live_storage())

    @property
    def offset(self) -> int:
        """Current cursor position."""
        return self._offset

    @property
    def remaining(self) -> int:
        """
        Bytes left before a read fails. On a growable buffer this is how many bytes
        can still be written before a reallocation.
        """
        return len(self._live_storage()) - self._offset

    @property
    def growable(self) -> bool:
        return self._growable

    @property
    def state(self) -> BufferState:
        return self._state

    @property
    def released(self) -> bool:
        return self._state == BufferState.RELEASED

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self) -> str:
        if self.released:
            return "ByteBuffer(released)"
        return (
            f"ByteBuffer(offset={self._offset}, capacity={len(self._storage)}, "
            f"growable={self._growable}, swap_endian={self.swap_endian})"
        )

    def _live_storage(self) -> bytearray:
        if self._state == BufferState.RELEASED or self._storage is None:
            raise BufferReleasedError()
        return self._storage

    def read(self, count: int) -> bytes:
        """
        Reads bytes from the cursor and advances it.

        Args:
            count: Number of bytes to read

        Returns:
            Exactly count bytes

        Raises:
            OutOfRangeError: If fewer than count bytes remain. The cursor is not moved.
        """
        storage = self._live_storage()
        if count < 0:
            raise ValueError(f"Count must be >= 0, got {count}")
        if count == 0:
            return b""

        remaining = len(storage) - self._offset
        if count > remaining:
            raise OutOfRangeError("read", count, remaining)

        chunk = bytes(storage[self._offset : self._offset + count])
        self._offset += count
        return chunk

    def read_into(
        self, target: Union[bytearray, memoryview], count: Optional[int] = None
    ) -> int:
        """
        Reads bytes from the cursor into a caller supplied writable buffer.

        Args:
            target: Destination, filled from index 0
            count: Number of bytes to read, len(target) if None

        Returns:
            The number of bytes read, always count
        """
        view = memoryview(target)
        if view.readonly or view.format != "B":
            raise TypeError("Target must be a writable buffer of unsigned bytes")
        if count is None:
            count = len(view)
        elif count > len(view):
            raise ValueError(f"Target holds {len(view)} bytes, cannot read {count}")

        view[:count] = self.read(count)
        return count

    def write(self, data: BytesLike, count: Optional[int] = None) -> None:
        """
        Copies data into the buffer at the cursor and advances it.

        Args:
            data: The bytes to write
            count: Number of leading bytes of data to write, all of them if None

        Raises:
            OutOfRangeError: If the data does not fit and the buffer is not growable.
                             Nothing is written.
        """
        storage = self._live_storage()
        if count is None:
            count = len(data)
        elif count < 0:
            raise ValueError(f"Count must be >= 0, got {count}")
        elif count > len(data):
            raise ValueError(f"Data has {len(data)} bytes, cannot write {count}")

        remaining = len(storage) - self._offset
        if count > remaining:
            if not self._growable:
                raise OutOfRangeError("write", count, remaining)
            self._resize(self._offset + count)

        storage[self._offset : self._offset + count] = data[:count]
        self._offset += count

    def _resize(self, minimal_size: int) -> None:
        """
        Grows the storage by doubling until it holds at least minimal_size bytes.
        An empty buffer cannot double, so it grows straight to minimal_size.
        """
        storage = self._live_storage()
        if not self._growable:
            raise InvalidOperationError("Cannot resize a buffer that is not growable")

        old_size = len(storage)
        new_size = old_size if old_size > 0 else minimal_size
        while new_size < minimal_size:
            new_size *= 2

        if new_size == old_size:
            return

        if self.debug:
            print(f"Resizing buffer: {old_size} -> {new_size} bytes")
        storage.extend(bytes(new_size - old_size))

    def skip(self, count: int) -> int:
        """
        Moves the cursor forward, stopping at the end of the buffer.

        Args:
            count: Number of bytes to skip

        Returns:
            The number of bytes actually skipped
        """
        storage = self._live_storage()
        if count < 0:
            raise ValueError(f"Count must be >= 0, got {count}")
        count = min(count, len(storage) - self._offset)
        self._offset += count
        return count

    def at_end(self) -> bool:
        """
        Check if the cursor has reached the end of the buffer.
        """
        return self._offset >= len(self._live_storage())

    def rewind(self) -> None:
        """
        Rewind the cursor to the beginning of the buffer.
        """
        self._live_storage()
        self._offset = 0

    def get_buffer(self, release: bool = False) -> Union[bytes, bytearray]:
        """
        Get the buffer contents.

        Args:
            release: Move the storage out instead of copying it. The buffer becomes
                     unusable and every later operation raises BufferReleasedError.

        Returns:
            A bytes copy of the whole storage, or the storage bytearray itself on release
        """
        storage = self._live_storage()
        if not release:
            return bytes(storage)

        if self.debug:
            print(f"Releasing buffer storage ({len(storage)} bytes)")
        self._storage = None
        self._state = BufferState.RELEASED
        return storage

    def set_buffer(self, data: BytesLike) -> None:
        """
        Replaces the storage with a copy of data and rewinds the cursor.
        Brings a released buffer back to life.

        Raises:
            InvalidOperationError: If a live buffer that is not growable would change size.
        """
        if (
            not self._growable
            and self._state == BufferState.LIVE
            and self._storage is not None
            and len(data) != len(self._storage)
        ):
            raise InvalidOperationError(
                f"Cannot change the capacity of a buffer that is not growable "
                f"({len(self._storage)} -> {len(data)} bytes)"
            )
        self._storage = bytearray(data)
        self._offset = 0
        self._state = BufferState.LIVE

    def write_value(self, kind: PrimitiveKind, value: Number) -> None:
        """
        Encodes a primitive at the cursor, honoring swap_endian.
        """
        self.write(encode_value(kind, value, self.swap_endian))

    def read_value(self, kind: PrimitiveKind) -> Number:
        """
        Decodes a primitive at the cursor, honoring swap_endian.
        """
        return decode_value(kind, self.read(size_of(kind)), self.swap_endian)

    def write_int8(self, value: int) -> None:
        self.write_value(PrimitiveKind.INT8, value)

    def write_uint8(self, value: int) -> None:
        self.write_value(PrimitiveKind.UINT8, value)

    def write_int16(self, value: int) -> None:
        self.write_value(PrimitiveKind.INT16, value)

    def write_uint16(self, value: int) -> None:
        self.write_value(PrimitiveKind.UINT16, value)

    def write_int32(self, value: int) -> None:
        self.write_value(PrimitiveKind.INT32, value)

    def write_uint32(self, value: int) -> None:
        self.write_value(PrimitiveKind.UINT32, value)

    def write_int64(self, value: int) -> None:
        self.write_value(PrimitiveKind.INT64, value)

    def write_uint64(self, value: int) -> None:
        self.write_value(PrimitiveKind.UINT64, value)

    def write_float32(self, value: float) -> None:
        self.write_value(PrimitiveKind.FLOAT32, value)

    def write_float64(self, value: float) -> None:
        self.write_value(PrimitiveKind.FLOAT64, value)

    def write_byte(self, value: int) -> None:
        """Writes one byte; values wrap modulo 256."""
        self.write_value(PrimitiveKind.BYTE, value)

    def read_int8(self) -> int:
        return int(self.read_value(PrimitiveKind.INT8))

    def read_uint8(self) -> int:
        return int(self.read_value(PrimitiveKind.UINT8))

    def read_int16(self) -> int:
        return int(self.read_value(PrimitiveKind.INT16))

    def read_uint16(self) -> int:
        return int(self.read_value(PrimitiveKind.UINT16))

    def read_int32(self) -> int:
        return int(self.read_value(PrimitiveKind.INT32))

    def read_uint32(self) -> int:
        return int(self.read_value(PrimitiveKind.UINT32))

    def read_int64(self) -> int:
        return int(self.read_value(PrimitiveKind.INT64))

    def read_uint64(self) -> int:
        return int(self.read_value(PrimitiveKind.UINT64))

    def read_float32(self) -> float:
        return float(self.read_value(PrimitiveKind.FLOAT32))

    def read_float64(self) -> float:
        return float(self.read_value(PrimitiveKind.FLOAT64))

    def read_byte(self) -> int:
        return int(self.read_value(PrimitiveKind.BYTE))

    @staticmethod
    def string_size(value: Union[str, BytesLike]) -> int:
        """
        Returns the encoded size of a string: the 4 byte length prefix plus its bytes.
        """
        if isinstance(value, str):
            value = value.encode("utf-8")
        return STRING_PREFIX_SIZE + len(value)

    def write_string(self, value: Union[str, BytesLike]) -> None:
        """
        Writes a 4 byte length prefix followed by the raw bytes of value.
        str values are UTF-8 encoded; the prefix counts bytes, not characters.

        Raises:
            OutOfRangeError: If prefix and payload do not fit in a non-growable buffer.
                             Nothing is written.
        """
        storage = self._live_storage()
        payload = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        check_range(PrimitiveKind.INT32, len(payload))

        needed = STRING_PREFIX_SIZE + len(payload)
        remaining = len(storage) - self._offset
        if needed > remaining and not self._growable:
            raise OutOfRangeError("write", needed, remaining)

        self.write_value(PrimitiveKind.INT32, len(payload))
        self.write(payload)

    def read_string_bytes(self) -> bytes:
        """
        Reads a length-prefixed string and returns its raw payload.

        Raises:
            OutOfRangeError: If the prefix or the payload it announces exceeds the
                             remaining bytes. The cursor is left where it was.
        """
        start = self._offset
        length = int(self.read_value(PrimitiveKind.UINT32))
        try:
            return self.read(length)
        except OutOfRangeError:
            self._offset = start
            raise

    def read_string(self, encoding: str = "utf-8") -> str:
        """
        Reads a length-prefixed string and decodes it.

        Args:
            encoding: Codec used to decode the payload bytes

        Raises:
            UnicodeDecodeError: If the payload is not valid in encoding. The cursor
                                is left where it was.
        """
        start = self._offset
        payload = self.read_string_bytes()
        try:
            return payload.decode(encoding)
        except UnicodeDecodeError:
            self._offset = start
            raise
