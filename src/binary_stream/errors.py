class ByteBufferError(Exception):
    """
    Base class for errors raised by a ByteBuffer.
    """


class OutOfRangeError(ByteBufferError, IndexError):
    """
    A read or write needs more bytes than the buffer has left.
    Raised before the buffer is mutated.
    """

    def __init__(self, operation: str, needed: int, available: int) -> None:
        self.operation = operation
        self.needed = needed
        self.available = available
        super().__init__(
            f"Not enough bytes in buffer to {operation}: need {needed}, have {available}"
        )


class InvalidOperationError(ByteBufferError, RuntimeError):
    """
    The buffer cannot perform the requested operation in its current mode.
    """


class BufferReleasedError(InvalidOperationError):
    """
    The buffer's storage was moved out with get_buffer(release=True).
    """

    def __init__(self) -> None:
        super().__init__("Buffer storage has been released; the buffer is no longer usable")
