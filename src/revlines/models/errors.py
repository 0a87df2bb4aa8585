"""Faults raised while reading a file backward."""


class ReverseReadError(Exception):
    """Base class for reverse reader faults."""


class LineTooLongError(ReverseReadError, ValueError):
    """A single line did not fit in the line buffer.

    The reader is left mid-line afterward and should be closed.
    """

    def __init__(self, limit: int) -> None:
        super().__init__(f"file has a line exceeding {limit} bytes")
        self.limit = limit


class ShortReadError(ReverseReadError, OSError):
    """An exact-length read came back short (file truncated underneath us)."""

    def __init__(self, offset: int, expected: int, received: int) -> None:
        super().__init__(
            f"Read of {expected} bytes at offset {offset} "
            f"returned only {received}"
        )
        self.offset = offset
        self.expected = expected
        self.received = received
