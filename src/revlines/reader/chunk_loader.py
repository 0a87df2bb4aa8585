"""Backward chunk loading from a seekable byte source.

Each load pulls the chunk that ends at the current file position into the
working buffer and moves the position back past it. Once the head of the
file has been loaded the position becomes NO_MORE_DATA and further loads
are no-ops.
"""

import logging
from typing import BinaryIO

from revlines.models.constants import NO_MORE_DATA
from revlines.models.errors import ShortReadError


logger = logging.getLogger(__name__)


class ChunkLoader:
    """Fills a bounded working buffer from the tail of a file toward its head.

    `file_position` is the offset of the next unread byte going backward and
    never increases. `buffer` always holds the most recent chunk; it is full
    size except for the final (head-of-file) chunk.
    """

    __slots__ = ("_file", "_capacity", "_file_pos", "buffer")

    def __init__(self, file: BinaryIO, file_position: int, capacity: int) -> None:
        self._file = file
        self._capacity = capacity
        self._file_pos = file_position if file_position >= 0 else NO_MORE_DATA
        self.buffer = bytearray()

    @property
    def file_position(self) -> int:
        return self._file_pos

    @property
    def exhausted(self) -> bool:
        return self._file_pos < 0

    def load(self) -> int:
        """Load the next chunk and return the index of its last byte.

        Returns -1 when there is nothing left to load.
        """
        if self._file_pos < 0:
            return -1

        remaining = self._file_pos + 1
        if remaining < self._capacity:
            # Head of file: shrink the buffer to exactly what is left.
            self.buffer = bytearray(remaining)
            self._read_exact(0)
            self._file_pos = NO_MORE_DATA
            logger.debug("Loaded final %d bytes at head of file", remaining)
        else:
            if len(self.buffer) != self._capacity:
                self.buffer = bytearray(self._capacity)
            start = self._file_pos - self._capacity + 1
            self._read_exact(start)
            self._file_pos -= self._capacity
            logger.debug("Loaded %d bytes at offset %d", self._capacity, start)

        return len(self.buffer) - 1

    def _read_exact(self, offset: int) -> None:
        self._file.seek(offset)
        received = self._file.readinto(self.buffer) or 0
        if received != len(self.buffer):
            raise ShortReadError(offset, len(self.buffer), received)
