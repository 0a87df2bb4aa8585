"""Reassemble lines from a working buffer scanned tail-first.

The line buffer is written front to back while the file is scanned back to
front, so it holds each line's bytes reversed. Reading it from the last
written slot down to slot 1 gives the line in its original order. Slot 0
holds an LF marker and is never part of a line.
"""

import logging

from revlines.models.constants import CR, LF
from revlines.models.errors import LineTooLongError
from revlines.reader.chunk_loader import ChunkLoader


logger = logging.getLogger(__name__)

_CR = bytes([CR])


class LineAssembler:
    """Pulls one logical line at a time out of a ChunkLoader.

    CR bytes are dropped wherever they appear, so CRLF and LF files produce
    the same lines. A lone CR inside a line is dropped too.
    """

    __slots__ = (
        "_loader",
        "_limit",
        "_buffer_pos",
        "_line",
        "_line_len",
        "line_filled",
        "reached_head",
    )

    def __init__(self, loader: ChunkLoader, max_line_bytes: int) -> None:
        self._loader = loader
        self._limit = max_line_bytes
        self._buffer_pos = -1
        self._line = bytearray(max_line_bytes)
        self._line[0] = LF
        self._line_len = 0
        self.line_filled = False
        self.reached_head = False

    @property
    def buffer_position(self) -> int:
        return self._buffer_pos

    def fill(self) -> None:
        """Assemble the next line into the line buffer.

        Stops at an LF, or at the head of the file (the first physical line,
        possibly empty). Raises LineTooLongError once the write cursor hits
        the cap.

        Each chunk is cut at the nearest LF rather than walked byte by byte;
        the write cursor advances exactly as a per-byte scan would.
        """
        write_pos = 1
        while True:
            if self._buffer_pos < 0:
                self._buffer_pos = self._loader.load()
                if self._buffer_pos < 0:
                    self.reached_head = True
                    logger.debug("Reached head of file")
                    break

            buffer = self._loader.buffer
            lf = buffer.rfind(LF, 0, self._buffer_pos + 1)
            segment = buffer[lf + 1 : self._buffer_pos + 1].replace(_CR, b"")
            self._buffer_pos = lf - 1 if lf >= 0 else -1

            if write_pos + len(segment) > self._limit:
                raise LineTooLongError(self._limit)
            self._line[write_pos : write_pos + len(segment)] = segment[::-1]
            write_pos += len(segment)

            if lf >= 0:
                break

        self._line_len = write_pos - 1
        self.line_filled = True

    def take_line(self) -> bytes:
        """Return the filled line in file order and mark the buffer free."""
        if not self.line_filled:
            raise ValueError("No filled line to take")
        self.line_filled = False
        return bytes(self._line[self._line_len : 0 : -1])
