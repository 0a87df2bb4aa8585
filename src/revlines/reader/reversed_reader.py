"""Read a text file line by line, last line first.

Design: the file is never loaded whole. A ChunkLoader pulls bounded chunks
from the tail toward the head and a LineAssembler cuts them into lines, so
memory use is capped at one working buffer plus one line buffer regardless
of file size.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType

from revlines.models.constants import LF
from revlines.reader.chunk_loader import ChunkLoader
from revlines.reader.line_assembler import LineAssembler
from revlines.reader.reader_config import ReaderConfig


logger = logging.getLogger(__name__)


class ReversedFileReader:
    """Yields the lines of a file in reverse physical order.

    Terminators (LF or CRLF) are stripped and a single trailing LF at the
    end of the file does not produce an empty line. Not safe to share across
    threads; open one reader per consumer instead.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        config: ReaderConfig | None = None,
    ) -> None:
        self._config = config if config is not None else ReaderConfig()
        self._path = Path(path)
        self._file = self._path.open("rb")
        self._closed = False
        try:
            size = self._file.seek(0, os.SEEK_END)
            file_pos = size - 1
            if size > 0:
                self._file.seek(file_pos)
                if self._file.read(1)[0] == LF:
                    file_pos -= 1
        except BaseException:
            self._file.close()
            raise

        logger.debug("Opened %s (%d bytes)", self._path, size)
        self._exhausted = size == 0
        self._loader = ChunkLoader(self._file, file_pos, self._config.max_buffer_size)
        self._assembler = LineAssembler(self._loader, self._config.max_line_bytes)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def path(self) -> Path:
        return self._path

    def read_line(self) -> str | None:
        """Return the next line going backward, or None once all are read."""
        if self._closed:
            raise ValueError("I/O operation on closed reader")
        if self._exhausted:
            return None

        self._assembler.fill()
        if self._assembler.reached_head:
            self._exhausted = True
        raw = self._assembler.take_line()
        return raw.decode(self._config.encoding, self._config.errors)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._file.close()
        logger.debug("Closed %s", self._path)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line

    def __enter__(self) -> "ReversedFileReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


def readlines_reversed(
    path: str | os.PathLike[str],
    config: ReaderConfig | None = None,
) -> Iterator[str]:
    """Yield every line of *path*, last line first.

    Equivalent to reversed(path.read_text().splitlines()) without reading
    the whole file. The file is closed when the generator finishes or is
    closed early.
    """
    with ReversedFileReader(path, config) as reader:
        yield from reader
