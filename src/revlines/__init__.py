"""Memory-bounded reverse line reading for text files."""

from revlines.models.errors import LineTooLongError, ReverseReadError, ShortReadError
from revlines.reader.reader_config import ReaderConfig
from revlines.reader.reversed_reader import ReversedFileReader, readlines_reversed

__all__ = [
    "LineTooLongError",
    "ReaderConfig",
    "ReverseReadError",
    "ReversedFileReader",
    "ShortReadError",
    "readlines_reversed",
]
