"""Configuration knobs for the reversed reader.

Defaults give a 1 MiB working buffer and a 1 MiB line buffer. Tests shrink
both to exercise chunk seams and the line cap with tiny files.
"""

from dataclasses import dataclass

from revlines.models.constants import MAX_BUFFER_SIZE, MAX_LINE_BYTES


@dataclass(slots=True, frozen=True)
class ReaderConfig:
    """Tuneable parameters for one ReversedFileReader."""

    max_buffer_size: int = MAX_BUFFER_SIZE
    max_line_bytes: int = MAX_LINE_BYTES   # Longest line is one byte less
    encoding: str = "utf-8"
    errors: str = "replace"

    def __post_init__(self) -> None:
        if self.max_buffer_size < 1:
            raise ValueError(
                f"max_buffer_size must be >= 1, got {self.max_buffer_size}"
            )
        if self.max_line_bytes < 2:
            raise ValueError(
                f"max_line_bytes must be >= 2, got {self.max_line_bytes}"
            )
