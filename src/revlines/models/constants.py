"""Terminator bytes and default capacities for reverse line reading.

Only single-byte terminators are recognised; multi-byte encodings are decoded
after a line has been split, never while scanning.
"""

LF = 0x0A
CR = 0x0D

MAX_BUFFER_SIZE = 1024 * 1024   # Working buffer (one chunk of the file)
MAX_LINE_BYTES = 1024 * 1024    # Line buffer; slot 0 is reserved

# Current file position once the head of the file has been loaded.
NO_MORE_DATA = -1
