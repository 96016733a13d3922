"""Exception types for the framing subsystem."""

from __future__ import annotations

from ..exceptions import FramingError


class ChunkError(FramingError):
    """Base class for chunk encoding and decoding errors."""


class TruncatedInputError(ChunkError):
    """Raised when the buffer ends before a chunk field is complete."""


class ChecksumMismatchError(ChunkError):
    """Raised when the stored CRC disagrees with the recomputed one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"CRC mismatch: stored 0x{expected:08X}, computed 0x{actual:08X}")
        self.expected = expected
        self.actual = actual


class LengthOverflowError(ChunkError):
    """Raised when a payload does not fit the 32-bit length field."""

    def __init__(self, length: int) -> None:
        super().__init__(f"payload of {length} bytes exceeds the 32-bit length field")
        self.length = length


class ChunkTypeError(ChunkError):
    """Base class for chunk type construction errors."""


class InvalidFormatError(ChunkTypeError):
    """Raised when a chunk type does not have exactly four bytes."""


class InvalidCharacterError(ChunkTypeError):
    """Raised when bytes are not ASCII letters or not valid UTF-8."""
