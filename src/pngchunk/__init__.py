"""Codec for PNG style length/type/data/CRC chunks."""

from .exceptions import FramingError, PngChunkError
from .framing import (
    ChecksumMismatchError,
    Chunk,
    ChunkError,
    ChunkType,
    ChunkTypeError,
    InvalidCharacterError,
    InvalidFormatError,
    LengthOverflowError,
    TruncatedInputError,
    encode_chunks,
    iter_chunks,
    read_chunk,
)

__all__ = [
    "ChecksumMismatchError",
    "Chunk",
    "ChunkError",
    "ChunkType",
    "ChunkTypeError",
    "FramingError",
    "InvalidCharacterError",
    "InvalidFormatError",
    "LengthOverflowError",
    "PngChunkError",
    "TruncatedInputError",
    "encode_chunks",
    "iter_chunks",
    "read_chunk",
]
