"""PNG style chunk framing: chunk types, chunks and CRC helpers."""

from .errors import (
    ChecksumMismatchError,
    ChunkError,
    ChunkTypeError,
    InvalidCharacterError,
    InvalidFormatError,
    LengthOverflowError,
    TruncatedInputError,
)
from .chunk_type import CHUNK_TYPE_SIZE, ChunkType
from .chunk import CHUNK_OVERHEAD, MAX_CHUNK_LENGTH, Chunk, read_chunk
from .crc import chunk_crc32, crc32
from .stream import encode_chunks, iter_chunks

__all__ = [
    "ChecksumMismatchError",
    "ChunkError",
    "ChunkTypeError",
    "InvalidCharacterError",
    "InvalidFormatError",
    "LengthOverflowError",
    "TruncatedInputError",
    "CHUNK_TYPE_SIZE",
    "ChunkType",
    "CHUNK_OVERHEAD",
    "MAX_CHUNK_LENGTH",
    "Chunk",
    "read_chunk",
    "chunk_crc32",
    "crc32",
    "encode_chunks",
    "iter_chunks",
]
