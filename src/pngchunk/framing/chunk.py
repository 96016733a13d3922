"""Chunk building, parsing and serialisation.

A chunk is laid out on the wire as::

    length (4, big-endian) | chunk type (4) | data (length) | crc (4, big-endian)

The CRC covers the chunk type and data but not the length field.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Tuple, Union

from .chunk_type import CHUNK_TYPE_SIZE, ChunkType
from .crc import chunk_crc32, pack_crc32
from .errors import (
    ChecksumMismatchError,
    ChunkError,
    InvalidCharacterError,
    LengthOverflowError,
    TruncatedInputError,
)

logger = logging.getLogger(__name__)

LENGTH_SIZE = 4
CRC_SIZE = 4
MAX_CHUNK_LENGTH = 0xFFFFFFFF
CHUNK_OVERHEAD = LENGTH_SIZE + CHUNK_TYPE_SIZE + CRC_SIZE

Buffer = Union[bytes, bytearray, memoryview]

_U32 = struct.Struct(">I")


@dataclass(frozen=True)
class Chunk:
    """A single length-prefixed, CRC-protected chunk.

    Instances are only ever valid: :meth:`new` computes the length and CRC,
    :meth:`from_bytes` verifies them, and direct construction checks both.
    """

    length: int
    chunk_type: ChunkType
    data: bytes
    crc: int

    def __post_init__(self) -> None:
        if not isinstance(self.chunk_type, ChunkType):
            raise ChunkError("chunk_type must be a ChunkType")
        if not isinstance(self.data, bytes):
            raise ChunkError("data must be bytes")
        if len(self.data) > MAX_CHUNK_LENGTH:
            raise LengthOverflowError(len(self.data))
        if self.length != len(self.data):
            raise ChunkError(
                f"length field {self.length} does not match {len(self.data)} data bytes"
            )
        actual = chunk_crc32(bytes(self.chunk_type), self.data)
        if self.crc != actual:
            raise ChecksumMismatchError(self.crc, actual)

    @classmethod
    def new(cls, chunk_type: ChunkType, data: Buffer) -> "Chunk":
        """Create a chunk from a type and payload, computing length and CRC."""

        if not isinstance(chunk_type, ChunkType):
            raise ChunkError("chunk_type must be a ChunkType")
        payload = bytes(data)
        if len(payload) > MAX_CHUNK_LENGTH:
            raise LengthOverflowError(len(payload))
        crc = chunk_crc32(bytes(chunk_type), payload)
        return cls._verified(len(payload), chunk_type, payload, crc)

    @classmethod
    def _verified(cls, length: int, chunk_type: ChunkType, data: bytes, crc: int) -> "Chunk":
        # Fields already checked by the caller; skips the CRC pass in __post_init__.
        chunk = object.__new__(cls)
        object.__setattr__(chunk, "length", length)
        object.__setattr__(chunk, "chunk_type", chunk_type)
        object.__setattr__(chunk, "data", data)
        object.__setattr__(chunk, "crc", crc)
        return chunk

    @classmethod
    def from_bytes(cls, buffer: Buffer) -> "Chunk":
        """Parse the chunk at the start of *buffer*.

        Exactly ``12 + length`` bytes are read; anything after the CRC is
        ignored so a chunk can be taken from the front of a longer stream.
        Raises :class:`TruncatedInputError` when a field is cut short and
        :class:`ChecksumMismatchError` when the stored CRC is wrong.
        """

        chunk, _ = read_chunk(buffer)
        return chunk

    @property
    def encoded_size(self) -> int:
        return CHUNK_OVERHEAD + len(self.data)

    def data_as_string(self) -> str:
        """Decode the chunk data as UTF-8."""

        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidCharacterError("chunk data is not valid UTF-8") from exc

    def as_bytes(self) -> bytes:
        """Serialise the chunk; the length field is taken from the data."""

        return b"".join(
            (
                _U32.pack(len(self.data)),
                bytes(self.chunk_type),
                self.data,
                pack_crc32(self.crc),
            )
        )

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __str__(self) -> str:
        return str(list(self.as_bytes()))


def _take(view: memoryview, offset: int, size: int, field: str) -> bytes:
    end = offset + size
    if end > len(view):
        logger.debug(
            "Truncated %s at offset %d: need %d bytes, have %d",
            field,
            offset,
            size,
            max(len(view) - offset, 0),
        )
        raise TruncatedInputError(
            f"buffer ends inside chunk {field}: need {size} bytes at offset {offset}, "
            f"{max(len(view) - offset, 0)} available"
        )
    return bytes(view[offset:end])


def read_chunk(buffer: Buffer, offset: int = 0) -> Tuple[Chunk, int]:
    """Parse one chunk starting at *offset*.

    Returns ``(chunk, next_offset)`` where ``next_offset`` points just past
    the chunk's CRC.
    """

    if offset < 0:
        raise ChunkError("offset must be non-negative")
    view = memoryview(buffer).cast("B")

    (length,) = _U32.unpack(_take(view, offset, LENGTH_SIZE, "length"))
    offset += LENGTH_SIZE
    chunk_type = ChunkType.from_bytes(_take(view, offset, CHUNK_TYPE_SIZE, "type"))
    offset += CHUNK_TYPE_SIZE
    data = _take(view, offset, length, "data")
    offset += length
    actual = chunk_crc32(bytes(chunk_type), data)
    (stored,) = _U32.unpack(_take(view, offset, CRC_SIZE, "crc"))
    offset += CRC_SIZE

    if stored != actual:
        logger.debug(
            "CRC mismatch in %r chunk: stored %08X, computed %08X", chunk_type.value, stored, actual
        )
        raise ChecksumMismatchError(stored, actual)

    return Chunk._verified(length, chunk_type, data, stored), offset


__all__ = [
    "CHUNK_OVERHEAD",
    "Chunk",
    "MAX_CHUNK_LENGTH",
    "read_chunk",
]
