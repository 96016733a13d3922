"""CRC helper functions."""

from __future__ import annotations

import struct
import zlib

CRC32_INITIAL = 0


def crc32(data: bytes) -> int:
    """Compute the CRC-32/ISO-HDLC checksum of *data*.

    The checksum uses the reflected polynomial 0xEDB88320, as do
    :func:`zlib.crc32` and the PNG specification, and returns an unsigned
    32-bit integer.
    """

    return zlib.crc32(data, CRC32_INITIAL) & 0xFFFFFFFF


def chunk_crc32(chunk_type: bytes, data: bytes) -> int:
    """Return the CRC of a chunk, computed over ``chunk_type`` then ``data``."""

    return zlib.crc32(data, crc32(chunk_type)) & 0xFFFFFFFF


def pack_crc32(checksum: int) -> bytes:
    """Encode *checksum* as four big-endian bytes."""

    return struct.pack(">I", checksum)
