"""Helpers for reading and writing back-to-back chunks in one buffer."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .chunk import Buffer, Chunk, read_chunk
from .errors import TruncatedInputError

logger = logging.getLogger(__name__)


def iter_chunks(buffer: Buffer, offset: int = 0) -> Iterator[Chunk]:
    """Yield every chunk in *buffer* from *offset* to the end.

    No ordering or chunk type rules are applied.  A partial chunk at the end
    of the buffer, or an *offset* past its end, raises
    :class:`~pngchunk.framing.errors.TruncatedInputError`.
    """

    end = len(memoryview(buffer).cast("B"))
    if offset > end:
        raise TruncatedInputError(f"offset {offset} is past the end of a {end} byte buffer")
    while offset < end:
        chunk, next_offset = read_chunk(buffer, offset)
        logger.debug(
            "Read %r chunk at offset %d (%d data bytes)", chunk.chunk_type.value, offset, chunk.length
        )
        offset = next_offset
        yield chunk


def encode_chunks(chunks: Iterable[Chunk]) -> bytes:
    """Serialise *chunks* back to back."""

    return b"".join(chunk.as_bytes() for chunk in chunks)


__all__ = ["encode_chunks", "iter_chunks"]
