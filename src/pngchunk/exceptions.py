"""Custom exception hierarchy for the PNG chunk codec."""
from __future__ import annotations


class PngChunkError(Exception):
    """Base class for all pngchunk errors."""


class FramingError(PngChunkError):
    """Raised when a chunk cannot be framed or unframed."""


__all__ = [
    "FramingError",
    "PngChunkError",
]
