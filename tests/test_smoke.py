"""Basic smoke tests for the pngchunk package."""

from __future__ import annotations

import pngchunk


def test_public_api_exports() -> None:
    """Ensure the top level package re-exports the codec."""
    for name in pngchunk.__all__:
        assert hasattr(pngchunk, name)


def test_errors_share_a_root() -> None:
    assert issubclass(pngchunk.ChecksumMismatchError, pngchunk.FramingError)
    assert issubclass(pngchunk.InvalidFormatError, pngchunk.PngChunkError)
    assert issubclass(pngchunk.TruncatedInputError, pngchunk.ChunkError)
