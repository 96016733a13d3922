import io
import logging

import pytest

from pngchunk.framing import Chunk, TruncatedInputError
from pngchunk.utils import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("pngchunk")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def test_configure_logging_explicit_level(package_logger):
    logger = configure_logging("debug")
    assert logger is package_logger
    assert logger.level == logging.DEBUG


def test_configure_logging_reads_environment(package_logger, monkeypatch):
    monkeypatch.setenv("PNGCHUNK_LOG_LEVEL", "warning")
    assert configure_logging().level == logging.WARNING


def test_configure_logging_defaults_and_unknown(package_logger, monkeypatch):
    monkeypatch.delenv("PNGCHUNK_LOG_LEVEL", raising=False)
    assert configure_logging().level == logging.INFO
    assert configure_logging("chatty").level == logging.INFO


def test_configure_logging_leaves_root_alone(package_logger):
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    configure_logging("debug")
    configure_logging("debug")
    assert len(package_logger.handlers) == 1
    assert root.handlers == root_handlers
    assert root.level == root_level


def test_codec_diagnostics_reach_the_stream(package_logger):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    with pytest.raises(TruncatedInputError):
        Chunk.from_bytes(b"\x00\x00")
    assert "DEBUG pngchunk.framing.chunk: Truncated length" in stream.getvalue()
