import zlib

from pngchunk.framing.crc import chunk_crc32, crc32, pack_crc32


def test_crc32_known_value():
    payload = b"hello"
    assert crc32(payload) == 0x3610A686


def test_crc32_check_value():
    # CRC-32/ISO-HDLC check value for the standard "123456789" input.
    assert crc32(b"123456789") == 0xCBF43926


def test_chunk_crc_covers_type_then_data():
    assert chunk_crc32(b"IEND", b"") == 0xAE426082
    assert chunk_crc32(b"RuSt", b"payload") == crc32(b"RuStpayload")
    assert chunk_crc32(b"RuSt", b"payload") == zlib.crc32(b"RuStpayload")


def test_pack_crc32_is_big_endian():
    assert pack_crc32(0xAE426082) == b"\xae\x42\x60\x82"
