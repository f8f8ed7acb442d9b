from pngchunk.crc import chunk_crc, pack_u32, unpack_u32


def test_chunk_crc_known_value():
    assert chunk_crc(b"", b"hello") == 0x3610A686
    assert chunk_crc(b"hel", b"lo") == 0x3610A686


def test_chunk_crc_of_message():
    type_code = b"RuSt"
    data = b"This is where your secret message will be!"
    assert chunk_crc(type_code, data) == 2882656334


def test_u32_helpers_are_big_endian():
    assert pack_u32(42) == b"\x00\x00\x00\x2a"
    assert unpack_u32(b"\xab\xcd\xef\x01") == 0xABCDEF01
    assert unpack_u32(pack_u32(0xFFFFFFFF)) == 0xFFFFFFFF
