"""CRC and integer packing helpers."""

from __future__ import annotations

import struct
import zlib

CRC32_INITIAL = 0

_U32 = struct.Struct(">I")


def chunk_crc(type_code: bytes, data: bytes) -> int:
    """Return the CRC32 of ``type_code + data``.

    The checksum uses the IEEE 802.3 polynomial, as :func:`zlib.crc32` does,
    and is fed both buffers in turn so they are never joined.
    """

    checksum = zlib.crc32(type_code, CRC32_INITIAL)
    return zlib.crc32(data, checksum) & 0xFFFFFFFF


def pack_u32(value: int) -> bytes:
    """Encode *value* as a big-endian unsigned 32-bit integer."""

    return _U32.pack(value)


def unpack_u32(raw: bytes) -> int:
    return _U32.unpack(raw)[0]


__all__ = ["chunk_crc", "pack_u32", "unpack_u32"]
