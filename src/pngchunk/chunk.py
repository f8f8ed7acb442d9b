"""Length-prefixed, CRC protected chunk records."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .chunk_type import CHUNK_TYPE_SIZE, ChunkType
from .crc import chunk_crc, pack_u32, unpack_u32
from .exceptions import (
    ChecksumMismatchError,
    InvalidTextError,
    LengthMismatchError,
    TruncatedInputError,
)

logger = logging.getLogger(__name__)

LENGTH_SIZE = 4
CRC_SIZE = 4
METADATA_BYTES = LENGTH_SIZE + CHUNK_TYPE_SIZE + CRC_SIZE
DATA_PLACEHOLDER = "[data]"


class _Reader:
    """Sequential reader over a complete buffer that refuses short reads."""

    def __init__(self, blob: bytes) -> None:
        self._view = memoryview(blob)
        self._offset = 0

    def read_exact(self, size: int, field: str) -> bytes:
        available = len(self._view) - self._offset
        if available < size:
            raise TruncatedInputError(field=field, needed=size, available=available)
        start = self._offset
        self._offset += size
        return self._view[start : self._offset].tobytes()


@dataclass(frozen=True)
class Chunk:
    """A single chunk: ``length | type | data | crc`` on the wire.

    Constructing a chunk directly performs no validation; use :meth:`parse`
    for untrusted bytes.  Length and CRC are derived from the type and data
    every time they are requested.
    """

    chunk_type: ChunkType
    data: bytes

    METADATA_BYTES = METADATA_BYTES

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def crc(self) -> int:
        return chunk_crc(bytes(self.chunk_type), self.data)

    @property
    def wire_length(self) -> int:
        """Number of bytes this chunk occupies once serialised."""

        return METADATA_BYTES + self.length

    def data_as_str(self) -> str:
        """Decode the payload as UTF-8."""

        try:
            return bytes(self.data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidTextError("chunk data is not valid UTF-8") from exc

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                pack_u32(self.length),
                bytes(self.chunk_type),
                bytes(self.data),
                pack_u32(self.crc),
            )
        )

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        try:
            text = self.data_as_str()
        except InvalidTextError:
            text = DATA_PLACEHOLDER
        return f"Chunk Type : {self.chunk_type}\nData : {text}"

    @classmethod
    def parse(cls, blob: bytes) -> "Chunk":
        """Parse one chunk from the start of *blob*.

        Any bytes after the chunk's CRC are ignored.  Length and type are
        validated before the checksum is computed, so a damaged length field is
        reported as :class:`TruncatedInputError` rather than a CRC mismatch.
        """

        if not isinstance(blob, (bytes, bytearray, memoryview)):
            raise TypeError("chunk blob must be bytes")

        reader = _Reader(blob)
        length = unpack_u32(reader.read_exact(LENGTH_SIZE, "length"))
        chunk_type = ChunkType.from_bytes(reader.read_exact(CHUNK_TYPE_SIZE, "chunk type"))
        data = reader.read_exact(length, "data")
        if len(data) != length:
            raise LengthMismatchError(expected=length, actual=len(data))

        chunk = cls(chunk_type=chunk_type, data=data)

        expected = unpack_u32(reader.read_exact(CRC_SIZE, "crc"))
        computed = chunk.crc
        if expected != computed:
            logger.debug("CRC mismatch for %s chunk: %08x != %08x", chunk_type, expected, computed)
            raise ChecksumMismatchError(expected=expected, computed=computed)

        logger.debug("Parsed %s chunk with %d data bytes", chunk_type, length)
        return chunk


__all__ = ["Chunk", "DATA_PLACEHOLDER", "METADATA_BYTES"]
