"""PNG style chunk codec."""

from .chunk import DATA_PLACEHOLDER, METADATA_BYTES, Chunk
from .chunk_type import ChunkType, is_bit_set
from .exceptions import (
    ChecksumMismatchError,
    ChunkCodecError,
    ChunkError,
    ChunkTypeError,
    InvalidChunkTypeError,
    InvalidTextError,
    LengthMismatchError,
    TruncatedInputError,
    WrongLengthError,
)

__all__ = [
    "ChecksumMismatchError",
    "Chunk",
    "ChunkCodecError",
    "ChunkError",
    "ChunkType",
    "ChunkTypeError",
    "DATA_PLACEHOLDER",
    "InvalidChunkTypeError",
    "InvalidTextError",
    "LengthMismatchError",
    "METADATA_BYTES",
    "TruncatedInputError",
    "WrongLengthError",
    "is_bit_set",
]
