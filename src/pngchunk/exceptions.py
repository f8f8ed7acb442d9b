"""Exception hierarchy for the chunk codec."""
from __future__ import annotations

from dataclasses import dataclass


class ChunkCodecError(Exception):
    """Base class for all chunk codec errors."""


class ChunkTypeError(ChunkCodecError):
    """Raised when a chunk type code cannot be constructed."""


@dataclass
class WrongLengthError(ChunkTypeError):
    """Raised when a textual type code is not exactly four bytes long."""

    length: int

    def __post_init__(self) -> None:
        super().__init__(self.length)

    def __str__(self) -> str:
        return f"expected 4 bytes but got {self.length} instead"


@dataclass
class InvalidChunkTypeError(ChunkTypeError):
    """Raised when type code bytes fail character or reserved-bit validation."""

    code: bytes

    def __post_init__(self) -> None:
        super().__init__(self.code)

    def __str__(self) -> str:
        return f"bytes {self.code!r} are invalid as a chunk type"


class ChunkError(ChunkCodecError):
    """Raised when a chunk cannot be parsed or decoded."""


@dataclass
class TruncatedInputError(ChunkError):
    field: str
    needed: int
    available: int

    def __post_init__(self) -> None:
        super().__init__(self.field, self.needed, self.available)

    def __str__(self) -> str:
        return (
            f"truncated input while reading {self.field}: "
            f"needed {self.needed} bytes, {self.available} available"
        )


@dataclass
class LengthMismatchError(ChunkError):
    expected: int
    actual: int

    def __post_init__(self) -> None:
        super().__init__(self.expected, self.actual)

    def __str__(self) -> str:
        return f"length error: expected {self.expected} bytes, got {self.actual} bytes"


@dataclass
class ChecksumMismatchError(ChunkError):
    """Raised when the CRC stored on the wire differs from the recomputed one."""

    expected: int
    computed: int

    def __post_init__(self) -> None:
        super().__init__(self.expected, self.computed)

    def __str__(self) -> str:
        return f"CRC mismatch: expected {self.expected}, got {self.computed}"


class InvalidTextError(ChunkError):
    """Raised when a chunk payload is not valid UTF-8."""


__all__ = [
    "ChecksumMismatchError",
    "ChunkCodecError",
    "ChunkError",
    "ChunkTypeError",
    "InvalidChunkTypeError",
    "InvalidTextError",
    "LengthMismatchError",
    "TruncatedInputError",
    "WrongLengthError",
]
