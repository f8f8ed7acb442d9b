"""Four-byte chunk type codes and their property bits."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidChunkTypeError, WrongLengthError

CHUNK_TYPE_SIZE = 4
PROPERTY_BIT = 5


def is_bit_set(value: int, bit: int) -> bool:
    """Return ``True`` when *bit* of *value* is set.

    Bit indices outside ``0..7`` are never set.
    """

    if bit < 0 or bit >= 8:
        return False
    return (value >> bit) & 1 == 1


def _normalise_code(raw: bytes) -> bytes:
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError("chunk type code must be bytes")
    code = bytes(raw)
    if len(code) != CHUNK_TYPE_SIZE:
        raise WrongLengthError(len(code))
    return code


@dataclass(frozen=True)
class ChunkType:
    """A PNG style chunk type such as ``IHDR`` or ``ruSt``.

    Bit 5 of each byte carries one property flag: ancillary, private,
    reserved and safe-to-copy, in byte order.  Instances are normally built
    through :meth:`from_bytes` or :meth:`from_str`; the plain constructor does
    not validate.
    """

    code: bytes

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        """Build a type from raw wire bytes, enforcing the reserved bit."""

        chunk_type = cls(_normalise_code(raw))
        if not chunk_type.is_valid:
            raise InvalidChunkTypeError(chunk_type.code)
        return chunk_type

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        """Build a type from text.

        Only the characters are validated; the reserved bit is not checked
        here, so ``"Rust"`` is accepted even though :meth:`from_bytes` rejects
        the same bytes.
        """

        if not isinstance(text, str):
            raise TypeError("chunk type text must be str")
        code = text.encode("utf-8")
        if len(code) != CHUNK_TYPE_SIZE:
            raise WrongLengthError(len(code))
        chunk_type = cls(code)
        if not chunk_type.is_valid_characters:
            raise InvalidChunkTypeError(code)
        return chunk_type

    def __bytes__(self) -> bytes:
        return self.code

    def __str__(self) -> str:
        return self.code.decode("latin-1")

    @property
    def is_critical(self) -> bool:
        return not is_bit_set(self.code[0], PROPERTY_BIT)

    @property
    def is_public(self) -> bool:
        return not is_bit_set(self.code[1], PROPERTY_BIT)

    @property
    def is_reserved_bit_valid(self) -> bool:
        return not is_bit_set(self.code[2], PROPERTY_BIT)

    @property
    def is_safe_to_copy(self) -> bool:
        return is_bit_set(self.code[3], PROPERTY_BIT)

    @property
    def is_valid_characters(self) -> bool:
        # bytes.isalpha() only accepts ASCII letters
        return self.code.isalpha()

    @property
    def is_valid(self) -> bool:
        return self.is_valid_characters and self.is_reserved_bit_valid


__all__ = ["CHUNK_TYPE_SIZE", "ChunkType", "is_bit_set"]
