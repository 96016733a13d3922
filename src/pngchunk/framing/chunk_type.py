"""Four byte chunk type codes and their property bits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .errors import InvalidCharacterError, InvalidFormatError

CHUNK_TYPE_SIZE = 4

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True)
class ChunkType:
    """A four byte chunk type such as ``IHDR`` or ``tEXt``.

    Two constructors with different guarantees are provided.
    :meth:`from_bytes` accepts any four bytes, as read from the wire, while
    :meth:`from_str` only accepts ASCII letters.  The property predicates ask
    whether one byte is an ASCII upper-case letter, so any other byte reads
    as lower-case; they are defined for every tag but only carry their PNG
    meaning for alphabetic ones.
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise InvalidFormatError("chunk type must be bytes")
        if len(self.value) != CHUNK_TYPE_SIZE:
            raise InvalidFormatError(
                f"chunk type must be {CHUNK_TYPE_SIZE} bytes, got {len(self.value)}"
            )

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "ChunkType":
        """Wrap four raw bytes without checking that they are letters."""

        if isinstance(data, int):
            raise InvalidFormatError("chunk type must be a sequence of byte values, not an int")
        try:
            raw = bytes(data)
        except (TypeError, ValueError) as exc:
            raise InvalidFormatError("chunk type must be a sequence of byte values") from exc
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        """Build a chunk type from the first four bytes of *text*.

        Raises :class:`InvalidFormatError` when the UTF-8 encoding of *text*
        is shorter than four bytes and :class:`InvalidCharacterError` when any
        of those bytes is not an ASCII letter.
        """

        if not isinstance(text, str):
            raise InvalidFormatError("chunk type text must be a string")
        encoded = text.encode("utf-8")
        if len(encoded) < CHUNK_TYPE_SIZE:
            raise InvalidFormatError(
                f"chunk type needs {CHUNK_TYPE_SIZE} bytes, got {len(encoded)}"
            )
        head = encoded[:CHUNK_TYPE_SIZE]
        if not head.isalpha():
            raise InvalidCharacterError(f"chunk type {head!r} must be ASCII letters only")
        return cls(head)

    def __bytes__(self) -> bytes:
        return self.value

    def to_str(self) -> str:
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidCharacterError(f"chunk type {self.value!r} is not valid UTF-8") from exc

    def __str__(self) -> str:
        return self.to_str()

    def _is_upper(self, index: int) -> bool:
        return self.value[index : index + 1].isupper()

    def is_critical(self) -> bool:
        """Ancillary chunks (lower-case first byte) may be ignored by decoders."""
        return self._is_upper(0)

    def is_public(self) -> bool:
        return self._is_upper(1)

    def is_reserved_bit_valid(self) -> bool:
        return self._is_upper(2)

    def is_safe_to_copy(self) -> bool:
        return not self._is_upper(3)

    def is_valid(self) -> bool:
        """Return ``True`` for an alphabetic type with a valid reserved bit."""

        return self.value.isalpha() and self.is_reserved_bit_valid()


__all__ = ["CHUNK_TYPE_SIZE", "ChunkType"]
