"""Keys, range bounds and the hex form used when printing them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Union

from kvclient.codec import encode_bytes

Value = bytes
"""The value part of a key/value pair: plain bytes."""

KeyLike = Union["Key", bytes, bytearray, memoryview, str, Iterable[int]]


def hex_repr(data: bytes) -> str:
    """Return data as upper-case hexadecimal, two digits per byte."""
    return bytes(data).hex().upper()


def _as_bytes(value: object) -> bytes:
    if isinstance(value, Key):
        return value.data
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        return bytes(value)
    raise TypeError(f"cannot make a key from {type(value).__name__}")


@dataclass(frozen=True, order=True)
class Key:
    """An ordered sequence of bytes; keys compare lexicographically."""

    data: bytes = b""

    EMPTY: ClassVar[Key]

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _as_bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"Key({hex_repr(self.data)})"

    def is_empty(self) -> bool:
        """Return whether the key has no bytes."""
        return not self.data

    def zero_terminated(self) -> bool:
        """Return whether the last byte of the key is 0."""
        return self.data.endswith(b"\x00")

    def with_zero(self) -> Key:
        """Return the smallest key greater than this one: this key plus a zero byte."""
        return Key(self.data + b"\x00")

    def to_lower_bound(self) -> Bound:
        """Treat the key as an inclusive lower bound; a trailing zero makes it exclusive."""
        if self.zero_terminated():
            return Bound.excluded(self.data[:-1])
        return Bound.included(self)

    def to_upper_bound(self) -> Bound:
        """Treat the key as an exclusive upper bound; a trailing zero makes it inclusive."""
        if self.zero_terminated():
            return Bound.included(self.data[:-1])
        return Bound.excluded(self)

    def to_encoded(self) -> Key:
        """Return the MVCC-encoded form of the key."""
        return Key(encode_bytes(self.data, False))


Key.EMPTY = Key(b"")


class BoundKind(enum.Enum):
    """How a bound limits a range."""

    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Bound:
    """One end of a range: a key that is included or excluded, or no limit."""

    kind: BoundKind
    key: Key | None = field(default=None)

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.key is not None:
                raise ValueError("an unbounded bound carries no key")
        else:
            if self.key is None:
                raise ValueError(f"a {self.kind.value} bound needs a key")
            object.__setattr__(self, "key", Key(self.key))

    @classmethod
    def included(cls, key: KeyLike) -> Bound:
        """A bound that includes key."""
        return cls(BoundKind.INCLUDED, Key(key))

    @classmethod
    def excluded(cls, key: KeyLike) -> Bound:
        """A bound that excludes key."""
        return cls(BoundKind.EXCLUDED, Key(key))

    @classmethod
    def unbounded(cls) -> Bound:
        """No limit on this side."""
        return cls(BoundKind.UNBOUNDED)