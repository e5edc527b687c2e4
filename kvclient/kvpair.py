"""A key together with its value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from kvclient.key import Key, Value, hex_repr


def _as_value(value: object) -> Value:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview, list, tuple)):
        return bytes(value)
    raise TypeError(f"cannot make a value from {type(value).__name__}")


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class KvPair:
    """A key/value pair."""

    key: Key
    value: Value

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", Key(self.key))
        object.__setattr__(self, "value", _as_value(self.value))

    @classmethod
    def from_tuple(cls, pair) -> KvPair:
        """Build a pair from a (key, value) tuple."""
        key, value = pair
        return cls(key, value)

    def as_tuple(self) -> tuple[Key, Value]:
        """Return the pair as a (key, value) tuple."""
        return (self.key, self.value)

    def __iter__(self) -> Iterator:
        yield self.key
        yield self.value

    def __repr__(self) -> str:
        try:
            shown = _quote(self.value.decode("utf-8"))
        except UnicodeDecodeError:
            shown = hex_repr(self.value)
        return f"KvPair({hex_repr(self.key.data)}, {shown})"