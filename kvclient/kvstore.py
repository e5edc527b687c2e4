"""A thread-safe in-memory raw key-value store."""

from __future__ import annotations

import threading
from typing import Iterable

from kvclient.key import Key, KeyLike
from kvclient.kvpair import KvPair


def _key_bytes(key: KeyLike) -> bytes:
    return Key(key).data


class KvStore:
    """Raw get, put and delete operations over an in-memory map."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def raw_get(self, key: KeyLike) -> bytes | None:
        """Return the value stored for key, or None."""
        with self._lock:
            return self._data.get(_key_bytes(key))

    def raw_batch_get(self, keys: Iterable[KeyLike]) -> list[KvPair]:
        """Return pairs for the keys that exist, in the order asked for."""
        with self._lock:
            found = ((k, self._data.get(k)) for k in map(_key_bytes, keys))
            return [KvPair(k, v) for k, v in found if v is not None]

    def raw_put(self, key: KeyLike, value: bytes) -> None:
        """Store value under key."""
        with self._lock:
            self._data[_key_bytes(key)] = bytes(value)

    def raw_batch_put(self, pairs: Iterable[KvPair | tuple]) -> None:
        """Store every pair; later pairs win over earlier ones with the same key."""
        converted = [p if isinstance(p, KvPair) else KvPair.from_tuple(p) for p in pairs]
        with self._lock:
            self._data.update((p.key.data, p.value) for p in converted)

    def raw_delete(self, key: KeyLike) -> None:
        """Remove key if present."""
        with self._lock:
            self._data.pop(_key_bytes(key), None)

    def raw_batch_delete(self, keys: Iterable[KeyLike]) -> None:
        """Remove every key that is present."""
        with self._lock:
            for key in keys:
                self._data.pop(_key_bytes(key), None)