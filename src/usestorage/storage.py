"""Host storage abstraction and typed collection accessors.

The host owns durable storage; the store only needs get/contains/insert
over module-qualified byte keys. :class:`InMemoryStorage` is the backend
used when no host storage is supplied.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from usestorage.hashing import (
    blake2_128,
    blake2_128_concat,
    decode_uint,
    encode_uint,
    strip_blake2_128_concat,
)


class StorageBackend(Protocol):
    """Protocol for the host-provided key/value store."""

    def get(self, key: bytes) -> bytes | None: ...

    def contains(self, key: bytes) -> bool: ...

    def insert(self, key: bytes, value: bytes) -> None: ...

    def iter_prefix(self, prefix: bytes) -> Iterator[tuple[bytes, bytes]]: ...


class InMemoryStorage:
    """Dict-backed storage backend."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def contains(self, key: bytes) -> bool:
        return key in self._data

    def insert(self, key: bytes, value: bytes) -> None:
        self._data[bytes(key)] = bytes(value)

    def iter_prefix(self, prefix: bytes) -> Iterator[tuple[bytes, bytes]]:
        # Sorted so iteration order is deterministic across runs.
        for key in sorted(k for k in self._data if k.startswith(prefix)):
            yield key, self._data[key]

    def __len__(self) -> int:
        return len(self._data)


def storage_prefix(pallet: str, item: str) -> bytes:
    """Module-qualified prefix for one collection."""
    return blake2_128(pallet.encode("utf-8")) + blake2_128(item.encode("utf-8"))


class StorageValue:
    """Singleton value stored under its collection prefix."""

    def __init__(self, backend: StorageBackend, pallet: str, item: str, *, width: int) -> None:
        self._backend = backend
        self._key = storage_prefix(pallet, item)
        self._width = width

    def get(self) -> int | None:
        raw = self._backend.get(self._key)
        if raw is None:
            return None
        return decode_uint(raw, self._width)

    def exists(self) -> bool:
        return self._backend.contains(self._key)

    def put(self, value: int) -> None:
        self._backend.insert(self._key, encode_uint(value, self._width))


class StorageMap:
    """Single-keyed map with ``blake2_128_concat`` hashed keys."""

    def __init__(
        self,
        backend: StorageBackend,
        pallet: str,
        item: str,
        *,
        key_width: int,
        value_width: int,
    ) -> None:
        self._backend = backend
        self._prefix = storage_prefix(pallet, item)
        self._key_width = key_width
        self._value_width = value_width

    def _key(self, key: int) -> bytes:
        return self._prefix + blake2_128_concat(encode_uint(key, self._key_width))

    def get(self, key: int) -> int | None:
        raw = self._backend.get(self._key(key))
        if raw is None:
            return None
        return decode_uint(raw, self._value_width)

    def contains(self, key: int) -> bool:
        return self._backend.contains(self._key(key))

    def insert(self, key: int, value: int) -> None:
        self._backend.insert(self._key(key), encode_uint(value, self._value_width))

    def items(self) -> Iterator[tuple[int, int]]:
        for full_key, raw in self._backend.iter_prefix(self._prefix):
            key_bytes, _ = strip_blake2_128_concat(full_key[len(self._prefix) :], self._key_width)
            yield decode_uint(key_bytes, self._key_width), decode_uint(raw, self._value_width)


class StorageDoubleMap:
    """Map keyed by an ordered pair, each half hashed with ``blake2_128_concat``."""

    def __init__(
        self,
        backend: StorageBackend,
        pallet: str,
        item: str,
        *,
        key1_width: int,
        key2_width: int,
        value_width: int,
    ) -> None:
        self._backend = backend
        self._prefix = storage_prefix(pallet, item)
        self._key1_width = key1_width
        self._key2_width = key2_width
        self._value_width = value_width

    def _key(self, key1: int, key2: int) -> bytes:
        return (
            self._prefix
            + blake2_128_concat(encode_uint(key1, self._key1_width))
            + blake2_128_concat(encode_uint(key2, self._key2_width))
        )

    def get(self, key1: int, key2: int) -> int | None:
        raw = self._backend.get(self._key(key1, key2))
        if raw is None:
            return None
        return decode_uint(raw, self._value_width)

    def contains(self, key1: int, key2: int) -> bool:
        return self._backend.contains(self._key(key1, key2))

    def insert(self, key1: int, key2: int, value: int) -> None:
        self._backend.insert(self._key(key1, key2), encode_uint(value, self._value_width))

    def items(self) -> Iterator[tuple[tuple[int, int], int]]:
        for full_key, raw in self._backend.iter_prefix(self._prefix):
            k1_bytes, rest = strip_blake2_128_concat(full_key[len(self._prefix) :], self._key1_width)
            k2_bytes, _ = strip_blake2_128_concat(rest, self._key2_width)
            key = (decode_uint(k1_bytes, self._key1_width), decode_uint(k2_bytes, self._key2_width))
            yield key, decode_uint(raw, self._value_width)
