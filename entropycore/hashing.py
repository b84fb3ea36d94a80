"""32-bit MurmurHash2 string hashing."""

from __future__ import annotations

import struct

_M = 0x5BD1E995
_R = 24
_MASK = 0xFFFFFFFF


def _as_bytes(key: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"cannot hash object of type {type(key).__name__}")


def string_hash(key: str | bytes | bytearray | memoryview, seed: int = 0) -> int:
    """Return the 32-bit MurmurHash2 of ``key``.

    Text is hashed as its UTF-8 encoding.
    """
    data = _as_bytes(key)
    length = len(data)
    h = ((seed & _MASK) ^ length) & _MASK

    body_end = length - length % 4
    for (k,) in struct.iter_unpack("<I", data[:body_end]):
        k = (k * _M) & _MASK
        k ^= k >> _R
        k = (k * _M) & _MASK
        h = (h * _M) & _MASK
        h ^= k

    tail = data[body_end:]
    if tail:
        h ^= int.from_bytes(tail, "little")
        h = (h * _M) & _MASK

    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15
    return h