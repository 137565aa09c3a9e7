"""Hash functions for keys: integer mixers, MurmurHash2 and a case-insensitive djb hash."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_DEFAULT_SEED = 5381

_seed = _DEFAULT_SEED


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def int_hash(key: int) -> int:
    """Thomas Wang's 32 bit integer mix function."""
    key &= _MASK32
    key = (key + (~(key << 15) & _MASK32)) & _MASK32
    key ^= key >> 10
    key = (key + (key << 3)) & _MASK32
    key ^= key >> 6
    key = (key + (~(key << 11) & _MASK32)) & _MASK32
    key ^= key >> 16
    return key


def identity_hash(key: int) -> int:
    """Identity hash for integer keys, truncated to 32 bits."""
    return key & _MASK32


def set_hash_seed(seed: int) -> None:
    """Set the seed used by gen_hash and gen_case_hash."""
    global _seed
    _seed = seed & _MASK32


def get_hash_seed() -> int:
    """Return the seed used by gen_hash and gen_case_hash."""
    return _seed


def gen_hash(data: bytes | bytearray | memoryview | str) -> int:
    """MurmurHash2 (32 bit, little-endian block reads) seeded with the current seed."""
    buf = _as_bytes(data)
    m = 0x5BD1E995
    r = 24
    length = len(buf)
    h = (_seed ^ length) & _MASK32

    full = length - length % 4
    for offset in range(0, full, 4):
        k = int.from_bytes(buf[offset:offset + 4], "little")
        k = (k * m) & _MASK32
        k ^= k >> r
        k = (k * m) & _MASK32
        h = (h * m) & _MASK32
        h ^= k

    tail = buf[full:]
    if tail:
        if len(tail) >= 3:
            h ^= tail[2] << 16
        if len(tail) >= 2:
            h ^= tail[1] << 8
        h ^= tail[0]
        h = (h * m) & _MASK32

    h ^= h >> 13
    h = (h * m) & _MASK32
    h ^= h >> 15
    return h


def gen_case_hash(data: bytes | bytearray | memoryview | str) -> int:
    """Case-insensitive djb hash (hash * 33 + c) seeded with the current seed."""
    h = _seed
    for byte in _as_bytes(data).lower():
        h = (((h << 5) + h) + byte) & _MASK32
    return h