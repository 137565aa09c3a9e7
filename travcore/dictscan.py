"""Cursor scanning and random sampling over a HashTable."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Optional

from travcore.dict import DictEntry, DictError, HashTable

_MASK64 = 0xFFFFFFFFFFFFFFFF
_BITS = 64


def reverse_bits(value: int) -> int:
    """Reverse the bit order of a 64 bit unsigned value."""
    value &= _MASK64
    shift = _BITS
    mask = _MASK64
    while True:
        shift >>= 1
        if shift == 0:
            return value
        mask ^= (mask << shift) & _MASK64
        value = ((value >> shift) & mask) | ((value << shift) & _MASK64 & ~mask)


def _emit(entry: Optional[DictEntry], fn: Callable[[DictEntry], None]) -> None:
    while entry is not None:
        fn(entry)
        entry = entry.next


def scan(table: HashTable, cursor: int, fn: Callable[[DictEntry], None]) -> int:
    """Call ``fn`` for the entries at ``cursor`` and return the next cursor.

    Start with cursor 0 and stop when 0 comes back. Every entry present for
    the whole scan is visited at least once, even if the table is resized
    between calls; some entries may be visited more than once.
    """
    if len(table) == 0:
        return 0
    v = cursor & _MASK64
    t0, t1 = table._tables
    if not table.is_rehashing():
        m0 = t0.sizemask
        assert t0.buckets is not None
        _emit(t0.buckets[v & m0], fn)
    else:
        if t0.size > t1.size:
            t0, t1 = t1, t0
        m0 = t0.sizemask
        m1 = t1.sizemask
        assert t0.buckets is not None and t1.buckets is not None
        _emit(t0.buckets[v & m0], fn)
        while True:
            _emit(t1.buckets[v & m1], fn)
            v = ((((v | m0) + 1) & _MASK64 & ~m0) | (v & m0)) & _MASK64
            if not v & (m0 ^ m1):
                break

    v |= _MASK64 ^ m0
    v = reverse_bits(v)
    v = (v + 1) & _MASK64
    return reverse_bits(v)


def get_random_key(table: HashTable) -> Optional[DictEntry]:
    """A random entry of the table, or None if it is empty."""
    if len(table) == 0:
        return None
    if table.is_rehashing():
        table._rehash_step()
    t0, t1 = table._tables
    if table.is_rehashing():
        total = t0.size + t1.size
        while True:
            h = random.randrange(total)
            if h >= t0.size:
                assert t1.buckets is not None
                head = t1.buckets[h - t0.size]
            else:
                assert t0.buckets is not None
                head = t0.buckets[h]
            if head is not None:
                break
    else:
        assert t0.buckets is not None
        while True:
            head = t0.buckets[random.getrandbits(32) & t0.sizemask]
            if head is not None:
                break

    chain = []
    entry: Optional[DictEntry] = head
    while entry is not None:
        chain.append(entry)
        entry = entry.next
    return random.choice(chain)


def get_random_keys(table: HashTable, count: int) -> list[DictEntry]:
    """Up to ``count`` distinct entries read from a random point onwards.

    Fast but not evenly distributed; fewer entries come back if the table
    holds fewer than ``count``.
    """
    count = max(0, min(count, len(table)))
    stored: list[DictEntry] = []
    while len(stored) < count:
        for sub in table._tables:
            size = sub.size
            if size:
                assert sub.buckets is not None
                i = random.getrandbits(32) & sub.sizemask
                for _ in range(size):
                    entry = sub.buckets[i]
                    while entry is not None:
                        stored.append(entry)
                        if len(stored) == count:
                            return stored
                        entry = entry.next
                    i = (i + 1) & sub.sizemask
            if not table.is_rehashing():
                raise DictError("table walked without finding enough entries")
    return stored