"""Hash tables with chaining, power-of-two sizes and incremental rehashing."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

INITIAL_SIZE = 4
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_LONG_MAX = 2**63 - 1
_FORCE_RESIZE_RATIO = 5

_can_resize = True


def enable_resize() -> None:
    """Allow tables to grow and shrink as needed."""
    global _can_resize
    _can_resize = True


def disable_resize() -> None:
    """Forbid resizing, except growth once elements/buckets exceeds the force ratio."""
    global _can_resize
    _can_resize = False


class DictError(Exception):
    """A table operation could not be carried out in the table's current state."""


def _default_hash(key: Any) -> int:
    return hash(key) & _MASK32


@dataclass(frozen=True)
class DictType:
    """Callbacks that define how a HashTable treats its keys and values.

    Without ``key_compare`` keys are compared with ``==``; the dup callbacks
    copy keys and values as they are stored, and the destructors are called
    with keys and values as they are removed.
    """

    hash_function: Callable[[Any], int] = _default_hash
    key_dup: Optional[Callable[[Any], Any]] = None
    val_dup: Optional[Callable[[Any], Any]] = None
    key_compare: Optional[Callable[[Any, Any], bool]] = None
    key_destructor: Optional[Callable[[Any], None]] = None
    val_destructor: Optional[Callable[[Any], None]] = None


@dataclass(eq=False)
class DictEntry:
    """A key, its value and the next entry in the same bucket."""

    key: Any
    value: Any = None
    next: Optional["DictEntry"] = field(default=None, repr=False)


@dataclass(eq=False)
class _Table:
    buckets: Optional[list[Optional[DictEntry]]] = None
    size: int = 0
    sizemask: int = 0
    used: int = 0


def _next_power(size: int) -> int:
    if size >= _LONG_MAX:
        return _LONG_MAX
    power = INITIAL_SIZE
    while power < size:
        power *= 2
    return power


def _signed64(value: int) -> int:
    value &= _MASK64
    return value - 2**64 if value >= 2**63 else value


class HashTable:
    """A hash table that moves entries to a larger table a bucket at a time."""

    def __init__(self, dict_type: Optional[DictType] = None) -> None:
        self.type = dict_type if dict_type is not None else DictType()
        self._tables = [_Table(), _Table()]
        self._rehashidx = -1
        self._iterators = 0

    # -- sizes and state ---------------------------------------------------

    def __len__(self) -> int:
        return self._tables[0].used + self._tables[1].used

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return (entry.key for entry in self.entries())

    def slots(self) -> int:
        """Total number of buckets in both tables."""
        return self._tables[0].size + self._tables[1].size

    def is_rehashing(self) -> bool:
        """True while entries are being moved to the second table."""
        return self._rehashidx != -1

    # -- key helpers -------------------------------------------------------

    def _hash(self, key: Any) -> int:
        return self.type.hash_function(key) & _MASK32

    def _keys_equal(self, key1: Any, key2: Any) -> bool:
        if self.type.key_compare is not None:
            return bool(self.type.key_compare(key1, key2))
        return key1 == key2

    def _set_key(self, entry: DictEntry, key: Any) -> None:
        entry.key = self.type.key_dup(key) if self.type.key_dup else key

    def _set_value(self, entry: DictEntry, value: Any) -> None:
        entry.value = self.type.val_dup(value) if self.type.val_dup else value

    def _free_key(self, entry: DictEntry) -> None:
        if self.type.key_destructor is not None:
            self.type.key_destructor(entry.key)

    def _free_value(self, value: Any) -> None:
        if self.type.val_destructor is not None:
            self.type.val_destructor(value)

    # -- sizing and rehashing ---------------------------------------------

    def expand(self, size: int) -> None:
        """Create the table, or start rehashing into one of at least ``size`` buckets."""
        if self.is_rehashing() or self._tables[0].used > size:
            raise DictError("cannot expand to %d buckets now" % size)
        realsize = _next_power(size)
        new = _Table([None] * realsize, realsize, realsize - 1, 0)
        if self._tables[0].buckets is None:
            self._tables[0] = new
            return
        self._tables[1] = new
        self._rehashidx = 0

    def resize(self) -> None:
        """Shrink or grow to the smallest size holding all entries at about one per bucket."""
        if not _can_resize or self.is_rehashing():
            raise DictError("resizing is not possible now")
        self.expand(max(self._tables[0].used, INITIAL_SIZE))

    def rehash(self, n: int) -> bool:
        """Move up to ``n`` buckets; True if entries are still left to move."""
        if not self.is_rehashing():
            return False
        for _ in range(n):
            old, new = self._tables
            if old.used == 0:
                self._tables[0] = new
                self._tables[1] = _Table()
                self._rehashidx = -1
                return False
            if old.size <= self._rehashidx:
                raise DictError("rehash index ran past the old table")
            assert old.buckets is not None and new.buckets is not None
            while old.buckets[self._rehashidx] is None:
                self._rehashidx += 1
            entry = old.buckets[self._rehashidx]
            while entry is not None:
                following = entry.next
                index = self._hash(entry.key) & new.sizemask
                entry.next = new.buckets[index]
                new.buckets[index] = entry
                old.used -= 1
                new.used += 1
                entry = following
            old.buckets[self._rehashidx] = None
            self._rehashidx += 1
        return True

    def rehash_milliseconds(self, ms: int) -> int:
        """Rehash in steps of 100 buckets for about ``ms`` milliseconds; return buckets moved."""
        start = time.monotonic()
        rehashes = 0
        while self.rehash(100):
            rehashes += 100
            if (time.monotonic() - start) * 1000 > ms:
                break
        return rehashes

    def _rehash_step(self) -> None:
        if self._iterators == 0:
            self.rehash(1)

    def _expand_if_needed(self) -> None:
        if self.is_rehashing():
            return
        first = self._tables[0]
        if first.size == 0:
            self.expand(INITIAL_SIZE)
            return
        if first.used >= first.size and (
            _can_resize or first.used // first.size > _FORCE_RESIZE_RATIO
        ):
            self.expand(first.used * 2)

    def _key_index(self, key: Any) -> Optional[int]:
        try:
            self._expand_if_needed()
        except DictError:
            return None
        h = self._hash(key)
        index = 0
        for table in self._tables:
            index = h & table.sizemask
            assert table.buckets is not None
            entry = table.buckets[index]
            while entry is not None:
                if self._keys_equal(key, entry.key):
                    return None
                entry = entry.next
            if not self.is_rehashing():
                break
        return index

    # -- insertion, lookup and removal ------------------------------------

    def add_raw(self, key: Any) -> Optional[DictEntry]:
        """Add ``key`` with no value and return its entry; None if the key exists."""
        if self.is_rehashing():
            self._rehash_step()
        index = self._key_index(key)
        if index is None:
            return None
        table = self._tables[1] if self.is_rehashing() else self._tables[0]
        assert table.buckets is not None
        entry = DictEntry(None, None, table.buckets[index])
        table.buckets[index] = entry
        table.used += 1
        self._set_key(entry, key)
        return entry

    def add(self, key: Any, value: Any) -> None:
        """Add a new key; KeyError if it is already present."""
        entry = self.add_raw(key)
        if entry is None:
            raise KeyError(key)
        self._set_value(entry, value)

    def replace(self, key: Any, value: Any) -> bool:
        """Set ``key`` to ``value``; True if the key was new, False if it was updated."""
        entry = self.add_raw(key)
        if entry is not None:
            self._set_value(entry, value)
            return True
        entry = self.find(key)
        assert entry is not None
        old = entry.value
        self._set_value(entry, value)
        self._free_value(old)
        return False

    def replace_raw(self, key: Any) -> Optional[DictEntry]:
        """The entry for ``key``, adding it without a value if it is absent."""
        entry = self.find(key)
        return entry if entry is not None else self.add_raw(key)

    def _generic_delete(self, key: Any, free: bool) -> None:
        if self._tables[0].size == 0:
            raise KeyError(key)
        if self.is_rehashing():
            self._rehash_step()
        h = self._hash(key)
        for table in self._tables:
            index = h & table.sizemask
            assert table.buckets is not None
            previous: Optional[DictEntry] = None
            entry = table.buckets[index]
            while entry is not None:
                if self._keys_equal(key, entry.key):
                    if previous is not None:
                        previous.next = entry.next
                    else:
                        table.buckets[index] = entry.next
                    if free:
                        self._free_key(entry)
                        self._free_value(entry.value)
                    entry.next = None
                    table.used -= 1
                    return
                previous = entry
                entry = entry.next
            if not self.is_rehashing():
                break
        raise KeyError(key)

    def delete(self, key: Any) -> None:
        """Remove ``key``, calling the destructors; KeyError if absent."""
        self._generic_delete(key, free=True)

    def delete_no_free(self, key: Any) -> None:
        """Remove ``key`` without calling the destructors; KeyError if absent."""
        self._generic_delete(key, free=False)

    def find(self, key: Any) -> Optional[DictEntry]:
        """The entry for ``key``, or None."""
        if self._tables[0].size == 0:
            return None
        if self.is_rehashing():
            self._rehash_step()
        h = self._hash(key)
        for table in self._tables:
            index = h & table.sizemask
            assert table.buckets is not None
            entry = table.buckets[index]
            while entry is not None:
                if self._keys_equal(key, entry.key):
                    return entry
                entry = entry.next
            if not self.is_rehashing():
                return None
        return None

    def fetch_value(self, key: Any) -> Any:
        """The value for ``key``, or None if absent."""
        entry = self.find(key)
        return entry.value if entry is not None else None

    # -- iteration -----------------------------------------------------------

    def fingerprint(self) -> int:
        """A signed 64 bit number summarising the tables' identity, sizes and counts."""
        integers = []
        for table in self._tables:
            integers.append(id(table.buckets) if table.buckets is not None else 0)
            integers.append(table.size)
            integers.append(table.used)
        value = 0
        for number in integers:
            value = _signed64(value + number)
            value = _signed64(~value + (value << 21))
            value = _signed64(value ^ (value >> 24))
            value = _signed64(value + (value << 3) + (value << 8))
            value = _signed64(value ^ (value >> 14))
            value = _signed64(value + (value << 2) + (value << 4))
            value = _signed64(value ^ (value >> 28))
            value = _signed64(value + (value << 31))
        return value

    def entries(self, safe: bool = False) -> Iterator[DictEntry]:
        """Yield every entry.

        A safe iteration stops rehash steps while it runs, so the table may be
        changed meanwhile. An unsafe one raises DictError at its end if the
        table was changed while it ran.
        """
        fingerprint = 0
        if safe:
            self._iterators += 1
        else:
            fingerprint = self.fingerprint()
        try:
            table_no = 0
            index = 0
            while True:
                table = self._tables[table_no]
                if index >= table.size:
                    if table_no == 0 and self.is_rehashing():
                        table_no, index = 1, 0
                        continue
                    break
                assert table.buckets is not None
                entry = table.buckets[index]
                while entry is not None:
                    following = entry.next
                    yield entry
                    entry = following
                index += 1
        finally:
            if safe:
                self._iterators -= 1
            elif fingerprint != self.fingerprint():
                raise DictError("table changed during unsafe iteration")

    def empty(self, callback: Optional[Callable[[], None]] = None) -> None:
        """Remove every entry, calling ``callback`` once per 65536 buckets visited."""
        for table in self._tables:
            if table.buckets is not None:
                for index, bucket in enumerate(table.buckets):
                    if table.used == 0:
                        break
                    if callback is not None and index & 65535 == 0:
                        callback()
                    entry = bucket
                    while entry is not None:
                        following = entry.next
                        self._free_key(entry)
                        self._free_value(entry.value)
                        entry.next = None
                        table.used -= 1
                        entry = following
        self._tables = [_Table(), _Table()]
        self._rehashidx = -1
        self._iterators = 0