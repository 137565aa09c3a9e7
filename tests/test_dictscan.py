import pytest

from travcore.dict import DictType, HashTable
from travcore.dictscan import get_random_key, get_random_keys, reverse_bits, scan


def _identity_table(keys):
    table = HashTable(DictType(hash_function=lambda k: k))
    for key in keys:
        table.add(key, key * 10)
    return table


def _full_scan(table):
    seen = []
    cursor = 0
    while True:
        cursor = scan(table, cursor, lambda entry: seen.append(entry.key))
        if cursor == 0:
            return seen


def _rehashing_table():
    table = _identity_table(range(4))
    table.expand(16)
    table.rehash(1)
    assert table.is_rehashing()
    return table


def test_reverse_bits_pins():
    assert reverse_bits(0) == 0
    assert reverse_bits(1) == 1 << 63
    assert reverse_bits(0xFF) == 0xFF << 56


@pytest.mark.parametrize("value", [0, 1, 5, 0xDEADBEEF, 2**64 - 1, 123456789])
def test_reverse_bits_is_involution(value):
    assert reverse_bits(reverse_bits(value)) == value


def test_scan_empty_table_returns_zero():
    table = HashTable()
    calls = []
    assert scan(table, 0, calls.append) == 0
    assert calls == []


def test_full_scan_visits_all_keys():
    table = _identity_table(range(50))
    assert set(_full_scan(table)) == set(range(50))


def test_full_scan_during_rehashing_visits_all_keys():
    table = _rehashing_table()
    seen = _full_scan(table)
    assert set(seen) == {0, 1, 2, 3}
    assert table.is_rehashing()


def test_scan_with_string_keys():
    table = HashTable()
    names = ["alpha", "beta", "gamma", "delta", "epsilon"]
    for name in names:
        table.add(name, len(name))
    assert set(_full_scan(table)) == set(names)


def test_get_random_key_empty():
    assert get_random_key(HashTable()) is None


def test_get_random_key_returns_present_entry():
    table = _identity_table(range(20))
    for _ in range(30):
        entry = get_random_key(table)
        assert entry.key in range(20)
        assert entry.value == entry.key * 10


def test_get_random_key_while_rehashing():
    table = _rehashing_table()
    for _ in range(20):
        assert get_random_key(table).key in {0, 1, 2, 3}


def test_get_random_keys_distinct_and_bounded():
    table = _identity_table(range(30))
    entries = get_random_keys(table, 10)
    keys = [entry.key for entry in entries]
    assert len(keys) == 10
    assert len(set(keys)) == 10
    assert set(keys) <= set(range(30))


def test_get_random_keys_more_than_size_returns_all():
    table = _identity_table(range(7))
    keys = [entry.key for entry in get_random_keys(table, 100)]
    assert sorted(keys) == list(range(7))


def test_get_random_keys_zero_and_empty():
    assert get_random_keys(_identity_table(range(3)), 0) == []
    assert get_random_keys(HashTable(), 5) == []


def test_get_random_keys_while_rehashing():
    table = _rehashing_table()
    keys = [entry.key for entry in get_random_keys(table, 4)]
    assert sorted(keys) == [0, 1, 2, 3]