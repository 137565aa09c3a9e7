# travcore

A small library of core data structures and text helpers, with no
dependencies outside the standard library.

- `travcore.adlist`: a doubly linked list (`LinkedList`, `ListNode`). It takes
  optional `dup`, `free` and `match` callbacks and offers O(1) insertion and
  removal around held nodes, rotation and negative indexing with `node_at`.
- `travcore.dict`: a chained hash table (`HashTable`) built from power-of-two
  tables that rehash incrementally. Keys and values are handled through a
  `DictType`. Iteration with `entries()` is either safe or unsafe; unsafe
  iteration is checked with `fingerprint()`. `enable_resize()` and
  `disable_resize()` switch automatic resizing on and off.
- `travcore.dictscan`: cursor-based `scan` over a `HashTable`, which keeps
  working when the table is resized between calls. It also has
  `get_random_key`, `get_random_keys` and `reverse_bits`.
- `travcore.hashing`: MurmurHash2 (`gen_hash`), a case-insensitive djb hash
  (`gen_case_hash`), Thomas Wang's integer mix (`int_hash`), `identity_hash`,
  and `set_hash_seed` / `get_hash_seed`.
- `travcore.stack`: a `Stack` whose capacity doubles as it grows. An optional
  `free` callback is called by `clear()`.
- `travcore.ini`: a lenient INI reader (`Ini`) with `read`, `read_string`,
  `get` and `sections`. It handles `#` comments. Options that come before any
  section are ignored.
- `travcore.util`: string key hashing (`string_hash`, `string_case_hash`) and
  `equal_ignore_case`. It also has `file_get_content`, `utf8_str_width` and
  `escape_quote_content` for reading a quoted string.
- `travcore.splitting`: `split` on a multi-character separator, REPL-style
  `split_args` with quotes and escapes, `is_hex_digit` and `hex_digit_to_int`.
- `travcore.strops`: `trim`, inclusive `str_range`, `compare`, `map_chars`,
  `join`, `grow_zero`, `to_lower` and `to_upper`.
- `travcore.numfmt`: `ll2str`, `ull2str` and `itoa`, plus `catfmt`, a
  printf-like formatter for `%s %S %i %I %u %U %%`.
- `travcore.escape`: `repr_bytes`, which gives a double-quoted, escaped
  representation of binary data.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Examples

```python
from travcore.adlist import LinkedList

items = LinkedList([1, 2, 3])
items.rotate()
print(list(items))              # [3, 1, 2]
print(items.node_at(-1).value)  # 2
```

```python
from travcore.dict import DictType, HashTable
from travcore.util import string_hash

table = HashTable(DictType(hash_function=string_hash))
table.add("alpha", 1)
table.replace("alpha", 2)
print(table.fetch_value("alpha"))  # 2
```

```python
from travcore.dict import HashTable
from travcore.dictscan import scan

table = HashTable()
for n in range(10):
    table.add(n, n * n)

seen = set()
cursor = scan(table, 0, lambda entry: seen.add(entry.key))
while cursor:
    cursor = scan(table, cursor, lambda entry: seen.add(entry.key))
print(sorted(seen))  # [0, 1, ..., 9]
```

```python
from travcore.ini import Ini

conf = Ini()
conf.read_string("[server]\nport = 8080\n")
print(conf.get("server", "port"))  # 8080
```

```python
from travcore.splitting import split_args
from travcore.strops import str_range, trim
from travcore.numfmt import catfmt
from travcore.escape import repr_bytes

print(split_args('set key "hello\\nworld"'))  # ['set', 'key', 'hello\nworld']
print(trim("xxciaoyyy", "xy"))                # ciao
print(str_range("ciao", 1, -1))               # iao
print(catfmt("%s=%I", "x", -5))               # x=-5
print(repr_bytes(b"\a\n\x00foo\r"))           # "\a\n\x00foo\r"
```

## What it does not do

There is no JSON parser or JSON emitter in this package. Read and write JSON
with the standard library's `json` module or another library. The package
has no command-line program, and it does not install signal handlers or
crash-reporting hooks.