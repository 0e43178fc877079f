# cfl

A small library of general-purpose data structures and helpers:

- `cfl.variant` — `Variant`, a tagged value (string, bytes, bool, signed and
  unsigned 64-bit integers, double, null, opaque reference or key/value list)
  that formats as compact JSON-like text. `VariantType` names the kinds. A
  `Variant()` created without a type formats as `!Unknown Type`.
- `cfl.kvlist` — `KVList`, an ordered list of `KVPair` entries holding
  variants. Keys are compared without regard to case; duplicates are allowed
  and `fetch` returns the first match.
- `cfl.kv` — `KeyValueList`, an ordered list of plain string `KeyValue`
  items with case-insensitive `get`.
- `cfl.dataobject` — `DataObject`, which holds either a `KVList` or a
  `Variant` behind one interface; `ObjectType` says which.
- `cfl.utils` — `split` and `split_quoted`, which break a line on a single
  separator character (runs of separators are skipped), optionally honouring
  single- or double-quoted tokens, and return `SplitEntry` items.
- `cfl.checksum` — `crc32c`, the Castagnoli CRC-32.
- `cfl.timeutil` — `time_now`, the wall-clock time in nanoseconds since the
  Unix epoch.
- `cfl.report` — `report_runtime_error`, which writes an errno description
  with a file and line to standard error and returns the message.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from cfl.kvlist import KVList
from cfl.variant import Variant

kv = KVList()
kv.insert_int64("key", 1)
kv.insert_int64("key2", 0)
kv.insert_int64("aaa", -123)
print(kv.format())                               # {"key":1,"key2":0,"aaa":-123}

print(Variant.from_bool(True).format())          # true
print(Variant.from_bytes(b"\x1f\xaa").format())  # 1faa
print(Variant.from_double(1.0).format())         # 1.000000
print(kv.fetch("KEY").format())                  # 1 (lookups ignore case)
```

```python
from cfl.dataobject import DataObject, ObjectType
from cfl.kvlist import KVList

obj = DataObject()
obj.set(ObjectType.KVLIST, KVList())
obj.print()                                      # {}
```

```python
from cfl.utils import split, split_quoted

[e.value for e in split("a,b,c", ",", 0)]           # ['a', 'b', 'c']
[e.value for e in split_quoted('"x y" z', " ", 0)]  # ['x y', 'z']
```

`split_quoted` raises `ValueError` for an unterminated quoted token; both
functions raise `ValueError` when the separator is not a single character.

```python
from cfl.checksum import crc32c

hex(crc32c(b"123456789"))   # '0xe3069283'
```

## What it does not do

There is no array type: a `Variant` cannot hold a list of variants, `KVList`
has no array inserts, and `DataObject` holds only a key/value list or a
variant. There is no hashing beyond `crc32c`, and nothing parses the
formatted text back into values.