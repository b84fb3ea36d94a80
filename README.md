# entropycore

A library of small building blocks with no dependencies outside the standard library.

| Module | What it holds |
| --- | --- |
| `entropycore.hashing` | `string_hash`: a 32-bit MurmurHash2 of a string or bytes, with an optional seed |
| `entropycore.strong_alias` | `StrongAlias`, `define_strong_alias`, `underlying_type` |
| `entropycore.typeid` | `TypeId`, `INVALID_TYPE_ID`, and functions that build type names and turn them into `TypeId`s |
| `entropycore.type_traits` | `has_base_class`, `base_class_of`, `is_invocable`, `is_class_method_invocable`, `is_null` |
| `entropycore.log` | `LogLevel`, `LogStream`, `level_name`, `get_stream`, `write`, `log`, `log_func` |

## Installation

```
pip install entropycore
```

To run the tests:

```
pip install "entropycore[test]"
pytest
```

## Hashing

```python
from entropycore.hashing import string_hash

h = string_hash("hello")          # unsigned 32-bit integer
h2 = string_hash(b"hello", 42)    # with a seed
```

Text is hashed as its UTF-8 bytes. `str`, `bytes`, `bytearray` and `memoryview` are accepted.
Any other type raises `TypeError`.

## Strong aliases

`define_strong_alias(name, value_type)` creates a subclass of `StrongAlias`. The wrapped value
is on `.value`. A value of another type is converted with `value_type(...)`. When no value is
given, the alias holds `value_type()`. Aliases compare and hash like their values. They compare
with raw values and with aliases of the same class. If you build an alias from an alias of a
different class, `TypeError` is raised.

```python
from entropycore.strong_alias import define_strong_alias, underlying_type

UserId = define_strong_alias("UserId", int)
a, b = UserId(5), UserId(7)
assert a < b
assert a == 5
assert UserId().value == 0
assert underlying_type(UserId) is int
assert underlying_type(str) is str   # types that are not aliases come back unchanged
```

## Type names and identifiers

`make_type_name(tp)` gives a readable name for a type:

- A built-in class gives its bare name, such as `dict`.
- Any other class gives `module.QualName`.
- A generic alias gives the origin's name with its parameters in angle brackets, separated
  by `", "`. For example, `list[int]` gives `list<int>`.
- A callable type gives `"Ret (Arg1, Arg2)"`.
- A string is taken as a raw name and normalised.

`type_name_of` and `type_id_of` cache their results for hashable types. A `TypeId` is the
`string_hash` of the name, so it is the same on every run. `INVALID_TYPE_ID` is `TypeId(0)`.

```python
from entropycore.typeid import make_type_name, type_id_of, make_type_id_from_type_name

assert make_type_name(list[int]) == "list<int>"
assert type_id_of(dict) == make_type_id_from_type_name("dict")
```

`make_type_name_from_raw_name` normalises a raw name. It removes the space after each comma
and replaces `::__2::` with `::`. `make_type_name_no_template_params` also cuts the name at
its first `<`.

## Runtime checks

- `has_base_class` and `base_class_of` look for an `entropy_super` attribute on a class, or on
  an instance's class.
- `is_invocable(func, *args)` tells whether `func` accepts that many positional arguments, as
  far as its signature shows. When the signature cannot be read, any callable counts as
  invocable.
- `is_class_method_invocable(obj, name, *args)` applies the same check to `getattr(obj, name)`.
- `is_null(value)` is true only for `None`.

```python
from entropycore.type_traits import is_invocable, is_null

assert is_invocable(len, [1, 2, 3])
assert not is_invocable(len)
assert is_null(None)
```

## Logging

There is one shared `LogStream` for each `LogLevel`: `DEBUG`, `INFO`, `WARNING` and `ERROR`.

- `get_stream(level)` returns the stream, or `None` when the level is not valid.
- Text written to a stream stays buffered; `pending` shows it.
- `sync()`, and `flush()` which does the same, prints the buffered text once it contains the
  delimiter `"!EOM!"` (`log.DELIMITER`). The text before the last delimiter is printed and the
  buffer is emptied.
- `write(level, msg)` prints `[Level] msg` to standard output straight away.

`log_func(level, msg)` prefixes the message with the calling function and line number.
`log(level, msg, owner)` also puts the type name of `owner` in front: `Type::func(line) - msg`.

```python
from entropycore.log import LogLevel, write, get_stream, log_func, DELIMITER

write(LogLevel.INFO, "starting")          # [Info] starting
log_func(LogLevel.WARNING, "disk almost full")

stream = get_stream(LogLevel.ERROR)
stream.write("part one, ")
stream.sync()                              # nothing printed yet
stream.write("part two" + DELIMITER)
stream.sync()                              # [Error] part one, part two
```

## What it does not do

This is a library only. It has no command-line program. Log output goes only to standard
output: there are no log files, no handlers and no level filtering.