# lotools

Small, dependency-free helpers for fixed-size tuples, padded zipping,
unzipping, cartesian products and "first non-empty value" lookups.

It is a library only: there is no command-line tool.

## Installation

```
pip install lotools
```

## Tuples

`lotools.types` provides `Entry` (a frozen key/value pair with fields
`key` and `value`) and the frozen dataclasses `Tuple2` … `Tuple9`, whose
fields are `a`, `b`, `c`, … Each has an `unpack()` method returning its
values as a plain tuple, and can be iterated and measured with `len()`.

```python
from lotools.tuples import make_tuple, unpack

t = make_tuple("hello", 2)      # Tuple2(a='hello', b=2)
first, second = unpack(t)       # ('hello', 2)
```

`make_tuple` accepts 2 to 9 values and raises `ValueError` otherwise;
`unpack` raises `TypeError` for anything that is not a `Tuple2` … `Tuple9`.

## Zipping and unzipping

`zip_fill` zips 2 to 9 sequences of possibly different lengths into
`Tuple2` … `Tuple9`, padding the shorter ones with `fill` (default
`None`). `zip_by` does the same but passes each group to a function.

```python
from lotools.tuples import zip_fill, zip_by

zip_fill(["a", "b"], [1])
# [Tuple2(a='a', b=1), Tuple2(a='b', b=None)]

zip_by(lambda s, n: s * n, ["a", "b"], [2, 3], fill=0)
# ['aa', 'bbb']
```

`unzip` and `unzip_by` in `lotools.unzip` regroup rows back into
separate lists. The `width` argument (2 to 9) says how many lists to
produce; a row with a different number of values raises `ValueError`.

```python
from lotools.unzip import unzip, unzip_by

unzip([("a", 1), ("b", 2)], 2)                        # (['a', 'b'], [1, 2])
unzip_by(["a", "b"], lambda s: (s * 2, len(s)), 2)    # (['aa', 'bb'], [1, 1])
```

## Cross joins

`lotools.crossjoin` builds the cartesian product of 2 to 9 sequences,
with the last sequence varying fastest. If any input is empty, the
result is an empty list.

```python
from lotools.crossjoin import cross_join, cross_join_by

cross_join(["a", "b"], [1, 2])
# [Tuple2(a='a', b=1), Tuple2(a='a', b=2), Tuple2(a='b', b=1), Tuple2(a='b', b=2)]

cross_join_by(lambda s, n: f"{s}-{n}", ["a"], [1, 2])
# ['a-1', 'a-2']
```

## Empty values and coalescing

`lotools.type_manipulation` treats `None`, numeric zero, `False`, empty
strings and bytes, and dataclasses or tuples made only of such values as
"empty". Lists and dicts count as empty only when they are `None`.

- `is_nil`, `is_not_nil` — test for `None`.
- `is_empty`, `is_not_empty` — test for an empty value as above.
- `zero_value(kind)` — the default of a type, e.g. `zero_value(int) == 0`.
- `empty_to_none(x)` — `None` if `x` is empty, else `x`.
- `value_or(x, fallback)`, `values_or(items, fallback)` — replace `None`.
- `to_any_list(items)` — a new list of the items.
- `from_any_list(values, kind)` — a list, raising `TypeError` if any value
  is not an instance of `kind`.
- `coalesce(*args)` — the first non-empty argument; raises `ValueError`
  if there is none. `coalesce_or_empty` returns the first argument (or
  `None` with no arguments) instead of raising.
- `coalesce_list(*args)`, `coalesce_map(*args)` — the first non-empty list
  or mapping; raise `ValueError` if there is none.
  `coalesce_list_or_empty` and `coalesce_map_or_empty` return a new `[]`
  or `{}` instead.

```python
from lotools.type_manipulation import coalesce, coalesce_list_or_empty, value_or

coalesce(0, "", 3, 4)                 # 3
coalesce_list_or_empty([], [1, 2])    # [1, 2]
value_or(None, "fallback")            # 'fallback'
```

## Running the tests

```
pip install -e .[test]
pytest
```