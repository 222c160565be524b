"""Building, unpacking and zipping fixed-size tuples."""

from __future__ import annotations

from itertools import zip_longest
from typing import Any, Callable, Sequence

from lotools.types import (
    Tuple2,
    Tuple3,
    Tuple4,
    Tuple5,
    Tuple6,
    Tuple7,
    Tuple8,
    Tuple9,
)

_TUPLE_TYPES: dict[int, type] = {
    2: Tuple2,
    3: Tuple3,
    4: Tuple4,
    5: Tuple5,
    6: Tuple6,
    7: Tuple7,
    8: Tuple8,
    9: Tuple9,
}

_MIN_WIDTH = min(_TUPLE_TYPES)
_MAX_WIDTH = max(_TUPLE_TYPES)


def _check_width(width: int, what: str) -> None:
    if width not in _TUPLE_TYPES:
        raise ValueError(
            f"expected between {_MIN_WIDTH} and {_MAX_WIDTH} {what}, got {width}"
        )


def make_tuple(*args: Any) -> Any:
    """Create a Tuple2 to Tuple9 from 2 to 9 values.

    Raises ValueError for any other number of values.
    """
    _check_width(len(args), "values")
    return _TUPLE_TYPES[len(args)](*args)


def unpack(tup: Any) -> tuple[Any, ...]:
    """Return the values contained in a Tuple2 to Tuple9 as a plain tuple.

    Raises TypeError if the argument is not one of those tuple classes.
    """
    if not isinstance(tup, tuple(_TUPLE_TYPES.values())):
        raise TypeError(f"cannot unpack {type(tup).__name__}")
    return tup.unpack()


def zip_fill(*args: Sequence[Any], fill: Any = None) -> list[Any]:
    """Group the n-th elements of 2 to 9 sequences into tuples.

    The result is as long as the longest sequence; missing positions of
    shorter sequences are filled with ``fill``.
    """
    _check_width(len(args), "sequences")
    tuple_type = _TUPLE_TYPES[len(args)]
    return [tuple_type(*items) for items in zip_longest(*args, fillvalue=fill)]


def zip_by(
    iteratee: Callable[..., Any], *args: Sequence[Any], fill: Any = None
) -> list[Any]:
    """Combine the n-th elements of 2 to 9 sequences with ``iteratee``.

    The result is as long as the longest sequence; missing positions of
    shorter sequences are passed as ``fill``.
    """
    _check_width(len(args), "sequences")
    return [iteratee(*items) for items in zip_longest(*args, fillvalue=fill)]