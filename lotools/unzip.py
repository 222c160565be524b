"""Regrouping zipped tuples back into separate lists."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from lotools.tuples import _check_width


def _columns(rows: Iterable[Iterable[Any]], width: int) -> tuple[list[Any], ...]:
    columns: tuple[list[Any], ...] = tuple([] for _ in range(width))
    for position, row in enumerate(rows):
        values = tuple(row)
        if len(values) != width:
            raise ValueError(
                f"element {position} holds {len(values)} values, expected {width}"
            )
        for column, value in zip(columns, values):
            column.append(value)
    return columns


def unzip(tuples: Iterable[Any], width: int) -> tuple[list[Any], ...]:
    """Split a sequence of ``width``-element tuples into ``width`` lists.

    Each element may be a Tuple2 to Tuple9 or any iterable of ``width``
    values. Raises ValueError if ``width`` is not between 2 and 9 or an
    element holds a different number of values.
    """
    _check_width(width, "columns")
    return _columns(tuples, width)


def unzip_by(
    items: Iterable[Any], iteratee: Callable[[Any], Iterable[Any]], width: int
) -> tuple[list[Any], ...]:
    """Map each item to ``width`` values with ``iteratee`` and split them into lists.

    Raises ValueError if ``width`` is not between 2 and 9 or ``iteratee``
    returns a different number of values.
    """
    _check_width(width, "columns")
    return _columns((iteratee(item) for item in items), width)