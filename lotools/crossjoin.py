"""Cartesian products of 2 to 9 sequences."""

from __future__ import annotations

from itertools import product
from typing import Any, Callable, Iterable

from lotools.tuples import _TUPLE_TYPES, _check_width


def cross_join(*args: Iterable[Any]) -> list[Any]:
    """Combine every item of each sequence with every item of the others.

    Returns the cartesian product of 2 to 9 sequences as a list of
    Tuple2 to Tuple9, ordered with the last sequence varying fastest.
    The result is empty if any sequence is empty. Raises ValueError for
    fewer than 2 or more than 9 sequences.
    """
    _check_width(len(args), "sequences")
    tuple_type = _TUPLE_TYPES[len(args)]
    return [tuple_type(*items) for items in product(*args)]


def cross_join_by(project: Callable[..., Any], *args: Iterable[Any]) -> list[Any]:
    """Combine every item of each sequence with every item of the others.

    ``project`` receives one item from each of the 2 to 9 sequences and
    builds each output value. The result is empty if any sequence is
    empty. Raises ValueError for fewer than 2 or more than 9 sequences.
    """
    _check_width(len(args), "sequences")
    return [project(*items) for items in product(*args)]