"""Helpers for zero values, optional values and coalescing."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping


def _is_zero(value: Any) -> bool:
    """Tell whether a value is the zero value of its kind.

    Scalars are zero when they equal their type's default; dataclass
    instances and tuples are zero when every member is; other objects,
    including lists and dicts, are only zero when they are None.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes)):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            _is_zero(getattr(value, field.name)) for field in dataclasses.fields(value)
        )
    if isinstance(value, tuple):
        return all(_is_zero(item) for item in value)
    return False


def is_nil(x: Any) -> bool:
    """Return True if the value is None."""
    return x is None


def is_not_nil(x: Any) -> bool:
    """Return True if the value is not None."""
    return not is_nil(x)


def zero_value(kind: Any) -> Any:
    """Return the default value of a type: 0, "", [], {} and so on."""
    if kind is None or kind is type(None):
        return None
    return kind()


def empty_to_none(x: Any) -> Any:
    """Return the value, or None when it is a zero value."""
    return None if _is_zero(x) else x


def value_or(x: Any, fallback: Any) -> Any:
    """Return the value, or the fallback when it is None."""
    return fallback if x is None else x


def values_or(collection: Iterable[Any], fallback: Any) -> list[Any]:
    """Return the values, with None replaced by the fallback."""
    return [fallback if item is None else item for item in collection]


def to_any_list(collection: Iterable[Any]) -> list[Any]:
    """Return the elements as a new list."""
    return list(collection)


def from_any_list(values: Iterable[Any], kind: type) -> list[Any]:
    """Return the values as a list, checking each one is of the given type.

    Raises TypeError if any value is not an instance of ``kind``.
    """
    result = list(values)
    for position, item in enumerate(result):
        if not isinstance(item, kind):
            raise TypeError(
                f"element {position} is {type(item).__name__}, "
                f"expected {kind.__name__}"
            )
    return result


def is_empty(value: Any) -> bool:
    """Return True if the value is a zero value."""
    return _is_zero(value)


def is_not_empty(value: Any) -> bool:
    """Return True if the value is not a zero value."""
    return not _is_zero(value)


def coalesce(*args: Any) -> Any:
    """Return the first argument that is not a zero value.

    Raises ValueError when every argument is a zero value.
    """
    for value in args:
        if not _is_zero(value):
            return value
    raise ValueError("no non-empty value to coalesce")


def coalesce_or_empty(*args: Any) -> Any:
    """Return the first argument that is not a zero value, else a zero value."""
    for value in args:
        if not _is_zero(value):
            return value
    return args[0] if args else None


def coalesce_list(*args: list[Any] | None) -> list[Any]:
    """Return the first non-empty list.

    Raises ValueError when every argument is None or empty.
    """
    for value in args:
        if value:
            return value
    raise ValueError("no non-empty list to coalesce")


def coalesce_list_or_empty(*args: list[Any] | None) -> list[Any]:
    """Return the first non-empty list, or a new empty list."""
    for value in args:
        if value:
            return value
    return []


def coalesce_map(*args: Mapping[Any, Any] | None) -> Mapping[Any, Any]:
    """Return the first non-empty mapping.

    Raises ValueError when every argument is None or empty.
    """
    for value in args:
        if value:
            return value
    raise ValueError("no non-empty mapping to coalesce")


def coalesce_map_or_empty(*args: Mapping[Any, Any] | None) -> Mapping[Any, Any]:
    """Return the first non-empty mapping, or a new empty dict."""
    for value in args:
        if value:
            return value
    return {}