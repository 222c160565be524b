"""Key/value entries and fixed-size tuples with named positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """A key/value pair."""

    key: K
    value: V


class _TupleBase:
    """Shared behaviour for the fixed-size tuple classes."""

    __slots__ = ()

    def unpack(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return iter(self.unpack())

    def __len__(self) -> int:
        return len(self.unpack())


@dataclass(frozen=True)
class Tuple2(_TupleBase):
    """A group of 2 elements (pair)."""

    a: Any
    b: Any

    def unpack(self) -> tuple[Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b)


@dataclass(frozen=True)
class Tuple3(_TupleBase):
    """A group of 3 elements."""

    a: Any
    b: Any
    c: Any

    def unpack(self) -> tuple[Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class Tuple4(_TupleBase):
    """A group of 4 elements."""

    a: Any
    b: Any
    c: Any
    d: Any

    def unpack(self) -> tuple[Any, Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class Tuple5(_TupleBase):
    """A group of 5 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b, self.c, self.d, self.e)


@dataclass(frozen=True)
class Tuple6(_TupleBase):
    """A group of 6 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b, self.c, self.d, self.e, self.f)


@dataclass(frozen=True)
class Tuple7(_TupleBase):
    """A group of 7 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any
    g: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b, self.c, self.d, self.e, self.f, self.g)


@dataclass(frozen=True)
class Tuple8(_TupleBase):
    """A group of 8 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any
    g: Any
    h: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h)


@dataclass(frozen=True)
class Tuple9(_TupleBase):
    """A group of 9 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any
    g: Any
    h: Any
    i: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any, Any, Any, Any]:
        """Return the values contained in the tuple."""
        return (
            self.a,
            self.b,
            self.c,
            self.d,
            self.e,
            self.f,
            self.g,
            self.h,
            self.i,
        )