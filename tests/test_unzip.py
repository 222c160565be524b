from dataclasses import dataclass

import pytest

from lotools.tuples import make_tuple
from lotools.types import Tuple2
from lotools.unzip import unzip, unzip_by


@dataclass(frozen=True)
class Foo:
    bar: str


FOO = Foo(bar="bar")

EXAMPLE_VALUES = ["hello", 2, True, FOO, 4.2, "plop", False, 42, "hello world"]


def test_unzip2():
    r1, r2 = unzip([Tuple2(a="a", b=1), Tuple2(a="b", b=2)], 2)
    assert r1 == ["a", "b"]
    assert r2 == [1, 2]


@pytest.mark.parametrize("width", range(2, 10))
def test_unzip_examples(width):
    values = EXAMPLE_VALUES[:width]
    result = unzip([make_tuple(*values)], width)
    assert len(result) == width
    assert list(result) == [[v] for v in values]


def test_unzip_nine_columns_several_rows():
    rows = [
        make_tuple("a", 1, 10, True, 0.1, 0.01, 1, 1, 1),
        make_tuple("b", 2, 11, True, 0.2, 0.02, 2, 2, 2),
    ]
    result = unzip(rows, 9)
    assert result[0] == ["a", "b"]
    assert result[2] == [10, 11]
    assert result[5] == [0.01, 0.02]
    assert result[8] == [1, 2]


def test_unzip_accepts_plain_tuples():
    a, b, c = unzip([("x", 1, True), ("y", 2, False)], 3)
    assert a == ["x", "y"]
    assert b == [1, 2]
    assert c == [True, False]


def test_unzip_empty_gives_empty_lists():
    assert unzip([], 3) == ([], [], [])


def test_unzip_round_trips_zip():
    first = ["a", "b", "c"]
    second = [1, 2, 3]
    rows = [make_tuple(x, y) for x, y in zip(first, second)]
    assert unzip(rows, 2) == (first, second)


@pytest.mark.parametrize("width", [0, 1, 10])
def test_unzip_rejects_bad_width(width):
    with pytest.raises(ValueError):
        unzip([], width)


def test_unzip_rejects_mismatched_row():
    with pytest.raises(ValueError):
        unzip([Tuple2(a="a", b=1), ("b", 2, 3)], 2)


def test_unzip_by():
    items = [Tuple2(a="a", b=1), Tuple2(a="b", b=2)]
    r1, r2 = unzip_by(items, lambda t: (t.a + t.a, t.b + t.b), 2)
    assert r1 == ["aa", "bb"]
    assert r2 == [2, 4]


def test_unzip_by_three_columns():
    words, lengths, uppers = unzip_by(
        ["foo", "quux"], lambda s: (s, len(s), s.upper()), 3
    )
    assert words == ["foo", "quux"]
    assert lengths == [3, 4]
    assert uppers == ["FOO", "QUUX"]


def test_unzip_by_empty():
    assert unzip_by([], lambda x: (x, x), 2) == ([], [])


def test_unzip_by_rejects_wrong_result_size():
    with pytest.raises(ValueError):
        unzip_by([1, 2], lambda x: (x, x, x), 2)


def test_unzip_by_rejects_bad_width():
    with pytest.raises(ValueError):
        unzip_by([1], lambda x: (x,), 1)