import time

import pytest

from corekit.merge import merge


def _slow(values, delay):
    for v in values:
        yield v
        time.sleep(delay)


def _broken():
    yield 1
    raise RuntimeError("source failed")


def test_merge_collects_all_values():
    result = sorted(merge(range(1, 4), range(4, 7), range(7, 10)))
    assert result == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_merge_of_empty_sources_is_empty():
    assert list(merge([], [])) == []


def test_merge_without_sources_is_empty():
    assert list(merge()) == []


def test_merge_keeps_order_within_each_source():
    first = [1, 2, 3, 4]
    second = [10, 11, 12]
    result = list(merge(_slow(first, 0.01), _slow(second, 0.015)))

    assert sorted(result) == sorted(first + second)
    assert [v for v in result if v < 10] == first
    assert [v for v in result if v >= 10] == second


def test_merge_keeps_duplicates():
    result = sorted(merge([1, 1], [1, 2]))
    assert result == [1, 1, 1, 2]


def test_merge_reraises_source_error():
    with pytest.raises(RuntimeError, match="source failed"):
        list(merge(_broken(), [2, 3]))