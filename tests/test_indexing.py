import logging
import pytest
from seqops import arange, insert, remove, remove_func, remove_index


def test_arange():
    assert arange(1, 4) == [1, 2, 3]
    assert arange(1, 1) == []
    assert arange(1, -1) == []
    assert arange(-3, 0) == [-3, -2, -1]

    with pytest.raises(TypeError):
        arange(0, 2.5)


def test_insert(caplog):
    arr = [1, 2, 3]

    assert insert(arr, 0, 9) == [9, 1, 2, 3]
    assert insert(arr, 1, 9) == [1, 9, 2, 3]
    assert insert(arr, 3, 9) == [1, 2, 3, 9]
    assert arr == [1, 2, 3]
    assert insert([], 0, 9) == [9]
    assert insert(None, 0, 9) == [9]

    with caplog.at_level(logging.DEBUG, logger="seqops.indexing"):
        assert insert(arr, 10, 9) == [1, 2, 3, 9]
    assert "appending" in caplog.text

    with pytest.raises(IndexError):
        insert(arr, -1, 9)
    with pytest.raises(TypeError):
        insert(arr, 'a', 9)


def test_remove():
    arr = [1, 2, 3, 2]

    assert remove(arr, 2) == [1, 3, 2]
    assert remove(arr, 1) == [2, 3, 2]
    assert arr == [1, 2, 3, 2]

    assert remove([1, 2, 3], 4) == [1, 2, 3]
    assert remove(arr, 4) is arr
    assert remove(None, 4) is None


def test_remove_func():
    arr = [1, 2, 3, 4]

    assert remove_func(lambda x: x % 2 == 0, arr) == [1, 3, 4]
    assert remove_func(lambda x: x > 10, arr) is arr


def test_remove_index():
    arr = ['a', 'b', 'c']

    assert remove_index(arr, 0) == ['b', 'c']
    assert remove_index(arr, 2) == ['a', 'b']
    assert remove_index(('a', 'b'), 1) == ['a']
    assert remove_index(arr, 3) is arr
    assert remove_index(arr, -1) is arr
    assert arr == ['a', 'b', 'c']

    with pytest.raises(TypeError):
        remove_index(arr, None)
