from random import random, randint
import pytest
from seqops import concat, flatten, flat_map, chunk, szip, Zipped, clone, \
    reverse_copy, no_nil, dedup


def test_concat():
    arrs = [[random() for _ in range(randint(0, 20))] for _ in range(5)]
    assert concat(*arrs) == [x for a in arrs for x in a]

    assert concat([1, 2], (3,), [], [4]) == [1, 2, 3, 4]
    assert concat() == []
    assert concat(None, [1]) == [1]

    a = [1, 2]
    result = concat(a)
    assert result == a and result is not a


def test_flatten():
    arrs = [[randint(0, 9) for _ in range(randint(0, 10))] for _ in range(10)]
    assert flatten(arrs) == [x for a in arrs for x in a]
    assert len(flatten(arrs)) == sum(map(len, arrs))

    assert flatten([[], []]) == []
    assert flatten([]) == []
    assert flatten(None) is None

    assert flat_map(lambda x: [x] * x, [1, 2, 3]) == [1, 2, 2, 3, 3, 3]
    assert flat_map(lambda x: [], [1, 2, 3]) == []
    assert flat_map(lambda x: [x], None) is None


def test_chunk():
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]
    assert chunk([1, 2], 5) == [[1, 2]]
    assert chunk([], 3) == []

    arr = list(range(137))
    for size in (1, 5, 137, 200):
        chunks = chunk(arr, size)
        assert len(chunks) == (len(arr) + size - 1) // size
        assert all(len(c) == size for c in chunks[:-1])
        assert [x for c in chunks for x in c] == arr

    with pytest.raises(ValueError):
        chunk(arr, 0)
    with pytest.raises(ValueError):
        chunk(arr, -1)
    with pytest.raises(TypeError):
        chunk(arr, 2.)


def test_szip():
    zipped = szip([1, 2, 3], [-1, -2])
    assert zipped == [(1, -1), (2, -2)]
    assert zipped[0].a == 1 and zipped[0].b == -1
    assert zipped[1] == Zipped(a=2, b=-2)

    assert szip([], [1]) == []
    assert szip(['a'], ['b', 'c']) == [Zipped('a', 'b')]


def test_clone():
    arr = [[1], [2]]
    copy = clone(arr)
    assert copy == arr
    assert copy is not arr
    assert copy[0] is arr[0]

    copy[0] = [3]
    assert arr[0] == [1]


def test_reverse_copy():
    arr = [random() for _ in range(50)]
    original = list(arr)

    assert reverse_copy(arr) == arr[::-1]
    assert reverse_copy(reverse_copy(arr)) == arr
    assert arr == original
    assert reverse_copy([]) == []


def test_no_nil():
    assert no_nil(None) == []

    empty = []
    assert no_nil(empty) is empty
    arr = [1]
    assert no_nil(arr) is arr


def test_dedup():
    assert dedup([3, 1, 3, 2, 1]) == [3, 1, 2]
    assert dedup([1, 2, 3]) == [1, 2, 3]
    assert dedup([]) == []
    assert dedup(None) is None

    arr = [randint(0, 20) for _ in range(200)]
    result = dedup(arr)
    assert len(set(result)) == len(result)
    assert sorted(result, key=arr.index) == result
    assert set(result) == set(arr)
