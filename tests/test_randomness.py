import random
import numpy as np
from seqops import shuffle, random_pick, seed, get_rng, equals_any_order


def test_shuffle():
    arr = list(range(100))

    for _ in range(10):
        shuffled = list(arr)
        shuffle(shuffled)
        assert equals_any_order(shuffled, arr)

    arr = np.arange(20)
    shuffle(arr)
    assert sorted(arr.tolist()) == list(range(20))

    empty = []
    shuffle(empty)
    assert empty == []


def test_shuffle_distribution():
    counts = {}
    rng = random.Random(0)
    for _ in range(6000):
        arr = [1, 2, 3]
        shuffle(arr, rng=rng)
        counts[tuple(arr)] = counts.get(tuple(arr), 0) + 1

    assert len(counts) == 6
    assert all(800 < c < 1200 for c in counts.values())


def test_seed():
    seed(42)
    arr1 = list(range(50))
    shuffle(arr1)

    seed(42)
    arr2 = list(range(50))
    shuffle(arr2)

    assert arr1 == arr2
    assert isinstance(get_rng(), random.Random)

    arr3 = list(range(50))
    shuffle(arr3, rng=random.Random(42))
    assert arr3 == arr1


def test_random_pick():
    assert random_pick([]) == (None, [])
    assert random_pick(None) == (None, [])
    assert random_pick([], default=0) == (0, [])

    arr = [1, 2, 3, 4, 5]
    picked = set()
    for _ in range(200):
        value, rest = random_pick(arr)
        picked.add(value)
        assert len(rest) == len(arr) - 1
        assert equals_any_order(rest + [value], arr)

    assert arr == [1, 2, 3, 4, 5]
    assert picked == set(arr)

    value, rest = random_pick([7])
    assert (value, rest) == (7, [])


def test_shuffle_absent_sequence():
    assert shuffle(None) is None
    assert shuffle(None, rng=random.Random(0)) is None
