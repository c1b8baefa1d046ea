from random import randint
from seqops import group, group_map, keys, values, equals_any_order


def test_group():
    groups = group(lambda x: x % 2, [1, 2, 3])
    assert groups == {0: [2], 1: [1, 3]}

    groups = group(lambda x: x % 2 == 0, [1, 2, 3])
    assert groups == {True: [2], False: [1, 3]}

    arr = [randint(0, 100) for _ in range(200)]
    groups = group(lambda x: x % 7, arr)
    assert sum(len(g) for g in groups.values()) == len(arr)
    for k, g in groups.items():
        assert len(g) > 0
        assert g == [x for x in arr if x % 7 == k]

    assert group(lambda x: x, []) == {}
    assert group(lambda x: x, None) == {}


def test_group_map():
    groups = group_map(len, str.upper, ["a", "bb", "c", "dd", "eee"])
    assert groups == {1: ['A', 'C'], 2: ['BB', 'DD'], 3: ['EEE']}

    assert group_map(len, str.upper, []) == {}


def test_keys_values():
    mapping = {i: str(i) for i in range(50)}

    assert equals_any_order(keys(mapping), list(range(50)))
    assert equals_any_order(values(mapping), [str(i) for i in range(50)])
    assert len(keys(mapping)) == len(values(mapping)) == len(mapping)
    assert sorted(keys(mapping)) == sorted(keys(mapping))

    assert equals_any_order(values({'a': 1, 'b': 1}), [1, 1])

    assert keys({}) == []
    assert values({}) == []
    assert keys(None) == []
    assert values(None) == []
