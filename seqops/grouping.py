"""Conversions between sequences and dictionaries.

Dictionary order is not part of any contract here: do not rely on the
order of :func:`keys`, :func:`values` or of the groups.
"""

from .errors import Callback
from .utils import as_sequence


def group(key, sequence):
    """Partition items by the value of `key`.

    Return:
        Dict[Any, list]: For each distinct key, the items that produced
        it in their original relative order. Keys are never associated
        with an empty list.

    Example:

        >>> group(lambda x: x % 2 == 0, [1, 2, 3])
        {False: [1, 3], True: [2]}
    """
    return _group(key, lambda v: v, sequence, "group")


def group_map(key, f, sequence):
    """Partition items by the value of `key` and transform them with `f`.

    Example:

        >>> group_map(len, str.upper, ["a", "bb", "c"])
        {1: ['A', 'C'], 2: ['BB']}
    """
    return _group(key, f, sequence, "group_map")


def _group(key, f, sequence, operation):
    key = Callback(key, operation)
    f = Callback(f, operation)

    groups = {}
    for i, v in enumerate(as_sequence(sequence)):
        groups.setdefault(key(i, v), []).append(f(i, v))

    return groups


def keys(mapping):
    """Return the keys of a dictionary as a list, in no particular order."""
    if mapping is None:
        return []

    return list(mapping.keys())


def values(mapping):
    """Return the values of a dictionary as a list, in no particular order."""
    if mapping is None:
        return []

    return list(mapping.values())
